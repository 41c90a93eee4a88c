"""
Bridges a completed contract into the accounts, payroll and notifications modules.
Runs inside the contract update request: once both parties have signed, the new
hire gets an account, a signing bonus and a place in the current payroll run.
"""

import copy
import logging
import secrets
import string
from decimal import Decimal

from django.conf import settings
from django.utils import timezone
from rest_framework.exceptions import NotFound


logger = logging.getLogger(__name__)

DEFAULT_EMPLOYEE_NUMBER_PREFIX = "EMP"
DEFAULT_EMPLOYEE_NUMBER_DIGITS = 4
DEFAULT_WORK_EMAIL_DOMAIN = "gmail.com"
DEFAULT_INITIAL_PASSWORD = "password@resetThis"

PLACEHOLDER_NAME = "--"


def update_contract(contract_id, changes):
    """Apply ``changes`` to the contract and run the signing side effects.

    The merge is saved before anything else, so errors raised further down
    (missing role holders, a failed registration) leave it in place. Returns
    the updated contract.
    """
    from contracts.notifications import notify_signature_events
    from contracts.services import apply_contract_changes, get_contract

    from .models import Offer

    contract = get_contract(contract_id)
    before = copy.copy(contract)
    contract = apply_contract_changes(contract, changes)

    offer = Offer.objects.filter(id=contract.offer_id).first()
    if not offer:
        raise NotFound("Offer not found")

    notify_signature_events(before, contract, offer)

    if contract.is_fully_executed and not before.is_fully_executed:
        logger.info("Onboarding: contract %s fully executed, provisioning new hire.", contract.id)
        complete_hire(contract, offer)

    return contract


def complete_hire(contract, offer):
    from accounts.models import SystemRole
    from accounts.rbac import resolve_role_holder

    if not _mark_application_hired(offer):
        return None

    payroll_manager = resolve_role_holder(SystemRole.PAYROLL_MANAGER)
    system_admin = resolve_role_holder(SystemRole.SYSTEM_ADMIN)

    _request_provisioning(offer.candidate_id, payroll_manager, system_admin)

    try:
        employee_id = _provision_employee_account(offer)
        _provision_signing_bonus(contract, offer, employee_id)
    except Exception:
        logger.exception("Onboarding: account provisioning failed for offer %s.", offer.id)
        raise

    _initiate_payroll_run(contract, payroll_manager)


def _mark_application_hired(offer):
    from .models import Application

    application = Application.objects.filter(id=offer.application_id).first() if offer.application_id else None
    if not application:
        logger.warning("Onboarding: no application found for offer %s, skipping provisioning.", offer.id)
        return None

    application.status = Application.STATUS_HIRED
    application.save(update_fields=["status", "updated_at"])
    return application


def _request_provisioning(candidate_id, payroll_manager, system_admin):
    from notifications.models import Notification
    from notifications.services import send_notification

    send_notification(
        to=payroll_manager,
        type="Payroll provisioning required",
        message=f"Require payroll provisioning for new hire {candidate_id}",
        level=Notification.TYPE_ACTION,
    )
    send_notification(
        to=system_admin,
        type="System access provisioning required",
        message=f"Require system access provisioning for new hire {candidate_id}",
        level=Notification.TYPE_ACTION,
    )
    send_notification(
        to=system_admin,
        type="Email access provisioning required",
        message=f"Require email access provisioning for new hire {candidate_id}",
        level=Notification.TYPE_ACTION,
    )
    send_notification(
        to=system_admin,
        type="New Hire Equipment Setup Required",
        message=(
            f"New hire equipment and workspace setup needed for employee ID: {candidate_id}. "
            "Please reserve: desk, laptop, access card, and other equipment."
        ),
        level=Notification.TYPE_ACTION,
    )


def generate_employee_number():
    prefix = getattr(settings, "ONBOARDING_EMPLOYEE_NUMBER_PREFIX", DEFAULT_EMPLOYEE_NUMBER_PREFIX)
    digits = getattr(settings, "ONBOARDING_EMPLOYEE_NUMBER_DIGITS", DEFAULT_EMPLOYEE_NUMBER_DIGITS)
    suffix = "".join(secrets.choice(string.digits) for _ in range(digits))
    return f"{prefix}-{suffix}"


def build_registration_payload(employee_number):
    domain = getattr(settings, "ONBOARDING_WORK_EMAIL_DOMAIN", DEFAULT_WORK_EMAIL_DOMAIN)
    return {
        "employee_number": employee_number,
        # EMP-4821 -> EMP4821@<domain>
        "work_email": f"{employee_number.replace('-', '')}@{domain}",
        "password": getattr(settings, "ONBOARDING_INITIAL_PASSWORD", DEFAULT_INITIAL_PASSWORD),
        "first_name": PLACEHOLDER_NAME,
        "last_name": PLACEHOLDER_NAME,
        "national_id": f"PENDING-{employee_number}",
        "date_of_hire": timezone.now(),
    }


def _provision_employee_account(offer):
    """Register the hire's employee account and send the credentials to the candidate."""
    from accounts.services import register_employee
    from notifications.services import send_notification

    payload = build_registration_payload(generate_employee_number())
    employee_id = register_employee(payload)

    send_notification(
        to=offer.candidate_id,
        type="Employee Credentials",
        message=(
            "Your employee account has been created. "
            f"Login credentials - Email: {payload['work_email']}, "
            f"Password: {payload['password']}, "
            f"Employee Number: {payload['employee_number']}. "
            "Please reset your password after first login and add your actual national id."
        ),
    )
    logger.info("Onboarding: employee account provisioned: %s", payload["employee_number"])
    return employee_id


def _provision_signing_bonus(contract, offer, employee_id):
    amount = contract.signing_bonus
    if amount is None or Decimal(str(amount)) <= 0:
        return None

    from notifications.models import Notification
    from notifications.services import send_notification
    from payroll.models import EmployeeSigningBonus, SigningBonus
    from payroll.services import (
        approve_employee_signing_bonus,
        create_employee_signing_bonus,
        create_signing_bonus_policy,
    )

    try:
        policy = create_signing_bonus_policy(
            position_name=contract.role,
            amount=amount,
            status=SigningBonus.STATUS_APPROVED,
        )
        if not policy:
            raise RuntimeError("Failed to create signing bonus template")

        bonus = create_employee_signing_bonus(
            employee_id=employee_id,
            signing_bonus_id=policy.id,
            status=EmployeeSigningBonus.STATUS_PENDING,
        )
        bonus = approve_employee_signing_bonus(bonus.id)
        logger.info("Onboarding: signing bonus %s approved for employee %s.", bonus.id, employee_id)
        return bonus
    except Exception as exc:
        logger.exception("Onboarding: signing bonus processing failed for employee %s.", employee_id)
        send_notification(
            to=offer.hr_employee_id,
            type="Signing Bonus Processing Failed",
            message=(
                f"Failed to process signing bonus for employee {employee_id}. "
                f"Position: {contract.role}, Amount: ${amount}. "
                f"Error: {exc}. Please process manually."
            ),
            level=Notification.TYPE_ALERT,
        )
        return None


def _initiate_payroll_run(contract, payroll_manager):
    from payroll.services import (
        find_draft_payroll_run_in_period,
        payroll_period_end,
        start_payroll_initiation,
        utc_day_bounds,
    )

    try:
        signing_date = contract.employer_signed_at or timezone.now()
        start, end = utc_day_bounds(payroll_period_end(signing_date))

        run = find_draft_payroll_run_in_period(start, end)
        if not run:
            logger.warning("Onboarding: no draft payroll run found for period ending %s.", start.date())
            return None

        result = start_payroll_initiation(
            payroll_run_id=run.id,
            payroll_specialist_id=payroll_manager.id,
        )
        logger.info("Onboarding: payroll run %s initiated: %s", run.run_id, result["message"])
        return result
    except Exception:
        logger.exception("Onboarding: payroll run initiation failed for contract %s.", contract.id)
        return None
