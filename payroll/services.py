import calendar
import logging
from datetime import datetime, timezone as dt_timezone
from decimal import Decimal
from typing import Optional, Tuple

from django.db import transaction
from django.utils import timezone
from rest_framework.exceptions import NotFound, ValidationError

from employees.models import Employee

from .models import EmployeeSigningBonus, PayrollRun, SigningBonus

logger = logging.getLogger(__name__)

STARTABLE_RUN_STATUSES = {
    PayrollRun.STATUS_DRAFT,
    PayrollRun.STATUS_UNDER_REVIEW,
    PayrollRun.STATUS_REJECTED,
}


def _to_decimal(value, default=Decimal("0.00")) -> Decimal:
    if value is None:
        return default
    try:
        return Decimal(str(value))
    except Exception:
        return default


def payroll_period_end(moment: datetime) -> datetime:
    """Last calendar day of ``moment``'s month, at midnight UTC."""
    if timezone.is_aware(moment):
        moment = moment.astimezone(dt_timezone.utc)
    last_day = calendar.monthrange(moment.year, moment.month)[1]
    return datetime(moment.year, moment.month, last_day, tzinfo=dt_timezone.utc)


def utc_day_bounds(moment: datetime) -> Tuple[datetime, datetime]:
    """Return ``[00:00:00.000, 23:59:59.999]`` UTC around ``moment``'s day."""
    if timezone.is_aware(moment):
        moment = moment.astimezone(dt_timezone.utc)
    start = datetime(moment.year, moment.month, moment.day, tzinfo=dt_timezone.utc)
    end = start.replace(hour=23, minute=59, second=59, microsecond=999000)
    return start, end


# ---------------------------------------------------------------------------
# Payroll configuration: signing bonus policies
# ---------------------------------------------------------------------------

def create_signing_bonus_policy(*, position_name: str, amount, status: str = SigningBonus.STATUS_DRAFT) -> SigningBonus:
    policy = SigningBonus.objects.create(
        position_name=position_name,
        amount=_to_decimal(amount),
        status=status,
        approved_at=timezone.now() if status == SigningBonus.STATUS_APPROVED else None,
    )
    logger.info("Signing bonus policy %s created for %s (%s)", policy.id, position_name, status)
    return policy


def _get_policy(policy_id) -> SigningBonus:
    policy = SigningBonus.objects.filter(id=policy_id).first()
    if not policy:
        raise NotFound("Signing bonus not found.")
    return policy


def approve_signing_bonus_policy(policy_id) -> SigningBonus:
    policy = _get_policy(policy_id)
    if policy.status != SigningBonus.STATUS_DRAFT:
        raise ValidationError({"detail": "Only draft signing bonuses can be approved."})
    policy.status = SigningBonus.STATUS_APPROVED
    policy.approved_at = timezone.now()
    policy.save(update_fields=["status", "approved_at", "updated_at"])
    return policy


def reject_signing_bonus_policy(policy_id) -> SigningBonus:
    policy = _get_policy(policy_id)
    if policy.status != SigningBonus.STATUS_DRAFT:
        raise ValidationError({"detail": "Only draft signing bonuses can be rejected."})
    policy.status = SigningBonus.STATUS_REJECTED
    policy.save(update_fields=["status", "updated_at"])
    return policy


# ---------------------------------------------------------------------------
# Payroll execution: employee signing bonuses
# ---------------------------------------------------------------------------

def create_employee_signing_bonus(
    *,
    employee_id,
    signing_bonus_id,
    status: str = EmployeeSigningBonus.STATUS_PENDING,
    given_amount=None,
) -> EmployeeSigningBonus:
    employee = Employee.objects.filter(id=employee_id).first()
    if not employee:
        raise NotFound("Employee not found.")
    policy = _get_policy(signing_bonus_id)
    return EmployeeSigningBonus.objects.create(
        employee=employee,
        signing_bonus=policy,
        given_amount=_to_decimal(given_amount, default=policy.amount),
        status=status,
    )


def _get_employee_bonus(bonus_id) -> EmployeeSigningBonus:
    bonus = (
        EmployeeSigningBonus.objects.select_related("signing_bonus", "employee")
        .filter(id=bonus_id)
        .first()
    )
    if not bonus:
        raise NotFound("Employee signing bonus not found.")
    return bonus


def approve_employee_signing_bonus(bonus_id) -> EmployeeSigningBonus:
    """Approve a pending employee bonus whose policy is approved and whose employee is active."""
    bonus = _get_employee_bonus(bonus_id)

    if bonus.signing_bonus.status != SigningBonus.STATUS_APPROVED:
        raise ValidationError(
            {"detail": "Cannot approve employee bonus: signing bonus template is not approved."}
        )
    if bonus.status != EmployeeSigningBonus.STATUS_PENDING:
        raise ValidationError({"detail": "Only pending bonuses can be approved."})
    if not bonus.employee.is_active:
        raise ValidationError({"detail": "Employee is not active."})

    bonus.status = EmployeeSigningBonus.STATUS_APPROVED
    bonus.approved_at = timezone.now()
    bonus.save(update_fields=["status", "approved_at", "updated_at"])
    return bonus


def reject_employee_signing_bonus(bonus_id) -> EmployeeSigningBonus:
    bonus = _get_employee_bonus(bonus_id)
    if bonus.status != EmployeeSigningBonus.STATUS_PENDING:
        raise ValidationError({"detail": "Only pending bonuses can be rejected."})
    bonus.status = EmployeeSigningBonus.STATUS_REJECTED
    bonus.save(update_fields=["status", "updated_at"])
    return bonus


# ---------------------------------------------------------------------------
# Payroll execution: runs
# ---------------------------------------------------------------------------

def find_draft_payroll_run_in_period(start: datetime, end: datetime) -> Optional[PayrollRun]:
    return (
        PayrollRun.objects.filter(
            payroll_period__gte=start,
            payroll_period__lte=end,
            status=PayrollRun.STATUS_DRAFT,
        )
        .order_by("created_at")
        .first()
    )


def start_payroll_initiation(*, payroll_run_id, payroll_specialist_id) -> dict:
    """Open a draft shell for the run and record who initiated it."""
    run = PayrollRun.objects.filter(id=payroll_run_id).first()
    if not run:
        raise ValidationError({"detail": "Payroll run not found."})

    if run.status not in STARTABLE_RUN_STATUSES:
        raise ValidationError(
            {"detail": "Cannot start payroll initiation. Status must be draft/under review."}
        )

    with transaction.atomic():
        run.employees = 0
        run.total_net_pay = Decimal("0.00")
        run.exceptions = 0
        run.payroll_specialist_id = payroll_specialist_id
        run.status = PayrollRun.STATUS_DRAFT
        run.payment_status = PayrollRun.PAYMENT_PENDING
        run.save()

    logger.info("Payroll run %s initiated by user %s", run.run_id, payroll_specialist_id)
    return {
        "message": "Payroll initiation started. Draft shell created. Ready for Phase 1.1.",
        "payroll_run": run,
    }
