from datetime import date, datetime, timezone as dt_timezone
from decimal import Decimal

from django.contrib.auth import get_user_model
from django.test import TestCase
from rest_framework import status
from rest_framework.exceptions import NotFound, ValidationError
from rest_framework.test import APITestCase

from accounts.models import SystemRole
from accounts.rbac import assign_roles
from employees.models import Employee

from payroll.models import EmployeeSigningBonus, PayrollRun, SigningBonus
from payroll.services import (
    approve_employee_signing_bonus,
    approve_signing_bonus_policy,
    create_employee_signing_bonus,
    create_signing_bonus_policy,
    find_draft_payroll_run_in_period,
    payroll_period_end,
    reject_employee_signing_bonus,
    reject_signing_bonus_policy,
    start_payroll_initiation,
    utc_day_bounds,
)


def _employee(number="EMP-0001", status=Employee.STATUS_ACTIVE):
    return Employee.objects.create(
        employee_number=number,
        work_email=f"{number.replace('-', '')}@example.com",
        first_name="Jane",
        last_name="Doe",
        national_id=f"PENDING-{number}",
        date_of_hire=date(2025, 3, 1),
        status=status,
    )


class PeriodHelperTests(TestCase):
    def test_period_end_is_last_day_of_month(self):
        self.assertEqual(
            payroll_period_end(datetime(2025, 3, 14, 10, tzinfo=dt_timezone.utc)),
            datetime(2025, 3, 31, tzinfo=dt_timezone.utc),
        )
        self.assertEqual(
            payroll_period_end(datetime(2024, 2, 2, tzinfo=dt_timezone.utc)),
            datetime(2024, 2, 29, tzinfo=dt_timezone.utc),
        )

    def test_day_bounds_cover_whole_utc_day(self):
        start, end = utc_day_bounds(datetime(2025, 3, 31, tzinfo=dt_timezone.utc))
        self.assertEqual(start, datetime(2025, 3, 31, 0, 0, 0, tzinfo=dt_timezone.utc))
        self.assertEqual(end, datetime(2025, 3, 31, 23, 59, 59, 999000, tzinfo=dt_timezone.utc))


class SigningBonusPolicyTests(TestCase):
    def test_create_approved_policy_sets_approved_at(self):
        policy = create_signing_bonus_policy(
            position_name="Software Engineer",
            amount="1500",
            status=SigningBonus.STATUS_APPROVED,
        )
        self.assertEqual(policy.amount, Decimal("1500"))
        self.assertIsNotNone(policy.approved_at)

    def test_only_draft_policies_change_state(self):
        policy = create_signing_bonus_policy(position_name="Analyst", amount=500)
        approve_signing_bonus_policy(policy.id)
        policy.refresh_from_db()
        self.assertEqual(policy.status, SigningBonus.STATUS_APPROVED)

        with self.assertRaises(ValidationError):
            reject_signing_bonus_policy(policy.id)
        with self.assertRaises(ValidationError):
            approve_signing_bonus_policy(policy.id)

    def test_missing_policy_raises_not_found(self):
        with self.assertRaises(NotFound):
            approve_signing_bonus_policy("0b0c5d4e-7f3a-4a43-9c61-0b3c7a1f2e11")


class EmployeeSigningBonusTests(TestCase):
    def setUp(self):
        self.employee = _employee()
        self.policy = create_signing_bonus_policy(
            position_name="Software Engineer",
            amount=1500,
            status=SigningBonus.STATUS_APPROVED,
        )

    def test_given_amount_defaults_to_policy_amount(self):
        bonus = create_employee_signing_bonus(employee_id=self.employee.id, signing_bonus_id=self.policy.id)
        self.assertEqual(bonus.given_amount, Decimal("1500.00"))
        self.assertEqual(bonus.status, EmployeeSigningBonus.STATUS_PENDING)

    def test_approve_pending_bonus(self):
        bonus = create_employee_signing_bonus(employee_id=self.employee.id, signing_bonus_id=self.policy.id)
        approved = approve_employee_signing_bonus(bonus.id)
        self.assertEqual(approved.status, EmployeeSigningBonus.STATUS_APPROVED)
        self.assertIsNotNone(approved.approved_at)

    def test_approve_requires_approved_policy(self):
        draft = create_signing_bonus_policy(position_name="Intern", amount=100)
        bonus = create_employee_signing_bonus(employee_id=self.employee.id, signing_bonus_id=draft.id)
        with self.assertRaises(ValidationError):
            approve_employee_signing_bonus(bonus.id)

    def test_approve_requires_active_employee(self):
        suspended = _employee("EMP-0002", status=Employee.STATUS_SUSPENDED)
        bonus = create_employee_signing_bonus(employee_id=suspended.id, signing_bonus_id=self.policy.id)
        with self.assertRaises(ValidationError):
            approve_employee_signing_bonus(bonus.id)

    def test_reject_only_pending(self):
        bonus = create_employee_signing_bonus(employee_id=self.employee.id, signing_bonus_id=self.policy.id)
        reject_employee_signing_bonus(bonus.id)
        with self.assertRaises(ValidationError):
            approve_employee_signing_bonus(bonus.id)


class PayrollRunTests(TestCase):
    def setUp(self):
        self.manager = get_user_model().objects.create_user(email="payroll@acme.test", password="pass")
        self.period = datetime(2025, 3, 31, tzinfo=dt_timezone.utc)

    def test_find_draft_run_ignores_other_statuses(self):
        PayrollRun.objects.create(run_id="PR-2025-0002", payroll_period=self.period, status=PayrollRun.STATUS_LOCKED)
        draft = PayrollRun.objects.create(run_id="PR-2025-0003", payroll_period=self.period)
        start, end = utc_day_bounds(self.period)
        self.assertEqual(find_draft_payroll_run_in_period(start, end), draft)

    def test_find_draft_run_outside_range(self):
        PayrollRun.objects.create(run_id="PR-2025-0004", payroll_period=datetime(2025, 4, 30, tzinfo=dt_timezone.utc))
        start, end = utc_day_bounds(self.period)
        self.assertIsNone(find_draft_payroll_run_in_period(start, end))

    def test_start_initiation_resets_counters(self):
        run = PayrollRun.objects.create(
            run_id="PR-2025-0005",
            payroll_period=self.period,
            status=PayrollRun.STATUS_REJECTED,
            employees=12,
            exceptions=3,
            total_net_pay=Decimal("9800.00"),
        )
        result = start_payroll_initiation(payroll_run_id=run.id, payroll_specialist_id=self.manager.id)
        run.refresh_from_db()
        self.assertEqual(run.status, PayrollRun.STATUS_DRAFT)
        self.assertEqual(run.payment_status, PayrollRun.PAYMENT_PENDING)
        self.assertEqual(run.employees, 0)
        self.assertEqual(run.exceptions, 0)
        self.assertEqual(run.total_net_pay, Decimal("0.00"))
        self.assertEqual(run.payroll_specialist_id, self.manager.id)
        self.assertIn("Draft shell created", result["message"])

    def test_start_initiation_rejects_locked_run(self):
        run = PayrollRun.objects.create(run_id="PR-2025-0006", payroll_period=self.period, status=PayrollRun.STATUS_LOCKED)
        with self.assertRaises(ValidationError):
            start_payroll_initiation(payroll_run_id=run.id, payroll_specialist_id=self.manager.id)


class PayrollApiTests(APITestCase):
    def setUp(self):
        User = get_user_model()
        self.manager = User.objects.create_user(email="manager@acme.test", password="pass")
        assign_roles(self.manager, [SystemRole.PAYROLL_MANAGER])
        self.outsider = User.objects.create_user(email="outsider@acme.test", password="pass")

    def test_policy_approve_endpoint(self):
        policy = create_signing_bonus_policy(position_name="Analyst", amount=250)
        self.client.force_authenticate(self.manager)
        resp = self.client.post(f"/api/payroll/signing-bonuses/{policy.id}/approve/")
        self.assertEqual(resp.status_code, status.HTTP_200_OK)
        self.assertEqual(resp.data["data"]["status"], SigningBonus.STATUS_APPROVED)

    def test_user_without_payroll_role_is_forbidden(self):
        self.client.force_authenticate(self.outsider)
        resp = self.client.get("/api/payroll/runs/")
        self.assertEqual(resp.status_code, status.HTTP_403_FORBIDDEN)

    def test_start_initiation_defaults_to_requesting_user(self):
        run = PayrollRun.objects.create(run_id="PR-2025-0007", payroll_period=datetime(2025, 3, 31, tzinfo=dt_timezone.utc))
        self.client.force_authenticate(self.manager)
        resp = self.client.post(f"/api/payroll/runs/{run.id}/start-initiation/", {}, format="json")
        self.assertEqual(resp.status_code, status.HTTP_200_OK)
        run.refresh_from_db()
        self.assertEqual(run.payroll_specialist_id, self.manager.id)
