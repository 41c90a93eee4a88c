from datetime import datetime, timezone as dt_timezone
from decimal import Decimal

from django.contrib.auth import get_user_model
from django.test import TestCase
from rest_framework import status
from rest_framework.exceptions import NotFound
from rest_framework.test import APITestCase

from accounts.models import SystemRole
from accounts.rbac import assign_roles
from employees.models import Employee
from notifications.models import Notification
from recruitment.models import Application, Offer

from contracts.models import Contract
from contracts.services import apply_contract_changes, get_contract, get_contract_by_offer

SIGNED_AT = datetime(2025, 6, 2, 12, tzinfo=dt_timezone.utc)


def _offer(candidate, hr=None, application=None):
    return Offer.objects.create(
        application=application,
        candidate=candidate,
        hr_employee=hr,
        role="Accountant",
        gross_salary=Decimal("4200.00"),
    )


class ContractStateTests(TestCase):
    def setUp(self):
        candidate = get_user_model().objects.create_user(email="c@example.com", password="pass")
        self.offer = _offer(candidate)

    def test_signature_state_projection(self):
        contract = Contract(offer=self.offer)
        self.assertEqual(contract.signature_state, Contract.STATE_NEITHER_SIGNED)

        contract.employee_signature_url = "sig.png"
        self.assertEqual(contract.signature_state, Contract.STATE_EMPLOYEE_SIGNED)

        contract.employee_signature_url = None
        contract.employer_signed_at = SIGNED_AT
        self.assertEqual(contract.signature_state, Contract.STATE_EMPLOYER_SIGNED)

        contract.employee_signature_url = "sig.png"
        self.assertTrue(contract.is_fully_executed)
        self.assertEqual(contract.signature_state, Contract.STATE_FULLY_EXECUTED)

    def test_employee_timestamp_alone_is_not_a_signature_artifact(self):
        contract = Contract(offer=self.offer, employee_signed_at=SIGNED_AT, employer_signed_at=SIGNED_AT)
        self.assertFalse(contract.is_fully_executed)

    def test_lookups_raise_not_found(self):
        with self.assertRaises(NotFound):
            get_contract("5d0e9f8a-3b2c-4d1e-8f7a-6b5c4d3e2f10")
        with self.assertRaises(NotFound):
            get_contract_by_offer(self.offer.id)

        contract = Contract.objects.create(offer=self.offer, role="Accountant")
        self.assertEqual(get_contract_by_offer(self.offer.id), contract)

    def test_apply_changes_ignores_unknown_fields(self):
        contract = Contract.objects.create(offer=self.offer, role="Accountant")
        updated = apply_contract_changes(contract, {"role": "Senior Accountant", "offer": None, "id": "x"})
        self.assertEqual(updated.role, "Senior Accountant")
        self.assertEqual(updated.offer, self.offer)

    def test_signature_upload_without_timestamp_is_stamped(self):
        contract = Contract.objects.create(offer=self.offer, role="Accountant")
        apply_contract_changes(contract, {"employee_signature_url": "sig.png"})

        contract.refresh_from_db()
        self.assertEqual(contract.employee_signature_url, "sig.png")
        self.assertIsNotNone(contract.employee_signed_at)

    def test_explicit_signature_timestamp_is_kept(self):
        contract = Contract.objects.create(offer=self.offer, role="Accountant")
        apply_contract_changes(contract, {"employee_signature_url": "sig.png", "employee_signed_at": SIGNED_AT})

        contract.refresh_from_db()
        self.assertEqual(contract.employee_signed_at, SIGNED_AT)


class ContractApiTests(APITestCase):
    def setUp(self):
        User = get_user_model()
        self.candidate = User.objects.create_user(email="candidate@example.com", password="pass")
        assign_roles(self.candidate, [SystemRole.JOB_CANDIDATE])
        self.hr = User.objects.create_user(email="hr@acme.test", password="pass")
        assign_roles(self.hr, [SystemRole.HR_MANAGER])
        payroll_manager = User.objects.create_user(email="payroll@acme.test", password="pass")
        assign_roles(payroll_manager, [SystemRole.PAYROLL_MANAGER])
        admin = User.objects.create_user(email="admin@acme.test", password="pass")
        assign_roles(admin, [SystemRole.SYSTEM_ADMIN])

        self.application = Application.objects.create(candidate=self.candidate, position_title="Accountant")
        self.offer = _offer(self.candidate, hr=self.hr, application=self.application)

    def test_create_and_fetch_by_offer(self):
        self.client.force_authenticate(self.hr)
        resp = self.client.post(
            "/api/contracts/",
            {"offer": str(self.offer.id), "role": "Accountant", "gross_salary": "4200.00"},
            format="json",
        )
        self.assertEqual(resp.status_code, status.HTTP_201_CREATED)
        self.assertEqual(resp.data["signature_state"], Contract.STATE_NEITHER_SIGNED)

        resp = self.client.get(f"/api/contracts/by-offer/{self.offer.id}/")
        self.assertEqual(resp.status_code, status.HTTP_200_OK)
        self.assertEqual(resp.data["data"]["role"], "Accountant")

    def test_patch_runs_completion_workflow(self):
        contract = Contract.objects.create(
            offer=self.offer,
            role="Accountant",
            employee_signature_url="sig.png",
            employee_signed_at=SIGNED_AT,
        )
        self.client.force_authenticate(self.hr)
        resp = self.client.patch(
            f"/api/contracts/{contract.id}/",
            {"employer_signed_at": SIGNED_AT.isoformat()},
            format="json",
        )

        self.assertEqual(resp.status_code, status.HTTP_200_OK)
        self.assertEqual(resp.data["data"]["signature_state"], Contract.STATE_FULLY_EXECUTED)
        self.application.refresh_from_db()
        self.assertEqual(self.application.status, Application.STATUS_HIRED)
        self.assertEqual(Employee.objects.count(), 1)
        self.assertTrue(Notification.objects.filter(user=self.candidate, title="Employee Credentials").exists())

    def test_patch_unknown_contract_returns_404(self):
        self.client.force_authenticate(self.hr)
        resp = self.client.patch(
            "/api/contracts/5d0e9f8a-3b2c-4d1e-8f7a-6b5c4d3e2f10/",
            {"role": "x"},
            format="json",
        )
        self.assertEqual(resp.status_code, status.HTTP_404_NOT_FOUND)

    def test_candidate_cannot_list_contracts(self):
        self.client.force_authenticate(self.candidate)
        resp = self.client.get("/api/contracts/")
        self.assertEqual(resp.status_code, status.HTTP_403_FORBIDDEN)
