import re
from datetime import datetime, timezone as dt_timezone
from decimal import Decimal
from unittest import mock

from django.contrib.auth import get_user_model
from django.test import TestCase, override_settings
from rest_framework import status
from rest_framework.exceptions import NotFound, ValidationError
from rest_framework.test import APITestCase

from accounts.exceptions import Conflict
from accounts.models import SystemRole
from accounts.rbac import assign_roles
from contracts.models import Contract
from employees.models import Employee
from notifications.models import Notification
from payroll.models import EmployeeSigningBonus, PayrollRun, SigningBonus

from recruitment.models import Application, Offer, Onboarding, OnboardingDocument
from recruitment.onboarding import build_registration_payload, generate_employee_number, update_contract
from recruitment.services import (
    create_onboarding,
    create_onboarding_document,
    delete_onboarding_task,
    get_onboarding_document,
    list_onboardings_by_employee,
    update_onboarding,
)

SIGNED_AT = datetime(2025, 3, 14, 9, 30, tzinfo=dt_timezone.utc)


class ContractCompletionTestCase(TestCase):
    def setUp(self):
        User = get_user_model()
        self.candidate = User.objects.create_user(email="candidate@example.com", password="pass", is_candidate=True)
        self.hr = User.objects.create_user(email="hr@acme.test", password="pass")
        self.payroll_manager = User.objects.create_user(email="payroll@acme.test", password="pass")
        self.admin = User.objects.create_user(email="sysadmin@acme.test", password="pass")
        assign_roles(self.hr, [SystemRole.HR_EMPLOYEE])
        assign_roles(self.payroll_manager, [SystemRole.PAYROLL_MANAGER])
        assign_roles(self.admin, [SystemRole.SYSTEM_ADMIN])

        self.application = Application.objects.create(
            candidate=self.candidate,
            position_title="Software Engineer",
            status=Application.STATUS_OFFER,
        )
        self.offer = Offer.objects.create(
            application=self.application,
            candidate=self.candidate,
            hr_employee=self.hr,
            role="Software Engineer",
            gross_salary=Decimal("5000.00"),
        )

    def make_contract(self, signing_bonus=None, **fields):
        return Contract.objects.create(
            offer=self.offer,
            role="Software Engineer",
            gross_salary=Decimal("5000.00"),
            signing_bonus=signing_bonus,
            **fields,
        )

    def make_employee_signed_contract(self, signing_bonus=None):
        return self.make_contract(
            signing_bonus=signing_bonus,
            employee_signature_url="sig.png",
            employee_signed_at=SIGNED_AT,
        )

    def titles_for(self, user):
        return list(Notification.objects.filter(user=user).order_by("id").values_list("title", flat=True))


class SignatureNotificationTests(ContractCompletionTestCase):
    def test_unrelated_update_sends_nothing(self):
        contract = self.make_contract()
        update_contract(contract.id, {"role": "Senior Software Engineer"})
        self.assertEqual(Notification.objects.count(), 0)
        contract.refresh_from_db()
        self.assertEqual(contract.role, "Senior Software Engineer")

    def test_employee_signature_notifies_hr_only(self):
        contract = self.make_contract()
        updated = update_contract(
            contract.id,
            {"employee_signature_url": "sig.png", "employee_signed_at": SIGNED_AT},
        )

        self.assertEqual(updated.signature_state, Contract.STATE_EMPLOYEE_SIGNED)
        self.assertEqual(Notification.objects.count(), 1)
        note = Notification.objects.get()
        self.assertEqual(note.user, self.hr)
        self.assertEqual(note.title, "Contract Signed by Employee")
        self.assertIn(str(self.offer.id), note.body)
        self.assertEqual(Employee.objects.count(), 0)

    def test_employer_signature_without_employee_does_not_provision(self):
        contract = self.make_contract()
        update_contract(contract.id, {"employer_signed_at": SIGNED_AT})
        self.assertEqual(self.titles_for(self.candidate), ["Contract Fully Executed"])
        self.assertEqual(Notification.objects.count(), 1)
        self.assertEqual(Employee.objects.count(), 0)

    def test_missing_contract_raises_not_found(self):
        with self.assertRaises(NotFound):
            update_contract("2f1d7c80-8d2e-4a7c-9f0e-3c6b1a5d9e42", {"role": "x"})


class CompletionFanOutTests(ContractCompletionTestCase):
    def test_two_step_signing_provisions_new_hire(self):
        contract = self.make_contract()
        update_contract(contract.id, {"employee_signature_url": "sig.png", "employee_signed_at": SIGNED_AT})
        self.assertEqual(Notification.objects.count(), 1)

        updated = update_contract(contract.id, {"employer_signed_at": SIGNED_AT})

        self.assertTrue(updated.is_fully_executed)
        self.application.refresh_from_db()
        self.assertEqual(self.application.status, Application.STATUS_HIRED)

        self.assertEqual(self.titles_for(self.payroll_manager), ["Payroll provisioning required"])
        self.assertEqual(
            self.titles_for(self.admin),
            [
                "System access provisioning required",
                "Email access provisioning required",
                "New Hire Equipment Setup Required",
            ],
        )
        self.assertEqual(self.titles_for(self.candidate), ["Contract Fully Executed", "Employee Credentials"])

        employee = Employee.objects.get()
        self.assertRegex(employee.employee_number, r"^EMP-\d{4}$")
        self.assertEqual(employee.work_email, f"{employee.employee_number.replace('-', '')}@gmail.com")
        self.assertEqual(employee.national_id, f"PENDING-{employee.employee_number}")
        self.assertEqual((employee.first_name, employee.last_name), ("--", "--"))
        self.assertTrue(employee.user.check_password("password@resetThis"))

        credentials = Notification.objects.get(user=self.candidate, title="Employee Credentials")
        self.assertIn(employee.work_email, credentials.body)
        self.assertIn(employee.employee_number, credentials.body)
        self.assertIn("password@resetThis", credentials.body)

    def test_resaving_fully_executed_contract_does_not_reprovision(self):
        contract = self.make_employee_signed_contract()
        update_contract(contract.id, {"employer_signed_at": SIGNED_AT})
        notifications = Notification.objects.count()
        employees = Employee.objects.count()

        update_contract(contract.id, {"benefits": ["Health insurance"]})
        update_contract(contract.id, {"employer_signed_at": SIGNED_AT})

        self.assertEqual(Notification.objects.count(), notifications)
        self.assertEqual(Employee.objects.count(), employees)

    def test_missing_application_skips_provisioning(self):
        self.offer.application = None
        self.offer.save()
        contract = self.make_employee_signed_contract(signing_bonus=Decimal("500"))

        with self.assertLogs("recruitment.onboarding", level="WARNING"):
            updated = update_contract(contract.id, {"employer_signed_at": SIGNED_AT})

        self.assertTrue(updated.is_fully_executed)
        self.assertEqual(Employee.objects.count(), 0)
        self.assertEqual(SigningBonus.objects.count(), 0)
        self.assertEqual(self.titles_for(self.candidate), ["Contract Fully Executed"])
        self.assertEqual(self.titles_for(self.payroll_manager), [])
        self.assertEqual(self.titles_for(self.admin), [])

    def test_signature_upload_then_employer_signature(self):
        contract = self.make_contract()

        update_contract(contract.id, {"employee_signature_url": "sig.png"})
        self.assertEqual(self.titles_for(self.hr), ["Contract Signed by Employee"])
        self.assertEqual(Notification.objects.count(), 1)

        update_contract(contract.id, {"employer_signed_at": SIGNED_AT})
        self.assertEqual(self.titles_for(self.hr), ["Contract Signed by Employee"])
        self.assertEqual(self.titles_for(self.candidate), ["Contract Fully Executed", "Employee Credentials"])
        self.assertEqual(Employee.objects.count(), 1)

    def test_missing_payroll_manager_raises_after_merge(self):
        self.payroll_manager.roles.update(is_active=False)
        contract = self.make_employee_signed_contract()

        with self.assertRaises(NotFound) as ctx:
            update_contract(contract.id, {"employer_signed_at": SIGNED_AT})

        self.assertIn("Payroll Manager", str(ctx.exception.detail))
        contract.refresh_from_db()
        self.assertEqual(contract.employer_signed_at, SIGNED_AT)
        self.assertEqual(Employee.objects.count(), 0)

    def test_missing_system_admin_raises(self):
        self.admin.roles.update(is_active=False)
        contract = self.make_employee_signed_contract()
        with self.assertRaises(NotFound):
            update_contract(contract.id, {"employer_signed_at": SIGNED_AT})

    def test_first_assigned_holder_receives_provisioning(self):
        later = get_user_model().objects.create_user(email="payroll2@acme.test", password="pass")
        assign_roles(later, [SystemRole.PAYROLL_MANAGER])
        contract = self.make_employee_signed_contract()
        update_contract(contract.id, {"employer_signed_at": SIGNED_AT})
        self.assertEqual(self.titles_for(self.payroll_manager), ["Payroll provisioning required"])
        self.assertEqual(self.titles_for(later), [])

    def test_registration_failure_is_reraised(self):
        contract = self.make_employee_signed_contract(signing_bonus=Decimal("500"))
        with mock.patch("accounts.services.register_employee", side_effect=Conflict("Email already exists")):
            with self.assertLogs("recruitment.onboarding", level="ERROR"):
                with self.assertRaises(Conflict):
                    update_contract(contract.id, {"employer_signed_at": SIGNED_AT})

        self.assertFalse(SigningBonus.objects.exists())
        self.assertEqual(self.titles_for(self.candidate), ["Contract Fully Executed"])
        contract.refresh_from_db()
        self.assertTrue(contract.is_fully_executed)


class SigningBonusProvisioningTests(ContractCompletionTestCase):
    def test_zero_or_missing_bonus_creates_nothing(self):
        for amount in (None, Decimal("0")):
            self.make_employee_signed_contract(signing_bonus=amount)
        for contract in Contract.objects.all():
            update_contract(contract.id, {"employer_signed_at": SIGNED_AT})

        self.assertFalse(SigningBonus.objects.exists())
        self.assertFalse(EmployeeSigningBonus.objects.exists())

    def test_bonus_policy_created_and_employee_bonus_approved(self):
        contract = self.make_employee_signed_contract(signing_bonus=Decimal("500"))
        update_contract(contract.id, {"employer_signed_at": SIGNED_AT})

        policy = SigningBonus.objects.get()
        self.assertEqual(policy.amount, Decimal("500.00"))
        self.assertEqual(policy.position_name, "Software Engineer")
        self.assertEqual(policy.status, SigningBonus.STATUS_APPROVED)

        bonus = EmployeeSigningBonus.objects.get()
        self.assertEqual(bonus.employee, Employee.objects.get())
        self.assertEqual(bonus.status, EmployeeSigningBonus.STATUS_APPROVED)
        self.assertIsNotNone(bonus.approved_at)

    def test_policy_failure_notifies_hr_and_returns_contract(self):
        contract = self.make_employee_signed_contract(signing_bonus=Decimal("500"))
        with mock.patch(
            "payroll.services.create_signing_bonus_policy",
            side_effect=RuntimeError("bonus store unavailable"),
        ):
            updated = update_contract(contract.id, {"employer_signed_at": SIGNED_AT})

        self.assertTrue(updated.is_fully_executed)
        alert = Notification.objects.get(user=self.hr, title="Signing Bonus Processing Failed")
        self.assertIn("500", alert.body)
        self.assertIn("bonus store unavailable", alert.body)
        self.assertIn("Software Engineer", alert.body)
        self.assertEqual(alert.type, Notification.TYPE_ALERT)
        self.assertEqual(Employee.objects.count(), 1)

    def test_empty_policy_result_counts_as_failure(self):
        contract = self.make_employee_signed_contract(signing_bonus=Decimal("500"))
        with mock.patch("payroll.services.create_signing_bonus_policy", return_value=None):
            update_contract(contract.id, {"employer_signed_at": SIGNED_AT})

        alert = Notification.objects.get(user=self.hr, title="Signing Bonus Processing Failed")
        self.assertIn("Failed to create signing bonus template", alert.body)
        self.assertFalse(EmployeeSigningBonus.objects.exists())


class PayrollRunInitiationTests(ContractCompletionTestCase):
    def test_matching_draft_run_is_initiated_for_payroll_manager(self):
        run = PayrollRun.objects.create(
            run_id="PR-2025-0003",
            payroll_period=datetime(2025, 3, 31, tzinfo=dt_timezone.utc),
            employees=4,
        )
        contract = self.make_employee_signed_contract()
        update_contract(contract.id, {"employer_signed_at": SIGNED_AT})

        run.refresh_from_db()
        self.assertEqual(run.payroll_specialist, self.payroll_manager)
        self.assertEqual(run.employees, 0)
        self.assertEqual(run.status, PayrollRun.STATUS_DRAFT)

    def test_no_matching_run_skips_initiation(self):
        PayrollRun.objects.create(
            run_id="PR-2025-0004",
            payroll_period=datetime(2025, 4, 30, tzinfo=dt_timezone.utc),
        )
        PayrollRun.objects.create(
            run_id="PR-2025-0003",
            payroll_period=datetime(2025, 3, 31, tzinfo=dt_timezone.utc),
            status=PayrollRun.STATUS_LOCKED,
        )
        contract = self.make_employee_signed_contract()
        with mock.patch("payroll.services.start_payroll_initiation") as start:
            updated = update_contract(contract.id, {"employer_signed_at": SIGNED_AT})

        start.assert_not_called()
        self.assertTrue(updated.is_fully_executed)

    def test_initiation_failure_is_logged_only(self):
        PayrollRun.objects.create(
            run_id="PR-2025-0003",
            payroll_period=datetime(2025, 3, 31, tzinfo=dt_timezone.utc),
        )
        contract = self.make_employee_signed_contract()
        notifications_before = Notification.objects.count()
        with mock.patch(
            "payroll.services.start_payroll_initiation",
            side_effect=ValidationError({"detail": "Payroll run not found."}),
        ):
            with self.assertLogs("recruitment.onboarding", level="ERROR"):
                updated = update_contract(contract.id, {"employer_signed_at": SIGNED_AT})

        self.assertTrue(updated.is_fully_executed)
        self.assertFalse(
            Notification.objects.filter(title__icontains="payroll run").exists()
        )
        # welcome, four provisioning requests and the credentials
        self.assertEqual(Notification.objects.count() - notifications_before, 6)


class EmployeeNumberTests(TestCase):
    def test_default_format(self):
        number = generate_employee_number()
        self.assertRegex(number, r"^EMP-\d{4}$")
        payload = build_registration_payload(number)
        self.assertEqual(payload["work_email"], f"{number.replace('-', '')}@gmail.com")
        self.assertEqual(payload["national_id"], f"PENDING-{number}")
        self.assertEqual(payload["password"], "password@resetThis")

    @override_settings(
        ONBOARDING_EMPLOYEE_NUMBER_PREFIX="HR",
        ONBOARDING_EMPLOYEE_NUMBER_DIGITS=6,
        ONBOARDING_WORK_EMAIL_DOMAIN="acme.test",
    )
    def test_settings_override(self):
        number = generate_employee_number()
        self.assertTrue(re.match(r"^HR-\d{6}$", number))
        self.assertTrue(build_registration_payload(number)["work_email"].endswith("@acme.test"))


class OnboardingRecordTests(TestCase):
    def setUp(self):
        self.owner = get_user_model().objects.create_user(email="hire@example.com", password="pass")
        self.employee = Employee.objects.create(
            employee_number="EMP-1001",
            work_email="EMP1001@example.com",
            first_name="Ada",
            last_name="Lovelace",
            national_id="PENDING-EMP-1001",
            date_of_hire=SIGNED_AT.date(),
        )

    def test_document_lookup(self):
        document = create_onboarding_document(
            owner=self.owner,
            type=OnboardingDocument.TYPE_ID,
            file_path="uploads/id.pdf",
        )
        self.assertEqual(get_onboarding_document(document.id), document)
        with self.assertRaises(NotFound):
            get_onboarding_document("8c1b2a71-5d3e-4f0a-9b7c-1e2d3f4a5b6c")

    def test_completing_all_tasks_marks_onboarding_completed(self):
        onboarding = create_onboarding(
            employee=self.employee,
            tasks=[{"name": "Sign NDA", "department": "HR"}, {"name": "Collect laptop", "department": "IT"}],
        )
        self.assertFalse(onboarding.completed)
        self.assertEqual(onboarding.tasks[0]["status"], Onboarding.TASK_PENDING)

        onboarding = update_onboarding(
            onboarding.id,
            {"tasks": [
                {"name": "Sign NDA", "department": "HR", "status": Onboarding.TASK_COMPLETED},
                {"name": "Collect laptop", "department": "IT", "status": Onboarding.TASK_COMPLETED},
            ]},
        )
        self.assertTrue(onboarding.completed)
        self.assertIsNotNone(onboarding.completed_at)
        self.assertTrue(all(task["completed_at"] for task in onboarding.tasks))

    def test_delete_task_by_index(self):
        onboarding = create_onboarding(employee=self.employee, tasks=[{"name": "A"}, {"name": "B"}])
        onboarding = delete_onboarding_task(onboarding.id, 0)
        self.assertEqual([task["name"] for task in onboarding.tasks], ["B"])
        with self.assertRaises(ValidationError):
            delete_onboarding_task(onboarding.id, 5)

    def test_list_by_employee_requires_records(self):
        with self.assertRaises(NotFound):
            list_onboardings_by_employee(self.employee.id)
        create_onboarding(employee=self.employee, tasks=[{"name": "A"}])
        self.assertEqual(len(list_onboardings_by_employee(self.employee.id)), 1)


class OnboardingApiTests(APITestCase):
    def setUp(self):
        User = get_user_model()
        self.hr = User.objects.create_user(email="hr-api@acme.test", password="pass")
        assign_roles(self.hr, [SystemRole.HR_MANAGER])
        self.employee = Employee.objects.create(
            employee_number="EMP-2002",
            work_email="EMP2002@example.com",
            first_name="Grace",
            last_name="Hopper",
            national_id="PENDING-EMP-2002",
            date_of_hire=SIGNED_AT.date(),
        )

    def test_create_onboarding_and_delete_task(self):
        self.client.force_authenticate(self.hr)
        resp = self.client.post(
            "/api/recruitment/onboardings/",
            {"employee": str(self.employee.id), "tasks": [{"name": "Badge photo"}, {"name": "Payroll form"}]},
            format="json",
        )
        self.assertEqual(resp.status_code, status.HTTP_201_CREATED)
        onboarding_id = resp.data["id"]

        resp = self.client.delete(f"/api/recruitment/onboardings/{onboarding_id}/tasks/1/")
        self.assertEqual(resp.status_code, status.HTTP_200_OK)
        self.assertEqual([task["name"] for task in resp.data["data"]["tasks"]], ["Badge photo"])

        resp = self.client.delete(f"/api/recruitment/onboardings/{onboarding_id}/tasks/9/")
        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(resp.data["message"], "Invalid task index")

    def test_by_employee_not_found(self):
        self.client.force_authenticate(self.hr)
        resp = self.client.get(f"/api/recruitment/onboardings/by-employee/{self.employee.id}/")
        self.assertEqual(resp.status_code, status.HTTP_404_NOT_FOUND)
        self.assertFalse(resp.data["success"])

    def test_candidate_uploads_document_and_hr_lists_by_owner(self):
        candidate = get_user_model().objects.create_user(email="cand-api@example.com", password="pass")
        assign_roles(candidate, [SystemRole.JOB_CANDIDATE])
        self.client.force_authenticate(candidate)
        resp = self.client.post(
            "/api/recruitment/documents/",
            {"owner": candidate.id, "type": OnboardingDocument.TYPE_CV, "file_path": "uploads/cv.pdf"},
            format="json",
        )
        self.assertEqual(resp.status_code, status.HTTP_201_CREATED)

        resp = self.client.get(f"/api/recruitment/documents/by-owner/{candidate.id}/")
        self.assertEqual(resp.status_code, status.HTTP_403_FORBIDDEN)

        self.client.force_authenticate(self.hr)
        resp = self.client.get(f"/api/recruitment/documents/by-owner/{candidate.id}/")
        self.assertEqual(resp.status_code, status.HTTP_200_OK)
        self.assertEqual([doc["file_path"] for doc in resp.data["data"]], ["uploads/cv.pdf"])
