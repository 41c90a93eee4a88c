from datetime import date

from django.test import TestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.exceptions import NotFound
from rest_framework.test import APIRequestFactory, APITestCase

from accounts.exceptions import Conflict
from accounts.models import SystemRole, User, UserRole
from accounts.permissions import HasSystemRole
from accounts.rbac import assign_roles, get_users_by_role, resolve_role_holder
from accounts.services import register_employee
from employees.models import Employee


def registration_payload(**overrides):
    """Helper to build a minimally valid registration payload"""
    payload = {
        'employee_number': 'EMP-4821',
        'work_email': 'EMP4821@gmail.com',
        'password': 'password@resetThis',
        'first_name': '--',
        'last_name': '--',
        'national_id': 'PENDING-EMP-4821',
        'date_of_hire': '2025-03-14T09:30:00Z',
    }
    payload.update(overrides)
    return payload


class RoleResolutionTests(TestCase):
    def setUp(self):
        self.first = User.objects.create_user(email='first@example.com', password='pass')
        self.second = User.objects.create_user(email='second@example.com', password='pass')
        assign_roles(self.first, [SystemRole.PAYROLL_MANAGER])
        assign_roles(self.second, [SystemRole.PAYROLL_MANAGER])

    def test_earliest_assignment_wins(self):
        self.assertEqual(get_users_by_role(SystemRole.PAYROLL_MANAGER), [self.first, self.second])
        self.assertEqual(resolve_role_holder(SystemRole.PAYROLL_MANAGER), self.first)

    def test_ordering_is_injectable(self):
        holder = resolve_role_holder(SystemRole.PAYROLL_MANAGER, order_by=('-created_at', '-id'))
        self.assertEqual(holder, self.second)

    def test_inactive_assignments_and_users_are_skipped(self):
        UserRole.objects.filter(user=self.first).update(is_active=False)
        self.second.is_active = False
        self.second.save()
        with self.assertRaises(NotFound) as ctx:
            resolve_role_holder(SystemRole.PAYROLL_MANAGER)
        self.assertEqual(str(ctx.exception.detail), 'Payroll Managers not found')

    def test_assign_roles_reactivates(self):
        UserRole.objects.filter(user=self.first).update(is_active=False)
        assign_roles(self.first, [SystemRole.PAYROLL_MANAGER])
        self.assertTrue(self.first.has_system_role(SystemRole.PAYROLL_MANAGER))
        self.assertEqual(UserRole.objects.filter(user=self.first).count(), 1)


class RegisterEmployeeTests(TestCase):
    def test_creates_user_employee_and_default_role(self):
        employee_id = register_employee(registration_payload())

        employee = Employee.objects.get(id=employee_id)
        self.assertEqual(employee.employee_number, 'EMP-4821')
        self.assertEqual(employee.date_of_hire, date(2025, 3, 14))
        self.assertEqual(employee.status, Employee.STATUS_ACTIVE)
        self.assertTrue(employee.user.is_employee)
        self.assertTrue(employee.user.check_password('password@resetThis'))
        self.assertTrue(employee.user.has_system_role(SystemRole.DEPARTMENT_EMPLOYEE))

    def test_duplicates_raise_conflict(self):
        register_employee(registration_payload())
        cases = [
            (registration_payload(work_email='other@gmail.com', national_id='X1'), 'Employee number already exists'),
            (registration_payload(employee_number='EMP-0002', national_id='X2', work_email='emp4821@GMAIL.com'), 'Email already exists'),
            (registration_payload(employee_number='EMP-0003', work_email='third@gmail.com'), 'National ID already exists'),
        ]
        for payload, message in cases:
            with self.subTest(message=message):
                with self.assertRaises(Conflict) as ctx:
                    register_employee(payload)
                self.assertEqual(str(ctx.exception.detail), message)
        self.assertEqual(Employee.objects.count(), 1)

    def test_email_taken_by_existing_login_conflicts(self):
        User.objects.create_user(email='EMP4821@gmail.com', password='pass')
        with self.assertRaises(Conflict):
            register_employee(registration_payload())


class HasSystemRolePermissionTests(TestCase):
    class DummyView:
        action = 'approve'
        role_map = {'approve': [SystemRole.PAYROLL_MANAGER], '*': [SystemRole.HR_MANAGER]}

    def setUp(self):
        self.factory = APIRequestFactory()
        self.permission = HasSystemRole()
        self.user = User.objects.create_user(email='perm@example.com', password='pass')

    def _request(self, user):
        request = self.factory.post('/')
        request.user = user
        return request

    def test_action_roles_are_required(self):
        view = self.DummyView()
        self.assertFalse(self.permission.has_permission(self._request(self.user), view))
        assign_roles(self.user, [SystemRole.PAYROLL_MANAGER])
        self.assertTrue(self.permission.has_permission(self._request(self.user), view))

    def test_wildcard_fallback(self):
        view = self.DummyView()
        view.action = 'list'
        assign_roles(self.user, [SystemRole.HR_MANAGER])
        self.assertTrue(self.permission.has_permission(self._request(self.user), view))

    def test_superuser_always_passes(self):
        admin = User.objects.create_superuser(email='root@example.com', password='pass')
        self.assertTrue(self.permission.has_permission(self._request(admin), self.DummyView()))


class RegisterEndpointTests(APITestCase):
    def setUp(self):
        self.hr = User.objects.create_user(email='hr@example.com', password='pass')
        assign_roles(self.hr, [SystemRole.HR_MANAGER])
        self.url = reverse('accounts:register')

    def test_register_returns_employee_id(self):
        self.client.force_authenticate(user=self.hr)
        payload = registration_payload(date_of_hire='2025-03-14', roles=[SystemRole.HR_EMPLOYEE])
        response = self.client.post(self.url, payload, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        employee = Employee.objects.get(id=response.data['data']['employee_id'])
        self.assertTrue(employee.user.has_system_role(SystemRole.HR_EMPLOYEE))

    def test_duplicate_returns_409(self):
        register_employee(registration_payload())
        self.client.force_authenticate(user=self.hr)
        response = self.client.post(self.url, registration_payload(date_of_hire='2025-03-14'), format='json')
        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(response.data['message'], 'Employee number already exists')

    def test_requires_hr_role(self):
        outsider = User.objects.create_user(email='outsider@example.com', password='pass')
        self.client.force_authenticate(user=outsider)
        response = self.client.post(self.url, registration_payload(date_of_hire='2025-03-14'), format='json')
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_profile_lists_roles(self):
        self.client.force_authenticate(user=self.hr)
        response = self.client.get(reverse('accounts:user-profile'))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['data']['roles'], [SystemRole.HR_MANAGER])
