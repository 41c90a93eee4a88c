from datetime import date

from rest_framework import status
from rest_framework.test import APITestCase

from accounts.models import SystemRole, User
from accounts.rbac import assign_roles
from accounts.services import register_employee
from employees.models import Employee


class EmployeeDirectoryTests(APITestCase):
    def setUp(self):
        self.hr = User.objects.create_user(email='hr@example.com', password='pass')
        assign_roles(self.hr, [SystemRole.HR_MANAGER])
        employee_id = register_employee({
            'employee_number': 'EMP-0420',
            'work_email': 'EMP0420@gmail.com',
            'password': 'password@resetThis',
            'first_name': '--',
            'last_name': '--',
            'national_id': 'PENDING-EMP-0420',
            'date_of_hire': date(2025, 3, 14),
        })
        self.employee = Employee.objects.get(id=employee_id)
        Employee.objects.create(
            employee_number='EMP-0001',
            work_email='EMP0001@gmail.com',
            first_name='Old',
            last_name='Timer',
            national_id='NID-0001',
            date_of_hire=date(2020, 1, 1),
            status=Employee.STATUS_TERMINATED,
        )

    def test_list_filters_by_status(self):
        self.client.force_authenticate(user=self.hr)
        response = self.client.get('/api/employees/', {'status': Employee.STATUS_ACTIVE})
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([row['employee_number'] for row in response.data], ['EMP-0420'])

    def test_me_returns_own_profile(self):
        self.client.force_authenticate(user=self.employee.user)
        response = self.client.get('/api/employees/me/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['data']['full_name'], '-- --')

    def test_me_without_profile_is_404(self):
        self.client.force_authenticate(user=self.hr)
        response = self.client.get('/api/employees/me/')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_directory_requires_role(self):
        self.client.force_authenticate(user=self.employee.user)
        response = self.client.get('/api/employees/')
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
