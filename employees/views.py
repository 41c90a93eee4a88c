"""Views for browsing provisioned employees"""
from rest_framework import permissions, viewsets
from rest_framework.decorators import action
from rest_framework.exceptions import NotFound

from accounts.models import SystemRole
from accounts.permissions import HasSystemRole
from accounts.utils import api_response

from .models import Employee
from .serializers import EmployeeListSerializer


class EmployeeViewSet(viewsets.ReadOnlyModelViewSet):
    """Read-only employee directory for HR and payroll staff"""

    serializer_class = EmployeeListSerializer
    permission_classes = [permissions.IsAuthenticated, HasSystemRole]
    role_map = {
        'me': None,
        '*': [
            SystemRole.HR_MANAGER,
            SystemRole.HR_EMPLOYEE,
            SystemRole.PAYROLL_SPECIALIST,
            SystemRole.PAYROLL_MANAGER,
            SystemRole.SYSTEM_ADMIN,
        ],
    }

    def get_queryset(self):
        queryset = Employee.objects.all()
        status_filter = self.request.query_params.get('status')
        if status_filter:
            queryset = queryset.filter(status=status_filter)
        return queryset

    @action(detail=False, methods=['get'])
    def me(self, request):
        employee = request.user.employee_profile
        if not employee:
            raise NotFound('Employee profile not found.')
        return api_response(
            success=True,
            message='Employee profile retrieved.',
            data=self.get_serializer(employee).data,
        )
