from rest_framework import permissions, status
from rest_framework.views import APIView

from .models import SystemRole
from .permissions import HasSystemRole
from .serializers import RegisterEmployeeSerializer, UserSerializer
from .services import register_employee
from .utils import api_response


class RegisterEmployeeView(APIView):
    """Provision a login identity and employee profile"""

    permission_classes = [permissions.IsAuthenticated, HasSystemRole]
    role_map = {
        'post': [SystemRole.HR_MANAGER, SystemRole.SYSTEM_ADMIN],
    }

    def post(self, request):
        serializer = RegisterEmployeeSerializer(data=request.data)
        if not serializer.is_valid():
            return api_response(
                success=False,
                message='Invalid registration payload.',
                errors=serializer.errors,
                status=status.HTTP_400_BAD_REQUEST,
            )

        employee_id = register_employee(serializer.validated_data)
        return api_response(
            success=True,
            message='Employee registered successfully.',
            data={'employee_id': str(employee_id)},
            status=status.HTTP_201_CREATED,
        )


class UserProfileView(APIView):
    """Return the authenticated user with their active roles"""

    permission_classes = [permissions.IsAuthenticated]

    def get(self, request):
        return api_response(
            success=True,
            message='Profile retrieved.',
            data=UserSerializer(request.user).data,
        )
