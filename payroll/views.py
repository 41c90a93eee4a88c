from rest_framework import permissions, status, viewsets
from rest_framework.decorators import action

from accounts.models import SystemRole
from accounts.permissions import HasSystemRole
from accounts.utils import api_response

from .models import EmployeeSigningBonus, PayrollRun, SigningBonus
from .serializers import (
    EmployeeSigningBonusSerializer,
    PayrollInitiationSerializer,
    PayrollRunSerializer,
    SigningBonusSerializer,
)
from .services import (
    approve_employee_signing_bonus,
    approve_signing_bonus_policy,
    create_employee_signing_bonus,
    reject_employee_signing_bonus,
    reject_signing_bonus_policy,
    start_payroll_initiation,
)

PAYROLL_ROLES = [SystemRole.PAYROLL_SPECIALIST, SystemRole.PAYROLL_MANAGER]


class PayrollViewSet(viewsets.ModelViewSet):
    permission_classes = [permissions.IsAuthenticated, HasSystemRole]
    role_map = {"*": PAYROLL_ROLES}


class SigningBonusViewSet(PayrollViewSet):
    queryset = SigningBonus.objects.all()
    serializer_class = SigningBonusSerializer
    role_map = {
        "approve": [SystemRole.PAYROLL_MANAGER],
        "reject": [SystemRole.PAYROLL_MANAGER],
        "*": PAYROLL_ROLES,
    }

    @action(detail=True, methods=["post"], url_path="approve")
    def approve(self, request, pk=None):
        policy = approve_signing_bonus_policy(pk)
        return api_response(
            success=True,
            message="Signing bonus approved.",
            data=self.get_serializer(policy).data,
        )

    @action(detail=True, methods=["post"], url_path="reject")
    def reject(self, request, pk=None):
        policy = reject_signing_bonus_policy(pk)
        return api_response(
            success=True,
            message="Signing bonus rejected.",
            data=self.get_serializer(policy).data,
        )


class EmployeeSigningBonusViewSet(PayrollViewSet):
    queryset = EmployeeSigningBonus.objects.select_related("employee", "signing_bonus")
    serializer_class = EmployeeSigningBonusSerializer

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        bonus = create_employee_signing_bonus(
            employee_id=data["employee"].id,
            signing_bonus_id=data["signing_bonus"].id,
            given_amount=data.get("given_amount"),
        )
        return api_response(
            success=True,
            message="Employee signing bonus created.",
            data=self.get_serializer(bonus).data,
            status=status.HTTP_201_CREATED,
        )

    @action(detail=True, methods=["post"], url_path="approve")
    def approve(self, request, pk=None):
        bonus = approve_employee_signing_bonus(pk)
        return api_response(
            success=True,
            message="Employee signing bonus approved.",
            data=self.get_serializer(bonus).data,
        )

    @action(detail=True, methods=["post"], url_path="reject")
    def reject(self, request, pk=None):
        bonus = reject_employee_signing_bonus(pk)
        return api_response(
            success=True,
            message="Employee signing bonus rejected.",
            data=self.get_serializer(bonus).data,
        )


class PayrollRunViewSet(PayrollViewSet):
    queryset = PayrollRun.objects.all()
    serializer_class = PayrollRunSerializer

    @action(detail=True, methods=["post"], url_path="start-initiation")
    def start_initiation(self, request, pk=None):
        serializer = PayrollInitiationSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        specialist_id = serializer.validated_data.get("payroll_specialist_id") or request.user.id

        result = start_payroll_initiation(
            payroll_run_id=pk,
            payroll_specialist_id=specialist_id,
        )
        return api_response(
            success=True,
            message=result["message"],
            data=self.get_serializer(result["payroll_run"]).data,
        )
