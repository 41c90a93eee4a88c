from rest_framework import serializers

from .models import EmployeeSigningBonus, PayrollRun, SigningBonus


class SigningBonusSerializer(serializers.ModelSerializer):
    class Meta:
        model = SigningBonus
        fields = "__all__"
        read_only_fields = ["id", "approved_at", "created_at", "updated_at"]


class EmployeeSigningBonusSerializer(serializers.ModelSerializer):
    employee_number = serializers.CharField(source="employee.employee_number", read_only=True)
    position_name = serializers.CharField(source="signing_bonus.position_name", read_only=True)

    class Meta:
        model = EmployeeSigningBonus
        fields = "__all__"
        read_only_fields = [
            "id",
            "status",
            "approved_at",
            "created_at",
            "updated_at",
            "employee_number",
            "position_name",
        ]


class PayrollRunSerializer(serializers.ModelSerializer):
    class Meta:
        model = PayrollRun
        fields = "__all__"
        read_only_fields = [
            "id",
            "employees",
            "exceptions",
            "total_net_pay",
            "payroll_specialist",
            "payment_status",
            "created_at",
            "updated_at",
        ]


class PayrollInitiationSerializer(serializers.Serializer):
    payroll_specialist_id = serializers.IntegerField(required=False)
