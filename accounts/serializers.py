from rest_framework import serializers

from .models import SystemRole, User


class UserSerializer(serializers.ModelSerializer):
    """Serializer for User model"""
    roles = serializers.SerializerMethodField()

    class Meta:
        model = User
        fields = ('id', 'email', 'first_name', 'last_name', 'is_admin', 'is_employee',
                  'is_candidate', 'roles', 'created_at')
        read_only_fields = fields

    def get_roles(self, obj):
        return list(obj.roles.filter(is_active=True).values_list('role', flat=True))


class RegisterEmployeeSerializer(serializers.Serializer):
    """Input for provisioning an employee login identity"""

    employee_number = serializers.CharField(max_length=50)
    work_email = serializers.EmailField()
    password = serializers.CharField(min_length=6, write_only=True)
    first_name = serializers.CharField(max_length=100)
    middle_name = serializers.CharField(max_length=100, required=False, allow_blank=True)
    last_name = serializers.CharField(max_length=100)
    national_id = serializers.CharField(max_length=50)
    date_of_hire = serializers.DateField()
    personal_email = serializers.EmailField(required=False)
    mobile_phone = serializers.CharField(max_length=20, required=False, allow_blank=True)
    roles = serializers.ListField(
        child=serializers.ChoiceField(choices=SystemRole.choices),
        required=False,
        allow_empty=False,
    )
