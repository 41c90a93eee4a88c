from rest_framework import serializers

from .models import Employee


class EmployeeListSerializer(serializers.ModelSerializer):
    """Serializer for Employee list view (minimal fields)"""

    class Meta:
        model = Employee
        fields = [
            'id', 'employee_number', 'first_name', 'last_name', 'full_name',
            'work_email', 'job_title', 'status', 'date_of_hire',
        ]
        read_only_fields = fields
