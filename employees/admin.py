from django.contrib import admin

from .models import Employee


@admin.register(Employee)
class EmployeeAdmin(admin.ModelAdmin):
    list_display = ['employee_number', 'full_name', 'work_email', 'status', 'date_of_hire']
    list_filter = ['status', 'date_of_hire']
    search_fields = ['employee_number', 'work_email', 'first_name', 'last_name', 'national_id']
    readonly_fields = ['id', 'created_at', 'updated_at']
