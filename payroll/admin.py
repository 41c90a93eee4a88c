from django.contrib import admin

from .models import EmployeeSigningBonus, PayrollRun, SigningBonus

admin.site.register(SigningBonus)
admin.site.register(EmployeeSigningBonus)


@admin.register(PayrollRun)
class PayrollRunAdmin(admin.ModelAdmin):
    list_display = ("run_id", "payroll_period", "status", "payment_status", "payroll_specialist")
    list_filter = ("status", "payment_status")
    search_fields = ("run_id", "entity")
