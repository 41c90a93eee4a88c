from django.contrib import admin

from .models import Contract


@admin.register(Contract)
class ContractAdmin(admin.ModelAdmin):
    list_display = ['id', 'role', 'offer', 'signing_bonus', 'employee_signed_at', 'employer_signed_at', 'created_at']
    list_filter = ['created_at']
    search_fields = ['role', 'offer__id']
    readonly_fields = ['created_at', 'updated_at']
