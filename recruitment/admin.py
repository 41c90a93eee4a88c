from django.contrib import admin

from .models import Application, Offer, Onboarding, OnboardingDocument


@admin.register(Application)
class ApplicationAdmin(admin.ModelAdmin):
    list_display = ("position_title", "candidate", "status", "created_at")
    list_filter = ("status",)


@admin.register(Offer)
class OfferAdmin(admin.ModelAdmin):
    list_display = ("role", "candidate", "hr_employee", "signing_bonus", "final_status", "deadline")
    list_filter = ("final_status", "applicant_response")


admin.site.register(OnboardingDocument)
admin.site.register(Onboarding)
