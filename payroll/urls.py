from django.urls import include, path
from rest_framework.routers import DefaultRouter

from .views import EmployeeSigningBonusViewSet, PayrollRunViewSet, SigningBonusViewSet

app_name = "payroll"

router = DefaultRouter()
router.register(r"signing-bonuses", SigningBonusViewSet, basename="signing-bonuses")
router.register(r"employee-signing-bonuses", EmployeeSigningBonusViewSet, basename="employee-signing-bonuses")
router.register(r"runs", PayrollRunViewSet, basename="payroll-runs")

urlpatterns = [
    path("", include(router.urls)),
]
