"""URL Configuration for employees app"""
from django.urls import path, include
from rest_framework.routers import SimpleRouter
from .views import EmployeeViewSet

app_name = 'employees'

router = SimpleRouter()
router.register(r'', EmployeeViewSet, basename='employee')

urlpatterns = [
    path('', include(router.urls)),
]
