from django.urls import include, path
from rest_framework.routers import SimpleRouter

from .views import ContractViewSet

app_name = 'contracts'

router = SimpleRouter()
router.register(r'', ContractViewSet, basename='contract')

urlpatterns = [
    path('', include(router.urls)),
]
