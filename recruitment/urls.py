from django.urls import include, path
from rest_framework.routers import DefaultRouter

from .views import ApplicationViewSet, OfferViewSet, OnboardingDocumentViewSet, OnboardingViewSet

app_name = "recruitment"

router = DefaultRouter()
router.register(r"applications", ApplicationViewSet, basename="recruitment-application")
router.register(r"offers", OfferViewSet, basename="recruitment-offer")
router.register(r"documents", OnboardingDocumentViewSet, basename="onboarding-document")
router.register(r"onboardings", OnboardingViewSet, basename="onboarding")

urlpatterns = [
    path("", include(router.urls)),
]
