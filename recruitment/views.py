from rest_framework import permissions, status, viewsets
from rest_framework.decorators import action

from accounts.models import SystemRole
from accounts.permissions import HasSystemRole
from accounts.utils import api_response

from .models import Application, Offer
from .serializers import (
    ApplicationSerializer,
    OfferSerializer,
    OnboardingDocumentSerializer,
    OnboardingSerializer,
)
from .services import (
    create_onboarding,
    create_onboarding_document,
    delete_onboarding,
    delete_onboarding_document,
    delete_onboarding_task,
    list_documents_by_owner,
    list_onboarding_documents,
    list_onboardings,
    list_onboardings_by_employee,
    update_onboarding,
    update_onboarding_document,
)

HR_ROLES = [SystemRole.HR_MANAGER, SystemRole.HR_EMPLOYEE, SystemRole.SYSTEM_ADMIN]


class RecruitmentViewSet(viewsets.ModelViewSet):
    permission_classes = [permissions.IsAuthenticated, HasSystemRole]
    role_map = {"*": HR_ROLES}


class ApplicationViewSet(RecruitmentViewSet):
    queryset = Application.objects.all()
    serializer_class = ApplicationSerializer


class OfferViewSet(RecruitmentViewSet):
    queryset = Offer.objects.select_related("application")
    serializer_class = OfferSerializer


class OnboardingDocumentViewSet(RecruitmentViewSet):
    serializer_class = OnboardingDocumentSerializer
    role_map = {
        "create": HR_ROLES + [SystemRole.DEPARTMENT_EMPLOYEE, SystemRole.JOB_CANDIDATE],
        "*": HR_ROLES,
    }

    def get_queryset(self):
        return list_onboarding_documents()

    def perform_create(self, serializer):
        data = serializer.validated_data
        serializer.instance = create_onboarding_document(
            owner=data["owner"],
            type=data["type"],
            file_path=data["file_path"],
        )

    def perform_update(self, serializer):
        serializer.instance = update_onboarding_document(serializer.instance.id, serializer.validated_data)

    def perform_destroy(self, instance):
        delete_onboarding_document(instance.id)

    @action(detail=False, methods=["get"], url_path=r"by-owner/(?P<owner_id>[^/.]+)")
    def by_owner(self, request, owner_id=None):
        documents = list_documents_by_owner(owner_id)
        return api_response(
            success=True,
            message="Onboarding documents retrieved.",
            data=self.get_serializer(documents, many=True).data,
        )


class OnboardingViewSet(RecruitmentViewSet):
    serializer_class = OnboardingSerializer

    def get_queryset(self):
        return list_onboardings()

    def perform_create(self, serializer):
        data = serializer.validated_data
        serializer.instance = create_onboarding(
            employee=data["employee"],
            contract=data.get("contract"),
            tasks=data.get("tasks"),
        )

    def perform_update(self, serializer):
        instance = serializer.instance
        serializer.instance = update_onboarding(instance.id, dict(serializer.validated_data))

    def perform_destroy(self, instance):
        delete_onboarding(instance.id)

    @action(detail=False, methods=["get"], url_path=r"by-employee/(?P<employee_id>[^/.]+)")
    def by_employee(self, request, employee_id=None):
        onboardings = list_onboardings_by_employee(employee_id)
        return api_response(
            success=True,
            message="Onboarding tasks retrieved.",
            data=self.get_serializer(onboardings, many=True).data,
        )

    @action(detail=True, methods=["delete"], url_path=r"tasks/(?P<task_index>-?\d+)")
    def delete_task(self, request, pk=None, task_index=None):
        onboarding = delete_onboarding_task(pk, int(task_index))
        return api_response(
            success=True,
            message="Onboarding task removed.",
            data=self.get_serializer(onboarding).data,
            status=status.HTTP_200_OK,
        )
