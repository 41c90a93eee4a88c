from rest_framework import mixins, permissions, viewsets
from rest_framework.decorators import action

from accounts.models import SystemRole
from accounts.permissions import HasSystemRole
from accounts.utils import api_response
from recruitment.onboarding import update_contract

from .models import Contract
from .serializers import ContractSerializer, ContractUpdateSerializer
from .services import get_contract, get_contract_by_offer

HR_ROLES = [SystemRole.HR_MANAGER, SystemRole.HR_EMPLOYEE, SystemRole.SYSTEM_ADMIN]


class ContractViewSet(
    mixins.ListModelMixin,
    mixins.CreateModelMixin,
    mixins.RetrieveModelMixin,
    viewsets.GenericViewSet,
):
    """
    Contracts created from accepted offers.

    ``PATCH /contracts/<id>/`` records signatures; the update that completes
    both signatures provisions the new hire.
    """

    queryset = Contract.objects.select_related('offer')
    serializer_class = ContractSerializer
    permission_classes = [permissions.IsAuthenticated, HasSystemRole]
    role_map = {
        'partial_update': HR_ROLES + [SystemRole.JOB_CANDIDATE],
        'retrieve': HR_ROLES + [SystemRole.JOB_CANDIDATE],
        '*': HR_ROLES,
    }

    def get_object(self):
        contract = get_contract(self.kwargs['pk'])
        self.check_object_permissions(self.request, contract)
        return contract

    def partial_update(self, request, pk=None):
        contract = self.get_object()
        serializer = ContractUpdateSerializer(contract, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        updated = update_contract(contract.id, dict(serializer.validated_data))
        return api_response(
            success=True,
            message='Contract updated.',
            data=ContractSerializer(updated).data,
        )

    @action(detail=False, methods=['get'], url_path=r'by-offer/(?P<offer_id>[^/.]+)')
    def by_offer(self, request, offer_id=None):
        contract = get_contract_by_offer(offer_id)
        return api_response(
            success=True,
            message='Contract retrieved.',
            data=ContractSerializer(contract).data,
        )
