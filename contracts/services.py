from django.utils import timezone
from rest_framework.exceptions import NotFound

from .models import Contract

# Fields a partial contract update may set
UPDATABLE_FIELDS = (
    'acceptance_date',
    'gross_salary',
    'signing_bonus',
    'role',
    'benefits',
    'document',
    'employee_signature_url',
    'employer_signature_url',
    'employee_signed_at',
    'employer_signed_at',
)


def create_contract(*, offer, **fields):
    return Contract.objects.create(offer=offer, **fields)


def list_contracts():
    return Contract.objects.select_related('offer').all()


def get_contract(contract_id):
    contract = Contract.objects.select_related('offer').filter(id=contract_id).first()
    if not contract:
        raise NotFound(f"Contract with ID {contract_id} not found")
    return contract


def get_contract_by_offer(offer_id):
    contract = Contract.objects.select_related('offer').filter(offer_id=offer_id).first()
    if not contract:
        raise NotFound(f"Contract for offer ID {offer_id} not found")
    return contract


def apply_contract_changes(contract, changes):
    """Merge ``changes`` into ``contract`` and save the touched fields.

    An employee signature uploaded without a timestamp is stamped with the
    current time.
    """
    touched = []
    for field, value in (changes or {}).items():
        if field not in UPDATABLE_FIELDS:
            continue
        setattr(contract, field, value)
        touched.append(field)

    if 'employee_signature_url' in touched and contract.employee_signature_url and not contract.employee_signed_at:
        contract.employee_signed_at = timezone.now()
        if 'employee_signed_at' not in touched:
            touched.append('employee_signed_at')

    if touched:
        contract.save(update_fields=touched + ['updated_at'])
    return contract
