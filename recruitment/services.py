import logging

from django.utils import timezone
from rest_framework.exceptions import NotFound, ValidationError

from .models import Onboarding, OnboardingDocument

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Onboarding documents
# ---------------------------------------------------------------------------

def create_onboarding_document(*, owner, type, file_path) -> OnboardingDocument:
    return OnboardingDocument.objects.create(owner=owner, type=type, file_path=file_path)


def list_onboarding_documents():
    return OnboardingDocument.objects.all()


def get_onboarding_document(document_id) -> OnboardingDocument:
    document = OnboardingDocument.objects.filter(id=document_id).first()
    if not document:
        raise NotFound("Onboarding document not found")
    return document


def list_documents_by_owner(owner_id):
    return OnboardingDocument.objects.filter(owner_id=owner_id)


def update_onboarding_document(document_id, changes: dict) -> OnboardingDocument:
    document = get_onboarding_document(document_id)
    for field in ("type", "file_path"):
        if field in changes:
            setattr(document, field, changes[field])
    document.save()
    return document


def delete_onboarding_document(document_id) -> OnboardingDocument:
    document = get_onboarding_document(document_id)
    document.delete()
    return document


# ---------------------------------------------------------------------------
# Onboarding checklists
# ---------------------------------------------------------------------------

def _normalize_tasks(tasks):
    normalized = []
    for task in tasks or []:
        task = dict(task)
        task.setdefault("status", Onboarding.TASK_PENDING)
        if task["status"] == Onboarding.TASK_COMPLETED and not task.get("completed_at"):
            task["completed_at"] = timezone.now().isoformat()
        normalized.append(task)
    return normalized


def _sync_completion(onboarding: Onboarding):
    if onboarding.all_tasks_completed:
        if not onboarding.completed:
            onboarding.completed = True
            onboarding.completed_at = timezone.now()
    else:
        onboarding.completed = False
        onboarding.completed_at = None


def create_onboarding(*, employee, tasks=None, contract=None) -> Onboarding:
    onboarding = Onboarding(employee=employee, contract=contract, tasks=_normalize_tasks(tasks))
    _sync_completion(onboarding)
    onboarding.save()
    return onboarding


def list_onboardings():
    return Onboarding.objects.select_related("employee").all()


def get_onboarding(onboarding_id) -> Onboarding:
    onboarding = Onboarding.objects.filter(id=onboarding_id).first()
    if not onboarding:
        raise NotFound(f"Onboarding record with ID {onboarding_id} not found")
    return onboarding


def list_onboardings_by_employee(employee_id):
    onboardings = list(Onboarding.objects.filter(employee_id=employee_id))
    if not onboardings:
        raise NotFound(f"No onboarding tasks found for employee ID {employee_id}")
    return onboardings


def update_onboarding(onboarding_id, changes: dict) -> Onboarding:
    onboarding = get_onboarding(onboarding_id)
    if "tasks" in changes:
        onboarding.tasks = _normalize_tasks(changes["tasks"])
    if "contract" in changes:
        onboarding.contract = changes["contract"]
    _sync_completion(onboarding)
    onboarding.save()
    if onboarding.completed:
        logger.info("Onboarding %s completed for employee %s", onboarding.id, onboarding.employee_id)
    return onboarding


def delete_onboarding_task(onboarding_id, task_index: int) -> Onboarding:
    onboarding = get_onboarding(onboarding_id)
    if task_index < 0 or task_index >= len(onboarding.tasks):
        raise ValidationError({"detail": "Invalid task index"})
    tasks = list(onboarding.tasks)
    tasks.pop(task_index)
    onboarding.tasks = tasks
    _sync_completion(onboarding)
    onboarding.save()
    return onboarding


def delete_onboarding(onboarding_id) -> None:
    onboarding = get_onboarding(onboarding_id)
    onboarding.delete()
