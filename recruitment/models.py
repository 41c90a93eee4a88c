import uuid
from decimal import Decimal

from django.conf import settings
from django.db import models


class Application(models.Model):
    STATUS_SUBMITTED = "SUBMITTED"
    STATUS_IN_PROCESS = "IN_PROCESS"
    STATUS_OFFER = "OFFER"
    STATUS_HIRED = "HIRED"
    STATUS_REJECTED = "REJECTED"

    STATUS_CHOICES = [
        (STATUS_SUBMITTED, "Submitted"),
        (STATUS_IN_PROCESS, "In process"),
        (STATUS_OFFER, "Offer"),
        (STATUS_HIRED, "Hired"),
        (STATUS_REJECTED, "Rejected"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    candidate = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="applications",
    )
    position_title = models.CharField(max_length=255)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=STATUS_SUBMITTED)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "recruitment_applications"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["status"], name="recruitment_status_2b81fe_idx"),
        ]

    def __str__(self):
        return f"{self.position_title} - {self.candidate_id} ({self.status})"


class Offer(models.Model):
    RESPONSE_PENDING = "PENDING"
    RESPONSE_ACCEPTED = "ACCEPTED"
    RESPONSE_REJECTED = "REJECTED"

    RESPONSE_CHOICES = [
        (RESPONSE_PENDING, "Pending"),
        (RESPONSE_ACCEPTED, "Accepted"),
        (RESPONSE_REJECTED, "Rejected"),
    ]

    FINAL_PENDING = "PENDING"
    FINAL_APPROVED = "APPROVED"
    FINAL_REJECTED = "REJECTED"

    FINAL_STATUS_CHOICES = [
        (FINAL_PENDING, "Pending"),
        (FINAL_APPROVED, "Approved"),
        (FINAL_REJECTED, "Rejected"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    application = models.ForeignKey(
        Application,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="offers",
    )
    candidate = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="offers",
    )
    hr_employee = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="managed_offers",
    )
    role = models.CharField(max_length=255)
    gross_salary = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal("0.00"))
    signing_bonus = models.DecimalField(max_digits=12, decimal_places=2, blank=True, null=True)
    benefits = models.JSONField(default=list, blank=True)
    applicant_response = models.CharField(max_length=20, choices=RESPONSE_CHOICES, default=RESPONSE_PENDING)
    final_status = models.CharField(max_length=20, choices=FINAL_STATUS_CHOICES, default=FINAL_PENDING)
    deadline = models.DateTimeField(blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "recruitment_offers"
        ordering = ["-created_at"]

    def __str__(self):
        return f"Offer {self.role} for {self.candidate_id}"


class OnboardingDocument(models.Model):
    TYPE_CV = "cv"
    TYPE_CONTRACT = "contract"
    TYPE_ID = "id"
    TYPE_CERTIFICATE = "certificate"
    TYPE_RESIGNATION = "resignation"

    TYPE_CHOICES = [
        (TYPE_CV, "CV"),
        (TYPE_CONTRACT, "Contract"),
        (TYPE_ID, "ID"),
        (TYPE_CERTIFICATE, "Certificate"),
        (TYPE_RESIGNATION, "Resignation"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="onboarding_documents",
    )
    type = models.CharField(max_length=20, choices=TYPE_CHOICES)
    file_path = models.CharField(max_length=500)
    uploaded_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "recruitment_documents"
        ordering = ["-uploaded_at"]

    def __str__(self):
        return f"{self.type}: {self.file_path}"


class Onboarding(models.Model):
    """Onboarding checklist for a new hire.

    ``tasks`` is a list of ``{name, department, status, deadline, completed_at,
    document_id, notes}`` dictionaries, in display order.
    """

    TASK_PENDING = "pending"
    TASK_IN_PROGRESS = "in_progress"
    TASK_COMPLETED = "completed"

    TASK_STATUS_CHOICES = [
        (TASK_PENDING, "Pending"),
        (TASK_IN_PROGRESS, "In progress"),
        (TASK_COMPLETED, "Completed"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    employee = models.ForeignKey(
        "employees.Employee",
        on_delete=models.CASCADE,
        related_name="onboardings",
    )
    contract = models.ForeignKey(
        "contracts.Contract",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="onboardings",
    )
    tasks = models.JSONField(default=list, blank=True)
    completed = models.BooleanField(default=False)
    completed_at = models.DateTimeField(blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "recruitment_onboardings"
        ordering = ["-created_at"]

    def __str__(self):
        return f"Onboarding for {self.employee_id}"

    @property
    def all_tasks_completed(self):
        return bool(self.tasks) and all(
            (task or {}).get("status") == self.TASK_COMPLETED for task in self.tasks
        )
