import uuid

from django.conf import settings
from django.db import models


class Employee(models.Model):
    """Employee master record created when a hire is provisioned"""

    STATUS_ACTIVE = 'ACTIVE'
    STATUS_INACTIVE = 'INACTIVE'
    STATUS_ON_LEAVE = 'ON_LEAVE'
    STATUS_SUSPENDED = 'SUSPENDED'
    STATUS_PROBATION = 'PROBATION'
    STATUS_TERMINATED = 'TERMINATED'

    EMPLOYMENT_STATUS_CHOICES = [
        (STATUS_ACTIVE, 'Active'),
        (STATUS_INACTIVE, 'Inactive'),
        (STATUS_ON_LEAVE, 'On Leave'),
        (STATUS_SUSPENDED, 'Suspended'),
        (STATUS_PROBATION, 'Probation'),
        (STATUS_TERMINATED, 'Terminated'),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='employee',
    )

    employee_number = models.CharField(max_length=50, unique=True)
    work_email = models.EmailField(unique=True)
    personal_email = models.EmailField(blank=True, null=True)
    mobile_phone = models.CharField(max_length=20, blank=True, null=True)

    first_name = models.CharField(max_length=100)
    middle_name = models.CharField(max_length=100, blank=True, null=True)
    last_name = models.CharField(max_length=100)
    # Provisioned hires start with a PENDING-<employee number> placeholder
    national_id = models.CharField(max_length=50, unique=True)

    date_of_hire = models.DateField()
    date_of_birth = models.DateField(blank=True, null=True)
    job_title = models.CharField(max_length=255, blank=True, null=True)
    status = models.CharField(max_length=20, choices=EMPLOYMENT_STATUS_CHOICES, default=STATUS_ACTIVE)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'employees'
        verbose_name = 'Employee'
        verbose_name_plural = 'Employees'
        indexes = [
            models.Index(fields=['status'], name='employees_status_4f1c2a_idx'),
        ]
        ordering = ['last_name', 'first_name']

    def __str__(self):
        return f"{self.first_name} {self.last_name} ({self.employee_number})"

    @property
    def full_name(self):
        if self.middle_name:
            return f"{self.first_name} {self.middle_name} {self.last_name}"
        return f"{self.first_name} {self.last_name}"

    @property
    def is_active(self):
        return self.status == self.STATUS_ACTIVE
