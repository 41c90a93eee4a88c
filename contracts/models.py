import uuid
from decimal import Decimal

from django.db import models


class Contract(models.Model):
    """Employment contract produced from an accepted offer"""

    STATE_NEITHER_SIGNED = 'NEITHER_SIGNED'
    STATE_EMPLOYEE_SIGNED = 'EMPLOYEE_SIGNED'
    STATE_EMPLOYER_SIGNED = 'EMPLOYER_SIGNED'
    STATE_FULLY_EXECUTED = 'FULLY_EXECUTED'

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    offer = models.ForeignKey(
        'recruitment.Offer',
        on_delete=models.CASCADE,
        related_name='contracts',
    )
    acceptance_date = models.DateTimeField(blank=True, null=True)

    # Compensation copied from the offer
    gross_salary = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal('0.00'))
    signing_bonus = models.DecimalField(max_digits=12, decimal_places=2, blank=True, null=True)
    role = models.CharField(max_length=255, blank=True, default='')
    benefits = models.JSONField(default=list, blank=True)

    document = models.ForeignKey(
        'recruitment.OnboardingDocument',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='contracts',
    )

    # Signatures
    employee_signature_url = models.CharField(max_length=500, blank=True, null=True)
    employer_signature_url = models.CharField(max_length=500, blank=True, null=True)
    employee_signed_at = models.DateTimeField(blank=True, null=True)
    employer_signed_at = models.DateTimeField(blank=True, null=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'contracts'
        verbose_name = 'Contract'
        verbose_name_plural = 'Contracts'
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.role or 'Contract'} ({self.signature_state})"

    @property
    def is_fully_executed(self):
        """Employee signature artifact and employer signature timestamp are both on file."""
        return bool(self.employee_signature_url) and self.employer_signed_at is not None

    @property
    def signature_state(self):
        if self.is_fully_executed:
            return self.STATE_FULLY_EXECUTED
        if self.employee_signature_url:
            return self.STATE_EMPLOYEE_SIGNED
        if self.employer_signed_at is not None:
            return self.STATE_EMPLOYER_SIGNED
        return self.STATE_NEITHER_SIGNED
