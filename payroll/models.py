import uuid
from decimal import Decimal

from django.conf import settings
from django.db import models


class SigningBonus(models.Model):
    """Signing bonus policy for a position (payroll configuration)."""

    STATUS_DRAFT = "DRAFT"
    STATUS_APPROVED = "APPROVED"
    STATUS_REJECTED = "REJECTED"

    STATUS_CHOICES = [
        (STATUS_DRAFT, "Draft"),
        (STATUS_APPROVED, "Approved"),
        (STATUS_REJECTED, "Rejected"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    position_name = models.CharField(max_length=255, db_index=True)
    amount = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal("0.00"))
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=STATUS_DRAFT)
    approved_at = models.DateTimeField(blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "payroll_signing_bonuses"
        verbose_name = "Signing Bonus"
        verbose_name_plural = "Signing Bonuses"
        ordering = ["-created_at"]

    def __str__(self):
        return f"{self.position_name} ({self.amount})"


class EmployeeSigningBonus(models.Model):
    """A signing bonus granted to one employee (payroll execution)."""

    STATUS_PENDING = "PENDING"
    STATUS_APPROVED = "APPROVED"
    STATUS_REJECTED = "REJECTED"
    STATUS_PAID = "PAID"

    STATUS_CHOICES = [
        (STATUS_PENDING, "Pending"),
        (STATUS_APPROVED, "Approved"),
        (STATUS_REJECTED, "Rejected"),
        (STATUS_PAID, "Paid"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    employee = models.ForeignKey(
        "employees.Employee",
        on_delete=models.CASCADE,
        related_name="signing_bonuses",
    )
    signing_bonus = models.ForeignKey(
        SigningBonus,
        on_delete=models.PROTECT,
        related_name="employee_bonuses",
    )
    given_amount = models.DecimalField(max_digits=12, decimal_places=2, blank=True, null=True)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=STATUS_PENDING)
    approved_at = models.DateTimeField(blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "payroll_employee_signing_bonuses"
        verbose_name = "Employee Signing Bonus"
        verbose_name_plural = "Employee Signing Bonuses"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["employee", "status"], name="payroll_emp_employe_3e9f1b_idx"),
        ]

    def __str__(self):
        return f"{self.employee_id} - {self.signing_bonus_id} ({self.status})"


class PayrollRun(models.Model):
    """A period-scoped payroll batch."""

    STATUS_DRAFT = "DRAFT"
    STATUS_UNDER_REVIEW = "UNDER_REVIEW"
    STATUS_PENDING_FINANCE_APPROVAL = "PENDING_FINANCE_APPROVAL"
    STATUS_REJECTED = "REJECTED"
    STATUS_UNLOCKED = "UNLOCKED"
    STATUS_APPROVED = "APPROVED"
    STATUS_LOCKED = "LOCKED"

    STATUS_CHOICES = [
        (STATUS_DRAFT, "Draft"),
        (STATUS_UNDER_REVIEW, "Under review"),
        (STATUS_PENDING_FINANCE_APPROVAL, "Pending finance approval"),
        (STATUS_REJECTED, "Rejected"),
        (STATUS_UNLOCKED, "Unlocked"),
        (STATUS_APPROVED, "Approved"),
        (STATUS_LOCKED, "Locked"),
    ]

    PAYMENT_PENDING = "PENDING"
    PAYMENT_PAID = "PAID"

    PAYMENT_STATUS_CHOICES = [
        (PAYMENT_PENDING, "Pending"),
        (PAYMENT_PAID, "Paid"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    run_id = models.CharField(max_length=60, unique=True, help_text="Business identifier, e.g. PR-2025-0001")
    payroll_period = models.DateTimeField(db_index=True, help_text="Period end marker (last day of the month)")
    status = models.CharField(max_length=30, choices=STATUS_CHOICES, default=STATUS_DRAFT)
    payment_status = models.CharField(max_length=20, choices=PAYMENT_STATUS_CHOICES, default=PAYMENT_PENDING)
    entity = models.CharField(max_length=255, blank=True, null=True)
    employees = models.PositiveIntegerField(default=0)
    exceptions = models.PositiveIntegerField(default=0)
    total_net_pay = models.DecimalField(max_digits=14, decimal_places=2, default=Decimal("0.00"))
    payroll_specialist = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        blank=True,
        null=True,
        related_name="initiated_payroll_runs",
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "payroll_runs"
        verbose_name = "Payroll Run"
        verbose_name_plural = "Payroll Runs"
        ordering = ["-payroll_period"]
        indexes = [
            models.Index(fields=["payroll_period", "status"], name="payroll_run_payroll_7c2a4d_idx"),
        ]

    def __str__(self):
        return f"{self.run_id} ({self.status})"
