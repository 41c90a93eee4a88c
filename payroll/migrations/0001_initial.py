import uuid
from decimal import Decimal

import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
        ('employees', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='SigningBonus',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('position_name', models.CharField(db_index=True, max_length=255)),
                ('amount', models.DecimalField(decimal_places=2, default=Decimal('0.00'), max_digits=12)),
                ('status', models.CharField(choices=[('DRAFT', 'Draft'), ('APPROVED', 'Approved'), ('REJECTED', 'Rejected')], default='DRAFT', max_length=20)),
                ('approved_at', models.DateTimeField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'verbose_name': 'Signing Bonus',
                'verbose_name_plural': 'Signing Bonuses',
                'db_table': 'payroll_signing_bonuses',
                'ordering': ['-created_at'],
            },
        ),
        migrations.CreateModel(
            name='PayrollRun',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('run_id', models.CharField(help_text='Business identifier, e.g. PR-2025-0001', max_length=60, unique=True)),
                ('payroll_period', models.DateTimeField(db_index=True, help_text='Period end marker (last day of the month)')),
                ('status', models.CharField(choices=[('DRAFT', 'Draft'), ('UNDER_REVIEW', 'Under review'), ('PENDING_FINANCE_APPROVAL', 'Pending finance approval'), ('REJECTED', 'Rejected'), ('UNLOCKED', 'Unlocked'), ('APPROVED', 'Approved'), ('LOCKED', 'Locked')], default='DRAFT', max_length=30)),
                ('payment_status', models.CharField(choices=[('PENDING', 'Pending'), ('PAID', 'Paid')], default='PENDING', max_length=20)),
                ('entity', models.CharField(blank=True, max_length=255, null=True)),
                ('employees', models.PositiveIntegerField(default=0)),
                ('exceptions', models.PositiveIntegerField(default=0)),
                ('total_net_pay', models.DecimalField(decimal_places=2, default=Decimal('0.00'), max_digits=14)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('payroll_specialist', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='initiated_payroll_runs', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'Payroll Run',
                'verbose_name_plural': 'Payroll Runs',
                'db_table': 'payroll_runs',
                'ordering': ['-payroll_period'],
                'indexes': [models.Index(fields=['payroll_period', 'status'], name='payroll_run_payroll_7c2a4d_idx')],
            },
        ),
        migrations.CreateModel(
            name='EmployeeSigningBonus',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('given_amount', models.DecimalField(blank=True, decimal_places=2, max_digits=12, null=True)),
                ('status', models.CharField(choices=[('PENDING', 'Pending'), ('APPROVED', 'Approved'), ('REJECTED', 'Rejected'), ('PAID', 'Paid')], default='PENDING', max_length=20)),
                ('approved_at', models.DateTimeField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('employee', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='signing_bonuses', to='employees.employee')),
                ('signing_bonus', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='employee_bonuses', to='payroll.signingbonus')),
            ],
            options={
                'verbose_name': 'Employee Signing Bonus',
                'verbose_name_plural': 'Employee Signing Bonuses',
                'db_table': 'payroll_employee_signing_bonuses',
                'ordering': ['-created_at'],
                'indexes': [models.Index(fields=['employee', 'status'], name='payroll_emp_employe_3e9f1b_idx')],
            },
        ),
    ]
