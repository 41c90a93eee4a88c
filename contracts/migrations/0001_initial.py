import uuid
from decimal import Decimal

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('recruitment', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Contract',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('acceptance_date', models.DateTimeField(blank=True, null=True)),
                ('gross_salary', models.DecimalField(decimal_places=2, default=Decimal('0.00'), max_digits=12)),
                ('signing_bonus', models.DecimalField(blank=True, decimal_places=2, max_digits=12, null=True)),
                ('role', models.CharField(blank=True, default='', max_length=255)),
                ('benefits', models.JSONField(blank=True, default=list)),
                ('employee_signature_url', models.CharField(blank=True, max_length=500, null=True)),
                ('employer_signature_url', models.CharField(blank=True, max_length=500, null=True)),
                ('employee_signed_at', models.DateTimeField(blank=True, null=True)),
                ('employer_signed_at', models.DateTimeField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('document', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='contracts', to='recruitment.onboardingdocument')),
                ('offer', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='contracts', to='recruitment.offer')),
            ],
            options={
                'verbose_name': 'Contract',
                'verbose_name_plural': 'Contracts',
                'db_table': 'contracts',
                'ordering': ['-created_at'],
            },
        ),
    ]
