import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Notification',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('title', models.CharField(help_text='Notification type, e.g. "Contract Fully Executed"', max_length=255)),
                ('body', models.TextField(blank=True)),
                ('type', models.CharField(choices=[('INFO', 'Info'), ('ACTION', 'Action'), ('ALERT', 'Alert')], default='INFO', max_length=20)),
                ('status', models.CharField(choices=[('UNREAD', 'Unread'), ('READ', 'Read')], db_index=True, default='UNREAD', max_length=20)),
                ('data', models.JSONField(blank=True, help_text='Additional payload for the frontend', null=True)),
                ('read_at', models.DateTimeField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='notifications', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'notifications',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['user', 'status'], name='notificatio_user_id_8a7c3e_idx'),
                    models.Index(fields=['created_at'], name='notificatio_created_5b2d91_idx'),
                ],
            },
        ),
    ]
