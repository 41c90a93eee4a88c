from rest_framework import serializers

from .models import Notification


class NotificationSerializer(serializers.ModelSerializer):
    """Serializer for in-app notifications (read-only for feeds)"""

    class Meta:
        model = Notification
        fields = (
            'id',
            'title',
            'body',
            'type',
            'status',
            'data',
            'created_at',
            'read_at',
        )
        read_only_fields = fields


class NotificationMarkReadSerializer(serializers.Serializer):
    """Serializer to mark notifications as read"""
    notification_ids = serializers.ListField(
        child=serializers.IntegerField(),
        allow_empty=False,
    )
