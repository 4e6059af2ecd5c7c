from rest_framework import serializers

from .models import Notification, NotificationType


class NotificationSerializer(serializers.ModelSerializer):
    user_id = serializers.UUIDField(read_only=True)
    order_id = serializers.UUIDField(read_only=True, allow_null=True)

    class Meta:
        model = Notification
        fields = ["id", "user_id", "type", "title", "message", "order_id", "metadata", "is_read", "read_at", "created_at"]
        read_only_fields = fields


class NotificationListQuerySerializer(serializers.Serializer):
    """Query string of the notification list"""

    is_read = serializers.BooleanField(required=False, allow_null=True, default=None)
    type = serializers.ChoiceField(choices=NotificationType.choices, required=False)
    page = serializers.IntegerField(min_value=1, default=1)
    limit = serializers.IntegerField(min_value=1, max_value=100, default=20)


class NotificationMetaSerializer(serializers.Serializer):
    total = serializers.IntegerField()
    page = serializers.IntegerField()
    limit = serializers.IntegerField()
    unread_count = serializers.IntegerField()


class NotificationListResponseSerializer(serializers.Serializer):
    data = NotificationSerializer(many=True)
    meta = NotificationMetaSerializer()


class MarkAllReadResponseSerializer(serializers.Serializer):
    updated = serializers.IntegerField()
