from django.contrib.auth import get_user_model
from rest_framework import serializers


User = get_user_model()


class UserSummarySerializer(serializers.ModelSerializer):
    """Public identity of a seller or remark author."""

    class Meta:
        model = User
        fields = ["id", "name", "profile_url"]
        read_only_fields = fields


class CreatorSummarySerializer(serializers.ModelSerializer):
    class Meta:
        model = User
        fields = ["id", "name", "profile_url", "location"]
        read_only_fields = fields
