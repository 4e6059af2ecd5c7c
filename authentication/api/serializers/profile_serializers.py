from rest_framework import serializers

from authentication.domain.models import AccountSettings, HelpRequest, UserAddress


class ProfileUpdateSerializer(serializers.Serializer):
    name = serializers.CharField(min_length=2, max_length=100, required=False)
    profile_url = serializers.URLField(max_length=500, required=False, allow_null=True)
    phone = serializers.CharField(max_length=20, required=False, allow_blank=True, allow_null=True)
    location = serializers.CharField(max_length=255, required=False, allow_blank=True, allow_null=True)
    bio = serializers.CharField(max_length=500, required=False, allow_blank=True, allow_null=True)


class UserAddressSerializer(serializers.ModelSerializer):
    """Address as stored; also validates create payloads."""

    class Meta:
        model = UserAddress
        fields = (
            "id",
            "label",
            "contact_name",
            "contact_number",
            "address_line1",
            "address_line2",
            "city",
            "state",
            "pincode",
            "landmark",
            "is_default",
            "created_at",
            "updated_at",
        )
        read_only_fields = ("id", "created_at", "updated_at")
        extra_kwargs = {
            "pincode": {"min_length": 4, "max_length": 12},
        }


class AccountSettingsSerializer(serializers.ModelSerializer):
    class Meta:
        model = AccountSettings
        fields = (
            "order_message_notifications",
            "order_activity_notifications",
            "do_not_disturb_enabled",
            "do_not_disturb_from",
            "do_not_disturb_to",
            "updated_at",
        )
        read_only_fields = ("updated_at",)
        extra_kwargs = {
            "do_not_disturb_from": {"allow_null": True},
            "do_not_disturb_to": {"allow_null": True},
        }


class HelpRequestSerializer(serializers.ModelSerializer):
    class Meta:
        model = HelpRequest
        fields = ("id", "name", "email", "phone", "subject", "message", "attachment_url", "created_at")
        read_only_fields = ("id", "created_at")
