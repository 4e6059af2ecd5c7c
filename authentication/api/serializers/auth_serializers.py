from rest_framework import serializers

from authentication.domain.models import CustomUser


class UserSerializer(serializers.ModelSerializer):
    """Public representation of an account. Never exposes codes or the password hash."""

    class Meta:
        model = CustomUser
        fields = (
            "id",
            "email",
            "name",
            "is_email_verified",
            "profile_url",
            "phone",
            "location",
            "bio",
            "created_at",
            "updated_at",
        )
        read_only_fields = fields


class UserRegistrationSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(min_length=6, write_only=True, style={"input_type": "password"})
    name = serializers.CharField(max_length=100, required=False, allow_blank=True)
    phone = serializers.CharField(max_length=20, required=False, allow_blank=True)
    location = serializers.CharField(max_length=255, required=False, allow_blank=True)

    def validate_email(self, value):
        return value.strip().lower()


class LoginUserSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True, style={"input_type": "password"})


class VerifyEmailSerializer(serializers.Serializer):
    email = serializers.EmailField()
    verification_code = serializers.CharField(max_length=12)


class EmailOnlySerializer(serializers.Serializer):
    """Body of resend-verification and OTP request calls."""

    email = serializers.EmailField()


class LoginWithOtpSerializer(serializers.Serializer):
    email = serializers.EmailField()
    otp = serializers.CharField(min_length=4, max_length=10)
