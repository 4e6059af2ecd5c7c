"""
Response Serializers for API Documentation

These serializers define the structure of API responses for OpenAPI schema generation.
They are NOT used for data validation, only for documentation in Swagger/ReDoc.
"""

from rest_framework import serializers

from .auth_serializers import UserSerializer


class ErrorResponseSerializer(serializers.Serializer):
    detail = serializers.CharField(help_text="Error message")


class MessageResponseSerializer(serializers.Serializer):
    message = serializers.CharField(help_text="Outcome of the operation")


class RegisterResponseSerializer(serializers.Serializer):
    """Response for successful registration"""

    message = serializers.CharField(help_text="Success message with instructions")
    user = UserSerializer(help_text="Newly registered user details")


class AuthTokenResponseSerializer(serializers.Serializer):
    """Response for login, OTP login and email verification"""

    message = serializers.CharField(help_text="Success message")
    access_token = serializers.CharField(help_text="JWT access token")
    refresh_token = serializers.CharField(help_text="JWT refresh token")
    user = UserSerializer(help_text="Authenticated user")
