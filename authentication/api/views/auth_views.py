from drf_spectacular.utils import OpenApiExample, OpenApiResponse, extend_schema
from rest_framework import permissions, status
from rest_framework.response import Response
from rest_framework.views import APIView

from authentication.api.serializers import (
    EmailOnlySerializer,
    LoginUserSerializer,
    LoginWithOtpSerializer,
    UserRegistrationSerializer,
    UserSerializer,
    VerifyEmailSerializer,
)
from authentication.api.serializers.response_serializers import (
    AuthTokenResponseSerializer,
    ErrorResponseSerializer,
    MessageResponseSerializer,
    RegisterResponseSerializer,
)
from authentication.domain.services.auth_service import AuthService
from authentication.infra.mail.django_email_provider import DjangoEmailProvider


# Dependency Injection Helper
def get_auth_service():
    """Factory to get AuthService instance with dependencies."""
    return AuthService(email_provider=DjangoEmailProvider())


def token_response(result):
    """Shape a LoginResult into the HTTP response shared by every token-issuing endpoint."""
    if not result.success:
        return Response({"detail": result.error}, status=result.status_code)
    return Response(
        {
            "message": result.message,
            "access_token": result.access_token,
            "refresh_token": result.refresh_token,
            "user": UserSerializer(result.user).data,
        },
        status=status.HTTP_200_OK,
    )


class RegisterAPIView(APIView):
    permission_classes = [permissions.AllowAny]
    authentication_classes = []

    @extend_schema(
        operation_id="auth_register",
        summary="Register new user account",
        description="""
        Create a new account and email a numeric verification code.

        **What it receives:** email, password (6+ chars), optional name, phone and location.
        **What it returns:** the created user. Login is refused until the email is verified.
        """,
        request=UserRegistrationSerializer,
        responses={
            201: OpenApiResponse(response=RegisterResponseSerializer, description="Account created"),
            400: OpenApiResponse(description="Validation error"),
            409: OpenApiResponse(response=ErrorResponseSerializer, description="Email already registered"),
        },
        tags=["Authentication"],
    )
    def post(self, request):
        serializer = UserRegistrationSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = get_auth_service().register(**serializer.validated_data)
        if not result.success:
            return Response({"detail": result.error}, status=result.status_code)

        return Response(
            {"message": result.message, "user": UserSerializer(result.user).data},
            status=status.HTTP_201_CREATED,
        )


class LoginAPIView(APIView):
    permission_classes = [permissions.AllowAny]
    authentication_classes = []

    @extend_schema(
        operation_id="auth_login",
        summary="Login with email and password",
        request=LoginUserSerializer,
        responses={
            200: OpenApiResponse(
                response=AuthTokenResponseSerializer,
                description="Login successful",
                examples=[
                    OpenApiExample(
                        "Successful Login",
                        value={
                            "message": "Login successful",
                            "access_token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                            "refresh_token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                            "user": {
                                "id": "123e4567-e89b-12d3-a456-426614174000",
                                "email": "user@example.com",
                                "name": "Asha Rao",
                                "is_email_verified": True,
                            },
                        },
                    )
                ],
            ),
            401: OpenApiResponse(
                response=ErrorResponseSerializer, description="Invalid credentials or email not verified"
            ),
        },
        tags=["Authentication"],
    )
    def post(self, request):
        serializer = LoginUserSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = get_auth_service().login(serializer.validated_data["email"], serializer.validated_data["password"])
        return token_response(result)


class VerifyEmailView(APIView):
    permission_classes = [permissions.AllowAny]
    authentication_classes = []

    @extend_schema(
        operation_id="auth_verify_email",
        summary="Verify email with the emailed code",
        request=VerifyEmailSerializer,
        responses={
            200: OpenApiResponse(response=AuthTokenResponseSerializer, description="Email verified, tokens issued"),
            400: OpenApiResponse(
                response=ErrorResponseSerializer,
                description="User not found, already verified, invalid or expired code",
            ),
        },
        tags=["Authentication"],
    )
    def post(self, request):
        serializer = VerifyEmailSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = get_auth_service().verify_email(
            serializer.validated_data["email"], serializer.validated_data["verification_code"]
        )
        return token_response(result)


class ResendVerificationView(APIView):
    permission_classes = [permissions.AllowAny]
    authentication_classes = []

    @extend_schema(
        operation_id="auth_resend_verification",
        summary="Send a new email verification code",
        request=EmailOnlySerializer,
        responses={
            200: OpenApiResponse(response=MessageResponseSerializer, description="Verification email sent"),
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Unknown or already verified email"),
        },
        tags=["Authentication"],
    )
    def post(self, request):
        serializer = EmailOnlySerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = get_auth_service().resend_verification(serializer.validated_data["email"])
        if not result.success:
            return Response({"detail": result.error}, status=result.status_code)
        return Response({"message": result.message}, status=status.HTTP_200_OK)


class RequestLoginOtpView(APIView):
    permission_classes = [permissions.AllowAny]
    authentication_classes = []

    @extend_schema(
        operation_id="auth_request_login_otp",
        summary="Email a one-time login code",
        request=EmailOnlySerializer,
        responses={
            200: OpenApiResponse(response=MessageResponseSerializer, description="OTP sent"),
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Email not verified or send failure"),
            401: OpenApiResponse(response=ErrorResponseSerializer, description="Unknown email"),
        },
        tags=["Authentication"],
    )
    def post(self, request):
        serializer = EmailOnlySerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = get_auth_service().request_login_otp(serializer.validated_data["email"])
        if not result.success:
            return Response({"detail": result.error}, status=result.status_code)
        return Response({"message": result.message}, status=status.HTTP_200_OK)


class LoginWithOtpView(APIView):
    permission_classes = [permissions.AllowAny]
    authentication_classes = []

    @extend_schema(
        operation_id="auth_login_with_otp",
        summary="Login with an emailed one-time code",
        request=LoginWithOtpSerializer,
        responses={
            200: OpenApiResponse(response=AuthTokenResponseSerializer, description="Login successful"),
            400: OpenApiResponse(response=ErrorResponseSerializer, description="No active, expired or wrong OTP"),
            401: OpenApiResponse(response=ErrorResponseSerializer, description="Unknown or unverified email"),
        },
        tags=["Authentication"],
    )
    def post(self, request):
        serializer = LoginWithOtpSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = get_auth_service().login_with_otp(serializer.validated_data["email"], serializer.validated_data["otp"])
        return token_response(result)
