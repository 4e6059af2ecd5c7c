from .auth_serializers import (
    EmailOnlySerializer,
    LoginUserSerializer,
    LoginWithOtpSerializer,
    UserRegistrationSerializer,
    UserSerializer,
    VerifyEmailSerializer,
)
from .profile_serializers import (
    AccountSettingsSerializer,
    HelpRequestSerializer,
    ProfileUpdateSerializer,
    UserAddressSerializer,
)


__all__ = [
    "UserSerializer",
    "UserRegistrationSerializer",
    "LoginUserSerializer",
    "VerifyEmailSerializer",
    "EmailOnlySerializer",
    "LoginWithOtpSerializer",
    "ProfileUpdateSerializer",
    "UserAddressSerializer",
    "AccountSettingsSerializer",
    "HelpRequestSerializer",
]
