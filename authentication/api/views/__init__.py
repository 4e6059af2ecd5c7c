from .auth_views import (
    LoginAPIView,
    LoginWithOtpView,
    RegisterAPIView,
    RequestLoginOtpView,
    ResendVerificationView,
    VerifyEmailView,
)
from .profile_views import (
    AccountSettingsView,
    AddressDetailView,
    AddressListCreateView,
    HelpRequestView,
    ProfileView,
    UserListView,
)


__all__ = [
    "LoginAPIView",
    "RegisterAPIView",
    "VerifyEmailView",
    "ResendVerificationView",
    "RequestLoginOtpView",
    "LoginWithOtpView",
    "UserListView",
    "ProfileView",
    "AddressListCreateView",
    "AddressDetailView",
    "AccountSettingsView",
    "HelpRequestView",
]
