from django.urls import path
from rest_framework_simplejwt.views import TokenRefreshView

from authentication.api.views import (
    LoginAPIView,
    LoginWithOtpView,
    RegisterAPIView,
    RequestLoginOtpView,
    ResendVerificationView,
    VerifyEmailView,
)

app_name = "authentication"

urlpatterns = [
    path("register/", RegisterAPIView.as_view(), name="register"),
    path("login/", LoginAPIView.as_view(), name="login"),
    path("login/request-otp/", RequestLoginOtpView.as_view(), name="login_request_otp"),
    path("login/verify-otp/", LoginWithOtpView.as_view(), name="login_verify_otp"),
    path("token/refresh/", TokenRefreshView.as_view(), name="token_refresh"),
    path("verify-email/", VerifyEmailView.as_view(), name="verify_email"),
    path("resend-verification/", ResendVerificationView.as_view(), name="resend_verification"),
]
