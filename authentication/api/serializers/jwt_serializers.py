from rest_framework_simplejwt.tokens import RefreshToken


class CustomRefreshToken(RefreshToken):
    """Refresh token carrying the user's email and display name."""

    @classmethod
    def for_user(cls, user):
        token = super().for_user(user)
        token["email"] = user.email
        token["name"] = user.name or ""
        token["is_email_verified"] = user.is_email_verified
        return token


def issue_tokens(user) -> dict:
    """Return a fresh access/refresh pair for ``user``."""
    refresh = CustomRefreshToken.for_user(user)
    return {"access_token": str(refresh.access_token), "refresh_token": str(refresh)}
