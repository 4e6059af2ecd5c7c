from .auth_service import AuthService
from .profile_service import ProfileService
from .results import LoginResult, RegisterResult, Result

__all__ = ["AuthService", "ProfileService", "LoginResult", "RegisterResult", "Result"]
