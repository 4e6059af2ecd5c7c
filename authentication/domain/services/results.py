"""
Result objects for the authentication and account services.

Services return these dataclasses instead of raising, and carry the HTTP
status the view should answer with.
"""

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class LoginResult:
    """Result of any flow that ends with issued tokens."""

    success: bool
    user: Optional[Any] = None  # CustomUser instance
    access_token: Optional[str] = None
    refresh_token: Optional[str] = None
    error: Optional[str] = None
    message: Optional[str] = None
    status_code: int = 200


@dataclass
class RegisterResult:
    """Result of user registration attempt."""

    success: bool
    user: Optional[Any] = None  # CustomUser instance
    email_sent: bool = False
    error: Optional[str] = None
    message: Optional[str] = None
    status_code: int = 201


@dataclass
class Result:
    """Generic result for simple operations."""

    success: bool
    message: str = ""
    data: Optional[Any] = field(default_factory=dict)
    error: Optional[str] = None
    status_code: int = 200

    @classmethod
    def failure(cls, error: str, status_code: int = 400) -> "Result":
        return cls(success=False, message=error, data=None, error=error, status_code=status_code)
