from .account_settings import AccountSettings
from .address import UserAddress
from .help_request import HelpRequest
from .user import CustomUser, CustomUserManager

__all__ = [
    "CustomUser",
    "CustomUserManager",
    "UserAddress",
    "AccountSettings",
    "HelpRequest",
]
