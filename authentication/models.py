from authentication.domain.models.account_settings import AccountSettings
from authentication.domain.models.address import UserAddress
from authentication.domain.models.help_request import HelpRequest
from authentication.domain.models.user import CustomUser


__all__ = [
    "CustomUser",
    "UserAddress",
    "AccountSettings",
    "HelpRequest",
]
