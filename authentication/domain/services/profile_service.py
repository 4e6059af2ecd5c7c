"""
ProfileService - Account management business logic.

Profile fields, saved delivery addresses, notification settings and help
requests of the authenticated user.
"""

import logging
from typing import Any, Dict

from django.contrib.auth import get_user_model
from django.db import transaction

from authentication.models import AccountSettings, HelpRequest, UserAddress

from .results import Result


User = get_user_model()
logger = logging.getLogger(__name__)

PROFILE_FIELDS = ("name", "profile_url", "phone", "location", "bio")
ADDRESS_FIELDS = (
    "label",
    "contact_name",
    "contact_number",
    "address_line1",
    "address_line2",
    "city",
    "state",
    "pincode",
    "landmark",
    "is_default",
)


class ProfileService:
    """
    Account management service.

    Every method is scoped to the user passed in; rows of other users are
    reported as not found.
    """

    # Profile

    def get_profile(self, user_id) -> Result:
        user = User.objects.filter(id=user_id).first()
        if user is None:
            return Result.failure("User not found", status_code=404)
        return Result(success=True, data=user)

    def update_profile(self, user_id, profile_data: Dict[str, Any]) -> Result:
        """
        Update the editable profile fields.

        Args:
            user_id: id of the user being edited
            profile_data: validated subset of name, profile_url, phone, location, bio
        """
        user = User.objects.filter(id=user_id).first()
        if user is None:
            return Result.failure("User not found", status_code=404)

        changed = [field for field in PROFILE_FIELDS if field in profile_data]
        for field in changed:
            setattr(user, field, profile_data[field])
        if changed:
            user.save(update_fields=[*changed, "updated_at"])

        logger.info(f"Profile updated for user {user_id}: {changed}")
        return Result(success=True, message="Profile updated successfully", data=user)

    def list_users(self):
        return User.objects.order_by("-created_at")

    # Addresses

    def list_addresses(self, user):
        return UserAddress.objects.filter(user=user).order_by("-created_at")

    def _owned_address(self, user, address_id):
        return UserAddress.objects.filter(id=address_id, user=user).first()

    def create_address(self, user, address_data: Dict[str, Any]) -> Result:
        logger.info(f"Creating address for user {user.id}")
        with transaction.atomic():
            if address_data.get("is_default"):
                UserAddress.objects.filter(user=user).update(is_default=False)
            address = UserAddress.objects.create(
                user=user, **{field: address_data[field] for field in ADDRESS_FIELDS if field in address_data}
            )
        return Result(success=True, data=address, status_code=201)

    def update_address(self, user, address_id, address_data: Dict[str, Any]) -> Result:
        """Partial update; making an address the default unsets the previous default."""
        address = self._owned_address(user, address_id)
        if address is None:
            return Result.failure("Address not found", status_code=404)

        changed = [field for field in ADDRESS_FIELDS if field in address_data]
        if not changed:
            return Result(success=True, data=address)

        with transaction.atomic():
            if address_data.get("is_default"):
                UserAddress.objects.filter(user=user).exclude(id=address.id).update(is_default=False)
            for field in changed:
                setattr(address, field, address_data[field])
            address.save(update_fields=[*changed, "updated_at"])

        logger.info(f"Address {address_id} updated for user {user.id}: {changed}")
        return Result(success=True, data=address)

    def delete_address(self, user, address_id) -> Result:
        address = self._owned_address(user, address_id)
        if address is None:
            return Result.failure("Address not found", status_code=404)
        address.delete()
        logger.info(f"Address {address_id} deleted for user {user.id}")
        return Result(success=True, data=None, status_code=204)

    # Account settings

    def get_account_settings(self, user) -> AccountSettings:
        account_settings, created = AccountSettings.objects.get_or_create(user=user)
        if created:
            logger.info(f"Created default account settings for user {user.id}")
        return account_settings

    def update_account_settings(self, user, settings_data: Dict[str, Any]) -> Result:
        """
        Update notification preferences.

        Enabling do-not-disturb requires both window bounds (taken from the
        payload or the stored row); disabling it clears them.
        """
        account_settings = self.get_account_settings(user)

        for field in ("order_message_notifications", "order_activity_notifications"):
            if field in settings_data:
                setattr(account_settings, field, settings_data[field])

        dnd_enabled = settings_data.get("do_not_disturb_enabled", account_settings.do_not_disturb_enabled)
        dnd_from = settings_data.get("do_not_disturb_from", account_settings.do_not_disturb_from)
        dnd_to = settings_data.get("do_not_disturb_to", account_settings.do_not_disturb_to)

        if dnd_enabled:
            if dnd_from is None or dnd_to is None:
                return Result.failure("do_not_disturb_from and do_not_disturb_to are required when DND is enabled")
            account_settings.do_not_disturb_from = dnd_from
            account_settings.do_not_disturb_to = dnd_to
        else:
            account_settings.do_not_disturb_from = None
            account_settings.do_not_disturb_to = None
        account_settings.do_not_disturb_enabled = bool(dnd_enabled)

        account_settings.save()
        logger.info(f"Account settings updated for user {user.id}")
        return Result(success=True, data=account_settings)

    # Help

    def create_help_request(self, user, request_data: Dict[str, Any]) -> Result:
        if not request_data.get("email") and not request_data.get("phone"):
            return Result.failure("Either email or phone number must be provided")

        help_request = HelpRequest.objects.create(
            user=user,
            name=request_data["name"],
            email=request_data.get("email") or None,
            phone=request_data.get("phone") or None,
            subject=request_data["subject"],
            message=request_data["message"],
            attachment_url=request_data.get("attachment_url") or None,
        )
        logger.info(f"Help request {help_request.id} submitted by user {user.id}")
        return Result(success=True, data=help_request, status_code=201)
