from django.contrib import admin
from django.contrib.auth.admin import UserAdmin
from django.contrib.auth.forms import UserChangeForm, UserCreationForm

from .models import AccountSettings, CustomUser, HelpRequest, UserAddress


class CustomUserCreationForm(UserCreationForm):
    class Meta:
        model = CustomUser
        fields = ("email",)


class CustomUserChangeForm(UserChangeForm):
    class Meta:
        model = CustomUser
        fields = "__all__"


@admin.register(CustomUser)
class CustomUserAdmin(UserAdmin):
    add_form = CustomUserCreationForm
    form = CustomUserChangeForm
    list_display = ["email", "name", "is_email_verified", "is_staff", "created_at"]
    list_filter = ["is_email_verified", "is_staff", "is_active"]
    search_fields = ["email", "name", "phone", "location"]
    ordering = ["-created_at"]
    readonly_fields = ["created_at", "updated_at", "last_login"]

    fieldsets = (
        ("Account", {"fields": ("email", "password", "is_email_verified")}),
        ("Profile", {"fields": ("name", "phone", "location", "bio", "profile_url")}),
        ("Permissions", {"fields": ("is_active", "is_staff", "is_superuser", "groups", "user_permissions"), "classes": ["collapse"]}),
        ("Timestamps", {"fields": ("last_login", "created_at", "updated_at"), "classes": ["collapse"]}),
    )
    add_fieldsets = (
        (None, {"classes": ("wide",), "fields": ("email", "password1", "password2")}),
    )


@admin.register(UserAddress)
class UserAddressAdmin(admin.ModelAdmin):
    list_display = ["user", "label", "contact_name", "city", "state", "pincode", "is_default"]
    list_filter = ["label", "is_default"]
    search_fields = ["user__email", "contact_name", "city", "pincode"]

    def get_queryset(self, request):
        return super().get_queryset(request).select_related("user")


@admin.register(AccountSettings)
class AccountSettingsAdmin(admin.ModelAdmin):
    list_display = ["user", "order_message_notifications", "order_activity_notifications", "do_not_disturb_enabled"]
    search_fields = ["user__email"]


@admin.register(HelpRequest)
class HelpRequestAdmin(admin.ModelAdmin):
    list_display = ["subject", "user", "email", "phone", "created_at"]
    search_fields = ["subject", "user__email", "email", "phone"]
    readonly_fields = ["created_at"]
    date_hierarchy = "created_at"
