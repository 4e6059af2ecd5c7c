from django.urls import path

from authentication.api.views import (
    AccountSettingsView,
    AddressDetailView,
    AddressListCreateView,
    HelpRequestView,
    ProfileView,
    UserListView,
)

app_name = "users"

urlpatterns = [
    path("", UserListView.as_view(), name="list"),
    path("profile/", ProfileView.as_view(), name="profile"),
    path("addresses/", AddressListCreateView.as_view(), name="addresses"),
    path("addresses/<uuid:address_id>/", AddressDetailView.as_view(), name="address_detail"),
    path("account-settings/", AccountSettingsView.as_view(), name="account_settings"),
    path("help/", HelpRequestView.as_view(), name="help"),
]
