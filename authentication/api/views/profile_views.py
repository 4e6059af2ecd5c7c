from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import permissions, status
from rest_framework.response import Response
from rest_framework.views import APIView

from authentication.api.serializers import (
    AccountSettingsSerializer,
    HelpRequestSerializer,
    ProfileUpdateSerializer,
    UserAddressSerializer,
    UserSerializer,
)
from authentication.api.serializers.response_serializers import ErrorResponseSerializer
from authentication.domain.services.profile_service import ProfileService


def get_profile_service():
    return ProfileService()


def failure_response(result):
    return Response({"detail": result.error}, status=result.status_code)


class UserListView(APIView):
    permission_classes = [permissions.IsAuthenticated]

    @extend_schema(
        operation_id="users_list",
        summary="List all users",
        description="All accounts, newest first.",
        responses={200: UserSerializer(many=True)},
        tags=["Users"],
    )
    def get(self, request):
        users = get_profile_service().list_users()
        return Response(UserSerializer(users, many=True).data)


class ProfileView(APIView):
    permission_classes = [permissions.IsAuthenticated]

    @extend_schema(
        operation_id="users_profile_retrieve",
        summary="Get the authenticated user's profile",
        responses={200: UserSerializer, 404: OpenApiResponse(response=ErrorResponseSerializer)},
        tags=["Users"],
    )
    def get(self, request):
        result = get_profile_service().get_profile(request.user.id)
        if not result.success:
            return failure_response(result)
        return Response(UserSerializer(result.data).data)

    @extend_schema(
        operation_id="users_profile_update",
        summary="Update the authenticated user's profile",
        description="""
        **What it receives:** any of name (2-100 chars), profile_url, phone, location, bio (max 500).
        **What it returns:** the updated profile.
        """,
        request=ProfileUpdateSerializer,
        responses={
            200: UserSerializer,
            400: OpenApiResponse(description="Validation error"),
            404: OpenApiResponse(response=ErrorResponseSerializer, description="User not found"),
        },
        tags=["Users"],
    )
    def put(self, request):
        serializer = ProfileUpdateSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        result = get_profile_service().update_profile(request.user.id, serializer.validated_data)
        if not result.success:
            return failure_response(result)
        return Response(UserSerializer(result.data).data)

    patch = put


class AddressListCreateView(APIView):
    permission_classes = [permissions.IsAuthenticated]

    @extend_schema(
        operation_id="users_addresses_list",
        summary="List saved addresses",
        responses={200: UserAddressSerializer(many=True)},
        tags=["Users - Addresses"],
    )
    def get(self, request):
        addresses = get_profile_service().list_addresses(request.user)
        return Response(UserAddressSerializer(addresses, many=True).data)

    @extend_schema(
        operation_id="users_addresses_create",
        summary="Save a new address",
        description="Saving an address with `is_default=true` clears the previous default.",
        request=UserAddressSerializer,
        responses={201: UserAddressSerializer, 400: OpenApiResponse(description="Validation error")},
        tags=["Users - Addresses"],
    )
    def post(self, request):
        serializer = UserAddressSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = get_profile_service().create_address(request.user, serializer.validated_data)
        return Response(UserAddressSerializer(result.data).data, status=status.HTTP_201_CREATED)


class AddressDetailView(APIView):
    permission_classes = [permissions.IsAuthenticated]

    @extend_schema(
        operation_id="users_addresses_update",
        summary="Update a saved address",
        request=UserAddressSerializer,
        responses={
            200: UserAddressSerializer,
            404: OpenApiResponse(response=ErrorResponseSerializer, description="Address not found"),
        },
        tags=["Users - Addresses"],
    )
    def put(self, request, address_id):
        serializer = UserAddressSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        result = get_profile_service().update_address(request.user, address_id, serializer.validated_data)
        if not result.success:
            return failure_response(result)
        return Response(UserAddressSerializer(result.data).data)

    patch = put

    @extend_schema(
        operation_id="users_addresses_delete",
        summary="Delete a saved address",
        responses={
            204: OpenApiResponse(description="Deleted"),
            404: OpenApiResponse(response=ErrorResponseSerializer, description="Address not found"),
        },
        tags=["Users - Addresses"],
    )
    def delete(self, request, address_id):
        result = get_profile_service().delete_address(request.user, address_id)
        if not result.success:
            return failure_response(result)
        return Response(status=status.HTTP_204_NO_CONTENT)


class AccountSettingsView(APIView):
    permission_classes = [permissions.IsAuthenticated]

    @extend_schema(
        operation_id="users_account_settings_retrieve",
        summary="Get notification settings",
        responses={200: AccountSettingsSerializer},
        tags=["Users"],
    )
    def get(self, request):
        account_settings = get_profile_service().get_account_settings(request.user)
        return Response(AccountSettingsSerializer(account_settings).data)

    @extend_schema(
        operation_id="users_account_settings_update",
        summary="Update notification settings",
        description="Enabling do-not-disturb requires both `do_not_disturb_from` and `do_not_disturb_to`.",
        request=AccountSettingsSerializer,
        responses={
            200: AccountSettingsSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Missing DND window"),
        },
        tags=["Users"],
    )
    def put(self, request):
        serializer = AccountSettingsSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        result = get_profile_service().update_account_settings(request.user, serializer.validated_data)
        if not result.success:
            return failure_response(result)
        return Response(AccountSettingsSerializer(result.data).data)

    patch = put


class HelpRequestView(APIView):
    permission_classes = [permissions.IsAuthenticated]

    @extend_schema(
        operation_id="users_help_create",
        summary="Contact support",
        description="Either `email` or `phone` must be provided so support can reply.",
        request=HelpRequestSerializer,
        responses={
            201: HelpRequestSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer, description="No contact channel"),
        },
        tags=["Users"],
    )
    def post(self, request):
        serializer = HelpRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = get_profile_service().create_help_request(request.user, serializer.validated_data)
        if not result.success:
            return failure_response(result)
        return Response(HelpRequestSerializer(result.data).data, status=status.HTTP_201_CREATED)
