from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from infrastructure.container import container
from marketplace.api.responses import service_error_response
from marketplace.api.serializers import ErrorResponseSerializer

from .serializers import (
    MarkAllReadResponseSerializer,
    NotificationListQuerySerializer,
    NotificationListResponseSerializer,
    NotificationSerializer,
)


@extend_schema(
    operation_id="notifications_list",
    summary="List the authenticated user's notifications",
    parameters=[
        OpenApiParameter(name="is_read", type=bool, description="Filter by read state"),
        OpenApiParameter(name="type", type=str, description="ORDER_STATUS or ORDER_ACTIVITY"),
        OpenApiParameter(name="page", type=int, description="Page number (default: 1)"),
        OpenApiParameter(name="limit", type=int, description="Items per page (default: 20, max: 100)"),
    ],
    responses={200: NotificationListResponseSerializer},
    tags=["Notifications"],
)
@api_view(["GET"])
@permission_classes([IsAuthenticated])
def list_notifications(request):
    """
    Newest notifications first, with the total unread count in ``meta``.
    """
    query = NotificationListQuerySerializer(data=request.query_params)
    query.is_valid(raise_exception=True)

    result = container.notification_service().list_notifications(
        request.user,
        is_read=query.validated_data.get("is_read"),
        notification_type=query.validated_data.get("type"),
        page=query.validated_data["page"],
        limit=query.validated_data["limit"],
    )
    if not result.ok:
        return service_error_response(result)

    return Response(
        {
            "data": NotificationSerializer(result.value["data"], many=True).data,
            "meta": result.value["meta"],
        },
        status=status.HTTP_200_OK,
    )


@extend_schema(
    operation_id="notifications_mark_read",
    summary="Mark one notification as read",
    request=None,
    responses={
        200: NotificationSerializer,
        404: OpenApiResponse(response=ErrorResponseSerializer, description="Notification not found"),
    },
    tags=["Notifications"],
)
@api_view(["PATCH"])
@permission_classes([IsAuthenticated])
def mark_notification_read(request, notification_id):
    result = container.notification_service().mark_as_read(request.user, notification_id)
    if not result.ok:
        return service_error_response(result)
    return Response(NotificationSerializer(result.value).data, status=status.HTTP_200_OK)


@extend_schema(
    operation_id="notifications_mark_all_read",
    summary="Mark every unread notification as read",
    request=None,
    responses={200: MarkAllReadResponseSerializer},
    tags=["Notifications"],
)
@api_view(["PATCH"])
@permission_classes([IsAuthenticated])
def mark_all_notifications_read(request):
    result = container.notification_service().mark_all_as_read(request.user)
    return Response(result.value, status=status.HTTP_200_OK)
