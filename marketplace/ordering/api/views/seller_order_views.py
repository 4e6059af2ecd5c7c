from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from infrastructure.container import container
from marketplace.api.responses import service_error_response
from marketplace.api.serializers import (
    ErrorResponseSerializer,
    OrderActivityCreateSerializer,
    OrderSerializer,
    OrderStatusUpdateSerializer,
)
from marketplace.services import SellerOrderService

from .order_views import UUID_LOOKUP


ACCESS_ERRORS = {
    403: OpenApiResponse(response=ErrorResponseSerializer, description="Not a seller on this order"),
    404: OpenApiResponse(response=ErrorResponseSerializer, description="Order not found"),
}


class SellerOrderViewSet(viewsets.ViewSet):
    """Seller console: orders that contain the caller's products."""

    permission_classes = [IsAuthenticated]
    lookup_value_regex = UUID_LOOKUP

    def get_service(self) -> SellerOrderService:
        return container.seller_order_service()

    def order_response(self, result):
        if not result.ok:
            return service_error_response(result)
        data = OrderSerializer(result.value, context={"viewer": self.request.user, "seller_view": True}).data
        return Response(data, status=status.HTTP_200_OK)

    @extend_schema(
        operation_id="admin_orders_list",
        summary="List received orders containing the seller's products",
        responses={200: OrderSerializer(many=True)},
        tags=["Marketplace - Seller Orders"],
    )
    def list(self, request):
        result = self.get_service().list_received_orders(request.user)
        data = OrderSerializer(result.value, many=True, context={"viewer": request.user, "seller_view": True}).data
        return Response(data, status=status.HTTP_200_OK)

    @extend_schema(
        operation_id="admin_orders_retrieve",
        summary="Get an order as one of its sellers",
        responses={200: OrderSerializer, **ACCESS_ERRORS},
        tags=["Marketplace - Seller Orders"],
    )
    def retrieve(self, request, pk=None):
        return self.order_response(self.get_service().get_order(request.user, pk))

    @extend_schema(
        operation_id="admin_orders_accept",
        summary="Accept a received order",
        request=None,
        responses={
            200: OrderSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Order is not in Received"),
            **ACCESS_ERRORS,
        },
        tags=["Marketplace - Seller Orders"],
    )
    @action(detail=True, methods=["patch"])
    def accept(self, request, pk=None):
        return self.order_response(self.get_service().accept_order(request.user, pk))

    @extend_schema(
        operation_id="admin_orders_update_status",
        summary="Set the order status",
        description="Any seller on the order may move it to any status.",
        request=OrderStatusUpdateSerializer,
        responses={200: OrderSerializer, **ACCESS_ERRORS},
        tags=["Marketplace - Seller Orders"],
    )
    @action(detail=True, methods=["patch"], url_path="status")
    def update_status(self, request, pk=None):
        serializer = OrderStatusUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = self.get_service().update_order_status(request.user, pk, serializer.validated_data["status"])
        return self.order_response(result)

    @extend_schema(
        operation_id="admin_orders_add_activity",
        summary="Add a seller remark to the order timeline",
        request=OrderActivityCreateSerializer,
        responses={200: OrderSerializer, **ACCESS_ERRORS},
        tags=["Marketplace - Seller Orders"],
    )
    @action(detail=True, methods=["post"])
    def activity(self, request, pk=None):
        serializer = OrderActivityCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = self.get_service().add_order_activity(request.user, pk, serializer.validated_data["message"])
        return self.order_response(result)
