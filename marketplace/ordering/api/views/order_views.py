from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from infrastructure.container import container
from marketplace.api.responses import service_error_response
from marketplace.api.serializers import (
    CheckoutSerializer,
    ErrorResponseSerializer,
    OrderActivityCreateSerializer,
    OrderSerializer,
    OrdersOverviewSerializer,
)
from marketplace.services import OrderService


UUID_LOOKUP = r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"


class OrderViewSet(viewsets.ViewSet):
    permission_classes = [IsAuthenticated]
    lookup_value_regex = UUID_LOOKUP

    def get_service(self) -> OrderService:
        return container.order_service()

    def serialize(self, orders, many=False):
        return OrderSerializer(orders, many=many, context={"viewer": self.request.user}).data

    @extend_schema(
        operation_id="orders_list",
        summary="List orders placed by the current user (buyer view)",
        responses={200: OrderSerializer(many=True)},
        tags=["Marketplace - Orders"],
    )
    def list(self, request):
        result = self.get_service().list_buyer_orders(request.user)
        return Response(self.serialize(result.value, many=True), status=status.HTTP_200_OK)

    @extend_schema(
        operation_id="orders_checkout",
        summary="Checkout and create an order from cart items",
        description="""
        **What it receives:**
        - `cart_item_ids` (list of UUID, optional): lines to buy; all lines when omitted
        - `buyer_note` (string, optional)

        **What it returns:**
        - The created order (status `Received`). Bought lines are removed from the cart,
          and the buyer and every seller on the order are notified.
        """,
        request=CheckoutSerializer,
        responses={
            201: OpenApiResponse(response=OrderSerializer, description="Order created"),
            400: OpenApiResponse(
                response=ErrorResponseSerializer, description="Cart empty, unknown lines or nothing selected"
            ),
        },
        tags=["Marketplace - Orders"],
    )
    def create(self, request):
        serializer = CheckoutSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = self.get_service().checkout(
            request.user,
            cart_item_ids=serializer.validated_data.get("cart_item_ids"),
            buyer_note=serializer.validated_data.get("buyer_note"),
        )
        if not result.ok:
            return service_error_response(result)
        return Response(self.serialize(result.value), status=status.HTTP_201_CREATED)

    @extend_schema(
        operation_id="orders_overview",
        summary="List both buyer and seller order views in one payload",
        responses={200: OrdersOverviewSerializer},
        tags=["Marketplace - Orders"],
    )
    @action(detail=False, methods=["get"])
    def overview(self, request):
        result = self.get_service().list_orders_by_role(request.user)
        return Response(
            {
                "buyer_orders": self.serialize(result.value["buyer_orders"], many=True),
                "seller_orders": self.serialize(result.value["seller_orders"], many=True),
            },
            status=status.HTTP_200_OK,
        )

    @extend_schema(
        operation_id="orders_sales",
        summary="List orders that include products sold by the user",
        responses={200: OrderSerializer(many=True)},
        tags=["Marketplace - Orders"],
    )
    @action(detail=False, methods=["get"])
    def sales(self, request):
        result = self.get_service().list_sales(request.user)
        return Response(self.serialize(result.value, many=True), status=status.HTTP_200_OK)

    @extend_schema(
        operation_id="orders_retrieve",
        summary="Get order details (buyer or selling seller)",
        responses={
            200: OrderSerializer,
            403: OpenApiResponse(response=ErrorResponseSerializer, description="Not a participant"),
            404: OpenApiResponse(response=ErrorResponseSerializer, description="Order not found"),
        },
        tags=["Marketplace - Orders"],
    )
    def retrieve(self, request, pk=None):
        result = self.get_service().get_order(request.user, pk)
        if not result.ok:
            return service_error_response(result)
        return Response(self.serialize(result.value), status=status.HTTP_200_OK)

    @extend_schema(
        operation_id="orders_add_activity",
        summary="Add a remark to the order timeline (buyer/seller)",
        request=OrderActivityCreateSerializer,
        responses={
            200: OrderSerializer,
            403: OpenApiResponse(response=ErrorResponseSerializer, description="Not a participant"),
            404: OpenApiResponse(response=ErrorResponseSerializer, description="Order not found"),
        },
        tags=["Marketplace - Orders"],
    )
    @action(detail=True, methods=["post"])
    def activity(self, request, pk=None):
        serializer = OrderActivityCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = self.get_service().add_order_activity(request.user, pk, serializer.validated_data["message"])
        if not result.ok:
            return service_error_response(result)
        return Response(self.serialize(result.value), status=status.HTTP_200_OK)
