from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status, viewsets
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from infrastructure.container import container  # For DI
from marketplace.api.responses import service_error_response
from marketplace.api.serializers import (
    AddCartItemSerializer,
    CartOutputSerializer,
    ErrorResponseSerializer,
    UpdateCartItemSerializer,
)
from marketplace.services import CartService


class CartViewSet(viewsets.ViewSet):
    permission_classes = [IsAuthenticated]

    def get_service(self) -> CartService:
        return container.cart_service()

    def cart_response(self, result):
        if not result.ok:
            return service_error_response(result)
        return Response(CartOutputSerializer(result.value).data, status=status.HTTP_200_OK)

    @extend_schema(
        operation_id="cart_get",
        summary="Get the authenticated user's cart",
        description="""
        **What it receives:**
        - Authentication token (header)

        **What it returns:**
        - Cart lines ordered by when they were added, each with a product summary
        - `total_items` (sum of quantities) and `total_amount` (sum of line totals)

        The cart is created on first access.
        """,
        responses={200: OpenApiResponse(response=CartOutputSerializer, description="Cart retrieved")},
        tags=["Marketplace - Cart"],
    )
    def retrieve_cart(self, request):
        return self.cart_response(self.get_service().get_cart(request.user))

    @extend_schema(
        operation_id="cart_add_item",
        summary="Add a product to the cart",
        description="""
        **What it receives:**
        - `product_id` (UUID): Product to add
        - `quantity` (integer, optional): Quantity to add (default: 1)

        **What it returns:**
        - The updated cart. Adding a product already in the cart increases its quantity
          and refreshes the line's unit price to the current product price.
        """,
        request=AddCartItemSerializer,
        responses={
            200: OpenApiResponse(response=CartOutputSerializer, description="Updated cart"),
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Own or inactive product"),
            404: OpenApiResponse(response=ErrorResponseSerializer, description="Product not found"),
        },
        tags=["Marketplace - Cart"],
    )
    def add_item(self, request):
        serializer = AddCartItemSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = self.get_service().add_item(
            request.user, serializer.validated_data["product_id"], serializer.validated_data["quantity"]
        )
        return self.cart_response(result)

    @extend_schema(
        operation_id="cart_update_item",
        summary="Update quantity for a cart item (quantity <= 0 removes the item)",
        request=UpdateCartItemSerializer,
        responses={
            200: OpenApiResponse(response=CartOutputSerializer, description="Updated cart"),
            404: OpenApiResponse(response=ErrorResponseSerializer, description="Cart item not found"),
        },
        tags=["Marketplace - Cart"],
    )
    def update_item(self, request, item_id=None):
        serializer = UpdateCartItemSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = self.get_service().update_cart_item(request.user, item_id, serializer.validated_data["quantity"])
        return self.cart_response(result)

    @extend_schema(
        operation_id="cart_remove_item",
        summary="Remove an item from the cart",
        responses={
            200: OpenApiResponse(response=CartOutputSerializer, description="Updated cart"),
            404: OpenApiResponse(response=ErrorResponseSerializer, description="Cart item not found"),
        },
        tags=["Marketplace - Cart"],
    )
    def remove_item(self, request, item_id=None):
        return self.cart_response(self.get_service().remove_cart_item(request.user, item_id))
