from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from infrastructure.container import container
from marketplace.api.responses import service_error_response
from marketplace.api.serializers import (
    ErrorResponseSerializer,
    ProductDetailSerializer,
    ProductSerializer,
    ProductWriteSerializer,
)
from marketplace.ordering.api.views.order_views import UUID_LOOKUP
from marketplace.services import ProductService


NOT_FOUND = OpenApiResponse(response=ErrorResponseSerializer, description="Product not found")


class ProductViewSet(viewsets.ViewSet):
    permission_classes = [IsAuthenticated]
    lookup_value_regex = UUID_LOOKUP

    def get_service(self) -> ProductService:
        return container.product_service()

    @extend_schema(
        operation_id="products_list",
        summary="List the authenticated seller's products",
        responses={200: ProductSerializer(many=True)},
        tags=["Marketplace - Products"],
    )
    def list(self, request):
        result = self.get_service().list_own_products(request.user)
        return Response(ProductSerializer(result.value, many=True).data)

    @extend_schema(
        operation_id="products_create",
        summary="Create a new product",
        description="""
        **What it receives:**
        - `name`, `categories` (non-empty list), `price`, `quantity` (> 0), `unit`
        - Optional `description`, `images` (list of URLs, see `/api/uploads/images/`) and `status`

        **What it returns:**
        - The created product; status defaults to `Active`
        """,
        request=ProductWriteSerializer,
        responses={
            201: ProductSerializer,
            400: OpenApiResponse(description="Validation error"),
        },
        tags=["Marketplace - Products"],
    )
    def create(self, request):
        serializer = ProductWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = self.get_service().create_product(request.user, serializer.validated_data)
        if not result.ok:
            return service_error_response(result)
        return Response(ProductSerializer(result.value).data, status=status.HTTP_201_CREATED)

    @extend_schema(
        operation_id="products_retrieve",
        summary="Get product by id",
        responses={200: ProductDetailSerializer, 404: NOT_FOUND},
        tags=["Marketplace - Products"],
    )
    def retrieve(self, request, pk=None):
        result = self.get_service().get_product(pk)
        if not result.ok:
            return service_error_response(result)
        return Response(ProductDetailSerializer(result.value).data)

    @extend_schema(
        operation_id="products_by_creator",
        summary="Get products by creator id",
        responses={200: ProductSerializer(many=True)},
        tags=["Marketplace - Products"],
    )
    @action(detail=False, methods=["get"], url_path=rf"creator/(?P<creator_id>{UUID_LOOKUP})")
    def by_creator(self, request, creator_id=None):
        result = self.get_service().list_by_creator(creator_id)
        return Response(ProductSerializer(result.value, many=True).data)

    @extend_schema(
        operation_id="products_update",
        summary="Update a product you own",
        description="Only the fields sent are changed; `images` replaces the stored list.",
        request=ProductWriteSerializer,
        responses={200: ProductSerializer, 400: OpenApiResponse(description="Validation error"), 404: NOT_FOUND},
        tags=["Marketplace - Products"],
    )
    def update(self, request, pk=None):
        serializer = ProductWriteSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        result = self.get_service().update_product(request.user, pk, serializer.validated_data)
        if not result.ok:
            return service_error_response(result)
        return Response(ProductSerializer(result.value).data)

    partial_update = update

    @extend_schema(
        operation_id="products_delete",
        summary="Delete a product you own",
        responses={204: OpenApiResponse(description="Product deleted"), 404: NOT_FOUND},
        tags=["Marketplace - Products"],
    )
    def destroy(self, request, pk=None):
        result = self.get_service().delete_product(request.user, pk)
        if not result.ok:
            return service_error_response(result)
        return Response(status=status.HTTP_204_NO_CONTENT)
