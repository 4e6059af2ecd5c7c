from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import permissions
from rest_framework.response import Response
from rest_framework.views import APIView

from infrastructure.container import container
from marketplace.api.responses import service_error_response
from marketplace.api.serializers import BrowseQuerySerializer, BrowseResponseSerializer, ErrorResponseSerializer


class BrowseSellersView(APIView):
    permission_classes = [permissions.AllowAny]
    authentication_classes = []

    @extend_schema(
        operation_id="browse_sellers",
        summary="Browse sellers with active products",
        description="""
        Public seller directory. Sellers are ordered by number of active products,
        then newest first; each entry previews the seller's three newest active products.
        """,
        parameters=[
            OpenApiParameter(name="search", type=str, description="Matches name, bio or location"),
            OpenApiParameter(name="page", type=int, description="Page number (default: 1)"),
            OpenApiParameter(name="limit", type=int, description="Items per page (default: 12, max: 50)"),
        ],
        responses={
            200: BrowseResponseSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Invalid page or limit"),
        },
        tags=["Browse"],
    )
    def get(self, request):
        query = BrowseQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)

        result = container.browse_service().list_sellers(
            search=query.validated_data.get("search"),
            page=query.validated_data["page"],
            limit=query.validated_data["limit"],
        )
        if not result.ok:
            return service_error_response(result)
        return Response(BrowseResponseSerializer(result.value).data)
