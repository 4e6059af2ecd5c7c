from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import permissions, status
from rest_framework.parsers import FormParser, MultiPartParser
from rest_framework.response import Response
from rest_framework.views import APIView

from infrastructure.container import container
from marketplace.api.responses import service_error_response
from marketplace.api.serializers import ErrorResponseSerializer

from .serializers import ImageUploadRequestSerializer, UploadedImageSerializer


class ImageUploadView(APIView):
    permission_classes = [permissions.IsAuthenticated]
    parser_classes = [MultiPartParser, FormParser]

    @extend_schema(
        operation_id="uploads_images",
        summary="Upload multiple images with form-data fields",
        description="""
        **What it receives:**
        - `images`: up to 20 image files (jpeg, png, webp, gif), 10 MB each, 50 MB in total
        - any other form fields, echoed back as `fields`

        **What it returns:**
        - One entry per stored image with its public `url`
        """,
        request={"multipart/form-data": ImageUploadRequestSerializer},
        responses={
            201: UploadedImageSerializer(many=True),
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Missing, oversized or non-image files"),
            500: OpenApiResponse(response=ErrorResponseSerializer, description="Storage failure"),
        },
        tags=["Uploads"],
    )
    def post(self, request):
        files = request.FILES.getlist("images")
        fields = {key: value for key, value in request.data.items() if key != "images" and isinstance(value, str)}

        result = container.upload_service().upload_images(files, fields=fields)
        if not result.ok:
            return service_error_response(result)
        return Response(UploadedImageSerializer(result.value, many=True).data, status=status.HTTP_201_CREATED)
