"""DRF exception handling for the bazaar API."""

import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler, set_rollback

from marketplace.services.base import ErrorCodes

logger = logging.getLogger(__name__)


def api_exception_handler(exc, context):
    """
    DRF's handler for API errors; anything it does not know becomes a logged
    500 with the usual ``{"detail", "code"}`` body instead of Django's HTML page.
    """
    response = exception_handler(exc, context)
    if response is not None:
        return response

    view = context.get("view")
    logger.error(f"Unhandled error in {type(view).__name__}: {exc}", exc_info=(type(exc), exc, exc.__traceback__))
    set_rollback()
    return Response(
        {"detail": "Internal server error", "code": ErrorCodes.INTERNAL_ERROR},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
