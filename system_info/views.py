import logging

from django.conf import settings
from django.http import JsonResponse
from django.utils import timezone
from django.views.decorators.http import require_GET

logger = logging.getLogger(__name__)


@require_GET
def health_check(request):
    """
    Liveness probe used by load balancers and the frontend.

    Usage: GET /
    """
    logger.debug("Health check requested")
    return JsonResponse(
        {
            "message": "Backend API is running!",
            "timestamp": timezone.now().isoformat(),
            "version": getattr(settings, "API_VERSION", "1.0.0"),
        }
    )
