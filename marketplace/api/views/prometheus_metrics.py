from django.http import HttpResponse
from prometheus_client import generate_latest
from rest_framework.decorators import api_view, authentication_classes, permission_classes
from rest_framework.permissions import AllowAny

# Registers the marketplace collectors with the default registry
from marketplace.infra.observability import metrics  # noqa: F401


@api_view(["GET"])
@authentication_classes([])
@permission_classes([AllowAny])
def marketplace_prometheus_metrics(request):
    """
    Exposes Prometheus metrics for the marketplace app (orders, order value, cart mutations).
    """
    metrics_content = generate_latest()
    return HttpResponse(metrics_content, content_type="text/plain; version=0.0.4; charset=utf-8")
