from rest_framework.response import Response

from marketplace.services import ErrorCodes


def service_error_response(result):
    """Translate a failed ServiceResult into ``{"detail", "code"}`` with the code's HTTP status."""
    return Response(result.to_dict(), status=ErrorCodes.http_status(result.error))
