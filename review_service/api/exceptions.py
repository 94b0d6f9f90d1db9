import structlog
from django.utils import timezone
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from ..utils.time import to_iso

logger = structlog.get_logger()


def json_exception_handler(exc, context):
    response = exception_handler(exc, context)
    if response is not None:
        return response

    view = context.get("view")
    logger.exception("unhandled_error", view=type(view).__name__ if view else None)
    return Response(
        {"error": "Internal server error", "timestamp": to_iso(timezone.now())},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
