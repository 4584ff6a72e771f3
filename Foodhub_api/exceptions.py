import logging

from rest_framework import status
from rest_framework.exceptions import NotAuthenticated, ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


def _first_message(detail):
    """Dig the first human readable message out of a DRF error detail."""
    if isinstance(detail, dict):
        for key, value in detail.items():
            message = _first_message(value)
            if key in ("non_field_errors", "detail"):
                return message
            return f"{key}: {message}"
        return "Invalid input."
    if isinstance(detail, (list, tuple)):
        return _first_message(detail[0]) if detail else "Invalid input."
    return str(detail)


def api_exception_handler(exc, context):
    """
    Render every error as ``{"error": "<message>"}``.

    Field errors from serializers are kept under ``fields``. Anything DRF does
    not know how to handle is logged and answered with a generic 500.
    """
    response = exception_handler(exc, context)

    if response is None:
        request = context.get("request")
        logger.exception(
            "Unhandled exception on %s %s",
            getattr(request, "method", "?"),
            getattr(request, "path", "?"),
        )
        return Response(
            {"error": "Internal server error"},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    if isinstance(exc, NotAuthenticated):
        body = {"error": "Authentication required"}
    elif isinstance(exc, ValidationError):
        body = {"error": _first_message(exc.detail)}
        if isinstance(exc.detail, dict):
            fields = {k: v for k, v in response.data.items() if k != "non_field_errors"}
            if fields:
                body["fields"] = fields
    else:
        body = {"error": _first_message(response.data)}

    response.data = body
    return response
