"""Map domain errors to HTTP responses.

Installed as REST_FRAMEWORK["EXCEPTION_HANDLER"]. Validation-class errors
become 400, not-found-class errors 404. Everything else, including slug races
that outlived their retries and an unreachable database, is logged and
answered with a generic 500.
"""

import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from events.domain.errors import DomainError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def domain_exception_handler(exc: Exception, context: dict) -> Response:
    response = exception_handler(exc, context)
    if response is not None:
        return response

    if isinstance(exc, ValidationError):
        return Response(
            {"error": exc.message, "code": exc.code.value, "field": exc.field},
            status=status.HTTP_400_BAD_REQUEST,
        )
    if isinstance(exc, NotFoundError):
        return Response(
            {"error": exc.message, "code": exc.code.value},
            status=status.HTTP_404_NOT_FOUND,
        )

    view = context.get("view")
    request = context.get("request")
    logger.error(
        "Unhandled error in %s %s (%s)",
        getattr(request, "method", "?"),
        getattr(request, "path", "?"),
        type(view).__name__,
        exc_info=exc,
    )
    body = {"error": "Internal server error"}
    if isinstance(exc, DomainError):
        body["code"] = exc.code.value
    return Response(body, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
