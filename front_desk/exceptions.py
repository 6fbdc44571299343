import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

logger = logging.getLogger(__name__)


def exception_handler(exc, context):
    """
    DRF exception handler that hides unexpected errors from the client.

    Known API exceptions (validation, not found, conflicts) are rendered by
    DRF as usual. Anything else is logged with its traceback and reported
    as a generic 500.
    """
    response = drf_exception_handler(exc, context)
    if response is not None:
        return response

    view = context.get("view")
    logger.exception(
        "Unhandled error in %s",
        view.__class__.__name__ if view else "unknown view",
        exc_info=exc,
    )
    return Response(
        {"detail": "Internal server error"},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
