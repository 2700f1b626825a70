import structlog
from django.db import IntegrityError
from rest_framework import status
from rest_framework.exceptions import APIException, NotFound, PermissionDenied, ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler, set_rollback

logger = structlog.get_logger(__name__)

QUIET_ERRORS = (NotFound, PermissionDenied, ValidationError)


def custom_exception_handler(exc, context):
    view = context.get("view")
    view_name = view.__class__.__name__ if view is not None else None

    if isinstance(exc, QUIET_ERRORS):
        pass
    elif isinstance(exc, APIException) and exc.status_code < 500:
        logger.warning("Request rejected", view=view_name, detail=str(exc.detail))
    else:
        logger.error(exc, view=view_name, exc_info=True)

    response = exception_handler(exc, context)

    # anything DRF does not know how to render
    if response is None:
        if isinstance(exc, IntegrityError):
            response = Response({"detail": "Database conflict"}, status=status.HTTP_409_CONFLICT)
        else:
            response = Response({"detail": str(exc)}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
        set_rollback()

    return response
