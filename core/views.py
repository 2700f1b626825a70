import structlog

from rest_framework import permissions, status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response

from core.permissions import is_valid_pin

logger = structlog.get_logger(__name__)


@api_view(("POST",))
@permission_classes((permissions.AllowAny,))
def check_pin(request):
    pin = request.data.get("pin", "")
    if is_valid_pin(str(pin).strip()):
        return Response(status=status.HTTP_204_NO_CONTENT)

    logger.warning("Rejected organizer pin")
    return Response({"detail": "Incorrect PIN. Please try again."}, status=status.HTTP_403_FORBIDDEN)
