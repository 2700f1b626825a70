import hmac

from django.conf import settings
from rest_framework import permissions

PIN_HEADER = "HTTP_X_ADMIN_PIN"


def is_valid_pin(pin):
    expected = settings.ADMIN_PIN or ""
    if not pin or not expected:
        return False
    return hmac.compare_digest(str(pin), expected)


class IsOrganizer(permissions.BasePermission):
    message = "A valid organizer PIN is required"

    def has_permission(self, request, view):
        return is_valid_pin(request.META.get(PIN_HEADER))


class IsOrganizerOrReadOnly(IsOrganizer):

    def has_permission(self, request, view):
        if request.method in permissions.SAFE_METHODS:
            return True
        return super().has_permission(request, view)
