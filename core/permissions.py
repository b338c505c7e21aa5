import hmac

from django.conf import settings
from rest_framework.permissions import BasePermission

SERVICE_ROLE_HEADER = "HTTP_X_SERVICE_ROLE_KEY"


def has_service_role(request):
    expected = getattr(settings, "NOTIQ_SERVICE_ROLE_KEY", None)
    provided = request.META.get(SERVICE_ROLE_HEADER)
    if not expected or not provided:
        return False
    return hmac.compare_digest(str(expected), str(provided))


class IsOwner(BasePermission):
    """
    Permission class that ensures users can only access their own data.
    Every Notiq record carries a 'user' foreign key.
    """

    def has_object_permission(self, request, view, obj):
        if hasattr(obj, 'user_id'):
            return obj.user_id == request.user.id
        return False


class IsAuthenticatedOrServiceRole(BasePermission):
    """
    Allows signed-in users, or backend callers that present the service-role key
    in the X-Service-Role-Key header.
    """

    def has_permission(self, request, view):
        if request.user and request.user.is_authenticated:
            return True
        return has_service_role(request)
