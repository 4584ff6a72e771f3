import logging

from django.conf import settings
from rest_framework.authentication import BaseAuthentication

from .helpers import resolve_session
from .models import User

logger = logging.getLogger(__name__)


class CookieSessionAuthentication(BaseAuthentication):
    """
    Authenticate from the http-only session cookie.

    Never raises: a missing, invalid or expired session, or one pointing at a
    user that no longer exists, leaves the request anonymous.
    """

    def authenticate(self, request):
        payload = resolve_session(request.COOKIES.get(settings.AUTH_COOKIE_NAME))
        if payload is None:
            return None

        try:
            user = User.objects.get(pk=payload["user_id"], is_active=True)
        except (User.DoesNotExist, ValueError, TypeError):
            logger.info("Session for unknown or inactive user %s", payload["user_id"])
            return None

        return user, payload

    def authenticate_header(self, request):
        return 'Cookie realm="api"'
