import logging

from django.conf import settings
from django.contrib.auth.hashers import check_password, make_password
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.tokens import AccessToken

logger = logging.getLogger(__name__)


def hash_password(plaintext):
    return make_password(plaintext)


def verify_password(plaintext, hashed):
    if not plaintext or not hashed:
        return False
    return check_password(plaintext, hashed)


def issue_session(user):
    """Signed session token carrying the user's id, email and role."""
    token = AccessToken.for_user(user)
    token["email"] = user.email
    token["role"] = user.role
    return str(token)


def resolve_session(token):
    """
    Return the session payload for a token, or None.

    Expired, tampered and malformed tokens all resolve to None so callers can
    treat the request as anonymous.
    """
    if not token:
        return None
    try:
        access = AccessToken(token)
    except TokenError as exc:
        logger.debug("Rejected session token: %s", exc)
        return None

    user_id = access.get(settings.SIMPLE_JWT["USER_ID_CLAIM"])
    if user_id is None:
        return None

    return {
        "user_id": user_id,
        "email": access.get("email"),
        "role": access.get("role"),
    }


def set_session_cookie(response, token):
    response.set_cookie(
        settings.AUTH_COOKIE_NAME,
        token,
        max_age=int(settings.SESSION_LIFETIME.total_seconds()),
        path="/",
        secure=settings.AUTH_COOKIE_SECURE,
        httponly=True,
        samesite=settings.AUTH_COOKIE_SAMESITE,
    )
    return response


def clear_session_cookie(response):
    response.delete_cookie(
        settings.AUTH_COOKIE_NAME,
        path="/",
        samesite=settings.AUTH_COOKIE_SAMESITE,
    )
    return response
