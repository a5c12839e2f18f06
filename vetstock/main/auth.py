"""
Admin session handling.

There is a single administrator whose credentials come from settings. A
successful login stores a flag in a fresh server-side session; every gated
request is checked against that session by ``AdminSessionMiddleware``.
"""
import logging

from django.conf import settings
from django.utils.crypto import constant_time_compare

logger = logging.getLogger(__name__)

SESSION_AUTH_KEY = "vetstock_admin"


def check_credentials(username, password) -> bool:
    username_ok = constant_time_compare(username or "", settings.VETSTOCK_ADMIN_USERNAME)
    password_ok = constant_time_compare(password or "", settings.VETSTOCK_ADMIN_PASSWORD)
    return username_ok and password_ok


def start_admin_session(request):
    # New session key on login to prevent session fixation
    request.session.cycle_key()
    request.session[SESSION_AUTH_KEY] = True
    request.session.set_expiry(settings.VETSTOCK_SESSION_AGE)


def end_admin_session(request):
    request.session.flush()


def is_admin_session(request) -> bool:
    session = getattr(request, "session", None)
    return session is not None and session.get(SESSION_AUTH_KEY) is True


def get_client_ip(request):
    """Extract client IP address from request"""
    x_forwarded_for = request.META.get('HTTP_X_FORWARDED_FOR')
    if x_forwarded_for:
        ip = x_forwarded_for.split(',')[0]
    else:
        ip = request.META.get('REMOTE_ADDR')
    return ip


def login_admin(request, username, password) -> bool:
    """Start an admin session when the credentials match, logging the attempt"""
    if not check_credentials(username, password):
        logger.warning("Failed login for %r from %s", username, get_client_ip(request))
        return False
    start_admin_session(request)
    logger.info("Admin logged in from %s", get_client_ip(request))
    return True
