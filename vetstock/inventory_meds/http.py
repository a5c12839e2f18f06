"""Helpers shared by the JSON API views."""
import json
import logging
from functools import wraps

from django.http import JsonResponse

from .exceptions import InventoryError, InvalidInput

logger = logging.getLogger(__name__)


def json_body(request):
    """Decode a JSON object from the request body"""
    try:
        data = json.loads(request.body or b"{}")
    except (ValueError, UnicodeDecodeError):
        raise InvalidInput("Request body must be valid JSON.") from None
    if not isinstance(data, dict):
        raise InvalidInput("Request body must be a JSON object.")
    return data


def error_response(error):
    if error.status_code >= 500:
        logger.error("API error: %s", error.message)
    return JsonResponse({"error": error.message}, status=error.status_code)


def api_view(view_func):
    """Translate inventory errors raised by a view into JSON error responses"""

    @wraps(view_func)
    def wrapper(request, *args, **kwargs):
        try:
            return view_func(request, *args, **kwargs)
        except InventoryError as e:
            return error_response(e)

    return wrapper


# Upper bound of PositiveIntegerField on every supported database
MAX_INT = 2147483647


def parse_int(value, field_name, minimum=None, maximum=MAX_INT):
    if isinstance(value, bool):
        raise InvalidInput(f"{field_name} must be a whole number.")
    try:
        number = int(value)
    except (TypeError, ValueError, OverflowError):
        raise InvalidInput(f"{field_name} must be a whole number.") from None
    if isinstance(value, float) and value != number:
        raise InvalidInput(f"{field_name} must be a whole number.")
    if minimum is not None and number < minimum:
        raise InvalidInput(f"{field_name} must be at least {minimum}.")
    if maximum is not None and number > maximum:
        raise InvalidInput(f"{field_name} must be at most {maximum}.")
    return number


def parse_text(value, field_name, max_length, message=None):
    """Strip a required text value and check it fits its column"""
    if value is not None and not isinstance(value, str):
        raise InvalidInput(f"{field_name} must be text.")
    text = (value or "").strip()
    if not text:
        raise InvalidInput(message or f"{field_name} cannot be empty.")
    if len(text) > max_length:
        raise InvalidInput(f"{field_name} must be at most {max_length} characters.")
    return text
