from urllib.parse import quote

from django.conf import settings
from django.http import JsonResponse
from django.shortcuts import redirect
from django.urls import reverse
from django.utils.deprecation import MiddlewareMixin

from .auth import is_admin_session


def _matches(path, prefixes):
    return any(path == prefix or path.startswith(f"{prefix}/") for prefix in prefixes)


class AdminSessionMiddleware(MiddlewareMixin):
    """
    Require an admin session for the dashboard, the facility admin pages and
    the JSON data API.

    Pages redirect to the login form (keeping the requested path in ``next``);
    API requests get a 401 JSON body instead.
    """

    def process_request(self, request):
        if is_admin_session(request):
            return None

        path = request.path_info
        if _matches(path, settings.VETSTOCK_PROTECTED_API_PATHS):
            return JsonResponse({"error": "Authentication required"}, status=401)

        if _matches(path, settings.VETSTOCK_PROTECTED_PATHS):
            return redirect(f"{reverse('user_login')}?next={quote(request.get_full_path())}")

        return None
