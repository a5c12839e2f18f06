from django.http import JsonResponse
from django.views.decorators.cache import never_cache
from django.views.decorators.csrf import ensure_csrf_cookie
from django.views.decorators.http import require_GET, require_POST

from inventory_meds.http import api_view, json_body
from .auth import end_admin_session, is_admin_session, login_admin


@api_view
@require_POST
def api_login(request):
    data = json_body(request)
    if login_admin(request, data.get('username'), data.get('password')):
        return JsonResponse({"success": True})
    return JsonResponse({"error": "Invalid credentials"}, status=401)


@require_POST
def api_logout(request):
    end_admin_session(request)
    return JsonResponse({"success": True})


@never_cache
@ensure_csrf_cookie
@require_GET
def check_auth(request):
    """Report whether the caller holds an admin session; also sets the CSRF cookie"""
    return JsonResponse({"isAuthenticated": is_admin_session(request)})
