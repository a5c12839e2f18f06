from django.contrib import messages
from django.shortcuts import render, redirect
from django.utils.http import url_has_allowed_host_and_scheme
from django.views.decorators.cache import never_cache
from django.views.decorators.http import require_POST

from .auth import end_admin_session, is_admin_session, login_admin
from .forms import LoginForm


def landing_page(request):
    """Send visitors to the dashboard when signed in, otherwise to the login form"""
    if is_admin_session(request):
        return redirect('inventory_meds:dashboard')
    return redirect('user_login')


def _safe_next(request):
    next_url = request.POST.get('next') or request.GET.get('next')
    if next_url and url_has_allowed_host_and_scheme(
        next_url, allowed_hosts={request.get_host()}, require_https=request.is_secure()
    ):
        return next_url
    return None


@never_cache
def user_login(request):
    """Handle administrator login"""
    if is_admin_session(request):
        return redirect('inventory_meds:dashboard')

    if request.method == "POST":
        form = LoginForm(request.POST)
        if form.is_valid():
            if login_admin(request, form.cleaned_data['username'], form.cleaned_data['password']):
                return redirect(_safe_next(request) or 'inventory_meds:dashboard')
            messages.error(request, "Invalid username or password.")
    else:
        form = LoginForm()

    return render(request, "login.html", {"form": form, "next": _safe_next(request) or ""})


@require_POST
def logout_view(request):
    end_admin_session(request)
    messages.success(request, "You have been logged out.")
    return redirect('user_login')
