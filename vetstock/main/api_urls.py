from django.urls import path
from . import api_views

urlpatterns = [
    path("login/", api_views.api_login, name="api_login"),
    path("logout/", api_views.api_logout, name="api_logout"),
    path("check-auth/", api_views.check_auth, name="api_check_auth"),
]
