from django.urls import path
from . import views

urlpatterns = [
    # Authentication
    path("", views.landing_page, name="landing_page"),
    path("login/", views.user_login, name="user_login"),
    path("logout/", views.logout_view, name="logout"),
]
