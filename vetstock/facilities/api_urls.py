from django.urls import path
from . import api_views

urlpatterns = [
    path("facilities/", api_views.facility_collection, name="api_facilities"),
    path("facilities/<int:facility_id>/", api_views.facility_detail, name="api_facility_detail"),
]
