from django.urls import path
from . import api_views

urlpatterns = [
    path("medicines/", api_views.medicine_collection, name="api_medicines"),
    path("medicines/<int:medicine_id>/", api_views.medicine_detail, name="api_medicine_detail"),
    path("medicines/<int:medicine_id>/usage/", api_views.medicine_usage, name="api_medicine_usage"),
    path("medicine-usage/", api_views.log_usage, name="api_log_usage"),
    path("summary/", api_views.inventory_summary, name="api_summary"),
    path("alerts/", api_views.inventory_alerts, name="api_alerts"),
]
