from django.urls import path
from . import views

app_name = "inventory_meds"

urlpatterns = [
    # Dashboard
    path("dashboard/", views.inventory_dashboard, name="dashboard"),

    # Medicine CRUD
    path("dashboard/add/", views.add_medicine, name="add_medicine"),
    path("dashboard/edit/<int:medicine_id>/", views.edit_medicine, name="edit_medicine"),
    path("dashboard/delete/<int:medicine_id>/", views.delete_medicine, name="delete_medicine"),

    # Usage
    path("dashboard/usage/<int:medicine_id>/", views.medicine_usage, name="medicine_usage"),

    # Export
    path("dashboard/report/", views.export_report, name="export_report"),
]
