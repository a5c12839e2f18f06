from django.urls import path
from . import views

app_name = "facilities"

urlpatterns = [
    path("", views.add_facility, name="add_facility"),
    path("view/", views.facility_list, name="facility_list"),
    path("edit/<int:facility_id>/", views.edit_facility, name="edit_facility"),
    path("delete/<int:facility_id>/", views.delete_facility, name="delete_facility"),
]
