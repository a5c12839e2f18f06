import pytest

from facilities.models import Facility
from inventory_meds.models import Medicine

pytestmark = pytest.mark.django_db


def test_list_facilities(admin_session_client, hospital, dispensary):
    response = admin_session_client.get("/api/facilities/")
    assert response.status_code == 200
    assert [f["name"] for f in response.json()] == ["Central Dispensary", "District Animal Hospital"]


def test_create_facility(admin_session_client):
    response = admin_session_client.post(
        "/api/facilities/",
        data={"name": "Hillside Polyclinic", "type": "Polyclinic"},
        content_type="application/json",
    )
    assert response.status_code == 201
    assert response.json()["type"] == "Polyclinic"
    assert Facility.objects.filter(name="Hillside Polyclinic").exists()


@pytest.mark.parametrize("payload", [
    {"name": "", "type": "Hospital"},
    {"name": "No Type"},
    {"name": "Bad Type", "type": "Pharmacy"},
])
def test_create_facility_validation(admin_session_client, payload):
    response = admin_session_client.post("/api/facilities/", data=payload, content_type="application/json")
    assert response.status_code == 400
    assert "error" in response.json()


def test_malformed_json_is_a_400(admin_session_client):
    response = admin_session_client.post("/api/facilities/", data="{not json", content_type="application/json")
    assert response.status_code == 400


def test_get_update_facility(admin_session_client, hospital):
    url = f"/api/facilities/{hospital.pk}/"
    assert admin_session_client.get(url).json()["name"] == hospital.name

    response = admin_session_client.put(url, data={"name": "Renamed"}, content_type="application/json")
    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Facility updated successfully"
    assert body["updatedFacility"] == {"id": hospital.pk, "name": "Renamed", "type": "Hospital"}


def test_missing_facility_is_404(admin_session_client):
    response = admin_session_client.get("/api/facilities/4242/")
    assert response.status_code == 404
    assert response.json() == {"error": "Facility not found"}


def test_delete_facility(admin_session_client, dispensary):
    response = admin_session_client.delete(f"/api/facilities/{dispensary.pk}/")
    assert response.status_code == 200
    assert not Facility.objects.filter(pk=dispensary.pk).exists()


def test_delete_facility_with_medicines_conflicts(admin_session_client, medicine):
    response = admin_session_client.delete(f"/api/facilities/{medicine.facility_id}/")
    assert response.status_code == 409
    assert "medicines associated" in response.json()["error"]
    assert Medicine.objects.filter(pk=medicine.pk).exists()


@pytest.mark.parametrize("name, status", [("H" * 255, 201), ("H" * 256, 400), (["Hospital"], 400)])
def test_facility_name_length(admin_session_client, name, status):
    response = admin_session_client.post(
        "/api/facilities/", data={"name": name, "type": "Hospital"}, content_type="application/json",
    )
    assert response.status_code == status


def test_update_facility_name_too_long(admin_session_client, hospital):
    response = admin_session_client.put(
        f"/api/facilities/{hospital.pk}/", data={"name": "N" * 256}, content_type="application/json",
    )
    assert response.status_code == 400
    hospital.refresh_from_db()
    assert hospital.name == "District Animal Hospital"
