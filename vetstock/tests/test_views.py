from datetime import timedelta

import pytest
from django.contrib.messages import get_messages

from facilities.models import Facility
from inventory_meds.models import Medicine, UsageRecord
from inventory_meds.status import today_utc

pytestmark = pytest.mark.django_db


def _messages(response):
    return [str(m) for m in get_messages(response.wsgi_request)]


def test_dashboard_lists_medicines_with_status(admin_session_client, medicine, dispensary):
    Medicine.objects.create(name="Albendazole", stock=1, weekly_requirement=5,
                            expiry_date=today_utc() - timedelta(days=2), facility=dispensary)

    response = admin_session_client.get("/dashboard/")
    assert response.status_code == 200
    page = list(response.context["medicines"])
    assert [m.name for m in page] == ["Albendazole", "Ivermectin 1%"]
    assert page[0].current_status == "Expired"
    assert response.context["summary"].total_stock == 11
    assert response.context["summary"].expired_count == 1
    assert b'id="stock-chart-data"' in response.content
    assert b'<canvas id="stock-chart"' in response.content
    assert b"new Chart(" in response.content


def test_dashboard_facility_filter_and_search(admin_session_client, medicine, dispensary):
    Medicine.objects.create(name="Albendazole", stock=3, weekly_requirement=1, facility=dispensary)

    response = admin_session_client.get("/dashboard/", {"facility_type": "Dispensary"})
    assert [m.name for m in response.context["medicines"]] == ["Albendazole"]
    assert response.context["summary"].total_stock == 3

    response = admin_session_client.get("/dashboard/", {"search": "iver"})
    assert [m.name for m in response.context["medicines"]] == ["Ivermectin 1%"]
    # Search narrows the table, not the counters
    assert response.context["summary"].medicine_count == 2


def test_add_medicine(admin_session_client, hospital):
    response = admin_session_client.post("/dashboard/add/", {
        "name": "Rabies Vaccine",
        "stock": 30,
        "weekly_requirement": 10,
        "expiry_date": "2031-05-01",
        "facility": hospital.pk,
    })
    assert response.status_code == 302
    assert response["Location"] == "/dashboard/"
    assert Medicine.objects.get(name="Rabies Vaccine").facility == hospital


def test_add_medicine_rejects_zero_requirement(admin_session_client, hospital):
    response = admin_session_client.post("/dashboard/add/", {
        "name": "Broken", "stock": 1, "weekly_requirement": 0, "facility": hospital.pk,
    })
    assert response.status_code == 200
    assert not Medicine.objects.filter(name="Broken").exists()


def test_edit_medicine(admin_session_client, medicine):
    response = admin_session_client.post(f"/dashboard/edit/{medicine.pk}/", {
        "name": "Ivermectin 1% Injectable", "stock": 25, "weekly_requirement": 4, "expiry_date": "",
    })
    assert response.status_code == 302
    medicine.refresh_from_db()
    assert medicine.name == "Ivermectin 1% Injectable"
    assert medicine.stock == 25


def test_delete_medicine_confirm_then_delete(admin_session_client, medicine):
    assert admin_session_client.get(f"/dashboard/delete/{medicine.pk}/").status_code == 200
    UsageRecord.objects.create(medicine=medicine, quantity=2)

    response = admin_session_client.post(f"/dashboard/delete/{medicine.pk}/")
    assert response.status_code == 302
    assert not Medicine.objects.exists()
    assert not UsageRecord.objects.exists()


def test_usage_page_logs_usage(admin_session_client, medicine):
    url = f"/dashboard/usage/{medicine.pk}/"
    response = admin_session_client.post(url, {"quantity": 4})
    assert response.status_code == 302
    assert response["Location"] == url
    medicine.refresh_from_db()
    assert medicine.stock == 6

    page = admin_session_client.get(url)
    assert [r.quantity for r in page.context["usage_records"]] == [4]


def test_usage_page_rejects_too_much(admin_session_client, medicine):
    response = admin_session_client.post(f"/dashboard/usage/{medicine.pk}/", {"quantity": 11})
    assert response.status_code == 200
    assert response.context["form"].errors["quantity"]
    medicine.refresh_from_db()
    assert medicine.stock == 10


def test_export_csv(admin_session_client, medicine):
    response = admin_session_client.get("/dashboard/report/", {"format": "csv"})
    assert response.status_code == 200
    assert response["Content-Type"] == "text/csv"
    assert 'filename="medicine_report_' in response["Content-Disposition"]
    assert response["Content-Disposition"].endswith('.csv"')
    assert b"Ivermectin 1%" in response.content


def test_export_pdf_and_xlsx(admin_session_client, medicine):
    pdf = admin_session_client.get("/dashboard/report/", {"format": "pdf"})
    assert pdf.content.startswith(b"%PDF")

    xlsx = admin_session_client.get("/dashboard/report/", {"format": "xlsx", "facility_type": "Hospital"})
    assert xlsx.status_code == 200
    # xlsx files are zip archives
    assert xlsx.content[:2] == b"PK"


def test_export_unknown_format_redirects(admin_session_client):
    response = admin_session_client.get("/dashboard/report/", {"format": "docx"})
    assert response.status_code == 302
    assert "Unsupported export format 'docx'." in _messages(response)


def test_add_facility_page(admin_session_client):
    assert admin_session_client.get("/admin/facilities/").status_code == 200
    response = admin_session_client.post("/admin/facilities/", {"name": "Hill Clinic", "type": "ClinicianCenter"})
    assert response.status_code == 302
    assert Facility.objects.get(name="Hill Clinic").get_type_display() == "Clinician Center"


def test_facility_list_search_matches_type_label(admin_session_client, hospital, dispensary):
    Facility.objects.create(name="Hill Clinic", type="ClinicianCenter")
    response = admin_session_client.get("/admin/facilities/view/", {"q": "clinician"})
    assert [f.name for f in response.context["facilities"]] == ["Hill Clinic"]


def test_facility_list_counts_medicines(admin_session_client, medicine):
    response = admin_session_client.get("/admin/facilities/view/")
    assert [f.medicine_count for f in response.context["facilities"]] == [1]


def test_edit_facility(admin_session_client, hospital):
    response = admin_session_client.post(
        f"/admin/facilities/edit/{hospital.pk}/", {"name": "Animal Hospital North", "type": "Hospital"},
    )
    assert response.status_code == 302
    hospital.refresh_from_db()
    assert hospital.name == "Animal Hospital North"


def test_delete_facility_in_use_shows_error(admin_session_client, medicine):
    response = admin_session_client.post(f"/admin/facilities/delete/{medicine.facility_id}/")
    assert response.status_code == 302
    assert Facility.objects.filter(pk=medicine.facility_id).exists()
    assert any("medicines associated" in m for m in _messages(response))


def test_dashboard_without_medicines_skips_chart(admin_session_client):
    response = admin_session_client.get("/dashboard/")
    assert response.context["chart_data"] == []
    assert b'<canvas id="stock-chart"' not in response.content
