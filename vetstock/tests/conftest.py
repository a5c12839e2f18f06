from datetime import date, timedelta

import pytest

from facilities.models import Facility, FacilityType
from inventory_meds.models import Medicine

TODAY = date(2024, 6, 15)


@pytest.fixture
def today():
    return TODAY


@pytest.fixture
def make_medicine():
    """Build unsaved medicines for the pure status/aggregation/report code"""

    def _make(name="Amoxicillin", stock=10, weekly_requirement=5, expires_in=None,
              facility_type=FacilityType.HOSPITAL, facility_name="District Animal Hospital"):
        expiry_date = TODAY + timedelta(days=expires_in) if expires_in is not None else None
        return Medicine(
            name=name,
            stock=stock,
            weekly_requirement=weekly_requirement,
            expiry_date=expiry_date,
            facility=Facility(name=facility_name, type=facility_type),
        )

    return _make


@pytest.fixture
def hospital(db):
    return Facility.objects.create(name="District Animal Hospital", type=FacilityType.HOSPITAL)


@pytest.fixture
def dispensary(db):
    return Facility.objects.create(name="Central Dispensary", type=FacilityType.DISPENSARY)


@pytest.fixture
def medicine(hospital):
    return Medicine.objects.create(
        name="Ivermectin 1%", stock=10, weekly_requirement=4, facility=hospital,
    )


@pytest.fixture
def admin_session_client(client, db):
    response = client.post(
        "/api/login/",
        data={"username": "admin", "password": "password"},
        content_type="application/json",
    )
    assert response.status_code == 200
    return client
