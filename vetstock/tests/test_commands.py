from io import StringIO

import pytest
from django.core.management import call_command

from facilities.models import Facility, FacilityType
from inventory_meds.models import Medicine

pytestmark = pytest.mark.django_db


def test_populate_medicines_is_idempotent():
    out = StringIO()
    call_command("populate_medicines", stdout=out)
    assert "Successfully populated" in out.getvalue()

    count = Medicine.objects.count()
    assert count > 0
    assert set(Facility.objects.values_list("type", flat=True)) == set(FacilityType.values)

    call_command("populate_medicines", stdout=StringIO())
    assert Medicine.objects.count() == count
