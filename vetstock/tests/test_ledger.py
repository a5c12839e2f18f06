from datetime import datetime, timezone

import pytest

from inventory_meds.exceptions import (
    InsufficientStock, InvalidQuantity, NotFound, PersistenceFailure,
)
from inventory_meds.ledger import apply_usage, record_usage
from inventory_meds.models import Medicine, UsageRecord


def test_apply_usage_decrements_and_builds_record(make_medicine):
    medicine = make_medicine(stock=10)
    now = datetime(2024, 6, 15, 8, 0, tzinfo=timezone.utc)
    outcome = apply_usage(medicine, 4, now=now)
    assert outcome.medicine.stock == 6
    assert outcome.record.quantity == 4
    assert outcome.record.usage_date == now
    assert outcome.record.pk is None


def test_apply_usage_insufficient_stock_leaves_medicine(make_medicine):
    medicine = make_medicine(stock=10)
    with pytest.raises(InsufficientStock) as excinfo:
        apply_usage(medicine, 15)
    assert medicine.stock == 10
    assert excinfo.value.available == 10
    assert excinfo.value.requested == 15
    assert excinfo.value.status_code == 400


def test_apply_usage_can_empty_stock(make_medicine):
    assert apply_usage(make_medicine(stock=3), 3).medicine.stock == 0


@pytest.mark.parametrize("quantity", [0, -1, 2.5, "3", True, None])
def test_apply_usage_rejects_bad_quantity(make_medicine, quantity):
    medicine = make_medicine(stock=10)
    with pytest.raises(InvalidQuantity):
        apply_usage(medicine, quantity)
    assert medicine.stock == 10


@pytest.mark.django_db
def test_record_usage_persists_both(medicine):
    outcome = record_usage(medicine.pk, 4)
    medicine.refresh_from_db()
    assert medicine.stock == 6
    assert UsageRecord.objects.get().quantity == 4
    assert outcome.record.medicine_id == medicine.pk


@pytest.mark.django_db
def test_record_usage_insufficient_writes_nothing(medicine):
    with pytest.raises(InsufficientStock):
        record_usage(medicine.pk, 11)
    medicine.refresh_from_db()
    assert medicine.stock == 10
    assert not UsageRecord.objects.exists()


@pytest.mark.django_db
def test_record_usage_unknown_medicine():
    with pytest.raises(NotFound):
        record_usage(999, 1)


@pytest.mark.django_db
def test_record_usage_rolls_back_when_record_fails(medicine, monkeypatch):
    from django.db import DatabaseError

    def fail(self, *args, **kwargs):
        raise DatabaseError("disk full")

    monkeypatch.setattr(UsageRecord, "save", fail)
    with pytest.raises(PersistenceFailure):
        record_usage(medicine.pk, 2)
    assert Medicine.objects.get(pk=medicine.pk).stock == 10
