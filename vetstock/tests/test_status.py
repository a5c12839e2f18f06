from datetime import timedelta

import pytest

from inventory_meds.exceptions import InvalidInput
from inventory_meds.status import (
    StockStatus, classify, classify_medicine, is_expired, is_expiring_soon,
)


def test_expired_wins_over_stock_level(today):
    yesterday = today - timedelta(days=1)
    assert classify(1000, 10, yesterday, today) == StockStatus.EXPIRED
    assert classify(0, 10, yesterday, today) == StockStatus.EXPIRED


def test_low_stock_below_weekly_requirement(today):
    assert classify(4, 5, None, today) == StockStatus.LOW_STOCK


def test_stock_equal_to_requirement_is_sufficient(today):
    assert classify(5, 5, today + timedelta(days=30), today) == StockStatus.SUFFICIENT


def test_expiring_today_is_not_expired(today):
    assert not is_expired(today, today)
    assert classify(10, 5, today, today) == StockStatus.SUFFICIENT


def test_no_expiry_is_never_expired_or_expiring(today):
    assert not is_expired(None, today)
    assert not is_expiring_soon(None, today)


@pytest.mark.parametrize("days, expected", [
    (-1, False),
    (0, False),
    (3, True),
    (7, True),
    (8, False),
])
def test_expiring_soon_window(today, days, expected):
    assert is_expiring_soon(today + timedelta(days=days), today) is expected


def test_expiring_soon_custom_window(today):
    assert is_expiring_soon(today + timedelta(days=10), today, window_days=14)


@pytest.mark.parametrize("stock, weekly", [(-1, 5), (5, 0), (5, -2), (5, None)])
def test_invalid_levels_are_rejected(today, stock, weekly):
    with pytest.raises(InvalidInput):
        classify(stock, weekly, None, today)


def test_classify_is_repeatable(today):
    args = (3, 5, today + timedelta(days=2), today)
    assert classify(*args) == classify(*args)


def test_classify_medicine(make_medicine, today):
    assert classify_medicine(make_medicine(stock=1, weekly_requirement=5), today) == StockStatus.LOW_STOCK
    assert make_medicine(expires_in=-2).status(today) == "Expired"


def test_medicine_window_defaults_to_setting(make_medicine, today, settings):
    medicine = make_medicine(expires_in=10)
    assert not medicine.is_expiring_soon(today)

    settings.VETSTOCK_EXPIRING_SOON_DAYS = 14
    assert medicine.is_expiring_soon(today)
    assert medicine.to_dict(today)["expiringSoon"] is True
    assert not medicine.is_expiring_soon(today, window_days=7)
