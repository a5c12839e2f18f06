"""
Stock status classification.

A medicine is either Expired, Low Stock or Sufficient. Expiry wins over the
stock level. "Expiring soon" is reported separately because a medicine can be
sufficiently stocked and still expire within the week.
"""
from datetime import timedelta

from django.db import models
from django.utils import timezone

from .exceptions import InvalidInput

EXPIRING_SOON_WINDOW_DAYS = 7


class StockStatus(models.TextChoices):
    SUFFICIENT = "Sufficient", "Sufficient"
    LOW_STOCK = "Low Stock", "Low Stock"
    EXPIRED = "Expired", "Expired"


def today_utc():
    return timezone.now().date()


def validate_stock_levels(stock, weekly_requirement):
    if stock is None or stock < 0:
        raise InvalidInput("Stock cannot be negative.")
    if weekly_requirement is None or weekly_requirement <= 0:
        raise InvalidInput("Weekly requirement must be greater than zero.")


def is_expired(expiry_date, today) -> bool:
    return expiry_date is not None and expiry_date < today


def is_expiring_soon(expiry_date, today, window_days=EXPIRING_SOON_WINDOW_DAYS) -> bool:
    if expiry_date is None:
        return False
    return today < expiry_date <= today + timedelta(days=window_days)


def classify(stock, weekly_requirement, expiry_date, today) -> StockStatus:
    validate_stock_levels(stock, weekly_requirement)
    if is_expired(expiry_date, today):
        return StockStatus.EXPIRED
    if stock < weekly_requirement:
        return StockStatus.LOW_STOCK
    return StockStatus.SUFFICIENT


def classify_medicine(medicine, today) -> StockStatus:
    return classify(medicine.stock, medicine.weekly_requirement, medicine.expiry_date, today)
