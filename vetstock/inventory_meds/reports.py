"""
Report rows for the PDF / Excel / CSV exports.

The formatter only builds data. Binding it to a document writer happens in
``inventory_meds.exports``.
"""
from dataclasses import dataclass, field
from datetime import date, datetime, timezone as dt_timezone

from django.utils import dateparse

from .aggregation import aggregate
from .exceptions import InvalidInput
from .status import EXPIRING_SOON_WINDOW_DAYS, is_expired, today_utc

DATE_FORMAT = "%d/%m/%Y"
NOT_AVAILABLE = "N/A"

AVAILABLE_COLUMNS = ["Name", "Stock", "Weekly Requirement", "Expiry Date", "Facility"]
EXPIRED_COLUMNS = ["Name", "Stock", "Expiry Date", "Facility"]
SUMMARY_COLUMNS = ["Metric", "Value"]


@dataclass
class InventoryReport:
    summary_rows: list = field(default_factory=list)
    available_rows: list = field(default_factory=list)
    expired_rows: list = field(default_factory=list)
    facility_label: str = "All Facilities"


def format_date(value):
    """DD/MM/YYYY, the en-GB short date. Datetimes are taken in UTC."""
    if value is None:
        return NOT_AVAILABLE
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(dt_timezone.utc)
        value = value.date()
    return value.strftime(DATE_FORMAT)


def parse_date(text):
    try:
        return datetime.strptime(text.strip(), DATE_FORMAT).date()
    except (AttributeError, ValueError):
        raise InvalidInput(f"Invalid date '{text}', expected DD/MM/YYYY.") from None


def report_filename(extension, generated_at=None):
    generated_at = generated_at or datetime.now(dt_timezone.utc)
    return f"medicine_report_{generated_at:%Y%m%d_%H%M%S}.{extension}"


def _facility_label(facility_type):
    if not facility_type:
        return "All Facilities"
    # Local import keeps this module importable without the facilities app loaded
    from facilities.models import FacilityType
    try:
        return FacilityType(facility_type).label
    except ValueError:
        return str(facility_type)


def format_report(medicines, facility_type=None, today=None,
                  window_days=EXPIRING_SOON_WINDOW_DAYS) -> InventoryReport:
    today = today or today_utc()
    summary = aggregate(medicines, facility_type, today=today, window_days=window_days)
    label = _facility_label(facility_type)

    report = InventoryReport(facility_label=label)
    report.summary_rows = [
        {"Metric": "Total Stock", "Value": summary.total_stock},
        {"Metric": "Low Stock", "Value": summary.low_stock_count},
        {"Metric": "Expiring Soon", "Value": summary.expiring_soon_count},
        {"Metric": "Expired", "Value": summary.expired_count},
        {"Metric": "Facility Type", "Value": label},
    ]

    for medicine in sorted(medicines, key=lambda m: m.name.lower()):
        if facility_type and medicine.facility.type != facility_type:
            continue
        if is_expired(medicine.expiry_date, today):
            report.expired_rows.append({
                "Name": medicine.name,
                "Stock": medicine.stock,
                "Expiry Date": format_date(medicine.expiry_date),
                "Facility": medicine.facility.name,
            })
        else:
            report.available_rows.append({
                "Name": medicine.name,
                "Stock": medicine.stock,
                "Weekly Requirement": medicine.weekly_requirement,
                "Expiry Date": format_date(medicine.expiry_date),
                "Facility": medicine.facility.name,
            })
    return report


def as_date(value):
    """
    Accept a date, a ``DD/MM/YYYY`` string, an ISO ``YYYY-MM-DD`` string or a
    full ISO datetime string (taken in UTC). Anything else is rejected.
    """
    if value in (None, ""):
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    if "/" in text:
        return parse_date(text)
    try:
        parsed = dateparse.parse_date(text) or dateparse.parse_datetime(text)
    except ValueError:
        parsed = None
    if parsed is None:
        raise InvalidInput(f"Invalid expiry date format '{text}'.")
    if isinstance(parsed, datetime):
        if parsed.tzinfo is not None:
            parsed = parsed.astimezone(dt_timezone.utc)
        parsed = parsed.date()
    return parsed
