"""Dashboard summaries, alerts and chart data computed from medicine lists."""
from dataclasses import dataclass, asdict

from .status import (
    EXPIRING_SOON_WINDOW_DAYS, StockStatus, classify_medicine,
    is_expiring_soon, today_utc,
)

ALERT_CRITICAL = "critical"
ALERT_WARNING = "warning"
ALERT_INFO = "info"

CHART_EXPIRED = "Expired"
CHART_EXPIRING_SOON = "Expiring Soon"


@dataclass(frozen=True)
class InventorySummary:
    total_stock: int = 0
    low_stock_count: int = 0
    expiring_soon_count: int = 0
    expired_count: int = 0
    medicine_count: int = 0

    def as_dict(self):
        return asdict(self)


@dataclass(frozen=True)
class Alert:
    level: str
    kind: str
    medicine_id: int
    medicine_name: str
    facility_name: str
    message: str

    def as_dict(self):
        return asdict(self)


def filter_by_facility_type(medicines, facility_type=None):
    if not facility_type:
        return list(medicines)
    return [m for m in medicines if m.facility.type == facility_type]


def aggregate(medicines, facility_type=None, today=None,
              window_days=EXPIRING_SOON_WINDOW_DAYS) -> InventorySummary:
    """
    Summarise stock levels over ``medicines``.

    Statuses are mutually exclusive: a medicine that is expired and also below
    its weekly requirement only counts towards ``expired_count``. Expired stock
    still counts towards ``total_stock``.
    """
    today = today or today_utc()
    selected = filter_by_facility_type(medicines, facility_type)

    total_stock = low_stock = expiring_soon = expired = 0
    for medicine in selected:
        total_stock += medicine.stock
        status = classify_medicine(medicine, today)
        if status == StockStatus.EXPIRED:
            expired += 1
        elif status == StockStatus.LOW_STOCK:
            low_stock += 1
        if is_expiring_soon(medicine.expiry_date, today, window_days):
            expiring_soon += 1

    return InventorySummary(
        total_stock=total_stock,
        low_stock_count=low_stock,
        expiring_soon_count=expiring_soon,
        expired_count=expired,
        medicine_count=len(selected),
    )


def build_alerts(medicines, facility_type=None, today=None,
                 window_days=EXPIRING_SOON_WINDOW_DAYS):
    """Alerts for expired, expiring-soon and low-stock medicines, most severe first."""
    today = today or today_utc()
    alerts = []
    for medicine in filter_by_facility_type(medicines, facility_type):
        status = classify_medicine(medicine, today)
        facility_name = medicine.facility.name
        if status == StockStatus.EXPIRED:
            alerts.append(Alert(
                ALERT_CRITICAL, "expired", medicine.pk, medicine.name, facility_name,
                f"{medicine.name} at {facility_name} expired on {medicine.expiry_date:%d/%m/%Y}.",
            ))
            continue
        if is_expiring_soon(medicine.expiry_date, today, window_days):
            days_left = (medicine.expiry_date - today).days
            alerts.append(Alert(
                ALERT_WARNING, "expiring_soon", medicine.pk, medicine.name, facility_name,
                f"{medicine.name} at {facility_name} expires in {days_left} day(s).",
            ))
        if status == StockStatus.LOW_STOCK:
            alerts.append(Alert(
                ALERT_INFO, "low_stock", medicine.pk, medicine.name, facility_name,
                f"{medicine.name} at {facility_name} has {medicine.stock} in stock "
                f"(weekly requirement {medicine.weekly_requirement}).",
            ))

    severity = {ALERT_CRITICAL: 0, ALERT_WARNING: 1, ALERT_INFO: 2}
    alerts.sort(key=lambda a: (severity[a.level], a.medicine_name))
    return alerts


def stock_chart_data(medicines, today=None, window_days=EXPIRING_SOON_WINDOW_DAYS):
    """Bar chart points: one per medicine, coloured by expiry or facility type."""
    today = today or today_utc()
    points = []
    for medicine in medicines:
        if classify_medicine(medicine, today) == StockStatus.EXPIRED:
            colour_key = CHART_EXPIRED
        elif is_expiring_soon(medicine.expiry_date, today, window_days):
            colour_key = CHART_EXPIRING_SOON
        else:
            colour_key = medicine.facility.type
        name = medicine.name
        points.append({
            "name": name[:10] + "..." if len(name) > 10 else name,
            "full_name": name,
            "stock": medicine.stock,
            "weekly_requirement": medicine.weekly_requirement,
            "facility": medicine.facility.name,
            "colour_key": colour_key,
        })
    return points
