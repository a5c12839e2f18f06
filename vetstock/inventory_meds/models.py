from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models
from django.utils import timezone

from .status import (
    EXPIRING_SOON_WINDOW_DAYS, classify_medicine, is_expiring_soon, today_utc,
)

# Avoid repeated string literals for relations
FACILITY_REL = "facilities.Facility"


class Medicine(models.Model):
    name = models.CharField(max_length=255, db_index=True)
    stock = models.PositiveIntegerField(default=0)
    weekly_requirement = models.PositiveIntegerField(
        validators=[MinValueValidator(1)],
        help_text="Expected weekly consumption; stock below this is low"
    )
    expiry_date = models.DateField(blank=True, null=True, db_index=True)

    # Relations
    facility = models.ForeignKey(FACILITY_REL, on_delete=models.PROTECT, related_name="medicines")

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["name"]
        indexes = [
            models.Index(fields=["facility", "name"], name="medicine_facility_name_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(weekly_requirement__gt=0),
                name="medicine_weekly_requirement_positive",
            ),
        ]

    def __str__(self):
        return self.name

    def status(self, today=None):
        return classify_medicine(self, today or today_utc())

    def is_expiring_soon(self, today=None, window_days=None):
        if window_days is None:
            window_days = getattr(settings, "VETSTOCK_EXPIRING_SOON_DAYS", EXPIRING_SOON_WINDOW_DAYS)
        return is_expiring_soon(self.expiry_date, today or today_utc(), window_days)

    def to_dict(self, today=None):
        facility = self.facility
        return {
            "id": self.pk,
            "name": self.name,
            "stock": self.stock,
            "weeklyRequirement": self.weekly_requirement,
            "expiryDate": self.expiry_date.isoformat() if self.expiry_date else None,
            "facilityId": self.facility_id,
            "facility": facility.to_dict() if facility else None,
            "status": str(self.status(today)),
            "expiringSoon": self.is_expiring_soon(today),
        }


class UsageRecord(models.Model):
    """Append-only log of medicine consumed. Never updated after creation."""

    medicine = models.ForeignKey(Medicine, on_delete=models.CASCADE, related_name="usage_records")
    quantity = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    usage_date = models.DateTimeField(default=timezone.now, db_index=True)

    class Meta:
        ordering = ["-usage_date", "-id"]
        indexes = [
            models.Index(fields=["medicine", "usage_date"], name="usage_medicine_date_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(quantity__gt=0),
                name="usage_record_quantity_positive",
            ),
        ]

    def __str__(self):
        return f"{self.quantity} x {self.medicine.name} on {self.usage_date:%d/%m/%Y}"

    def to_dict(self):
        return {
            "id": self.pk,
            "medicineId": self.medicine_id,
            "quantity": self.quantity,
            "usageDate": self.usage_date.isoformat(),
            "medicine": {"name": self.medicine.name},
        }
