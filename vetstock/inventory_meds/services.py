import logging

from django.db import DatabaseError, transaction

from facilities.models import Facility, FacilityType
from .exceptions import InvalidInput, NotFound, PersistenceFailure
from .http import parse_int, parse_text
from .models import Medicine
from .reports import as_date

logger = logging.getLogger(__name__)

# JSON payload key -> model field
PAYLOAD_FIELDS = {
    "name": "name",
    "stock": "stock",
    "weeklyRequirement": "weekly_requirement",
    "expiryDate": "expiry_date",
    "facilityId": "facility_id",
}
REQUIRED_FIELDS = ("name", "stock", "weeklyRequirement", "facilityId")


def clean_medicine_data(data, partial=False):
    """
    Validate a medicine payload and return model field values.

    With ``partial`` only the keys present are validated, for updates.
    """
    if not partial:
        missing = [key for key in REQUIRED_FIELDS if data.get(key) in (None, "")]
        if missing:
            raise InvalidInput("All fields except expiryDate are required")

    cleaned = {}
    if "name" in data:
        cleaned["name"] = parse_text(
            data["name"], "Name", Medicine._meta.get_field("name").max_length
        )
    if "stock" in data:
        cleaned["stock"] = parse_int(data["stock"], "Stock", minimum=0)
    if "weeklyRequirement" in data:
        cleaned["weekly_requirement"] = parse_int(
            data["weeklyRequirement"], "Weekly requirement", minimum=1
        )
    if "expiryDate" in data:
        cleaned["expiry_date"] = as_date(data["expiryDate"])
    if "facilityId" in data:
        facility_id = parse_int(data["facilityId"], "Facility ID", minimum=1)
        if not Facility.objects.filter(pk=facility_id).exists():
            raise InvalidInput("Invalid facility ID")
        cleaned["facility_id"] = facility_id
    return cleaned


def get_medicine(medicine_id):
    try:
        return Medicine.objects.select_related('facility').get(pk=medicine_id)
    except Medicine.DoesNotExist:
        raise NotFound("Medicine not found") from None


def list_medicines(facility_type=None):
    medicines = Medicine.objects.select_related('facility').order_by('name')
    if facility_type:
        medicines = medicines.filter(facility__type=facility_type)
    return medicines


def create_medicine(data):
    cleaned = clean_medicine_data(data)
    try:
        medicine = Medicine.objects.create(**cleaned)
    except DatabaseError as e:
        raise PersistenceFailure("Failed to create medicine") from e
    logger.info("Created medicine %s (stock %s)", medicine.name, medicine.stock)
    return medicine


def update_medicine(medicine, data):
    cleaned = clean_medicine_data(data, partial=True)
    for key, value in cleaned.items():
        setattr(medicine, key, value)
    try:
        medicine.save()
    except DatabaseError as e:
        raise PersistenceFailure("Failed to update medicine") from e
    return medicine


def delete_medicine(medicine):
    """Delete a medicine together with its usage records"""
    name = medicine.name
    try:
        with transaction.atomic():
            deleted_records = medicine.usage_records.all().delete()[0]
            medicine.delete()
    except DatabaseError as e:
        raise PersistenceFailure("Failed to delete medicine") from e
    logger.info("Deleted medicine %s and %s usage record(s)", name, deleted_records)


def clean_facility_type(value):
    """Facility type filter from a query string; empty or 'all' means no filter"""
    if not value or value == "all":
        return None
    if value not in FacilityType.values:
        raise InvalidInput(f"Unknown facility type '{value}'.")
    return value
