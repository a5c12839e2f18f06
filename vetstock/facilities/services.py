import logging

from django.db import DatabaseError
from django.db.models import ProtectedError

from inventory_meds.exceptions import (
    ForeignKeyConflict, InvalidInput, NotFound, PersistenceFailure,
)
from inventory_meds.http import parse_text
from .models import Facility, FacilityType

logger = logging.getLogger(__name__)


def clean_facility_data(data, partial=False):
    """Validate a name/type payload; with ``partial`` missing keys are skipped"""
    cleaned = {}

    if 'name' in data or not partial:
        cleaned['name'] = parse_text(
            data.get('name'), "Name", Facility._meta.get_field('name').max_length,
            message="Name and Type are required",
        )

    if 'type' in data or not partial:
        facility_type = data.get('type')
        if not facility_type:
            raise InvalidInput("Name and Type are required")
        if facility_type not in FacilityType.values:
            raise InvalidInput(
                f"Unknown facility type '{facility_type}'. "
                f"Expected one of: {', '.join(FacilityType.values)}"
            )
        cleaned['type'] = facility_type

    return cleaned


def get_facility(facility_id):
    try:
        return Facility.objects.get(pk=facility_id)
    except Facility.DoesNotExist:
        raise NotFound("Facility not found") from None


def create_facility(data):
    cleaned = clean_facility_data(data)
    try:
        facility = Facility.objects.create(**cleaned)
    except DatabaseError as e:
        raise PersistenceFailure("Failed to create facility") from e
    logger.info("Created facility %s", facility)
    return facility


def update_facility(facility, data):
    cleaned = clean_facility_data(data, partial=True)
    for key, value in cleaned.items():
        setattr(facility, key, value)
    try:
        facility.save()
    except DatabaseError as e:
        raise PersistenceFailure("Failed to update facility") from e
    return facility


def delete_facility(facility):
    """Delete a facility; refused while medicines still reference it"""
    try:
        facility.delete()
    except ProtectedError as e:
        raise ForeignKeyConflict(
            "Failed to delete facility. It may have medicines associated with it."
        ) from e
    except DatabaseError as e:
        raise PersistenceFailure("Failed to delete facility") from e
    logger.info("Deleted facility %s", facility.name)
