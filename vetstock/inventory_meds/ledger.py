"""
Usage ledger: stock decrements paired with immutable usage records.
"""
import logging
from typing import NamedTuple

from django.db import DatabaseError, transaction
from django.utils import timezone

from .exceptions import InsufficientStock, InvalidQuantity, NotFound, PersistenceFailure
from .models import Medicine, UsageRecord

logger = logging.getLogger(__name__)


class UsageOutcome(NamedTuple):
    medicine: Medicine
    record: UsageRecord


def validate_quantity(quantity):
    # bool is an int subclass; reject it explicitly
    if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity <= 0:
        raise InvalidQuantity()
    return quantity


def apply_usage(medicine, quantity, now=None) -> UsageOutcome:
    """
    Deduct ``quantity`` from ``medicine.stock`` and build the matching record.

    Nothing is saved. The medicine is only modified when every check passes.
    """
    validate_quantity(quantity)
    if medicine.stock < quantity:
        raise InsufficientStock(available=medicine.stock, requested=quantity)

    medicine.stock -= quantity
    record = UsageRecord(
        medicine=medicine,
        quantity=quantity,
        usage_date=now or timezone.now(),
    )
    return UsageOutcome(medicine, record)


def record_usage(medicine_id, quantity, now=None) -> UsageOutcome:
    """Persist a usage event; the stock update and the record commit together."""
    validate_quantity(quantity)
    try:
        with transaction.atomic():
            try:
                medicine = (
                    Medicine.objects.select_for_update()
                    .select_related('facility')
                    .get(pk=medicine_id)
                )
            except Medicine.DoesNotExist:
                raise NotFound("Medicine not found") from None

            outcome = apply_usage(medicine, quantity, now=now)
            outcome.medicine.save(update_fields=['stock', 'updated_at'])
            outcome.record.save()
    except DatabaseError as e:
        logger.exception("Usage for medicine %s could not be saved", medicine_id)
        raise PersistenceFailure() from e

    logger.info(
        "Recorded usage of %s x %s (stock now %s)",
        quantity, outcome.medicine.name, outcome.medicine.stock,
    )
    return outcome
