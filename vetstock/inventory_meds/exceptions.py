"""Errors raised by the inventory core and translated at the HTTP boundary."""


class InventoryError(Exception):
    """Base class for inventory errors; carries the HTTP status it maps to."""

    status_code = 500
    default_message = "Inventory operation failed"

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidInput(InventoryError):
    status_code = 400
    default_message = "Invalid input"


class InvalidQuantity(InvalidInput):
    default_message = "Quantity must be a positive whole number"


class InsufficientStock(InventoryError):
    status_code = 400
    default_message = "Insufficient stock"

    def __init__(self, available=None, requested=None, message=None):
        self.available = available
        self.requested = requested
        if message is None and available is not None:
            message = f"Insufficient stock: {requested} requested, {available} available"
        super().__init__(message)


class NotFound(InventoryError):
    status_code = 404
    default_message = "Not found"


class ForeignKeyConflict(InventoryError):
    status_code = 409
    default_message = "Record is still referenced by other records"


class PersistenceFailure(InventoryError):
    status_code = 500
    default_message = "Database operation failed"
