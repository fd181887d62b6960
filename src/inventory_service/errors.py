"""Typed errors for the inventory service."""


class InventoryError(Exception):
    """Base exception for all inventory service errors."""


class ValidationError(InventoryError):
    """Raised when a request is missing a required field."""

    def __init__(self, field: str, message: str | None = None) -> None:
        self.field = field
        super().__init__(message or f"{field} is required")


class ItemNotFoundError(InventoryError):
    """Raised when an item, or the photo it references, cannot be resolved."""

    def __init__(self, item_id: str | None) -> None:
        self.item_id = item_id
        super().__init__("Not found")


class PersistenceError(InventoryError):
    """Raised when the inventory document could not be written."""

    def __init__(self, path: str, cause: Exception) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to persist inventory to {path}: {cause}")
