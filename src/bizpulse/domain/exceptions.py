"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class ProductNotFoundError(EntityNotFoundError):
    """A sale references a product that is not in the catalog."""

    def __init__(self, product_id: str) -> None:
        super().__init__(f"Product with ID '{product_id}' not found")
        self.product_id = product_id


class InsufficientStockError(ValidationError):
    """A sale asks for more units than the product has on hand."""

    def __init__(self, product_name: str, requested: int, available: int) -> None:
        super().__init__(
            f"Insufficient stock for {product_name} "
            f"(need {requested}, have {available} on hand)"
        )
        self.product_name = product_name
        self.requested = requested
        self.available = available


class ExternalServiceError(DomainException):
    """The insight provider could not produce a report."""

    def __init__(self, message: str, retryable: bool = False) -> None:
        super().__init__(message)
        self.retryable = retryable


class StorePersistenceError(DomainException):
    """A create/delete/update call against the store failed."""
