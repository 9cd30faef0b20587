"""
Domain errors raised by the service layer.

Each error carries the HTTP status code the API answers with, so the
exception handlers can translate any of them without a lookup table.
"""

from __future__ import annotations


class UngukaError(Exception):
    """Base class for all expected business failures."""

    status_code: int = 400

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(UngukaError):
    """A referenced record does not exist in the cooperative."""

    status_code = 404

    def __init__(self, resource: str, resource_id: object | None = None) -> None:
        if resource_id is None:
            message = f"{resource} not found"
        else:
            message = f"{resource} {resource_id} not found"
        super().__init__(message)
        self.resource = resource
        self.resource_id = resource_id


class ConflictError(UngukaError):
    """A uniqueness rule would be broken."""

    status_code = 409


class BusinessRuleError(UngukaError):
    """The request is well formed but not allowed in the current state."""

    status_code = 400


class InsufficientStockError(BusinessRuleError):
    """Stock does not hold enough quantity for the operation."""

    def __init__(self, available: int, requested: int) -> None:
        super().__init__(f"Insufficient stock: {available} available, {requested} requested")
        self.available = available
        self.requested = requested


class InsufficientFundsError(BusinessRuleError):
    """The cooperative cash balance cannot cover the operation."""

    def __init__(self, available: float, requested: float) -> None:
        super().__init__(f"Insufficient cash: {available:.2f} available, {requested:.2f} requested")
        self.available = available
        self.requested = requested
