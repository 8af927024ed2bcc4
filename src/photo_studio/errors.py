"""Custom exceptions for the photo studio."""


class StudioError(Exception):
    """Base exception for all photo studio errors."""


class EntityNotFoundError(StudioError):
    """Base for lookups of ids or names that do not exist."""


class ConflictError(StudioError):
    """Base for operations that clash with the current state."""


class DuplicateClientError(ConflictError):
    """Raised when a client with the same phone or email already exists."""

    def __init__(self, phone: str, email: str):
        self.phone = phone
        self.email = email
        super().__init__(f"Client already exists (phone={phone}, email={email})")


class PhotographerNotFoundError(EntityNotFoundError):
    """Raised when a photographer id doesn't exist."""

    def __init__(self, photographer_id: str):
        self.photographer_id = photographer_id
        super().__init__(f"Photographer not found: {photographer_id}")


class SessionTypeNotFoundError(EntityNotFoundError):
    """Raised when a session type is not in the catalog."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Session type not found: {name}")


class OrderNotFoundError(EntityNotFoundError):
    """Raised when an order id doesn't exist."""

    def __init__(self, order_id: str):
        self.order_id = order_id
        super().__init__(f"Order not found: {order_id}")


class OrderAlreadyPaidError(ConflictError):
    """Raised when paying or changing an order that is already PAID."""

    def __init__(self, order_id: str):
        self.order_id = order_id
        super().__init__(f"Order already paid: {order_id}")


class InvalidStatusChangeError(StudioError):
    """Raised when a status change must go through another operation."""

    def __init__(self, order_id: str, status: str, reason: str):
        self.order_id = order_id
        self.status = status
        super().__init__(f"Cannot set order {order_id} to {status}: {reason}")
