"""Domain models for session orders, photos and payments."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum

from photo_studio.domain.people import Client, Photographer, new_id

REGULAR_CLIENT_PRICE_FACTOR = 0.90


class OrderStatus(StrEnum):
    """Lifecycle of an order."""

    NEW = "NEW"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    PAID = "PAID"

    @property
    def is_active(self) -> bool:
        return self in {OrderStatus.NEW, OrderStatus.IN_PROGRESS}


@dataclass(frozen=True)
class SessionType:
    """A named photography service with a base price."""

    name: str
    base_price: float


@dataclass(frozen=True)
class Photo:
    """A photo file produced for an order."""

    id: str
    file_path: str

    @classmethod
    def create(cls, file_path: str) -> "Photo":
        return cls(id=new_id(), file_path=file_path)


def calculate_total_cost(session_type: SessionType, client: Client) -> float:
    """Return the price of a session for a client at this moment."""
    if client.is_regular:
        return session_type.base_price * REGULAR_CLIENT_PRICE_FACTOR
    return session_type.base_price


@dataclass
class Order:
    """A booked photo session.

    ``total_cost`` is computed once by ``create`` and kept as is afterwards,
    so later loyalty changes do not reprice existing orders.
    """

    id: str
    created_at: datetime
    client: Client
    photographer: Photographer
    session_type: SessionType
    total_cost: float
    status: OrderStatus = OrderStatus.NEW
    photos: list[Photo] = field(default_factory=list)

    @classmethod
    def create(
        cls,
        client: Client,
        photographer: Photographer,
        session_type: SessionType,
        created_at: datetime | None = None,
    ) -> "Order":
        """Create a NEW order priced for the client's current status."""
        return cls(
            id=new_id(),
            created_at=created_at or datetime.now(),
            client=client,
            photographer=photographer,
            session_type=session_type,
            total_cost=calculate_total_cost(session_type, client),
        )

    def attach_photo(self, file_path: str) -> Photo:
        """Create a photo for this order and return it."""
        photo = Photo.create(file_path)
        self.photos.append(photo)
        return photo


@dataclass(frozen=True)
class Payment:
    """Receipt for a paid order."""

    id: str
    order_id: str
    amount: float
    paid_at: datetime

    @classmethod
    def for_order(cls, order: Order, paid_at: datetime | None = None) -> "Payment":
        return cls(
            id=new_id(),
            order_id=order.id,
            amount=order.total_cost,
            paid_at=paid_at or datetime.now(),
        )
