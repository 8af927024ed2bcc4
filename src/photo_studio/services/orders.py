"""Order booking, status and payment workflow."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime
from typing import Protocol

from photo_studio.domain.orders import Order, OrderStatus, Payment, SessionType
from photo_studio.domain.people import Client, Photographer
from photo_studio.errors import (
    InvalidStatusChangeError,
    OrderAlreadyPaidError,
    OrderNotFoundError,
    PhotographerNotFoundError,
    SessionTypeNotFoundError,
)
from photo_studio.services.clients import ClientService
from photo_studio.services.loyalty import LoyaltyService

logger = logging.getLogger(__name__)


class OrderRepository(Protocol):
    """Persistence interface for orders and payments."""

    def add_order(self, order: Order) -> None:
        """Store a new order."""

    def get_order(self, order_id: str) -> Order | None:
        """Return an order by id, if present."""

    def orders(self) -> tuple[Order, ...]:
        """Return all orders in insertion order."""

    def get_photographer(self, photographer_id: str) -> Photographer | None:
        """Return a photographer by id, if present."""

    def find_session_type(self, name: str) -> SessionType | None:
        """Return the catalog entry with this name, if present."""

    def add_payment(self, payment: Payment) -> None:
        """Record a payment in the ledger."""

    def persist(self) -> None:
        """Write the current state to storage without raising."""


@dataclass
class OrderService:
    """Application service for the order lifecycle."""

    repository: OrderRepository
    client_service: ClientService
    loyalty_service: LoyaltyService

    def create_order(  # noqa: PLR0913
        self,
        client: Client,
        photographer: Photographer,
        session_type: SessionType,
        photo_paths: Iterable[str] = (),
        created_at: datetime | None = None,
    ) -> Order:
        """Price, store and return a new order for the given session type."""
        order = Order.create(
            client=client,
            photographer=photographer,
            session_type=session_type,
            created_at=created_at,
        )
        for path in photo_paths:
            order.attach_photo(path)
        self.repository.add_order(order)
        return order

    def book(  # noqa: PLR0913
        self,
        name: str,
        phone: str,
        email: str,
        photographer_id: str,
        session_type_name: str,
        photo_paths: Iterable[str] = (),
        created_at: datetime | None = None,
    ) -> Order:
        """Book a catalog session, reusing the client with the same phone."""
        photographer = self.repository.get_photographer(photographer_id)
        if photographer is None:
            raise PhotographerNotFoundError(photographer_id)
        session_type = self.repository.find_session_type(session_type_name)
        if session_type is None:
            raise SessionTypeNotFoundError(session_type_name)
        client = self.client_service.get_or_create(name, phone, email)
        return self.create_order(
            client=client,
            photographer=photographer,
            session_type=session_type,
            photo_paths=photo_paths,
            created_at=created_at,
        )

    def get_order(self, order_id: str) -> Order:
        order = self.repository.get_order(order_id)
        if order is None:
            raise OrderNotFoundError(order_id)
        return order

    def list_orders(self) -> list[Order]:
        return list(self.repository.orders())

    def update_status(self, order_id: str, status: OrderStatus) -> Order:
        """Move an unpaid order to a non-PAID status."""
        order = self.get_order(order_id)
        if order.status == OrderStatus.PAID:
            raise OrderAlreadyPaidError(order_id)
        if status == OrderStatus.PAID:
            raise InvalidStatusChangeError(
                order_id, status.value, "payments must be recorded"
            )
        order.status = status
        self.repository.persist()
        return order

    def record_payment(self, order_id: str, paid_at: datetime | None = None) -> Payment:
        """Mark the order PAID, record the payment and re-check loyalty."""
        order = self.get_order(order_id)
        if order.status == OrderStatus.PAID:
            raise OrderAlreadyPaidError(order_id)
        order.status = OrderStatus.PAID
        payment = Payment.for_order(order, paid_at=paid_at)
        self.repository.add_payment(payment)
        self.repository.persist()
        logger.info("Recorded payment %s for order %s", payment.id, order.id)
        self.loyalty_service.check_and_upgrade(order.client)
        return payment
