"""Loyalty status rule for clients."""

import logging
from dataclasses import dataclass
from typing import Protocol

from photo_studio.domain.orders import Order, OrderStatus
from photo_studio.domain.people import Client

PAID_ORDERS_FOR_REGULAR = 3

logger = logging.getLogger(__name__)


class LoyaltyRepository(Protocol):
    """Persistence interface needed by the loyalty rule."""

    def orders(self) -> tuple[Order, ...]:
        """Return all orders in insertion order."""

    def persist(self) -> None:
        """Write the current state to storage without raising."""


@dataclass
class LoyaltyService:
    """Upgrades clients to regular status after enough paid orders."""

    repository: LoyaltyRepository

    def paid_order_count(self, client: Client) -> int:
        return sum(
            1
            for order in self.repository.orders()
            if order.client.id == client.id and order.status == OrderStatus.PAID
        )

    def check_and_upgrade(self, client: Client) -> bool:
        """Mark the client regular if they qualify; return True on upgrade."""
        if client.is_regular:
            return False
        if self.paid_order_count(client) < PAID_ORDERS_FOR_REGULAR:
            return False
        client.mark_regular()
        logger.info("Client %s is now a regular client", client.id)
        self.repository.persist()
        return True
