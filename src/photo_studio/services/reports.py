"""Aggregate reports over studio orders and clients."""

from collections import Counter
from dataclasses import dataclass
from datetime import datetime
from typing import Protocol

from photo_studio.domain.orders import Order, Photo
from photo_studio.domain.people import Client, Photographer


class ReportRepository(Protocol):
    """Read-only interface for reporting."""

    def clients(self) -> tuple[Client, ...]:
        """Return all clients."""

    def photographers(self) -> tuple[Photographer, ...]:
        """Return all photographers."""

    def orders(self) -> tuple[Order, ...]:
        """Return all orders."""

    def get_order(self, order_id: str) -> Order | None:
        """Return an order by id, if present."""


@dataclass(frozen=True)
class ClientSplit:
    """Regular versus new client counts."""

    regular: int
    new: int


@dataclass(frozen=True)
class StudioSummary:
    """Dashboard counters."""

    active_orders: int
    regular_clients: int
    new_clients: int
    photographers: int
    most_popular_session_type: str | None


@dataclass
class ReportService:
    """Service for read-only studio reports."""

    repository: ReportRepository

    def active_order_count(self) -> int:
        """Return the number of NEW or IN_PROGRESS orders."""
        return sum(1 for order in self.repository.orders() if order.status.is_active)

    def client_split(self) -> ClientSplit:
        regular = sum(1 for client in self.repository.clients() if client.is_regular)
        total = len(self.repository.clients())
        return ClientSplit(regular=regular, new=total - regular)

    def photographer_count(self) -> int:
        return len(self.repository.photographers())

    def revenue_for_period(self, start: datetime, end: datetime) -> float:
        """Sum order totals created within [start, end], both ends included."""
        return sum(
            (
                order.total_cost
                for order in self.repository.orders()
                if start <= order.created_at <= end
            ),
            0.0,
        )

    def most_popular_session_type(self) -> str | None:
        """Return the most booked session-type name.

        Ties go to the alphabetically first name. Returns None when there
        are no orders.
        """
        counts = Counter(order.session_type.name for order in self.repository.orders())
        if not counts:
            return None
        top = max(counts.values())
        return min(name for name, count in counts.items() if count == top)

    def photos_for_order(self, order_id: str) -> list[Photo]:
        """Return the order's photos, or an empty list for unknown ids."""
        order = self.repository.get_order(order_id)
        if order is None:
            return []
        return list(order.photos)

    def summary(self) -> StudioSummary:
        split = self.client_split()
        return StudioSummary(
            active_orders=self.active_order_count(),
            regular_clients=split.regular,
            new_clients=split.new,
            photographers=self.photographer_count(),
            most_popular_session_type=self.most_popular_session_type(),
        )
