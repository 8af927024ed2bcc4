"""Photographer registration and availability."""

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol

from photo_studio.domain.orders import Order
from photo_studio.domain.people import Photographer

AVAILABILITY_WINDOW_HOURS = 2


class PhotographerRepository(Protocol):
    """Persistence interface for photographers and their bookings."""

    def add_photographer(self, photographer: Photographer) -> None:
        """Store a new photographer."""

    def get_photographer(self, photographer_id: str) -> Photographer | None:
        """Return a photographer by id, if present."""

    def photographers(self) -> tuple[Photographer, ...]:
        """Return all photographers in insertion order."""

    def orders(self) -> tuple[Order, ...]:
        """Return all orders in insertion order."""


@dataclass
class PhotographerService:
    """Application service for photographers."""

    repository: PhotographerRepository

    def register(self, name: str, phone: str, specialization: str) -> Photographer:
        """Create and store a photographer."""
        photographer = Photographer.create(
            name=name, phone=phone, specialization=specialization
        )
        self.repository.add_photographer(photographer)
        return photographer

    def get(self, photographer_id: str) -> Photographer | None:
        return self.repository.get_photographer(photographer_id)

    def list_photographers(self) -> list[Photographer]:
        return list(self.repository.photographers())

    def is_available(self, photographer: Photographer, when: datetime) -> bool:
        """Return False if an order of the photographer clashes with ``when``.

        Two bookings clash when they fall on the same calendar day and their
        hour-of-day values differ by less than two. Minutes are ignored and
        the window does not wrap around midnight.
        """
        return not any(
            _clashes(order.created_at, when)
            for order in self.repository.orders()
            if order.photographer.id == photographer.id
        )

    def available_at(self, when: datetime) -> list[Photographer]:
        """Return photographers free at ``when``, in insertion order."""
        return [
            photographer
            for photographer in self.repository.photographers()
            if self.is_available(photographer, when)
        ]


def _clashes(booked: datetime, when: datetime) -> bool:
    return (
        booked.date() == when.date()
        and abs(booked.hour - when.hour) < AVAILABILITY_WINDOW_HOURS
    )
