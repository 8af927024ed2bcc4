"""Reference data used when the studio has nothing stored yet."""

from dataclasses import dataclass
from typing import Protocol

from photo_studio.domain.orders import SessionType
from photo_studio.domain.people import Photographer

DEFAULT_SESSION_TYPES: tuple[tuple[str, float], ...] = (
    ("Portrait", 1000.0),
    ("Wedding", 5000.0),
    ("Family", 1500.0),
)

DEFAULT_PHOTOGRAPHERS: tuple[tuple[str, str, str], ...] = (
    ("Oleh Vynnyk", "0991112233", "Wedding"),
    ("Dasha Astafieva", "0995556677", "Portrait"),
    ("Denys Holoborodko", "0975556677", "Family"),
)


class ReferenceSeed(Protocol):
    """Source of reference data used when storage has none."""

    def photographers(self) -> list[Photographer]:
        """Return the default photographers."""

    def session_types(self) -> list[SessionType]:
        """Return the default session-type catalog."""


@dataclass
class DefaultReferenceSeed(ReferenceSeed):
    """Built-in catalog and staff for a fresh installation."""

    def photographers(self) -> list[Photographer]:
        """Return new photographer entities with fresh ids."""
        return [
            Photographer.create(name=name, phone=phone, specialization=specialization)
            for name, phone, specialization in DEFAULT_PHOTOGRAPHERS
        ]

    def session_types(self) -> list[SessionType]:
        """Return the default session-type catalog."""
        return [
            SessionType(name=name, base_price=price)
            for name, price in DEFAULT_SESSION_TYPES
        ]
