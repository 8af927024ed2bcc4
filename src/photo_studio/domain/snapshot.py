"""Domain models for persisted studio state."""

from dataclasses import dataclass, field

from photo_studio.domain.orders import Order, SessionType
from photo_studio.domain.people import Client, Photographer


@dataclass
class StudioSnapshot:
    """All persisted collections, in insertion order."""

    clients: list[Client] = field(default_factory=list)
    photographers: list[Photographer] = field(default_factory=list)
    session_types: list[SessionType] = field(default_factory=list)
    orders: list[Order] = field(default_factory=list)


@dataclass(frozen=True)
class SkippedRow:
    """A stored record that could not be reconstructed."""

    file_name: str
    line_number: int
    line: str
    reason: str


@dataclass
class LoadResult:
    """Outcome of a best-effort load."""

    snapshot: StudioSnapshot
    skipped: list[SkippedRow] = field(default_factory=list)
    seeded: bool = False
