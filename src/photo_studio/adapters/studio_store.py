"""In-memory studio repository backed by flat files."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

from photo_studio.adapters.flat_file_codec import FlatFileCodec
from photo_studio.domain.inventory import InventoryItem
from photo_studio.domain.orders import Order, Payment, SessionType
from photo_studio.domain.people import Client, Photographer
from photo_studio.domain.snapshot import LoadResult, StudioSnapshot
from photo_studio.services.clients import ClientRepository
from photo_studio.services.loyalty import LoyaltyRepository
from photo_studio.services.orders import OrderRepository
from photo_studio.services.photographers import PhotographerRepository
from photo_studio.services.reports import ReportRepository
from photo_studio.services.seed import ReferenceSeed

logger = logging.getLogger(__name__)


@dataclass
class StudioStore(
    ClientRepository,
    PhotographerRepository,
    OrderRepository,
    LoyaltyRepository,
    ReportRepository,
):
    """Owns every studio entity and mirrors them to ``data_dir``.

    Each add operation re-writes the whole snapshot. Write failures are
    logged and swallowed, so an entity added here is always kept in memory
    even when it could not be saved.
    """

    data_dir: Path
    codec: FlatFileCodec = field(default_factory=FlatFileCodec)
    seed: ReferenceSeed | None = None
    _clients: list[Client] = field(default_factory=list, init=False)
    _photographers: list[Photographer] = field(default_factory=list, init=False)
    _session_types: list[SessionType] = field(default_factory=list, init=False)
    _orders: list[Order] = field(default_factory=list, init=False)
    _payments: list[Payment] = field(default_factory=list, init=False)
    _inventory: list[InventoryItem] = field(default_factory=list, init=False)

    def load(self) -> LoadResult:
        """Replace the stored collections with the contents of ``data_dir``."""
        result = self.codec.load(self.data_dir, seed=self.seed)
        self._clients = result.snapshot.clients
        self._photographers = result.snapshot.photographers
        self._session_types = result.snapshot.session_types
        self._orders = result.snapshot.orders
        logger.info(
            "Loaded %d clients, %d photographers, %d orders from %s",
            len(self._clients),
            len(self._photographers),
            len(self._orders),
            self.data_dir,
        )
        return result

    def save(self) -> None:
        """Write the snapshot to ``data_dir``, raising ``OSError`` on failure."""
        self.codec.save(self.data_dir, self.snapshot())

    def persist(self) -> None:
        """Write the snapshot to ``data_dir``, logging any failure."""
        try:
            self.save()
        except OSError:
            logger.exception("Failed to persist studio data to %s", self.data_dir)

    def snapshot(self) -> StudioSnapshot:
        return StudioSnapshot(
            clients=list(self._clients),
            photographers=list(self._photographers),
            session_types=list(self._session_types),
            orders=list(self._orders),
        )

    def add_client(self, client: Client) -> None:
        self._clients.append(client)
        self.persist()

    def add_photographer(self, photographer: Photographer) -> None:
        self._photographers.append(photographer)
        self.persist()

    def add_order(self, order: Order) -> None:
        self._orders.append(order)
        self.persist()

    def add_session_type(self, session_type: SessionType) -> None:
        self._session_types.append(session_type)
        self.persist()

    def update_session_type(self, session_type: SessionType) -> None:
        """Replace the catalog entry with the same name, or append it.

        Orders keep the session type they were created with.
        """
        for index, existing in enumerate(self._session_types):
            if existing.name == session_type.name:
                self._session_types[index] = session_type
                break
        else:
            self._session_types.append(session_type)
        self.persist()

    def add_payment(self, payment: Payment) -> None:
        self._payments.append(payment)

    def add_inventory_item(self, item: InventoryItem) -> InventoryItem:
        """Add stock, merging with an existing item of the same name."""
        for existing in self._inventory:
            if existing.name == item.name:
                existing.add_quantity(item.quantity)
                return existing
        self._inventory.append(item)
        return item

    def find_client_by_phone(self, phone: str) -> Client | None:
        return next((c for c in self._clients if c.phone == phone), None)

    def client_exists(self, phone: str, email: str) -> bool:
        """Match on exact phone, or on case-insensitive email when given."""
        wanted_email = email.casefold() if email else ""
        return any(
            client.phone == phone
            or (wanted_email and client.email.casefold() == wanted_email)
            for client in self._clients
        )

    def get_client(self, client_id: str) -> Client | None:
        return next((c for c in self._clients if c.id == client_id), None)

    def get_photographer(self, photographer_id: str) -> Photographer | None:
        return next((p for p in self._photographers if p.id == photographer_id), None)

    def get_order(self, order_id: str) -> Order | None:
        return next((o for o in self._orders if o.id == order_id), None)

    def find_session_type(self, name: str) -> SessionType | None:
        return next((s for s in self._session_types if s.name == name), None)

    def clients(self) -> tuple[Client, ...]:
        return tuple(self._clients)

    def photographers(self) -> tuple[Photographer, ...]:
        return tuple(self._photographers)

    def session_types(self) -> tuple[SessionType, ...]:
        return tuple(self._session_types)

    def orders(self) -> tuple[Order, ...]:
        return tuple(self._orders)

    def payments(self) -> tuple[Payment, ...]:
        return tuple(self._payments)

    def inventory(self) -> tuple[InventoryItem, ...]:
        return tuple(self._inventory)
