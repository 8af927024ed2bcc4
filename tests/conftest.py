"""Shared test fixtures."""

import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

import pytest

from photo_studio.adapters.flat_file_codec import FlatFileCodec
from photo_studio.adapters.studio_store import StudioStore
from photo_studio.config import Settings
from photo_studio.containers import AppContainer, build_container
from photo_studio.domain.orders import Order, OrderStatus, SessionType
from photo_studio.domain.people import Client, Photographer
from photo_studio.domain.snapshot import StudioSnapshot
from photo_studio.services.clients import ClientService
from photo_studio.services.loyalty import LoyaltyService
from photo_studio.services.orders import OrderService

PORTRAIT = SessionType(name="Portrait", base_price=1000.0)


@dataclass
class FailingCodec(FlatFileCodec):
    """Codec whose writes always fail."""

    save_calls: int = 0

    def save(self, directory: Path, snapshot: StudioSnapshot) -> None:
        self.save_calls += 1
        raise OSError("disk full")


def make_order(  # noqa: PLR0913
    client: Client,
    photographer: Photographer,
    session_type: SessionType = PORTRAIT,
    created_at: datetime | None = None,
    status: OrderStatus = OrderStatus.NEW,
) -> Order:
    order = Order.create(
        client=client,
        photographer=photographer,
        session_type=session_type,
        created_at=created_at,
    )
    order.status = status
    return order


@pytest.fixture(autouse=True)
def _propagate_app_logs() -> None:
    logging.getLogger("photo_studio").propagate = True


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    return tmp_path / "data"


@pytest.fixture
def store(data_dir: Path) -> StudioStore:
    return StudioStore(data_dir=data_dir)


@pytest.fixture
def anna() -> Client:
    return Client.create(name="Anna", phone="0501112233", email="anna@example.com")


@pytest.fixture
def ivan() -> Photographer:
    return Photographer.create(
        name="Ivan", phone="0671234567", specialization="Portrait"
    )


@pytest.fixture
def order_service(store: StudioStore) -> OrderService:
    return OrderService(
        repository=store,
        client_service=ClientService(store),
        loyalty_service=LoyaltyService(store),
    )


@pytest.fixture
def settings(data_dir: Path) -> Settings:
    return Settings(admin_token="admin-token", data_dir=data_dir)


@pytest.fixture
def container(settings: Settings) -> AppContainer:
    return build_container(settings)
