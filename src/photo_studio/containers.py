"""Dependency container wiring for the application."""

import logging
from collections.abc import Callable
from dataclasses import dataclass

from photo_studio.adapters.flat_file_codec import FlatFileCodec
from photo_studio.adapters.studio_store import StudioStore
from photo_studio.config import Settings
from photo_studio.domain.snapshot import LoadResult
from photo_studio.services.clients import ClientService
from photo_studio.services.loyalty import LoyaltyService
from photo_studio.services.orders import OrderService
from photo_studio.services.photographers import PhotographerService
from photo_studio.services.reports import ReportService
from photo_studio.services.seed import DefaultReferenceSeed

logger = logging.getLogger(__name__)


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    store: StudioStore
    client_service: ClientService
    photographer_service: PhotographerService
    loyalty_service: LoyaltyService
    order_service: OrderService
    report_service: ReportService
    last_load: LoadResult
    close_resources: Callable[[], None]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container and load stored data."""
    resolved_settings = settings or Settings()
    store = StudioStore(
        data_dir=resolved_settings.data_dir,
        codec=FlatFileCodec(),
        seed=DefaultReferenceSeed() if resolved_settings.seed_reference_data else None,
    )
    last_load = store.load()
    client_service = ClientService(store)
    loyalty_service = LoyaltyService(store)
    order_service = OrderService(
        repository=store,
        client_service=client_service,
        loyalty_service=loyalty_service,
    )

    def close_resources() -> None:
        try:
            store.save()
        except OSError:
            logger.exception("Failed to flush studio data on shutdown")

    return AppContainer(
        settings=resolved_settings,
        store=store,
        client_service=client_service,
        photographer_service=PhotographerService(store),
        loyalty_service=loyalty_service,
        order_service=order_service,
        report_service=ReportService(store),
        last_load=last_load,
        close_resources=close_resources,
    )
