"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import datetime

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.responses import JSONResponse

from photo_studio.api.admin import router as admin_router
from photo_studio.api.models import (
    ClientCreate,
    InventoryAdd,
    OrderCreate,
    PhotographerCreate,
    StatusUpdate,
)
from photo_studio.api.serializers import (
    serialize_client,
    serialize_inventory_item,
    serialize_order,
    serialize_payment,
    serialize_photo,
    serialize_photographer,
    serialize_session_type,
)
from photo_studio.app_logging import configure_logging
from photo_studio.containers import AppContainer
from photo_studio.domain.inventory import InventoryItem
from photo_studio.errors import ConflictError, EntityNotFoundError, StudioError


def create_app(container: AppContainer) -> FastAPI:  # noqa: PLR0915
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(admin_router)

    @app.exception_handler(StudioError)
    async def studio_error_handler(request: Request, exc: StudioError) -> JSONResponse:
        logger.info("Rejected %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=_status_for(exc), content={"detail": str(exc)})

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/clients")
    async def list_clients(request: Request) -> dict[str, object]:
        state_container: AppContainer = request.app.state.container
        clients = state_container.client_service.list_clients()
        return {"clients": [serialize_client(client) for client in clients]}

    @app.post("/clients", status_code=status.HTTP_201_CREATED)
    async def create_client(
        payload: ClientCreate, request: Request
    ) -> dict[str, object]:
        state_container: AppContainer = request.app.state.container
        client = state_container.client_service.register(
            name=payload.name, phone=payload.phone, email=payload.email
        )
        return serialize_client(client)

    @app.get("/photographers")
    async def list_photographers(request: Request) -> dict[str, object]:
        state_container: AppContainer = request.app.state.container
        photographers = state_container.photographer_service.list_photographers()
        return {"photographers": [serialize_photographer(p) for p in photographers]}

    @app.post("/photographers", status_code=status.HTTP_201_CREATED)
    async def create_photographer(
        payload: PhotographerCreate, request: Request
    ) -> dict[str, object]:
        state_container: AppContainer = request.app.state.container
        photographer = state_container.photographer_service.register(
            name=payload.name,
            phone=payload.phone,
            specialization=payload.specialization,
        )
        return serialize_photographer(photographer)

    @app.get("/photographers/available")
    async def available_photographers(
        at: datetime, request: Request
    ) -> dict[str, object]:
        """Return photographers without a clashing booking at ``at``."""
        state_container: AppContainer = request.app.state.container
        free = state_container.photographer_service.available_at(_as_local(at))
        return {"photographers": [serialize_photographer(p) for p in free]}

    @app.get("/session-types")
    async def list_session_types(request: Request) -> dict[str, object]:
        state_container: AppContainer = request.app.state.container
        catalog = state_container.store.session_types()
        return {"session_types": [serialize_session_type(s) for s in catalog]}

    @app.get("/orders")
    async def list_orders(request: Request) -> dict[str, object]:
        state_container: AppContainer = request.app.state.container
        orders = state_container.order_service.list_orders()
        return {"orders": [serialize_order(order) for order in orders]}

    @app.post("/orders", status_code=status.HTTP_201_CREATED)
    async def create_order(payload: OrderCreate, request: Request) -> dict[str, object]:
        """Book a catalog session for the client with the given phone."""
        state_container: AppContainer = request.app.state.container
        order = state_container.order_service.book(
            name=payload.name,
            phone=payload.phone,
            email=payload.email,
            photographer_id=payload.photographer_id,
            session_type_name=payload.session_type,
            photo_paths=payload.photo_paths,
            created_at=_as_local(payload.created_at) if payload.created_at else None,
        )
        return serialize_order(order)

    @app.post("/orders/{order_id}/status")
    async def update_order_status(
        order_id: str, payload: StatusUpdate, request: Request
    ) -> dict[str, object]:
        state_container: AppContainer = request.app.state.container
        order = state_container.order_service.update_status(order_id, payload.status)
        return serialize_order(order)

    @app.post("/orders/{order_id}/payment", status_code=status.HTTP_201_CREATED)
    async def pay_order(order_id: str, request: Request) -> dict[str, object]:
        """Record a payment and return it with the client's loyalty status."""
        state_container: AppContainer = request.app.state.container
        payment = state_container.order_service.record_payment(order_id)
        order = state_container.order_service.get_order(order_id)
        return {
            "payment": serialize_payment(payment),
            "client_is_regular": order.client.is_regular,
        }

    @app.get("/orders/{order_id}/photos")
    async def order_photos(order_id: str, request: Request) -> dict[str, object]:
        state_container: AppContainer = request.app.state.container
        photos = state_container.report_service.photos_for_order(order_id)
        return {"photos": [serialize_photo(photo) for photo in photos]}

    @app.get("/reports/summary")
    async def report_summary(request: Request) -> dict[str, object]:
        state_container: AppContainer = request.app.state.container
        summary = state_container.report_service.summary()
        return {
            "active_orders": summary.active_orders,
            "regular_clients": summary.regular_clients,
            "new_clients": summary.new_clients,
            "photographers": summary.photographers,
            "most_popular_session_type": summary.most_popular_session_type,
        }

    @app.get("/reports/revenue")
    async def report_revenue(
        start: datetime, end: datetime, request: Request
    ) -> dict[str, object]:
        state_container: AppContainer = request.app.state.container
        start, end = _as_local(start), _as_local(end)
        if end < start:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="end must not be before start",
            )
        revenue = state_container.report_service.revenue_for_period(start, end)
        return {"start": start.isoformat(), "end": end.isoformat(), "revenue": revenue}

    @app.get("/inventory")
    async def list_inventory(request: Request) -> dict[str, object]:
        state_container: AppContainer = request.app.state.container
        items = state_container.store.inventory()
        return {"items": [serialize_inventory_item(item) for item in items]}

    @app.post("/inventory")
    async def add_inventory(
        payload: InventoryAdd, request: Request
    ) -> dict[str, object]:
        state_container: AppContainer = request.app.state.container
        item = state_container.store.add_inventory_item(
            InventoryItem(name=payload.name, quantity=payload.quantity)
        )
        return serialize_inventory_item(item)

    return app


def _status_for(exc: StudioError) -> int:
    if isinstance(exc, ConflictError):
        return status.HTTP_409_CONFLICT
    if isinstance(exc, EntityNotFoundError):
        return status.HTTP_404_NOT_FOUND
    return status.HTTP_400_BAD_REQUEST


def _as_local(value: datetime) -> datetime:
    """Convert aware datetimes to naive local time, as stored on orders."""
    if value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)
