"""Admin API endpoints with simple token auth."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Header, HTTPException, Request, status

from photo_studio.api.serializers import serialize_payment, serialize_skipped_row

if TYPE_CHECKING:
    from photo_studio.containers import AppContainer

router = APIRouter(prefix="/admin", tags=["admin"])

logger = logging.getLogger(__name__)


def _get_admin_token(request: Request) -> str:
    container: AppContainer = request.app.state.container
    return container.settings.admin_token


async def require_admin(
    x_admin_token: str | None = Header(default=None),
    admin_token: str = Depends(_get_admin_token),
) -> None:
    """Ensure requests include a valid admin token."""
    if not x_admin_token or x_admin_token != admin_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)


@router.get("/health", dependencies=[Depends(require_admin)])
async def admin_health() -> dict[str, str]:
    """Admin health check endpoint."""
    return {"status": "ok"}


@router.post("/save", dependencies=[Depends(require_admin)])
async def save_data(request: Request) -> dict[str, object]:
    """Write the current snapshot to disk, reporting write failures."""
    container: AppContainer = request.app.state.container
    try:
        container.store.save()
    except OSError as exc:
        logger.exception("Admin save failed")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to save: {exc}",
        ) from exc
    return {"status": "saved", "data_dir": str(container.store.data_dir)}


@router.post("/reload", dependencies=[Depends(require_admin)])
async def reload_data(request: Request) -> dict[str, object]:
    """Reload everything from disk and list the records that were dropped."""
    container: AppContainer = request.app.state.container
    result = container.store.load()
    container.last_load = result
    return {
        "clients": len(result.snapshot.clients),
        "photographers": len(result.snapshot.photographers),
        "orders": len(result.snapshot.orders),
        "seeded": result.seeded,
        "skipped": [serialize_skipped_row(row) for row in result.skipped],
    }


@router.get("/payments", dependencies=[Depends(require_admin)])
async def list_payments(request: Request) -> dict[str, object]:
    """Return payments recorded since the process started."""
    container: AppContainer = request.app.state.container
    return {"payments": [serialize_payment(p) for p in container.store.payments()]}
