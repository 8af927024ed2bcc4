"""Pydantic models for HTTP request payloads."""

from datetime import datetime

from pydantic import BaseModel, Field

from photo_studio.domain.orders import OrderStatus


class ClientCreate(BaseModel):
    """New client payload."""

    name: str
    phone: str
    email: str = ""


class PhotographerCreate(BaseModel):
    """New photographer payload."""

    name: str
    phone: str
    specialization: str = ""


class OrderCreate(BaseModel):
    """Booking payload; the client is matched by phone."""

    name: str
    phone: str
    email: str = ""
    photographer_id: str
    session_type: str
    photo_paths: list[str] = Field(default_factory=list)
    created_at: datetime | None = None


class StatusUpdate(BaseModel):
    """Order status change payload."""

    status: OrderStatus


class InventoryAdd(BaseModel):
    """Inventory restock payload."""

    name: str
    quantity: int = Field(gt=0)
