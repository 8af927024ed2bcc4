"""JSON serialization of studio entities for the HTTP API."""

from photo_studio.domain.inventory import InventoryItem
from photo_studio.domain.orders import Order, Payment, Photo, SessionType
from photo_studio.domain.people import Client, Photographer
from photo_studio.domain.snapshot import SkippedRow


def serialize_client(client: Client) -> dict[str, object]:
    return {
        "id": client.id,
        "name": client.name,
        "phone": client.phone,
        "email": client.email,
        "is_regular": client.is_regular,
    }


def serialize_photographer(photographer: Photographer) -> dict[str, object]:
    return {
        "id": photographer.id,
        "name": photographer.name,
        "phone": photographer.phone,
        "specialization": photographer.specialization,
    }


def serialize_session_type(session_type: SessionType) -> dict[str, object]:
    return {"name": session_type.name, "base_price": session_type.base_price}


def serialize_photo(photo: Photo) -> dict[str, object]:
    return {"id": photo.id, "file_path": photo.file_path}


def serialize_order(order: Order) -> dict[str, object]:
    return {
        "id": order.id,
        "created_at": order.created_at.isoformat(),
        "status": order.status.value,
        "client_id": order.client.id,
        "photographer_id": order.photographer.id,
        "session_type": serialize_session_type(order.session_type),
        "total_cost": order.total_cost,
        "photos": [serialize_photo(photo) for photo in order.photos],
    }


def serialize_payment(payment: Payment) -> dict[str, object]:
    return {
        "id": payment.id,
        "order_id": payment.order_id,
        "amount": payment.amount,
        "paid_at": payment.paid_at.isoformat(),
    }


def serialize_inventory_item(item: InventoryItem) -> dict[str, object]:
    return {"name": item.name, "quantity": item.quantity, "label": item.label()}


def serialize_skipped_row(row: SkippedRow) -> dict[str, object]:
    return {
        "file_name": row.file_name,
        "line_number": row.line_number,
        "line": row.line,
        "reason": row.reason,
    }
