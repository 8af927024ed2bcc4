"""Flat-file persistence for the studio snapshot.

Each entity kind lives in its own text file: one record per line, fields
joined with a comma, no header and no escaping. Loading is best-effort:
missing files are empty collections and bad rows are skipped and reported
in the returned ``LoadResult``.
"""

import logging
import os
import tempfile
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import TypeVar

from photo_studio.domain.orders import Order, OrderStatus, Photo, SessionType
from photo_studio.domain.people import Client, Photographer, PersonInfo
from photo_studio.domain.snapshot import LoadResult, SkippedRow, StudioSnapshot
from photo_studio.services.seed import ReferenceSeed

logger = logging.getLogger(__name__)

CLIENTS_FILE = "clients.csv"
PHOTOGRAPHERS_FILE = "photographers.csv"
SESSION_TYPES_FILE = "session_types.csv"
ORDERS_FILE = "orders.csv"
PHOTOS_FILE = "photos.csv"

DELIMITER = ","

CLIENT_FIELDS = 5
PHOTOGRAPHER_FIELDS = 4
SESSION_TYPE_FIELDS = 2
ORDER_FIELDS = 7
PHOTO_FIELDS = 3

T = TypeVar("T")


@dataclass
class FlatFileCodec:
    """Reads and writes ``StudioSnapshot`` objects as flat text files."""

    encoding: str = "utf-8"

    def save(self, directory: Path, snapshot: StudioSnapshot) -> None:
        """Write every collection to ``directory``.

        Raises:
            OSError: If a file cannot be written. Files already written
                stay replaced; the failing file keeps its previous content.
        """
        directory.mkdir(parents=True, exist_ok=True)
        self._write(directory / CLIENTS_FILE, map(encode_client, snapshot.clients))
        self._write(
            directory / PHOTOGRAPHERS_FILE,
            map(encode_photographer, snapshot.photographers),
        )
        self._write(
            directory / SESSION_TYPES_FILE,
            map(encode_session_type, snapshot.session_types),
        )
        self._write(directory / ORDERS_FILE, map(encode_order, snapshot.orders))
        self._write(
            directory / PHOTOS_FILE,
            (
                encode_photo(photo, order)
                for order in snapshot.orders
                for photo in order.photos
            ),
        )

    def load(self, directory: Path, seed: ReferenceSeed | None = None) -> LoadResult:
        """Rebuild a snapshot from ``directory``.

        Clients and photographers load first so orders can resolve them by
        id, and photos load last so they can find their order. Never raises
        for missing files, unreadable files or malformed rows.
        """
        snapshot = StudioSnapshot()
        result = LoadResult(snapshot=snapshot)

        snapshot.clients = self._decode_file(
            directory / CLIENTS_FILE, CLIENT_FIELDS, decode_client, result
        )
        snapshot.photographers = self._decode_file(
            directory / PHOTOGRAPHERS_FILE,
            PHOTOGRAPHER_FIELDS,
            decode_photographer,
            result,
        )
        if not snapshot.photographers and seed is not None:
            snapshot.photographers = seed.photographers()
            result.seeded = True
            logger.info(
                "No photographers stored, seeded %d", len(snapshot.photographers)
            )

        snapshot.session_types = self._decode_file(
            directory / SESSION_TYPES_FILE,
            SESSION_TYPE_FIELDS,
            decode_session_type,
            result,
        )
        if not snapshot.session_types and seed is not None:
            snapshot.session_types = seed.session_types()
            result.seeded = True
            logger.info(
                "No session types stored, seeded %d", len(snapshot.session_types)
            )

        clients = _index_by_id(snapshot.clients)
        photographers = _index_by_id(snapshot.photographers)
        snapshot.orders = self._decode_file(
            directory / ORDERS_FILE,
            ORDER_FIELDS,
            lambda fields: decode_order(fields, clients, photographers),
            result,
        )

        orders = _index_by_id(snapshot.orders)
        attached = self._decode_file(
            directory / PHOTOS_FILE,
            PHOTO_FIELDS,
            lambda fields: decode_photo(fields, orders),
            result,
        )
        for order, photo in attached:
            order.photos.append(photo)

        if result.skipped:
            logger.warning(
                "Skipped %d stored records while loading %s",
                len(result.skipped),
                directory,
            )
        return result

    def _decode_file(
        self,
        path: Path,
        arity: int,
        decode: Callable[[list[str]], T],
        result: LoadResult,
    ) -> list[T]:
        decoded: list[T] = []
        for line_number, line in self._read_lines(path):
            fields = line.split(DELIMITER)
            try:
                if len(fields) != arity:
                    raise ValueError(f"expected {arity} fields, got {len(fields)}")
                decoded.append(decode(fields))
            except ValueError as exc:
                result.skipped.append(
                    SkippedRow(
                        file_name=path.name,
                        line_number=line_number,
                        line=line,
                        reason=str(exc),
                    )
                )
        return decoded

    def _read_lines(self, path: Path) -> list[tuple[int, str]]:
        if not path.exists():
            return []
        try:
            with path.open(encoding=self.encoding, newline="") as f:
                text = f.read()
        except (OSError, UnicodeDecodeError):
            logger.exception("Failed to read %s, treating it as empty", path)
            return []
        return [
            (number, line)
            for number, line in enumerate(text.split("\n"), start=1)
            if line.strip()
        ]

    def _write(self, path: Path, rows: Iterable[list[str]]) -> None:
        # Write to temp file then rename so a failed write keeps the old file.
        fd, temp_path = tempfile.mkstemp(
            dir=path.parent, prefix=f".{path.stem}_", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding=self.encoding, newline="") as f:
                for fields in rows:
                    if any(DELIMITER in value or "\n" in value for value in fields):
                        logger.warning(
                            "Record %s in %s contains a delimiter and will not "
                            "reload intact",
                            fields[0],
                            path.name,
                        )
                    f.write(DELIMITER.join(fields))
                    f.write("\n")
            os.replace(temp_path, path)
        except Exception:
            try:
                os.unlink(temp_path)
            except OSError:
                pass
            raise


def encode_client(client: Client) -> list[str]:
    return [
        client.id,
        client.name,
        client.phone,
        client.email,
        "true" if client.is_regular else "false",
    ]


def decode_client(fields: list[str]) -> Client:
    record_id, name, phone, email, is_regular = fields
    return Client(
        person=PersonInfo(id=record_id, name=name, phone=phone),
        email=email,
        is_regular=_parse_bool(is_regular),
    )


def encode_photographer(photographer: Photographer) -> list[str]:
    return [
        photographer.id,
        photographer.name,
        photographer.phone,
        photographer.specialization,
    ]


def decode_photographer(fields: list[str]) -> Photographer:
    record_id, name, phone, specialization = fields
    return Photographer(
        person=PersonInfo(id=record_id, name=name, phone=phone),
        specialization=specialization,
    )


def encode_session_type(session_type: SessionType) -> list[str]:
    return [session_type.name, str(float(session_type.base_price))]


def decode_session_type(fields: list[str]) -> SessionType:
    name, base_price = fields
    return SessionType(name=name, base_price=float(base_price))


def encode_order(order: Order) -> list[str]:
    return [
        order.id,
        order.created_at.isoformat(),
        order.status.value,
        order.client.id,
        order.photographer.id,
        order.session_type.name,
        str(float(order.total_cost)),
    ]


def decode_order(
    fields: list[str],
    clients: dict[str, Client],
    photographers: dict[str, Photographer],
) -> Order:
    """Rebuild an order, resolving its client and photographer by id.

    The row stores only the session-type name and the order total, so the
    session type is rebuilt from that pair rather than from the catalog.
    """
    record_id, created_at, status, client_id, photographer_id, name, cost = fields
    client = clients.get(client_id)
    if client is None:
        raise ValueError(f"unknown client id {client_id}")
    photographer = photographers.get(photographer_id)
    if photographer is None:
        raise ValueError(f"unknown photographer id {photographer_id}")
    total_cost = float(cost)
    return Order(
        id=record_id,
        created_at=_parse_timestamp(created_at),
        client=client,
        photographer=photographer,
        session_type=SessionType(name=name, base_price=total_cost),
        total_cost=total_cost,
        status=OrderStatus(status),
    )


def encode_photo(photo: Photo, order: Order) -> list[str]:
    return [photo.id, order.id, photo.file_path]


def decode_photo(fields: list[str], orders: dict[str, Order]) -> tuple[Order, Photo]:
    photo_id, order_id, file_path = fields
    order = orders.get(order_id)
    if order is None:
        raise ValueError(f"unknown order id {order_id}")
    return order, Photo(id=photo_id, file_path=file_path)


def _parse_bool(value: str) -> bool:
    return value.strip().lower() == "true"


def _parse_timestamp(value: str) -> datetime:
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        return parsed
    try:
        return parsed.astimezone().replace(tzinfo=None)
    except (OverflowError, OSError) as exc:
        raise ValueError(f"timestamp out of range: {value}") from exc


def _index_by_id(items: Iterable[T]) -> dict[str, T]:
    index: dict[str, T] = {}
    for item in items:
        index.setdefault(item.id, item)  # type: ignore[attr-defined]
    return index
