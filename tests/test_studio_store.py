"""Tests for the file-backed studio store."""

import logging
from pathlib import Path

from photo_studio.adapters.flat_file_codec import CLIENTS_FILE, ORDERS_FILE
from photo_studio.adapters.studio_store import StudioStore
from photo_studio.domain.inventory import InventoryItem
from photo_studio.domain.orders import Payment, SessionType
from photo_studio.domain.people import Client, Photographer
from photo_studio.services.seed import DefaultReferenceSeed
from tests.conftest import FailingCodec, make_order


def test_add_client_persists_immediately(
    store: StudioStore, data_dir: Path, anna: Client
) -> None:
    store.add_client(anna)

    lines = (data_dir / CLIENTS_FILE).read_text().splitlines()
    assert lines == [f"{anna.id},Anna,0501112233,anna@example.com,false"]


def test_add_order_persists_full_snapshot(
    store: StudioStore, data_dir: Path, anna: Client, ivan: Photographer
) -> None:
    store.add_client(anna)
    store.add_photographer(ivan)
    order = make_order(anna, ivan)

    store.add_order(order)

    reloaded = StudioStore(data_dir=data_dir)
    reloaded.load()
    assert [o.id for o in reloaded.orders()] == [order.id]
    assert reloaded.orders()[0].client.id == anna.id


def test_find_client_by_phone_returns_first_match(store: StudioStore) -> None:
    first = Client.create("First", "0500000000", "")
    second = Client.create("Second", "0500000000", "")
    store.add_client(first)
    store.add_client(second)

    assert store.find_client_by_phone("0500000000") is first
    assert store.find_client_by_phone("0509999999") is None


def test_client_exists_matches_phone_or_email(store: StudioStore, anna: Client) -> None:
    store.add_client(anna)

    assert store.client_exists("0501112233", "")
    assert store.client_exists("0000000000", "ANNA@example.COM")
    assert not store.client_exists("0000000000", "other@example.com")
    assert not store.client_exists("0000000000", "")


def test_empty_email_does_not_match_clients_without_email(store: StudioStore) -> None:
    store.add_client(Client.create("No Mail", "0500000000", ""))

    assert not store.client_exists("0501111111", "")


def test_persist_failure_is_logged_not_raised(
    data_dir: Path, anna: Client, caplog
) -> None:
    codec = FailingCodec()
    store = StudioStore(data_dir=data_dir, codec=codec)

    with caplog.at_level(logging.ERROR):
        store.add_client(anna)

    assert store.clients() == (anna,)
    assert codec.save_calls == 1
    assert "Failed to persist studio data" in caplog.text


def test_accessors_return_read_only_views(store: StudioStore, anna: Client) -> None:
    store.add_client(anna)

    clients = store.clients()

    assert isinstance(clients, tuple)
    assert store.clients() == (anna,)


def test_load_replaces_collections(
    store: StudioStore, data_dir: Path, anna: Client
) -> None:
    store.add_client(anna)
    store.add_client(Client.create("Extra", "0500000000", ""))
    (data_dir / CLIENTS_FILE).write_text(f"{anna.id},Anna,0501112233,,true\n")

    result = store.load()

    assert result.skipped == []
    assert [c.id for c in store.clients()] == [anna.id]
    assert store.clients()[0].is_regular is True


def test_load_with_seed_populates_reference_data(data_dir: Path) -> None:
    store = StudioStore(data_dir=data_dir, seed=DefaultReferenceSeed())

    result = store.load()

    assert result.seeded is True
    assert len(store.photographers()) == 3
    assert store.find_session_type("Portrait") == SessionType("Portrait", 1000.0)
    assert store.find_session_type("Underwater") is None


def test_reloaded_orders_keep_price_after_catalog_change(
    store: StudioStore, data_dir: Path, anna: Client, ivan: Photographer
) -> None:
    store.add_client(anna)
    store.add_photographer(ivan)
    store.add_session_type(SessionType("Portrait", 1000.0))
    catalog_entry = store.find_session_type("Portrait")
    assert catalog_entry is not None
    order = make_order(anna, ivan, session_type=catalog_entry)
    store.add_order(order)

    store.update_session_type(SessionType("Portrait", 1200.0))
    store.load()

    assert store.find_session_type("Portrait") == SessionType("Portrait", 1200.0)
    reloaded = store.get_order(order.id)
    assert reloaded is not None
    assert reloaded.total_cost == 1000.0
    assert reloaded.session_type == SessionType("Portrait", 1000.0)


def test_update_session_type_appends_unknown_names(store: StudioStore) -> None:
    store.update_session_type(SessionType("Newborn", 2000.0))

    assert store.session_types() == (SessionType("Newborn", 2000.0),)


def test_lookups_by_id(
    store: StudioStore, anna: Client, ivan: Photographer
) -> None:
    store.add_client(anna)
    store.add_photographer(ivan)
    order = make_order(anna, ivan)
    store.add_order(order)

    assert store.get_client(anna.id) is anna
    assert store.get_photographer(ivan.id) is ivan
    assert store.get_order(order.id) is order
    assert store.get_order("missing") is None


def test_payments_are_kept_in_memory_only(
    store: StudioStore, data_dir: Path, anna: Client, ivan: Photographer
) -> None:
    order = make_order(anna, ivan)
    store.add_payment(Payment.for_order(order))

    assert len(store.payments()) == 1
    assert not (data_dir / ORDERS_FILE).exists()


def test_inventory_merges_items_by_name(store: StudioStore) -> None:
    store.add_inventory_item(InventoryItem(name="Backdrop", quantity=2))
    merged = store.add_inventory_item(InventoryItem(name="Backdrop", quantity=3))
    store.add_inventory_item(InventoryItem(name="Flash", quantity=1))

    assert merged.quantity == 5
    assert [item.name for item in store.inventory()] == ["Backdrop", "Flash"]
