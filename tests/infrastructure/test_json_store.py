"""Tests for the JSON store and its repositories (real file I/O in tmp_path)."""

import json
import threading
from datetime import datetime, timezone

import pytest

from logitrack.application.order_service import OrderService
from logitrack.domain.exceptions import ValidationError
from logitrack.domain.model.inventory import InventoryItem
from logitrack.domain.model.order import Order
from logitrack.infrastructure.persistence.json_inventory_repository import (
    JsonInventoryRepository,
)
from logitrack.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from logitrack.infrastructure.persistence.json_store import JsonStore


@pytest.fixture
def store(tmp_path):
    return JsonStore(tmp_path / "data" / "logitrack.json")


@pytest.fixture
def inventory_repo(store):
    return JsonInventoryRepository(store)


@pytest.fixture
def order_repo(store):
    return JsonOrderRepository(store)


def _seed(inventory_repo):
    inventory_repo.add(InventoryItem.create("Pallet Jack", 4, "Aisle 3"))
    inventory_repo.add(InventoryItem.create("Shrink Wrap", 120))
    inventory_repo.add(InventoryItem.create("Forklift", 1, "Dock"))


class TestJsonStore:

    def test_creates_empty_document(self, store):
        data = json.loads(store.file_path.read_text(encoding="utf-8"))
        assert data["inventory_items"] == []
        assert data["orders"] == []
        assert data["order_items"] == []

    def test_transaction_commits(self, store):
        with store.transaction() as data:
            data["inventory_items"].append({"id": 1, "name": "X"})
        assert store.snapshot()["inventory_items"] == [{"id": 1, "name": "X"}]

    def test_transaction_rolls_back_on_error(self, store):
        with pytest.raises(RuntimeError):
            with store.transaction() as data:
                data["inventory_items"].append({"id": 1, "name": "X"})
                raise RuntimeError("boom")
        assert store.snapshot()["inventory_items"] == []

    def test_snapshot_is_detached(self, store):
        snap = store.snapshot()
        snap["orders"].append({"id": 99})
        assert store.snapshot()["orders"] == []

    def test_corrupt_file_propagates(self, store):
        store.file_path.write_text("{not json", encoding="utf-8")
        with pytest.raises(json.JSONDecodeError):
            store.snapshot()


class TestJsonInventoryRepository:

    def test_add_assigns_sequential_ids(self, inventory_repo):
        _seed(inventory_repo)
        assert [i.id for i in inventory_repo.list_all()] == [1, 2, 3]

    def test_roundtrip_fields(self, inventory_repo):
        _seed(inventory_repo)
        item = inventory_repo.get_by_id(1)
        assert item == InventoryItem(id=1, name="Pallet Jack", quantity=4, location="Aisle 3")
        assert inventory_repo.get_by_id(2).location is None

    def test_ids_not_reused_after_delete(self, inventory_repo):
        _seed(inventory_repo)
        inventory_repo.delete(3)
        item = inventory_repo.add(InventoryItem.create("Ladder"))
        assert item.id == 4

    def test_delete_missing_returns_false(self, inventory_repo):
        assert inventory_repo.delete(1) is False

    def test_delete_detaches_from_orders(self, inventory_repo, order_repo):
        _seed(inventory_repo)
        items = [inventory_repo.get_by_id(1), inventory_repo.get_by_id(2)]
        order = order_repo.add(Order.create("Alice", items))

        assert inventory_repo.delete(1) is True

        assert order_repo.get_by_id(order.id).item_ids == {2}


class TestJsonOrderRepository:

    def test_add_and_get_with_items(self, inventory_repo, order_repo):
        _seed(inventory_repo)
        stamp = datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc)
        items = [inventory_repo.get_by_id(1), inventory_repo.get_by_id(3)]
        order = order_repo.add(Order.create("Bob", items, order_date=stamp))

        loaded = order_repo.get_by_id(order.id)
        assert loaded.customer_name == "Bob"
        assert loaded.order_date == stamp
        assert loaded.item_ids == {1, 3}
        assert {i.name for i in loaded.items} == {"Pallet Jack", "Forklift"}

    def test_association_rows_written(self, store, inventory_repo, order_repo):
        _seed(inventory_repo)
        order_repo.add(Order.create("Bob", [inventory_repo.get_by_id(2)]))
        assert store.snapshot()["order_items"] == [{"order_id": 1, "item_id": 2}]

    def test_list_all_loads_items(self, inventory_repo, order_repo):
        _seed(inventory_repo)
        order_repo.add(Order.create("Alice", [inventory_repo.get_by_id(1)]))
        order_repo.add(Order.create("Bob", []))
        orders = order_repo.list_all()
        assert [o.item_ids for o in orders] == [{1}, set()]

    def test_delete_removes_associations(self, store, inventory_repo, order_repo):
        _seed(inventory_repo)
        order = order_repo.add(Order.create("Alice", [inventory_repo.get_by_id(1)]))

        assert order_repo.delete(order.id) is True

        assert order_repo.get_by_id(order.id) is None
        assert store.snapshot()["order_items"] == []
        assert inventory_repo.get_by_id(1) is not None

    def test_delete_missing_returns_false(self, order_repo):
        assert order_repo.delete(5) is False

    def test_unsaved_item_rejected_without_commit(self, store, order_repo):
        order = Order.create("Alice", [InventoryItem.create("Ghost")])
        with pytest.raises(ValueError, match="unsaved item"):
            order_repo.add(order)
        assert order.id is None
        assert store.snapshot()["orders"] == []



class _DeletingInventoryRepository(JsonInventoryRepository):
    """Deletes each item right after handing it out, racing the order write."""

    def get_by_id(self, item_id):
        item = super().get_by_id(item_id)
        if item is not None:
            self.delete(item_id)
        return item


class TestOrderReferentialIntegrity:

    def test_add_rejects_item_deleted_after_lookup(self, store, inventory_repo, order_repo):
        _seed(inventory_repo)
        item = inventory_repo.get_by_id(2)
        inventory_repo.delete(2)

        with pytest.raises(ValidationError, match="ID 2 not found") as exc_info:
            order_repo.add(Order.create("Alice", [inventory_repo.get_by_id(1), item]))

        assert exc_info.value.field == "item_ids"
        assert exc_info.value.value == 2
        data = store.snapshot()
        assert data["orders"] == []
        assert data["order_items"] == []
        assert data["next_ids"]["orders"] == 1

    def test_create_order_racing_delete_leaves_no_dangling_link(self, store, order_repo):
        racing_repo = _DeletingInventoryRepository(store)
        racing_repo.add(InventoryItem.create("Forklift"))
        service = OrderService(order_repo, racing_repo)

        with pytest.raises(ValidationError) as exc_info:
            service.create_order("Alice", [1])

        assert exc_info.value.value == 1
        data = store.snapshot()
        assert data["inventory_items"] == []
        assert data["orders"] == []
        assert data["order_items"] == []


class TestNoOpTransactions:

    def test_missing_delete_does_not_rewrite_file(self, store, inventory_repo, order_repo):
        _seed(inventory_repo)
        before = store.file_path.stat()

        assert inventory_repo.delete(99) is False
        assert order_repo.delete(99) is False

        after = store.file_path.stat()
        assert (after.st_ino, after.st_mtime_ns) == (before.st_ino, before.st_mtime_ns)


class TestConcurrentWrites:

    def test_parallel_adds_get_unique_ids(self, inventory_repo):
        def worker(n: int) -> None:
            for i in range(10):
                inventory_repo.add(InventoryItem.create(f"item-{n}-{i}"))

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        ids = [item.id for item in inventory_repo.list_all()]
        assert sorted(ids) == list(range(1, 41))
