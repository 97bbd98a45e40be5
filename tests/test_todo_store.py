"""
Unit tests for the in-memory todo store
"""

import threading

from conftest import make_todo
from services.todo_store import (
    TodoStore,
    ITEM_DELETED,
    ITEM_UPDATED,
    ITEM_NOT_FOUND,
    ALL_ITEMS_DELETED,
)


class TestAddOrUpdate:

    def test_appends_new_items_in_order(self):
        store = TodoStore()
        store.add_or_update(make_todo(1))
        store.add_or_update(make_todo(2))
        store.add_or_update(make_todo(3))

        assert [item.id for item in store.list_items()] == [1, 2, 3]

    def test_same_id_replaces_with_latest_values(self):
        store = TodoStore()
        store.add_or_update(make_todo(1, name="A"))
        store.add_or_update(make_todo(1, name="B", completed=True))

        items = store.list_items()
        assert len(items) == 1
        assert items[0].name == "B"
        assert items[0].completed is True

    def test_replace_keeps_position(self):
        store = TodoStore()
        for todo_id in (1, 2, 3):
            store.add_or_update(make_todo(todo_id))

        store.add_or_update(make_todo(1, name="Changed"))

        items = store.list_items()
        assert [item.id for item in items] == [1, 2, 3]
        assert items[0].name == "Changed"


class TestSnapshots:

    def test_empty_store_lists_nothing(self):
        assert TodoStore().list_items() == []

    def test_mutating_a_returned_item_does_not_touch_the_store(self):
        store = TodoStore()
        store.add_or_update(make_todo(1, name="Original"))

        store.list_items()[0].name = "Mutated"

        assert store.list_items()[0].name == "Original"

    def test_mutating_the_stored_input_does_not_touch_the_store(self):
        store = TodoStore()
        item = make_todo(1, name="Original")
        store.add_or_update(item)

        item.name = "Mutated"

        assert store.list_items()[0].name == "Original"

    def test_snapshot_unaffected_by_later_writes(self):
        store = TodoStore()
        store.add_or_update(make_todo(1))
        snapshot = store.list_items()

        store.add_or_update(make_todo(2))
        store.delete_all()

        assert [item.id for item in snapshot] == [1]

    def test_get_returns_zero_or_one_items(self):
        store = TodoStore()
        store.add_or_update(make_todo(1))

        assert [item.id for item in store.get(1)] == [1]
        assert store.get(2) == []


class TestDelete:

    def test_delete_existing_item(self):
        store = TodoStore()
        store.add_or_update(make_todo(1))
        store.add_or_update(make_todo(2))

        assert store.delete(1) == ITEM_DELETED
        assert [item.id for item in store.list_items()] == [2]

    def test_delete_missing_id_leaves_store_unchanged(self):
        store = TodoStore()
        store.add_or_update(make_todo(1))
        store.add_or_update(make_todo(2))

        assert store.delete(99) == ITEM_NOT_FOUND
        assert [item.id for item in store.list_items()] == [1, 2]

    def test_delete_on_empty_store(self):
        store = TodoStore()

        assert store.delete(1) == ITEM_NOT_FOUND
        assert len(store) == 0

    def test_delete_all_empties_the_store(self):
        store = TodoStore()
        for todo_id in range(5):
            store.add_or_update(make_todo(todo_id))

        assert store.delete_all() == ALL_ITEMS_DELETED
        assert store.list_items() == []

    def test_delete_all_is_idempotent(self):
        store = TodoStore()

        assert store.delete_all() == ALL_ITEMS_DELETED
        assert store.delete_all() == ALL_ITEMS_DELETED
        assert store.list_items() == []


class TestUpdate:

    def test_update_existing_item_in_place(self):
        store = TodoStore()
        store.add_or_update(make_todo(1))
        store.add_or_update(make_todo(2))

        assert store.update(make_todo(1, name="Updated", synced=False)) == ITEM_UPDATED

        items = store.list_items()
        assert [item.id for item in items] == [1, 2]
        assert items[0].name == "Updated"
        assert items[0].synced is False

    def test_update_missing_id_does_not_append(self):
        store = TodoStore()
        store.add_or_update(make_todo(1))

        assert store.update(make_todo(2)) == ITEM_NOT_FOUND
        assert [item.id for item in store.list_items()] == [1]


class TestConcurrency:

    def test_concurrent_upserts_keep_one_item_per_id(self):
        store = TodoStore()
        ids = list(range(20))

        def writer(worker):
            for todo_id in ids:
                store.add_or_update(make_todo(todo_id, name=f"worker-{worker}"))

        threads = [threading.Thread(target=writer, args=(worker,)) for worker in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        items = store.list_items()
        assert sorted(item.id for item in items) == ids
        assert len(store) == len(ids)

    def test_concurrent_deletes_remove_once(self):
        store = TodoStore()
        store.add_or_update(make_todo(1))
        results = []

        def deleter():
            results.append(store.delete(1))

        threads = [threading.Thread(target=deleter) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert results.count(ITEM_DELETED) == 1
        assert results.count(ITEM_NOT_FOUND) == 7
        assert store.list_items() == []
