"""
Todo store - in-memory collection of todo items keyed by id
"""

import logging
import threading
from typing import List

from models.todo import Todo

logger = logging.getLogger(__name__)

ITEM_DELETED = "Item is deleted"
ITEM_UPDATED = "Item is updated"
ITEM_NOT_FOUND = "Item not found"
ALL_ITEMS_DELETED = "All items are deleted"


class TodoStore:
    """
    Ordered, lock-guarded collection of Todo items

    At most one item per id is kept. Items are copied on the way in and on
    the way out, so callers must write changes back through the store.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._items: List[Todo] = []

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def _index_of(self, todo_id: int) -> int:
        # Caller must hold the lock
        for index, item in enumerate(self._items):
            if item.id == todo_id:
                return index
        return -1

    def add_or_update(self, item: Todo) -> None:
        """
        Insert an item, or replace the existing item with the same id

        A replaced item keeps its position in the list.

        Args:
            item: Todo to store
        """
        with self._lock:
            index = self._index_of(item.id)
            if index >= 0:
                self._items[index] = item.model_copy()
                logger.info(f"Replaced todo {item.id} at position {index}")
            else:
                self._items.append(item.model_copy())
                logger.info(f"Added todo {item.id}")

    def list_items(self) -> List[Todo]:
        """Return a snapshot of all items in order"""
        with self._lock:
            return [item.model_copy() for item in self._items]

    def get(self, todo_id: int) -> List[Todo]:
        """
        Look up an item by id

        Returns:
            List holding the matching item, or an empty list
        """
        with self._lock:
            return [item.model_copy() for item in self._items if item.id == todo_id][:1]

    def delete(self, todo_id: int) -> str:
        """
        Remove the item with the given id

        Returns:
            Status message; a missing id is reported, not raised
        """
        with self._lock:
            index = self._index_of(todo_id)
            if index < 0:
                logger.info(f"Delete requested for unknown todo {todo_id}")
                return ITEM_NOT_FOUND
            del self._items[index]
        logger.info(f"Deleted todo {todo_id}")
        return ITEM_DELETED

    def delete_all(self) -> str:
        """Remove every item. Safe to call on an empty store."""
        with self._lock:
            count = len(self._items)
            self._items.clear()
        logger.info(f"Deleted all todos ({count} removed)")
        return ALL_ITEMS_DELETED

    def update(self, item: Todo) -> str:
        """
        Replace the existing item with the same id

        Unlike add_or_update, an unknown id is never appended.

        Returns:
            Status message
        """
        with self._lock:
            index = self._index_of(item.id)
            if index < 0:
                logger.info(f"Update requested for unknown todo {item.id}")
                return ITEM_NOT_FOUND
            self._items[index] = item.model_copy()
        logger.info(f"Updated todo {item.id}")
        return ITEM_UPDATED
