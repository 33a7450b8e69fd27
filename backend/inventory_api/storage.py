from __future__ import annotations

import logging
import threading

from inventory_api.errors import NotFound, ValidationError
from inventory_api.schemas import Item, ItemCreate, ItemUpdate

logger = logging.getLogger(__name__)


class InventoryStore:
    """Thread-safe in-memory inventory.

    Items are kept in insertion order. Every public method holds the lock for its
    whole body and hands out copies, so callers never share state with the store.
    """

    def __init__(self):
        self._items: list[Item] = []
        self._next_id = 1
        self._lock = threading.Lock()

    def list(self) -> list[Item]:
        with self._lock:
            return [item.model_copy() for item in self._items]

    def count(self) -> int:
        with self._lock:
            return len(self._items)

    def create(self, data: ItemCreate) -> Item:
        with self._lock:
            _validate(data)
            item = Item(id=self._next_id, **data.model_dump())
            self._next_id += 1
            self._items.append(item)
            logger.info("Created item %d (%s)", item.id, item.name)
            return item.model_copy()

    def get(self, item_id: int) -> Item:
        with self._lock:
            return self._find(item_id).model_copy()

    def update(self, item_id: int, patch: ItemUpdate) -> Item:
        with self._lock:
            item = self._find(item_id)
            # Blank strings and negative numbers count as "not supplied".
            if patch.name is not None and patch.name.strip():
                item.name = patch.name
            if patch.description is not None and patch.description.strip():
                item.description = patch.description
            if patch.quantity is not None and patch.quantity >= 0:
                item.quantity = patch.quantity
            if patch.price is not None and patch.price >= 0:
                item.price = patch.price
            logger.info("Updated item %d", item_id)
            return item.model_copy()

    def delete(self, item_id: int) -> None:
        with self._lock:
            for index, item in enumerate(self._items):
                if item.id == item_id:
                    del self._items[index]
                    logger.info("Deleted item %d", item_id)
                    return
            raise NotFound()

    def _find(self, item_id: int) -> Item:
        for item in self._items:
            if item.id == item_id:
                return item
        raise NotFound()


def _validate(data: ItemCreate) -> None:
    if not data.name.strip():
        error = ValidationError("Name is required")
    elif data.quantity < 0:
        error = ValidationError("quantity cannot be negative")
    elif data.price < 0:
        error = ValidationError("price cannot be negative")
    else:
        return
    logger.warning("Rejected item: %s", error.message)
    raise error
