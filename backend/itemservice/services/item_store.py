"""In-memory item store."""

import threading

import structlog

from itemservice.core.errors import ItemNotFound
from itemservice.models.item import Item, ItemForm

logger = structlog.get_logger(__name__)

SAMPLE_ITEMS = [
    ItemForm(name='itemA', price=10000, quantity=10),
    ItemForm(name='itemB', price=20000, quantity=20),
]


class ItemStore:
    """
    Process-lifetime collection of items keyed by id.

    Thread-safe. Ids start at 1 and are never reused, even after clear().
    Items are copied on the way in and out so callers never hold a
    reference to stored state.
    """

    def __init__(self) -> None:
        self._items: dict[int, Item] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def find_all(self) -> list[Item]:
        """Return all items in insertion order."""
        with self._lock:
            return [item.model_copy() for item in self._items.values()]

    def find_by_id(self, item_id: int) -> Item:
        with self._lock:
            if item_id not in self._items:
                raise ItemNotFound(item_id)
            return self._items[item_id].model_copy()

    def save(self, form: ItemForm) -> Item:
        """Store a new item under the next id and return it."""
        with self._lock:
            item = Item(id=self._next_id, name=form.name, price=form.price, quantity=form.quantity)
            self._items[item.id] = item
            self._next_id += 1

        logger.info('item_saved', item_id=item.id)
        return item.model_copy()

    def update(self, item_id: int, form: ItemForm) -> Item:
        """Replace name, price and quantity of an existing item, keeping its id."""
        with self._lock:
            if item_id not in self._items:
                raise ItemNotFound(item_id)
            item = Item(id=item_id, name=form.name, price=form.price, quantity=form.quantity)
            self._items[item_id] = item

        logger.info('item_updated', item_id=item_id)
        return item.model_copy()

    def clear(self) -> None:
        with self._lock:
            self._items.clear()

    def seed(self, forms: list[ItemForm] | None = None) -> None:
        """Save the sample rows (or the given forms)."""
        for form in SAMPLE_ITEMS if forms is None else forms:
            self.save(form)
