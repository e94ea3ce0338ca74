"""Cart state manager backed by local storage."""

import json
import logging

from pydantic import ValidationError

from rural_connect.models.cart_models import CartItem
from rural_connect.models.catalog_models import Product
from rural_connect.observability.metrics import record_cart_mutation
from rural_connect.storage.local_storage import CART_KEY, LocalStorage

logger = logging.getLogger(__name__)


class CartManager:
    """Ordered list of (product, quantity) entries mirrored to local storage.

    Each mutation computes the new cart, writes the complete serialized
    snapshot under the ``cart`` key, and only then replaces the in-memory
    list. If the write fails the in-memory cart is left unchanged, so the
    stored snapshot and the in-memory state never diverge.
    """

    def __init__(self, storage: LocalStorage) -> None:
        """Initialize an empty cart.

        Args:
            storage: Local storage holding the cart snapshot
        """
        self.storage = storage
        self._items: list[CartItem] = []

    @property
    def items(self) -> list[CartItem]:
        """Cart entries in insertion order."""
        return list(self._items)

    @property
    def count(self) -> int:
        """Number of distinct entries."""
        return len(self._items)

    @property
    def is_empty(self) -> bool:
        return not self._items

    @property
    def total(self) -> int:
        """Sum of price times quantity over all entries, in rupees."""
        return sum(item.line_total for item in self._items)

    def load(self) -> list[CartItem]:
        """Read the saved cart snapshot into memory.

        A missing or unreadable snapshot yields an empty cart.

        Returns:
            The loaded cart entries
        """
        saved = self.storage.get_item(CART_KEY)
        if not saved:
            self._items = []
            return self.items

        try:
            self._items = [CartItem.model_validate(entry) for entry in json.loads(saved)]
        except (json.JSONDecodeError, TypeError, ValidationError) as e:
            logger.warning(f"Discarding unreadable cart snapshot: {e}")
            self._items = []

        return self.items

    def serialize(self, items: list[CartItem] | None = None) -> str:
        """Serialize entries (default: the current cart) to the stored JSON form."""
        entries = self._items if items is None else items
        return json.dumps([item.model_dump(mode="json", by_alias=True) for item in entries])

    def _save(self, new_items: list[CartItem], operation: str) -> None:
        self.storage.set_item(CART_KEY, self.serialize(new_items))
        self._items = new_items
        record_cart_mutation(operation)

    def add(self, product: Product) -> None:
        """Add one unit of ``product``, merging with an existing entry."""
        if any(item.product.id == product.id for item in self._items):
            new_items = [
                item.model_copy(update={"quantity": item.quantity + 1})
                if item.product.id == product.id
                else item
                for item in self._items
            ]
        else:
            new_items = [*self._items, CartItem(product=product, quantity=1)]

        self._save(new_items, "add")

    def set_quantity(self, product_id: str, quantity: int) -> None:
        """Set the quantity of an entry; zero or below removes it."""
        if quantity <= 0:
            self.remove(product_id)
            return

        new_items = [
            item.model_copy(update={"quantity": quantity}) if item.product.id == product_id else item
            for item in self._items
        ]
        self._save(new_items, "set_quantity")

    def remove(self, product_id: str) -> None:
        """Remove the entry for ``product_id`` if present."""
        new_items = [item for item in self._items if item.product.id != product_id]
        self._save(new_items, "remove")

    def clear(self) -> None:
        """Empty the cart."""
        self._save([], "clear")
