"""Abstract cart store.

The cart is a single, client-local list of line items. Concrete stores
only implement ``load`` and ``save``; every other cart operation is a
read-modify-write on top of them, so the storage key and the
(de)serialization contract live in exactly one place.

There is no concurrency control: if two sessions write, the last write
wins.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.cart import CartLineItem


class CartStore(ABC):

    @abstractmethod
    def load(self) -> list[CartLineItem]:
        """Return the persisted items, or [] if none exist or they fail to parse."""

    @abstractmethod
    def save(self, items: list[CartLineItem]) -> None:
        """Overwrite the persisted items. Raises CartPersistenceError on failure."""

    # --- Operations built on load/save ----------------------------------------

    def add(self, item: CartLineItem) -> None:
        items = self.load()
        items.append(item)
        self.save(items)

    def remove(self, item_id: str) -> None:
        items = self.load()
        remaining = [item for item in items if item.id != item_id]
        if len(remaining) != len(items):
            self.save(remaining)

    def set_quantity(self, item_id: str, quantity: int) -> None:
        """Rewrite one item's quantity, clamped to a minimum of 1."""
        items = self.load()
        for item in items:
            if item.id == item_id:
                item.change_quantity(quantity)
                self.save(items)
                return

    def clear(self) -> None:
        self.save([])
