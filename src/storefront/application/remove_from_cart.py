"""Application service: Remove from Cart use case."""

from __future__ import annotations

from storefront.domain.repository.cart_store import CartStore


class RemoveFromCartHandler:

    def __init__(self, cart_store: CartStore) -> None:
        self._cart_store = cart_store

    def handle(self, item_id: str) -> bool:
        """Remove an item. Returns False if it was not in the cart."""
        present = any(item.id == item_id for item in self._cart_store.load())
        self._cart_store.remove(item_id)
        return present
