"""Application service: Update Cart Item use case.

Quantity and delivery method are the only things a shopper can change on
an item already in the cart.
"""

from __future__ import annotations

from storefront.application.dto import CartItemDTO, cart_item_to_dto
from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.value_objects import DeliveryMethod
from storefront.domain.repository.cart_store import CartStore


class UpdateCartItemHandler:

    def __init__(self, cart_store: CartStore) -> None:
        self._cart_store = cart_store

    def handle(
        self,
        item_id: str,
        quantity: int | None = None,
        delivery_method: str | None = None,
    ) -> CartItemDTO:
        if quantity is None and delivery_method is None:
            raise ValidationError("Nothing to update: give a quantity or a delivery method")

        items = self._cart_store.load()
        for item in items:
            if item.id == item_id:
                break
        else:
            raise EntityNotFoundError(f"Cart item '{item_id}' not found")

        if delivery_method is not None:
            method = DeliveryMethod.parse(delivery_method)
            if method is None:
                raise ValidationError("Delivery method cannot be blank")
            item.change_delivery_method(method)
            self._cart_store.save(items)

        if quantity is not None:
            # Quantity goes through the store so the clamp rule lives in one place.
            self._cart_store.set_quantity(item_id, quantity)
            item.change_quantity(quantity)

        return cart_item_to_dto(item)
