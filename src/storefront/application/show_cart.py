"""Application service: Show Cart use case (query)."""

from __future__ import annotations

from storefront.application.dto import CartDTO, cart_item_to_dto
from storefront.domain.repository.cart_store import CartStore
from storefront.domain.service.pricing import (
    PricingPolicies,
    compute_totals,
    resolve_delivery_method,
)


class ShowCartHandler:

    def __init__(self, cart_store: CartStore, policies: PricingPolicies) -> None:
        self._cart_store = cart_store
        self._policies = policies

    def handle(self) -> CartDTO:
        items = self._cart_store.load()
        method = resolve_delivery_method(items)
        totals = compute_totals(items, method, self._policies.for_cart(items))

        return CartDTO(
            items=[cart_item_to_dto(item) for item in items],
            delivery_method=method.value,
            subtotal=str(totals.subtotal),
            shipping=str(totals.shipping),
            tax=totals.tax_display,
            total=str(totals.total),
        )
