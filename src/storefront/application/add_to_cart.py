"""Application service: Add to Cart use cases.

One handler per kind of product: a catalog medallion, or a variation
bought from a fundraiser page.
"""

from __future__ import annotations

import logging

from storefront.application.dto import (
    CartItemDTO,
    FundraiserPurchaseSpec,
    MedallionSpec,
    cart_item_to_dto,
)
from storefront.application.item_builders import build_fundraiser_item, build_medallion_item
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.cart_store import CartStore
from storefront.domain.repository.fundraiser_repository import FundraiserRepository

logger = logging.getLogger(__name__)


class AddMedallionToCartHandler:

    def __init__(self, cart_store: CartStore, medallion_price: Money) -> None:
        self._cart_store = cart_store
        self._medallion_price = medallion_price

    def handle(self, spec: MedallionSpec) -> CartItemDTO:
        item = build_medallion_item(spec, self._medallion_price)
        self._cart_store.add(item)
        logger.info("Added %s x%d to cart (%s)", item.product_name, item.quantity.value, item.id)
        return cart_item_to_dto(item)


class AddFundraiserItemToCartHandler:

    def __init__(self, cart_store: CartStore, fundraiser_repo: FundraiserRepository) -> None:
        self._cart_store = cart_store
        self._fundraiser_repo = fundraiser_repo

    def handle(self, spec: FundraiserPurchaseSpec) -> CartItemDTO:
        fundraiser = self._fundraiser_repo.get_by_id(spec.fundraiser_id)
        if fundraiser is None:
            raise EntityNotFoundError(f"Fundraiser '{spec.fundraiser_id}' not found")

        item = build_fundraiser_item(fundraiser, fundraiser.variation(spec.variation_id), spec)
        self._cart_store.add(item)
        logger.info(
            "Added fundraiser item %s x%d to cart (fundraiser=%s, delivery=%s)",
            item.product_name,
            item.quantity.value,
            fundraiser.id,
            item.delivery_method.value if item.delivery_method else "-",
        )
        return cart_item_to_dto(item)
