"""Application service: Checkout Cart use case.

Turns the persisted cart into a hosted checkout session. The cart is
consumed by a successful submission and cleared afterwards; a failed
submission leaves it untouched so the shopper can try again.
"""

from __future__ import annotations

import logging

from storefront.application.dto import CheckoutResultDTO
from storefront.application.image_uploads import BackgroundImageUploads
from storefront.application.submit_checkout import CheckoutSubmitter
from storefront.domain.exceptions import CartPersistenceError, ValidationError
from storefront.domain.model.cart import CartLineItem
from storefront.domain.model.value_objects import ShippingAddress
from storefront.domain.repository.cart_store import CartStore
from storefront.domain.service.checkout_composer import CheckoutRequestComposer
from storefront.domain.service.pricing import (
    PricingPolicies,
    compute_totals,
    resolve_delivery_method,
)

logger = logging.getLogger(__name__)


class CheckoutCartHandler:

    def __init__(
        self,
        cart_store: CartStore,
        submitter: CheckoutSubmitter,
        composer: CheckoutRequestComposer,
        policies: PricingPolicies,
        uploads: BackgroundImageUploads | None = None,
    ) -> None:
        self._cart_store = cart_store
        self._submitter = submitter
        self._composer = composer
        self._policies = policies
        self._uploads = uploads

    def handle(
        self,
        customer_email: str | None = None,
        shipping_address: ShippingAddress | None = None,
    ) -> CheckoutResultDTO:
        items = self._cart_store.load()
        if not items:
            raise ValidationError("Your cart is empty")

        policy = self._policies.for_cart(items)
        method = resolve_delivery_method(items)

        # Fundraiser carts pass their shipping fee explicitly; catalog
        # carts let the composer price it.
        shipping_override = None
        if policy is self._policies.fundraiser:
            shipping_override = compute_totals(items, method, policy).shipping

        request = self._composer.compose(
            items,
            pricing=policy,
            metadata=self._cart_metadata(items, method.value),
            customer_email=customer_email,
            shipping_address=shipping_address,
            shipping_cost=shipping_override,
        )

        pending = self._uploads.schedule(items) if self._uploads else []

        attempt = self._submitter.submit(request)

        try:
            self._cart_store.clear()
        except CartPersistenceError as exc:
            # The shopper is on their way to the hosted page; a stale cart is
            # overwritten on the next load.
            logger.warning("Checkout succeeded but the cart could not be cleared: %s", exc)

        return CheckoutResultDTO(
            url=attempt.url,  # type: ignore[arg-type]
            session_id=attempt.session_id,  # type: ignore[arg-type]
            uploads_pending=len(pending),
        )

    @staticmethod
    def _cart_metadata(items: list[CartLineItem], delivery_method: str) -> dict[str, object]:
        is_fundraiser = all(item.is_fundraiser for item in items)
        metadata: dict[str, object] = {
            "is_fundraiser": is_fundraiser,
            "delivery_method": delivery_method,
        }
        fundraiser_items = [item for item in items if item.is_fundraiser]
        if not fundraiser_items:
            return metadata

        # Only a cart from a single fundraiser can be credited to it.
        fundraiser_ids = {item.attributes.get("fundraiser_id") for item in fundraiser_items}
        if is_fundraiser and len(fundraiser_ids) == 1 and None not in fundraiser_ids:
            metadata["fundraiser_id"] = fundraiser_ids.pop()
            variation_ids = {item.attributes.get("variation_id") for item in items}
            if len(variation_ids) == 1 and None not in variation_ids:
                metadata["variation_id"] = variation_ids.pop()
        else:
            logger.warning(
                "%d fundraiser item(s) in this cart will not be credited to a fundraiser "
                "(the cart mixes catalog items or several fundraisers)",
                len(fundraiser_items),
            )
        return metadata
