"""Domain service: Checkout Request Composer.

Maps cart line items plus the shopper's delivery choices onto a
``CheckoutRequest``. Composition is pure; submitting the request is the
job of the application layer through the ``PaymentGateway`` port.

Shipping rules:
  - The provider collects a shipping address and charges a shipping rate
    only when at least one item is a catalog (non-fundraiser) item.
  - Pure fundraiser orders never let the provider collect shipping. Their
    ship-to-me fee arrives as an explicit override and is added as a
    separate ``Shipping`` line.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.cart import DEFAULT_CHAIN_COLOR, CartLineItem
from storefront.domain.model.checkout import (
    SHIPPING_LINE_NAME,
    CheckoutRequest,
    PricedLineItem,
)
from storefront.domain.model.order import INITIAL_ORDER_STATUS
from storefront.domain.model.value_objects import DeliveryMethod, Money, ShippingAddress
from storefront.domain.service.pricing import (
    PricingPolicy,
    compute_totals,
    resolve_delivery_method,
)


def stringify_metadata(raw: Mapping[str, object] | None) -> dict[str, str]:
    """Flatten metadata values to strings the provider will accept."""
    result: dict[str, str] = {}
    for key, value in (raw or {}).items():
        if value is None:
            result[str(key)] = ""
        elif isinstance(value, bool):
            result[str(key)] = "true" if value else "false"
        else:
            result[str(key)] = str(value)
    return result


class CheckoutRequestComposer:

    def __init__(self, app_url: str) -> None:
        base = app_url.rstrip("/")
        self._success_url = f"{base}/success"
        self._cancel_url = f"{base}/cancel"

    def compose(
        self,
        items: Sequence[CartLineItem],
        *,
        pricing: PricingPolicy,
        metadata: Mapping[str, object] | None = None,
        customer_email: str | None = None,
        shipping_address: ShippingAddress | None = None,
        shipping_cost: Money | None = None,
        success_url: str | None = None,
    ) -> CheckoutRequest:
        """Build the request for one checkout attempt.

        ``shipping_cost`` is the explicit override used by fundraiser
        flows; when omitted the fee comes from ``pricing``.
        """
        if not items:
            raise ValidationError("Cannot check out an empty cart")

        collect_shipping = any(not item.is_fundraiser for item in items)

        if shipping_cost is None:
            totals = compute_totals(items, resolve_delivery_method(items), pricing)
            shipping_cost = totals.shipping

        line_items = [self._to_priced_line(item) for item in items]
        if not collect_shipping and not shipping_cost.is_zero:
            line_items.append(self._shipping_line(shipping_cost))

        return CheckoutRequest(
            line_items=line_items,
            shipping_cost=shipping_cost,
            collect_shipping_address=collect_shipping,
            metadata=self._session_metadata(items[0], metadata, shipping_address),
            success_url=success_url or self._success_url,
            cancel_url=self._cancel_url,
            customer_email=customer_email or None,
        )

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_priced_line(item: CartLineItem) -> PricedLineItem:
        metadata = {
            "chain_color": item.chain_color or DEFAULT_CHAIN_COLOR,
            "image_url": item.remote_image_url or "",
            "delivery_method": (item.delivery_method or DeliveryMethod.SHIPPING).value,
        }
        if item.team_name:
            metadata["team_name"] = item.team_name
        if item.team_location:
            metadata["team_location"] = item.team_location
        if item.has_inline_image:
            metadata["image_upload_key"] = item.id
        for key, value in stringify_metadata(item.attributes).items():
            metadata.setdefault(key, value)

        images = (item.remote_image_url,) if item.remote_image_url else ()

        return PricedLineItem(
            name=item.product_name,
            unit_amount=item.price.to_minor_units(),
            quantity=item.quantity.value,
            images=images,
            metadata=metadata,
        )

    @staticmethod
    def _shipping_line(shipping_cost: Money) -> PricedLineItem:
        return PricedLineItem(
            name=SHIPPING_LINE_NAME,
            unit_amount=shipping_cost.to_minor_units(),
            quantity=1,
            metadata={"type": "shipping"},
        )

    @staticmethod
    def _session_metadata(
        first: CartLineItem,
        caller_metadata: Mapping[str, object] | None,
        shipping_address: ShippingAddress | None,
    ) -> dict[str, str]:
        metadata = stringify_metadata(caller_metadata)
        metadata.update(
            {
                "item_product_name": first.product_name,
                "item_quantity": str(first.quantity.value),
                "item_chain_color": first.chain_color or DEFAULT_CHAIN_COLOR,
                "item_team_name": first.team_name or "",
                "item_team_location": first.team_location or "",
                "item_image_path": first.remote_image_url or "",
                "item_image_upload_key": first.id if first.has_inline_image else "",
            }
        )
        if shipping_address is not None:
            for key, value in shipping_address.to_raw().items():
                metadata[f"shipping_{key}"] = value
        metadata["order_status"] = INITIAL_ORDER_STATUS.value
        return metadata
