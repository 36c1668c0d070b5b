"""Domain service: order pricing.

Pure functions from cart line items to a priced breakdown. Shipping is a
flat per-order fee, never per item. Whether tax is computed locally or
left to the payment provider depends on the checkout flow: the catalog
cart shows a local 5% tax line, while fundraiser and buy-now checkouts
let the provider compute it and must not add a local tax line.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.cart import CartLineItem
from storefront.domain.model.value_objects import DeliveryMethod, Money

CATALOG_SHIPPING_COST = Money(Decimal("8.00"))
FUNDRAISER_SHIPPING_COST = Money(Decimal("5.00"))
CART_TAX_RATE = Decimal("0.05")


@dataclass(frozen=True)
class PricingPolicy:
    """Flat shipping fee plus an optional local tax rate.

    ``tax_rate`` of None means tax is calculated by the payment provider.
    """

    name: str
    shipping_cost: Money
    tax_rate: Decimal | None = None

    def __post_init__(self) -> None:
        if self.tax_rate is not None and not Decimal("0") <= self.tax_rate < Decimal("1"):
            raise ValidationError(f"Tax rate must be in [0, 1), got {self.tax_rate}")

    @property
    def taxes_locally(self) -> bool:
        return self.tax_rate is not None


@dataclass(frozen=True)
class PricingPolicies:
    """The three pricing flows the storefront supports."""

    catalog_cart: PricingPolicy
    catalog_buy_now: PricingPolicy
    fundraiser: PricingPolicy

    @staticmethod
    def build(
        catalog_shipping: Money = CATALOG_SHIPPING_COST,
        fundraiser_shipping: Money = FUNDRAISER_SHIPPING_COST,
        cart_tax_rate: Decimal = CART_TAX_RATE,
    ) -> PricingPolicies:
        return PricingPolicies(
            catalog_cart=PricingPolicy("catalog-cart", catalog_shipping, cart_tax_rate),
            catalog_buy_now=PricingPolicy("catalog-buy-now", catalog_shipping),
            fundraiser=PricingPolicy("fundraiser", fundraiser_shipping),
        )

    def for_cart(self, items: Iterable[CartLineItem]) -> PricingPolicy:
        """A cart holding only fundraiser items is priced as a fundraiser sale."""
        items = list(items)
        if items and all(item.is_fundraiser for item in items):
            return self.fundraiser
        return self.catalog_cart


@dataclass(frozen=True)
class PriceBreakdown:
    subtotal: Money
    shipping: Money
    tax: Money | None
    total: Money

    @property
    def tax_display(self) -> str:
        return str(self.tax) if self.tax is not None else "Calculated at checkout"


def resolve_delivery_method(items: Iterable[CartLineItem]) -> DeliveryMethod:
    """Ship when anything in the cart needs shipping, otherwise pickup."""
    if any(item.needs_shipping for item in items):
        return DeliveryMethod.SHIPPING
    return DeliveryMethod.PICKUP


def compute_subtotal(items: Iterable[CartLineItem]) -> Money:
    result = Money.zero()
    for item in items:
        result = result + item.line_total
    return result


def compute_totals(
    items: Iterable[CartLineItem],
    delivery_method: DeliveryMethod,
    policy: PricingPolicy,
) -> PriceBreakdown:
    """Price a cart.

    ``subtotal`` is the sum of price x quantity; ``shipping`` is the
    policy's flat fee when shipping and zero for pickup; ``tax`` is
    ``subtotal x rate`` only for policies that tax locally. Amounts are
    left unrounded; ``Money`` rounds on display.
    """
    subtotal = compute_subtotal(items)

    if delivery_method == DeliveryMethod.SHIPPING:
        shipping = policy.shipping_cost
    else:
        shipping = Money.zero()

    tax = subtotal * policy.tax_rate if policy.taxes_locally else None

    total = subtotal + shipping
    if tax is not None:
        total = total + tax

    return PriceBreakdown(subtotal=subtotal, shipping=shipping, tax=tax, total=total)
