"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from storefront.domain.model.cart import CartLineItem
from storefront.domain.model.order import Order


# --- Inputs -------------------------------------------------------------------


@dataclass(frozen=True)
class MedallionSpec:
    """Input: a custom medallion ordered from the catalog."""

    quantity: int = 1
    image_reference: str | None = None
    team_name: str | None = None
    team_location: str | None = None
    chain_color: str | None = None


@dataclass(frozen=True)
class FundraiserPurchaseSpec:
    """Input: a variation bought from a fundraiser page."""

    fundraiser_id: str
    variation_id: str
    quantity: int = 1
    delivery_method: str = "shipping"
    age_division: str | None = None
    team_name: str | None = None


@dataclass(frozen=True)
class VariationSpec:
    title: str
    price: str
    image_path: str | None = None


# --- Outputs ------------------------------------------------------------------


@dataclass(frozen=True)
class CartItemDTO:
    id: str
    product_name: str
    quantity: int
    unit_price: str  # formatted, e.g. "$49.99"
    line_total: str
    is_fundraiser: bool
    delivery_method: str | None
    team_name: str | None


@dataclass(frozen=True)
class CartDTO:
    items: list[CartItemDTO]
    delivery_method: str
    subtotal: str
    shipping: str
    tax: str
    total: str

    @property
    def is_empty(self) -> bool:
        return not self.items


@dataclass(frozen=True)
class CheckoutResultDTO:
    url: str
    session_id: str
    uploads_pending: int = 0


@dataclass(frozen=True)
class VariationDTO:
    id: str
    title: str
    price: str
    donation_preview: str


@dataclass(frozen=True)
class FundraiserDTO:
    id: str
    title: str
    custom_link: str
    base_price: str
    status: str
    donation_text: str
    pickup_available: bool
    variations: list[VariationDTO] = field(default_factory=list)


@dataclass(frozen=True)
class FundraiserTotalsDTO:
    fundraiser_id: str
    total_raised: str
    total_orders: int
    total_items_sold: int


@dataclass(frozen=True)
class OrderDTO:
    id: int
    customer_email: str
    product_name: str
    quantity: int
    price: str
    shipping_cost: str
    tax_amount: str
    total_amount: str
    status: str
    is_fundraiser: bool
    shipping_address: str
    tracking_number: str
    created_at: str
    chain_color: str = ""
    team_name: str = ""
    team_location: str = ""
    image_path: str = ""
    image_upload_key: str = ""


# --- Mapping ------------------------------------------------------------------


def cart_item_to_dto(item: CartLineItem) -> CartItemDTO:
    return CartItemDTO(
        id=item.id,
        product_name=item.product_name,
        quantity=item.quantity.value,
        unit_price=str(item.price),
        line_total=str(item.line_total),
        is_fundraiser=item.is_fundraiser,
        delivery_method=item.delivery_method.value if item.delivery_method else None,
        team_name=item.team_name,
    )


def order_to_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id,  # type: ignore[arg-type]
        customer_email=order.customer_email or "",
        product_name=order.product_name,
        quantity=order.quantity,
        price=str(order.price),
        shipping_cost=str(order.shipping_cost),
        tax_amount=str(order.tax_amount),
        total_amount=str(order.total_amount),
        status=order.status.value,
        is_fundraiser=order.is_fundraiser,
        shipping_address=str(order.shipping_address) if order.shipping_address else "",
        tracking_number=order.tracking_number or "",
        created_at=order.created_at.strftime("%Y-%m-%d %H:%M UTC"),
        chain_color=order.chain_color or "",
        team_name=order.team_name or "",
        team_location=order.team_location or "",
        image_path=order.image_path or "",
        image_upload_key=order.image_upload_key or "",
    )
