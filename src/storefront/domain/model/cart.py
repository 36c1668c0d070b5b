"""Cart line items.

A line item is a snapshot of what the shopper picked: name, unit price,
quantity and the customization that must reach the order record. Only
quantity and delivery method change after the item is created; once the
cart is submitted to checkout the items are consumed and the cart cleared.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import DeliveryMethod, Money, Quantity

DEFAULT_CHAIN_COLOR = "Designers' Choice"
INLINE_IMAGE_PREFIX = "data:"


def new_line_item_id() -> str:
    return uuid.uuid4().hex


def is_inline_image(reference: str | None) -> bool:
    return bool(reference) and reference.startswith(INLINE_IMAGE_PREFIX)


@dataclass
class CartLineItem:
    id: str
    product_name: str
    price: Money
    quantity: Quantity = field(default_factory=lambda: Quantity(1))
    image_reference: str | None = None
    is_fundraiser: bool = False
    delivery_method: DeliveryMethod | None = None
    team_name: str | None = None
    team_location: str | None = None
    chain_color: str | None = None
    attributes: dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.product_name or not self.product_name.strip():
            raise ValidationError("Product name is required")
        if self.delivery_method is not None and not self.is_fundraiser:
            raise ValidationError("Only fundraiser items carry a delivery method")

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def create(
        product_name: str,
        price: Money,
        quantity: int = 1,
        **customization,
    ) -> CartLineItem:
        """Create a new line item with a freshly generated id."""
        return CartLineItem(
            id=new_line_item_id(),
            product_name=product_name.strip() if product_name else product_name,
            price=price,
            quantity=Quantity(quantity),
            **customization,
        )

    # --- Mutations allowed before checkout ------------------------------------

    def change_quantity(self, quantity: int) -> None:
        """Set the quantity, never going below one."""
        self.quantity = Quantity(max(1, quantity))

    def change_delivery_method(self, method: DeliveryMethod) -> None:
        if not self.is_fundraiser:
            raise ValidationError("Only fundraiser items carry a delivery method")
        self.delivery_method = method

    # --- Computed properties --------------------------------------------------

    @property
    def line_total(self) -> Money:
        return self.price * self.quantity.value

    @property
    def needs_shipping(self) -> bool:
        """Catalog items always ship; fundraiser items ship unless picked up."""
        if self.delivery_method is None:
            return not self.is_fundraiser
        return self.delivery_method == DeliveryMethod.SHIPPING

    @property
    def has_inline_image(self) -> bool:
        return is_inline_image(self.image_reference)

    @property
    def remote_image_url(self) -> str | None:
        if self.image_reference and not self.has_inline_image:
            return self.image_reference
        return None
