"""Order aggregate: one purchased product line from a completed checkout.

Orders are created when the payment provider reports a completed session,
never directly from the cart. After that the back office walks them
through production by setting their status.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money, ShippingAddress


class OrderStatus(Enum):
    RECEIVED = "received"
    PROCESSED = "processed"
    DESIGNED = "designed"
    PRODUCING = "producing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"

    @staticmethod
    def parse(raw: str) -> OrderStatus:
        try:
            return OrderStatus(raw.strip().lower())
        except ValueError as exc:
            allowed = ", ".join(s.value for s in OrderStatus)
            raise ValidationError(
                f"Unknown order status '{raw}' (expected one of: {allowed})"
            ) from exc


INITIAL_ORDER_STATUS = OrderStatus.RECEIVED
TRACKABLE_STATUSES = (OrderStatus.SHIPPED, OrderStatus.DELIVERED)


@dataclass
class Order:
    """Aggregate root for a purchased line.

    Use ``Order.create()`` for new orders. The ``__init__`` is intentionally
    simple so the repository can reconstitute persisted orders without
    re-validating.
    """

    id: int | None
    customer_email: str | None
    product_name: str
    price: Money
    quantity: int
    shipping_cost: Money
    tax_amount: Money
    total_amount: Money
    status: OrderStatus = INITIAL_ORDER_STATUS
    shipping_address: ShippingAddress | None = None
    is_fundraiser: bool = False
    fundraiser_id: str | None = None
    variation_id: str | None = None
    chain_color: str | None = None
    team_name: str | None = None
    team_location: str | None = None
    image_path: str | None = None
    image_upload_key: str | None = None
    checkout_session_id: str | None = None
    tracking_number: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(
        product_name: str,
        price: Money,
        quantity: int,
        *,
        customer_email: str | None = None,
        shipping_cost: Money | None = None,
        tax_amount: Money | None = None,
        total_amount: Money | None = None,
        status: OrderStatus = INITIAL_ORDER_STATUS,
        shipping_address: ShippingAddress | None = None,
        is_fundraiser: bool = False,
        fundraiser_id: str | None = None,
        variation_id: str | None = None,
        chain_color: str | None = None,
        team_name: str | None = None,
        team_location: str | None = None,
        image_path: str | None = None,
        image_upload_key: str | None = None,
        checkout_session_id: str | None = None,
    ) -> Order:
        if not product_name or not product_name.strip():
            raise ValidationError("Product name is required")
        if quantity <= 0:
            raise ValidationError("Order quantity must be positive")
        if is_fundraiser and not fundraiser_id:
            raise ValidationError("Fundraiser orders must reference a fundraiser")

        return Order(
            id=None,
            customer_email=customer_email,
            product_name=product_name.strip(),
            price=price,
            quantity=quantity,
            shipping_cost=shipping_cost or Money.zero(),
            tax_amount=tax_amount or Money.zero(),
            total_amount=total_amount or price,
            status=status,
            shipping_address=shipping_address,
            is_fundraiser=is_fundraiser,
            fundraiser_id=fundraiser_id,
            variation_id=variation_id,
            chain_color=chain_color or None,
            team_name=team_name or None,
            team_location=team_location or None,
            image_path=image_path or None,
            image_upload_key=image_upload_key or None,
            checkout_session_id=checkout_session_id,
        )

    # --- State transitions ----------------------------------------------------

    def update_status(self, status: OrderStatus, tracking_number: str | None = None) -> None:
        """Set the production status.

        The back office may move an order to any status, including back to
        an earlier one when a design has to be redone. A tracking number
        only makes sense once the order has left the workshop.
        """
        if tracking_number is not None:
            if status not in TRACKABLE_STATUSES:
                raise ValidationError(
                    f"Tracking number requires status shipped or delivered, got {status.value}"
                )
            if not tracking_number.strip():
                raise ValidationError("Tracking number cannot be blank")
            self.tracking_number = tracking_number.strip()
        self.status = status
