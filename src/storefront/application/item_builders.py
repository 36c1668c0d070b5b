"""Line-item construction shared by the add-to-cart and buy-now use cases.

Both entry points for a product (put it in the cart, or check it out
straight away) must apply the same validation, so it lives here once.
"""

from __future__ import annotations

from storefront.application.dto import FundraiserPurchaseSpec, MedallionSpec
from storefront.domain.exceptions import ValidationError
from storefront.domain.model.cart import CartLineItem
from storefront.domain.model.fundraiser import Fundraiser, FundraiserVariation
from storefront.domain.model.value_objects import DeliveryMethod, Money

MEDALLION_PRODUCT_NAME = "Custom Medallion"


def build_medallion_item(spec: MedallionSpec, price: Money) -> CartLineItem:
    """A catalog medallion needs either a photo or a complete team name and location."""
    has_image = bool(spec.image_reference)
    has_team_info = bool(spec.team_name and spec.team_location)
    if not has_image and not has_team_info:
        raise ValidationError(
            "Please upload an image or enter complete team information "
            "(both name and location)"
        )

    return CartLineItem.create(
        MEDALLION_PRODUCT_NAME,
        price,
        spec.quantity,
        image_reference=spec.image_reference or None,
        chain_color=spec.chain_color or None,
        team_name=spec.team_name or None,
        team_location=spec.team_location or None,
    )


def validate_team_selection(fundraiser: Fundraiser, spec: FundraiserPurchaseSpec) -> DeliveryMethod:
    """Pickup orders must name the age division and team they are picked up with."""
    method = DeliveryMethod.parse(spec.delivery_method) or DeliveryMethod.SHIPPING
    if method == DeliveryMethod.PICKUP:
        if not fundraiser.pickup_available:
            raise ValidationError(
                f"Team pickup is not configured for fundraiser '{fundraiser.title}'"
            )
        if not spec.age_division or not spec.team_name:
            raise ValidationError(
                "Please select both age division and team for pickup orders"
            )
    return method


def build_fundraiser_item(
    fundraiser: Fundraiser,
    variation: FundraiserVariation,
    spec: FundraiserPurchaseSpec,
) -> CartLineItem:
    if not fundraiser.is_active:
        raise ValidationError(f"Fundraiser '{fundraiser.title}' is not accepting orders")

    method = validate_team_selection(fundraiser, spec)
    team_name = None
    if method == DeliveryMethod.PICKUP:
        team_name = f"{spec.age_division} - {spec.team_name}"

    return CartLineItem.create(
        variation.title,
        variation.price,
        spec.quantity,
        image_reference=variation.image_path,
        is_fundraiser=True,
        delivery_method=method,
        team_name=team_name,
        attributes={"fundraiser_id": fundraiser.id, "variation_id": variation.id},
    )
