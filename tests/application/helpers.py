"""Builders shared by the application tests."""

from __future__ import annotations

from storefront.domain.model.fundraiser import (
    Fundraiser,
    FundraiserDonationPolicy,
    FundraiserVariation,
)
from storefront.domain.model.value_objects import Money

INLINE_IMAGE = "data:image/png;base64,iVBORw0KGgo="


def make_fundraiser(
    policy: FundraiserDonationPolicy | None = None,
    pickup_available: bool = True,
    fundraiser_id: str = "f1",
) -> Fundraiser:
    return Fundraiser.create(
        id=fundraiser_id,
        title="Hawks Booster Club",
        custom_link="hawks",
        base_price=Money.of("20.00"),
        policy=policy or FundraiserDonationPolicy.percentage(15),
        variations=[
            FundraiserVariation("v1", "Team Tee", Money.of("20.00")),
            FundraiserVariation("v2", "Hoodie", Money.of("45.00"), "https://cdn.example/hoodie.png"),
        ],
        pickup_available=pickup_available,
    )
