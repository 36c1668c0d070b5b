"""Application service: Create Fundraiser use case.

The donation policy is validated here, at creation time; the donation
calculator trusts it afterwards.
"""

from __future__ import annotations

import logging
import uuid
from decimal import Decimal, InvalidOperation

from storefront.application.dto import FundraiserDTO, VariationSpec
from storefront.application.show_fundraiser import fundraiser_to_dto
from storefront.domain.exceptions import ValidationError
from storefront.domain.model.fundraiser import (
    DonationType,
    Fundraiser,
    FundraiserDonationPolicy,
    FundraiserVariation,
)
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.fundraiser_repository import FundraiserRepository

logger = logging.getLogger(__name__)


def _decimal(raw: str | None, label: str) -> Decimal:
    if raw is None or raw == "":
        return Decimal("0")
    try:
        value = Decimal(str(raw))
    except InvalidOperation as exc:
        raise ValidationError(f"Invalid {label}: {raw!r}") from exc
    if not value.is_finite():
        raise ValidationError(f"Invalid {label}: {raw!r}")
    return value


def build_policy(
    donation_type: str,
    donation_percentage: str | None = None,
    donation_amount: str | None = None,
) -> FundraiserDonationPolicy:
    try:
        kind = DonationType(donation_type.strip().lower())
    except ValueError as exc:
        raise ValidationError(
            f"Unknown donation type '{donation_type}', expected 'percentage' or 'fixed'"
        ) from exc
    return FundraiserDonationPolicy(
        kind,
        donation_percentage=_decimal(donation_percentage, "donation percentage"),
        donation_amount=_decimal(donation_amount, "donation amount"),
    )


class CreateFundraiserHandler:

    def __init__(self, fundraiser_repo: FundraiserRepository) -> None:
        self._fundraiser_repo = fundraiser_repo

    def handle(
        self,
        title: str,
        custom_link: str,
        base_price: str,
        donation_type: str,
        donation_percentage: str | None = None,
        donation_amount: str | None = None,
        variations: list[VariationSpec] | None = None,
        description: str | None = None,
        pickup_available: bool = True,
    ) -> FundraiserDTO:
        """Create and persist a fundraiser.

        Variations default to a single one named after the fundraiser at
        the base price.
        """
        if custom_link and self._fundraiser_repo.get_by_custom_link(custom_link.strip().lower()):
            raise ValidationError(
                f"The custom link '{custom_link}' is already taken. Please choose another one."
            )

        price = Money.of(base_price)
        specs = variations or [VariationSpec(title=title, price=base_price)]
        built = [
            FundraiserVariation(
                id=f"v{n}",
                title=spec.title.strip() if spec.title else "",
                price=Money.of(spec.price),
                image_path=spec.image_path,
            )
            for n, spec in enumerate(specs, start=1)
        ]
        for variation in built:
            if not variation.title:
                raise ValidationError("Variation title is required")

        fundraiser = Fundraiser.create(
            id=uuid.uuid4().hex,
            title=title,
            custom_link=custom_link,
            base_price=price,
            policy=build_policy(donation_type, donation_percentage, donation_amount),
            variations=built,
            description=description,
            pickup_available=pickup_available,
        )
        self._fundraiser_repo.save(fundraiser)
        logger.info("Created fundraiser %s (/%s)", fundraiser.id, fundraiser.custom_link)

        return fundraiser_to_dto(fundraiser, Money.zero())
