"""Fundraiser aggregate and its donation policy.

A fundraiser sells one or more product variations; part of every item
sold is donated to the cause, either a percentage of the item price or a
fixed amount per item. Shipping is never part of the donation base.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum

from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.value_objects import Money

MAX_DONATION_PERCENTAGE = Decimal("100")


class DonationType(Enum):
    PERCENTAGE = "percentage"
    FIXED = "fixed"


@dataclass(frozen=True)
class FundraiserDonationPolicy:
    """How much of each sale is donated.

    Only the field selected by ``donation_type`` is authoritative; the
    other is kept (the admin form stores both) but never read.
    """

    donation_type: DonationType
    donation_percentage: Decimal = Decimal("0")
    donation_amount: Decimal = Decimal("0")

    def __post_init__(self) -> None:
        if not isinstance(self.donation_type, DonationType):
            raise ValidationError(f"Unknown donation type {self.donation_type!r}")
        if not Decimal("0") <= self.donation_percentage <= MAX_DONATION_PERCENTAGE:
            raise ValidationError(
                f"Donation percentage must be between 0 and 100, "
                f"got {self.donation_percentage}"
            )
        if self.donation_amount < Decimal("0"):
            raise ValidationError(
                f"Donation amount cannot be negative, got {self.donation_amount}"
            )

    @staticmethod
    def percentage(pct: str | int | Decimal) -> FundraiserDonationPolicy:
        return FundraiserDonationPolicy(DonationType.PERCENTAGE, donation_percentage=Decimal(str(pct)))

    @staticmethod
    def fixed(amount: str | int | Decimal) -> FundraiserDonationPolicy:
        return FundraiserDonationPolicy(DonationType.FIXED, donation_amount=Decimal(str(amount)))

    def describe(self, title: str) -> str:
        if self.donation_type == DonationType.PERCENTAGE:
            return (
                f"{self.donation_percentage.normalize():f}% of each item purchase "
                f"(excluding shipping) is donated to {title}"
            )
        return f"{Money(self.donation_amount)} of each item bought is donated to {title}"


@dataclass(frozen=True)
class FundraiserVariation:
    id: str
    title: str
    price: Money
    image_path: str | None = None


@dataclass
class Fundraiser:
    """Aggregate root for a fundraiser campaign."""

    id: str
    title: str
    custom_link: str
    base_price: Money
    policy: FundraiserDonationPolicy
    variations: list[FundraiserVariation] = field(default_factory=list)
    description: str | None = None
    pickup_available: bool = True
    status: str = "active"
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def create(
        id: str,
        title: str,
        custom_link: str,
        base_price: Money,
        policy: FundraiserDonationPolicy,
        variations: list[FundraiserVariation] | None = None,
        description: str | None = None,
        pickup_available: bool = True,
    ) -> Fundraiser:
        """Create a new fundraiser, enforcing all invariants."""
        if not title or not title.strip():
            raise ValidationError("Fundraiser title is required")
        if not custom_link or not custom_link.strip():
            raise ValidationError("Custom link is required")
        link = custom_link.strip().lower()
        if any(ch.isspace() or ch == "/" for ch in link):
            raise ValidationError(f"Custom link '{custom_link}' may not contain spaces or '/'")

        variations = list(variations or [])
        ids = [v.id for v in variations]
        if len(ids) != len(set(ids)):
            raise ValidationError("Variation ids must be unique")

        return Fundraiser(
            id=id,
            title=title.strip(),
            custom_link=link,
            base_price=base_price,
            policy=policy,
            variations=variations,
            description=description,
            pickup_available=pickup_available,
        )

    @property
    def is_active(self) -> bool:
        return self.status == "active"

    def variation(self, variation_id: str) -> FundraiserVariation:
        for variation in self.variations:
            if variation.id == variation_id:
                return variation
        raise EntityNotFoundError(
            f"Variation '{variation_id}' not found in fundraiser '{self.title}'"
        )

    def donation_text(self, total_raised: Money) -> str:
        return f"{self.policy.describe(self.title)}, {total_raised} raised so far!"


@dataclass
class FundraiserSale:
    """One ledger entry: the amount sold and the donation it earned."""

    id: int | None
    fundraiser_id: str
    variation_id: str | None
    quantity: int
    amount: Money
    donation_amount: Money
    order_id: int | None = None
    checkout_session_id: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
