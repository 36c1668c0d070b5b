"""Domain service: fundraiser donation calculation.

The single place where a sale's donation is computed. The fundraiser
page preview, the checkout metadata and the ledger writer all call
``compute_donation`` so the number shown to the buyer is the number
credited to the fundraiser.
"""

from __future__ import annotations

from decimal import Decimal

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.fundraiser import DonationType, FundraiserDonationPolicy
from storefront.domain.model.value_objects import Money

_HUNDRED = Decimal("100")


def donation_per_item(policy: FundraiserDonationPolicy, unit_price: Money) -> Money:
    if policy.donation_type == DonationType.PERCENTAGE:
        return unit_price * (policy.donation_percentage / _HUNDRED)
    # Fixed donations are per unit sold, not per order.
    return Money(policy.donation_amount, unit_price.currency)


def compute_donation(
    policy: FundraiserDonationPolicy,
    unit_price: Money,
    quantity: int,
) -> Money:
    """Donation earned by selling ``quantity`` items at ``unit_price``.

    Shipping is never part of ``unit_price``. Quantity must be at least 1;
    policy ranges are enforced when the policy is created.
    """
    if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
        raise ValidationError(f"Donation quantity must be a positive integer, got {quantity!r}")
    return donation_per_item(policy, unit_price) * quantity
