"""Application service: Fundraiser Checkout use case.

Buys one fundraiser variation immediately. The provider never collects
shipping for fundraiser orders: ship-to-me adds the fundraiser shipping
fee as its own line, and pickup orders carry the team they are collected
with. The expected donation travels in the session metadata.
"""

from __future__ import annotations

from storefront.application.dto import CheckoutResultDTO, FundraiserPurchaseSpec
from storefront.application.item_builders import build_fundraiser_item
from storefront.application.submit_checkout import CheckoutSubmitter
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.value_objects import DeliveryMethod, Money
from storefront.domain.repository.fundraiser_repository import FundraiserRepository
from storefront.domain.service.checkout_composer import CheckoutRequestComposer
from storefront.domain.service.donation import compute_donation
from storefront.domain.service.pricing import PricingPolicies


class FundraiserCheckoutHandler:

    def __init__(
        self,
        fundraiser_repo: FundraiserRepository,
        submitter: CheckoutSubmitter,
        composer: CheckoutRequestComposer,
        policies: PricingPolicies,
    ) -> None:
        self._fundraiser_repo = fundraiser_repo
        self._submitter = submitter
        self._composer = composer
        self._policies = policies

    def handle(
        self,
        spec: FundraiserPurchaseSpec,
        customer_email: str | None = None,
    ) -> CheckoutResultDTO:
        fundraiser = self._fundraiser_repo.get_by_id(spec.fundraiser_id)
        if fundraiser is None:
            raise EntityNotFoundError(f"Fundraiser '{spec.fundraiser_id}' not found")
        variation = fundraiser.variation(spec.variation_id)

        item = build_fundraiser_item(fundraiser, variation, spec)
        donation = compute_donation(fundraiser.policy, item.price, item.quantity.value)

        if item.delivery_method == DeliveryMethod.SHIPPING:
            shipping_cost = self._policies.fundraiser.shipping_cost
        else:
            shipping_cost = Money.zero()

        metadata: dict[str, object] = {
            "fundraiser_id": fundraiser.id,
            "variation_id": variation.id,
            "is_fundraiser": True,
            "delivery_method": item.delivery_method.value,  # type: ignore[union-attr]
            "fundraiser_name": fundraiser.title,
            "item_name": variation.title,
            "donation_amount": f"{donation.rounded().amount:.2f}",
        }
        if item.delivery_method == DeliveryMethod.PICKUP:
            metadata.update(
                {
                    "team_age_division": spec.age_division,
                    "team_name": spec.team_name,
                    "pickup_team_name": spec.team_name,
                }
            )

        request = self._composer.compose(
            [item],
            pricing=self._policies.fundraiser,
            metadata=metadata,
            customer_email=customer_email,
            shipping_cost=shipping_cost,
        )
        attempt = self._submitter.submit(request)

        return CheckoutResultDTO(
            url=attempt.url,  # type: ignore[arg-type]
            session_id=attempt.session_id,  # type: ignore[arg-type]
        )
