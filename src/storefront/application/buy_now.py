"""Application service: Buy Now use case.

Checks out a single custom medallion straight from the product page,
without touching the cart. Tax is left to the payment provider.
"""

from __future__ import annotations

from storefront.application.dto import CheckoutResultDTO, MedallionSpec
from storefront.application.image_uploads import BackgroundImageUploads
from storefront.application.item_builders import build_medallion_item
from storefront.application.submit_checkout import CheckoutSubmitter
from storefront.domain.model.value_objects import Money
from storefront.domain.service.checkout_composer import CheckoutRequestComposer
from storefront.domain.service.pricing import PricingPolicies


class BuyNowHandler:

    def __init__(
        self,
        submitter: CheckoutSubmitter,
        composer: CheckoutRequestComposer,
        policies: PricingPolicies,
        medallion_price: Money,
        uploads: BackgroundImageUploads | None = None,
    ) -> None:
        self._submitter = submitter
        self._composer = composer
        self._policies = policies
        self._medallion_price = medallion_price
        self._uploads = uploads

    def handle(self, spec: MedallionSpec, customer_email: str | None = None) -> CheckoutResultDTO:
        item = build_medallion_item(spec, self._medallion_price)

        request = self._composer.compose(
            [item],
            pricing=self._policies.catalog_buy_now,
            metadata={
                "image_path": item.remote_image_url or "",
                "chain_color": item.chain_color or "",
                "team_name": item.team_name or "",
                "team_location": item.team_location or "",
            },
            customer_email=customer_email,
        )

        pending = self._uploads.schedule([item]) if self._uploads else []
        attempt = self._submitter.submit(request)

        return CheckoutResultDTO(
            url=attempt.url,  # type: ignore[arg-type]
            session_id=attempt.session_id,  # type: ignore[arg-type]
            uploads_pending=len(pending),
        )
