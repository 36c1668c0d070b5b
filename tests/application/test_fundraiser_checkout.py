"""Integration tests for the direct fundraiser checkout."""

import pytest

from storefront.application.dto import FundraiserPurchaseSpec
from storefront.application.fundraiser_checkout import FundraiserCheckoutHandler
from storefront.application.submit_checkout import CheckoutSubmitter
from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.fundraiser import FundraiserDonationPolicy
from storefront.domain.service.checkout_composer import CheckoutRequestComposer
from storefront.domain.service.pricing import PricingPolicies
from tests.application.helpers import make_fundraiser
from tests.fakes import FakeFundraiserRepository, FakePaymentGateway


def _setup(policy=None):
    gateway = FakePaymentGateway()
    handler = FundraiserCheckoutHandler(
        fundraiser_repo=FakeFundraiserRepository([make_fundraiser(policy)]),
        submitter=CheckoutSubmitter(gateway),
        composer=CheckoutRequestComposer("https://shop.example"),
        policies=PricingPolicies.build(),
    )
    return gateway, handler


class TestFundraiserCheckout:

    def test_shipping_order(self):
        gateway, handler = _setup()

        handler.handle(FundraiserPurchaseSpec("f1", "v1", quantity=5))

        request = gateway.last_request
        assert not request.collect_shipping_address
        assert [line.name for line in request.line_items] == ["Team Tee", "Shipping"]
        assert request.metadata["fundraiser_name"] == "Hawks Booster Club"
        assert request.metadata["item_name"] == "Team Tee"
        assert request.metadata["is_fundraiser"] == "true"
        assert request.metadata["donation_amount"] == "15.00"

    def test_fixed_donation_metadata(self):
        gateway, handler = _setup(FundraiserDonationPolicy.fixed("2"))

        handler.handle(FundraiserPurchaseSpec("f1", "v2", quantity=4))

        assert gateway.last_request.metadata["donation_amount"] == "8.00"
        assert gateway.last_request.line_items[0].images == ("https://cdn.example/hoodie.png",)

    def test_pickup_order(self):
        gateway, handler = _setup()

        handler.handle(
            FundraiserPurchaseSpec("f1", "v1", delivery_method="pickup", age_division="U12", team_name="Hawks")
        )

        request = gateway.last_request
        assert [line.name for line in request.line_items] == ["Team Tee"]
        assert request.metadata["team_age_division"] == "U12"
        assert request.metadata["pickup_team_name"] == "Hawks"
        assert request.line_items[0].metadata["team_name"] == "U12 - Hawks"

    def test_pickup_without_team_rejected(self):
        gateway, handler = _setup()

        with pytest.raises(ValidationError, match="both age division and team"):
            handler.handle(FundraiserPurchaseSpec("f1", "v1", delivery_method="pickup"))
        assert gateway.requests == []

    def test_unknown_fundraiser(self):
        _, handler = _setup()
        with pytest.raises(EntityNotFoundError):
            handler.handle(FundraiserPurchaseSpec("nope", "v1"))
