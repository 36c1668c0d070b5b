"""Unit tests for the checkout request composer."""

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.cart import CartLineItem
from storefront.domain.model.checkout import SHIPPING_LINE_NAME, TaxPolicy
from storefront.domain.model.value_objects import DeliveryMethod, Money, ShippingAddress
from storefront.domain.service.checkout_composer import (
    CheckoutRequestComposer,
    stringify_metadata,
)
from storefront.domain.service.pricing import PricingPolicies

POLICIES = PricingPolicies.build()


def _composer():
    return CheckoutRequestComposer("https://shop.example/")


def _medallion(**kwargs):
    return CartLineItem.create("Custom Medallion", Money.of("49.99"), kwargs.pop("qty", 1), **kwargs)


def _fundraiser_item(method=DeliveryMethod.SHIPPING, qty=1):
    return CartLineItem.create(
        "Team Tee",
        Money.of("20.00"),
        qty,
        is_fundraiser=True,
        delivery_method=method,
        attributes={"fundraiser_id": "f1", "variation_id": "v1"},
    )


# ── Shipping collection ──────────────────────────────────────────────────────


class TestShippingCollection:

    def test_catalog_cart_collects_shipping(self):
        request = _composer().compose([_medallion()], pricing=POLICIES.catalog_cart)
        assert request.collect_shipping_address
        assert request.shipping_cost == Money.of("8.00")
        assert all(not line.is_shipping for line in request.line_items)

    def test_mixed_cart_collects_shipping(self):
        request = _composer().compose(
            [_fundraiser_item(), _medallion()], pricing=POLICIES.catalog_cart
        )
        assert request.collect_shipping_address

    def test_fundraiser_only_cart_never_collects_shipping(self):
        request = _composer().compose(
            [_fundraiser_item(qty=5)],
            pricing=POLICIES.fundraiser,
            shipping_cost=Money.of("5.00"),
        )
        assert not request.collect_shipping_address
        shipping = request.line_items[-1]
        assert shipping.name == SHIPPING_LINE_NAME
        assert shipping.unit_amount == 500
        assert shipping.quantity == 1
        assert shipping.metadata == {"type": "shipping"}
        assert len(request.product_lines) == 1

    def test_fundraiser_pickup_has_no_shipping_line(self):
        request = _composer().compose(
            [_fundraiser_item(method=DeliveryMethod.PICKUP)],
            pricing=POLICIES.fundraiser,
            shipping_cost=Money.zero(),
        )
        assert not request.collect_shipping_address
        assert [line.name for line in request.line_items] == ["Team Tee"]

    def test_empty_cart_rejected(self):
        with pytest.raises(ValidationError, match="empty cart"):
            _composer().compose([], pricing=POLICIES.catalog_cart)


# ── Line items ───────────────────────────────────────────────────────────────


class TestLineItems:

    def test_prices_in_minor_units(self):
        request = _composer().compose([_medallion(qty=2)], pricing=POLICIES.catalog_cart)
        line = request.line_items[0]
        assert line.unit_amount == 4999
        assert line.quantity == 2

    def test_defaults_in_line_metadata(self):
        request = _composer().compose([_medallion()], pricing=POLICIES.catalog_cart)
        metadata = request.line_items[0].metadata
        assert metadata["chain_color"] == "Designers' Choice"
        assert metadata["delivery_method"] == "shipping"
        assert metadata["image_url"] == ""

    def test_inline_image_never_sent(self):
        item = _medallion(image_reference="data:image/png;base64,AAAA")
        request = _composer().compose([item], pricing=POLICIES.catalog_cart)
        assert request.line_items[0].images == ()

    def test_inline_image_carries_upload_key(self):
        inline = _medallion(image_reference="data:image/png;base64,AAAA")
        remote = _medallion(image_reference="https://cdn.example/a.png")

        request = _composer().compose([inline, remote], pricing=POLICIES.catalog_cart)

        assert request.line_items[0].metadata["image_upload_key"] == inline.id
        assert "image_upload_key" not in request.line_items[1].metadata
        assert request.metadata["item_image_upload_key"] == inline.id

    def test_remote_image_sent(self):
        item = _medallion(image_reference="https://cdn.example/a.png")
        request = _composer().compose([item], pricing=POLICIES.catalog_cart)
        assert request.line_items[0].images == ("https://cdn.example/a.png",)

    def test_fundraiser_attributes_in_line_metadata(self):
        request = _composer().compose(
            [_fundraiser_item()], pricing=POLICIES.fundraiser, shipping_cost=Money.of("5")
        )
        metadata = request.line_items[0].metadata
        assert metadata["fundraiser_id"] == "f1"
        assert metadata["variation_id"] == "v1"


# ── Session metadata and URLs ────────────────────────────────────────────────


class TestSessionMetadata:

    def test_item_fields_and_initial_status(self):
        item = _medallion(team_name="Hawks", team_location="Austin", chain_color="Gold")
        request = _composer().compose(
            [item],
            pricing=POLICIES.catalog_cart,
            metadata={"is_fundraiser": False, "order_status": "shipped"},
        )
        assert request.metadata["is_fundraiser"] == "false"
        assert request.metadata["item_team_name"] == "Hawks"
        assert request.metadata["item_chain_color"] == "Gold"
        assert request.metadata["order_status"] == "received"

    def test_shipping_address_flattened(self):
        request = _composer().compose(
            [_medallion()],
            pricing=POLICIES.catalog_cart,
            shipping_address=ShippingAddress("1 Main St", "Springfield", "IL", "62701"),
        )
        assert request.metadata["shipping_city"] == "Springfield"
        assert request.metadata["shipping_zip_code"] == "62701"

    def test_urls_and_defaults(self):
        request = _composer().compose(
            [_medallion()], pricing=POLICIES.catalog_cart, customer_email="a@b.example"
        )
        assert request.success_url == "https://shop.example/success"
        assert request.cancel_url == "https://shop.example/cancel"
        assert request.customer_email == "a@b.example"
        assert request.tax_policy == TaxPolicy.AUTOMATIC
        assert request.allow_promotion_codes

    def test_amount_before_tax(self):
        request = _composer().compose([_medallion(qty=2)], pricing=POLICIES.catalog_cart)
        assert request.amount_before_tax == 9998 + 800

    def test_stringify_metadata(self):
        assert stringify_metadata({"a": None, "b": True, "c": 3}) == {"a": "", "b": "true", "c": "3"}
