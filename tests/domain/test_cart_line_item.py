"""Unit tests for cart line items."""

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.cart import CartLineItem
from storefront.domain.model.value_objects import DeliveryMethod, Money, Quantity


class TestCartLineItemCreate:

    def test_create_generates_unique_ids(self):
        a = CartLineItem.create("Custom Medallion", Money.of("49.99"))
        b = CartLineItem.create("Custom Medallion", Money.of("49.99"))
        assert a.id != b.id
        assert a.quantity == Quantity(1)

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError, match="Product name is required"):
            CartLineItem.create("  ", Money.of("1"))

    def test_catalog_item_cannot_carry_delivery_method(self):
        with pytest.raises(ValidationError, match="Only fundraiser items"):
            CartLineItem.create(
                "Custom Medallion", Money.of("49.99"), delivery_method=DeliveryMethod.PICKUP
            )


class TestCartLineItemMutations:

    def test_change_quantity_clamps_to_one(self):
        item = CartLineItem.create("Custom Medallion", Money.of("49.99"), 3)
        item.change_quantity(0)
        assert item.quantity.value == 1
        item.change_quantity(-7)
        assert item.quantity.value == 1

    def test_change_delivery_method_on_catalog_item_rejected(self):
        item = CartLineItem.create("Custom Medallion", Money.of("49.99"))
        with pytest.raises(ValidationError):
            item.change_delivery_method(DeliveryMethod.PICKUP)

    def test_change_delivery_method_on_fundraiser_item(self):
        item = CartLineItem.create(
            "Team Tee", Money.of("20"), is_fundraiser=True, delivery_method=DeliveryMethod.SHIPPING
        )
        item.change_delivery_method(DeliveryMethod.PICKUP)
        assert not item.needs_shipping


class TestCartLineItemProperties:

    def test_line_total(self):
        item = CartLineItem.create("Custom Medallion", Money.of("49.99"), 2)
        assert item.line_total == Money.of("99.98")

    def test_catalog_item_always_ships(self):
        assert CartLineItem.create("Custom Medallion", Money.of("1")).needs_shipping

    def test_fundraiser_item_without_method_does_not_ship(self):
        item = CartLineItem.create("Team Tee", Money.of("20"), is_fundraiser=True)
        assert not item.needs_shipping

    def test_inline_image_is_not_a_remote_url(self):
        item = CartLineItem.create(
            "Custom Medallion", Money.of("1"), image_reference="data:image/png;base64,AAAA"
        )
        assert item.has_inline_image
        assert item.remote_image_url is None

    def test_remote_image(self):
        item = CartLineItem.create(
            "Custom Medallion", Money.of("1"), image_reference="https://cdn.example/a.png"
        )
        assert not item.has_inline_image
        assert item.remote_image_url == "https://cdn.example/a.png"
