"""Unit tests for the pricing calculator."""

from decimal import Decimal

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.cart import CartLineItem
from storefront.domain.model.value_objects import DeliveryMethod, Money
from storefront.domain.service.pricing import (
    PricingPolicies,
    PricingPolicy,
    compute_subtotal,
    compute_totals,
    resolve_delivery_method,
)

POLICIES = PricingPolicies.build()


def _medallion(price="49.99", qty=1):
    return CartLineItem.create("Custom Medallion", Money.of(price), qty)


def _fundraiser_item(price="20.00", qty=1, method=DeliveryMethod.SHIPPING):
    return CartLineItem.create("Team Tee", Money.of(price), qty, is_fundraiser=True, delivery_method=method)


# ── Subtotal ─────────────────────────────────────────────────────────────────


class TestSubtotal:

    def test_sum_of_price_times_quantity(self):
        items = [_medallion("49.99", 2), _medallion("10.00", 3), _fundraiser_item("20.00", 1)]
        assert compute_subtotal(items) == Money.of("149.98")

    def test_independent_of_order(self):
        items = [_medallion("1.10", 3), _medallion("2.25", 1), _medallion("0.99", 7)]
        assert compute_subtotal(items) == compute_subtotal(list(reversed(items)))

    def test_empty_cart(self):
        assert compute_subtotal([]) == Money.zero()


# ── Shipping ─────────────────────────────────────────────────────────────────


class TestShipping:

    def test_pickup_is_free(self):
        totals = compute_totals([_medallion()], DeliveryMethod.PICKUP, POLICIES.catalog_cart)
        assert totals.shipping == Money.zero()

    @pytest.mark.parametrize("qty", [1, 5, 40])
    def test_flat_fee_regardless_of_contents(self, qty):
        totals = compute_totals([_medallion(qty=qty)], DeliveryMethod.SHIPPING, POLICIES.catalog_cart)
        assert totals.shipping == Money.of("8.00")

    def test_fundraiser_fee(self):
        totals = compute_totals([_fundraiser_item()], DeliveryMethod.SHIPPING, POLICIES.fundraiser)
        assert totals.shipping == Money.of("5.00")

    def test_resolve_ships_when_any_item_ships(self):
        items = [_fundraiser_item(method=DeliveryMethod.PICKUP), _medallion()]
        assert resolve_delivery_method(items) == DeliveryMethod.SHIPPING

    def test_resolve_pickup_when_everything_is_picked_up(self):
        items = [_fundraiser_item(method=DeliveryMethod.PICKUP)]
        assert resolve_delivery_method(items) == DeliveryMethod.PICKUP


# ── Tax and totals ───────────────────────────────────────────────────────────


class TestTotals:

    def test_catalog_cart_scenario(self):
        totals = compute_totals([_medallion("49.99", 2)], DeliveryMethod.SHIPPING, POLICIES.catalog_cart)
        assert totals.subtotal == Money.of("99.98")
        assert totals.tax == Money.of("4.999")
        assert totals.total == Money.of("112.979")
        assert str(totals.tax) == "$5.00"
        assert str(totals.total) == "$112.98"

    def test_provider_taxed_flow_has_no_local_tax(self):
        totals = compute_totals([_medallion()], DeliveryMethod.SHIPPING, POLICIES.catalog_buy_now)
        assert totals.tax is None
        assert totals.tax_display == "Calculated at checkout"
        assert totals.total == Money.of("57.99")

    def test_invalid_tax_rate_rejected(self):
        with pytest.raises(ValidationError, match="Tax rate"):
            PricingPolicy("bad", Money.of("1"), Decimal("1.5"))


class TestPolicySelection:

    def test_fundraiser_only_cart(self):
        assert POLICIES.for_cart([_fundraiser_item()]) is POLICIES.fundraiser

    def test_mixed_cart_is_catalog(self):
        assert POLICIES.for_cart([_fundraiser_item(), _medallion()]) is POLICIES.catalog_cart

    def test_empty_cart_is_catalog(self):
        assert POLICIES.for_cart([]) is POLICIES.catalog_cart
