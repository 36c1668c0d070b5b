"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import (
    DeliveryMethod,
    Money,
    Quantity,
    ShippingAddress,
)


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("10.50"))
        assert m.amount == Decimal("10.50")
        assert m.currency == "USD"

    def test_of_factory_from_string(self):
        assert Money.of("25.99").amount == Decimal("25.99")

    def test_of_factory_rejects_garbage(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("twelve")

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(Decimal("-1"))

    @pytest.mark.parametrize("raw", ["NaN", "Infinity", "-sNaN"])
    def test_non_finite_amount_rejected(self, raw):
        with pytest.raises(ValidationError, match="finite number"):
            Money.of(raw)

    def test_addition(self):
        assert Money.of("10") + Money.of("5.50") == Money.of("15.50")

    def test_subtraction_going_negative_rejected(self):
        with pytest.raises(ValidationError, match="negative amount"):
            Money.of("5") - Money.of("10")

    def test_multiplication_by_int_and_decimal(self):
        assert Money.of("7.50") * 3 == Money.of("22.50")
        assert Money.of("99.98") * Decimal("0.05") == Money.of("4.999")

    def test_multiplication_by_float_rejected(self):
        with pytest.raises(TypeError):
            Money.of("1") * 0.5

    def test_currency_mismatch_rejected(self):
        with pytest.raises(ValidationError, match="Cannot combine"):
            Money(Decimal("10"), "USD") + Money(Decimal("5"), "EUR")

    def test_str_rounds_half_up(self):
        assert str(Money.of("15")) == "$15.00"
        assert str(Money.of("4.995")) == "$5.00"
        assert str(Money.of("112.979")) == "$112.98"

    def test_minor_units(self):
        assert Money.of("49.99").to_minor_units() == 4999
        assert Money.of("0.005").to_minor_units() == 1
        assert Money.from_minor_units(4999) == Money.of("49.99")

    def test_zero(self):
        assert Money.zero().is_zero
        assert not Money.of("0.01").is_zero


# ── Quantity ─────────────────────────────────────────────────────────────────


class TestQuantity:

    def test_valid_quantity(self):
        assert Quantity(5).value == 5

    def test_zero_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(0)

    def test_bool_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Quantity(True)


# ── DeliveryMethod ───────────────────────────────────────────────────────────


class TestDeliveryMethod:

    def test_parse_is_case_insensitive(self):
        assert DeliveryMethod.parse("Pickup") == DeliveryMethod.PICKUP

    def test_parse_blank_is_none(self):
        assert DeliveryMethod.parse(None) is None
        assert DeliveryMethod.parse("") is None

    def test_parse_unknown_rejected(self):
        with pytest.raises(ValidationError, match="Unknown delivery method"):
            DeliveryMethod.parse("drone")


# ── ShippingAddress ──────────────────────────────────────────────────────────


class TestShippingAddress:

    def test_from_stripe_shape(self):
        address = ShippingAddress.from_raw(
            {
                "name": "Pat",
                "address": {
                    "line1": "1 Main St",
                    "city": "Springfield",
                    "state": "IL",
                    "postal_code": "62701",
                },
            }
        )
        assert address == ShippingAddress("1 Main St", "Springfield", "IL", "62701")

    def test_from_flat_shape(self):
        address = ShippingAddress.from_raw(
            {"street": "9 Elm", "city": "Austin", "state": "TX", "zipCode": "73301"}
        )
        assert address.address == "9 Elm"
        assert address.zip_code == "73301"

    def test_empty_is_none(self):
        assert ShippingAddress.from_raw(None) is None
        assert ShippingAddress.from_raw({}) is None

    def test_str(self):
        address = ShippingAddress("1 Main St", "Springfield", "IL", "62701")
        assert str(address) == "1 Main St, Springfield, IL 62701"
