"""Unit tests for the Order aggregate."""

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.order import Order, OrderStatus
from storefront.domain.model.value_objects import Money


def _order(**kwargs):
    return Order.create("Custom Medallion", Money.of("99.98"), 2, **kwargs)


class TestOrderCreate:

    def test_defaults(self):
        order = _order()
        assert order.id is None
        assert order.status == OrderStatus.RECEIVED
        assert order.shipping_cost == Money.zero()
        assert order.total_amount == Money.of("99.98")

    def test_zero_quantity_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Order.create("Custom Medallion", Money.of("1"), 0)

    def test_fundraiser_order_needs_fundraiser(self):
        with pytest.raises(ValidationError, match="must reference a fundraiser"):
            _order(is_fundraiser=True)


class TestOrderStatus:

    def test_parse(self):
        assert OrderStatus.parse(" Shipped ") == OrderStatus.SHIPPED

    def test_parse_unknown(self):
        with pytest.raises(ValidationError, match="Unknown order status"):
            OrderStatus.parse("lost")

    def test_any_status_allowed(self):
        order = _order()
        order.update_status(OrderStatus.DELIVERED)
        order.update_status(OrderStatus.DESIGNED)
        assert order.status == OrderStatus.DESIGNED

    def test_tracking_number_on_shipped(self):
        order = _order()
        order.update_status(OrderStatus.SHIPPED, " 1Z999 ")
        assert order.tracking_number == "1Z999"

    def test_tracking_number_before_shipping_rejected(self):
        with pytest.raises(ValidationError, match="requires status shipped or delivered"):
            _order().update_status(OrderStatus.PRODUCING, "1Z999")

    def test_blank_tracking_number_rejected(self):
        with pytest.raises(ValidationError, match="cannot be blank"):
            _order().update_status(OrderStatus.SHIPPED, "  ")
