"""JSON-file-backed implementation of OrderRepository."""

from __future__ import annotations

import json
from datetime import datetime
from decimal import Decimal
from pathlib import Path

from storefront.domain.model.order import Order, OrderStatus
from storefront.domain.model.value_objects import Money, ShippingAddress
from storefront.domain.repository.order_repository import OrderRepository


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- OrderRepository interface --------------------------------------------

    def next_id(self) -> int:
        orders = self._load_raw()
        if not orders:
            return 1
        return max(o["id"] for o in orders) + 1

    def get_by_id(self, order_id: int) -> Order | None:
        for raw in self._load_raw():
            if raw["id"] == order_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Order]:
        return [self._to_domain(raw) for raw in self._load_raw()]

    def exists_for_session(self, checkout_session_id: str) -> bool:
        return any(
            raw.get("checkout_session_id") == checkout_session_id
            for raw in self._load_raw()
        )

    def save(self, order: Order) -> None:
        orders = self._load_raw()

        if order.id is None:
            order.id = self.next_id()

        # Upsert: replace if exists, otherwise append
        for i, raw in enumerate(orders):
            if raw["id"] == order.id:
                orders[i] = self._to_raw(order)
                break
        else:
            orders.append(self._to_raw(order))

        self._persist_raw(orders)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "id": order.id,
            "customer_email": order.customer_email,
            "product_name": order.product_name,
            "price": str(order.price.amount),
            "quantity": order.quantity,
            "shipping_cost": str(order.shipping_cost.amount),
            "tax_amount": str(order.tax_amount.amount),
            "total_amount": str(order.total_amount.amount),
            "status": order.status.value,
            "shipping_address": order.shipping_address.to_raw() if order.shipping_address else None,
            "is_fundraiser": order.is_fundraiser,
            "fundraiser_id": order.fundraiser_id,
            "variation_id": order.variation_id,
            "chain_color": order.chain_color,
            "team_name": order.team_name,
            "team_location": order.team_location,
            "image_path": order.image_path,
            "image_upload_key": order.image_upload_key,
            "checkout_session_id": order.checkout_session_id,
            "tracking_number": order.tracking_number,
            "created_at": order.created_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        return Order(
            id=raw["id"],
            customer_email=raw.get("customer_email"),
            product_name=raw["product_name"],
            price=Money(Decimal(raw["price"])),
            quantity=raw["quantity"],
            shipping_cost=Money(Decimal(raw["shipping_cost"])),
            tax_amount=Money(Decimal(raw["tax_amount"])),
            total_amount=Money(Decimal(raw["total_amount"])),
            status=OrderStatus(raw["status"]),
            shipping_address=ShippingAddress.from_raw(raw.get("shipping_address")),
            is_fundraiser=raw.get("is_fundraiser", False),
            fundraiser_id=raw.get("fundraiser_id"),
            variation_id=raw.get("variation_id"),
            chain_color=raw.get("chain_color"),
            team_name=raw.get("team_name"),
            team_location=raw.get("team_location"),
            image_path=raw.get("image_path"),
            image_upload_key=raw.get("image_upload_key"),
            checkout_session_id=raw.get("checkout_session_id"),
            tracking_number=raw.get("tracking_number"),
            created_at=datetime.fromisoformat(raw["created_at"]),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, orders: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(orders, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
