"""JSON-file-backed implementation of CartStore.

The file is a small string-keyed store, like browser local storage: a JSON
object whose values are themselves JSON-encoded strings. The cart lives
under a single fixed key.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from storefront.domain.exceptions import CartPersistenceError, DomainException
from storefront.domain.model.cart import CartLineItem
from storefront.domain.model.value_objects import DeliveryMethod, Money, Quantity
from storefront.domain.repository.cart_store import CartStore

logger = logging.getLogger(__name__)

CART_KEY = "cartItems"


class JsonCartStore(CartStore):

    def __init__(self, file_path: Path, key: str = CART_KEY) -> None:
        self._file_path = file_path
        self._key = key

    # --- CartStore interface --------------------------------------------------

    def load(self) -> list[CartLineItem]:
        try:
            encoded = self._read_store().get(self._key)
            if encoded is None:
                return []
            records = json.loads(encoded)
            if not isinstance(records, list):
                raise TypeError(f"expected a list, got {type(records).__name__}")
            return [self._to_domain(r) for r in records]
        except (OSError, ValueError, TypeError, KeyError, AttributeError, DomainException) as exc:
            logger.warning("Ignoring unreadable cart in %s: %s", self._file_path, exc)
            return []

    def save(self, items: list[CartLineItem]) -> None:
        try:
            store = self._read_store()
        except (OSError, ValueError, TypeError):
            # A corrupt store is replaced rather than blocking the write.
            store = {}
        store[self._key] = json.dumps([self._to_raw(item) for item in items])

        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text(json.dumps(store, indent=2) + "\n", encoding="utf-8")
        except OSError as exc:
            logger.error("Could not write cart to %s: %s", self._file_path, exc)
            raise CartPersistenceError(
                f"Your cart could not be saved ({exc.strerror or exc}). Please try again."
            ) from exc

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(item: CartLineItem) -> dict:
        return {
            "id": item.id,
            "product_name": item.product_name,
            "price": str(item.price.amount),
            "quantity": item.quantity.value,
            "image_path": item.image_reference,
            "is_fundraiser": item.is_fundraiser,
            "delivery_method": item.delivery_method.value if item.delivery_method else None,
            "team_name": item.team_name,
            "team_location": item.team_location,
            "chain_color": item.chain_color,
            "attributes": dict(item.attributes),
        }

    @staticmethod
    def _to_domain(raw: dict) -> CartLineItem:
        return CartLineItem(
            id=raw["id"],
            product_name=raw["product_name"],
            price=Money.of(raw["price"]),
            quantity=Quantity(raw.get("quantity") or 1),
            image_reference=raw.get("image_path"),
            is_fundraiser=bool(raw.get("is_fundraiser", False)),
            delivery_method=DeliveryMethod.parse(raw.get("delivery_method")),
            team_name=raw.get("team_name"),
            team_location=raw.get("team_location"),
            chain_color=raw.get("chain_color"),
            attributes={str(k): str(v) for k, v in (raw.get("attributes") or {}).items()},
        )

    # --- File helpers ---------------------------------------------------------

    def _read_store(self) -> dict:
        if not self._file_path.exists():
            return {}
        store = json.loads(self._file_path.read_text(encoding="utf-8"))
        if not isinstance(store, dict):
            raise TypeError(f"expected a JSON object, got {type(store).__name__}")
        return store
