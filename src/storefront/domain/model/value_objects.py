"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from enum import Enum

from storefront.domain.exceptions import ValidationError

CENT = Decimal("0.01")


@dataclass(frozen=True)
class Money:
    """Monetary amount with currency.

    Amounts are kept unrounded (a 5% tax on $99.98 is $4.999) and only
    rounded, half-up to the cent, for display and for the payment provider.
    """

    amount: Decimal
    currency: str = "USD"

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise ValidationError(f"Money amount must be a finite number, got {self.amount}")
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def __sub__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        result = self.amount - other.amount
        if result < Decimal("0"):
            raise ValidationError("Money subtraction would result in a negative amount")
        return Money(result, self.currency)

    def __mul__(self, factor: int | Decimal) -> Money:
        if isinstance(factor, bool) or not isinstance(factor, (int, Decimal)):
            raise TypeError(
                f"Can only multiply Money by int or Decimal, got {type(factor).__name__}"
            )
        return Money(self.amount * factor, self.currency)

    def __lt__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount < other.amount

    def __le__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount <= other.amount

    def __gt__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount > other.amount

    def __ge__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount >= other.amount

    # --- Rounding -------------------------------------------------------------

    def rounded(self) -> Money:
        """Round half-up to the nearest cent."""
        return Money(self.amount.quantize(CENT, rounding=ROUND_HALF_UP), self.currency)

    def to_minor_units(self) -> int:
        """Integer cents, e.g. $49.99 -> 4999."""
        return int(self.rounded().amount * 100)

    @property
    def is_zero(self) -> bool:
        return self.amount == Decimal("0")

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"${self.rounded().amount:.2f}"

    # --- Internal helpers -----------------------------------------------------

    def _assert_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise ValidationError(
                f"Cannot combine {self.currency} with {other.currency}"
            )

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        try:
            return Money(Decimal(str(amount)))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc

    @staticmethod
    def zero() -> Money:
        return Money(Decimal("0"))

    @staticmethod
    def from_minor_units(cents: int) -> Money:
        return Money(Decimal(cents) / 100)


@dataclass(frozen=True)
class Quantity:
    """A positive integer quantity.

    Enforces the invariant that you cannot order zero or negative items.
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value <= 0:
            raise ValidationError("Quantity must be positive")

    def __str__(self) -> str:
        return str(self.value)


class DeliveryMethod(Enum):
    SHIPPING = "shipping"
    PICKUP = "pickup"

    @staticmethod
    def parse(raw: str | None) -> DeliveryMethod | None:
        if raw is None or raw == "":
            return None
        try:
            return DeliveryMethod(raw.lower())
        except ValueError as exc:
            raise ValidationError(
                f"Unknown delivery method {raw!r}, expected 'shipping' or 'pickup'"
            ) from exc


@dataclass(frozen=True)
class ShippingAddress:
    address: str
    city: str
    state: str
    zip_code: str

    @staticmethod
    def from_raw(raw: dict | None) -> ShippingAddress | None:
        """Build from any of the address shapes the provider or admin panel sends.

        Accepts Stripe's ``{"address": {"line1", "postal_code", ...}}`` nesting
        as well as flat ``street``/``address`` and ``zipCode`` keys.
        """
        if not raw:
            return None
        if isinstance(raw.get("address"), dict):
            raw = raw["address"]
        return ShippingAddress(
            address=str(raw.get("line1") or raw.get("street") or raw.get("address") or ""),
            city=str(raw.get("city") or ""),
            state=str(raw.get("state") or ""),
            zip_code=str(
                raw.get("postal_code") or raw.get("zipCode") or raw.get("zip_code") or ""
            ),
        )

    def to_raw(self) -> dict[str, str]:
        return {
            "address": self.address,
            "city": self.city,
            "state": self.state,
            "zip_code": self.zip_code,
        }

    def __str__(self) -> str:
        return f"{self.address}, {self.city}, {self.state} {self.zip_code}".strip(", ")
