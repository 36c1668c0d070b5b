"""Checkout request and attempt.

A ``CheckoutRequest`` is the provider-neutral description of a hosted
checkout session. The Stripe adapter translates it into API parameters;
nothing in the domain knows the wire shape.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from storefront.domain.exceptions import CheckoutCompositionError, ValidationError
from storefront.domain.model.value_objects import Money

SHIPPING_LINE_NAME = "Shipping"


class TaxPolicy(Enum):
    AUTOMATIC = "automatic"


@dataclass(frozen=True)
class PricedLineItem:
    name: str
    unit_amount: int  # minor units (cents)
    quantity: int
    images: tuple[str, ...] = ()
    metadata: dict[str, str] = field(default_factory=dict)

    @property
    def is_shipping(self) -> bool:
        return self.metadata.get("type") == "shipping"


@dataclass(frozen=True)
class CheckoutRequest:
    line_items: list[PricedLineItem]
    shipping_cost: Money
    collect_shipping_address: bool
    metadata: dict[str, str]
    success_url: str
    cancel_url: str
    customer_email: str | None = None
    tax_policy: TaxPolicy = TaxPolicy.AUTOMATIC
    currency: str = "usd"
    allow_promotion_codes: bool = True

    @property
    def product_lines(self) -> list[PricedLineItem]:
        return [line for line in self.line_items if not line.is_shipping]

    @property
    def amount_before_tax(self) -> int:
        """Cents the shopper pays before the provider adds tax."""
        total = sum(line.unit_amount * line.quantity for line in self.line_items)
        if self.collect_shipping_address:
            total += self.shipping_cost.to_minor_units()
        return total


@dataclass(frozen=True)
class CheckoutSession:
    """What the provider hands back: its session id and the hosted page."""

    id: str
    url: str | None


class CheckoutState(Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass
class CheckoutAttempt:
    """One user-initiated checkout submission.

    ``idle -> submitting -> succeeded | failed``. An attempt is used once;
    resubmitting after a failure starts a brand-new attempt.
    """

    state: CheckoutState = CheckoutState.IDLE
    url: str | None = None
    session_id: str | None = None
    error: CheckoutCompositionError | None = None

    def begin(self) -> None:
        if self.state != CheckoutState.IDLE:
            raise ValidationError(
                f"Checkout attempt already {self.state.value}; start a new attempt"
            )
        self.state = CheckoutState.SUBMITTING

    def succeed(self, session: CheckoutSession) -> None:
        self._assert_submitting()
        if not session.url:
            raise ValidationError("A successful checkout needs a URL")
        self.state = CheckoutState.SUCCEEDED
        self.url = session.url
        self.session_id = session.id

    def fail(self, error: CheckoutCompositionError) -> None:
        self._assert_submitting()
        self.state = CheckoutState.FAILED
        self.error = error

    @property
    def is_finished(self) -> bool:
        return self.state in (CheckoutState.SUCCEEDED, CheckoutState.FAILED)

    def _assert_submitting(self) -> None:
        if self.state != CheckoutState.SUBMITTING:
            raise ValidationError(
                f"Checkout attempt is {self.state.value}, expected submitting"
            )
