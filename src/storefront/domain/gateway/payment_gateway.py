"""Payment gateway port (abstract interface).

Defines the contract the Stripe adapter implements, so handlers can be
exercised against a fake gateway without any network calls.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from storefront.domain.model.checkout import CheckoutRequest, CheckoutSession


@dataclass(frozen=True)
class SessionLineItem:
    """A line item as the provider reports it after payment."""

    description: str
    quantity: int
    amount_total: int  # minor units, after discounts and including tax
    amount_subtotal: int | None = None  # minor units, before discounts and tax
    metadata: dict[str, str] = field(default_factory=dict)

    @property
    def pre_tax_amount(self) -> int:
        """The line at its list price, the base a donation is computed on."""
        if self.amount_subtotal is not None:
            return self.amount_subtotal
        return self.amount_total


@dataclass(frozen=True)
class CompletedCheckout:
    """The parts of a completed checkout session the storefront records."""

    id: str
    customer_email: str | None
    amount_total: int
    amount_tax: int
    amount_shipping: int = 0
    metadata: dict[str, str] = field(default_factory=dict)
    shipping_details: dict | None = None


class PaymentGateway(ABC):

    @abstractmethod
    def create_checkout_session(self, request: CheckoutRequest) -> CheckoutSession:
        """Create a hosted checkout session. Raises PaymentGatewayError."""

    @abstractmethod
    def list_line_items(self, session_id: str) -> list[SessionLineItem]:
        """Return the line items of a completed session."""

    @abstractmethod
    def parse_webhook_event(self, payload: str, signature: str) -> CompletedCheckout | None:
        """Verify a webhook payload.

        Returns the completed checkout for ``checkout.session.completed``
        events and None for every other event type. Raises
        WebhookVerificationError when the signature does not match.
        """
