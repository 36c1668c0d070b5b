"""Stripe implementation of the PaymentGateway port.

Translates a ``CheckoutRequest`` into ``stripe.checkout.Session.create``
parameters, reads line items back after payment, and verifies webhook
signatures.
"""

from __future__ import annotations

import json
import logging

import stripe

from storefront.domain.exceptions import PaymentGatewayError, WebhookVerificationError
from storefront.domain.gateway.payment_gateway import (
    CompletedCheckout,
    PaymentGateway,
    SessionLineItem,
)
from storefront.domain.model.checkout import CheckoutRequest, CheckoutSession, TaxPolicy

logger = logging.getLogger(__name__)

COMPLETED_EVENT = "checkout.session.completed"
SHIPPING_COUNTRIES = ["US"]


def session_params(request: CheckoutRequest) -> dict:
    """Map a CheckoutRequest onto Checkout Session create parameters."""
    line_items = []
    for line in request.line_items:
        product_data: dict = {"name": line.name, "metadata": dict(line.metadata)}
        if line.images:
            product_data["images"] = list(line.images)
        line_items.append(
            {
                "price_data": {
                    "currency": request.currency,
                    "product_data": product_data,
                    "unit_amount": line.unit_amount,
                },
                "quantity": line.quantity,
            }
        )

    params: dict = {
        "mode": "payment",
        "payment_method_types": ["card"],
        "line_items": line_items,
        "success_url": request.success_url,
        "cancel_url": request.cancel_url,
        "metadata": dict(request.metadata),
        "allow_promotion_codes": request.allow_promotion_codes,
        "automatic_tax": {"enabled": request.tax_policy == TaxPolicy.AUTOMATIC},
    }
    if request.customer_email:
        params["customer_email"] = request.customer_email

    if request.collect_shipping_address:
        params["shipping_address_collection"] = {"allowed_countries": SHIPPING_COUNTRIES}
        if not request.shipping_cost.is_zero:
            params["shipping_options"] = [
                {
                    "shipping_rate_data": {
                        "type": "fixed_amount",
                        "display_name": "Standard shipping",
                        "fixed_amount": {
                            "amount": request.shipping_cost.to_minor_units(),
                            "currency": request.currency,
                        },
                    }
                }
            ]
    return params


class StripeGateway(PaymentGateway):

    def __init__(self, api_key: str, webhook_secret: str = "") -> None:
        self._api_key = api_key
        self._webhook_secret = webhook_secret

    def create_checkout_session(self, request: CheckoutRequest) -> CheckoutSession:
        if not self._api_key:
            raise PaymentGatewayError("Checkout is not configured (STRIPE_SECRET_KEY is empty)")

        try:
            session = stripe.checkout.Session.create(
                api_key=self._api_key, **session_params(request)
            )
        except stripe.StripeError as exc:
            raise PaymentGatewayError(exc.user_message or str(exc)) from exc

        return CheckoutSession(id=session.id, url=getattr(session, "url", None))

    def list_line_items(self, session_id: str) -> list[SessionLineItem]:
        try:
            result = stripe.checkout.Session.list_line_items(
                session_id,
                api_key=self._api_key,
                limit=100,
                expand=["data.price.product"],
            )
        except stripe.StripeError as exc:
            raise PaymentGatewayError(exc.user_message or str(exc)) from exc

        return [
            SessionLineItem(
                description=item.description,
                quantity=item.quantity or 1,
                amount_total=item.amount_total or 0,
                amount_subtotal=getattr(item, "amount_subtotal", None),
                metadata=_product_metadata(item),
            )
            for item in result.data
        ]

    def parse_webhook_event(self, payload: str, signature: str) -> CompletedCheckout | None:
        if not signature:
            raise WebhookVerificationError("No Stripe signature found")
        if not self._webhook_secret:
            raise WebhookVerificationError("Webhook secret not configured")

        try:
            stripe.Webhook.construct_event(payload, signature, self._webhook_secret)
        except stripe.SignatureVerificationError as exc:
            raise WebhookVerificationError(f"Invalid webhook signature: {exc}") from exc
        except ValueError as exc:
            raise WebhookVerificationError(f"Invalid webhook payload: {exc}") from exc

        # Signature checked; read the plain JSON rather than SDK objects.
        event = json.loads(payload)
        logger.info("Processing webhook event %s (%s)", event.get("id"), event.get("type"))
        if event.get("type") != COMPLETED_EVENT:
            return None
        return completed_checkout_from_session(event["data"]["object"])


def completed_checkout_from_session(session: dict) -> CompletedCheckout:
    totals = session.get("total_details") or {}
    customer = session.get("customer_details") or {}
    # Newer API versions nest shipping under collected_information.
    collected = session.get("collected_information") or {}
    shipping = session.get("shipping_details") or collected.get("shipping_details")
    return CompletedCheckout(
        id=session["id"],
        customer_email=customer.get("email") or session.get("customer_email"),
        amount_total=session.get("amount_total") or 0,
        amount_tax=totals.get("amount_tax") or 0,
        amount_shipping=totals.get("amount_shipping") or 0,
        metadata={str(k): str(v) for k, v in (session.get("metadata") or {}).items()},
        shipping_details=shipping,
    )


def _product_metadata(item) -> dict[str, str]:
    # Without the expand, price.product is only the product id.
    price = getattr(item, "price", None)
    product = getattr(price, "product", None)
    metadata = getattr(product, "metadata", None) or {}
    return {str(k): str(v) for k, v in dict(metadata).items()}
