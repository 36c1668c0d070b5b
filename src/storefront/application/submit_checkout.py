"""Submission of a composed checkout request to the payment provider.

Each call is one ``CheckoutAttempt``. There are no retries and no
deduplication: submitting the same cart twice creates two provider
sessions, so callers must disable their submit control while a
submission is in flight.
"""

from __future__ import annotations

import logging

from storefront.domain.exceptions import CheckoutCompositionError, PaymentGatewayError
from storefront.domain.gateway.payment_gateway import PaymentGateway
from storefront.domain.model.checkout import CheckoutAttempt, CheckoutRequest

logger = logging.getLogger(__name__)


class CheckoutSubmitter:

    def __init__(self, gateway: PaymentGateway) -> None:
        self._gateway = gateway

    def submit(self, request: CheckoutRequest) -> CheckoutAttempt:
        """Create the hosted session and return the succeeded attempt.

        Raises CheckoutCompositionError when the provider rejects the
        request or answers without a checkout URL.
        """
        attempt = CheckoutAttempt()
        attempt.begin()
        logger.info(
            "Creating checkout session: %d line(s), %d cents before tax, collect_shipping=%s",
            len(request.line_items),
            request.amount_before_tax,
            request.collect_shipping_address,
        )

        try:
            session = self._gateway.create_checkout_session(request)
        except PaymentGatewayError as exc:
            error = CheckoutCompositionError(
                f"Failed to create checkout session: {exc}", provider_message=str(exc)
            )
            attempt.fail(error)
            logger.error("Checkout session rejected by provider: %s", exc)
            raise error from exc

        if not session.url:
            error = CheckoutCompositionError("No checkout URL received from payment provider")
            attempt.fail(error)
            logger.error("Checkout session %s came back without a URL", session.id)
            raise error

        attempt.succeed(session)
        logger.info("Checkout session %s created", session.id)
        return attempt
