"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class CartPersistenceError(DomainException):
    """The cart could not be written. The previous cart is left as it was."""


class PaymentGatewayError(DomainException):
    """The payment provider rejected a call or could not be reached."""


class CheckoutCompositionError(DomainException):
    """A checkout session could not be created.

    Carries the provider's message so it can be shown to the shopper.
    Checkout is never retried automatically.
    """

    def __init__(self, message: str, provider_message: str | None = None) -> None:
        super().__init__(message)
        self.provider_message = provider_message or message


class WebhookVerificationError(DomainException):
    """A webhook payload failed signature verification."""
