"""Payment gateway port (abstract interface).

Defines the contract that every payment gateway adapter implements, so the
payment flow can run against FakeGateway in development and tests and
against StripeGateway in production without any other code changing.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class PaymentIntent:
    """A provider-side payment intent the client can confirm on its own."""

    intent_id: str
    client_secret: str
    amount: int  # minor units
    currency: str


class PaymentGateway(ABC):
    """Abstract payment gateway interface."""

    @abstractmethod
    def create_payment_intent(
        self,
        amount: int,
        currency: str,
        metadata: dict | None = None,
    ) -> PaymentIntent:
        """Create a payment intent for ``amount`` minor units.

        Raises ``PaymentGatewayError`` when the provider refuses or fails.
        """
        ...
