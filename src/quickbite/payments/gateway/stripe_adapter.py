"""Stripe payment gateway adapter.

Creates PaymentIntents through the stripe-python SDK. The secret key is
passed per request instead of being set on the ``stripe`` module, so several
gateways with different keys can coexist in one process.
"""

import stripe
import structlog

from quickbite.exceptions import PaymentGatewayError
from quickbite.payments.gateway.port import PaymentGateway, PaymentIntent

logger = structlog.get_logger(__name__)


class StripeGateway(PaymentGateway):
    """Production Stripe gateway adapter."""

    def __init__(self, api_key: str) -> None:
        if not api_key:
            raise ValueError("StripeGateway requires a secret key (STRIPE_SECRET_KEY)")
        self.api_key = api_key

    def create_payment_intent(
        self,
        amount: int,
        currency: str,
        metadata: dict | None = None,
    ) -> PaymentIntent:
        try:
            intent = stripe.PaymentIntent.create(
                amount=amount,
                currency=currency,
                metadata={key: str(value) for key, value in (metadata or {}).items()},
                automatic_payment_methods={"enabled": True},
                api_key=self.api_key,
            )
        except stripe.StripeError as exc:
            logger.error("Stripe PaymentIntent creation failed", error=str(exc), amount=amount, currency=currency)
            raise PaymentGatewayError("Error creating payment intent") from exc

        return PaymentIntent(
            intent_id=intent["id"],
            client_secret=intent["client_secret"],
            amount=amount,
            currency=currency,
        )
