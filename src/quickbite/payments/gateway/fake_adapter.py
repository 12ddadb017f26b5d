"""Configurable fake payment gateway for development and testing.

Simulates a payment provider without any external calls. It can be told to
fail at runtime, and it records every call it receives so tests can assert
on the amounts and currencies that reached the gateway.
"""

from uuid import uuid4

from quickbite.exceptions import PaymentGatewayError
from quickbite.payments.gateway.port import PaymentGateway, PaymentIntent


class FakeGateway(PaymentGateway):
    """Configurable fake payment gateway."""

    def __init__(self) -> None:
        self.should_succeed: bool = True
        self.failure_reason: str = "Card declined"
        self.calls: list[dict] = []

    def configure(self, should_succeed: bool, failure_reason: str = "Card declined") -> None:
        """Configure gateway behavior at runtime."""
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason

    def create_payment_intent(
        self,
        amount: int,
        currency: str,
        metadata: dict | None = None,
    ) -> PaymentIntent:
        self.calls.append(
            {
                "method": "create_payment_intent",
                "amount": amount,
                "currency": currency,
                "metadata": dict(metadata or {}),
            }
        )

        if not self.should_succeed:
            raise PaymentGatewayError(self.failure_reason)

        intent_id = f"pi_fake_{uuid4().hex[:16]}"
        return PaymentIntent(
            intent_id=intent_id,
            client_secret=f"{intent_id}_secret_{uuid4().hex[:12]}",
            amount=amount,
            currency=currency,
        )
