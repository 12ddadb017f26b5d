"""Payment handles: turn a positive amount into a client secret.

No payment record is kept: the handle is returned to the client, which
confirms it with the provider and passes the intent id back when placing
the order.
"""

from decimal import Decimal, InvalidOperation

import structlog
from protean.exceptions import ValidationError

from quickbite.config import get_settings
from quickbite.ordering.pricing import to_minor_units
from quickbite.payments.gateway import get_gateway
from quickbite.payments.gateway.port import PaymentIntent

logger = structlog.get_logger(__name__)


def create_payment_handle(user_id, amount, currency: str | None = None) -> PaymentIntent:
    """Ask the configured gateway for a payment intent of ``amount`` major units.

    Raises ``ValidationError`` for non-positive or non-numeric amounts and
    ``PaymentGatewayError`` when the gateway fails. Nothing is retried.
    """
    try:
        value = Decimal(str(amount))
    except (InvalidOperation, TypeError, ValueError):
        raise ValidationError({"amount": ["Amount must be a number"]}) from None

    if not value.is_finite() or value <= 0:
        raise ValidationError({"amount": ["Amount must be greater than zero"]})

    minor_units = to_minor_units(value)
    if minor_units < 1:
        raise ValidationError({"amount": ["Amount must be at least one minor currency unit"]})

    currency = (currency or get_settings().currency).lower()
    intent = get_gateway().create_payment_intent(
        amount=minor_units,
        currency=currency,
        metadata={"user_id": user_id},
    )
    logger.info("Payment intent created", user_id=user_id, intent_id=intent.intent_id, amount=minor_units, currency=currency)
    return intent
