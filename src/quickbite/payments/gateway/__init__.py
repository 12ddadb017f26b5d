"""Payment gateway factory.

Provides get_gateway() / set_gateway() to swap implementations:
- FakeGateway for development and testing
- StripeGateway when ``PAYMENT_GATEWAY=stripe``
"""

from quickbite.config import get_settings
from quickbite.payments.gateway.fake_adapter import FakeGateway
from quickbite.payments.gateway.port import PaymentGateway
from quickbite.payments.gateway.stripe_adapter import StripeGateway

_current_gateway: PaymentGateway | None = None


def build_gateway(name: str) -> PaymentGateway:
    if name == "fake":
        return FakeGateway()
    if name == "stripe":
        return StripeGateway(api_key=get_settings().stripe_secret_key)
    raise ValueError(f"Unknown payment gateway '{name}'. Expected 'fake' or 'stripe'")


def get_gateway() -> PaymentGateway:
    """Return the current payment gateway, built from settings on first use."""
    global _current_gateway
    if _current_gateway is None:
        _current_gateway = build_gateway(get_settings().payment_gateway)
    return _current_gateway


def set_gateway(gateway: PaymentGateway) -> None:
    """Override the active payment gateway (useful for tests)."""
    global _current_gateway
    _current_gateway = gateway


def reset_gateway() -> None:
    """Reset to the configured gateway."""
    global _current_gateway
    _current_gateway = None
