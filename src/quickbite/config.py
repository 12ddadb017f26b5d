"""Application settings read from the environment.

Protean's own configuration (databases, brokers, event store) lives in
``domain.toml``; these are the business knobs layered on top of it.
"""

import os
from dataclasses import dataclass, replace
from decimal import Decimal
from enum import Enum


class TransitionPolicy(Enum):
    PERMISSIVE = "permissive"  # any enumerated status from any state
    STRICT = "strict"  # only the forward lifecycle plus cancellation


class TotalPolicy(Enum):
    TRUST = "trust"  # store the caller-supplied total
    VERIFY = "verify"  # recompute from the snapshot and reject mismatches


def _flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    delivery_fee: Decimal = Decimal("2.99")
    currency: str = "usd"
    transition_policy: TransitionPolicy = TransitionPolicy.PERMISSIVE
    total_policy: TotalPolicy = TotalPolicy.TRUST
    payment_gateway: str = "fake"
    stripe_secret_key: str | None = None
    seed_data: bool = True
    seed_admin_password: str = "admin_password"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            delivery_fee=Decimal(os.getenv("DELIVERY_FEE", "2.99")),
            currency=os.getenv("CURRENCY", "usd").lower(),
            transition_policy=TransitionPolicy(os.getenv("ORDER_TRANSITION_POLICY", "permissive").lower()),
            total_policy=TotalPolicy(os.getenv("ORDER_TOTAL_POLICY", "trust").lower()),
            payment_gateway=os.getenv("PAYMENT_GATEWAY", "fake").lower(),
            stripe_secret_key=os.getenv("STRIPE_SECRET_KEY"),
            seed_data=_flag("SEED_DATA", True),
            seed_admin_password=os.getenv("SEED_ADMIN_PASSWORD", "admin_password"),
        )


_settings: Settings | None = None


def get_settings() -> Settings:
    """Return the process-wide settings, loading them from the environment once."""
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings


def override_settings(**changes) -> Settings:
    """Replace individual settings (tests, admin tooling)."""
    global _settings
    _settings = replace(get_settings(), **changes)
    return _settings


def reset_settings() -> None:
    global _settings
    _settings = None
