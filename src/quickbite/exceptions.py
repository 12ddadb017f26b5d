"""Application exceptions that are not domain validation failures.

Validation and lookup failures use Protean's ``ValidationError`` and
``ObjectNotFoundError``; the HTTP layer maps all of them to status codes.
"""


class QuickBiteError(Exception):
    """Base class for application errors."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message


class Unauthorized(QuickBiteError):
    """No caller identity, or an identity that does not resolve to a user."""


class Forbidden(QuickBiteError):
    """The caller is known but lacks ownership or admin capability."""


class PaymentGatewayError(QuickBiteError):
    """The payment provider failed to issue a payment handle."""
