"""QuickBite domain: menu catalogue, users, carts, orders and payments.

A single bounded context: the cart-to-order flow needs live menu lookups,
so catalogue, identity and ordering share one domain and one store.
"""

from protean.domain import Domain

from quickbite.utils.logging import configure_logging, get_logger

configure_logging()

logger = get_logger(__name__)

quickbite = Domain(name="quickbite")
