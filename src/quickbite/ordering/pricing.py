"""Money arithmetic for carts and orders.

Amounts are stored as floats on the aggregates; every calculation goes
through ``Decimal`` and is rounded half-up to cents.
"""

from decimal import ROUND_HALF_UP, Decimal

CENT = Decimal("0.01")


def to_money(value) -> Decimal:
    """Convert a float, int, str or Decimal to a Decimal rounded to cents."""
    if isinstance(value, float):
        value = repr(value)
    return Decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


def line_total(unit_price, quantity) -> Decimal:
    return to_money(to_money(unit_price) * quantity)


def order_total(subtotal, delivery_fee, has_items=True) -> Decimal:
    """Subtotal plus delivery. An order without items carries no delivery fee."""
    subtotal = to_money(subtotal)
    if not has_items:
        return subtotal
    return to_money(subtotal + to_money(delivery_fee))


def to_minor_units(amount) -> int:
    """Major currency units to minor units, e.g. 39.96 -> 3996."""
    return int((to_money(amount) * 100).to_integral_value(rounding=ROUND_HALF_UP))
