"""Tests for money arithmetic."""

from decimal import Decimal

from quickbite.ordering.pricing import line_total, order_total, to_minor_units, to_money


class TestToMoney:
    def test_float_is_rounded_half_up(self):
        assert to_money(2.675) == Decimal("2.68")

    def test_int(self):
        assert to_money(5) == Decimal("5.00")


class TestTotals:
    def test_line_total(self):
        assert line_total(12.99, 2) == Decimal("25.98")

    def test_order_total_adds_delivery(self):
        assert order_total(Decimal("36.97"), Decimal("2.99")) == Decimal("39.96")

    def test_no_delivery_without_items(self):
        assert order_total(Decimal("0"), Decimal("2.99"), has_items=False) == Decimal("0.00")


class TestMinorUnits:
    def test_cents(self):
        assert to_minor_units(39.96) == 3996

    def test_float_artifacts(self):
        assert to_minor_units(0.1 + 0.2) == 30

    def test_sub_cent_rounds(self):
        assert to_minor_units(10.005) == 1001
