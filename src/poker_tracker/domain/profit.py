"""Profit calculation with exact decimal money."""

from decimal import ROUND_HALF_UP, Decimal

CENT = Decimal("0.01")


def to_decimal(value: object) -> Decimal:
    """Coerce a stored or submitted money value into a Decimal."""
    if isinstance(value, Decimal):
        return value
    if value is None or value == "":
        return Decimal(0)
    return Decimal(str(value))


def calculate_profit(buy_in: object, rebuy: object, cash_out: object) -> Decimal:
    """Return the signed profit of a session: cash out minus money put in."""
    return to_decimal(cash_out) - (to_decimal(buy_in) + to_decimal(rebuy))


def quantize_money(value: Decimal) -> Decimal:
    """Round a money value to cents."""
    return value.quantize(CENT, rounding=ROUND_HALF_UP)
