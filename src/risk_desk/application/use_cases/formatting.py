from __future__ import annotations

import math

from risk_desk.config import NOT_AVAILABLE
from risk_desk.domain.value_objects.money import format_fixed, round_half_away

RUPEE = "₹"


def format_quantity(value: float) -> str:
    """Integral numbers without a trailing ``.0``; everything else as Python prints it."""
    number = float(value)
    if number.is_integer():
        return str(int(number))
    return repr(number)


def format_percent(value: float, places: int = 2) -> str:
    return f"{format_fixed(value, places)}%"


def percent_of(numerator: float, denominator: float | None, places: int = 2) -> str:
    if not denominator or not math.isfinite(denominator):
        return NOT_AVAILABLE
    return format_percent(numerator / denominator * 100, places)


def _indian_grouping(digits: str) -> str:
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    groups: list[str] = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join(groups + [tail])


def format_inr(amount: float | None) -> str:
    """Rupee amount with lakh/crore digit grouping and two decimals."""
    if amount is None or not math.isfinite(amount):
        return f"{RUPEE}0.00"
    fixed = format_fixed(abs(amount))
    whole, fraction = fixed.split(".")
    sign = "-" if round_half_away(amount) < 0 else ""
    return f"{RUPEE}{sign}{_indian_grouping(whole)}.{fraction}"


def format_inr_short(amount: float | None) -> str:
    if amount is None or not math.isfinite(amount):
        return "0"
    if amount >= 10_000_000:
        return f"{format_fixed(amount / 10_000_000, 1)}Cr"
    if amount >= 100_000:
        return f"{format_fixed(amount / 100_000, 1)}L"
    if amount >= 1_000:
        return f"{format_fixed(amount / 1_000, 1)}K"
    return format_quantity(amount)


def format_compact_currency(amount: float) -> str:
    if amount >= 100_000:
        return f"{RUPEE}{format_fixed(amount / 100_000, 1)}L"
    if amount >= 1_000:
        return f"{RUPEE}{format_fixed(amount / 1_000, 1)}K"
    return f"{RUPEE}{int(round_half_away(amount, 0)):,}"
