from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
import math

from risk_desk.config import CURRENCY_DECIMALS


def round_half_away(value: float, places: int = CURRENCY_DECIMALS) -> float:
    """
    Round to ``places`` decimals, ties away from zero.

    The float is read through its shortest repr, so ``2.675`` rounds to ``2.68``
    and ``0.125`` to ``0.13`` (the builtin ``round`` gives 2.67 and 0.12).
    """
    if not math.isfinite(value):
        return value
    try:
        quantum = Decimal(1).scaleb(-places)
        rounded = Decimal(repr(float(value))).quantize(quantum, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        return value
    result = float(rounded)
    return 0.0 if result == 0 else result


def format_fixed(value: float, places: int = CURRENCY_DECIMALS) -> str:
    return f"{round_half_away(value, places):.{places}f}"
