from __future__ import annotations

from dataclasses import dataclass, field
import math

from risk_desk.config import (
    CIRCUIT_LIMIT_FRACTION,
    DEFAULT_STOP_LOSS_PERCENTAGE,
    ESTIMATED_SPREAD_FRACTION,
    UNUSUAL_STOP_LOSS_PERCENTAGE,
    WIDE_STOP_WARNING_PERCENTAGE,
)
from risk_desk.domain.value_objects.money import round_half_away

# Keeps floor() from losing a whole tick to binary noise in price / tick.
_TICK_EPSILON = 1e-9


@dataclass(frozen=True)
class StopLossResult:
    stop_price: float
    is_valid: bool
    warnings: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class StopLossValidation:
    is_valid: bool
    errors: list[str] = field(default_factory=list)


def get_tick_size(price: float) -> float:
    """NSE/BSE equity tick size for a price."""
    if price <= 0:
        return 0.01
    if price >= 20:
        return 0.05
    if price >= 10:
        return 0.02
    return 0.01


def default_stop_loss(entry_price: float, percentage: float = DEFAULT_STOP_LOSS_PERCENTAGE) -> float:
    return round_half_away(entry_price * (100 - percentage) / 100)


def calculate_precise_stop_loss(entry_price: float, percentage: float) -> StopLossResult:
    """
    Stop price ``percentage`` below entry, snapped down to the tick grid.

    Stops at or beyond the lower circuit are pulled back to the circuit price.
    """
    if entry_price <= 0 or percentage <= 0:
        return StopLossResult(stop_price=0.0, is_valid=False, warnings=["Invalid entry price or percentage"])

    warnings: list[str] = []
    raw_stop = entry_price * (1 - percentage / 100)
    tick = get_tick_size(entry_price)
    stop_price = round_half_away(math.floor(raw_stop / tick + _TICK_EPSILON) * tick)

    circuit_price = entry_price - entry_price * CIRCUIT_LIMIT_FRACTION
    if stop_price <= circuit_price:
        stop_price = circuit_price
        warnings.append("Stop loss adjusted to circuit limit. Gap risk possible.")

    estimated_spread = entry_price * ESTIMATED_SPREAD_FRACTION
    if entry_price - stop_price < estimated_spread * 2:
        warnings.append("Very tight stop loss - high slippage risk")

    if percentage > WIDE_STOP_WARNING_PERCENTAGE:
        warnings.append("High risk stop loss - consider reducing position size")

    return StopLossResult(stop_price=stop_price, is_valid=True, warnings=warnings)


def validate_stop_loss_inputs(entry_price: float, percentage: float) -> StopLossValidation:
    errors: list[str] = []
    if entry_price <= 0:
        errors.append("Entry price must be greater than 0")
    if percentage <= 0:
        errors.append("Stop loss percentage must be greater than 0")
    if percentage >= 100:
        errors.append("Stop loss percentage must be less than 100%")
    if percentage > UNUSUAL_STOP_LOSS_PERCENTAGE:
        errors.append("Stop loss percentage seems unusually high")
    return StopLossValidation(is_valid=not errors, errors=errors)
