from __future__ import annotations

from enum import Enum


class OrderSide(str, Enum):
    BUY = "BUY"
    SELL = "SELL"


class PositionSide(str, Enum):
    LONG = "long"
    SHORT = "short"

    @property
    def closing_side(self) -> OrderSide:
        return OrderSide.SELL if self is PositionSide.LONG else OrderSide.BUY


class SizingMode(str, Enum):
    RISK = "risk"
    ALLOCATION = "allocation"


class MarketRegime(str, Enum):
    CONFIRMED_UPTREND = "confirmed-uptrend"
    UPTREND_UNDER_PRESSURE = "uptrend-under-pressure"
    RALLY_ATTEMPT = "rally-attempt"
    DOWNTREND = "downtrend"


class OrderGroupStatus(str, Enum):
    ACTIVE = "active"
    TRIGGERED = "triggered"
    DISABLED = "disabled"
    EXPIRED = "expired"
    CANCELLED = "cancelled"
    REJECTED = "rejected"
    DELETED = "deleted"
