from __future__ import annotations

from pydantic import Field

from risk_desk.config import ACTIVE_ORDER_STATUS, NOT_AVAILABLE, PLACEHOLDER_SYMBOL
from risk_desk.domain.base import ValueObject
from risk_desk.domain.value_objects.side import OrderSide


class RiskOptions(ValueObject):
    # Any single closing order >= position quantity zeroes risk, whatever its price.
    full_cover_treated_as_zero: bool = False


class SkippedRecord(ValueObject):
    source: str
    reason: str


class FlattenedOrder(ValueObject):
    key: str
    tradingsymbol: str = ""
    exchange: str = ""
    group_id: str = "0"
    status: str
    transaction_type: OrderSide = OrderSide.BUY
    quantity: float = Field(default=0.0, ge=0.0)
    price: float = Field(default=0.0, ge=0.0)

    @property
    def is_active(self) -> bool:
        return self.status.lower() == ACTIVE_ORDER_STATUS


class PositionWithRisk(ValueObject):
    symbol: str
    quantity: float = 0.0
    average_price: float = 0.0
    last_price: float = 0.0
    pnl: float = 0.0
    multiplier: float = 1.0
    position_value: float = 0.0
    covering_orders: str = NOT_AVAILABLE
    unprotected_quantity: float = 0.0
    total_risk_value: float = Field(default=0.0, ge=0.0)
    risk_percent_of_position: str = NOT_AVAILABLE
    position_size_percent: str = NOT_AVAILABLE
    portfolio_risk_percent: str = NOT_AVAILABLE
    error: str | None = None

    @classmethod
    def placeholder(cls, error: str) -> PositionWithRisk:
        return cls(symbol=PLACEHOLDER_SYMBOL, error=error)

    @property
    def is_placeholder(self) -> bool:
        return self.error is not None
