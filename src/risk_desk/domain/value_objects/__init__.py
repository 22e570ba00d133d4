from risk_desk.domain.value_objects.charges import BrokerageRates, ChargesBreakdown
from risk_desk.domain.value_objects.money import format_fixed, round_half_away
from risk_desk.domain.value_objects.position_sizing import (
    Calculations,
    SizingOutcome,
    Target,
    TradeInputs,
)
from risk_desk.domain.value_objects.risk import (
    FlattenedOrder,
    PositionWithRisk,
    RiskOptions,
    SkippedRecord,
)
from risk_desk.domain.value_objects.side import (
    MarketRegime,
    OrderGroupStatus,
    OrderSide,
    PositionSide,
    SizingMode,
)

__all__ = [
    "BrokerageRates",
    "ChargesBreakdown",
    "format_fixed",
    "round_half_away",
    "Calculations",
    "SizingOutcome",
    "Target",
    "TradeInputs",
    "FlattenedOrder",
    "PositionWithRisk",
    "RiskOptions",
    "SkippedRecord",
    "MarketRegime",
    "OrderGroupStatus",
    "OrderSide",
    "PositionSide",
    "SizingMode",
]
