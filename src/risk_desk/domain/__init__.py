from risk_desk.domain.base import DomainModel, ValueObject
from risk_desk.domain.entities import (
    ConditionalOrderGroup,
    ConditionalOrderLeg,
    Position,
    TriggerCondition,
)
from risk_desk.domain.ports import PositionSizer
from risk_desk.domain.value_objects import (
    BrokerageRates,
    Calculations,
    ChargesBreakdown,
    FlattenedOrder,
    MarketRegime,
    OrderGroupStatus,
    OrderSide,
    PositionSide,
    PositionWithRisk,
    RiskOptions,
    SizingMode,
    SizingOutcome,
    SkippedRecord,
    Target,
    TradeInputs,
)

__all__ = [
    "DomainModel",
    "ValueObject",
    "ConditionalOrderGroup",
    "ConditionalOrderLeg",
    "Position",
    "TriggerCondition",
    "PositionSizer",
    "BrokerageRates",
    "Calculations",
    "ChargesBreakdown",
    "FlattenedOrder",
    "MarketRegime",
    "OrderGroupStatus",
    "OrderSide",
    "PositionSide",
    "PositionWithRisk",
    "RiskOptions",
    "SizingMode",
    "SizingOutcome",
    "SkippedRecord",
    "Target",
    "TradeInputs",
]
