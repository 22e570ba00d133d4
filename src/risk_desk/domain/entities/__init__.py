from risk_desk.domain.entities.conditional_order import (
    ConditionalOrderGroup,
    ConditionalOrderLeg,
    TriggerCondition,
)
from risk_desk.domain.entities.position import Position

__all__ = ["ConditionalOrderGroup", "ConditionalOrderLeg", "TriggerCondition", "Position"]
