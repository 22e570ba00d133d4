from __future__ import annotations

from pydantic import Field

from risk_desk.domain.base import DomainModel
from risk_desk.domain.value_objects.side import OrderGroupStatus, OrderSide


class TriggerCondition(DomainModel):
    exchange: str | None = None
    tradingsymbol: str | None = None
    instrument_token: str | int | None = None
    trigger_values: list[float] = Field(default_factory=list)
    last_price: float | None = None


class ConditionalOrderLeg(DomainModel):
    exchange: str | None = None
    tradingsymbol: str | None = None
    transaction_type: OrderSide = OrderSide.BUY
    quantity: float = Field(default=0.0, ge=0.0)
    price: float = Field(default=0.0, ge=0.0)
    order_type: str = "LIMIT"
    product: str = "CNC"


class ConditionalOrderGroup(DomainModel):
    trigger_id: int = 0
    type: str = "single"
    status: OrderGroupStatus
    condition: TriggerCondition | None = None
    orders: list[ConditionalOrderLeg] = Field(default_factory=list, max_length=2)
