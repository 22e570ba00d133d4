from __future__ import annotations

from pydantic import Field

from risk_desk.config import (
    EXCHANGE_TRANSACTION_RATE,
    GST_RATE,
    SEBI_RATE,
    STAMP_DUTY_RATE,
    STT_RATE,
)
from risk_desk.domain.base import ValueObject


class BrokerageRates(ValueObject):
    stt: float = Field(default=STT_RATE, ge=0.0)
    transaction_charges: float = Field(default=EXCHANGE_TRANSACTION_RATE, ge=0.0)
    sebi_charges: float = Field(default=SEBI_RATE, ge=0.0)
    gst: float = Field(default=GST_RATE, ge=0.0)
    stamp_duty: float = Field(default=STAMP_DUTY_RATE, ge=0.0)


class ChargesBreakdown(ValueObject):
    stt: float
    transaction_charges: float
    sebi_charges: float
    gst: float
    stamp_duty: float
    total_charges: float

    def components(self) -> tuple[float, float, float, float, float]:
        return (self.stt, self.transaction_charges, self.sebi_charges, self.gst, self.stamp_duty)
