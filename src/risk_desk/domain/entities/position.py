from __future__ import annotations

from pydantic import Field

from risk_desk.domain.base import DomainModel


class Position(DomainModel):
    """
    Broker position as reported upstream.

    Only the fields used by risk aggregation are modelled; raw mappings with
    alternative spellings are accepted by the aggregator as well.
    """

    tradingsymbol: str | None = None
    exchange: str | None = None
    instrument_token: str | int | None = None
    quantity: float = 0.0
    average_price: float = Field(default=0.0, ge=0.0)
    last_price: float = Field(default=0.0, ge=0.0)
    pnl: float = 0.0
    multiplier: float = Field(default=1.0, gt=0.0)
