from __future__ import annotations

from pydantic import Field

from risk_desk.domain.base import DomainModel, ValueObject
from risk_desk.domain.value_objects.charges import ChargesBreakdown
from risk_desk.domain.value_objects.side import MarketRegime, SizingMode


class TradeInputs(DomainModel):
    """
    Raw form state for one sizing request.

    Fields are deliberately unconstrained: bad values are reported as
    validation messages by the sizer, not rejected here. ``None`` marks an
    unset percentage.
    """

    account_balance: float
    risk_percentage: float | None = None
    allocation_percentage: float | None = None
    entry_price: float
    stop_loss: float
    market_regime: MarketRegime | str = MarketRegime.CONFIRMED_UPTREND


class Calculations(ValueObject):
    mode: SizingMode
    account_balance: float
    risk_percentage: float
    risk_amount: float
    entry_price: float
    stop_loss: float
    brokerage_cost: float
    risk_per_share: float
    position_size: int = Field(..., ge=1)
    total_investment: float
    portfolio_percentage: float
    charges: ChargesBreakdown
    break_even_price: float
    market_regime: MarketRegime | str
    regime_factor: float
    risk_on_investment: float


class SizingOutcome(ValueObject):
    result: Calculations | None = None
    warnings: list[str] = Field(default_factory=list)
    errors: list[str] = Field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return self.result is not None


class Target(ValueObject):
    r_multiple: int
    target_price: float
    gross_profit: float
    net_profit: float
    return_percentage: float
    portfolio_gain_percentage: float
    charges: ChargesBreakdown
