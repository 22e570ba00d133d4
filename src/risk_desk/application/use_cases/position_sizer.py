from __future__ import annotations

from abc import abstractmethod
import math
from typing import Callable

from risk_desk.application.use_cases.fee_model import compute_fee_breakdown
from risk_desk.config import (
    HIGH_RISK_WARNING_PERCENTAGE,
    MARKET_REGIME_FACTORS,
    MAX_ALLOCATION_PERCENTAGE,
    MAX_RISK_PERCENTAGE,
    MIN_POSITION_SIZE,
    UNKNOWN_REGIME_FACTOR,
)
from risk_desk.domain.ports.position_sizing import PositionSizer
from risk_desk.domain.value_objects.charges import BrokerageRates
from risk_desk.domain.value_objects.position_sizing import Calculations, SizingOutcome, TradeInputs
from risk_desk.domain.value_objects.side import MarketRegime, SizingMode
from risk_desk.infrastructure.logging import get_logger

logger = get_logger(__name__)

BALANCE_MESSAGE = "Account balance must be positive"
RISK_RANGE_MESSAGE = "Risk percentage should be between 0.1% and 10%"
ALLOCATION_RANGE_MESSAGE = "Allocation percentage should be between 0% and 100%"
ENTRY_MESSAGE = "Entry price must be positive"
STOP_MESSAGE = "Stop loss must be positive"
STOP_ABOVE_ENTRY_MESSAGE = "Stop loss must be below entry price for long positions"
HIGH_RISK_MESSAGE = "Risk percentage above 3% is considered high risk"


def regime_factor(regime: MarketRegime | str | None) -> float:
    """Sizing multiplier for a market regime; unrecognised regimes size at full."""
    if isinstance(regime, MarketRegime):
        regime = regime.value
    if not isinstance(regime, str):
        return UNKNOWN_REGIME_FACTOR
    return MARKET_REGIME_FACTORS.get(regime.strip().lower(), UNKNOWN_REGIME_FACTOR)


def risk_on_investment(entry_price: float, stop_loss: float) -> float:
    """Distance to the stop as a percentage of the entry price."""
    if entry_price <= 0:
        return 0.0
    return (entry_price - stop_loss) / entry_price * 100


def adjust_for_regime(base_shares: int, factor: float) -> int:
    return max(MIN_POSITION_SIZE, math.floor(base_shares * factor))


def _is_positive(value: float) -> bool:
    return math.isfinite(value) and value > 0


class _BasePositionSizer(PositionSizer):
    """
    Shared validation and assembly for both sizing modes.

    Subclasses supply the percentage rule and the share count; everything
    downstream of the share count (fees, investment, break-even) is common.
    """

    def __init__(self, rates: BrokerageRates | None = None) -> None:
        self._rates = rates

    def size_position(self, inputs: TradeInputs) -> SizingOutcome:
        errors, advisories = self._validate(inputs)
        messages = errors + advisories
        if errors:
            logger.debug(
                "Sizing rejected",
                extra={"mode": self.mode.value, "errors": len(errors)},
            )
            return SizingOutcome(result=None, warnings=messages, errors=errors)

        result = self._compute(inputs)
        logger.debug(
            "Position sized",
            extra={
                "mode": self.mode.value,
                "position_size": result.position_size,
                "total_investment": result.total_investment,
            },
        )
        return SizingOutcome(result=result, warnings=messages, errors=[])

    def _validate(self, inputs: TradeInputs) -> tuple[list[str], list[str]]:
        errors: list[str] = []
        if not _is_positive(inputs.account_balance):
            errors.append(BALANCE_MESSAGE)
        errors.extend(self._percentage_errors(inputs))
        if not _is_positive(inputs.entry_price):
            errors.append(ENTRY_MESSAGE)
        if not _is_positive(inputs.stop_loss):
            errors.append(STOP_MESSAGE)
        if inputs.stop_loss >= inputs.entry_price:
            errors.append(STOP_ABOVE_ENTRY_MESSAGE)
        return errors, self._advisories(inputs)

    @abstractmethod
    def _percentage_errors(self, inputs: TradeInputs) -> list[str]:
        raise NotImplementedError

    def _advisories(self, inputs: TradeInputs) -> list[str]:
        return []

    @abstractmethod
    def _compute(self, inputs: TradeInputs) -> Calculations:
        raise NotImplementedError

    def _assemble(
        self,
        inputs: TradeInputs,
        position_size: int,
        factor: float,
        risk_amount: float,
        risk_percentage: float,
    ) -> Calculations:
        charges = compute_fee_breakdown(inputs.entry_price, position_size, self._rates)
        total_investment = position_size * inputs.entry_price
        return Calculations(
            mode=self.mode,
            account_balance=inputs.account_balance,
            risk_percentage=risk_percentage,
            risk_amount=risk_amount,
            entry_price=inputs.entry_price,
            stop_loss=inputs.stop_loss,
            brokerage_cost=charges.total_charges,
            risk_per_share=inputs.entry_price - inputs.stop_loss,
            position_size=position_size,
            total_investment=total_investment,
            portfolio_percentage=total_investment / inputs.account_balance * 100,
            charges=charges,
            break_even_price=inputs.entry_price + charges.total_charges / position_size,
            market_regime=inputs.market_regime,
            regime_factor=factor,
            risk_on_investment=risk_on_investment(inputs.entry_price, inputs.stop_loss),
        )


class RiskBasedPositionSizer(_BasePositionSizer):
    """
    Sizes from a fixed fraction of the account put at risk between entry and stop.

    The regime factor shrinks the share count and the reported risk amount
    alike; the reported risk percentage is the one requested.
    """

    mode = SizingMode.RISK

    def _percentage_errors(self, inputs: TradeInputs) -> list[str]:
        risk = inputs.risk_percentage
        if risk is None or not _is_positive(risk) or risk > MAX_RISK_PERCENTAGE:
            return [RISK_RANGE_MESSAGE]
        return []

    def _advisories(self, inputs: TradeInputs) -> list[str]:
        risk = inputs.risk_percentage
        if risk is not None and risk > HIGH_RISK_WARNING_PERCENTAGE:
            return [HIGH_RISK_MESSAGE]
        return []

    def _compute(self, inputs: TradeInputs) -> Calculations:
        risk_percentage = inputs.risk_percentage or 0.0
        base_risk_amount = inputs.account_balance * risk_percentage / 100
        risk_per_share = inputs.entry_price - inputs.stop_loss
        base_shares = math.floor(base_risk_amount / risk_per_share)

        factor = regime_factor(inputs.market_regime)
        position_size = adjust_for_regime(base_shares, factor)
        return self._assemble(
            inputs,
            position_size=position_size,
            factor=factor,
            risk_amount=base_risk_amount * factor,
            risk_percentage=risk_percentage,
        )


class AllocationBasedPositionSizer(_BasePositionSizer):
    """
    Sizes from a fraction of the account committed to the position.

    Risk is derived after sizing from the shares actually bought, so it will
    generally differ from a risk-mode request with the same nominal budget.
    """

    mode = SizingMode.ALLOCATION

    def _percentage_errors(self, inputs: TradeInputs) -> list[str]:
        allocation = inputs.allocation_percentage
        if allocation is None or not _is_positive(allocation) or allocation > MAX_ALLOCATION_PERCENTAGE:
            return [ALLOCATION_RANGE_MESSAGE]
        return []

    def _compute(self, inputs: TradeInputs) -> Calculations:
        allocation_percentage = inputs.allocation_percentage or 0.0
        allocation_amount = inputs.account_balance * allocation_percentage / 100
        base_shares = math.floor(allocation_amount / inputs.entry_price)

        factor = regime_factor(inputs.market_regime)
        position_size = adjust_for_regime(base_shares, factor)
        risk_amount = position_size * (inputs.entry_price - inputs.stop_loss)
        return self._assemble(
            inputs,
            position_size=position_size,
            factor=factor,
            risk_amount=risk_amount,
            risk_percentage=risk_amount / inputs.account_balance * 100,
        )


SizerBuilder = Callable[[BrokerageRates | None], PositionSizer]


class PositionSizerFactory:
    def __init__(self) -> None:
        self._registry: dict[SizingMode, SizerBuilder] = {
            SizingMode.RISK: RiskBasedPositionSizer,
            SizingMode.ALLOCATION: AllocationBasedPositionSizer,
        }

    def available(self) -> list[str]:
        return sorted(mode.value for mode in self._registry)

    def create(self, mode: SizingMode | str, rates: BrokerageRates | None = None) -> PositionSizer:
        try:
            resolved = SizingMode(mode)
        except ValueError:
            logger.error("Unknown sizing mode", extra={"mode": mode})
            raise ValueError(f"Unknown sizing mode: {mode}") from None
        return self._registry[resolved](rates)


def size_position(
    mode: SizingMode | str,
    inputs: TradeInputs,
    rates: BrokerageRates | None = None,
) -> SizingOutcome:
    return PositionSizerFactory().create(mode, rates).size_position(inputs)
