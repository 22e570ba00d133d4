from __future__ import annotations

from typing import Any

import pytest

from risk_desk.domain.value_objects.position_sizing import TradeInputs
from risk_desk.domain.value_objects.side import MarketRegime


@pytest.fixture
def trading_capital() -> float:
    return 100_000.0


def make_inputs(
    account_balance: float = 1_000_000.0,
    risk_percentage: float | None = 0.25,
    allocation_percentage: float | None = 10.0,
    entry_price: float = 100.0,
    stop_loss: float = 95.0,
    market_regime: MarketRegime | str = MarketRegime.CONFIRMED_UPTREND,
) -> TradeInputs:
    return TradeInputs(
        account_balance=account_balance,
        risk_percentage=risk_percentage,
        allocation_percentage=allocation_percentage,
        entry_price=entry_price,
        stop_loss=stop_loss,
        market_regime=market_regime,
    )


def make_position(
    symbol: str,
    quantity: float,
    average_price: float,
    token: str | None = None,
    exchange: str = "NSE",
    last_price: float | None = None,
    pnl: float = 0.0,
    multiplier: float | None = None,
) -> dict[str, Any]:
    position: dict[str, Any] = {
        "tradingsymbol": symbol,
        "exchange": exchange,
        "quantity": quantity,
        "averagePrice": average_price,
        "lastPrice": last_price if last_price is not None else average_price,
        "pnl": pnl,
    }
    if token is not None:
        position["instrument_token"] = token
    if multiplier is not None:
        position["multiplier"] = multiplier
    return position


def make_order_group(
    symbol: str,
    legs: list[tuple[str, float, float]],
    token: str | None = None,
    status: str = "active",
    exchange: str = "NSE",
    trigger_id: int = 1,
) -> dict[str, Any]:
    condition: dict[str, Any] = {
        "exchange": exchange,
        "tradingsymbol": symbol,
        "trigger_values": [price for _, _, price in legs],
    }
    if token is not None:
        condition["instrument_token"] = token
    return {
        "trigger_id": trigger_id,
        "type": "two-leg" if len(legs) > 1 else "single",
        "status": status,
        "condition": condition,
        "orders": [
            {
                "exchange": exchange,
                "tradingsymbol": symbol,
                "transaction_type": side,
                "quantity": quantity,
                "order_type": "LIMIT",
                "product": "CNC",
                "price": price,
            }
            for side, quantity, price in legs
        ],
    }
