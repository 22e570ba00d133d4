from __future__ import annotations

from typing import Final

# Delivery equity, buy side only.
STT_RATE: Final[float] = 0.001
EXCHANGE_TRANSACTION_RATE: Final[float] = 0.0000297
SEBI_RATE: Final[float] = 10 / 1e7
GST_RATE: Final[float] = 0.18
STAMP_DUTY_RATE: Final[float] = 0.00015

CURRENCY_DECIMALS: Final[int] = 2

MARKET_REGIME_FACTORS: Final[dict[str, float]] = {
    "confirmed-uptrend": 1.0,
    "uptrend-under-pressure": 0.75,
    "rally-attempt": 0.5,
    "downtrend": 0.25,
}
UNKNOWN_REGIME_FACTOR: Final[float] = 1.0
MIN_POSITION_SIZE: Final[int] = 1

MAX_RISK_PERCENTAGE: Final[float] = 10.0
HIGH_RISK_WARNING_PERCENTAGE: Final[float] = 3.0
MAX_ALLOCATION_PERCENTAGE: Final[float] = 100.0

R_MULTIPLES: Final[tuple[int, ...]] = (1, 2, 3, 4, 5, 6)

DEFAULT_STOP_LOSS_PERCENTAGE: Final[float] = 3.0
CIRCUIT_LIMIT_FRACTION: Final[float] = 0.05
ESTIMATED_SPREAD_FRACTION: Final[float] = 0.001
WIDE_STOP_WARNING_PERCENTAGE: Final[float] = 8.0
UNUSUAL_STOP_LOSS_PERCENTAGE: Final[float] = 20.0

ACTIVE_ORDER_STATUS: Final[str] = "active"
DEFAULT_ORDER_STATUS: Final[str] = "unknown"
DEFAULT_TRANSACTION_TYPE: Final[str] = "BUY"
PLACEHOLDER_SYMBOL: Final[str] = "ERROR"
UNKNOWN_SYMBOL: Final[str] = "UNKNOWN"
NOT_AVAILABLE: Final[str] = "-"

# Broker payloads are loosely typed; the first truthy alias wins.
POSITION_SYMBOL_FIELDS: Final[tuple[str, ...]] = ("tradingsymbol", "trading_symbol")
POSITION_EXCHANGE_FIELDS: Final[tuple[str, ...]] = ("exchange",)
POSITION_TOKEN_FIELDS: Final[tuple[str, ...]] = ("instrument_token", "instrumentToken")
POSITION_QUANTITY_FIELDS: Final[tuple[str, ...]] = ("quantity", "qty")
POSITION_AVERAGE_PRICE_FIELDS: Final[tuple[str, ...]] = (
    "averagePrice",
    "average_price",
    "buyPrice",
    "buy_price",
    "sellPrice",
    "sell_price",
)
POSITION_LAST_PRICE_FIELDS: Final[tuple[str, ...]] = ("lastPrice", "last_price", "ltp")
POSITION_PNL_FIELDS: Final[tuple[str, ...]] = (
    "pnl",
    "m2m",
    "unrealisedPnl",
    "unrealised",
    "dayPnl",
    "day_pnl",
)
POSITION_MULTIPLIER_FIELDS: Final[tuple[str, ...]] = ("multiplier",)

ORDER_GROUP_ID_FIELDS: Final[tuple[str, ...]] = ("trigger_id", "triggerId")
ORDER_GROUP_STATUS_FIELDS: Final[tuple[str, ...]] = ("status",)
ORDER_GROUP_CONDITION_FIELDS: Final[tuple[str, ...]] = ("condition",)
ORDER_GROUP_ORDERS_FIELDS: Final[tuple[str, ...]] = ("orders",)
CONDITION_TOKEN_FIELDS: Final[tuple[str, ...]] = ("instrument_token", "instrumentToken")
CONDITION_SYMBOL_FIELDS: Final[tuple[str, ...]] = ("tradingsymbol", "trading_symbol")
CONDITION_EXCHANGE_FIELDS: Final[tuple[str, ...]] = ("exchange",)
ORDER_TRANSACTION_TYPE_FIELDS: Final[tuple[str, ...]] = ("transaction_type", "transactionType")
ORDER_QUANTITY_FIELDS: Final[tuple[str, ...]] = ("quantity",)
ORDER_PRICE_FIELDS: Final[tuple[str, ...]] = ("price",)
