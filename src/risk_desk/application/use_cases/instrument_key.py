from __future__ import annotations

from enum import Enum
from typing import Any, Sequence

from risk_desk.application.use_cases.field_lookup import lookup_text, read_field
from risk_desk.config import (
    POSITION_EXCHANGE_FIELDS,
    POSITION_SYMBOL_FIELDS,
    POSITION_TOKEN_FIELDS,
)

TOKEN_KEY_PREFIX = "T_"
SYMBOL_KEY_PREFIX = "S_"


def _token_text(token: Any) -> str:
    if token is None or isinstance(token, bool):
        return ""
    if isinstance(token, Enum):
        token = token.value
    return str(token).strip()


def normalize_instrument_key(
    instrument_token: Any = None,
    tradingsymbol: str | None = None,
    exchange: str | None = None,
) -> str:
    """
    Join key shared by positions and conditional orders.

    A non-blank instrument token wins (``T_<token>``); otherwise the key is
    ``S_<symbol>_<exchange>`` with missing parts rendered as empty strings. The
    prefixes keep the two namespaces apart.
    """
    token = _token_text(instrument_token)
    if token:
        return f"{TOKEN_KEY_PREFIX}{token}"
    return f"{SYMBOL_KEY_PREFIX}{tradingsymbol or ''}_{exchange or ''}"


def instrument_key_for(
    record: Any,
    token_fields: Sequence[str] = POSITION_TOKEN_FIELDS,
    symbol_fields: Sequence[str] = POSITION_SYMBOL_FIELDS,
    exchange_fields: Sequence[str] = POSITION_EXCHANGE_FIELDS,
) -> str:
    """Join key for a raw record; falsy tokens such as ``0`` fall through to the next alias."""
    token = next(
        (value for value in (read_field(record, name) for name in token_fields) if value and _token_text(value)),
        None,
    )
    return normalize_instrument_key(
        instrument_token=token,
        tradingsymbol=lookup_text(record, symbol_fields),
        exchange=lookup_text(record, exchange_fields),
    )
