from __future__ import annotations

from risk_desk.application.use_cases.instrument_key import instrument_key_for, normalize_instrument_key
from risk_desk.domain.entities.position import Position


def test_token_takes_precedence() -> None:
    assert normalize_instrument_key(111, "XYZ", "NSE") == "T_111"
    assert normalize_instrument_key("111", "xyz", "BSE") == "T_111"


def test_symbol_and_exchange_fallback() -> None:
    assert normalize_instrument_key(None, "XYZ", "NSE") == "S_XYZ_NSE"
    assert normalize_instrument_key("  ", "XYZ", None) == "S_XYZ_"
    assert normalize_instrument_key() == "S__"


def test_symbol_keys_are_case_sensitive() -> None:
    assert normalize_instrument_key(None, "xyz", "NSE") != normalize_instrument_key(None, "XYZ", "NSE")


def test_namespaces_never_collide() -> None:
    assert normalize_instrument_key("XYZ_NSE") != normalize_instrument_key(None, "XYZ", "NSE")


def test_same_token_with_different_symbol_casing() -> None:
    first = instrument_key_for({"instrument_token": "111", "tradingsymbol": "xyz", "exchange": "NSE"})
    second = instrument_key_for({"instrument_token": 111, "tradingsymbol": "XYZ", "exchange": "NSE"})

    assert first == second == "T_111"


def test_records_without_token_share_symbol_key() -> None:
    first = instrument_key_for({"tradingsymbol": "XYZ", "exchange": "NSE", "instrument_token": ""})
    second = instrument_key_for({"trading_symbol": "XYZ", "exchange": "NSE"})

    assert first == second == "S_XYZ_NSE"


def test_typed_positions_and_token_aliases() -> None:
    position = Position(tradingsymbol="ABC", exchange="NSE", instrument_token=222, quantity=5, average_price=200)

    assert instrument_key_for(position) == "T_222"
    assert instrument_key_for({"instrumentToken": "222"}) == "T_222"


def test_zero_token_on_a_record_falls_back_to_symbol() -> None:
    record = {"instrument_token": 0, "instrumentToken": "", "tradingsymbol": "XYZ", "exchange": "NSE"}

    assert instrument_key_for(record) == "S_XYZ_NSE"
    assert instrument_key_for({"instrument_token": 0, "instrumentToken": 333}) == "T_333"
    assert normalize_instrument_key(0, "XYZ", "NSE") == "T_0"
