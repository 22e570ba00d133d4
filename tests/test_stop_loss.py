from __future__ import annotations

import pytest

from risk_desk.application.use_cases.stop_loss import (
    calculate_precise_stop_loss,
    default_stop_loss,
    get_tick_size,
    validate_stop_loss_inputs,
)


@pytest.mark.parametrize(
    ("price", "tick"),
    [(0.0, 0.01), (5.0, 0.01), (10.0, 0.02), (19.99, 0.02), (20.0, 0.05), (2500.0, 0.05)],
)
def test_tick_size_bands(price: float, tick: float) -> None:
    assert get_tick_size(price) == tick


def test_ordinary_stop_has_no_warnings() -> None:
    result = calculate_precise_stop_loss(100.0, 3.0)

    assert result.is_valid
    assert result.stop_price == 97.0
    assert result.warnings == []


def test_deep_stop_is_clamped_to_circuit() -> None:
    result = calculate_precise_stop_loss(100.0, 10.0)

    assert result.is_valid
    assert result.stop_price == 95.0
    assert result.warnings == [
        "Stop loss adjusted to circuit limit. Gap risk possible.",
        "High risk stop loss - consider reducing position size",
    ]


def test_tight_stop_warns_about_slippage() -> None:
    result = calculate_precise_stop_loss(100.0, 0.1)

    assert result.stop_price == pytest.approx(99.9)
    assert result.warnings == ["Very tight stop loss - high slippage risk"]


def test_stop_snaps_down_to_tick_grid() -> None:
    result = calculate_precise_stop_loss(101.0, 1.5)

    # 99.485 floors to the 0.05 grid
    assert result.stop_price == pytest.approx(99.45)


@pytest.mark.parametrize(("entry", "percentage"), [(0.0, 3.0), (-10.0, 3.0), (100.0, 0.0)])
def test_invalid_stop_inputs(entry: float, percentage: float) -> None:
    result = calculate_precise_stop_loss(entry, percentage)

    assert not result.is_valid
    assert result.stop_price == 0.0
    assert result.warnings == ["Invalid entry price or percentage"]


def test_default_stop_loss() -> None:
    assert default_stop_loss(100.0) == 97.0
    assert default_stop_loss(250.5, 2.0) == 245.49


def test_validate_stop_loss_inputs() -> None:
    assert validate_stop_loss_inputs(100.0, 3.0).is_valid

    missing = validate_stop_loss_inputs(0.0, 0.0)
    assert not missing.is_valid
    assert missing.errors == [
        "Entry price must be greater than 0",
        "Stop loss percentage must be greater than 0",
    ]

    assert validate_stop_loss_inputs(100.0, 25.0).errors == ["Stop loss percentage seems unusually high"]
    assert validate_stop_loss_inputs(100.0, 150.0).errors == [
        "Stop loss percentage must be less than 100%",
        "Stop loss percentage seems unusually high",
    ]
