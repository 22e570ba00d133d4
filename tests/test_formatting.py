from __future__ import annotations

import pytest

from risk_desk.application.use_cases.formatting import (
    format_compact_currency,
    format_inr,
    format_inr_short,
    format_percent,
    format_quantity,
    percent_of,
)


@pytest.mark.parametrize(
    ("amount", "expected"),
    [
        (1234567.8, "₹12,34,567.80"),
        (999.999, "₹1,000.00"),
        (0, "₹0.00"),
        (-1500, "₹-1,500.00"),
        (None, "₹0.00"),
    ],
)
def test_format_inr(amount, expected: str) -> None:
    assert format_inr(amount) == expected


@pytest.mark.parametrize(
    ("amount", "expected"),
    [(25_000_000, "2.5Cr"), (150_000, "1.5L"), (12_345, "12.3K"), (500, "500"), (None, "0")],
)
def test_format_inr_short(amount, expected: str) -> None:
    assert format_inr_short(amount) == expected


@pytest.mark.parametrize(
    ("amount", "expected"),
    [(123_456, "₹1.2L"), (1_234, "₹1.2K"), (750, "₹750"), (999.5, "₹1,000")],
)
def test_format_compact_currency(amount: float, expected: str) -> None:
    assert format_compact_currency(amount) == expected


def test_percent_and_quantity_formatting() -> None:
    assert format_percent(0.625) == "0.63%"
    assert format_percent(12.3456, 3) == "12.346%"
    assert format_quantity(5.0) == "5"
    assert format_quantity(2.5) == "2.5"
    assert percent_of(50.0, 1000.0) == "5.00%"
    assert percent_of(50.0, 0.0) == "-"
    assert percent_of(50.0, None) == "-"
