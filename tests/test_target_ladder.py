from __future__ import annotations

import pytest

from risk_desk.application.use_cases.position_sizer import size_position
from risk_desk.application.use_cases.target_ladder import generate_targets
from risk_desk.domain.value_objects.side import SizingMode
from conftest import make_inputs


def test_six_targets_in_increasing_order() -> None:
    calc = size_position(SizingMode.RISK, make_inputs()).result
    assert calc is not None

    targets = generate_targets(calc)

    assert [t.r_multiple for t in targets] == [1, 2, 3, 4, 5, 6]
    assert [t.target_price for t in targets] == [105.0, 110.0, 115.0, 120.0, 125.0, 130.0]
    prices = [t.target_price for t in targets]
    assert all(later > earlier for earlier, later in zip(prices, prices[1:]))


def test_target_profit_and_returns() -> None:
    calc = size_position(SizingMode.RISK, make_inputs()).result
    assert calc is not None

    first, *_, last = generate_targets(calc)

    assert first.net_profit == 2500.0
    assert first.net_profit == first.gross_profit
    assert first.return_percentage == pytest.approx(5.0)
    assert first.portfolio_gain_percentage == pytest.approx(0.25)
    assert last.net_profit == 15_000.0
    assert last.return_percentage == pytest.approx(30.0)


def test_targets_carry_parent_charges() -> None:
    calc = size_position(SizingMode.ALLOCATION, make_inputs()).result
    assert calc is not None

    targets = generate_targets(calc)

    assert len(targets) == 6
    assert all(target.charges == calc.charges for target in targets)


def test_no_calculation_means_no_targets() -> None:
    assert generate_targets(None) == []
