from __future__ import annotations

import pytest

from risk_desk.application.use_cases.fee_model import compute_fee_breakdown
from risk_desk.domain.value_objects.charges import BrokerageRates
from risk_desk.domain.value_objects.money import round_half_away


def test_fee_breakdown_for_one_lakh_turnover() -> None:
    charges = compute_fee_breakdown(1000.0, 100)

    assert charges.stt == 100.0
    assert charges.transaction_charges == 2.97
    assert charges.sebi_charges == 0.1
    assert charges.gst == 0.55
    assert charges.stamp_duty == 15.0
    assert charges.total_charges == 118.62


@pytest.mark.parametrize(
    ("price", "shares"),
    [(100.0, 500), (1234.55, 37), (3.35, 1), (0.05, 3), (48_765.9, 2_113)],
)
def test_total_is_sum_of_rounded_components(price: float, shares: int) -> None:
    charges = compute_fee_breakdown(price, shares)

    assert charges.total_charges == pytest.approx(sum(charges.components()), abs=1e-9)
    for component in charges.components():
        assert component == round_half_away(component)


def test_ties_round_away_from_zero() -> None:
    rates = BrokerageRates(stt=0.0625, transaction_charges=0.0, sebi_charges=0.0, gst=0.0, stamp_duty=0.0)

    charges = compute_fee_breakdown(1.0, 2, rates)

    # 0.125 exactly: half-to-even would give 0.12
    assert charges.stt == 0.13
    assert charges.total_charges == 0.13


def test_custom_rates_are_used() -> None:
    rates = BrokerageRates(stt=0.0, transaction_charges=0.0, sebi_charges=0.0, gst=0.0, stamp_duty=0.001)

    charges = compute_fee_breakdown(1000.0, 10, rates)

    assert charges.stamp_duty == 10.0
    assert charges.total_charges == 10.0


def test_non_positive_inputs_do_not_raise() -> None:
    zero = compute_fee_breakdown(0.0, 10)
    negative = compute_fee_breakdown(-100.0, 10)

    assert zero.total_charges == 0.0
    assert all(component == 0.0 for component in zero.components())
    assert negative.stt == -1.0
    assert negative.total_charges < 0


def test_rates_reject_negative_values() -> None:
    with pytest.raises(ValueError):
        BrokerageRates(stt=-0.1)
