from __future__ import annotations

from typing import Sequence

from risk_desk.config import R_MULTIPLES
from risk_desk.domain.value_objects.position_sizing import Calculations, Target


def generate_targets(
    calculations: Calculations | None,
    r_multiples: Sequence[int] = R_MULTIPLES,
) -> list[Target]:
    """
    Profit targets at whole multiples of the initial per-share risk.

    Only entry-side charges exist in a sizing calculation, so net profit equals
    gross profit and every row carries the parent's charges unchanged.
    """
    if calculations is None:
        return []

    targets: list[Target] = []
    for r_multiple in sorted(r_multiples):
        target_price = calculations.entry_price + r_multiple * calculations.risk_per_share
        gross_profit = (target_price - calculations.entry_price) * calculations.position_size
        net_profit = gross_profit
        targets.append(
            Target(
                r_multiple=r_multiple,
                target_price=target_price,
                gross_profit=gross_profit,
                net_profit=net_profit,
                return_percentage=net_profit / calculations.total_investment * 100,
                portfolio_gain_percentage=net_profit / calculations.account_balance * 100,
                charges=calculations.charges,
            )
        )
    return targets
