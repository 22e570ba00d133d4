from __future__ import annotations

from typing import Sequence

import pandas as pd

from risk_desk.domain.value_objects.position_sizing import Target
from risk_desk.domain.value_objects.risk import PositionWithRisk

TARGET_COLUMNS = [
    "r_multiple",
    "target_price",
    "net_profit",
    "return_percentage",
    "portfolio_gain_percentage",
    "total_charges",
]

RISK_COLUMNS = [
    "symbol",
    "quantity",
    "average_price",
    "last_price",
    "pnl",
    "multiplier",
    "position_value",
    "covering_orders",
    "unprotected_quantity",
    "total_risk_value",
    "risk_percent_of_position",
    "position_size_percent",
    "portfolio_risk_percent",
]


def targets_to_frame(targets: Sequence[Target]) -> pd.DataFrame:
    df = pd.DataFrame(
        {
            "r_multiple": [t.r_multiple for t in targets],
            "target_price": [t.target_price for t in targets],
            "net_profit": [t.net_profit for t in targets],
            "return_percentage": [t.return_percentage for t in targets],
            "portfolio_gain_percentage": [t.portfolio_gain_percentage for t in targets],
            "total_charges": [t.charges.total_charges for t in targets],
        },
        columns=TARGET_COLUMNS,
    )
    return df.sort_values("r_multiple").reset_index(drop=True)


def risk_rows_to_frame(rows: Sequence[PositionWithRisk]) -> pd.DataFrame:
    records = [row.model_dump(include=set(RISK_COLUMNS)) for row in rows]
    return pd.DataFrame.from_records(records, columns=RISK_COLUMNS)
