from __future__ import annotations

import pandas as pd

from risk_desk.application.use_cases.position_sizer import size_position
from risk_desk.application.use_cases.risk_aggregator import compute_portfolio_risk
from risk_desk.application.use_cases.tables import (
    RISK_COLUMNS,
    TARGET_COLUMNS,
    risk_rows_to_frame,
    targets_to_frame,
)
from risk_desk.application.use_cases.target_ladder import generate_targets
from risk_desk.domain.value_objects.side import SizingMode
from risk_desk.infrastructure.exporters.csv_exporter import (
    CsvRiskTableExporter,
    CsvTargetLadderExporter,
)
from conftest import make_inputs, make_order_group, make_position


def _targets():
    calc = size_position(SizingMode.RISK, make_inputs()).result
    assert calc is not None
    return generate_targets(calc)


def _risk_rows():
    positions = [make_position("XYZ", 10, 105.0, token="111"), make_position("ABC", 5, 200.0)]
    groups = [make_order_group("XYZ", [("SELL", 5, 95.0)], token="111")]
    return compute_portfolio_risk(positions, groups, 100_000.0).rows


def test_targets_frame() -> None:
    df = targets_to_frame(_targets())

    assert list(df.columns) == TARGET_COLUMNS
    assert df["r_multiple"].tolist() == [1, 2, 3, 4, 5, 6]
    assert df["target_price"].is_monotonic_increasing


def test_risk_frame() -> None:
    df = risk_rows_to_frame(_risk_rows())

    assert list(df.columns) == RISK_COLUMNS
    assert df["symbol"].tolist() == ["XYZ", "ABC"]
    assert df["total_risk_value"].sum() == 1575.0


def test_risk_table_csv_export(tmp_path) -> None:
    destination = tmp_path / "exports" / "risk.csv"

    CsvRiskTableExporter().export_risk_table(_risk_rows(), str(destination))

    df = pd.read_csv(destination)
    assert list(df.columns) == RISK_COLUMNS
    assert df["covering_orders"].tolist() == ["5@95", "-"]
    assert df["total_risk_value"].tolist() == [575.0, 1000.0]


def test_target_ladder_csv_export(tmp_path) -> None:
    destination = tmp_path / "targets.csv"

    CsvTargetLadderExporter().export_targets(_targets(), str(destination))

    df = pd.read_csv(destination)
    assert list(df.columns) == TARGET_COLUMNS
    assert df["net_profit"].tolist() == [2500.0, 5000.0, 7500.0, 10000.0, 12500.0, 15000.0]
