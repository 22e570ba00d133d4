from __future__ import annotations

import csv
from pathlib import Path
from typing import Any, Iterable

from risk_desk.application.ports.exporters import RiskTableExporter, TargetLadderExporter
from risk_desk.application.use_cases.tables import RISK_COLUMNS, TARGET_COLUMNS
from risk_desk.domain.value_objects.position_sizing import Target
from risk_desk.domain.value_objects.risk import PositionWithRisk
from risk_desk.infrastructure.logging import get_logger

logger = get_logger(__name__)


def _write_rows(path: Path, fieldnames: list[str], rows: list[dict[str, Any]]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="", encoding="utf-8") as handle:
        writer = csv.DictWriter(handle, fieldnames=fieldnames)
        writer.writeheader()
        writer.writerows(rows)


class CsvRiskTableExporter(RiskTableExporter):
    def export_risk_table(self, rows: Iterable[PositionWithRisk], destination: str) -> None:
        path = Path(destination)
        records = [row.model_dump(include=set(RISK_COLUMNS)) for row in rows]
        _write_rows(path, RISK_COLUMNS, records)
        logger.debug("Exported risk table", extra={"path": str(path), "count": len(records)})


class CsvTargetLadderExporter(TargetLadderExporter):
    def export_targets(self, targets: Iterable[Target], destination: str) -> None:
        path = Path(destination)
        records = [
            {
                "r_multiple": target.r_multiple,
                "target_price": target.target_price,
                "net_profit": target.net_profit,
                "return_percentage": target.return_percentage,
                "portfolio_gain_percentage": target.portfolio_gain_percentage,
                "total_charges": target.charges.total_charges,
            }
            for target in targets
        ]
        _write_rows(path, TARGET_COLUMNS, records)
        logger.debug("Exported target ladder", extra={"path": str(path), "count": len(records)})
