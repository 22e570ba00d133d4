from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from risk_desk.domain.value_objects.position_sizing import Target
from risk_desk.domain.value_objects.risk import PositionWithRisk


class RiskTableExporter(ABC):
    @abstractmethod
    def export_risk_table(self, rows: Sequence[PositionWithRisk], destination: str) -> None:
        raise NotImplementedError


class TargetLadderExporter(ABC):
    @abstractmethod
    def export_targets(self, targets: Sequence[Target], destination: str) -> None:
        raise NotImplementedError
