from __future__ import annotations

from abc import ABC, abstractmethod

from risk_desk.domain.value_objects.position_sizing import SizingOutcome, TradeInputs
from risk_desk.domain.value_objects.side import SizingMode


class PositionSizer(ABC):
    mode: SizingMode

    @abstractmethod
    def size_position(self, inputs: TradeInputs) -> SizingOutcome:
        raise NotImplementedError
