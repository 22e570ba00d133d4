from risk_desk.domain.ports.position_sizing import PositionSizer

__all__ = ["PositionSizer"]
