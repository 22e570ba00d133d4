from risk_desk.application.ports.exporters import RiskTableExporter, TargetLadderExporter

__all__ = ["RiskTableExporter", "TargetLadderExporter"]
