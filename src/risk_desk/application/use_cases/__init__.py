from risk_desk.application.use_cases.fee_model import compute_fee_breakdown
from risk_desk.application.use_cases.formatting import (
    format_compact_currency,
    format_inr,
    format_inr_short,
    format_percent,
    format_quantity,
)
from risk_desk.application.use_cases.instrument_key import instrument_key_for, normalize_instrument_key
from risk_desk.application.use_cases.order_flattener import FlattenResult, flatten_conditional_orders
from risk_desk.application.use_cases.portfolio_metrics import (
    PortfolioMetricsCalculator,
    PortfolioSnapshot,
    summarize_portfolio,
)
from risk_desk.application.use_cases.position_sizer import (
    AllocationBasedPositionSizer,
    PositionSizerFactory,
    RiskBasedPositionSizer,
    regime_factor,
    risk_on_investment,
    size_position,
)
from risk_desk.application.use_cases.risk_aggregator import (
    PortfolioRisk,
    ProtectiveOrderRiskAggregator,
    compute_portfolio_risk,
)
from risk_desk.application.use_cases.stop_loss import (
    StopLossResult,
    StopLossValidation,
    calculate_precise_stop_loss,
    default_stop_loss,
    get_tick_size,
    validate_stop_loss_inputs,
)
from risk_desk.application.use_cases.tables import risk_rows_to_frame, targets_to_frame
from risk_desk.application.use_cases.target_ladder import generate_targets

__all__ = [
    "compute_fee_breakdown",
    "format_compact_currency",
    "format_inr",
    "format_inr_short",
    "format_percent",
    "format_quantity",
    "instrument_key_for",
    "normalize_instrument_key",
    "FlattenResult",
    "flatten_conditional_orders",
    "PortfolioMetricsCalculator",
    "PortfolioSnapshot",
    "summarize_portfolio",
    "AllocationBasedPositionSizer",
    "PositionSizerFactory",
    "RiskBasedPositionSizer",
    "regime_factor",
    "risk_on_investment",
    "size_position",
    "PortfolioRisk",
    "ProtectiveOrderRiskAggregator",
    "compute_portfolio_risk",
    "StopLossResult",
    "StopLossValidation",
    "calculate_precise_stop_loss",
    "default_stop_loss",
    "get_tick_size",
    "validate_stop_loss_inputs",
    "risk_rows_to_frame",
    "targets_to_frame",
    "generate_targets",
]
