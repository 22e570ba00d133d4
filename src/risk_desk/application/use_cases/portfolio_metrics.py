from __future__ import annotations

from dataclasses import dataclass

from risk_desk.application.use_cases.risk_aggregator import PortfolioRisk, trading_capital
from risk_desk.domain.value_objects.money import round_half_away
from risk_desk.infrastructure.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class PortfolioSnapshot:
    total_positions: int
    open_positions: int
    closed_positions: int
    win_rate: float
    realised_pnl: float
    unrealised_pnl: float
    open_heat: float
    percent_invested: float
    total_portfolio_value: float
    total_risk: float


class PortfolioMetricsCalculator:
    """
    Headline numbers for the portfolio snapshot built from a risk table.

    A row with zero quantity is a position closed during the session; its P&L
    is realised. Open heat is the capital at risk across open rows.
    """

    def summarize(self, risk: PortfolioRisk, capital: float | None) -> PortfolioSnapshot:
        rows = [row for row in risk.rows if not row.is_placeholder]
        open_rows = [row for row in rows if row.quantity != 0]
        closed_rows = [row for row in rows if row.quantity == 0]

        winners = sum(1 for row in closed_rows if row.pnl > 0)
        win_rate = winners / len(closed_rows) * 100 if closed_rows else 0.0
        open_risk = sum(row.total_risk_value for row in open_rows)
        invested = sum(abs(row.position_value) for row in open_rows)

        capital_value = trading_capital(capital)
        open_heat = open_risk / capital_value * 100 if capital_value else 0.0
        percent_invested = invested / capital_value * 100 if capital_value else 0.0

        snapshot = PortfolioSnapshot(
            total_positions=len(rows),
            open_positions=len(open_rows),
            closed_positions=len(closed_rows),
            win_rate=round_half_away(win_rate),
            realised_pnl=sum(row.pnl for row in closed_rows),
            unrealised_pnl=sum(row.pnl for row in open_rows),
            open_heat=round_half_away(open_heat, 3),
            percent_invested=round_half_away(percent_invested),
            total_portfolio_value=capital_value or 0.0,
            total_risk=open_risk,
        )
        logger.debug(
            "Portfolio snapshot",
            extra={"open_positions": snapshot.open_positions, "open_heat": snapshot.open_heat},
        )
        return snapshot


def summarize_portfolio(risk: PortfolioRisk, capital: float | None) -> PortfolioSnapshot:
    return PortfolioMetricsCalculator().summarize(risk, capital)
