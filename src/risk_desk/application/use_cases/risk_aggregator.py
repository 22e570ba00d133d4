from __future__ import annotations

from dataclasses import dataclass, field
import math
from typing import Any, Sequence

from risk_desk.application.use_cases.field_lookup import lookup_number, lookup_text
from risk_desk.application.use_cases.formatting import format_quantity, percent_of
from risk_desk.application.use_cases.instrument_key import instrument_key_for
from risk_desk.application.use_cases.order_flattener import as_record_list, flatten_conditional_orders
from risk_desk.config import (
    NOT_AVAILABLE,
    POSITION_AVERAGE_PRICE_FIELDS,
    POSITION_LAST_PRICE_FIELDS,
    POSITION_MULTIPLIER_FIELDS,
    POSITION_PNL_FIELDS,
    POSITION_QUANTITY_FIELDS,
    POSITION_SYMBOL_FIELDS,
    UNKNOWN_SYMBOL,
)
from risk_desk.domain.value_objects.risk import (
    FlattenedOrder,
    PositionWithRisk,
    RiskOptions,
    SkippedRecord,
)
from risk_desk.domain.value_objects.side import PositionSide
from risk_desk.infrastructure.logging import get_logger

logger = get_logger(__name__)

FULL_RISK_PERCENT = "100.00%"


@dataclass(frozen=True)
class PortfolioRisk:
    rows: list[PositionWithRisk]
    total_risk: float
    total_risk_percent: str
    skipped: list[SkippedRecord] = field(default_factory=list)


def trading_capital(capital: Any) -> float | None:
    """Capital usable as a denominator, or ``None``."""
    if isinstance(capital, bool) or not isinstance(capital, (int, float)):
        return None
    if not math.isfinite(capital) or capital <= 0:
        return None
    return float(capital)


def covering_fragment(quantity: float, price: float) -> str:
    return f"{format_quantity(quantity)}@{format_quantity(price)}"


class ProtectiveOrderRiskAggregator:
    """
    Capital at risk per position once pending exit orders are accounted for.

    Covering quantity is allocated to the best-priced closing orders first.
    Each covered slice risks the gap between average cost and its exit price
    (never less than zero) and any uncovered quantity risks its full notional.
    A position that cannot be assessed becomes a placeholder row plus a
    skipped record.
    """

    def __init__(self, options: RiskOptions | None = None) -> None:
        self._options = options or RiskOptions()

    def compute(
        self,
        positions: Sequence[Any] | None,
        order_groups: Sequence[Any] | None,
        capital: float | None,
    ) -> PortfolioRisk:
        flattened = flatten_conditional_orders(order_groups)
        skipped = list(flattened.skipped)
        capital_value = trading_capital(capital)
        if capital_value is None:
            logger.warning("Invalid trading capital", extra={"capital": capital})

        rows: list[PositionWithRisk] = []
        total_risk = 0.0
        for index, position in enumerate(as_record_list(positions, "positions")):
            source = f"position[{index}]"
            if not position:
                skipped.append(SkippedRecord(source=source, reason="position is empty"))
                rows.append(PositionWithRisk.placeholder("position is empty"))
                continue
            try:
                row = self.assess_position(position, flattened.orders, capital_value)
            except Exception as exc:
                logger.error(
                    "Risk calculation failed for position",
                    extra={"source": source, "error": str(exc)},
                )
                skipped.append(SkippedRecord(source=source, reason=f"risk calculation failed: {exc}"))
                row = PositionWithRisk.placeholder(str(exc))
            rows.append(row)
            total_risk += row.total_risk_value

        logger.debug(
            "Portfolio risk computed",
            extra={"positions": len(rows), "total_risk": total_risk, "skipped": len(skipped)},
        )
        return PortfolioRisk(
            rows=rows,
            total_risk=total_risk,
            total_risk_percent=percent_of(total_risk, capital_value),
            skipped=skipped,
        )

    def assess_position(
        self,
        position: Any,
        orders: Sequence[FlattenedOrder],
        capital: float | None,
    ) -> PositionWithRisk:
        quantity = lookup_number(position, POSITION_QUANTITY_FIELDS)
        average_price = lookup_number(position, POSITION_AVERAGE_PRICE_FIELDS)
        multiplier = lookup_number(position, POSITION_MULTIPLIER_FIELDS, default=1.0)
        symbol = lookup_text(position, POSITION_SYMBOL_FIELDS, default=UNKNOWN_SYMBOL)

        is_long = quantity > 0
        quantity_abs = abs(quantity)
        closing_side = (PositionSide.LONG if is_long else PositionSide.SHORT).closing_side
        matched = self.match_orders(instrument_key_for(position), symbol, orders)
        covers = [order for order in matched if order.transaction_type is closing_side]

        position_value = average_price * quantity_abs * multiplier
        base = dict(
            symbol=symbol,
            quantity=quantity,
            average_price=average_price,
            last_price=lookup_number(position, POSITION_LAST_PRICE_FIELDS),
            pnl=lookup_number(position, POSITION_PNL_FIELDS),
            multiplier=multiplier,
            position_value=position_value,
            position_size_percent=percent_of(position_value, capital),
        )

        if quantity_abs == 0 or average_price == 0:
            logger.warning(
                "Position has no quantity or average price",
                extra={"symbol": symbol, "quantity": quantity_abs, "average_price": average_price},
            )
            return PositionWithRisk(**base)

        if not covers:
            return PositionWithRisk(
                **base,
                unprotected_quantity=quantity_abs,
                total_risk_value=position_value,
                risk_percent_of_position=FULL_RISK_PERCENT,
                portfolio_risk_percent=percent_of(position_value, capital),
            )

        if self._options.full_cover_treated_as_zero and any(o.quantity >= quantity_abs for o in covers):
            return PositionWithRisk(
                **base,
                covering_orders=", ".join(covering_fragment(o.quantity, o.price) for o in covers),
                unprotected_quantity=0.0,
                total_risk_value=0.0,
                risk_percent_of_position=percent_of(0.0, position_value),
                portfolio_risk_percent=percent_of(0.0, capital),
            )

        # Best protection first: highest exit for longs, lowest for shorts.
        ranked = sorted(covers, key=lambda order: order.price, reverse=is_long)
        remaining = quantity_abs
        total_risk = 0.0
        fragments: list[str] = []
        for order in ranked:
            if remaining <= 0:
                break
            take = min(order.quantity, remaining)
            remaining -= take
            fragments.append(covering_fragment(take, order.price))

            loss_per_unit = average_price - order.price if is_long else order.price - average_price
            total_risk += max(0.0, loss_per_unit) * take * multiplier

        if remaining > 0:
            total_risk += average_price * remaining * multiplier

        return PositionWithRisk(
            **base,
            covering_orders=", ".join(fragments) if fragments else NOT_AVAILABLE,
            unprotected_quantity=remaining,
            total_risk_value=total_risk,
            risk_percent_of_position=percent_of(total_risk, position_value),
            portfolio_risk_percent=percent_of(total_risk, capital),
        )

    def match_orders(
        self,
        key: str,
        symbol: str,
        orders: Sequence[FlattenedOrder],
    ) -> list[FlattenedOrder]:
        """Active orders on the same instrument; by symbol only when the key finds none."""
        active = [order for order in orders if order.is_active]
        matched = [order for order in active if order.key == key]
        if matched:
            return matched

        wanted = symbol.upper()
        fallback = [order for order in active if order.tradingsymbol.upper() == wanted]
        if fallback:
            logger.debug("Orders matched by symbol", extra={"symbol": symbol, "orders": len(fallback)})
        return fallback


def compute_portfolio_risk(
    positions: Sequence[Any] | None,
    order_groups: Sequence[Any] | None,
    capital: float | None,
    options: RiskOptions | None = None,
) -> PortfolioRisk:
    return ProtectiveOrderRiskAggregator(options).compute(positions, order_groups, capital)
