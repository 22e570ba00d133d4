from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Sequence

from risk_desk.application.use_cases.field_lookup import first_value, lookup_number, lookup_text
from risk_desk.application.use_cases.formatting import format_quantity
from risk_desk.application.use_cases.instrument_key import instrument_key_for
from risk_desk.config import (
    CONDITION_EXCHANGE_FIELDS,
    CONDITION_SYMBOL_FIELDS,
    CONDITION_TOKEN_FIELDS,
    DEFAULT_ORDER_STATUS,
    DEFAULT_TRANSACTION_TYPE,
    ORDER_GROUP_CONDITION_FIELDS,
    ORDER_GROUP_ID_FIELDS,
    ORDER_GROUP_ORDERS_FIELDS,
    ORDER_GROUP_STATUS_FIELDS,
    ORDER_PRICE_FIELDS,
    ORDER_QUANTITY_FIELDS,
    ORDER_TRANSACTION_TYPE_FIELDS,
)
from risk_desk.domain.value_objects.risk import FlattenedOrder, SkippedRecord
from risk_desk.domain.value_objects.side import OrderSide
from risk_desk.infrastructure.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class FlattenResult:
    orders: list[FlattenedOrder] = field(default_factory=list)
    skipped: list[SkippedRecord] = field(default_factory=list)


def as_record_list(records: Any, label: str) -> list[Any]:
    """Upstream snapshots should be lists; anything else reads as empty."""
    if records is None:
        return []
    if isinstance(records, (list, tuple)):
        return list(records)
    logger.warning("Expected a list of records", extra={"records": label, "type": type(records).__name__})
    return []


def flatten_conditional_orders(groups: Sequence[Any] | None) -> FlattenResult:
    """
    One record per child order of every conditional-order group.

    Each record carries the group's join key, symbol, exchange, id and
    lifecycle status. Broken groups and broken child orders are left out and
    reported in ``skipped``; they never abort the rest of the batch.
    """
    orders: list[FlattenedOrder] = []
    skipped: list[SkippedRecord] = []

    for index, group in enumerate(as_record_list(groups, "order_groups")):
        source = f"order_group[{index}]"
        if not group:
            _skip(skipped, source, "order group is empty")
            continue

        condition = first_value(group, ORDER_GROUP_CONDITION_FIELDS)
        if not condition:
            _skip(skipped, source, "order group has no condition block")
            continue

        key = instrument_key_for(
            condition,
            token_fields=CONDITION_TOKEN_FIELDS,
            symbol_fields=CONDITION_SYMBOL_FIELDS,
            exchange_fields=CONDITION_EXCHANGE_FIELDS,
        )
        tradingsymbol = lookup_text(condition, CONDITION_SYMBOL_FIELDS)
        exchange = lookup_text(condition, CONDITION_EXCHANGE_FIELDS)
        group_id = lookup_text(group, ORDER_GROUP_ID_FIELDS, default="0")
        status = lookup_text(group, ORDER_GROUP_STATUS_FIELDS, default=DEFAULT_ORDER_STATUS)

        legs = first_value(group, ORDER_GROUP_ORDERS_FIELDS)
        if not isinstance(legs, (list, tuple)):
            reason = "order group has no child orders" if legs is None else "child orders are not a list"
            _skip(skipped, source, reason)
            continue

        for leg_index, leg in enumerate(legs):
            leg_source = f"{source}.orders[{leg_index}]"
            if not leg:
                _skip(skipped, leg_source, "child order is empty")
                continue

            side_text = lookup_text(leg, ORDER_TRANSACTION_TYPE_FIELDS, default=DEFAULT_TRANSACTION_TYPE).upper()
            try:
                side = OrderSide(side_text)
            except ValueError:
                _skip(skipped, leg_source, f"unknown transaction type {side_text!r}")
                continue

            problems: list[str] = []
            quantity = lookup_number(leg, ORDER_QUANTITY_FIELDS, problems=problems)
            price = lookup_number(leg, ORDER_PRICE_FIELDS, problems=problems)
            if quantity < 0:
                problems.append(f"negative quantity {format_quantity(quantity)}")
            if price < 0:
                problems.append(f"negative price {format_quantity(price)}")
            if problems:
                _skip(skipped, leg_source, "; ".join(problems))
                continue

            orders.append(
                FlattenedOrder(
                    key=key,
                    tradingsymbol=tradingsymbol,
                    exchange=exchange,
                    group_id=group_id,
                    status=status,
                    transaction_type=side,
                    quantity=quantity,
                    price=price,
                )
            )

    logger.debug(
        "Conditional orders flattened",
        extra={"orders": len(orders), "skipped": len(skipped)},
    )
    return FlattenResult(orders=orders, skipped=skipped)


def _skip(skipped: list[SkippedRecord], source: str, reason: str) -> None:
    logger.debug("Skipped conditional order record", extra={"source": source, "reason": reason})
    skipped.append(SkippedRecord(source=source, reason=reason))
