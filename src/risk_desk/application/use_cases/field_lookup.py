from __future__ import annotations

from enum import Enum
import math
from typing import Any, Mapping, Sequence

from risk_desk.infrastructure.logging import get_logger

logger = get_logger(__name__)


def read_field(record: Any, name: str) -> Any:
    if record is None:
        return None
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


def first_value(record: Any, aliases: Sequence[str]) -> Any:
    """Value of the first alias holding something truthy, else ``None``."""
    for alias in aliases:
        value = read_field(record, alias)
        if value:
            return value
    return None


def lookup_text(record: Any, aliases: Sequence[str], default: str = "") -> str:
    value = first_value(record, aliases)
    if value is None:
        return default
    if isinstance(value, Enum):
        value = value.value
    return str(value).strip()


def lookup_number(
    record: Any,
    aliases: Sequence[str],
    default: float = 0.0,
    problems: list[str] | None = None,
) -> float:
    """
    First usable number across ``aliases``.

    Missing, zero and non-finite values fall through to the next alias.
    Values that cannot be read as numbers also fall through and are noted in
    ``problems`` when a collector is given.
    """
    for alias in aliases:
        raw = read_field(record, alias)
        if not raw:
            continue
        number = _to_number(raw)
        if number is None:
            logger.debug("Unreadable numeric field", extra={"field": alias, "value": repr(raw)})
            if problems is not None:
                problems.append(f"{alias} is not numeric: {raw!r}")
            continue
        if number == 0 or not math.isfinite(number):
            continue
        return number
    return default


def _to_number(raw: Any) -> float | None:
    if isinstance(raw, bool):
        return None
    try:
        return float(raw)
    except (TypeError, ValueError):
        return None
