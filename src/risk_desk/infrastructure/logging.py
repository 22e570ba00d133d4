from __future__ import annotations

import logging
import os
from typing import Final

RESET: Final[str] = "\033[0m"
COLOR_MAP: Final[dict[int, str]] = {
    logging.DEBUG: "\033[36m",
    logging.INFO: "\033[32m",
    logging.WARNING: "\033[33m",
    logging.ERROR: "\033[31m",
    logging.CRITICAL: "\033[41m",
}

# Attributes every LogRecord carries; anything else arrived through ``extra``.
_RESERVED_ATTRS: Final[frozenset[str]] = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None)).keys() | {"message", "asctime"}
)


class ContextFormatter(logging.Formatter):
    """Appends ``extra`` context as ``key=value`` pairs, optionally coloured by level."""

    def __init__(self, fmt: str, datefmt: str | None = None, use_color: bool = True) -> None:
        super().__init__(fmt=fmt, datefmt=datefmt)
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        context = _extract_context(record)
        if context:
            message = f"{message} | {context}"
        if not self.use_color:
            return message
        color = COLOR_MAP.get(record.levelno)
        if not color:
            return message
        return f"{color}{message}{RESET}"


def _extract_context(record: logging.LogRecord) -> str:
    pairs = [
        f"{key}={value}"
        for key, value in record.__dict__.items()
        if key not in _RESERVED_ATTRS and not key.startswith("_")
    ]
    return " ".join(pairs)


def _resolve_log_level() -> int:
    level = os.getenv("LOG_LEVEL", "INFO").upper()
    return getattr(logging, level, logging.INFO)


def _use_color() -> bool:
    if os.getenv("NO_COLOR"):
        return False
    term = os.getenv("TERM", "")
    return term != "dumb"


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    logger.setLevel(_resolve_log_level())
    handler = logging.StreamHandler()
    formatter = ContextFormatter(
        fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        use_color=_use_color(),
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.propagate = False
    return logger
