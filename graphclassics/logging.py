"""Logging utilities for graphclassics.

Every algorithm module asks for a logger through :func:`get_logger` so that
all output lives under the ``graphclassics`` namespace and shares a single
handler configuration. Nothing is printed unless the level is lowered below
WARNING, since the algorithms only emit DEBUG records (precondition failures,
negative cycles, component counts).
"""

from __future__ import annotations

import logging
import sys
from typing import IO, Optional

_ROOT_NAME = "graphclassics"
_DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"

_default_level: int = logging.WARNING
_default_format: str = _DEFAULT_FORMAT
_default_stream: Optional[IO[str]] = None

# Cached loggers, keyed by their full dotted name
_loggers: dict[str, logging.Logger] = {}


def _coerce_level(level: int | str) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.WARNING)
    return level


def _make_handler(level: int) -> logging.Handler:
    # sys.stderr is looked up lazily so pytest's capture sees the records
    handler = logging.StreamHandler(_default_stream or sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_default_format))
    return handler


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get or create a logger under the ``graphclassics`` namespace.

    Args:
        name: Usually ``__name__`` of the calling module. Names that do not
            already start with ``graphclassics.`` are prefixed. ``None``
            returns the package-level logger.

    Returns:
        A cached :class:`logging.Logger` with one stream handler attached.

    Example:
        >>> from graphclassics.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.debug("relaxing %d edges", 12)
    """
    if name is None or name == _ROOT_NAME:
        full_name = _ROOT_NAME
    elif name.startswith(_ROOT_NAME + "."):
        full_name = name
    else:
        full_name = f"{_ROOT_NAME}.{name}"

    cached = _loggers.get(full_name)
    if cached is not None:
        return cached

    logger = logging.getLogger(full_name)
    if not logger.handlers:
        logger.setLevel(_default_level)
        logger.addHandler(_make_handler(_default_level))
        logger.propagate = False

    _loggers[full_name] = logger
    return logger


def set_log_level(level: int | str) -> None:
    """Set the level of every graphclassics logger, current and future.

    Args:
        level: A ``logging`` level constant or its name (``"DEBUG"``, ...).
            Unknown names fall back to WARNING.
    """
    global _default_level
    level = _coerce_level(level)

    for logger in _loggers.values():
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)

    _default_level = level


def configure_logging(
    level: int | str = logging.WARNING,
    format_string: Optional[str] = None,
    stream: Optional[IO[str]] = None,
) -> None:
    """Reconfigure level, format and destination of all graphclassics loggers.

    Existing handlers are replaced, and loggers created afterwards pick up the
    same settings.

    Args:
        level: Logging level (default WARNING).
        format_string: Record format; ``None`` restores the default
            ``[LEVEL] name: message`` layout.
        stream: Destination stream; ``None`` means ``sys.stderr``.

    Example:
        >>> import logging
        >>> from graphclassics.logging import configure_logging
        >>> configure_logging(level=logging.DEBUG)
    """
    global _default_level, _default_format, _default_stream
    _default_level = _coerce_level(level)
    _default_format = format_string or _DEFAULT_FORMAT
    _default_stream = stream

    for logger in _loggers.values():
        logger.setLevel(_default_level)
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
        logger.addHandler(_make_handler(_default_level))


__all__ = ["get_logger", "set_log_level", "configure_logging"]
