"""Centralized logging setup and JSON formatter for structured logging."""

import json
import logging
import sys
from datetime import datetime
from typing import Any, Dict, Optional, Union

# Attributes present on every LogRecord; anything else came from `extra=`.
_RESERVED_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None))
) | {"message", "asctime"}

_TEXT_FORMAT = "%(levelname)s %(name)s: %(message)s"


class JsonFormatter(logging.Formatter):
    """Emit log records as single-line JSON objects.

    Merges any `extra=` kwargs (e.g. the failing ``year`` of a batch load)
    directly into the payload.
    """

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }

        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS:
                payload[key] = value

        # non-serializable values fall back to str()
        return json.dumps(payload, default=str)


def configure_logging(
    level: Union[int, str] = logging.INFO,
    json_format: bool = False,
    stream: Optional[Any] = None,
) -> logging.Handler:
    """Attach a single stream handler to the ``fars`` package logger.

    Library modules only create loggers; handlers are installed here, by
    the command-line entry point.  Calling this again replaces the handler
    installed by a previous call.

    Args:
        level: Logging level name or number for the package logger.
        json_format: Use :class:`JsonFormatter` instead of plain text.
        stream: Output stream, defaults to ``sys.stderr``.

    Returns:
        The installed handler.
    """
    package_logger = logging.getLogger("fars")
    for handler in list(package_logger.handlers):
        if getattr(handler, "_fars_handler", False):
            package_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(
        JsonFormatter() if json_format else logging.Formatter(_TEXT_FORMAT)
    )
    handler._fars_handler = True  # type: ignore[attr-defined]

    package_logger.addHandler(handler)
    package_logger.setLevel(level.upper() if isinstance(level, str) else level)
    return handler
