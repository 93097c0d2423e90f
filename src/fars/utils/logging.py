"""Logging setup for the ``fars`` package: plain or single-line JSON output."""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional, TextIO

PACKAGE_LOGGER = "fars"

PLAIN_FORMAT = "%(levelname)s %(name)s: %(message)s"

# Attributes every LogRecord carries; anything else arrived via ``extra=``.
_RECORD_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None))
) | {"message", "asctime", "taskName"}

# Marks the handler installed by configure_logging so a second call
# replaces it instead of stacking another one.
_HANDLER_FLAG = "_fars_handler"


class JsonFormatter(logging.Formatter):
    """Emit log records as single-line JSON objects.

    Fields passed with ``extra=`` (``year``, ``state_code``, ``path`` ...)
    are merged into the payload next to ``ts``/``level``/``logger``/``msg``.
    """

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc)
            .isoformat()
            .replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }

        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)

        for key, value in vars(record).items():
            if key not in _RECORD_ATTRS and not key.startswith("_"):
                payload[key] = value

        # numpy / Path values fall back to str()
        return json.dumps(payload, default=str)


def configure_logging(
    level: str = "INFO",
    json_format: bool = False,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """Attach one stream handler to the ``fars`` package logger.

    Calling again swaps the previous handler out, so the CLI and tests can
    reconfigure freely.

    Args:
        level: Logging level name (``'DEBUG'``, ``'INFO'`` ...).
        json_format: Use ``JsonFormatter`` instead of the plain format.
        stream: Output stream, default ``sys.stderr``.

    Returns:
        The configured ``fars`` logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        if getattr(handler, _HANDLER_FLAG, False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(JsonFormatter() if json_format else logging.Formatter(PLAIN_FORMAT))
    setattr(handler, _HANDLER_FLAG, True)

    logger.addHandler(handler)
    logger.setLevel(level.upper())
    return logger
