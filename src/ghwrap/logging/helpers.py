from __future__ import annotations

"""Small logging helpers to standardize ghwrap logger names, configuration and tracing.

This module provides:
    - JsonLogFormatter: JSON log formatter with stable fields and optional context.
    - setup_base_logger: Root logger configuration for the 'ghwrap' logger.
    - get_logger: Namespaced logger factory ('ghwrap.*').
    - trace_io utilities gated by GHWRAP_TRACE_IO.

The base logger writes to stderr only. stdout belongs to git and the pager.
"""

import logging
import os
from typing import Optional, TextIO


class JsonLogFormatter(logging.Formatter):
    """Emit logs as compact JSON with a fixed schema.

    Fields:
        - ts: ISO-8601 timestamp in UTC with millisecond precision.
        - level: Log level name.
        - module: Logger name (e.g., 'ghwrap.orchestrator').
        - msg: Formatted message string.
        - version: ghwrap.__version__ (fixed per formatter instance).
        - ctx: Optional dictionary attached to the record as 'context'.
    """

    def __init__(self) -> None:
        super().__init__()
        self._version = self._resolve_version()

    @staticmethod
    def _resolve_version() -> str:
        try:
            from ghwrap import __version__ as _v  # type: ignore
            return str(_v)
        except ImportError:
            return os.getenv('GHWRAP_VERSION', 'unknown')

    def format(self, record: logging.LogRecord) -> str:
        from datetime import datetime, timezone
        import json

        ts = datetime.fromtimestamp(record.created, tz=timezone.utc)
        ts_str = ts.isoformat(timespec='milliseconds').replace('+00:00', 'Z')

        payload = {
            'ts': ts_str,
            'level': record.levelname,
            'module': record.name,
            'msg': record.getMessage(),
            'version': self._version,
        }

        ctx = getattr(record, 'context', None)
        if isinstance(ctx, dict) and ctx:
            payload['ctx'] = ctx

        return json.dumps(payload, ensure_ascii=False)


def setup_base_logger(
    *, json_logs: bool = False, level: int = logging.WARNING, stream: Optional[TextIO] = None
) -> logging.Logger:
    """Configure the base 'ghwrap' logger once and return it.

    Args:
        json_logs: If True, configure a JSON formatter, else plain text.
        level: Logging level for the base logger.
        stream: Optional stream (stderr by default).

    Returns:
        The configured base logger.
    """
    base = logging.getLogger('ghwrap')
    if base.handlers:
        base.setLevel(level)
        return base

    import sys as _sys

    base.setLevel(level)
    base.propagate = False

    handler = logging.StreamHandler(stream or _sys.stderr)
    if json_logs:
        handler.setFormatter(JsonLogFormatter())
    else:
        handler.setFormatter(logging.Formatter('%(message)s'))
    base.addHandler(handler)

    return base


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a namespaced logger under 'ghwrap'."""
    if not name or name == 'ghwrap':
        return logging.getLogger('ghwrap')
    if name.startswith('ghwrap'):
        return logging.getLogger(name)
    return logging.getLogger(f'ghwrap.{name}')


def parse_level(value: str | None, default: int = logging.WARNING) -> int:
    """Map a level name such as 'debug' to its numeric value."""
    if not value:
        return default
    level = logging.getLevelName(value.strip().upper())
    return level if isinstance(level, int) else default


def is_trace_io_enabled() -> bool:
    """Check if git subprocess tracing is enabled via env flag."""
    return os.getenv('GHWRAP_TRACE_IO') == '1'


def trace_io(logger: logging.Logger, message: str, **ctx) -> None:
    """Emit debug-verbosity IO trace messages only when enabled.

    Args:
        logger: Target logger.
        message: Human-readable description.
        **ctx: Optional structured context appended in debug format.
    """
    if not is_trace_io_enabled():
        return
    if ctx:
        logger.debug('%s | ctx=%r', message, ctx, extra={'context': ctx})
    else:
        logger.debug('%s', message)
