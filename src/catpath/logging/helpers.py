from __future__ import annotations

"""Small logging helpers to standardize catpath logger names, configuration and tracing.

This module provides:
    - JsonLogFormatter: JSON log formatter with stable fields and optional context.
    - setup_base_logger: Root logger configuration for the 'catpath' logger.
    - get_logger: Namespaced logger factory ('catpath.*').
    - trace_fs utilities gated by CATPATH_TRACE_FS.

Plain-text records are prefixed with the program name, so that fatal
messages read ``catpath: <message>`` on standard error.
"""

import logging
import os
from typing import TYPE_CHECKING, Optional, TextIO

from catpath.constants import PROG_NAME, TRACE_FS_ENV

if TYPE_CHECKING:
    from catpath.core.interfaces.logging import LoggerLikeProtocol


class JsonLogFormatter(logging.Formatter):
    """Emit logs as compact JSON with a fixed schema.

    Fields:
        - ts: ISO-8601 timestamp in UTC with millisecond precision.
        - level: Log level name.
        - module: Logger name (e.g., 'catpath.builder').
        - msg: Formatted message string.
        - version: catpath.__version__ (fixed per formatter instance).
        - prog: Program name, the same prefix plain-text records carry.
        - ctx: Optional dictionary attached to the record as 'context'.
    """

    def __init__(self, prog: str = PROG_NAME) -> None:
        super().__init__()
        self._version = self._resolve_version()
        self._prog = prog

    @staticmethod
    def _resolve_version() -> str:
        try:
            # Lazy import; catpath/__init__ imports the CLI, which imports us.
            from catpath import __version__ as _v  # type: ignore
            return str(_v)
        except ImportError:
            return os.getenv("CATPATH_VERSION", "unknown")

    def format(self, record: logging.LogRecord) -> str:
        from datetime import datetime, timezone
        import json

        ts = datetime.fromtimestamp(record.created, tz=timezone.utc)
        ts_str = ts.isoformat(timespec="milliseconds").replace("+00:00", "Z")

        payload = {
            "ts": ts_str,
            "level": record.levelname,
            "module": record.name,
            "msg": record.getMessage(),
            "version": self._version,
            "prog": self._prog,
        }

        ctx = getattr(record, "context", None)
        if isinstance(ctx, dict) and ctx:
            payload["ctx"] = ctx

        return json.dumps(payload, ensure_ascii=False)


def _plain_formatter(prog: str) -> logging.Formatter:
    # '%' in a program name would be taken as a format directive.
    return logging.Formatter(prog.replace("%", "%%") + ": %(message)s")


def _swap_stream(handler: logging.StreamHandler, stream: TextIO) -> None:
    try:
        handler.setStream(stream)
    except ValueError:
        # setStream() flushes the old stream first; it may already be closed.
        handler.stream = stream


def setup_base_logger(
    *,
    json_logs: bool = False,
    level: int = logging.WARNING,
    stream: Optional[TextIO] = None,
    prog: str = PROG_NAME,
) -> logging.Logger:
    """Configure the base 'catpath' logger and return it.

    Calling it again reconfigures the existing handlers (formatter, level and,
    for stream handlers, the target stream) instead of stacking a second one.

    Args:
        json_logs: If True, configure a JSON formatter, else plain text.
        level: Logging level for the base logger.
        stream: Optional stream; the current ``sys.stderr`` when omitted.
        prog: Program name carried by every record.

    Returns:
        The configured base logger.
    """
    import sys as _sys

    base = logging.getLogger("catpath")
    base.setLevel(level)
    base.propagate = False

    target = stream or _sys.stderr
    formatter = JsonLogFormatter(prog) if json_logs else _plain_formatter(prog)
    if base.handlers:
        for handler in base.handlers:
            handler.setFormatter(formatter)
            if isinstance(handler, logging.StreamHandler) and handler.stream is not target:
                _swap_stream(handler, target)
        return base

    handler = logging.StreamHandler(target)
    handler.setFormatter(formatter)
    base.addHandler(handler)

    return base


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a namespaced logger under 'catpath'."""
    if not name or name == "catpath":
        return logging.getLogger("catpath")
    if name.startswith("catpath"):
        return logging.getLogger(name)
    return logging.getLogger(f"catpath.{name}")


def is_trace_fs_enabled() -> bool:
    """Check if filesystem probe tracing is enabled via env flag."""
    return os.getenv(TRACE_FS_ENV) == "1"


def trace_fs(logger: LoggerLikeProtocol, message: str, **ctx) -> None:
    """Emit debug-verbosity filesystem trace messages only when enabled.

    Args:
        logger: Target logger.
        message: Human-readable description.
        **ctx: Optional structured context, attached to the record as 'context'.
    """
    if not is_trace_fs_enabled():
        return
    if ctx:
        logger.debug("%s | ctx=%r", message, ctx, extra={"context": ctx})
    else:
        logger.debug("%s", message)
