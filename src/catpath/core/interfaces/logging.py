from __future__ import annotations
from typing import Protocol, runtime_checkable


@runtime_checkable
class LoggerLikeProtocol(Protocol):
    """Logging surface accepted by the builder and the directory checker.

    Only ``debug`` and ``error`` are called; ``extra=`` is forwarded as a
    keyword argument by the filesystem trace.
    """

    def debug(self, msg: str, *args, **kwargs) -> None: ...

    def error(self, msg: str, *args, **kwargs) -> None: ...


@runtime_checkable
class LoggerFactoryProtocol(Protocol):
    """Configures the 'catpath' logger tree and hands out scoped loggers."""

    def get_logger(self, name: str) -> LoggerLikeProtocol: ...
