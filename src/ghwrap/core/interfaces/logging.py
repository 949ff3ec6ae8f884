from __future__ import annotations
from typing import Protocol, runtime_checkable


@runtime_checkable
class LoggerLikeProtocol(Protocol):
    """What rules, the orchestrator and the pager call on a logger.

    `logging.Logger` satisfies it; tests may pass any recorder instead.
    """

    def debug(self, msg: str, *args, **kwargs) -> None: ...

    def warning(self, msg: str, *args, **kwargs) -> None: ...

    def error(self, msg: str, *args, **kwargs) -> None: ...


@runtime_checkable
class LoggerFactoryProtocol(Protocol):
    """Hands out 'ghwrap.*' loggers after configuring the base logger once."""

    def get_logger(self, name: str) -> LoggerLikeProtocol:
        ...
