"""Pluggable failure sink for the must family.

A single process-wide binding holds the active Logger. It is a plain module
global: ``set_logger`` is last-writer-wins and is not synchronized, so install
the logger once during startup rather than from concurrent threads.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from klaw_assert._logging import get_logger
from klaw_assert.message import format_template

__all__ = ['Logger', 'StructlogLogger', 'current_logger', 'set_logger']


@runtime_checkable
class Logger(Protocol):
    """Capability the must family reports failures through.

    ``panic``/``panicf`` are used for failures that are about to abort;
    ``error``/``errorf`` complete the interface for host loggers that share
    it with other code.
    """

    def panic(self, msg: str, **context: Any) -> None: ...

    def panicf(self, template: str, *args: Any) -> None: ...

    def error(self, msg: str, **context: Any) -> None: ...

    def errorf(self, template: str, *args: Any) -> None: ...


_logger: Logger | None = None


def set_logger(logger: Logger | None) -> None:
    """Install ``logger`` as the global failure sink, or clear it with None."""
    global _logger  # noqa: PLW0603
    _logger = logger


def current_logger() -> Logger | None:
    """Return the installed failure sink, if any."""
    return _logger


class StructlogLogger:
    """Logger backed by structlog.

    ``panic*`` log at critical level and ``error*`` at error level. None of
    the methods raise; aborting is left to the caller.

    Args:
        name: structlog logger name. Defaults to ``'klaw_assert'``.
        **bound: Context bound to every entry.
    """

    def __init__(self, name: str | None = 'klaw_assert', **bound: Any) -> None:
        self._log = get_logger(name, **bound)

    def panic(self, msg: str, **context: Any) -> None:
        self._log.critical(msg, **context)

    def panicf(self, template: str, *args: Any) -> None:
        self._log.critical(format_template(template, args))

    def error(self, msg: str, **context: Any) -> None:
        self._log.error(msg, **context)

    def errorf(self, template: str, *args: Any) -> None:
        self._log.error(format_template(template, args))
