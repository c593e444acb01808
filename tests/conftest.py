"""Pytest configuration and shared fixtures for klaw-assert tests."""

from __future__ import annotations

import logging
from typing import Any

import pytest
import structlog

from klaw_assert import config, set_logger


class RecordingLogger:
    """Logger that records every call as ``(method, args, kwargs)``."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, tuple[Any, ...], dict[str, Any]]] = []

    def panic(self, msg: str, **context: Any) -> None:
        self.calls.append(('panic', (msg,), context))

    def panicf(self, template: str, *args: Any) -> None:
        self.calls.append(('panicf', (template, *args), {}))

    def error(self, msg: str, **context: Any) -> None:
        self.calls.append(('error', (msg,), context))

    def errorf(self, template: str, *args: Any) -> None:
        self.calls.append(('errorf', (template, *args), {}))

    @property
    def methods(self) -> list[str]:
        return [name for name, _, _ in self.calls]


@pytest.fixture(autouse=True)
def _reset_state():
    """Clear the global logger binding, config and structlog setup."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    set_logger(None)
    config._config = None
    yield
    set_logger(None)
    config._config = None
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def recorder() -> RecordingLogger:
    """A RecordingLogger installed as the global failure sink."""
    logger = RecordingLogger()
    set_logger(logger)
    return logger
