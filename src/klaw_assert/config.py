"""Configuration: AssertConfig, init() and get_config()."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from klaw_assert._logging import configure_logging
from klaw_assert.logger import Logger, StructlogLogger, set_logger

__all__ = [
    'LOG_FORMAT_ENV',
    'LOG_LEVEL_ENV',
    'AssertConfig',
    'get_config',
    'init',
]

LOG_LEVEL_ENV = 'KLAW_ASSERT_LOG_LEVEL'
LOG_FORMAT_ENV = 'KLAW_ASSERT_LOG_FORMAT'


@dataclass(frozen=True)
class AssertConfig:
    """Configuration for klaw-assert.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = logging untouched.
        json_output: Render logs as JSON (True) or console text (False).
        logger: Failure sink installed as the global binding, if any.
    """

    log_level: str | None = None
    json_output: bool = True
    logger: Logger | None = None


_config: AssertConfig | None = None


def _detect_log_level() -> str | None:
    level = os.environ.get(LOG_LEVEL_ENV, '').strip()
    return level.upper() or None


def _detect_json_output() -> bool:
    """Read the log format from the environment.

    Accepts "json" or "console"; anything else falls back to JSON.
    """
    fmt = os.environ.get(LOG_FORMAT_ENV, '').strip().lower()
    if fmt in ('', 'json'):
        return True
    if fmt == 'console':
        return False
    logging.warning("Unknown %s value '%s', defaulting to json", LOG_FORMAT_ENV, fmt)
    return True


def init(
    log_level: str | None = None,
    *,
    json_output: bool | None = None,
    logger: Logger | None = None,
) -> AssertConfig:
    """Configure logging and the global failure sink.

    Args:
        log_level: Logging level. Read from KLAW_ASSERT_LOG_LEVEL if None.
        json_output: Log format. Read from KLAW_ASSERT_LOG_FORMAT if None.
        logger: Failure sink to install. When omitted and a log level is
            resolved, a StructlogLogger is installed.

    Returns:
        The AssertConfig that was set.

    Example:
        ```python
        from klaw_assert.config import init

        init('INFO')                       # JSON logs, structlog failure sink
        init('DEBUG', json_output=False)   # console logs
        init(logger=my_logger)             # custom sink, logging untouched
        ```
    """
    global _config  # noqa: PLW0603

    resolved_level = log_level if log_level is not None else _detect_log_level()
    resolved_json = json_output if json_output is not None else _detect_json_output()

    if resolved_level is not None:
        configure_logging(resolved_level, json_output=resolved_json)

    resolved_logger = logger
    if resolved_logger is None and resolved_level is not None:
        resolved_logger = StructlogLogger()
    if resolved_logger is not None:
        set_logger(resolved_logger)

    _config = AssertConfig(
        log_level=resolved_level,
        json_output=resolved_json,
        logger=resolved_logger,
    )
    return _config


def get_config() -> AssertConfig:
    """Get the current configuration.

    Raises:
        RuntimeError: If init() has not been called.
    """
    if _config is None:
        msg = 'klaw-assert not initialized. Call config.init() first.'
        raise RuntimeError(msg)
    return _config
