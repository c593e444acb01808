"""@must_succeed and @should_succeed decorators for Result-returning functions."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import wrapt

from klaw_assert.message import Message
from klaw_assert.must import must_ok
from klaw_assert.result import Ok
from klaw_assert.should import should_ok

__all__ = ['must_succeed', 'should_succeed']


def must_succeed(
    func: Callable[..., Any] | None = None,
    *,
    msg: Message | str | None = None,
) -> Any:
    """Decorator that unwraps the function's Ok value or aborts on Err.

    Can be used with or without arguments:
        @must_succeed
        def connect(): ...

        @must_succeed(msg='cannot open database')
        def open_db(): ...

    A ``None`` return passes through unchanged.

    Example:
        ```python
        @must_succeed(msg=message('parse %s', 'config'))
        def parse(raw: str) -> Result[dict, ValueError]: ...

        parse('{}')   # {}
        parse('{')    # Abort: parse config: <error>
        ```
    """

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[..., Any],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Any:
        outcome = wrapped(*args, **kwargs)
        if outcome is None:
            return None
        return must_ok(outcome, msg)

    if func is not None:
        return wrapper(func)
    return wrapper


def should_succeed(
    func: Callable[..., Any] | None = None,
    *,
    msg: Message | str | None = None,
) -> Any:
    """Decorator that annotates a returned Err with ``msg`` (see ``should_ok``).

    A ``None`` return becomes ``Ok(None)``.
    """

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[..., Any],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Any:
        outcome = wrapped(*args, **kwargs)
        if outcome is None:
            return Ok(None)
        return should_ok(outcome, msg)

    if func is not None:
        return wrapper(func)
    return wrapper
