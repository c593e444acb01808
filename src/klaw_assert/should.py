"""Should family: recoverable checks that return Result instead of aborting.

Each ``should*`` helper mirrors a ``must*`` helper and uses the same message
rules, but hands the failure back as ``Err`` so callers can propagate it.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from klaw_assert.errors import AssertionFailed
from klaw_assert.message import Message, coerce, describe, render
from klaw_assert.result import Err, Ok, Result

__all__ = ['should', 'should_call', 'should_false', 'should_ok', 'should_true']


def should(condition: bool, msg: Message | str | BaseException | None = None) -> Result[None, BaseException]:
    """Return ``Ok(None)`` if condition holds, else an ``Err``.

    Args:
        condition: The condition to check.
        msg: Trailer describing the failure, or an exception to return as-is.

    Returns:
        Ok(None), or Err(AssertionFailed) carrying 'assertion failed' or the
        rendered trailer.

    Example:
        ```python
        should(port > 0, message('invalid port %d', port))
        # Err(AssertionFailed('invalid port -1'))
        ```
    """
    if condition:
        return Ok(None)
    if isinstance(msg, BaseException):
        return Err(msg)
    return Err(AssertionFailed(describe(coerce(msg))))


def should_true(condition: bool, msg: Message | str | BaseException | None = None) -> Result[None, BaseException]:
    return should(condition, msg)


def should_false(condition: bool, msg: Message | str | BaseException | None = None) -> Result[None, BaseException]:
    return should(not condition, msg)


def should_ok[T](result: Result[T, Any], msg: Message | str | None = None) -> Result[T, BaseException]:
    """Pass ``Ok`` through; annotate ``Err`` with ``msg``.

    Without a trailer the original Err is returned unchanged. With one, the
    error is wrapped in AssertionFailed whose ``__cause__`` is the original.
    """
    match result:
        case Ok():
            return result
        case Err(error=error):
            trailer = coerce(msg)
            if trailer is None:
                return result
            wrapped = AssertionFailed(render(trailer, error))
            if isinstance(error, BaseException):
                wrapped.__cause__ = error
            return Err(wrapped)
    msg_ = f'Expected Ok or Err, got {type(result).__name__}'
    raise TypeError(msg_)


def should_call[T](
    f: Callable[..., Result[T, Any] | None],
    /,
    *args: Any,
    msg: Message | str | None = None,
) -> Result[T | None, BaseException]:
    """Call ``f(*args)`` and annotate a returned ``Err`` like ``should_ok``.

    A ``None`` return is treated as ``Ok(None)``.
    """
    outcome = f(*args)
    if outcome is None:
        return Ok(None)
    return should_ok(outcome, msg)
