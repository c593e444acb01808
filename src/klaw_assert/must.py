"""Must family: turn a reported failure into an unrecoverable Abort.

The wrapped function reports failure by returning ``Err(error)``. On
failure the bound Logger (if any) is told first, then ``Abort`` is raised
with the same message. Exceptions the wrapped function raises itself are
not touched.

Example:
    ```python
    from klaw_assert import Err, Ok, must_call_re

    def load(path: str) -> Result[bytes, OSError]:
        try:
            return Ok(pathlib.Path(path).read_bytes())
        except OSError as e:
            return Err(e)

    data = must_call_re(load, 'settings.toml', msg='cannot load settings')
    ```
"""

from __future__ import annotations

import traceback
from collections.abc import Callable
from typing import Any, NoReturn, overload

from klaw_assert.errors import Abort
from klaw_assert.logger import Logger, current_logger
from klaw_assert.message import Message, coerce, describe, log_args, render
from klaw_assert.result import Err, Ok, Result

__all__ = [
    'Must',
    'must_call_e',
    'must_call_re',
    'must_false',
    'must_ok',
    'must_true',
]

type Trailer = Message | str | None


class Must:
    """Must operations bound to an explicit Logger.

    Use this when the failure sink should be injected rather than read from
    the process-wide binding set with ``set_logger``.

    Args:
        logger: Sink notified before each abort. None disables logging.
    """

    __slots__ = ('_logger',)

    def __init__(self, logger: Logger | None = None) -> None:
        self._logger = logger

    @property
    def logger(self) -> Logger | None:
        return self._logger

    def fail(self, error: BaseException, msg: Trailer = None) -> NoReturn:
        """Report ``error`` to the logger, then raise Abort.

        Raises:
            Abort: Always. The payload is ``error`` itself when ``msg`` is
                None, otherwise the rendered message.
        """
        trailer = coerce(msg)
        logger = self.logger
        if logger is not None:
            if trailer is None:
                logger.panic(str(error), error=error, stack=_format_stack())
            else:
                template, args = log_args(trailer, error)
                logger.panicf(template, *args)

        payload: Any = error if trailer is None else render(trailer, error)
        cause = error if isinstance(error, BaseException) else None
        raise Abort(payload) from cause

    def ok[T](self, result: Result[T, Any], msg: Trailer = None) -> T:
        """Return the value of ``Ok`` or abort on ``Err``."""
        match result:
            case Ok(value=value):
                return value
            case Err(error=error):
                self.fail(error, msg)
        msg_ = f'Expected Ok or Err, got {type(result).__name__}'
        raise TypeError(msg_)

    def call_e(self, f: Callable[..., Result[Any, Any] | None], /, *args: Any, msg: Trailer = None) -> None:
        """Call ``f(*args)`` and abort if it reports failure.

        ``None`` and ``Ok`` both count as success.
        """
        outcome = f(*args)
        if outcome is not None:
            self.ok(outcome, msg)

    def call_re[R](self, f: Callable[..., Result[R, Any]], /, *args: Any, msg: Trailer = None) -> R:
        """Call ``f(*args)`` and return its Ok value, aborting on Err."""
        return self.ok(f(*args), msg)

    def true(self, condition: bool, msg: Trailer = None) -> None:
        """Abort unless ``condition`` holds."""
        if condition:
            return
        text = describe(coerce(msg))
        logger = self.logger
        if logger is not None:
            logger.panic(text)
        raise Abort(text)

    def false(self, condition: bool, msg: Trailer = None) -> None:
        """Abort if ``condition`` holds."""
        self.true(not condition, msg)


class _GlobalMust(Must):
    """Must view that reads the process-wide logger at failure time."""

    __slots__ = ()

    @property
    def logger(self) -> Logger | None:
        return current_logger()


_must = _GlobalMust()


def _format_stack() -> str:
    # drop this frame and fail()
    return ''.join(traceback.format_stack()[:-2])


@overload
def must_call_e(f: Callable[[], Result[Any, Any] | None], /, *, msg: Trailer = None) -> None: ...


@overload
def must_call_e[T1](f: Callable[[T1], Result[Any, Any] | None], arg1: T1, /, *, msg: Trailer = None) -> None: ...


@overload
def must_call_e[T1, T2](
    f: Callable[[T1, T2], Result[Any, Any] | None], arg1: T1, arg2: T2, /, *, msg: Trailer = None
) -> None: ...


@overload
def must_call_e[T1, T2, T3](
    f: Callable[[T1, T2, T3], Result[Any, Any] | None], arg1: T1, arg2: T2, arg3: T3, /, *, msg: Trailer = None
) -> None: ...


def must_call_e(f: Callable[..., Result[Any, Any] | None], /, *args: Any, msg: Trailer = None) -> None:
    """Call ``f(*args)``; abort if it returns ``Err``.

    Args:
        f: Function returning ``Ok``/``Err``, or None for success.
        *args: Positional arguments passed to ``f`` unchanged.
        msg: Optional trailer prepended to the error text.

    Raises:
        Abort: When ``f`` returns ``Err``.

    Example:
        ```python
        must_call_e(lambda: Err(Exception('测试错误')), msg='操作失败')
        # Abort: 操作失败: 测试错误
        ```
    """
    _must.call_e(f, *args, msg=msg)


@overload
def must_call_re[R](f: Callable[[], Result[R, Any]], /, *, msg: Trailer = None) -> R: ...


@overload
def must_call_re[T1, R](f: Callable[[T1], Result[R, Any]], arg1: T1, /, *, msg: Trailer = None) -> R: ...


@overload
def must_call_re[T1, T2, R](
    f: Callable[[T1, T2], Result[R, Any]], arg1: T1, arg2: T2, /, *, msg: Trailer = None
) -> R: ...


@overload
def must_call_re[T1, T2, T3, R](
    f: Callable[[T1, T2, T3], Result[R, Any]], arg1: T1, arg2: T2, arg3: T3, /, *, msg: Trailer = None
) -> R: ...


def must_call_re(f: Callable[..., Result[Any, Any]], /, *args: Any, msg: Trailer = None) -> Any:
    """Call ``f(*args)`` and return its Ok value; abort if it returns ``Err``.

    Example:
        ```python
        must_call_re(lambda x, y: Ok(x + y), 10, 20)
        # 30
        ```
    """
    return _must.call_re(f, *args, msg=msg)


def must_ok[T](result: Result[T, Any], msg: Trailer = None) -> T:
    """Unwrap an already computed Result, aborting on ``Err``."""
    return _must.ok(result, msg)


def must_true(condition: bool, msg: Trailer = None) -> None:
    """Abort unless ``condition`` holds. The default text is 'assertion failed'."""
    _must.true(condition, msg)


def must_false(condition: bool, msg: Trailer = None) -> None:
    """Abort if ``condition`` holds."""
    _must.false(condition, msg)
