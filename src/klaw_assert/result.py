"""Ok/Err values used to report the outcome of a fallible call.

Functions wrapped by the must and should helpers report failure by returning
``Err(exception)`` rather than raising. Success is ``Ok(value)``.

Example:
    ```python
    from klaw_assert.result import Ok, Err

    def parse_port(raw: str) -> Result[int, ValueError]:
        if not raw.isdigit():
            return Err(ValueError(f'not a port: {raw!r}'))
        return Ok(int(raw))

    parse_port('8080')  # Ok(8080)
    parse_port('http')  # Err(ValueError("not a port: 'http'"))
    ```
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ['Err', 'Ok', 'Result']


@dataclass(slots=True, frozen=True)
class Ok[T]:
    """Successful outcome carrying ``value``."""

    value: T
    __match_args__ = ('value',)

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def __repr__(self) -> str:
        return f'Ok({self.value!r})'


@dataclass(slots=True, frozen=True)
class Err[E: BaseException]:
    """Failed outcome carrying the ``error`` reported by the call."""

    error: E
    __match_args__ = ('error',)

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def __repr__(self) -> str:
        return f'Err({self.error!r})'


type Result[T, E: BaseException] = Ok[T] | Err[E]
