"""Failure types: the unrecoverable Abort and the recoverable AssertionFailed."""

from __future__ import annotations

from typing import Any

__all__ = ['Abort', 'AssertionFailed']


class Abort(BaseException):  # noqa: N818
    """Unrecoverable abort raised by the must family.

    Derives from BaseException so ordinary ``except Exception`` handlers let
    it unwind. Catch it explicitly at a process or task boundary.

    Attributes:
        payload: The reported error object when no message trailer was
            given, otherwise the formatted message.
    """

    def __init__(self, payload: Any) -> None:
        self.payload = payload
        super().__init__(payload)

    def __str__(self) -> str:
        return str(self.payload)

    def __repr__(self) -> str:
        return f'Abort({self.payload!r})'


class AssertionFailed(Exception):  # noqa: N818
    """Recoverable failure returned inside ``Err`` by the should family."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)
