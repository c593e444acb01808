"""Failure message trailers shared by the must and should families.

A trailer is either absent (``None``), free text (``Text``) or a printf-style
template with arguments (``Template``). ``render`` turns a trailer plus the
reported error into the final text; the logger and the abort use the same
``log_args``/``render`` pair so both see identical strings.
"""

from __future__ import annotations

from typing import Any

import msgspec

__all__ = [
    'DEFAULT_ASSERTION_MESSAGE',
    'Message',
    'Template',
    'Text',
    'coerce',
    'describe',
    'format_template',
    'log_args',
    'message',
    'render',
]

DEFAULT_ASSERTION_MESSAGE = 'assertion failed'


class Text(msgspec.Struct, frozen=True):
    """Free-text trailer, rendered as ``'<value>: <error>'``."""

    value: str


class Template(msgspec.Struct, frozen=True):
    """Template trailer, rendered as ``(template + ': %s') % (*args, error)``."""

    template: str
    args: tuple[Any, ...] = ()


type Message = Text | Template


def message(*trailer: Any) -> Message | None:
    """Classify a variadic trailer into a typed Message.

    - no elements: ``None``
    - a str followed by at least one more element: ``Template``
    - anything else: ``Text`` of all elements joined with ``str()``, with a
      space between two neighbours only when neither is a str

    Example:
        ```python
        message()                      # None
        message('open %s', path)       # Template('open %s', (path,))
        message('open failed')         # Text('open failed')
        message(404, ' not found')     # Text('404 not found')
        message(404, 500)              # Text('404 500')
        ```
    """
    if not trailer:
        return None
    head, *rest = trailer
    if isinstance(head, str) and rest:
        return Template(head, tuple(rest))
    return Text(_join(trailer))


def _join(parts: tuple[Any, ...]) -> str:
    out: list[str] = []
    for i, part in enumerate(parts):
        if i and not isinstance(part, str) and not isinstance(parts[i - 1], str):
            out.append(' ')
        out.append(str(part))
    return ''.join(out)


def coerce(msg: Message | str | None) -> Message | None:
    """Accept a bare str as shorthand for ``Text``."""
    if isinstance(msg, str):
        return Text(msg)
    return msg


def log_args(msg: Message | None, error: BaseException) -> tuple[str, tuple[Any, ...]]:
    """Return the ``(template, args)`` pair handed to ``Logger.panicf``.

    Only meaningful when ``msg`` is not None; the bare-error case goes
    through ``Logger.panic`` instead. A template whose placeholders do not
    fit its args is pre-rendered with ``format_template`` so the error still
    lands after the colon.
    """
    match msg:
        case Template(template=template, args=args):
            if _fits(template, args):
                return f'{template}: %s', (*args, error)
            return '%s: %s', (format_template(template, args), error)
        case Text(value=value):
            return '%s: %s', (value, error)
        case None:
            return '%s', (error,)
    msg_ = f'Unsupported message trailer: {msg!r}'
    raise TypeError(msg_)


def render(msg: Message | None, error: BaseException) -> str:
    """Build the failure text for ``error`` with an optional trailer."""
    return format_template(*log_args(msg, error))


def describe(msg: Message | None, default: str = DEFAULT_ASSERTION_MESSAGE) -> str:
    """Render a trailer on its own, for failures with no underlying error."""
    match msg:
        case None:
            return default
        case Text(value=value):
            return value
        case Template(template=template, args=args):
            return format_template(template, args)
    msg_ = f'Unsupported message trailer: {msg!r}'
    raise TypeError(msg_)


def format_template(template: str, args: tuple[Any, ...]) -> str:
    """Apply ``%``-formatting, never raising on a bad template.

    With no args the template is returned as-is, so a literal ``%`` survives.
    When the placeholders do not fit the args, the template is followed by
    each arg's ``str()``, space separated.

    Example:
        ```python
        format_template('retry %d of %d', (2, 5))  # 'retry 2 of 5'
        format_template('failed', (3,))            # 'failed 3'
        format_template('100%', ())                # '100%'
        ```
    """
    if not args:
        return template
    try:
        return template % args
    except (TypeError, ValueError, OverflowError):
        return ' '.join([template, *map(str, args)])


def _fits(template: str, args: tuple[Any, ...]) -> bool:
    try:
        template % args
    except (TypeError, ValueError, OverflowError):
        return False
    return True
