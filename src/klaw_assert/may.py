"""Conditional callback execution: may, may_true, may_false and then().

These helpers replace short if/else blocks whose branches only run a side
effect. Every callback is optional; passing ``None`` is always a no-op.

Example:
    ```python
    may(user.is_admin, grant_access, deny_access)

    then(cache_hit).do(serve_cached).else_(fetch_and_store)
    ```
"""

from __future__ import annotations

from collections.abc import Callable

__all__ = ['Branch', 'may', 'may_false', 'may_true', 'then']

type Callback = Callable[[], object] | None


def may(condition: bool, on_true: Callback = None, on_false: Callback = None) -> None:
    """Run ``on_true`` if condition holds, otherwise ``on_false``.

    Exactly one branch is selected. A missing callback on the selected
    branch does nothing.

    Args:
        condition: Selects the branch.
        on_true: Called when condition is True.
        on_false: Called when condition is False.
    """
    if condition:
        if on_true is not None:
            on_true()
    elif on_false is not None:
        on_false()


def may_true(condition: bool, callback: Callback = None) -> None:
    """Run ``callback`` only when condition is True."""
    if condition and callback is not None:
        callback()


def may_false(condition: bool, callback: Callback = None) -> None:
    """Run ``callback`` only when condition is False."""
    if not condition and callback is not None:
        callback()


class Branch:
    """Chainable two-way branch bound to a fixed condition.

    At most one callback runs over the lifetime of a Branch: the first
    ``do`` (condition True) or ``else_`` (condition False) call that carries
    a callback. Calls with ``None`` leave the branch open.
    """

    __slots__ = ('_condition', '_fired')

    def __init__(self, condition: bool) -> None:
        self._condition = bool(condition)
        self._fired = False

    @property
    def condition(self) -> bool:
        return self._condition

    @property
    def fired(self) -> bool:
        """True once a callback has run."""
        return self._fired

    def do(self, callback: Callback) -> Branch:
        """Run ``callback`` if the condition is True and nothing has run yet."""
        if self._condition and not self._fired and callback is not None:
            callback()
            self._fired = True
        return self

    def else_(self, callback: Callback) -> Branch:
        """Run ``callback`` if the condition is False and nothing has run yet."""
        if not self._condition and not self._fired and callback is not None:
            callback()
            self._fired = True
        return self

    def __repr__(self) -> str:
        return f'Branch(condition={self._condition}, fired={self._fired})'


def then(condition: bool) -> Branch:
    """Start a ``do``/``else_`` chain for ``condition``.

    Example:
        ```python
        then(ready).do(start).else_(wait)
        ```
    """
    return Branch(condition)
