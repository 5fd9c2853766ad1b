"""Stack-based screen navigator."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Generic, TypeVar

from guikit.api.navigation import EntryHook

_LOG = logging.getLogger("guikit.navigation")

TState = TypeVar("TState")


class RuntimeNavigator(Generic[TState]):
    """Tracks the displayed screen and the screens to return to.

    The initial state is a sentinel: it is never recorded as a return target
    and entering it through ``reset`` runs no entry hook.
    """

    def __init__(
        self,
        initial_state: TState,
        *,
        entry_hooks: Mapping[TState, EntryHook] | None = None,
    ) -> None:
        self._sentinel = initial_state
        self._current = initial_state
        self._stack: list[TState] = []
        self._entry_hooks: dict[TState, EntryHook] = dict(entry_hooks or {})

    @property
    def current(self) -> TState:
        return self._current

    @property
    def depth(self) -> int:
        return len(self._stack)

    def history(self) -> tuple[TState, ...]:
        return tuple(self._stack)

    def set_entry_hook(self, state: TState, hook: EntryHook | None) -> None:
        """Register or remove the side effect run when state is entered."""
        if hook is None:
            self._entry_hooks.pop(state, None)
            return
        self._entry_hooks[state] = hook

    def push(self, state: TState) -> None:
        """Enter state, recording the current screen unless it is the sentinel."""
        if self._current != self._sentinel:
            self._stack.append(self._current)
        _LOG.debug("screen_push from=%s to=%s depth=%d", self._current, state, len(self._stack))
        self._current = state
        self._enter(state)

    def pop(self) -> TState:
        """Return to the previous screen. Popping an empty stack is a caller bug."""
        if not self._stack:
            raise RuntimeError("cannot pop screen: navigation stack is empty")
        previous = self._current
        self._current = self._stack.pop()
        _LOG.debug("screen_pop from=%s to=%s depth=%d", previous, self._current, len(self._stack))
        return self._current

    def switch(self, state: TState) -> None:
        """Swap the displayed screen in place and run its entry hook."""
        _LOG.debug("screen_switch from=%s to=%s", self._current, state)
        self._current = state
        self._enter(state)

    def reset(self, target: TState) -> None:
        """Clear return targets and display target."""
        self._stack.clear()
        self._current = target
        _LOG.debug("screen_reset to=%s", target)
        if target != self._sentinel:
            self._enter(target)

    def _enter(self, state: TState) -> None:
        hook = self._entry_hooks.get(state)
        if hook is not None:
            hook()


Navigator = RuntimeNavigator
