"""Public screen-navigation API contracts."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Protocol, TypeAlias, TypeVar

TState = TypeVar("TState")

EntryHook: TypeAlias = Callable[[], None]


class Navigator(Protocol[TState]):
    """Current screen plus a LIFO stack of screens to return to."""

    @property
    def current(self) -> TState:
        """Return the displayed screen."""

    @property
    def depth(self) -> int:
        """Return number of recorded return targets."""

    def history(self) -> tuple[TState, ...]:
        """Return bottom-first snapshot of return targets."""

    def push(self, state: TState) -> None:
        """Record current screen as a return target and enter a new one."""

    def pop(self) -> TState:
        """Return to the most recent recorded screen."""

    def switch(self, state: TState) -> None:
        """Replace the displayed screen without touching the stack."""

    def reset(self, target: TState) -> None:
        """Clear the stack and display target."""


def create_navigator(
    initial_state: TState,
    *,
    entry_hooks: Mapping[TState, EntryHook] | None = None,
) -> Navigator[TState]:
    """Create default navigator implementation."""
    from guikit.runtime.navigation import RuntimeNavigator

    return RuntimeNavigator(initial_state, entry_hooks=entry_hooks)
