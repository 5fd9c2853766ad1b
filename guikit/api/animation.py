"""Public slide-animation API contracts."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum, auto
from typing import Protocol

AnimationCallback = Callable[[], None]


class AnimationDirection(Enum):
    """Axis and side a window slides along."""

    NONE = auto()
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()


@dataclass(frozen=True, slots=True)
class WindowRect:
    """Window placement in screen space."""

    x: float
    y: float
    width: float
    height: float

    def moved(self, *, x: float | None = None, y: float | None = None) -> WindowRect:
        """Return a copy with the given position components replaced."""
        return WindowRect(
            x=self.x if x is None else x,
            y=self.y if y is None else y,
            width=self.width,
            height=self.height,
        )


@dataclass(frozen=True, slots=True)
class AnimationRequest:
    """Single in-flight slide transition."""

    direction: AnimationDirection
    inverted: bool
    start_time: float
    on_complete: AnimationCallback | None = None


class Animator(Protocol):
    """Single-slot slide animator contract."""

    @property
    def active(self) -> AnimationRequest | None:
        """Return the in-flight request, if any."""

    @property
    def window_rect(self) -> WindowRect:
        """Return the window placement computed by the last tick."""

    def is_animating(self) -> bool:
        """Return whether a transition is in flight."""

    def animate(
        self,
        direction: AnimationDirection,
        inverted: bool,
        on_complete: AnimationCallback | None = None,
    ) -> None:
        """Start a transition, replacing any in-flight one."""

    def tick(self, now: float | None = None) -> None:
        """Advance the in-flight transition for the current frame."""


def create_animator(
    *,
    rest: WindowRect,
    screen_width: float,
    screen_height: float,
    duration_seconds: float = 0.5,
    time_source: Callable[[], float] | None = None,
) -> Animator:
    """Create default animator implementation."""
    from guikit.runtime.animation import RuntimeAnimator

    return RuntimeAnimator(
        rest=rest,
        screen_width=screen_width,
        screen_height=screen_height,
        duration_seconds=duration_seconds,
        time_source=time_source,
    )
