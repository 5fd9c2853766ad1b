"""Directional slide animator driven once per frame."""

from __future__ import annotations

import logging
from collections.abc import Callable
from time import monotonic

from guikit.api.animation import (
    AnimationCallback,
    AnimationDirection,
    AnimationRequest,
    WindowRect,
)

_LOG = logging.getLogger("guikit.animation")


def lerp(start: float, end: float, t: float) -> float:
    """Linear interpolation between two values."""
    return start + (end - start) * t


class RuntimeAnimator:
    """Slides a window between an off-screen edge and its resting rect.

    Only one request is held at a time. Starting a new request drops the
    previous one together with its completion callback.
    """

    def __init__(
        self,
        *,
        rest: WindowRect,
        screen_width: float,
        screen_height: float,
        duration_seconds: float = 0.5,
        time_source: Callable[[], float] | None = None,
    ) -> None:
        if duration_seconds <= 0.0:
            raise ValueError("duration_seconds must be > 0")
        self._rest = rest
        self._screen_width = screen_width
        self._screen_height = screen_height
        self._duration_seconds = duration_seconds
        self._time_source = time_source or monotonic
        self._request: AnimationRequest | None = None
        self._window_rect = rest

    @property
    def active(self) -> AnimationRequest | None:
        return self._request

    @property
    def window_rect(self) -> WindowRect:
        return self._window_rect

    @property
    def duration_seconds(self) -> float:
        return self._duration_seconds

    def is_animating(self) -> bool:
        return self._request is not None

    def animate(
        self,
        direction: AnimationDirection,
        inverted: bool,
        on_complete: AnimationCallback | None = None,
    ) -> None:
        """Record a new request starting now."""
        if self._request is not None:
            _LOG.debug(
                "animation_superseded previous=%s next=%s",
                self._request.direction.name,
                direction.name,
            )
        if direction is AnimationDirection.NONE:
            self._request = None
            return
        self._request = AnimationRequest(
            direction=direction,
            inverted=inverted,
            start_time=self._time_source(),
            on_complete=on_complete,
        )

    def tick(self, now: float | None = None) -> None:
        """Update window placement and fire completion when elapsed."""
        request = self._request
        if request is None:
            return
        current = self._time_source() if now is None else now
        t = (current - request.start_time) / self._duration_seconds
        finished = t >= 1.0
        t = min(max(t, 0.0), 1.0)
        if request.inverted:
            t = 1.0 - t

        self._window_rect = self._offset_rect(request.direction, t)

        if not finished:
            return
        self._request = None
        callback = request.on_complete
        if callback is not None:
            callback()

    def _offset_rect(self, direction: AnimationDirection, t: float) -> WindowRect:
        rest = self._rest
        if direction is AnimationDirection.LEFT:
            return rest.moved(x=lerp(-rest.width, rest.x, t))
        if direction is AnimationDirection.RIGHT:
            return rest.moved(x=lerp(self._screen_width + rest.width, rest.x, t))
        if direction is AnimationDirection.UP:
            return rest.moved(y=lerp(-rest.height, rest.y, t))
        if direction is AnimationDirection.DOWN:
            return rest.moved(y=lerp(self._screen_height + rest.height, rest.y, t))
        return rest


Animator = RuntimeAnimator
