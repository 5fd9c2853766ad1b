"""Frame timing primitives."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from time import monotonic


@dataclass(frozen=True, slots=True)
class TimeContext:
    """Per-frame timing context."""

    frame_index: int
    frame_time: float
    delta_seconds: float


class FrameClock:
    """Samples the time source once per frame.

    Every reader inside one frame sees the same ``now()`` value, so animation
    start times and animation ticks share a single time base.
    """

    def __init__(
        self,
        *,
        time_source: Callable[[], float] | None = None,
        max_delta_seconds: float = 0.25,
    ) -> None:
        if max_delta_seconds <= 0.0:
            raise ValueError("max_delta_seconds must be > 0")
        self._time_source = time_source or monotonic
        self._max_delta_seconds = max_delta_seconds
        self._frame_time: float | None = None

    def next(self, frame_index: int) -> TimeContext:
        """Advance to the next frame and return its timing context."""
        now = self._time_source()
        if self._frame_time is None:
            delta = 0.0
        else:
            delta = min(max(0.0, now - self._frame_time), self._max_delta_seconds)
        self._frame_time = now
        return TimeContext(frame_index=frame_index, frame_time=now, delta_seconds=delta)

    def now(self) -> float:
        """Return the current frame's sampled time."""
        if self._frame_time is None:
            self._frame_time = self._time_source()
        return self._frame_time
