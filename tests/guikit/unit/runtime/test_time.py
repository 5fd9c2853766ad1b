from __future__ import annotations

import pytest

from guikit.runtime.time import FrameClock


def test_frame_clock_produces_delta_and_frame_time() -> None:
    values = iter([10.0, 10.1, 10.6])
    clock = FrameClock(time_source=lambda: next(values), max_delta_seconds=0.25)

    frame0 = clock.next(0)
    frame1 = clock.next(1)
    frame2 = clock.next(2)

    assert frame0.delta_seconds == 0.0
    assert frame0.frame_time == 10.0
    assert frame1.delta_seconds == pytest.approx(0.1)
    assert frame2.delta_seconds == pytest.approx(0.25)
    assert frame2.frame_time == 10.6


def test_now_is_stable_within_a_frame() -> None:
    values = iter([1.0, 2.0, 3.0])
    clock = FrameClock(time_source=lambda: next(values))
    clock.next(0)
    assert clock.now() == 1.0
    assert clock.now() == 1.0
    clock.next(1)
    assert clock.now() == 2.0


def test_now_before_first_frame_samples_once() -> None:
    values = iter([5.0, 6.0])
    clock = FrameClock(time_source=lambda: next(values))
    assert clock.now() == 5.0
    assert clock.now() == 5.0


def test_frame_clock_clamps_negative_delta() -> None:
    values = iter([5.0, 4.5])
    clock = FrameClock(time_source=lambda: next(values))
    clock.next(0)
    assert clock.next(1).delta_seconds == 0.0


def test_frame_clock_rejects_non_positive_max_delta() -> None:
    with pytest.raises(ValueError):
        FrameClock(max_delta_seconds=0.0)
