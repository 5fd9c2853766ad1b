from __future__ import annotations

import pytest

from guikit.api.animation import AnimationDirection, WindowRect
from guikit.runtime.animation import RuntimeAnimator

REST = WindowRect(x=240.0, y=32.0, width=736.0, height=736.0)


class _Clock:
    def __init__(self, now: float = 0.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


def _animator(clock: _Clock) -> RuntimeAnimator:
    return RuntimeAnimator(rest=REST, screen_width=1280.0, screen_height=800.0, time_source=clock)


def test_tick_without_animation_is_noop() -> None:
    animator = _animator(_Clock())
    animator.tick(10.0)
    assert animator.active is None
    assert animator.window_rect == REST


def test_callback_fires_once_when_duration_elapses() -> None:
    clock = _Clock(1.0)
    animator = _animator(clock)
    calls: list[str] = []
    animator.animate(AnimationDirection.UP, False, lambda: calls.append("done"))

    animator.tick(1.25)
    assert calls == []
    assert animator.is_animating()

    animator.tick(1.5)
    assert calls == ["done"]
    assert animator.active is None
    animator.tick(2.0)
    animator.tick(3.0)
    assert calls == ["done"]


def test_superseded_animation_callback_is_dropped() -> None:
    clock = _Clock(0.0)
    animator = _animator(clock)
    calls: list[str] = []
    animator.animate(AnimationDirection.LEFT, False, lambda: calls.append("a"))
    clock.now = 0.3
    animator.animate(AnimationDirection.RIGHT, False, lambda: calls.append("b"))

    animator.tick(0.6)
    assert calls == []
    animator.tick(0.8)
    assert calls == ["b"]
    animator.tick(5.0)
    assert calls == ["b"]


def test_callback_starting_new_animation_is_not_reentered() -> None:
    clock = _Clock(0.0)
    animator = _animator(clock)
    calls: list[str] = []

    def _second() -> None:
        calls.append("second")

    def _first() -> None:
        calls.append("first")
        animator.animate(AnimationDirection.DOWN, False, _second)

    animator.animate(AnimationDirection.UP, True, _first)
    clock.now = 0.5
    animator.tick(0.5)
    assert calls == ["first"]
    assert animator.active is not None
    assert animator.active.direction is AnimationDirection.DOWN

    animator.tick(1.0)
    assert calls == ["first", "second"]


@pytest.mark.parametrize(
    ("direction", "expected_x", "expected_y"),
    [
        (AnimationDirection.LEFT, (-736.0 + 240.0) / 2, 32.0),
        (AnimationDirection.RIGHT, (1280.0 + 736.0 + 240.0) / 2, 32.0),
        (AnimationDirection.UP, 240.0, (-736.0 + 32.0) / 2),
        (AnimationDirection.DOWN, 240.0, (800.0 + 736.0 + 32.0) / 2),
    ],
)
def test_halfway_offsets_per_direction(
    direction: AnimationDirection, expected_x: float, expected_y: float
) -> None:
    animator = _animator(_Clock(0.0))
    animator.animate(direction, False)
    animator.tick(0.25)
    assert animator.window_rect.x == pytest.approx(expected_x)
    assert animator.window_rect.y == pytest.approx(expected_y)


def test_inverted_animation_ends_off_screen() -> None:
    animator = _animator(_Clock(0.0))
    animator.animate(AnimationDirection.UP, True)
    animator.tick(0.0)
    assert animator.window_rect == REST
    animator.tick(0.5)
    assert animator.window_rect.y == pytest.approx(-736.0)
    assert animator.window_rect.x == pytest.approx(240.0)


def test_non_inverted_animation_ends_at_rest() -> None:
    animator = _animator(_Clock(0.0))
    animator.animate(AnimationDirection.DOWN, False)
    animator.tick(0.0)
    assert animator.window_rect.y == pytest.approx(800.0 + 736.0)
    animator.tick(0.9)
    assert animator.window_rect == REST


def test_rejects_non_positive_duration() -> None:
    with pytest.raises(ValueError):
        RuntimeAnimator(rest=REST, screen_width=1.0, screen_height=1.0, duration_seconds=0.0)
