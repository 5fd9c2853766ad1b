"""Headless frame loop driving the screen orchestrator."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from guikit.api.logging import shutdown_logging
from guikit.runtime.time import FrameClock, TimeContext
from wallet_gui.app.orchestrator import ScreenOrchestrator
from wallet_gui.app.ports.account_service import AccountService
from wallet_gui.app.ui_state import WalletUIState
from wallet_gui.infra.config import (
    OrchestratorConfig,
    load_default_env_files,
    load_orchestrator_config,
)
from wallet_gui.infra.logging import setup_logging

logger = logging.getLogger(__name__)

_STALL_FRAMES = 4


class WalletLoop:
    """Cooperative single-threaded frame loop.

    All orchestrator mutation happens inside ``step``. Account-layer callbacks
    are expected to be delivered on this thread between frames.
    """

    def __init__(
        self,
        orchestrator: ScreenOrchestrator,
        clock: FrameClock,
        *,
        target_fps: float = 60.0,
        sleep: Callable[[float], None] = time.sleep,
        on_frame: Callable[[WalletUIState], None] | None = None,
    ) -> None:
        if target_fps <= 0.0:
            raise ValueError("target_fps must be > 0")
        self._orchestrator = orchestrator
        self._clock = clock
        self._frame_budget = 1.0 / target_fps
        self._sleep = sleep
        self._on_frame = on_frame
        self._frame_index = 0

    @property
    def orchestrator(self) -> ScreenOrchestrator:
        return self._orchestrator

    @property
    def frame_index(self) -> int:
        return self._frame_index

    def step(self) -> TimeContext:
        """Advance the clock and run one orchestrator frame."""
        context = self._clock.next(self._frame_index)
        if context.delta_seconds > self._frame_budget * _STALL_FRAMES:
            logger.warning(
                "frame_stall frame=%d delta=%.3f", context.frame_index, context.delta_seconds
            )
        self._orchestrator.update(context.frame_time)
        if self._on_frame is not None:
            self._on_frame(self._orchestrator.ui_state())
        self._frame_index += 1
        return context

    def run(
        self,
        *,
        max_frames: int | None = None,
        should_stop: Callable[[], bool] | None = None,
    ) -> int:
        """Run frames until max_frames or should_stop. Returns frames executed."""
        executed = 0
        logger.info("wallet_loop_start target_fps=%.1f", 1.0 / self._frame_budget)
        try:
            while max_frames is None or executed < max_frames:
                if should_stop is not None and should_stop():
                    break
                started = time.perf_counter()
                self.step()
                executed += 1
                remaining = self._frame_budget - (time.perf_counter() - started)
                if remaining > 0.0:
                    self._sleep(remaining)
        except Exception:
            logger.exception("wallet_loop_failed frame=%d", self._frame_index)
            raise
        logger.info("wallet_loop_stop frames=%d", executed)
        return executed


def create_wallet_loop(
    service: AccountService,
    *,
    config: OrchestratorConfig | None = None,
    clock: FrameClock | None = None,
    target_fps: float = 60.0,
    sleep: Callable[[float], None] = time.sleep,
    on_frame: Callable[[WalletUIState], None] | None = None,
) -> WalletLoop:
    """Compose clock, orchestrator and loop for an account service."""
    frame_clock = clock or FrameClock()
    orchestrator = ScreenOrchestrator(
        service,
        config=config or load_orchestrator_config(),
        time_source=frame_clock.now,
    )
    return WalletLoop(
        orchestrator,
        frame_clock,
        target_fps=target_fps,
        sleep=sleep,
        on_frame=on_frame,
    )


def run_wallet_app(
    service: AccountService,
    *,
    max_frames: int | None = None,
    should_stop: Callable[[], bool] | None = None,
    on_frame: Callable[[WalletUIState], None] | None = None,
) -> int:
    """Load env files, configure logging and run the wallet loop for service."""
    load_default_env_files()
    setup_logging()
    loop = create_wallet_loop(service, on_frame=on_frame)
    try:
        return loop.run(max_frames=max_frames, should_stop=should_stop)
    finally:
        shutdown_logging()
