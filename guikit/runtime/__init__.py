"""UI runtime implementations."""

from guikit.runtime.action_dispatch import ActionDispatcher
from guikit.runtime.animation import Animator
from guikit.runtime.logging import setup_engine_logging
from guikit.runtime.modal_runtime import ModalController
from guikit.runtime.navigation import Navigator
from guikit.runtime.time import FrameClock, TimeContext

__all__ = [
    "ActionDispatcher",
    "Animator",
    "FrameClock",
    "ModalController",
    "Navigator",
    "TimeContext",
    "setup_engine_logging",
]
