"""Public UI runtime API contracts."""

from guikit.api.action_dispatch import (
    ActionDispatcher,
    DirectActionHandler,
    PrefixedActionHandler,
    create_action_dispatcher,
)
from guikit.api.animation import (
    AnimationCallback,
    AnimationDirection,
    AnimationRequest,
    Animator,
    WindowRect,
    create_animator,
)
from guikit.api.logging import (
    RUNTIME_LOGGER_NAMES,
    EngineLoggingConfig,
    configure_logging,
    parse_logger_levels,
    shutdown_logging,
)
from guikit.api.modals import (
    MODAL_CANCEL_ID,
    MODAL_CONFIRM_ID,
    ModalCallback,
    ModalController,
    ModalKind,
    ModalRequest,
    ModalView,
    PromptResult,
    create_modal_controller,
)
from guikit.api.navigation import EntryHook, Navigator, create_navigator

__all__ = [
    "ActionDispatcher",
    "AnimationCallback",
    "AnimationDirection",
    "AnimationRequest",
    "Animator",
    "DirectActionHandler",
    "EngineLoggingConfig",
    "EntryHook",
    "MODAL_CANCEL_ID",
    "MODAL_CONFIRM_ID",
    "ModalCallback",
    "ModalController",
    "ModalKind",
    "ModalRequest",
    "ModalView",
    "Navigator",
    "PrefixedActionHandler",
    "PromptResult",
    "RUNTIME_LOGGER_NAMES",
    "WindowRect",
    "configure_logging",
    "create_action_dispatcher",
    "create_animator",
    "create_modal_controller",
    "create_navigator",
    "parse_logger_levels",
    "shutdown_logging",
]
