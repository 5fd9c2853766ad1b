"""Public single-flight modal prompt API contracts."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum, auto
from typing import Protocol

ModalCallback = Callable[[str | None], None]

MODAL_CONFIRM_ID = "modal_confirm"
MODAL_CANCEL_ID = "modal_cancel"


class ModalKind(Enum):
    """Kind of modal prompt currently shown."""

    NONE = auto()
    MESSAGE = auto()
    INPUT = auto()
    PASSWORD = auto()


class PromptResult(Enum):
    """Settlement state of the active modal."""

    WAITING = auto()
    FAILURE = auto()
    SUCCESS = auto()


@dataclass(frozen=True, slots=True)
class ModalRequest:
    """Active modal prompt description."""

    kind: ModalKind
    title: str
    caption: str
    max_input_length: int
    allow_cancel: bool
    on_resolve: ModalCallback | None = None

    @property
    def accepts_text(self) -> bool:
        return self.kind in {ModalKind.INPUT, ModalKind.PASSWORD}


@dataclass(frozen=True, slots=True)
class ModalView:
    """View-ready projection of the active modal."""

    kind: ModalKind
    title: str
    caption: str
    display_value: str
    confirm_label: str
    confirm_enabled: bool
    cancel_label: str | None


class ModalController(Protocol):
    """Single-flight modal controller contract."""

    @property
    def active(self) -> ModalRequest | None:
        """Return the active request, if any."""

    @property
    def result(self) -> PromptResult:
        """Return current settlement state."""

    @property
    def input_text(self) -> str:
        """Return captured input."""

    def show_modal(
        self,
        title: str,
        caption: str,
        kind: ModalKind,
        max_input_length: int,
        allow_cancel: bool,
        on_resolve: ModalCallback | None,
    ) -> None:
        """Replace any pending modal with a new one."""

    def can_confirm(self) -> bool:
        """Return whether the confirm affordance is available."""

    def confirm(self) -> bool:
        """Settle the active modal as success."""

    def cancel(self) -> bool:
        """Settle the active modal as failure."""

    def type_text(self, text: str) -> bool:
        """Append characters to captured input."""

    def backspace(self) -> bool:
        """Remove the last captured character."""

    def tick(self) -> bool:
        """Resolve a settled modal. Returns whether a callback ran."""

    def view(self) -> ModalView | None:
        """Return view projection for the active modal."""


def create_modal_controller() -> ModalController:
    """Create default modal controller implementation."""
    from guikit.runtime.modal_runtime import RuntimeModalController

    return RuntimeModalController()
