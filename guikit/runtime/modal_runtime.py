"""Single-flight modal prompt runtime."""

from __future__ import annotations

import logging

from guikit.api.modals import ModalCallback, ModalKind, ModalRequest, ModalView, PromptResult

_LOG = logging.getLogger("guikit.modal")

PASSWORD_MASK = "*"


class RuntimeModalController:
    """Holds at most one modal request and resolves it from the frame loop.

    Showing a modal while another is unresolved drops the earlier one; its
    callback never runs.
    """

    def __init__(self) -> None:
        self._request: ModalRequest | None = None
        self._result = PromptResult.WAITING
        self._input = ""

    @property
    def active(self) -> ModalRequest | None:
        return self._request

    @property
    def result(self) -> PromptResult:
        return self._result

    @property
    def input_text(self) -> str:
        return self._input

    @property
    def kind(self) -> ModalKind:
        if self._request is None:
            return ModalKind.NONE
        return self._request.kind

    def show_modal(
        self,
        title: str,
        caption: str,
        kind: ModalKind,
        max_input_length: int,
        allow_cancel: bool,
        on_resolve: ModalCallback | None,
    ) -> None:
        """Replace any pending modal and start waiting for user input."""
        if max_input_length < 0:
            raise ValueError("max_input_length must be >= 0")
        if self._request is not None:
            _LOG.debug("modal_superseded previous=%r next=%r", self._request.title, title)
        self._result = PromptResult.WAITING
        self._input = ""
        if kind is ModalKind.NONE:
            self._request = None
            return
        self._request = ModalRequest(
            kind=kind,
            title=title,
            caption=caption,
            max_input_length=max_input_length,
            allow_cancel=allow_cancel,
            on_resolve=on_resolve,
        )

    def can_confirm(self) -> bool:
        request = self._request
        if request is None or self._result is not PromptResult.WAITING:
            return False
        if request.allow_cancel and request.accepts_text:
            return len(self._input) > 0
        return True

    def confirm(self) -> bool:
        """Mark the active modal successful. Returns False when confirm is unavailable."""
        self._require_waiting("confirm")
        if not self.can_confirm():
            return False
        self._result = PromptResult.SUCCESS
        return True

    def cancel(self) -> bool:
        """Mark the active modal failed. Returns False when cancel is not offered."""
        request = self._require_waiting("cancel")
        if not request.allow_cancel:
            return False
        self._result = PromptResult.FAILURE
        return True

    def type_text(self, text: str) -> bool:
        request = self._request
        if request is None or not request.accepts_text or self._result is not PromptResult.WAITING:
            return False
        accepted = [ch for ch in text if ch.isprintable()]
        if not accepted:
            return False
        value = self._input + "".join(accepted)
        if request.max_input_length > 0:
            value = value[: request.max_input_length]
        changed = value != self._input
        self._input = value
        return changed

    def backspace(self) -> bool:
        request = self._request
        if request is None or not request.accepts_text or self._result is not PromptResult.WAITING:
            return False
        if not self._input:
            return False
        self._input = self._input[:-1]
        return True

    def handle_key(self, key: str) -> bool:
        """Route enter/escape/backspace while a modal is waiting."""
        if self._request is None or self._result is not PromptResult.WAITING:
            return False
        if key == "enter":
            return self.confirm()
        if key == "escape":
            return self.cancel()
        if key == "backspace":
            return self.backspace()
        return False

    def tick(self) -> bool:
        """Resolve a settled modal exactly once."""
        request = self._request
        if request is None or self._result is PromptResult.WAITING:
            return False
        success = self._result is PromptResult.SUCCESS
        captured = self._input
        self._request = None
        self._result = PromptResult.WAITING
        self._input = ""
        if request.on_resolve is not None:
            request.on_resolve(captured if success else None)
        return True

    def view(self) -> ModalView | None:
        request = self._request
        if request is None:
            return None
        display_value = self._input
        if request.kind is ModalKind.PASSWORD:
            display_value = PASSWORD_MASK * len(self._input)
        return ModalView(
            kind=request.kind,
            title=request.title,
            caption=request.caption,
            display_value=display_value,
            confirm_label="Confirm" if request.allow_cancel else "Ok",
            confirm_enabled=self.can_confirm(),
            cancel_label="Cancel" if request.allow_cancel else None,
        )

    def _require_waiting(self, action: str) -> ModalRequest:
        if self._request is None:
            raise RuntimeError(f"cannot {action} without an active modal")
        if self._result is not PromptResult.WAITING:
            raise RuntimeError(f"cannot {action} an already settled modal")
        return self._request


ModalController = RuntimeModalController
