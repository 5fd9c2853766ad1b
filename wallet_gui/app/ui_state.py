"""Typed UI state exposed by the orchestrator."""

from __future__ import annotations

from dataclasses import dataclass

from guikit.api.animation import WindowRect
from guikit.api.modals import ModalView
from wallet_gui.app.state_machine import ScreenState


@dataclass(frozen=True, slots=True)
class ActionView:
    """User action offered by a screen."""

    id: str
    label: str
    enabled: bool = True


@dataclass(frozen=True, slots=True)
class RowView:
    """List row (account, balance or history entry) with its actions."""

    key: str
    text: str
    actions: tuple[ActionView, ...] = ()


@dataclass(frozen=True, slots=True)
class FieldView:
    """Editable text field."""

    key: str
    label: str
    value: str


@dataclass(frozen=True, slots=True)
class ChoiceView:
    """Drop-down selector; each option is an action."""

    key: str
    label: str
    options: tuple[ActionView, ...]
    selected_index: int


@dataclass(frozen=True, slots=True)
class ScreenView:
    """View-ready snapshot of one screen."""

    state: ScreenState
    title: str = ""
    message: str | None = None
    subtitle: str | None = None
    rows: tuple[RowView, ...] = ()
    fields: tuple[FieldView, ...] = ()
    choices: tuple[ChoiceView, ...] = ()
    actions: tuple[ActionView, ...] = ()

    def all_actions(self) -> tuple[ActionView, ...]:
        collected = list(self.actions)
        for row in self.rows:
            collected.extend(row.actions)
        for choice in self.choices:
            collected.extend(choice.options)
        return tuple(collected)

    def find_action(self, action_id: str) -> ActionView | None:
        for action in self.all_actions():
            if action.id == action_id:
                return action
        return None


@dataclass(frozen=True, slots=True)
class WalletUIState:
    """Full frame snapshot for a renderer."""

    screen: ScreenView
    modal: ModalView | None
    window: WindowRect
    animating: bool
    depth: int
