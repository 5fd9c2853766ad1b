"""Side effects run when a screen is entered."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from guikit.api.navigation import EntryHook
from wallet_gui.app.controller_state import OrchestratorState
from wallet_gui.app.ports.account_service import AccountService
from wallet_gui.app.state_machine import ScreenState

logger = logging.getLogger(__name__)


def resolve_currency_index(options: Sequence[str], currency: str) -> int:
    """Return index of currency in options, or 0 when absent."""
    for index, option in enumerate(options):
        if option == currency:
            return index
    return 0


def build_entry_hooks(
    service: AccountService, state: OrchestratorState
) -> dict[ScreenState, EntryHook]:
    """Build the per-screen entry side-effect table."""

    def enter_balances() -> None:
        service.refresh_balances(False)

    def enter_history() -> None:
        service.refresh_history(False)

    def enter_settings() -> None:
        state.currency_index = resolve_currency_index(
            state.currency_options, service.settings.currency
        )
        logger.debug("settings_currency_seeded index=%d", state.currency_index)

    return {
        ScreenState.BALANCES: enter_balances,
        ScreenState.HISTORY: enter_history,
        ScreenState.SETTINGS: enter_settings,
    }
