from __future__ import annotations

from wallet_gui.app.controller_state import OrchestratorState
from wallet_gui.app.services.entry_effects import build_entry_hooks, resolve_currency_index
from wallet_gui.app.state_machine import ScreenState


def test_resolve_currency_index_scans_and_defaults_to_zero() -> None:
    options = ("USD", "EUR", "GBP")
    assert resolve_currency_index(options, "GBP") == 2
    assert resolve_currency_index(options, "JPY") == 0
    assert resolve_currency_index((), "USD") == 0


def test_balance_and_history_hooks_issue_non_forced_refresh(service) -> None:
    hooks = build_entry_hooks(service, OrchestratorState())
    hooks[ScreenState.BALANCES]()
    hooks[ScreenState.HISTORY]()
    assert service.calls == [("refresh_balances", (False,)), ("refresh_history", (False,))]


def test_settings_hook_seeds_currency_index(service) -> None:
    state = OrchestratorState(currency_options=("USD", "EUR", "GBP"), currency_index=2)
    hooks = build_entry_hooks(service, state)
    hooks[ScreenState.SETTINGS]()
    assert state.currency_index == 1


def test_screens_without_side_effects_have_no_hook(service) -> None:
    hooks = build_entry_hooks(service, OrchestratorState())
    assert ScreenState.ACCOUNTS not in hooks
    assert ScreenState.LOADING not in hooks
