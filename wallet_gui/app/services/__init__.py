"""Application service-layer helpers."""

from wallet_gui.app.services.entry_effects import build_entry_hooks, resolve_currency_index
from wallet_gui.app.services.password_gate import request_password, show_message
from wallet_gui.app.services.screen_views import SCREEN_VIEWS, ViewContext, build_screen_view
from wallet_gui.app.services.settings_flow import (
    URL_FIELDS,
    SettingsField,
    SettingsValidation,
    is_valid_url,
    validate_settings,
)
from wallet_gui.app.services.transaction_flow import (
    SecondaryAction,
    build_claim_calls,
    build_stake_calls,
    secondary_action,
    to_base_units,
)

__all__ = [
    "SCREEN_VIEWS",
    "SecondaryAction",
    "SettingsField",
    "SettingsValidation",
    "URL_FIELDS",
    "ViewContext",
    "build_claim_calls",
    "build_entry_hooks",
    "build_screen_view",
    "build_stake_calls",
    "is_valid_url",
    "request_password",
    "resolve_currency_index",
    "secondary_action",
    "show_message",
    "to_base_units",
    "validate_settings",
]
