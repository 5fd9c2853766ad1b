"""Settings-screen editing and close validation."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from urllib.parse import urlparse

from wallet_gui.app.ports.account_service import WalletSettings

UrlValidator = Callable[[str], bool]


@dataclass(frozen=True, slots=True)
class SettingsField:
    """Editable URL field on the settings screen."""

    key: str
    label: str


URL_FIELDS: tuple[SettingsField, ...] = (
    SettingsField("phantasma_rpc_url", "Phantasma RPC URL"),
    SettingsField("neo_rpc_url", "Neo RPC URL"),
    SettingsField("neoscan_url", "Neoscan API URL"),
)
_FIELDS_BY_KEY = {field.key: field for field in URL_FIELDS}


@dataclass(frozen=True, slots=True)
class SettingsValidation:
    """Outcome of the settings close gate."""

    valid: bool
    field: SettingsField | None = None
    message: str | None = None


def is_valid_url(value: str) -> bool:
    """Return whether value is an absolute http(s) URL."""
    candidate = value.strip()
    if not candidate or candidate != value or any(ch.isspace() for ch in candidate):
        return False
    parsed = urlparse(candidate)
    return parsed.scheme in {"http", "https"} and bool(parsed.netloc)


def validate_settings(
    settings: WalletSettings, *, url_validator: UrlValidator = is_valid_url
) -> SettingsValidation:
    """Check URL fields in display order; the first invalid one vetoes close."""
    for field in URL_FIELDS:
        value = getattr(settings, field.key)
        if not url_validator(value):
            return SettingsValidation(
                valid=False,
                field=field,
                message=f"Invalid URL for {field.label}\n{value}",
            )
    return SettingsValidation(valid=True)


def apply_field_edit(settings: WalletSettings, key: str, value: str) -> bool:
    """Write an edited URL field back to settings. Returns False for unknown keys."""
    if key not in _FIELDS_BY_KEY:
        return False
    setattr(settings, key, value)
    return True


def apply_currency_choice(
    settings: WalletSettings, options: tuple[str, ...], index: int
) -> int | None:
    """Select currency by index. Returns the applied index, or None if out of range."""
    if not 0 <= index < len(options):
        return None
    settings.currency = options[index]
    return index
