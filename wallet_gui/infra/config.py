"""Application configuration and env loading."""

from __future__ import annotations

import os
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from guikit.api.animation import WindowRect


@dataclass(frozen=True, slots=True)
class OrchestratorConfig:
    """Window geometry and timing used by the screen orchestrator."""

    screen_width: float = 1280.0
    screen_height: float = 800.0
    window_max: float = 800.0
    border: float = 64.0
    animation_duration: float = 0.5
    max_password_length: int = 32

    def window_rect(self) -> WindowRect:
        """Return the centered resting window rect."""
        width = min(self.window_max, self.screen_width) - self.border
        height = min(self.window_max, self.screen_height) - self.border
        return WindowRect(
            x=(self.screen_width - width) / 2,
            y=(self.screen_height - height) / 2,
            width=width,
            height=height,
        )


def load_env_file(path: str = ".env", *, override_existing: bool = True) -> None:
    """Load KEY=VALUE pairs from an env file into process environment."""
    env_path = Path(path)
    if not env_path.exists():
        return

    for raw_line in env_path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue

        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip()
        if not key:
            continue

        if len(value) >= 2 and value[0] == value[-1] and value[0] in {"'", '"'}:
            value = value[1:-1]

        if override_existing or key not in os.environ:
            os.environ[key] = value


def load_default_env_files(
    *, override_existing: bool = True, paths: Sequence[str] | None = None
) -> None:
    """Load env files left-to-right; later files win."""
    to_load = tuple(paths) if paths is not None else (".env.app", ".env.app.local")
    for path in to_load:
        load_env_file(path, override_existing=override_existing)


def _float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def load_orchestrator_config() -> OrchestratorConfig:
    """Load orchestrator configuration from WALLET_* env vars."""
    defaults = OrchestratorConfig()
    duration = _float("WALLET_ANIMATION_DURATION", defaults.animation_duration)
    if duration <= 0.0:
        duration = defaults.animation_duration
    return OrchestratorConfig(
        screen_width=_float("WALLET_SCREEN_WIDTH", defaults.screen_width),
        screen_height=_float("WALLET_SCREEN_HEIGHT", defaults.screen_height),
        window_max=_float("WALLET_WINDOW_MAX", defaults.window_max),
        border=_float("WALLET_WINDOW_BORDER", defaults.border),
        animation_duration=duration,
        max_password_length=_int("WALLET_MAX_PASSWORD_LENGTH", defaults.max_password_length),
    )
