"""Mutable orchestrator state container."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class OrchestratorState:
    """Screen-local values owned by ScreenOrchestrator."""

    currency_options: tuple[str, ...] = ()
    currency_index: int = 0
    transfer_symbol: str | None = None
    transaction_hash: str | None = None
