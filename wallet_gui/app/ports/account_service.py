"""Account/data layer port consumed by the screen orchestrator."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from decimal import Decimal
from typing import Protocol

from wallet_gui.core.models import Account, AccountState, ContractCall, HistoryEntry

TransactionCallback = Callable[[str | None], None]


class WalletSettings(Protocol):
    """Persisted user settings edited on the Settings screen."""

    phantasma_rpc_url: str
    neo_rpc_url: str
    neoscan_url: str
    currency: str

    def save(self) -> None:
        """Persist current values."""


class AccountService(Protocol):
    """Collaborator owning accounts, network refreshes and signing.

    Long-running calls are fire-and-forget; completion is reported through
    callbacks invoked from a later frame on the frame thread.
    """

    settings: WalletSettings

    def is_ready(self) -> bool: ...

    def status_message(self) -> str: ...

    def is_refreshing(self) -> bool: ...

    def list_accounts(self) -> Sequence[Account]: ...

    def select_account(self, index: int) -> None: ...

    def unselect_account(self) -> None: ...

    def has_selection(self) -> bool: ...

    def current_account(self) -> Account | None: ...

    def current_platform(self) -> str: ...

    def set_platform(self, platform: str) -> None: ...

    def refresh_balances(self, force: bool) -> None: ...

    def refresh_history(self, force: bool) -> None: ...

    def refresh_token_prices(self) -> None: ...

    def token_worth(self, symbol: str, amount: Decimal) -> str:
        """Format amount of symbol in the settings currency from cached prices."""
        ...

    def swap_supported(self, symbol: str) -> bool: ...

    def current_account_state(self) -> AccountState | None: ...

    def current_history(self) -> Sequence[HistoryEntry] | None: ...

    def build_script(self, calls: Sequence[ContractCall]) -> bytes:
        """Encode contract calls into a VM script."""

    def submit_transaction(
        self, chain_id: str, script: bytes, on_result: TransactionCallback
    ) -> None:
        """Sign and send; on_result receives the transaction hash or None."""

    def list_currencies(self) -> Sequence[str]: ...

    def copy_to_clipboard(self, text: str) -> None: ...

    def open_url(self, url: str) -> None: ...
