from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime
from decimal import Decimal

import pytest

from wallet_gui.app.orchestrator import ScreenOrchestrator
from wallet_gui.app.ports.account_service import TransactionCallback
from wallet_gui.app.state_machine import ScreenState
from wallet_gui.core.models import Account, AccountState, Balance, ContractCall, HistoryEntry
from wallet_gui.infra.config import OrchestratorConfig


class FakeSettings:
    def __init__(self) -> None:
        self.phantasma_rpc_url = "http://localhost:7077/rpc"
        self.neo_rpc_url = "http://seed6.ngd.network:10332"
        self.neoscan_url = "https://api.neoscan.io"
        self.currency = "EUR"
        self.saved = 0

    def save(self) -> None:
        self.saved += 1


class FakeAccountService:
    def __init__(self) -> None:
        self.settings = FakeSettings()
        self.ready = False
        self.refreshing = False
        self.accounts: list[Account] = [
            Account("alice", secret=None, platforms=("phantasma",)),
            Account("bob", secret="abc", platforms=("phantasma", "neo")),
        ]
        self.selected: int | None = None
        self.platform = "phantasma"
        self.account_state: AccountState | None = AccountState(
            address="P2KAddress",
            balances=(
                Balance("SOUL", Decimal("10"), 8),
                Balance("KCAL", Decimal("2.5"), 10),
            ),
            stake_amount=Decimal(0),
            claimable_amount=Decimal(0),
        )
        self.history: list[HistoryEntry] | None = [
            HistoryEntry("hash1", datetime(2020, 1, 2, 3, 4), "https://explorer/tx/hash1"),
            HistoryEntry("hash2", datetime(2020, 1, 3, 3, 4), ""),
        ]
        self.currencies = ["USD", "EUR", "GBP"]
        self.prices: dict[str, Decimal] = {"SOUL": Decimal("0.5"), "KCAL": Decimal("0.02")}
        self.swappable: set[str] = {"SOUL"}
        self.calls: list[tuple[str, tuple]] = []
        self.pending_submit: TransactionCallback | None = None
        self.scripts: list[tuple[ContractCall, ...]] = []

    def is_ready(self) -> bool:
        return self.ready

    def status_message(self) -> str:
        return "Loading accounts..."

    def is_refreshing(self) -> bool:
        return self.refreshing

    def list_accounts(self) -> Sequence[Account]:
        return list(self.accounts)

    def select_account(self, index: int) -> None:
        self.calls.append(("select_account", (index,)))
        self.selected = index

    def unselect_account(self) -> None:
        self.calls.append(("unselect_account", ()))
        self.selected = None

    def has_selection(self) -> bool:
        return self.selected is not None

    def current_account(self) -> Account | None:
        if self.selected is None:
            return None
        return self.accounts[self.selected]

    def current_platform(self) -> str:
        return self.platform

    def set_platform(self, platform: str) -> None:
        self.calls.append(("set_platform", (platform,)))
        self.platform = platform

    def refresh_balances(self, force: bool) -> None:
        self.calls.append(("refresh_balances", (force,)))

    def refresh_history(self, force: bool) -> None:
        self.calls.append(("refresh_history", (force,)))

    def refresh_token_prices(self) -> None:
        self.calls.append(("refresh_token_prices", ()))

    def token_worth(self, symbol: str, amount: Decimal) -> str:
        price = self.prices.get(symbol)
        if price is None:
            return "-"
        return f"{amount * price:.2f} {self.settings.currency}"

    def swap_supported(self, symbol: str) -> bool:
        return symbol in self.swappable

    def current_account_state(self) -> AccountState | None:
        return self.account_state

    def current_history(self) -> Sequence[HistoryEntry] | None:
        return self.history

    def build_script(self, calls: Sequence[ContractCall]) -> bytes:
        self.scripts.append(tuple(calls))
        return repr(tuple(calls)).encode("utf-8")

    def submit_transaction(self, chain_id: str, script: bytes, on_result: TransactionCallback) -> None:
        self.calls.append(("submit_transaction", (chain_id,)))
        self.pending_submit = on_result

    def list_currencies(self) -> Sequence[str]:
        return list(self.currencies)

    def copy_to_clipboard(self, text: str) -> None:
        self.calls.append(("copy_to_clipboard", (text,)))

    def open_url(self, url: str) -> None:
        self.calls.append(("open_url", (url,)))

    def call_names(self) -> list[str]:
        return [name for name, _ in self.calls]


class FakeClock:
    def __init__(self, now: float = 100.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class Driver:
    """Steps an orchestrator frame by frame on a fake clock."""

    def __init__(self, orchestrator: ScreenOrchestrator, clock: FakeClock) -> None:
        self.orchestrator = orchestrator
        self.clock = clock

    def frame(self, advance: float = 0.0) -> None:
        self.clock.advance(advance)
        self.orchestrator.update()

    def settle(self, max_frames: int = 20) -> None:
        """Run frames until no animation is in flight."""
        self.frame()
        for _ in range(max_frames):
            if not self.orchestrator.animator.is_animating():
                return
            self.frame(0.5)
        raise AssertionError("animation did not settle")

    def press(self, action_id: str) -> bool:
        return self.orchestrator.handle_button(action_id)


@pytest.fixture
def service() -> FakeAccountService:
    return FakeAccountService()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def orchestrator_factory(service: FakeAccountService, clock: FakeClock):
    def _make(**kwargs) -> ScreenOrchestrator:
        return ScreenOrchestrator(
            service,
            config=kwargs.pop("config", OrchestratorConfig()),
            time_source=clock,
            **kwargs,
        )

    return _make


@pytest.fixture
def driver(orchestrator_factory, clock: FakeClock) -> Driver:
    return Driver(orchestrator_factory(), clock)


@pytest.fixture
def accounts_driver(driver: Driver, service: FakeAccountService) -> Driver:
    """Driver already past the startup choreography, on the Accounts screen."""
    service.ready = True
    driver.settle()
    assert driver.orchestrator.screen is ScreenState.ACCOUNTS
    return driver


@pytest.fixture
def balances_driver(accounts_driver: Driver, service: FakeAccountService) -> Driver:
    """Driver with the unprotected account opened, on the Balances screen."""
    assert accounts_driver.press("account_open:0")
    accounts_driver.settle()
    assert accounts_driver.orchestrator.screen is ScreenState.BALANCES
    service.calls.clear()
    return accounts_driver
