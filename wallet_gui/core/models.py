"""Domain records exchanged with the account/data layer."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal


@dataclass(frozen=True, slots=True)
class Account:
    """Stored wallet account."""

    display_name: str
    secret: str | None = None
    platforms: tuple[str, ...] = ()

    def __str__(self) -> str:
        return self.display_name


@dataclass(frozen=True, slots=True)
class Balance:
    """Token balance for one symbol."""

    symbol: str
    amount: Decimal
    decimals: int


@dataclass(frozen=True, slots=True)
class AccountState:
    """Fetched on-chain state for the selected account."""

    address: str
    balances: tuple[Balance, ...] = ()
    stake_amount: Decimal = Decimal(0)
    claimable_amount: Decimal = Decimal(0)

    def balance_of(self, symbol: str) -> Decimal:
        """Return summed amount for symbol."""
        return sum((b.amount for b in self.balances if b.symbol == symbol), Decimal(0))


@dataclass(frozen=True, slots=True)
class HistoryEntry:
    """One past transaction."""

    transaction_hash: str
    date: datetime
    explorer_url: str = ""


@dataclass(frozen=True, slots=True)
class ContractCall:
    """One contract invocation inside a transaction script."""

    contract: str
    method: str
    args: tuple[object, ...] = field(default_factory=tuple)
