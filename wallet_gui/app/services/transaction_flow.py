"""Balance actions and transaction script intents."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from decimal import ROUND_DOWN, Decimal

from wallet_gui.core.models import AccountState, Balance, ContractCall

MAIN_CHAIN = "main"
NULL_ADDRESS = "NULL"
GAS_PRICE = 1
GAS_LIMIT = 9999

STAKING_SYMBOL = "SOUL"
FEE_SYMBOL = "KCAL"
NEO_GAS_SYMBOL = "GAS"


@dataclass(frozen=True, slots=True)
class SecondaryAction:
    """Per-balance secondary button (stake/claim)."""

    label: str
    enabled: bool
    calls: tuple[ContractCall, ...] | None


def to_base_units(amount: Decimal, decimals: int) -> int:
    """Convert a display amount to integer base units."""
    if decimals < 0:
        raise ValueError("decimals must be >= 0")
    scaled = (amount * (Decimal(10) ** decimals)).quantize(Decimal(1), rounding=ROUND_DOWN)
    return int(scaled)


def allow_gas(address: str) -> ContractCall:
    return ContractCall("gas", "AllowGas", (address, NULL_ADDRESS, GAS_PRICE, GAS_LIMIT))


def spend_gas(address: str) -> ContractCall:
    return ContractCall("gas", "SpendGas", (address,))


def stake(address: str, balance: Balance) -> ContractCall:
    return ContractCall("stake", "Stake", (address, to_base_units(balance.amount, balance.decimals)))


def claim(address: str) -> ContractCall:
    return ContractCall("stake", "Claim", (address, address))


def build_stake_calls(state: AccountState, balance: Balance) -> tuple[ContractCall, ...]:
    """Stake the whole balance.

    Without fee tokens the claim produced by staking pays for gas, so gas is
    allowed only after the claim.
    """
    address = state.address
    if state.balance_of(FEE_SYMBOL) > 0:
        calls = [allow_gas(address), stake(address, balance)]
    else:
        calls = [stake(address, balance), claim(address), allow_gas(address)]
    calls.append(spend_gas(address))
    return tuple(calls)


def build_claim_calls(state: AccountState) -> tuple[ContractCall, ...]:
    address = state.address
    return (allow_gas(address), claim(address), spend_gas(address))


def _soul_action(state: AccountState, balance: Balance) -> SecondaryAction:
    return SecondaryAction(
        label="Stake",
        enabled=state.stake_amount == 0 and balance.amount > 0,
        calls=build_stake_calls(state, balance),
    )


def _kcal_action(state: AccountState, balance: Balance) -> SecondaryAction:
    return SecondaryAction(
        label="Claim",
        enabled=state.claimable_amount > 0,
        calls=build_claim_calls(state),
    )


def _gas_action(state: AccountState, balance: Balance) -> SecondaryAction:
    # NEO GAS claiming is not wired to a script yet.
    return SecondaryAction(label="Claim", enabled=state.claimable_amount > 0, calls=None)


_SECONDARY_ACTIONS: dict[str, Callable[[AccountState, Balance], SecondaryAction]] = {
    STAKING_SYMBOL: _soul_action,
    FEE_SYMBOL: _kcal_action,
    NEO_GAS_SYMBOL: _gas_action,
}


def secondary_action(state: AccountState, balance: Balance) -> SecondaryAction | None:
    """Resolve the secondary action for a balance row, if its symbol has one."""
    builder = _SECONDARY_ACTIONS.get(balance.symbol)
    if builder is None:
        return None
    return builder(state, balance)


def find_balance(state: AccountState, symbol: str) -> Balance | None:
    for balance in state.balances:
        if balance.symbol == symbol:
            return balance
    return None
