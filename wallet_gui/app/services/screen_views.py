"""Per-screen view projection and the actions each screen offers."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from wallet_gui.app.controller_state import OrchestratorState
from wallet_gui.app.ports.account_service import AccountService
from wallet_gui.app.services.settings_flow import URL_FIELDS
from wallet_gui.app.services.transaction_flow import secondary_action
from wallet_gui.app.state_machine import BOTTOM_MENU, ScreenState
from wallet_gui.app.ui_state import ActionView, ChoiceView, FieldView, RowView, ScreenView

UNIT = 16

ACTION_ACCOUNT_OPEN = "account_open:"
ACTION_OPEN_SETTINGS = "open_settings"
ACTION_CLOSE = "close"
ACTION_BACK = "back"
ACTION_COPY_ADDRESS = "copy_address"
ACTION_PLATFORM = "platform:"
ACTION_MENU = "menu:"
ACTION_BALANCE_SEND = "balance_send:"
ACTION_BALANCE_SECONDARY = "balance_secondary:"
ACTION_BALANCE_SWAP = "balance_swap:"
ACTION_HISTORY_VIEW = "history_view:"
ACTION_CURRENCY = "currency:"


@dataclass(frozen=True, slots=True)
class ViewContext:
    """Inputs available to screen view builders."""

    service: AccountService
    state: OrchestratorState
    window_height: float


ScreenViewBuilder = Callable[[ViewContext], ScreenView]


def units(n: int) -> int:
    return UNIT * n


def history_capacity(window_height: float) -> int:
    """Number of history rows that fit below the header and above the menu."""
    top = units(10)
    per_item = units(3) + 8
    available = int(window_height - (top + units(6)))
    return max(0, available // per_item)


def menu_actions(current: ScreenState) -> tuple[ActionView, ...]:
    return tuple(
        ActionView(f"{ACTION_MENU}{state.name.lower()}", state.label, enabled=state is not current)
        for state in BOTTOM_MENU
    )


def _platform_actions(ctx: ViewContext) -> tuple[ActionView, ...]:
    account = ctx.service.current_account()
    if account is None or len(account.platforms) <= 1:
        return ()
    current = ctx.service.current_platform()
    return tuple(
        ActionView(f"{ACTION_PLATFORM}{platform}", platform, enabled=platform != current)
        for platform in account.platforms
    )


def _top_menu(ctx: ViewContext) -> tuple[ActionView, ...]:
    return (ActionView(ACTION_CLOSE, "X"), *_platform_actions(ctx))


def loading_view(ctx: ViewContext) -> ScreenView:
    service = ctx.service
    message = "Starting..." if service.is_ready() else service.status_message()
    return ScreenView(state=ScreenState.LOADING, message=message)


def sending_view(ctx: ViewContext) -> ScreenView:
    return ScreenView(state=ScreenState.SENDING, message="Sending transaction...")


def confirming_view(ctx: ViewContext) -> ScreenView:
    return ScreenView(
        state=ScreenState.CONFIRMING,
        message=f"Confirming transaction {ctx.state.transaction_hash}...",
    )


def accounts_view(ctx: ViewContext) -> ScreenView:
    rows = tuple(
        RowView(
            key=str(index),
            text=str(account),
            actions=(ActionView(f"{ACTION_ACCOUNT_OPEN}{index}", "Open"),),
        )
        for index, account in enumerate(ctx.service.list_accounts())
    )
    return ScreenView(
        state=ScreenState.ACCOUNTS,
        title="ACCOUNTS",
        rows=rows,
        actions=(ActionView(ACTION_OPEN_SETTINGS, "Settings"),),
    )


def balances_view(ctx: ViewContext) -> ScreenView:
    service = ctx.service
    if service.is_refreshing():
        return ScreenView(state=ScreenState.BALANCES, message="Fetching balances...")
    account_state = service.current_account_state()
    if account_state is None:
        return ScreenView(
            state=ScreenState.BALANCES,
            title="BALANCES",
            message="Temporary error, cannot display balances...",
            actions=_top_menu(ctx),
        )

    rows: list[RowView] = []
    for balance in account_state.balances:
        actions: list[ActionView] = []
        secondary = secondary_action(account_state, balance)
        if secondary is not None:
            actions.append(
                ActionView(
                    f"{ACTION_BALANCE_SECONDARY}{balance.symbol}",
                    secondary.label,
                    enabled=secondary.enabled,
                )
            )
        actions.append(
            ActionView(
                f"{ACTION_BALANCE_SWAP}{balance.symbol}",
                "Swap",
                enabled=service.swap_supported(balance.symbol),
            )
        )
        actions.append(ActionView(f"{ACTION_BALANCE_SEND}{balance.symbol}", "Send"))
        worth = service.token_worth(balance.symbol, balance.amount)
        rows.append(
            RowView(
                key=balance.symbol,
                text=f"{balance.amount} {balance.symbol} ({worth})",
                actions=tuple(actions),
            )
        )

    message = None
    if not rows:
        message = f"No assets found in this {service.current_platform()} account."
    return ScreenView(
        state=ScreenState.BALANCES,
        title="BALANCES",
        subtitle=account_state.address,
        message=message,
        rows=tuple(rows),
        actions=(
            *_top_menu(ctx),
            ActionView(ACTION_COPY_ADDRESS, "Copy"),
            *menu_actions(ScreenState.BALANCES),
        ),
    )


def history_view(ctx: ViewContext) -> ScreenView:
    service = ctx.service
    if service.is_refreshing():
        return ScreenView(state=ScreenState.HISTORY, message="Fetching history...")
    history = service.current_history()
    if history is None:
        return ScreenView(
            state=ScreenState.HISTORY,
            title="TRANSACTION HISTORY",
            message="Temporary error, cannot display history...",
            actions=_top_menu(ctx),
        )

    capacity = history_capacity(ctx.window_height)
    rows = tuple(
        RowView(
            key=entry.transaction_hash,
            text=f"{entry.transaction_hash}  {entry.date:%Y-%m-%d %H:%M}",
            actions=(
                ActionView(f"{ACTION_HISTORY_VIEW}{index}", "View", enabled=bool(entry.explorer_url)),
            ),
        )
        for index, entry in enumerate(history[:capacity])
    )
    message = None
    if not history:
        message = f"No transactions found for this {service.current_platform()} account."
    account_state = service.current_account_state()
    actions = list(_top_menu(ctx))
    if account_state is not None:
        actions.append(ActionView(ACTION_COPY_ADDRESS, "Copy"))
    actions.extend(menu_actions(ScreenState.HISTORY))
    return ScreenView(
        state=ScreenState.HISTORY,
        title="TRANSACTION HISTORY",
        subtitle=account_state.address if account_state is not None else None,
        message=message,
        rows=rows,
        actions=tuple(actions),
    )


def transfer_view(ctx: ViewContext) -> ScreenView:
    return ScreenView(
        state=ScreenState.TRANSFER,
        title=f"{ctx.state.transfer_symbol} TRANSFER",
        actions=(ActionView(ACTION_CLOSE, "X"), ActionView(ACTION_BACK, "Back")),
    )


def settings_view(ctx: ViewContext) -> ScreenView:
    settings = ctx.service.settings
    fields = tuple(
        FieldView(key=field.key, label=field.label, value=getattr(settings, field.key))
        for field in URL_FIELDS
    )
    options = tuple(
        ActionView(f"{ACTION_CURRENCY}{index}", option)
        for index, option in enumerate(ctx.state.currency_options)
    )
    return ScreenView(
        state=ScreenState.SETTINGS,
        title="SETTINGS",
        fields=fields,
        choices=(
            ChoiceView(
                key="currency",
                label="Currency",
                options=options,
                selected_index=ctx.state.currency_index,
            ),
        ),
        actions=(ActionView(ACTION_CLOSE, "X"),),
    )


SCREEN_VIEWS: dict[ScreenState, ScreenViewBuilder] = {
    ScreenState.LOADING: loading_view,
    ScreenState.ACCOUNTS: accounts_view,
    ScreenState.BALANCES: balances_view,
    ScreenState.HISTORY: history_view,
    ScreenState.TRANSFER: transfer_view,
    ScreenState.SENDING: sending_view,
    ScreenState.CONFIRMING: confirming_view,
    ScreenState.SETTINGS: settings_view,
}


def build_screen_view(screen: ScreenState, ctx: ViewContext) -> ScreenView:
    """Project the view for screen using the render table."""
    return SCREEN_VIEWS[screen](ctx)
