"""Per-frame driver tying navigation, animation and modal prompts together."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from time import monotonic

from guikit.api.action_dispatch import ActionDispatcher, create_action_dispatcher
from guikit.api.animation import AnimationCallback, AnimationDirection, Animator, create_animator
from guikit.api.modals import (
    MODAL_CANCEL_ID,
    MODAL_CONFIRM_ID,
    ModalController,
    PromptResult,
    create_modal_controller,
)
from guikit.api.navigation import Navigator, create_navigator
from wallet_gui.app.controller_state import OrchestratorState
from wallet_gui.app.ports.account_service import AccountService
from wallet_gui.app.services.entry_effects import build_entry_hooks
from wallet_gui.app.services.password_gate import request_password, show_message
from wallet_gui.app.services.screen_views import (
    ACTION_ACCOUNT_OPEN,
    ACTION_BACK,
    ACTION_BALANCE_SECONDARY,
    ACTION_BALANCE_SEND,
    ACTION_CLOSE,
    ACTION_COPY_ADDRESS,
    ACTION_CURRENCY,
    ACTION_HISTORY_VIEW,
    ACTION_MENU,
    ACTION_OPEN_SETTINGS,
    ACTION_PLATFORM,
    ViewContext,
    build_screen_view,
)
from wallet_gui.app.services.settings_flow import (
    UrlValidator,
    apply_currency_choice,
    apply_field_edit,
    is_valid_url,
    validate_settings,
)
from wallet_gui.app.services.transaction_flow import MAIN_CHAIN, find_balance, secondary_action
from wallet_gui.app.state_machine import BOTTOM_MENU, INITIAL_STATE, ScreenState
from wallet_gui.app.ui_state import ScreenView, WalletUIState
from wallet_gui.core.models import ContractCall
from wallet_gui.infra.config import OrchestratorConfig

logger = logging.getLogger(__name__)

_MENU_TARGETS = {state.name.lower(): state for state in BOTTOM_MENU}


class ScreenOrchestrator:
    """Owns the navigator, animator and modal controller for the wallet window.

    ``update`` runs once per frame in a fixed order: startup check, animation
    tick, modal resolution, then view projection for the current screen.
    Screens never touch the runtime components directly; user input arrives
    through ``handle_button``/``handle_key``/``handle_char``/``handle_field``.
    """

    def __init__(
        self,
        service: AccountService,
        *,
        config: OrchestratorConfig | None = None,
        time_source: Callable[[], float] | None = None,
        url_validator: UrlValidator = is_valid_url,
        navigator: Navigator[ScreenState] | None = None,
        animator: Animator | None = None,
        modals: ModalController | None = None,
    ) -> None:
        self._service = service
        self._config = config or OrchestratorConfig()
        self._time_source = time_source or monotonic
        self._frame_now: float | None = None
        self._url_validator = url_validator
        self._state = OrchestratorState(currency_options=tuple(service.list_currencies()))
        self._navigator = navigator or create_navigator(
            INITIAL_STATE,
            entry_hooks=build_entry_hooks(service, self._state),
        )
        self._animator = animator or create_animator(
            rest=self._config.window_rect(),
            screen_width=self._config.screen_width,
            screen_height=self._config.screen_height,
            duration_seconds=self._config.animation_duration,
            time_source=self._now,
        )
        self._modals = modals or create_modal_controller()
        self._dispatcher: ActionDispatcher = create_action_dispatcher(
            direct_handlers={
                ACTION_OPEN_SETTINGS: self._on_open_settings,
                ACTION_CLOSE: self._on_close,
                ACTION_BACK: self._on_back,
                ACTION_COPY_ADDRESS: self._on_copy_address,
            },
            prefixed_handlers=(
                (ACTION_ACCOUNT_OPEN, self._on_open_account),
                (ACTION_MENU, self._on_menu),
                (ACTION_BALANCE_SEND, self._on_balance_send),
                (ACTION_BALANCE_SECONDARY, self._on_balance_secondary),
                (ACTION_HISTORY_VIEW, self._on_history_view),
                (ACTION_PLATFORM, self._on_platform),
                (ACTION_CURRENCY, self._on_currency),
            ),
        )

    @property
    def screen(self) -> ScreenState:
        return self._navigator.current

    @property
    def navigator(self) -> Navigator[ScreenState]:
        return self._navigator

    @property
    def animator(self) -> Animator:
        return self._animator

    @property
    def modals(self) -> ModalController:
        return self._modals

    @property
    def state(self) -> OrchestratorState:
        return self._state

    def update(self, now: float | None = None) -> ScreenView:
        """Run one frame and return the view of the current screen."""
        current = self._time_source() if now is None else now
        self._frame_now = current
        if (
            self._navigator.current is INITIAL_STATE
            and self._service.is_ready()
            and not self._animator.is_animating()
        ):
            self._start_up()
        self._animator.tick(current)
        self._modals.tick()
        return self.screen_view()

    def _now(self) -> float:
        """Time of the current frame; animation start times share its base."""
        if self._frame_now is None:
            return self._time_source()
        return self._frame_now

    def screen_view(self) -> ScreenView:
        ctx = ViewContext(
            service=self._service,
            state=self._state,
            window_height=self._config.window_rect().height,
        )
        return build_screen_view(self._navigator.current, ctx)

    def ui_state(self) -> WalletUIState:
        """Return view-ready snapshot of window, screen and modal."""
        return WalletUIState(
            screen=self.screen_view(),
            modal=self._modals.view(),
            window=self._animator.window_rect,
            animating=self._animator.is_animating(),
            depth=self._navigator.depth,
        )

    def handle_button(self, action_id: str) -> bool:
        """Process a button press. Returns whether it was handled."""
        if self._modals.active is not None:
            return self._handle_modal_button(action_id)
        action = self.screen_view().find_action(action_id)
        if action is None or not action.enabled:
            return False
        handled = self._dispatcher.dispatch(action_id)
        return bool(handled)

    def handle_key(self, key: str) -> bool:
        """Route navigation keys to the active modal."""
        if self._modals.active is None:
            return False
        return self._modals.handle_key(key)

    def handle_char(self, text: str) -> bool:
        """Route typed text to the active modal."""
        if self._modals.active is None:
            return False
        return self._modals.type_text(text)

    def handle_field(self, key: str, value: str) -> bool:
        """Apply an edit to a settings text field."""
        if (
            self._modals.active is not None
            or self._animator.is_animating()
            or self._navigator.current is not ScreenState.SETTINGS
        ):
            return False
        return apply_field_edit(self._service.settings, key, value)

    def message_box(self, caption: str, on_acknowledge: Callable[[], None] | None = None) -> None:
        show_message(self._modals, caption, on_acknowledge)

    def request_password(self, on_result: Callable[[bool], None]) -> None:
        request_password(
            self._service,
            self._modals,
            on_result,
            max_length=self._config.max_password_length,
        )

    def send_transaction(self, calls: Sequence[ContractCall], chain_id: str = MAIN_CHAIN) -> None:
        """Slide out, show Sending and submit the script to the account layer."""
        script = self._service.build_script(calls)

        def _submit() -> None:
            self._navigator.push(ScreenState.SENDING)
            self._service.submit_transaction(chain_id, script, self._on_transaction_result)
            self._animator.animate(AnimationDirection.LEFT, False)

        self._animator.animate(AnimationDirection.RIGHT, True, _submit)

    def _start_up(self) -> None:
        def _enter_accounts() -> None:
            self._navigator.reset(INITIAL_STATE)
            self._navigator.push(ScreenState.ACCOUNTS)

        self._slide(AnimationDirection.UP, AnimationDirection.DOWN, _enter_accounts)

    def _slide(
        self,
        hide: AnimationDirection,
        reveal: AnimationDirection,
        step: AnimationCallback,
    ) -> None:
        """Hide the window, run step while off-screen, then reveal it."""

        def _between() -> None:
            step()
            self._animator.animate(reveal, False)

        self._animator.animate(hide, True, _between)

    def _handle_modal_button(self, action_id: str) -> bool:
        if self._modals.result is not PromptResult.WAITING:
            return False
        if action_id == MODAL_CONFIRM_ID:
            return self._modals.confirm()
        if action_id == MODAL_CANCEL_ID:
            return self._modals.cancel()
        return False

    def _on_open_account(self, suffix: str) -> bool:
        index = int(suffix)
        accounts = self._service.list_accounts()
        account = accounts[index]
        self._service.select_account(index)

        def _authorized(success: bool) -> None:
            if not success:
                self.message_box(f"Could not open '{account}' account")
                return
            self._service.refresh_token_prices()
            self._slide(
                AnimationDirection.DOWN,
                AnimationDirection.UP,
                lambda: self._navigator.push(ScreenState.BALANCES),
            )

        self.request_password(_authorized)
        return True

    def _on_open_settings(self) -> bool:
        self._slide(
            AnimationDirection.UP,
            AnimationDirection.DOWN,
            lambda: self._navigator.push(ScreenState.SETTINGS),
        )
        return True

    def _on_close(self) -> bool:
        if self._navigator.current is ScreenState.SETTINGS:
            return self._close_settings()

        def _to_accounts() -> None:
            self._service.unselect_account()
            self._navigator.reset(ScreenState.ACCOUNTS)

        self._slide(AnimationDirection.DOWN, AnimationDirection.UP, _to_accounts)
        return True

    def _close_settings(self) -> bool:
        settings = self._service.settings
        validation = validate_settings(settings, url_validator=self._url_validator)
        if not validation.valid:
            field_key = validation.field.key if validation.field is not None else None
            logger.info("settings_close_vetoed field=%s", field_key)
            self.message_box(validation.message or "Invalid settings")
            return True
        self._service.refresh_token_prices()
        settings.save()
        self._slide(AnimationDirection.DOWN, AnimationDirection.UP, self._navigator.pop)
        return True

    def _on_back(self) -> bool:
        self._navigator.pop()
        return True

    def _on_menu(self, suffix: str) -> bool:
        target = _MENU_TARGETS.get(suffix)
        if target is None or target is self._navigator.current:
            return False
        self._navigator.switch(target)
        return True

    def _on_copy_address(self) -> bool:
        account_state = self._service.current_account_state()
        if account_state is None:
            return False
        self._service.copy_to_clipboard(account_state.address)
        self.message_box("Address copied to clipboard")
        return True

    def _on_platform(self, platform: str) -> bool:
        self._service.set_platform(platform)
        return True

    def _on_balance_send(self, symbol: str) -> bool:
        self._state.transfer_symbol = symbol
        self._navigator.push(ScreenState.TRANSFER)
        return True

    def _on_balance_secondary(self, symbol: str) -> bool:
        account_state = self._service.current_account_state()
        if account_state is None:
            return False
        balance = find_balance(account_state, symbol)
        if balance is None:
            return False
        action = secondary_action(account_state, balance)
        if action is None or not action.enabled:
            return False
        if action.calls is not None:
            self.send_transaction(action.calls)
        return True

    def _on_history_view(self, suffix: str) -> bool:
        history = self._service.current_history()
        if not history:
            return False
        entry = history[int(suffix)]
        if not entry.explorer_url:
            return False
        self._service.open_url(entry.explorer_url)
        return True

    def _on_currency(self, suffix: str) -> bool:
        applied = apply_currency_choice(
            self._service.settings, self._state.currency_options, int(suffix)
        )
        if applied is None:
            return False
        self._state.currency_index = applied
        return True

    def _on_transaction_result(self, transaction_hash: str | None) -> None:
        if transaction_hash:
            self._state.transaction_hash = transaction_hash
            self._navigator.push(ScreenState.CONFIRMING)
            return
        logger.error("transaction_submit_failed screen=%s", self._navigator.current.name)
        if self._navigator.current is ScreenState.SENDING:
            self._navigator.pop()
        self.message_box("Error sending transaction")
