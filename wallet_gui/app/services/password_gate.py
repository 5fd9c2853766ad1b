"""Message and password-gate modal wrappers."""

from __future__ import annotations

import logging
from collections.abc import Callable

from guikit.api.modals import ModalController, ModalKind
from wallet_gui.app.ports.account_service import AccountService

logger = logging.getLogger(__name__)

MESSAGE_TITLE = "Attention"
AUTHORIZATION_TITLE = "Account Authorization"
DEFAULT_MAX_PASSWORD_LENGTH = 32


def show_message(
    modals: ModalController, caption: str, on_acknowledge: Callable[[], None] | None = None
) -> None:
    """Show a single-button message modal."""

    def _resolve(_: str | None) -> None:
        if on_acknowledge is not None:
            on_acknowledge()

    modals.show_modal(MESSAGE_TITLE, caption, ModalKind.MESSAGE, 0, False, _resolve)


def request_password(
    service: AccountService,
    modals: ModalController,
    on_result: Callable[[bool], None],
    *,
    max_length: int = DEFAULT_MAX_PASSWORD_LENGTH,
) -> None:
    """Gate an action behind the selected account's password.

    Resolves synchronously when no account is selected (failure) or the
    account has no password (success); otherwise opens a password modal
    that succeeds only on an exact match.
    """
    if not service.has_selection():
        on_result(False)
        return

    account = service.current_account()
    secret = account.secret if account is not None else None
    if not secret:
        on_result(True)
        return

    def _resolve(value: str | None) -> None:
        success = value is not None and value == secret
        if not success:
            logger.info("authorization_failed account=%s", account)
        on_result(success)

    modals.show_modal(
        AUTHORIZATION_TITLE,
        f"Account: {account}\nInsert password to proceed",
        ModalKind.PASSWORD,
        max_length,
        True,
        _resolve,
    )
