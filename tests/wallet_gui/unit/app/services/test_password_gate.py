from __future__ import annotations

import pytest

from guikit.api.modals import ModalKind
from guikit.runtime.modal_runtime import RuntimeModalController
from wallet_gui.app.services.password_gate import request_password, show_message


def test_gate_fails_immediately_without_selection(service) -> None:
    modals = RuntimeModalController()
    results: list[bool] = []
    request_password(service, modals, results.append)
    assert results == [False]
    assert modals.active is None


def test_gate_succeeds_immediately_for_account_without_secret(service) -> None:
    modals = RuntimeModalController()
    results: list[bool] = []
    service.select_account(0)
    request_password(service, modals, results.append)
    assert results == [True]
    assert modals.active is None


@pytest.mark.parametrize(
    ("typed", "expected"),
    [
        ("abc", True),
        ("ABC", False),
        ("ab ", False),
        (" abc", False),
        ("abcd", False),
    ],
)
def test_gate_requires_exact_password(service, typed: str, expected: bool) -> None:
    modals = RuntimeModalController()
    results: list[bool] = []
    service.select_account(1)
    request_password(service, modals, results.append)
    assert results == []
    assert modals.active is not None
    assert modals.active.kind is ModalKind.PASSWORD
    assert "bob" in modals.active.caption

    modals.type_text(typed)
    assert modals.confirm()
    modals.tick()
    assert results == [expected]


def test_gate_cannot_confirm_empty_password_and_cancel_fails(service) -> None:
    modals = RuntimeModalController()
    results: list[bool] = []
    service.select_account(1)
    request_password(service, modals, results.append)
    assert not modals.confirm()
    modals.cancel()
    modals.tick()
    assert results == [False]


def test_show_message_invokes_acknowledge_callback() -> None:
    modals = RuntimeModalController()
    acknowledged: list[bool] = []
    show_message(modals, "Address copied to clipboard", lambda: acknowledged.append(True))
    assert modals.active is not None
    assert modals.active.kind is ModalKind.MESSAGE
    assert not modals.active.allow_cancel
    modals.confirm()
    modals.tick()
    assert acknowledged == [True]
