"""Screen states for the wallet window."""

from enum import Enum, auto


class ScreenState(Enum):
    """Top-level screens. Exactly one is displayed at a time."""

    LOADING = auto()
    ACCOUNTS = auto()
    BALANCES = auto()
    HISTORY = auto()
    TRANSFER = auto()
    SENDING = auto()
    CONFIRMING = auto()
    SETTINGS = auto()

    @property
    def label(self) -> str:
        return self.name.capitalize()


INITIAL_STATE = ScreenState.LOADING
BOTTOM_MENU: tuple[ScreenState, ...] = (ScreenState.BALANCES, ScreenState.HISTORY)
