"""Action-id routing for screen and modal buttons."""

from __future__ import annotations

from dataclasses import dataclass

from guikit.api.action_dispatch import DirectActionHandler, PrefixedActionHandler


@dataclass(frozen=True, slots=True)
class RuntimeActionDispatcher:
    """Resolve and dispatch action ids by direct match or prefix handlers."""

    direct_handlers: dict[str, DirectActionHandler]
    prefixed_handlers: tuple[tuple[str, PrefixedActionHandler], ...] = ()

    def dispatch(self, action_id: str) -> bool | None:
        """Dispatch action id. Return None when no handler exists."""
        handler = self.direct_handlers.get(action_id)
        if handler is not None:
            return handler()
        for prefix, prefixed_handler in self.prefixed_handlers:
            if action_id.startswith(prefix):
                # Prefixed ids carry their argument after the prefix, e.g. "account_open:2".
                return prefixed_handler(action_id[len(prefix) :])
        return None

    def handles(self, action_id: str) -> bool:
        if action_id in self.direct_handlers:
            return True
        return any(action_id.startswith(prefix) for prefix, _ in self.prefixed_handlers)


ActionDispatcher = RuntimeActionDispatcher
