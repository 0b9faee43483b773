"""Key-token to callback tables used by the mode handlers."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass


@dataclass(frozen=True)
class KeyComboBinding:
    """Key tokens that all trigger the same zero-argument action."""

    combos: tuple[str, ...]
    handler: Callable[[], None]


class KeyComboRegistry:
    """Lookup table from a decoded key token to its action.

    A later binding for the same token replaces the earlier one.
    """

    def __init__(self) -> None:
        self._handlers: dict[str, Callable[[], None]] = {}

    def register_binding(self, binding: KeyComboBinding) -> KeyComboRegistry:
        for combo in binding.combos:
            self._handlers[combo] = binding.handler
        return self

    def register_bindings(self, *bindings: KeyComboBinding) -> KeyComboRegistry:
        """Add each binding in order; chainable."""
        for binding in bindings:
            self.register_binding(binding)
        return self

    def dispatch(self, key: str) -> bool:
        """Run the action for ``key``; ``False`` means the key is unbound."""
        handler = self._handlers.get(key)
        if handler is None:
            return False
        handler()
        return True
