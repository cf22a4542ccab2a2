"""Per-step key binding tables.

Each wizard step owns one table. Named keys dispatch to bound handlers;
a table may also route unbound printable characters to a text handler.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

KeyHandler = Callable[[], bool | None]
TextHandler = Callable[[str], bool | None]


@dataclass(frozen=True)
class KeyComboBinding:
    """Mapping from one or more key tokens to a single action callback."""

    combos: tuple[str, ...]
    handler: KeyHandler


class KeyComboRegistry:
    """Key-token dispatch table with optional normalization and text input."""

    def __init__(
        self,
        normalize: Callable[[str], str] | None = None,
        on_text: TextHandler | None = None,
    ) -> None:
        self._normalize = normalize or (lambda key: key)
        self._on_text = on_text
        self._handlers: dict[str, KeyHandler] = {}

    def register_bindings(self, *bindings: KeyComboBinding) -> KeyComboRegistry:
        """Register bindings in order; later combos replace earlier ones."""
        for binding in bindings:
            for combo in binding.combos:
                self._handlers[self._normalize(combo)] = binding.handler
        return self

    def dispatch(self, key: str) -> bool | None:
        """Run the handler for ``key``.

        Returns ``None`` when nothing handles the key, otherwise the handler's
        result. Single printable characters without a binding go to the text
        handler when one is configured.
        """
        handler = self._handlers.get(self._normalize(key))
        if handler is not None:
            return handler()
        if self._on_text is not None and len(key) == 1 and key.isprintable():
            return self._on_text(key)
        return None
