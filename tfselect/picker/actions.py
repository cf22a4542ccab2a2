"""Fixed terraform actions offered in the second wizard step."""

from __future__ import annotations

from .list_state import SelectionList

ACTIONS: tuple[str, ...] = ("plan", "apply")
ACTION_PREFIX_WIDTH = len("> ")


class ActionList(SelectionList):
    """Single-select cursor over :data:`ACTIONS`."""

    def __init__(self) -> None:
        super().__init__(ACTIONS, ACTION_PREFIX_WIDTH)

    @property
    def current(self) -> str:
        return self.labels[self.cursor]
