"""Target multi-select with the ``all`` mutual-exclusion rule.

Row 0 is always the ``all`` sentinel. Selecting it clears every specific
target, and selecting any specific target clears it.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .list_state import SelectionList

ALL_TARGET = "all"
TARGET_PREFIX_WIDTH = len("> [x] ")
EMPTY_SELECTION_NOTE = "select at least one target, or 'all'"


@dataclass
class TargetRow:
    label: str
    selected: bool = False


class TargetSelection(SelectionList):
    """Selection list over ``all`` plus the scanned targets."""

    def __init__(self, targets: Sequence[str], *, auto_select_all: bool = False) -> None:
        self.rows: list[TargetRow] = [TargetRow(ALL_TARGET)]
        self.rows.extend(TargetRow(target) for target in targets)
        super().__init__([row.label for row in self.rows], TARGET_PREFIX_WIDTH)
        self.auto_select_all = auto_select_all
        self.note = ""

    @property
    def all_selected(self) -> bool:
        return self.rows[0].selected

    def select_all_only(self) -> None:
        """Select the ``all`` row and clear every specific target."""
        for row in self.rows:
            row.selected = False
        self.rows[0].selected = True

    def toggle(self, index: int) -> None:
        """Flip selection of ``index`` while keeping ``all`` exclusive."""
        if not 0 <= index < len(self.rows):
            return
        if index == 0:
            if self.rows[0].selected:
                self.rows[0].selected = False
            else:
                self.select_all_only()
            return
        if self.rows[0].selected:
            self.rows[0].selected = False
        self.rows[index].selected = not self.rows[index].selected

    def toggle_cursor(self) -> None:
        """Toggle the row under the cursor unless a filter hides every row."""
        if self.filter_active and not self.matched_indices:
            return
        self.toggle(self.cursor)
        if self.has_selection():
            self.note = ""

    def has_selection(self) -> bool:
        """Whether any row, ``all`` included, is selected."""
        return any(row.selected for row in self.rows)

    def confirm(self) -> bool:
        """Validate the selection before leaving the target step.

        An empty selection is refused with a note, unless the legacy
        ``auto_select_all`` behaviour was requested.
        """
        if not self.has_selection():
            if not self.auto_select_all:
                self.note = EMPTY_SELECTION_NOTE
                return False
            self.select_all_only()
        self.note = ""
        return True

    def selected_targets(self) -> list[str]:
        """Return specific targets to pass on, empty when ``all`` was chosen."""
        if self.all_selected:
            return []
        return [row.label for row in self.rows[1:] if row.selected]
