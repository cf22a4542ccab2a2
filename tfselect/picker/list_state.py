"""Cursor, filter, and viewport state shared by the wizard's list steps.

The cursor always indexes the unfiltered row array. Movement happens within
the displayed ordering, which is either every row or the fuzzy-matched subset.
The viewport is measured in display lines, since long labels wrap onto
several lines.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from ..ansi import wrap_lines
from ..fuzzy import fuzzy_match_indices
from .geometry import Geometry, label_width, visible_rows


@dataclass(frozen=True)
class RowLayout:
    """Wrapped display lines for one displayed row."""

    index: int
    top: int
    lines: tuple[str, ...]

    @property
    def bottom(self) -> int:
        """Display line just past this row."""
        return self.top + len(self.lines)


class SelectionList:
    """Filterable, scrollable cursor over a fixed list of labels."""

    def __init__(self, labels: Sequence[str], prefix_width: int) -> None:
        self.labels: tuple[str, ...] = tuple(labels)
        self.prefix_width = prefix_width
        self.cursor = 0
        self.viewport_offset = 0
        self.query = ""
        self.matched_indices: list[int] = []

    @property
    def filter_active(self) -> bool:
        """Whether a non-empty query currently restricts the rows."""
        return self.query != ""

    def displayed_indices(self) -> list[int]:
        """Return row indices in display order."""
        if self.filter_active:
            return list(self.matched_indices)
        return list(range(len(self.labels)))

    def apply_filter(self, query: str) -> None:
        """Recompute matches for ``query`` and keep the cursor on a shown row."""
        self.query = query
        self.matched_indices = fuzzy_match_indices(self.labels, query)
        if not self.filter_active:
            return
        if not self.matched_indices:
            self.cursor = 0
            return
        if self.cursor not in self.matched_indices:
            self.cursor = self.matched_indices[0]

    def move_cursor(self, delta: int) -> bool:
        """Move ``delta`` displayed rows, clamped to the first/last shown row."""
        displayed = self.displayed_indices()
        if not displayed:
            return False
        try:
            position = displayed.index(self.cursor)
        except ValueError:
            position = 0
        target = max(0, min(len(displayed) - 1, position + delta))
        previous = self.cursor
        self.cursor = displayed[target]
        return self.cursor != previous

    def reset_cursor(self) -> None:
        """Put the cursor and viewport back on the first row."""
        self.cursor = 0
        self.viewport_offset = 0

    def layout(self, total_width: int) -> list[RowLayout]:
        """Wrap every displayed row for ``total_width`` terminal columns."""
        width = label_width(total_width, self.prefix_width)
        rows: list[RowLayout] = []
        top = 0
        for index in self.displayed_indices():
            lines = tuple(wrap_lines(self.labels[index], width))
            rows.append(RowLayout(index=index, top=top, lines=lines))
            top += len(lines)
        return rows

    def ensure_visible(self, geometry: Geometry, chrome_rows: int) -> bool:
        """Scroll minimally so the cursor row sits inside the viewport.

        Layout is recomputed from scratch because wrapped heights change with
        width. Returns whether ``viewport_offset`` changed.
        """
        rows = self.layout(geometry.width)
        window = visible_rows(geometry.height, chrome_rows)
        total = rows[-1].bottom if rows else 0
        offset = self.viewport_offset

        cursor_row = next((row for row in rows if row.index == self.cursor), None)
        if cursor_row is not None:
            if cursor_row.bottom > offset + window:
                offset = cursor_row.bottom - window
            if cursor_row.top < offset:
                offset = cursor_row.top

        offset = max(0, min(offset, max(0, total - window)))
        previous = self.viewport_offset
        self.viewport_offset = offset
        return offset != previous

    def window_lines(self, geometry: Geometry, chrome_rows: int) -> list[tuple[RowLayout, int]]:
        """Return ``(row, line_number)`` pairs currently inside the viewport."""
        window = visible_rows(geometry.height, chrome_rows)
        end = self.viewport_offset + window
        out: list[tuple[RowLayout, int]] = []
        for row in self.layout(geometry.width):
            if row.bottom <= self.viewport_offset:
                continue
            if row.top >= end:
                break
            for line_number in range(len(row.lines)):
                line_at = row.top + line_number
                if self.viewport_offset <= line_at < end:
                    out.append((row, line_number))
        return out
