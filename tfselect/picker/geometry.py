"""Viewport geometry and the providers that supply it.

Geometry is read fresh for every frame; nothing here caches layout.
"""

from __future__ import annotations

import shutil
from collections.abc import Callable
from dataclasses import dataclass

DEFAULT_TERMINAL_SIZE = (80, 24)


@dataclass(frozen=True)
class Geometry:
    """Terminal size in cells. ``width <= 0`` means the width is unknown."""

    width: int
    height: int


GeometryProvider = Callable[[], Geometry]


def terminal_geometry() -> Geometry:
    """Read the live terminal size, falling back to 80x24."""
    term = shutil.get_terminal_size(DEFAULT_TERMINAL_SIZE)
    return Geometry(width=term.columns, height=term.lines)


def fixed_geometry(width: int, height: int) -> GeometryProvider:
    """Return a provider that always reports the same size."""
    geometry = Geometry(width=width, height=height)

    def provide() -> Geometry:
        return geometry

    return provide


def label_width(total_width: int, prefix_width: int) -> int:
    """Return columns left for a label after its row prefix.

    Unknown total width stays unknown (``0``); a known width never drops below
    one column so wrapping always makes progress.
    """
    if total_width <= 0:
        return 0
    return max(1, total_width - prefix_width)


def visible_rows(total_height: int, chrome_rows: int) -> int:
    """Return display lines available for list rows, floored at one."""
    return max(1, total_height - chrome_rows)
