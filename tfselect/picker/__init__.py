"""List state for the wizard steps: targets, actions, and viewport geometry."""

from __future__ import annotations

from .actions import ACTIONS, ActionList
from .geometry import Geometry, GeometryProvider, fixed_geometry, terminal_geometry
from .list_state import RowLayout, SelectionList
from .targets import ALL_TARGET, EMPTY_SELECTION_NOTE, TargetRow, TargetSelection

__all__ = [
    "ACTIONS",
    "ALL_TARGET",
    "EMPTY_SELECTION_NOTE",
    "ActionList",
    "Geometry",
    "GeometryProvider",
    "RowLayout",
    "SelectionList",
    "TargetRow",
    "TargetSelection",
    "fixed_geometry",
    "terminal_geometry",
]
