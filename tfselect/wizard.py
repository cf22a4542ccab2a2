"""Two-step target/action wizard driven by decoded key tokens.

The wizard owns all interactive state and never touches the terminal: key
tokens come in through :meth:`Wizard.handle_key`, geometry comes from an
injected provider, and the renderer reads the result back out.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum

from .ansi import wrapped_height
from .keys import KeyComboBinding, KeyComboRegistry
from .picker.actions import ActionList
from .picker.geometry import Geometry, GeometryProvider, visible_rows
from .picker.list_state import SelectionList
from .picker.targets import TargetSelection

logger = logging.getLogger(__name__)

TARGET_TITLE = "Select targets"
TARGET_HINT = "Type: filter, Space: toggle, Enter: confirm, Esc: quit"
ACTION_TITLE = "Select action"
ACTION_HINT = "Enter: run, q: quit"
NO_TARGETS_NOTE = "No .tf targets found; selecting 'all' will run without -target."


class WizardStep(Enum):
    TARGETS = "targets"
    ACTION = "action"
    DONE = "done"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class WizardResult:
    """Outcome of the interactive session. ``action`` is ``None`` on cancel."""

    action: str | None
    targets: list[str] = field(default_factory=list)

    @property
    def cancelled(self) -> bool:
        return self.action is None


class Wizard:
    """State machine for the target step followed by the action step."""

    def __init__(
        self,
        targets: Sequence[str],
        geometry: GeometryProvider,
        *,
        auto_select_all: bool = False,
    ) -> None:
        self.geometry = geometry
        self.targets = TargetSelection(targets, auto_select_all=auto_select_all)
        self.actions = ActionList()
        self.step = WizardStep.TARGETS
        self.action: str | None = None
        if not targets:
            self.targets.note = NO_TARGETS_NOTE

        self._global_keys = KeyComboRegistry().register_bindings(
            KeyComboBinding(("CTRL_C", "ESC"), self.cancel),
        )
        self._target_keys = KeyComboRegistry(on_text=self._append_filter_char).register_bindings(
            KeyComboBinding(("UP",), lambda: self._move(-1)),
            KeyComboBinding(("DOWN",), lambda: self._move(1)),
            KeyComboBinding(("PAGE_UP",), lambda: self._move(-self._page_size())),
            KeyComboBinding(("PAGE_DOWN",), lambda: self._move(self._page_size())),
            KeyComboBinding(("HOME",), lambda: self._move(-len(self.targets.labels))),
            KeyComboBinding(("END",), lambda: self._move(len(self.targets.labels))),
            KeyComboBinding((" ",), self._toggle_target),
            KeyComboBinding(("ENTER",), self._confirm_targets),
            KeyComboBinding(("BACKSPACE",), self._erase_filter_char),
            KeyComboBinding(("CTRL_U",), self._clear_filter),
        )
        self._action_keys = KeyComboRegistry(normalize=str.lower).register_bindings(
            KeyComboBinding(("UP", "k"), lambda: self._move(-1)),
            KeyComboBinding(("DOWN", "j"), lambda: self._move(1)),
            KeyComboBinding(("ENTER",), self._choose_action),
            KeyComboBinding(("q",), self.cancel),
        )
        self.ensure_visible()

    @property
    def finished(self) -> bool:
        """Whether the session has ended, by a chosen action or a cancel."""
        return self.step in {WizardStep.DONE, WizardStep.CANCELLED}

    @property
    def active_list(self) -> SelectionList:
        """The list that cursor keys move on the current step."""
        if self.step == WizardStep.TARGETS:
            return self.targets
        return self.actions

    def header_lines(self) -> list[str]:
        """Chrome text above the list, ending with the blank separator."""
        if self.step == WizardStep.TARGETS:
            return [TARGET_TITLE, TARGET_HINT, f"Filter: {self.targets.query}", ""]
        return [ACTION_TITLE, ACTION_HINT, ""]

    def footer_lines(self) -> list[str]:
        """Chrome below the list: the target-step note, when one is set."""
        if self.step == WizardStep.TARGETS and self.targets.note:
            return ["", self.targets.note]
        return []

    def chrome_rows(self, width: int) -> int:
        """Display lines used by header and footer at ``width`` columns."""
        return sum(wrapped_height(line, width) for line in self.header_lines() + self.footer_lines())

    def ensure_visible(self) -> bool:
        """Re-fit the active list's viewport to the current geometry."""
        if self.finished:
            return False
        geometry: Geometry = self.geometry()
        return self.active_list.ensure_visible(geometry, self.chrome_rows(geometry.width))

    def handle_resize(self) -> bool:
        """Recompute the viewport after a terminal size change."""
        return self.ensure_visible()

    def handle_key(self, key: str) -> bool:
        """Apply one key token. Returns whether anything may need a redraw."""
        if self.finished or not key:
            return False
        handled = self._global_keys.dispatch(key)
        if handled is None:
            if self.step == WizardStep.TARGETS:
                handled = self._target_keys.dispatch(key)
            else:
                handled = self._action_keys.dispatch(key)
        if not handled:
            return False
        self.ensure_visible()
        return True

    def cancel(self) -> bool:
        """Abandon the session from any step; no action will run."""
        logger.debug("wizard cancelled from %s step", self.step.value)
        self.step = WizardStep.CANCELLED
        self.action = None
        return True

    def result(self) -> WizardResult:
        """Return the chosen action and targets, or a cancelled result."""
        if self.step != WizardStep.DONE or self.action is None:
            return WizardResult(action=None)
        return WizardResult(action=self.action, targets=self.targets.selected_targets())

    def _page_size(self) -> int:
        geometry = self.geometry()
        return visible_rows(geometry.height, self.chrome_rows(geometry.width))

    def _move(self, delta: int) -> bool:
        return self.active_list.move_cursor(delta)

    def _toggle_target(self) -> bool:
        self.targets.toggle_cursor()
        return True

    def _confirm_targets(self) -> bool:
        if not self.targets.confirm():
            logger.debug("confirm refused: empty target selection")
            return True
        self.actions.reset_cursor()
        self.step = WizardStep.ACTION
        logger.debug("targets confirmed: %s", self.targets.selected_targets() or ["all"])
        return True

    def _append_filter_char(self, ch: str) -> bool:
        self.targets.apply_filter(self.targets.query + ch)
        return True

    def _erase_filter_char(self) -> bool:
        if not self.targets.query:
            return False
        self.targets.apply_filter(self.targets.query[:-1])
        return True

    def _clear_filter(self) -> bool:
        if not self.targets.query:
            return False
        self.targets.apply_filter("")
        return True

    def _choose_action(self) -> bool:
        self.action = self.actions.current
        self.step = WizardStep.DONE
        logger.debug("action chosen: %s", self.action)
        return True
