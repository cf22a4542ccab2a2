"""Main interactive event loop for the wizard.

Each iteration polls geometry, redraws when something changed, and then
waits for a single key which is handled completely before the next read.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from .input import read_key as default_read_key
from .render import render_wizard, write_frame
from .terminal import TerminalController
from .ui_theme import UITheme
from .wizard import Wizard, WizardResult

logger = logging.getLogger(__name__)

KEY_POLL_TIMEOUT_MS = 100


@dataclass(frozen=True)
class LoopIO:
    """Injected input/output operations used by ``run_wizard_loop``."""

    read_key: Callable[..., str] = default_read_key
    write_frame: Callable[[list[str]], None] = write_frame
    key_timeout_ms: int = KEY_POLL_TIMEOUT_MS


def run_wizard_loop(
    wizard: Wizard,
    terminal: TerminalController,
    stdin_fd: int,
    theme: UITheme,
    io: LoopIO | None = None,
) -> WizardResult:
    """Run the wizard until an action is chosen or the user quits."""
    io = io if io is not None else LoopIO()
    last_geometry = None
    dirty = True

    with terminal.raw_mode():
        while not wizard.finished:
            geometry = wizard.geometry()
            if geometry != last_geometry:
                if last_geometry is not None:
                    logger.debug("terminal resized to %sx%s", geometry.width, geometry.height)
                wizard.handle_resize()
                last_geometry = geometry
                dirty = True

            if dirty:
                io.write_frame(render_wizard(wizard, geometry, theme))
                dirty = False

            key = io.read_key(stdin_fd, timeout_ms=io.key_timeout_ms)
            if wizard.handle_key(key):
                dirty = True

    return wizard.result()
