"""Frame rendering for the wizard steps.

``render_wizard`` is side-effect free and returns styled lines; only
``write_frame`` touches the output file descriptor.
"""

from __future__ import annotations

import os
import sys

from .ansi import wrap_lines
from .picker.geometry import Geometry
from .picker.list_state import SelectionList
from .picker.targets import TargetSelection
from .ui_theme import UITheme
from .wizard import Wizard, WizardStep

NO_MATCHES_TEXT = "no matches"


def _styled(theme: UITheme, style: str, text: str) -> str:
    if not style or not text:
        return text
    return f"{style}{text}{theme.reset}"


def _wrapped_styled(theme: UITheme, style: str, text: str, width: int) -> list[str]:
    return [_styled(theme, style, line) for line in wrap_lines(text, width)]


def _render_rows(
    selection: SelectionList,
    geometry: Geometry,
    chrome_rows: int,
    theme: UITheme,
) -> list[str]:
    """Render the viewport window of ``selection`` as prefixed label lines."""
    if selection.filter_active and not selection.matched_indices:
        return [_styled(theme, theme.note, NO_MATCHES_TEXT)]

    checks = isinstance(selection, TargetSelection)
    indent = " " * selection.prefix_width
    out: list[str] = []
    for row, line_number in selection.window_lines(geometry, chrome_rows):
        label = _styled(theme, theme.item, row.lines[line_number])
        if line_number > 0:
            out.append(indent + label)
            continue
        marker = _styled(theme, theme.cursor, ">") if row.index == selection.cursor else " "
        if not checks:
            out.append(f"{marker} {label}")
            continue
        if selection.rows[row.index].selected:
            check = _styled(theme, theme.checked, "[x]")
        else:
            check = _styled(theme, theme.item, "[ ]")
        out.append(f"{marker} {check} {label}")
    return out


def render_wizard(wizard: Wizard, geometry: Geometry, theme: UITheme) -> list[str]:
    """Build the full set of screen lines for the wizard's current step."""
    if wizard.finished:
        return []
    width = geometry.width
    header = wizard.header_lines()
    header_styles = [theme.title, theme.note]
    if wizard.step == WizardStep.TARGETS:
        header_styles.append(theme.filter_query)

    lines: list[str] = []
    for idx, text in enumerate(header):
        style = header_styles[idx] if idx < len(header_styles) else ""
        lines.extend(_wrapped_styled(theme, style, text, width))

    lines.extend(_render_rows(wizard.active_list, geometry, wizard.chrome_rows(width), theme))

    for text in wizard.footer_lines():
        lines.extend(_wrapped_styled(theme, theme.note, text, width))
    return lines


def write_frame(lines: list[str], fd: int | None = None) -> None:
    """Clear the screen and draw ``lines`` from the top-left corner."""
    out = ["\033[H\033[J", "\r\n".join(lines)]
    target = sys.stdout.fileno() if fd is None else fd
    os.write(target, "".join(out).encode("utf-8", errors="replace"))
