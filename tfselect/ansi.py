"""Label wrapping and display-line measurement.

Wrapping is a hard cut on code points so layout stays deterministic
between frames. Styling is applied after wrapping, so escape sequences are
never part of wrapped labels.
"""

from __future__ import annotations


def wrap_lines(text: str, width: int) -> list[str]:
    """Split ``text`` into display lines no longer than ``width``.

    Embedded newlines split first and blank sub-lines are kept. Each sub-line
    is then cut into consecutive ``width``-sized chunks with a shorter tail.
    A non-positive ``width`` means the terminal width is unknown, so sub-lines
    are returned whole.
    """
    lines = text.split("\n")
    if width <= 0:
        return lines

    out: list[str] = []
    for line in lines:
        if not line:
            out.append("")
            continue
        while len(line) > width:
            out.append(line[:width])
            line = line[width:]
        out.append(line)
    return out


def wrapped_height(text: str, width: int) -> int:
    """Return number of display lines ``text`` occupies at ``width``."""
    return len(wrap_lines(text, width))
