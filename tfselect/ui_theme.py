"""UI theme definitions and selection helpers.

A theme is resolved once at startup and handed to the renderer; nothing
mutates it afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by the renderer."""

    name: str
    reset: str
    title: str
    cursor: str
    checked: str
    item: str
    note: str
    filter_query: str


def _rgb(red: int, green: int, blue: int, *, bold: bool = False) -> str:
    prefix = "1;" if bold else ""
    return f"\033[{prefix}38;2;{red};{green};{blue}m"


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    title=_rgb(0xF8, 0xF8, 0xF2, bold=True),
    cursor=_rgb(0x8B, 0xE9, 0xFD, bold=True),
    checked=_rgb(0x50, 0xFA, 0x7B, bold=True),
    item=_rgb(0xF8, 0xF8, 0xF2),
    note=_rgb(0xBD, 0x93, 0xF9),
    filter_query=_rgb(0xFF, 0x79, 0xC6, bold=True),
)

MONO_THEME = UITheme(
    name="mono",
    reset="\033[0m",
    title="\033[1m",
    cursor="\033[1m",
    checked="\033[1m",
    item="",
    note="\033[2m",
    filter_query="\033[1;4m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    title="",
    cursor="",
    checked="",
    item="",
    note="",
    filter_query="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    MONO_THEME.name: MONO_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]
