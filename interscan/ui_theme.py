"""UI theme definitions and selection helpers.

Themes map semantic ``StyleTag`` values to ANSI start sequences. Sequences
come from the pygments console palette so names stay readable.
"""

from __future__ import annotations

from dataclasses import dataclass

from pygments.console import codes

from .tree_model.types import StyleTag


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by sinks."""

    name: str
    reset: str
    default: str
    folder: str
    extension: str
    tree_marker: str
    prompt: str

    def sequence_for(self, style: StyleTag) -> str:
        """Return the ANSI start sequence for ``style``."""
        return getattr(self, style.value)

    def paint(self, text: str, style: StyleTag) -> str:
        """Wrap ``text`` in the sequence for ``style`` and a reset."""
        if not text:
            return ""
        start = self.sequence_for(style)
        if not start:
            return text
        return f"{start}{text}{self.reset}"


# Folders blue, extensions and prompt red, markers magenta.
CLASSIC_THEME = UITheme(
    name="classic",
    reset=codes["reset"],
    default="",
    folder=codes["blue"],
    extension=codes["red"],
    tree_marker=codes["magenta"],
    prompt=codes["red"],
)

BRIGHT_THEME = UITheme(
    name="bright",
    reset=codes["reset"],
    default="",
    folder=codes["bold"] + codes["brightblue"],
    extension=codes["brightred"],
    tree_marker=codes["brightmagenta"],
    prompt=codes["brightred"],
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    default="",
    folder="",
    extension="",
    tree_marker="",
    prompt="",
)

DEFAULT_THEME = CLASSIC_THEME

_THEMES: dict[str, UITheme] = {
    CLASSIC_THEME.name: CLASSIC_THEME,
    BRIGHT_THEME.name: BRIGHT_THEME,
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


__all__ = [
    "UITheme",
    "CLASSIC_THEME",
    "BRIGHT_THEME",
    "PLAIN_THEME",
    "DEFAULT_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
