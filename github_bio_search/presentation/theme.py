"""Light and dark themes for the terminal output."""

from dataclasses import dataclass
from enum import Enum


class Theme(str, Enum):
    """Enum for output themes."""

    LIGHT = "light"
    DARK = "dark"


@dataclass(frozen=True)
class Palette:
    """Terminal colours used to render one theme."""

    heading: str
    text: str
    muted: str
    accent: str
    error: str
    highlight: str


PALETTES: dict[Theme, Palette] = {
    Theme.LIGHT: Palette(heading="black", text="black", muted="bright_black", accent="blue", error="red", highlight="magenta"),
    Theme.DARK: Palette(heading="bright_white", text="white", muted="bright_black", accent="bright_cyan", error="bright_red", highlight="bright_yellow"),
}


class ThemeContext:
    """Provides the current theme to the renderer and lets the user toggle it."""

    def __init__(self, theme: Theme = Theme.LIGHT) -> None:
        """Start with the given theme, light by default."""
        self.theme = theme

    @property
    def palette(self) -> Palette:
        """The colours of the current theme."""
        return PALETTES[self.theme]

    def toggle(self) -> Theme:
        """Switch between the light and dark theme and return the new one."""
        self.theme = Theme.DARK if self.theme == Theme.LIGHT else Theme.LIGHT
        return self.theme
