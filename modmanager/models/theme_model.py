# modmanager/models/theme_model.py
from __future__ import annotations
from dataclasses import dataclass
import re

from modmanager.core.constants import DEFAULT_THEME_COLOR, THEME_APPEARANCES

_HEX_COLOR_PATTERN = re.compile(r"#[0-9A-Fa-f]{6}")


@dataclass(frozen=True)
class ModeTheme:
    """Branding used while a game mode is active. Immutable."""

    name: str
    primary_color: str = DEFAULT_THEME_COLOR
    appearance: str = "dark"  # 'light', 'dark' or 'auto'

    def __post_init__(self):
        if not _HEX_COLOR_PATTERN.fullmatch(self.primary_color):
            raise ValueError(
                f"Theme color must be in '#RRGGBB' form, got: {self.primary_color!r}"
            )
        if self.appearance not in THEME_APPEARANCES:
            raise ValueError(
                f"Theme appearance must be one of {sorted(THEME_APPEARANCES)}, "
                f"got: {self.appearance!r}"
            )


DEFAULT_THEME = ModeTheme(name="Default")
