"""A single character cell of a virtual terminal."""

from __future__ import annotations

from dataclasses import dataclass, field

from roguekit.colors import Color


@dataclass(frozen=True)
class VChar:
    """A glyph with foreground and background colours."""

    glyph: int = 0
    foreground: Color = field(default_factory=Color)
    background: Color = field(default_factory=Color)

    def __post_init__(self) -> None:
        # Glyphs are unsigned 32-bit values; negative inputs wrap around.
        object.__setattr__(self, "glyph", int(self.glyph) & 0xFFFFFFFF)