"""Character-grid terminals: a dense grid console and a sparse free-placement layer.

These hold the cell data that a renderer draws. Drawing itself is left to
whatever graphics back end uses them.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from roguekit.colors import BLACK, WHITE, Color
from roguekit.vchar import VChar

# Global display scale applied when converting pixel sizes to character cells.
scale_factor: float = 1.0

_BLANK = VChar(32, WHITE, BLACK)

_SINGLE = {"h": 196, "v": 179, "tl": 218, "tr": 191, "bl": 192, "br": 217}
_DOUBLE = {"h": 205, "v": 186, "tl": 201, "tr": 187, "bl": 200, "br": 188}


def _check_font_size(font_size: tuple[int, int]) -> tuple[int, int]:
    width, height = font_size
    if width <= 0 or height <= 0:
        raise ValueError(f"font size must be positive, got {font_size!r}")
    return int(width), int(height)


def _cells_for_pixels(pixels: int, font_dimension: int) -> int:
    return int(pixels / (font_dimension * scale_factor))


class VirtualTerminal:
    """A grid of VChar cells, addressed by x/y or by flat index."""

    def __init__(
        self,
        font_size: tuple[int, int],
        x: int = 0,
        y: int = 0,
        background: bool = True,
    ) -> None:
        self.font_size = _check_font_size(font_size)
        self.offset_x = x
        self.offset_y = y
        self.has_background = background
        self.term_width = 0
        self.term_height = 0
        self.visible = True
        self.dirty = True
        self.alpha = 255
        self.tint = Color(255, 255, 255)
        self._buffer: list[VChar] = []

    @property
    def cells(self) -> tuple[VChar, ...]:
        """A snapshot of the whole cell buffer, row by row."""
        return tuple(self._buffer)

    def resize_pixels(self, width: int, height: int) -> None:
        """Resize to as many cells as fit in width x height pixels."""
        font_w, font_h = self.font_size
        self.resize_chars(
            _cells_for_pixels(width, font_w), _cells_for_pixels(height, font_h)
        )

    def resize_chars(self, width: int, height: int) -> None:
        """Resize to width x height cells, keeping existing cell contents."""
        self.dirty = True
        num_chars = max(width * (height + 1), 0)
        if num_chars < len(self._buffer):
            del self._buffer[num_chars:]
        else:
            self._buffer.extend(VChar() for _ in range(num_chars - len(self._buffer)))
        self.term_width = width
        self.term_height = height

    def clear(self, target: VChar | None = None) -> None:
        """Fill every cell with target, or with white-on-black spaces."""
        self.dirty = True
        fill_with = _BLANK if target is None else target
        self._buffer = [fill_with] * len(self._buffer)

    def at(self, x: int, y: int) -> int:
        """Flat buffer index of cell x/y."""
        return y * self.term_width + x

    def set_index(self, idx: int, target: VChar) -> None:
        """Set the cell at a flat index; indices outside the buffer are ignored."""
        self.dirty = True
        if 0 <= idx < len(self._buffer):
            self._buffer[idx] = target

    def set_char(self, x: int, y: int, target: VChar) -> None:
        self.set_index(self.at(x, y), target)

    def get_char(self, x: int, y: int) -> VChar:
        idx = self.at(x, y)
        if not 0 <= idx < len(self._buffer):
            raise IndexError(f"cell {x},{y} is outside the terminal")
        return self._buffer[idx]

    def print(
        self,
        x: int,
        y: int,
        text: str,
        fg: Color = WHITE,
        bg: Color = BLACK,
    ) -> None:
        """Write text starting at x/y, continuing along the buffer."""
        start = self.at(x, y)
        for offset, ch in enumerate(text):
            self.set_index(start + offset, VChar(ord(ch), fg, bg))

    def print_center(
        self, y: int, text: str, fg: Color = WHITE, bg: Color = BLACK
    ) -> None:
        """Write text on row y, centred on the terminal width."""
        self.print(self.term_width // 2 - len(text) // 2, y, text, fg, bg)

    def box(
        self,
        x: int,
        y: int,
        w: int,
        h: int,
        fg: Color = WHITE,
        bg: Color = BLACK,
        double_lines: bool = False,
    ) -> None:
        """Draw a line box with corners at x/y and x+w/y+h."""
        glyphs = _DOUBLE if double_lines else _SINGLE
        for i in range(1, w):
            self.set_char(x + i, y, VChar(glyphs["h"], fg, bg))
            self.set_char(x + i, y + h, VChar(glyphs["h"], fg, bg))
        for i in range(1, h):
            self.set_char(x, y + i, VChar(glyphs["v"], fg, bg))
            self.set_char(x + w, y + i, VChar(glyphs["v"], fg, bg))
        self.set_char(x, y, VChar(glyphs["tl"], fg, bg))
        self.set_char(x + w, y, VChar(glyphs["tr"], fg, bg))
        self.set_char(x, y + h, VChar(glyphs["bl"], fg, bg))
        self.set_char(x + w, y + h, VChar(glyphs["br"], fg, bg))

    def border(
        self, fg: Color = WHITE, bg: Color = BLACK, double_lines: bool = False
    ) -> None:
        """Draw a box around the whole terminal."""
        self.box(0, 0, self.term_width - 1, self.term_height - 1, fg, bg, double_lines)

    def fill(
        self,
        left_x: int,
        top_y: int,
        right_x: int,
        bottom_y: int,
        glyph: int,
        fg: Color = WHITE,
        bg: Color = BLACK,
    ) -> None:
        """Fill the half-open rectangle [left_x, right_x) x [top_y, bottom_y)."""
        cell = VChar(glyph & 0xFF, fg, bg)
        for y in range(top_y, bottom_y):
            for x in range(left_x, right_x):
                self.set_char(x, y, cell)


@dataclass
class XChar:
    """A freely placed character on a sparse terminal."""

    glyph: int = 0
    foreground: Color = field(default_factory=Color)
    x: float = 0.0
    y: float = 0.0
    angle: int = 0
    opacity: int = 255
    has_background: bool = False
    background: Color = field(default_factory=Color)


class SparseTerminal:
    """A layer of individually placed, possibly rotated characters."""

    def __init__(self, font_size: tuple[int, int], x: int = 0, y: int = 0) -> None:
        self.font_size = _check_font_size(font_size)
        self.offset_x = x
        self.offset_y = y
        self.term_width = 0
        self.term_height = 0
        self.visible = True
        self.dirty = True
        self.alpha = 255
        self.tint = Color(255, 255, 255)
        self._buffer: list[XChar] = []

    @property
    def chars(self) -> tuple[XChar, ...]:
        """The characters added since the last clear, in order."""
        return tuple(self._buffer)

    def resize_pixels(self, width: int, height: int) -> None:
        font_w, font_h = self.font_size
        self.resize_chars(
            _cells_for_pixels(width, font_w), _cells_for_pixels(height, font_h)
        )

    def resize_chars(self, width: int, height: int) -> None:
        self.dirty = True
        self.term_width = width
        self.term_height = height

    def clear(self) -> None:
        self.dirty = True
        self._buffer.clear()

    def add(self, target: XChar) -> None:
        self.dirty = True
        self._buffer.append(target)