"""In-memory model of REXPaint .xp images: colors, cells, layers and files."""

from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_CHAR = ord(" ")
"""Code point of blank cells in REXPaint."""


@dataclass(frozen=True)
class Color:
    """An RGB color with 8-bit channels."""

    r: int = 0
    g: int = 0
    b: int = 0

    def is_invisible(self) -> bool:
        """Return True for absolute magenta, which REXPaint never renders."""
        return self == INVISIBLE_COLOR


DEFAULT_FOREGROUND_COLOR = Color(0, 0, 0)
"""Initial foreground color of blank cells in REXPaint."""

INVISIBLE_COLOR = Color(255, 0, 255)
"""Absolute magenta: never rendered, and the initial background of blank cells."""


@dataclass(frozen=True)
class Cell:
    """A single cell of a layer: a code point with foreground and background colors."""

    code: int = DEFAULT_CHAR
    fg: Color = DEFAULT_FOREGROUND_COLOR
    bg: Color = INVISIBLE_COLOR

    @property
    def char(self) -> str:
        """The cell's character, or U+FFFD when the code point is not valid."""
        if 0xD800 <= self.code <= 0xDFFF:
            return "\ufffd"
        try:
            return chr(self.code)
        except (ValueError, OverflowError):
            return "\ufffd"

    def is_empty(self) -> bool:
        """Return True when the cell is exactly as REXPaint initialises it."""
        return (
            self.code == DEFAULT_CHAR
            and self.fg == DEFAULT_FOREGROUND_COLOR
            and self.bg.is_invisible()
        )

    @classmethod
    def empty(cls) -> Cell:
        """Return a cell the artist has not touched."""
        return cls(DEFAULT_CHAR, DEFAULT_FOREGROUND_COLOR, INVISIBLE_COLOR)


@dataclass
class Layer:
    """One layer of an XP file.

    ``cells`` is indexed ``[y][x]`` unless ``column_major`` is set, in which
    case it is indexed ``[x][y]``.
    """

    width: int
    height: int
    cells: list[list[Cell]]
    column_major: bool = False

    def get_cell(self, x: int, y: int) -> Cell:
        """Return the cell at logical coordinates (x, y), whatever the layout."""
        if self.column_major:
            return self.cells[x][y]
        return self.cells[y][x]

    @classmethod
    def empty(cls, width: int, height: int) -> Layer:
        """Return a row-major layer of the given size filled with empty cells."""
        cells = [[Cell.empty() for _ in range(width)] for _ in range(height)]
        return cls(width=width, height=height, cells=cells)


@dataclass
class XPFile:
    """A parsed REXPaint .xp file."""

    version: int = 0
    layers: list[Layer] = field(default_factory=list)

    def add_layer(self, layer: Layer) -> None:
        """Append a layer to the file."""
        self.layers.append(layer)