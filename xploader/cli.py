"""Command that prints a summary of an .xp file and renders its layers."""

from __future__ import annotations

import os
import sys

from xploader.loader import XPFormatError, load_xp_file
from xploader.model import Layer, XPFile

_RESET = "\033[0m"


def _count_non_empty(layer: Layer) -> int:
    return sum(
        not layer.get_cell(x, y).is_empty()
        for y in range(layer.height)
        for x in range(layer.width)
    )


def format_summary(xp: XPFile, path: str) -> str:
    """Return the textual summary of a file and each of its layers."""
    lines = [
        f"XP File: {path}",
        f"Version: {xp.version}",
        f"Number of Layers: {len(xp.layers)}",
        "",
    ]
    for index, layer in enumerate(xp.layers):
        lines.append(f"Layer {index}:")
        lines.append(f"  Dimensions: {layer.width}x{layer.height}")
        lines.append(f"  Non-empty cells: {_count_non_empty(layer)}")
        lines.append("")
    return "\n".join(lines) + "\n"


def _render_cell(layer: Layer, x: int, y: int) -> str:
    cell = layer.get_cell(x, y)
    if cell.is_empty():
        return _RESET + " "
    parts = []
    if not cell.fg.is_invisible():
        parts.append(f"\033[38;2;{cell.fg.r};{cell.fg.g};{cell.fg.b}m")
    if not cell.bg.is_invisible():
        parts.append(f"\033[48;2;{cell.bg.r};{cell.bg.g};{cell.bg.b}m")
    parts.append(cell.char)
    parts.append(_RESET)
    return "".join(parts)


def render_layer(index: int, layer: Layer) -> str:
    """Render a layer inside a box using 24-bit ANSI colors."""
    border = "─" * layer.width
    lines = [f"Layer {index} ({layer.width}x{layer.height}):", f"┌{border}┐"]
    for y in range(layer.height):
        row = "".join(_render_cell(layer, x, y) for x in range(layer.width))
        lines.append(f"│{row}│")
    lines.append(f"└{border}┘")
    return "\n".join(lines) + "\n"


def main(argv: list[str] | None = None) -> int:
    """Run the command; ``argv`` excludes the program name."""
    if argv is None:
        argv = sys.argv[1:]
    if not argv:
        program = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "xpinfo"
        sys.stderr.write(f"Usage: {program} <file.xp>\n")
        return 1

    path = argv[0]
    try:
        xp = load_xp_file(path)
    except (OSError, XPFormatError) as exc:
        sys.stderr.write(f"Failed to load XP file: {exc}\n")
        return 1

    out = sys.stdout
    out.write(format_summary(xp, path))
    out.write("Rendered layers\n")
    for index, layer in enumerate(xp.layers):
        out.write(render_layer(index, layer))
        out.write("\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())