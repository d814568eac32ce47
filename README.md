# xploader

Read, write and inspect REXPaint `.xp` files.

An `.xp` file holds a format version followed by one or more layers. Each layer is a grid of cells,
and each cell has a code point, a foreground colour and a background colour. Files are normally
gzip-compressed, but uncompressed files load just as well: the loader detects which kind it is
given from the first two bytes.

The package has no dependencies beyond the Python standard library and needs Python 3.10 or later.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Library use

```python
from xploader.loader import load_xp_file, save_xp_file, marshal
from xploader.model import Cell, Color, Layer, XPFile

xp = load_xp_file("art.xp")
print(xp.version, len(xp.layers))

layer = xp.layers[0]
cell = layer.get_cell(0, 0)
print(cell.code, cell.char, cell.fg, cell.bg, cell.is_empty())

# Build a new image from scratch.
canvas = Layer.empty(10, 5)
canvas.cells[0][0] = Cell(code=ord("@"), fg=Color(255, 255, 255), bg=Color(0, 0, 0))
image = XPFile(version=-1)
image.add_layer(canvas)

save_xp_file(image, "out.xp")                       # gzip, best compression
save_xp_file(image, "out_plain.xp", compress=False)
raw = marshal(image)                                # uncompressed bytes
```

### The model (`xploader.model`)

- `Color(r, g, b)` is a frozen dataclass with 8-bit channels. Magenta, `Color(255, 0, 255)`, is
  REXPaint's invisible colour and `Color.is_invisible()` reports it. It is available as
  `INVISIBLE_COLOR`; `DEFAULT_FOREGROUND_COLOR` is black.
- `Cell(code, fg, bg)` is a frozen dataclass. `code` is the integer code point; the `char`
  property gives it as a string, or U+FFFD when the code point is not a valid character.
  `Cell.empty()` returns a cell as REXPaint initialises it (a space, black foreground, invisible
  background), and `Cell.is_empty()` is true for such a cell, one the artist never painted.
- `Layer(width, height, cells, column_major=False)` holds a grid of cells. `Layer.empty(width,
  height)` returns a row-major layer filled with empty cells.
- `XPFile(version=0, layers=[])` holds the layers; `XPFile.add_layer(layer)` appends one.

Layers are row-major by default, so `layer.cells[y][x]` is the cell at column `x`, row `y`.
Pass `column_major=True` to any of the loading functions to get `layer.cells[x][y]` instead.
`Layer.get_cell(x, y)` works the same way for either layout.

### Loading and saving (`xploader.loader`)

- `load_xp_file(path, column_major=False)` reads a file from disk, compressed or not.
- `load_xp(stream, column_major=False)` reads from a binary file object and detects gzip.
- `load_gzipped_xp(stream, column_major=False)` reads a gzip-compressed stream only.
- `load_plain_xp(stream, column_major=False)` reads an uncompressed stream only.
- `save_xp_file(xp, path, compress=True, level=BEST_COMPRESSION)` writes a file, gzip-compressed
  unless `compress=False`.
- `marshal(xp)` returns the uncompressed bytes of a file.
- `gzip_data(data, level)` compresses bytes into the gzip format. `level` is one of
  `HUFFMAN_ONLY` (-2), `DEFAULT_COMPRESSION` (-1), `NO_COMPRESSION` (0), `BEST_SPEED` (1) up to
  `BEST_COMPRESSION` (9); any other value raises `ValueError`.

Saved data always lists cells in REXPaint's own column-major order, whichever layout the layers
use in memory, so loading a plain file and marshalling it gives back the same bytes.

Data that is truncated or otherwise malformed raises `xploader.loader.XPFormatError`, a subclass
of `ValueError`; the message names the part that could not be read. A layer whose values do not
fit the format raises it on writing too. A missing file raises the usual `OSError`.

## Command line

```
xpinfo art.xp
```

This prints the file's version, the number of layers, and for each layer its size and the count of
painted (non-empty) cells. It then draws every layer inside a box in the terminal using 24-bit ANSI
colours; invisible colours are left undrawn. Without an argument it prints a usage line, and when
the file cannot be loaded it prints the error; in both cases it exits with status 1.

The same output is available from Python: `xploader.cli.format_summary(xp, path)` returns the
summary text and `xploader.cli.render_layer(index, layer)` returns one drawn layer.