import pytest

from xploader.model import (
    DEFAULT_CHAR,
    DEFAULT_FOREGROUND_COLOR,
    INVISIBLE_COLOR,
    Cell,
    Color,
    Layer,
    XPFile,
)


def test_empty_cell_uses_rexpaint_defaults():
    cell = Cell.empty()
    assert cell.code == ord(" ")
    assert cell.code == DEFAULT_CHAR
    assert cell.fg == Color(r=0, g=0, b=0)
    assert cell.fg == DEFAULT_FOREGROUND_COLOR
    assert cell.bg == Color(r=255, g=0, b=255)
    assert cell.bg == INVISIBLE_COLOR
    assert cell.is_empty()


def test_default_constructed_cell_equals_empty_cell():
    assert Cell() == Cell.empty()


def test_color_is_invisible():
    assert INVISIBLE_COLOR.is_invisible()
    assert Color(255, 0, 255).is_invisible()
    assert not Color(10, 10, 10).is_invisible()
    assert not DEFAULT_FOREGROUND_COLOR.is_invisible()


def test_cell_is_empty():
    assert Cell(ord(" "), DEFAULT_FOREGROUND_COLOR, INVISIBLE_COLOR).is_empty()
    assert not Cell(ord("X"), DEFAULT_FOREGROUND_COLOR, INVISIBLE_COLOR).is_empty()


@pytest.mark.parametrize(
    "cell",
    [
        Cell(ord(" "), Color(1, 0, 0), INVISIBLE_COLOR),
        Cell(ord(" "), DEFAULT_FOREGROUND_COLOR, Color(0, 0, 0)),
    ],
)
def test_cell_with_changed_colors_is_not_empty(cell):
    assert not cell.is_empty()


def test_cell_char():
    assert Cell(ord("x")).char == "x"
    assert Cell(-1).char == "\ufffd"
    assert Cell(0xD800).char == "\ufffd"


def test_new_empty_layer():
    width, height = 5, 3
    layer = Layer.empty(width, height)
    assert layer.width == width
    assert layer.height == height
    assert not layer.column_major
    assert len(layer.cells) == height
    assert all(len(row) == width for row in layer.cells)
    for y in range(height):
        for x in range(width):
            assert layer.get_cell(x, y).is_empty()


def test_get_cell_row_major():
    layer = Layer.empty(3, 2)
    layer.cells[1][2] = Cell(ord("a"))
    assert layer.get_cell(2, 1) == Cell(ord("a"))
    assert layer.get_cell(1, 2 - 1).is_empty()


def test_get_cell_column_major():
    cells = [[Cell(ord("a")), Cell(ord("b"))], [Cell(ord("c")), Cell(ord("d"))]]
    layer = Layer(width=2, height=2, cells=cells, column_major=True)
    assert layer.get_cell(0, 1) == Cell(ord("b"))
    assert layer.get_cell(1, 0) == Cell(ord("c"))


def test_add_layer():
    xp = XPFile(version=-1)
    first = Layer.empty(2, 2)
    second = Layer.empty(4, 1)
    xp.add_layer(first)
    xp.add_layer(second)
    assert xp.layers == [first, second]
    assert xp.version == -1