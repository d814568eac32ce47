"""Reading and writing REXPaint .xp files, plain or gzip-compressed."""

from __future__ import annotations

import gzip
import io
import os
import struct
import zlib
from typing import BinaryIO, Union

from xploader.model import Cell, Color, Layer, XPFile

GZIP_MAGIC = b"\x1f\x8b"

HUFFMAN_ONLY = -2
DEFAULT_COMPRESSION = -1
NO_COMPRESSION = 0
BEST_SPEED = 1
BEST_COMPRESSION = 9

_HEADER = struct.Struct("<iI")
_DIMENSIONS = struct.Struct("<II")
_CELL = struct.Struct("<i6B")

PathLike = Union[str, "os.PathLike[str]"]


class XPFormatError(ValueError):
    """Raised when XP data is truncated, corrupt or cannot be encoded."""


def _read_exact(stream: BinaryIO, size: int, what: str) -> bytes:
    try:
        data = stream.read(size)
    except (EOFError, zlib.error, gzip.BadGzipFile) as exc:
        raise XPFormatError(f"failed to read {what}: {exc}") from exc
    if len(data) < size:
        raise XPFormatError(f"failed to read {what}: unexpected end of data")
    return data


def load_xp_file(path: PathLike, *, column_major: bool = False) -> XPFile:
    """Load an .xp file from disk, compressed or not."""
    with open(path, "rb") as stream:
        return load_xp(stream, column_major=column_major)


def load_xp(stream: BinaryIO, *, column_major: bool = False) -> XPFile:
    """Load XP data from a binary stream, detecting gzip compression."""
    data = stream.read()
    if len(data) < len(GZIP_MAGIC):
        raise XPFormatError("failed to detect gzip: unexpected end of data")
    buffer = io.BytesIO(data)
    if data.startswith(GZIP_MAGIC):
        return load_gzipped_xp(buffer, column_major=column_major)
    return load_plain_xp(buffer, column_major=column_major)


def load_gzipped_xp(stream: BinaryIO, *, column_major: bool = False) -> XPFile:
    """Load gzip-compressed XP data; fails when the data is not gzipped."""
    with gzip.GzipFile(fileobj=stream, mode="rb") as decompressed:
        return load_plain_xp(decompressed, column_major=column_major)


def load_plain_xp(stream: BinaryIO, *, column_major: bool = False) -> XPFile:
    """Load uncompressed XP data from a binary stream."""
    version, layer_count = _HEADER.unpack(_read_exact(stream, _HEADER.size, "header"))
    xp = XPFile(version=version)
    for index in range(layer_count):
        try:
            xp.add_layer(_read_layer(stream, column_major))
        except XPFormatError as exc:
            raise XPFormatError(f"failed to read layer {index}: {exc}") from exc
    return xp


def _read_layer(stream: BinaryIO, column_major: bool) -> Layer:
    width, height = _DIMENSIONS.unpack(
        _read_exact(stream, _DIMENSIONS.size, "layer dimensions")
    )
    expected = width * height * _CELL.size
    data = stream_read_cells(stream, expected, height)

    flat = [
        Cell(code, Color(fr, fg, fb), Color(br, bg, bb))
        for code, fr, fg, fb, br, bg, bb in _CELL.iter_unpack(data)
    ]
    columns = [flat[x * height:(x + 1) * height] for x in range(width)]
    if column_major:
        cells = columns
    else:
        cells = [[column[y] for column in columns] for y in range(height)]
    return Layer(width=width, height=height, cells=cells, column_major=column_major)


def stream_read_cells(stream: BinaryIO, size: int, height: int) -> bytes:
    """Read a layer's cell block, reporting the first cell that is missing."""
    try:
        data = stream.read(size)
    except (EOFError, zlib.error, gzip.BadGzipFile) as exc:
        raise XPFormatError(f"failed to read cells: {exc}") from exc
    if len(data) < size:
        missing = len(data) // _CELL.size
        x, y = divmod(missing, height) if height else (0, 0)
        raise XPFormatError(f"failed to read cell at ({x},{y}): unexpected end of data")
    return data


def save_xp_file(
    xp: XPFile,
    path: PathLike,
    *,
    compress: bool = True,
    level: int = BEST_COMPRESSION,
) -> None:
    """Write an XP file to disk, gzip-compressed by default."""
    data = marshal(xp)
    if compress:
        data = gzip_data(data, level)
    with open(path, "wb") as stream:
        stream.write(data)


def marshal(xp: XPFile) -> bytes:
    """Serialise an XP file to uncompressed bytes, cells in column-major order."""
    try:
        parts = [_HEADER.pack(xp.version, len(xp.layers))]
    except struct.error as exc:
        raise XPFormatError(f"failed to write header: {exc}") from exc
    for index, layer in enumerate(xp.layers):
        try:
            parts.append(_marshal_layer(layer))
        except struct.error as exc:
            raise XPFormatError(f"failed to write layer {index}: {exc}") from exc
    return b"".join(parts)


def _marshal_layer(layer: Layer) -> bytes:
    parts = [_DIMENSIONS.pack(layer.width, layer.height)]
    for x in range(layer.width):
        for y in range(layer.height):
            cell = layer.get_cell(x, y)
            parts.append(
                _CELL.pack(
                    cell.code,
                    cell.fg.r, cell.fg.g, cell.fg.b,
                    cell.bg.r, cell.bg.g, cell.bg.b,
                )
            )
    return b"".join(parts)


def gzip_data(data: bytes, level: int) -> bytes:
    """Compress bytes into the gzip format.

    ``level`` ranges from HUFFMAN_ONLY (-2) to BEST_COMPRESSION (9).
    """
    if level == HUFFMAN_ONLY:
        compressor = zlib.compressobj(
            zlib.Z_DEFAULT_COMPRESSION, zlib.DEFLATED, 31, strategy=zlib.Z_HUFFMAN_ONLY
        )
    elif DEFAULT_COMPRESSION <= level <= BEST_COMPRESSION:
        compressor = zlib.compressobj(level, zlib.DEFLATED, 31)
    else:
        raise ValueError(f"invalid gzip compression level: {level}")
    return compressor.compress(data) + compressor.flush()