"""Writing of 32-bit BMP screenshots."""

from __future__ import annotations

import struct
from os import PathLike
from pathlib import Path
from typing import Sequence

HEADER_SIZE = 54
_INFO_HEADER_SIZE = 40
_BITS_PER_PIXEL = 32
_PIXELS_PER_METRE = 2


def encode_bmp(width: int, height: int, pixels: Sequence[int]) -> bytes:
    """Encode row-major 0xRRGGBB pixels as an uncompressed 32-bit BMP.

    Rows are stored bottom-up; each pixel is written as blue, green, red and
    a zero byte.
    """
    if width < 0 or height < 0:
        raise ValueError(f"invalid image size {width}x{height}")
    pixels = list(pixels)
    if len(pixels) != width * height:
        raise ValueError(f"expected {width * height} pixels, got {len(pixels)}")
    data_size = width * height * 4
    file_header = struct.pack("<2sIHHI", b"BM", data_size + HEADER_SIZE, 0, 0, HEADER_SIZE)
    info_header = struct.pack(
        "<IIIHHIIIIII",
        _INFO_HEADER_SIZE,
        width,
        height,
        1,
        _BITS_PER_PIXEL,
        0,
        data_size,
        _PIXELS_PER_METRE,
        _PIXELS_PER_METRE,
        0,
        0,
    )
    rows = (pixels[y * width:(y + 1) * width] for y in reversed(range(height)))
    body = b"".join(
        (value & 0xFFFFFF).to_bytes(3, "little") + b"\x00" for row in rows for value in row
    )
    return file_header + info_header + body


def save_bmp(path: str | PathLike[str], width: int, height: int, pixels: Sequence[int]) -> None:
    """Write pixels to path as a BMP file."""
    Path(path).write_bytes(encode_bmp(width, height, pixels))