"""Reading of XPM images into 32-bit pixel buffers."""

from __future__ import annotations

import re
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Iterable, Iterator

from cubray.colornames import color_by_name

TRANSPARENT = 0xFF000000
"""Pixel value given to colours declared as "None"."""

_NAME_LIMIT = 63
_WORD_SEPARATORS = re.compile(r"[ \t]+")
_QUOTED = re.compile(r'"([^"]*)"')
_INTEGER = re.compile(r"\s*([+-]?\d+)")
_HEX_NUMBER = re.compile(r"\s*([+-]?(?:0[xX](?=[0-9a-fA-F]))?[0-9a-fA-F]+)")


class XpmError(ValueError):
    """Raised when XPM data cannot be read or is malformed."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded image: row-major 32-bit pixel values."""

    width: int
    height: int
    pixels: tuple[int, ...]

    def pixel(self, x: int, y: int) -> int:
        """Return the pixel value at column x, row y."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return self.pixels[y * self.width + x]


def split_words(text: str) -> list[str]:
    """Split text into words separated by spaces and tabs."""
    return [word for word in _WORD_SEPARATORS.split(text) if word]


def find_outside_quotes(text: str, find: str) -> int:
    """Return the first position of find outside double quotes, or -1."""
    if not find:
        raise ValueError("search string must not be empty")
    quoted = False
    for pos in range(len(text) - len(find) + 1):
        if text[pos] == '"':
            quoted = not quoted
        if not quoted and text.startswith(find, pos):
            return pos
    return -1


def strip_comments(text: str) -> str:
    """Blank out C-style comments outside quoted strings, keeping the length."""
    while (begin := find_outside_quotes(text, "/*")) != -1:
        end = text.find("*/", begin + 2)
        stop = len(text) if end == -1 else end + 2
        text = text[:begin] + " " * (stop - begin) + text[stop:]
    while (begin := find_outside_quotes(text, "//")) != -1:
        end = text.find("\n", begin + 2)
        stop = len(text) if end == -1 else end + 1
        text = text[:begin] + " " * (stop - begin) + text[stop:]
    return text


def extract_lines(text: str) -> list[str]:
    """Return the contents of each double-quoted string, in order."""
    return _QUOTED.findall(text)


def _atoi(word: str) -> int:
    match = _INTEGER.match(word)
    return int(match.group(1)) if match else 0


def _parse_hex(digits: str) -> int:
    match = _HEX_NUMBER.match(digits)
    return int(match.group(1), 16) if match else 0


def text_to_rgb(name: str, end: str | None = None) -> int:
    """Turn a colour specification into a 0xRRGGBB value.

    "#rrggbb" is read as hexadecimal. Otherwise name, joined with end when
    given, is looked up as a colour name; unknown names give 0.
    """
    if name.startswith("#"):
        return _parse_hex(name[1:])
    if end is not None:
        name = f"{name} {end}"[:_NAME_LIMIT]
    try:
        return color_by_name(name)
    except KeyError:
        return 0


def _next_line(rows: Iterator[str], what: str) -> str:
    line = next(rows, None)
    if line is None:
        raise XpmError(f"missing {what}")
    return line


def _read_palette(rows: Iterator[str], ncolors: int, cpp: int) -> dict[str, int]:
    palette: dict[str, int] = {}
    later_wins = cpp <= 2
    for _ in range(ncolors):
        line = _next_line(rows, "colour definition")
        words = split_words(line[cpp:])
        try:
            index = words.index("c")
        except ValueError:
            raise XpmError(f"colour definition without 'c' key: {line!r}") from None
        if index + 1 >= len(words):
            raise XpmError(f"colour definition without a value: {line!r}")
        end = words[index + 2] if index + 2 < len(words) else None
        value = text_to_rgb(words[index + 1], end)
        key = line[:cpp]
        if later_wins or key not in palette:
            palette[key] = value
    return palette


def parse_xpm(lines: Iterable[str]) -> XpmImage:
    """Decode an image from its XPM strings (header, colours, then rows)."""
    rows = iter(lines)
    words = split_words(_next_line(rows, "header"))
    if len(words) < 4:
        raise XpmError("header needs width, height, colour count and chars per pixel")
    width, height, ncolors, cpp = (_atoi(word) for word in words[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError(f"invalid header values: {' '.join(words[:4])}")
    palette = _read_palette(rows, ncolors, cpp)
    pixels: list[int] = []
    row_length = width * cpp
    for _ in range(height):
        line = _next_line(rows, "pixel row")
        if len(line) < row_length:
            raise XpmError(f"pixel row too short: {line!r}")
        for start in range(0, row_length, cpp):
            color = palette.get(line[start:start + cpp], 0)
            pixels.append(TRANSPARENT if color == -1 else color)
    return XpmImage(width, height, tuple(pixels))


def parse_xpm_text(text: str) -> XpmImage:
    """Decode an image from the text of an XPM file."""
    return parse_xpm(extract_lines(strip_comments(text)))


def load_xpm(path: str | PathLike[str]) -> XpmImage:
    """Read and decode an XPM file."""
    try:
        text = Path(path).read_text(encoding="latin-1")
    except OSError as exc:
        raise XpmError(f"cannot read {path}: {exc}") from exc
    return parse_xpm_text(text)