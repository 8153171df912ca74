"""Reading of scene description (.cub) files."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path
from typing import Iterable

MAX_WIDTH = 1920
MAX_HEIGHT = 1080
MAP_CHARACTERS = frozenset("0123456789 NSEW\t")
SPRITE_CELL = "2"

_RESOLUTION = re.compile(r"\s*([+-]?\d+)\s+([+-]?\d+)")
_COLOR = re.compile(r"(\d+)\D+(\d+)\D+(\d+)")


class ParseError(ValueError):
    """Raised when a scene description line is malformed."""


def parse_resolution(line: str) -> tuple[int, int]:
    """Read the width and height of an "R" line, capped at 1920x1080."""
    match = _RESOLUTION.match(line[1:])
    if match is None:
        raise ParseError(f"resolution needs a width and a height: {line!r}")
    width, height = (int(value) for value in match.groups())
    return min(width, MAX_WIDTH), min(height, MAX_HEIGHT)


def parse_color(line: str) -> int:
    """Read the three components of an "F" or "C" line as one packed colour.

    The components fill the bytes of the result from the lowest upwards:
    the first component is the low byte, the top byte is zero.
    """
    match = _COLOR.search(line)
    if match is None:
        raise ParseError(f"colour needs three components: {line!r}")
    components = bytes(int(value) & 0xFF for value in match.groups())
    return int.from_bytes(components + b"\x00", "little")


def parse_texture_path(line: str) -> str:
    """Return the texture path of a line: everything from its first dot."""
    start = line.find(".")
    if start == -1:
        raise ParseError(f"texture line has no path: {line!r}")
    return line[start:]


def is_valid_map_line(line: str) -> bool:
    """Tell whether a line holds only characters allowed in the map."""
    return all(char in MAP_CHARACTERS for char in line)


@dataclass
class Scene:
    """Everything a scene description sets: screen, textures, colours, map."""

    width: int = 0
    height: int = 0
    north: str | None = None
    south: str | None = None
    west: str | None = None
    east: str | None = None
    sprite: str | None = None
    floor_color: int = 0
    ceiling_color: int = 0
    grid: list[str] = field(default_factory=list)

    def apply_line(self, line: str) -> None:
        """Update the scene from one line of the description."""
        if not line:
            return
        head = line[:2]
        if line.startswith("R"):
            self.width, self.height = parse_resolution(line)
        elif head == "NO":
            self.north = parse_texture_path(line)
        elif head == "SO":
            self.south = parse_texture_path(line)
        elif head == "WE":
            self.west = parse_texture_path(line)
        elif head == "EA":
            self.east = parse_texture_path(line)
        elif line.startswith("S"):
            self.sprite = parse_texture_path(line)
        elif line.startswith("C"):
            self.ceiling_color = parse_color(line)
        elif line.startswith("F"):
            self.floor_color = parse_color(line)
        elif line[0].isdigit() or line[0] in " \t":
            if not is_valid_map_line(line):
                raise ParseError(f"Wrong char on map: {line!r}")
            self.grid.append(line)

    def sprite_count(self) -> int:
        """Return the number of sprite cells in the map."""
        return sum(row.count(SPRITE_CELL) for row in self.grid)


def parse_scene(lines: Iterable[str]) -> Scene:
    """Build a scene from the lines of a description."""
    scene = Scene()
    for line in lines:
        scene.apply_line(line.rstrip("\r\n"))
    return scene


def load_scene(path: str | PathLike[str]) -> Scene:
    """Read and parse a scene description file."""
    text = Path(path).read_text(encoding="utf-8")
    return parse_scene(text.splitlines())