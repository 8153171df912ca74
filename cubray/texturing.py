"""Choosing wall textures and mapping wall hits onto texture columns."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from cubray.scene import Scene
from cubray.xpm import XpmError, XpmImage, load_xpm


class WallFace(Enum):
    """The side of a wall block a ray hit."""

    NORTH = "north"
    SOUTH = "south"
    WEST = "west"
    EAST = "east"


class TextureError(ValueError):
    """Raised when a texture of the scene cannot be loaded."""


@dataclass(frozen=True)
class TextureColumn:
    """Where a wall stripe samples its texture."""

    wall_x: float
    tex_x: int
    step: float
    tex_pos: float


def select_face(side: int, stepx: int, stepy: int) -> WallFace:
    """Pick the wall face from the side hit (1: x side, 0: y side) and ray steps."""
    if side == 1:
        return WallFace.EAST if stepx < 0 else WallFace.WEST
    if side == 0:
        return WallFace.SOUTH if stepy <= 0 else WallFace.NORTH
    raise ValueError(f"side must be 0 or 1, not {side!r}")


def texture_column(
    side: int,
    posx: float,
    posy: float,
    perp_wall_dist: float,
    ray_dirx: float,
    ray_diry: float,
    tex_width: int,
    tex_height: int,
    line_height: int,
    draw_start: int,
    screen_height: int,
) -> TextureColumn:
    """Compute the texture column and vertical stepping for one wall stripe."""
    if line_height == 0:
        raise ValueError("line height must not be zero")
    if side == 1:
        wall_x = posy + perp_wall_dist * ray_diry
    else:
        wall_x = posx + perp_wall_dist * ray_dirx
    wall_x -= math.floor(wall_x)
    tex_x = int(wall_x * tex_width)
    if (side == 0 and ray_diry > 0) or (side == 1 and ray_dirx < 0):
        tex_x = tex_width - tex_x - 1
    step = tex_height / line_height
    tex_pos = (draw_start - int(screen_height / 2) + int(line_height / 2)) * step
    return TextureColumn(wall_x, tex_x, step, tex_pos)


def load_textures(scene: Scene) -> dict[str, XpmImage]:
    """Load the four wall textures and the sprite texture named by the scene."""
    paths = {
        "north": scene.north,
        "south": scene.south,
        "west": scene.west,
        "east": scene.east,
        "sprite": scene.sprite,
    }
    textures: dict[str, XpmImage] = {}
    for name, path in paths.items():
        if path is None:
            raise TextureError(f"no {name} texture given")
        try:
            textures[name] = load_xpm(path)
        except XpmError as exc:
            raise TextureError(f"cannot load {name} texture {path!r}: {exc}") from exc
    return textures