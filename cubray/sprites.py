"""Locating, ordering and projecting sprites onto the screen."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from cubray.player import Player
from cubray.scene import SPRITE_CELL


@dataclass(frozen=True)
class Sprite:
    """A sprite standing at the centre of a map cell."""

    x: float
    y: float

    def distance_squared(self, posx: float, posy: float) -> float:
        """Return the squared distance from (posx, posy)."""
        return (posx - self.x) ** 2 + (posy - self.y) ** 2


@dataclass(frozen=True)
class SpriteProjection:
    """Where a sprite lands on the screen."""

    transform_x: float
    transform_y: float
    screen_x: int
    height: int
    width: int
    draw_start_x: int
    draw_end_x: int
    draw_start_y: int
    draw_end_y: int


def find_sprites(grid: Sequence[str]) -> list[Sprite]:
    """Return the sprites of the map in row-major order."""
    return [
        Sprite(col + 0.5, row + 0.5)
        for row, line in enumerate(grid)
        for col, cell in enumerate(line)
        if cell == SPRITE_CELL
    ]


def sort_by_distance(sprites: Iterable[Sprite], posx: float, posy: float) -> list[Sprite]:
    """Return the sprites ordered from farthest to nearest."""
    return sorted(sprites, key=lambda sprite: sprite.distance_squared(posx, posy), reverse=True)


def _half(value: int) -> int:
    return int(value / 2)


def project_sprite(
    sprite: Sprite, player: Player, screen_width: int, screen_height: int
) -> SpriteProjection:
    """Project a sprite into camera space and compute its drawing bounds."""
    rel_x = sprite.x - player.posx
    rel_y = sprite.y - player.posy
    det = player.planex * player.diry - player.dirx * player.planey
    if det == 0:
        raise ValueError("camera direction and plane are parallel")
    inv_det = 1.0 / det
    transform_x = inv_det * (player.diry * rel_x - player.dirx * rel_y)
    transform_y = inv_det * (-player.planey * rel_x + player.planex * rel_y)
    if transform_y == 0:
        raise ValueError("sprite lies on the camera plane")
    screen_x = int(_half(screen_width) * (1 + transform_x / transform_y))
    height = abs(int(screen_height / transform_y))
    draw_start_y = _half(-height) + _half(screen_height)
    if draw_start_y < 0:
        draw_start_y = 0
    draw_end_y = _half(height) + _half(screen_height)
    if draw_start_y >= screen_height:
        draw_start_y = screen_height - 1
    width = abs(int(screen_height / transform_y))
    draw_start_x = _half(-width) + screen_x
    if draw_start_x < 0:
        draw_start_x = 0
    draw_end_x = _half(width) + screen_x
    if draw_end_x >= screen_width:
        draw_end_x = screen_width - 1
    return SpriteProjection(
        transform_x,
        transform_y,
        screen_x,
        height,
        width,
        draw_start_x,
        draw_end_x,
        draw_start_y,
        draw_end_y,
    )