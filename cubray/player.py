"""Player camera, key bindings and movement through the map grid."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum
from typing import Sequence

from cubray.scene import Scene

BLOCKING_CELLS = frozenset("12")
SPEED_FACTOR = 3.0
"""Movement and rotation speed per second of frame time."""

_DIRECTIONS: dict[str, tuple[float, float, float, float]] = {
    "N": (0.0, -1.0, 0.66, 0.0),
    "S": (0.0, 1.0, -0.66, 0.0),
    "E": (1.0, 0.0, 0.0, 0.66),
    "W": (-1.0, 0.0, 0.0, -0.66),
}


class Key(IntEnum):
    """Key codes reported by the window system."""

    A = 113
    S = 115
    D = 100
    F = 102
    H = 104
    G = 103
    Z = 119
    X = 120
    C = 99
    V = 118
    B = 98
    Q = 97
    W = 122
    E = 101
    R = 114
    Y = 121
    T = 116
    ONE = 38
    TWO = 233
    THREE = 34
    FOUR = 39
    FIVE = 40
    SIX = 45
    SEVEN = 232
    EIGHT = 95
    NINE = 231
    ZERO = 224
    BRACE_R = 30
    O = 31
    U = 32
    BRACE_L = 33
    I = 34  # noqa: E741
    P = 35
    L = 108
    J = 106
    K = 107
    SEMI = 41
    N = 110
    M = 109
    TAB = 65289
    PLUS = 65451
    MINUS = 65453
    LEFT = 65361
    RIGHT = 65363
    DOWN = 65364
    UP = 65362
    ESC = 65307
    SHIFT = 65505
    CTRL = 65507
    SPACE = 32


_BINDINGS: dict[int, str] = {
    Key.W: "move_up",
    Key.UP: "move_up",
    Key.S: "move_down",
    Key.DOWN: "move_down",
    Key.A: "strafe_left",
    Key.D: "strafe_right",
    Key.LEFT: "rotate_left",
    Key.RIGHT: "rotate_right",
}


@dataclass
class Controls:
    """Which movement keys are currently held down."""

    move_up: bool = False
    move_down: bool = False
    rotate_left: bool = False
    rotate_right: bool = False
    strafe_left: bool = False
    strafe_right: bool = False

    def press(self, keycode: int) -> bool:
        """Mark the action bound to keycode as active; tell whether one is bound."""
        return self._set(keycode, True)

    def release(self, keycode: int) -> bool:
        """Mark the action bound to keycode as inactive; tell whether one is bound."""
        return self._set(keycode, False)

    def _set(self, keycode: int, state: bool) -> bool:
        action = _BINDINGS.get(keycode)
        if action is None:
            return False
        setattr(self, action, state)
        return True


def _blocked(grid: Sequence[str], x: float, y: float) -> bool:
    col, row = int(x), int(y)
    if row < 0 or col < 0 or row >= len(grid) or col >= len(grid[row]):
        return True
    return grid[row][col] in BLOCKING_CELLS


@dataclass
class Player:
    """Position, view direction and camera plane of the player."""

    posx: float = 0.0
    posy: float = 0.0
    dirx: float = 0.0
    diry: float = 0.0
    planex: float = 0.66
    planey: float = 0.0

    @classmethod
    def from_scene(cls, scene: Scene) -> Player:
        """Place the player on the map's start cell, which becomes floor."""
        for row, line in enumerate(scene.grid):
            for col, cell in enumerate(line):
                if cell in _DIRECTIONS:
                    dirx, diry, planex, planey = _DIRECTIONS[cell]
                    scene.grid[row] = line[:col] + "0" + line[col + 1:]
                    return cls(float(col), float(row), dirx, diry, planex, planey)
        raise ValueError("map has no player start position")

    def rotate(self, angle: float) -> None:
        """Turn the view direction and camera plane by angle radians."""
        cos_a, sin_a = math.cos(angle), math.sin(angle)
        self.dirx, self.diry = (
            self.dirx * cos_a - self.diry * sin_a,
            self.dirx * sin_a + self.diry * cos_a,
        )
        self.planex, self.planey = (
            self.planex * cos_a - self.planey * sin_a,
            self.planex * sin_a + self.planey * cos_a,
        )

    def _step(self, grid: Sequence[str], dx: float, dy: float) -> None:
        old = self.posy
        self.posy += dy
        if _blocked(grid, self.posx, self.posy):
            self.posy = old
        old = self.posx
        self.posx += dx
        if _blocked(grid, self.posx, self.posy):
            self.posx = old

    def move(self, grid: Sequence[str], controls: Controls, frame_time: float) -> None:
        """Apply the active controls for one frame, stopping at walls and sprites."""
        speed = frame_time * SPEED_FACTOR
        if controls.move_down:
            self._step(grid, -self.dirx * speed, -self.diry * speed)
        if controls.move_up:
            self._step(grid, self.dirx * speed, self.diry * speed)
        if controls.rotate_right:
            self.rotate(speed)
        if controls.strafe_left:
            self._step(grid, -self.planex * speed, -self.planey * speed)
        if controls.strafe_right:
            self._step(grid, self.planex * speed, self.planey * speed)
        if controls.rotate_left:
            self.rotate(-speed)