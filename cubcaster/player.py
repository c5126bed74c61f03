"""Player state: key handling, movement, turning and the weapon animation."""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass
from enum import IntEnum

from .geometry import normalize_angle

ATTACK_FRAMES = 5


class Key(IntEnum):
    """Key codes the game reacts to."""

    A = 0
    S = 1
    D = 2
    W = 13
    SPACE = 49
    ESCAPE = 53
    LEFT = 123
    RIGHT = 124
    DOWN = 125
    UP = 126


_WALK_OFFSETS = {
    Key.W: 0.0,
    Key.S: math.pi,
    Key.A: -math.pi / 2,
    Key.D: math.pi / 2,
}
_TURNS = {Key.RIGHT: 1, Key.LEFT: -1}


def _as_key(key: int) -> Key | None:
    try:
        return Key(key)
    except ValueError:
        return None


def ray_facing(angle: float) -> tuple[bool, bool]:
    """Return whether a ray at ``angle`` faces down and whether it faces left."""
    facing_down = 0 < angle < math.pi
    facing_left = math.pi / 2 < angle < 3 * math.pi / 2
    return facing_down, facing_left


@dataclass
class Player:
    """Position, orientation and input state of the player."""

    x: float
    y: float
    rotation: float
    move_speed: float
    rotate_speed: float
    walk: Key | None = None
    turn: int = 0
    attacking: bool = False
    anim_count: int = 0

    def press(self, key: int) -> bool:
        """Handle a key press; return True if the key asks to quit."""
        key = _as_key(key)
        if key is Key.ESCAPE:
            return True
        if key in _WALK_OFFSETS:
            self.walk = key
        elif key in _TURNS:
            self.turn = _TURNS[key]
        elif key is Key.SPACE:
            self.attacking = True
        return False

    def release(self, key: int) -> None:
        """Handle a key release."""
        key = _as_key(key)
        if key in _WALK_OFFSETS:
            self.walk = None
        elif key in _TURNS:
            self.turn = 0
        elif key is Key.SPACE:
            self.attacking = False

    def update(self, tile_size: float, blocked: Callable[[float, float], bool]) -> None:
        """Turn, then take one step unless ``blocked`` reports a wall at the target."""
        if self.turn:
            self.rotation = normalize_angle(self.rotation + self.turn * self.rotate_speed)
        if self.walk is None:
            return
        angle = normalize_angle(self.rotation + _WALK_OFFSETS[self.walk])
        step = self.move_speed * tile_size
        next_x = self.x + math.cos(angle) * step
        next_y = self.y + math.sin(angle) * step
        if not blocked(next_x, next_y):
            self.x = next_x
            self.y = next_y

    def advance_animation(self) -> bool:
        """Advance the weapon animation by one frame.

        Returns True if this frame shows the attacking weapon. Once started an
        attack runs for five frames even if the key is released.
        """
        if self.anim_count == 0:
            if not self.attacking:
                return False
            self.anim_count += 1
            return True
        self.anim_count += 1
        if self.anim_count >= ATTACK_FRAMES:
            self.anim_count = 0
        return True