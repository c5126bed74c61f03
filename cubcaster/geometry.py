"""Geometry of the projected scene: segments, angles and texture offsets."""

from __future__ import annotations

import math
from dataclasses import dataclass

TWO_PI = 2 * math.pi
SPRITE_ABOVE_HORIZON = 11 / 40
SPRITE_BELOW_HORIZON = 29 / 40


@dataclass(frozen=True)
class Segment:
    """A straight run of pixels walked in unit steps from its start."""

    start_x: float
    start_y: float
    end_x: float
    end_y: float
    dx: float
    dy: float
    pixels: float

    @classmethod
    def between(cls, start_x: float, start_y: float, end_x: float, end_y: float) -> Segment:
        """Build the segment from one point to another with unit-length steps."""
        length = math.hypot(end_x - start_x, end_y - start_y)
        if length == 0:
            dx = dy = 0.0
        else:
            dx = (end_x - start_x) / length
            dy = (end_y - start_y) / length
        return cls(start_x, start_y, end_x, end_y, dx, dy, length)


def normalize_angle(angle: float) -> float:
    """Bring ``angle`` into the range [0, 2*pi)."""
    result = math.fmod(angle, TWO_PI)
    if result < 0:
        result += TWO_PI
    return 0.0 if result >= TWO_PI else result


def wall_texture_column(
    hit_x: float, hit_y: float, hit_vertical: bool, tile_size: float, texture_width: int
) -> int:
    """Return the texture column for a wall hit at (``hit_x``, ``hit_y``).

    Vertical hits use the fractional part of the y tile coordinate,
    horizontal hits that of the x tile coordinate.
    """
    coord = (hit_y if hit_vertical else hit_x) / tile_size
    return int(texture_width * (coord - math.floor(coord)))


def sprite_texture_column(col_id: int, xstart: float, sprite_w: float, texture_width: int) -> int:
    """Return the sprite texture column drawn on screen column ``col_id``."""
    return int(texture_width * ((col_id - xstart) / sprite_w))


def floor_texture_coords(x: float, y: float, width: int, height: int) -> tuple[float, float]:
    """Map tile coordinates to a floor texture position.

    Whole tiles are dropped from non-negative coordinates, which are then
    scaled to the texture size; negative coordinates are returned unchanged.
    """
    if x >= 1:
        x -= math.floor(x)
    if y >= 1:
        y -= math.floor(y)
    if x >= 0:
        x *= width
    if y >= 0:
        y *= height
    return x, y


def wall_segment(
    distance: float,
    ray_angle: float,
    rotation: float,
    tile_size: float,
    dist_proj_plane: float,
    win_h: int,
    col_id: int,
) -> Segment:
    """Return the vertical screen segment of a wall seen at ``distance``.

    The distance is corrected for the fish-eye effect and the segment is
    clipped to the window.
    """
    corrected = (distance / tile_size) * math.cos(ray_angle - rotation)
    line_height = dist_proj_plane / corrected
    middle = win_h // 2
    start_y = max(middle - line_height / 2, 0)
    end_y = min(middle + line_height / 2, win_h - 1.0)
    return Segment.between(col_id, start_y, col_id, end_y)


def sprite_segment(sprite_h: float, win_h: int, col_id: int) -> Segment:
    """Return the vertical screen segment of a sprite of height ``sprite_h``."""
    middle = win_h // 2
    start_y = max(middle - sprite_h * SPRITE_ABOVE_HORIZON, 0)
    end_y = min(middle + sprite_h * SPRITE_BELOW_HORIZON, win_h - 1.0)
    return Segment.between(col_id, start_y, col_id, end_y)


def direction_segment(x: float, y: float, angle: float, length: float) -> Segment:
    """Return the segment of ``length`` from (``x``, ``y``) pointing at ``angle``."""
    return Segment.between(x, y, x + math.cos(angle) * length, y + math.sin(angle) * length)


def weapon_origin(win_w: int, win_h: int) -> tuple[int, int]:
    """Return the top-left corner of the bottom-right quarter where the weapon goes."""
    return win_w // 2, win_h // 2