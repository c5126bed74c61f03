"""Drawing the projected scene into a pixel buffer."""

from __future__ import annotations

import math
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field

from .geometry import (
    Segment,
    direction_segment,
    floor_texture_coords,
    normalize_angle,
    weapon_origin,
)

MINIMAP_WALL = 0x85B569
MINIMAP_FLOOR = 0xEBDBB7
MINIMAP_PLAYER = 0xB87CB3
_MINIMAP_INSIDE = "02NSWE"


@dataclass
class Image:
    """A rectangular buffer of packed colour values, stored row by row."""

    width: int
    height: int
    pixels: list[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("image dimensions must not be negative")
        if not self.pixels:
            self.pixels = [0] * (self.width * self.height)
        elif len(self.pixels) != self.width * self.height:
            raise ValueError("pixel count does not match the image size")

    @classmethod
    def blank(cls, width: int, height: int) -> Image:
        """Return an image of the given size filled with zero."""
        return cls(width, height)

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _index(self, x: int, y: int) -> int:
        if not self.contains(x, y):
            raise IndexError(f"pixel ({x}, {y}) is outside a {self.width}x{self.height} image")
        return y * self.width + x

    def get(self, x: int, y: int) -> int:
        """Return the colour at (``x``, ``y``)."""
        return self.pixels[self._index(x, y)]

    def put(self, x: int, y: int, color: int) -> None:
        """Set the colour at (``x``, ``y``)."""
        self.pixels[self._index(x, y)] = color

    def _plot(self, x: int, y: int, color: int) -> None:
        if self.contains(x, y):
            self.pixels[y * self.width + x] = color


def create_trgb(t: int, r: int, g: int, b: int) -> int:
    """Pack transparency and colour components into one integer."""
    return (t << 24) | (r << 16) | (g << 8) | b


def _walk(segment: Segment) -> Iterator[tuple[int, int, float]]:
    """Yield each pixel of ``segment`` with the fraction of it walked so far."""
    x, y = segment.start_x, segment.start_y
    progress = 0.0
    remaining = segment.pixels
    while remaining > 0:
        yield int(x), int(y), progress
        x += segment.dx
        y += segment.dy
        progress = (y - segment.start_y) / segment.pixels
        remaining -= 1


def _clamp(value: float, upper: int) -> int:
    return min(max(int(value), 0), upper - 1)


def draw_segment(image: Image, segment: Segment, color: int) -> None:
    """Draw ``segment`` in a single colour, skipping pixels outside the image."""
    for x, y, _ in _walk(segment):
        image._plot(x, y, color)


def draw_textured_wall(image: Image, segment: Segment, texture: Image, tex_x: int) -> None:
    """Draw a wall column, stretching texture column ``tex_x`` along ``segment``."""
    column = _clamp(tex_x, texture.width)
    for x, y, progress in _walk(segment):
        row = _clamp(progress * texture.width, texture.height)
        image._plot(x, y, texture.get(column, row))


def draw_sprite_column(image: Image, segment: Segment, texture: Image, tex_x: int) -> None:
    """Draw a sprite column like a wall column, treating zero as transparent."""
    column = _clamp(tex_x, texture.width)
    for x, y, progress in _walk(segment):
        row = _clamp(progress * texture.width, texture.height)
        color = texture.get(column, row)
        if color:
            image._plot(x, y, color)


def fill_ceiling(image: Image, color: int) -> None:
    """Fill the rows above the horizon, leaving the last one before it untouched."""
    rows = max(image.height // 2 - 1, 0)
    image.pixels[: rows * image.width] = [color] * (rows * image.width)


def draw_floor(
    image: Image,
    start_row: int,
    texture: Image,
    player_x: float,
    player_y: float,
    tile_size: float,
    ray_angle: float,
    rotation: float,
    dist_proj_plane: float,
    col_id: int,
) -> None:
    """Texture the floor of screen column ``col_id`` from ``start_row`` down."""
    column_angle = normalize_angle(ray_angle - rotation)
    horizon = image.height // 2
    for row in range(max(start_row, horizon + 1), image.height):
        distance = (0.5 / (row - horizon)) * dist_proj_plane / math.cos(column_angle)
        x = player_x / tile_size + distance * math.cos(ray_angle)
        y = player_y / tile_size + distance * math.sin(ray_angle)
        tex_x, tex_y = floor_texture_coords(x, y, texture.width, texture.height)
        color = texture.get(_clamp(tex_x, texture.width), _clamp(tex_y, texture.height))
        image._plot(col_id, row, color)


def draw_minimap(
    image: Image,
    rows: Sequence[str],
    tile_size: int,
    player_x: float,
    player_y: float,
    radius: float,
    rotation: float,
) -> None:
    """Draw the map, the player disc and the facing direction in the top-left corner."""
    map_w = min(max((len(row) for row in rows), default=0) * tile_size, image.width)
    map_h = min(len(rows) * tile_size, image.height)
    for p_h in range(map_h):
        row = rows[p_h // tile_size]
        for p_w in range(map_w):
            cell_x = p_w // tile_size
            if cell_x >= len(row):
                continue
            if row[cell_x] == "1":
                image.put(p_w, p_h, MINIMAP_WALL)
            elif row[cell_x] in _MINIMAP_INSIDE:
                image.put(p_w, p_h, MINIMAP_FLOOR)
    for p_h in range(map_h):
        for p_w in range(map_w):
            if math.hypot(player_x - p_w, player_y - p_h) <= radius:
                image.put(p_w, p_h, MINIMAP_PLAYER)
    draw_segment(image, direction_segment(player_x, player_y, rotation, tile_size), MINIMAP_PLAYER)


def draw_weapon(image: Image, texture: Image) -> None:
    """Stretch ``texture`` over the bottom-right quarter, treating zero as transparent."""
    origin_x, origin_y = weapon_origin(image.width, image.height)
    span_x = image.width - 1 - origin_x
    span_y = image.height - 1 - origin_y
    for p_h in range(origin_y, image.height):
        tex_y = int((p_h - origin_y) / span_y * (texture.height - 1)) if span_y else 0
        for p_w in range(origin_x, image.width):
            tex_x = int((p_w - origin_x) / span_x * (texture.width - 1)) if span_x else 0
            color = texture.get(tex_x, tex_y)
            if color:
                image.put(p_w, p_h, color)