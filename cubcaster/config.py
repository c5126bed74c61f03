"""Parsing a whole scene file into a configuration."""

from __future__ import annotations

import os
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from functools import partial
from itertools import dropwhile

from .errors import CubError, ErrorKind
from .extract import extract_lines, is_map_line
from .mapcheck import MapInfo, validate_map
from .strutil import SPACE_CHARS, atoi

MAX_WIDTH = 2560
MAX_HEIGHT = 1440
CUB_SUFFIX = ".cub"
_DIGITS = "0123456789"

Color = tuple[int, int, int]


@dataclass(frozen=True)
class CubConfig:
    """Everything a scene file describes."""

    resolution: tuple[int, int]
    north: str
    south: str
    west: str
    east: str
    sprite: str
    floor: Color
    ceiling: Color
    map: MapInfo


def is_cub_filename(name: str) -> bool:
    """Return True if ``name`` ends in ``.cub``."""
    return name.endswith(CUB_SUFFIX)


def parse_resolution(line: str) -> tuple[int, int]:
    """Read the width and height of an ``R`` line.

    Both must be positive and at most 2560 by 1440; otherwise ValueError.
    """
    rest = line[1:].lstrip(SPACE_CHARS)
    width = atoi(rest)
    rest = rest.lstrip(_DIGITS).lstrip(SPACE_CHARS)
    height = atoi(rest)
    if not (0 < width <= MAX_WIDTH and 0 < height <= MAX_HEIGHT):
        raise ValueError(f"resolution {width}x{height} is out of range")
    return width, height


def parse_color(line: str) -> Color:
    """Read the three components of an ``F`` or ``C`` line.

    Components are separated by spaces or commas and must each lie in 0-255.
    """
    separators = SPACE_CHARS + ","
    rest = line[1:]
    components = []
    for _ in range(3):
        rest = rest.lstrip(separators)
        if not rest[:1] or rest[0] not in _DIGITS:
            raise ValueError(f"expected a colour component in {line!r}")
        components.append(atoi(rest))
        rest = rest.lstrip(_DIGITS)
    if any(not 0 <= value <= 255 for value in components):
        raise ValueError(f"colour component out of range in {line!r}")
    red, green, blue = components
    return red, green, blue


def parse_texture_path(line: str, prefix_len: int) -> str:
    """Return the texture path following the identifier of ``line``.

    Raises ValueError if the file cannot be opened for reading.
    """
    path = line[prefix_len:].lstrip(SPACE_CHARS)
    try:
        with open(path, "rb"):
            pass
    except OSError as exc:
        raise ValueError(f"cannot open texture {path!r}") from exc
    return path


@dataclass(frozen=True)
class _Element:
    field: str
    duplicate: ErrorKind
    invalid: ErrorKind
    parse: Callable[[str], object]


_ELEMENTS = {
    "R": _Element("resolution", ErrorKind.MULTI_RES, ErrorKind.BAD_SCREEN, parse_resolution),
    "NO": _Element("north", ErrorKind.MULTI_NO, ErrorKind.BAD_NO, partial(parse_texture_path, prefix_len=2)),
    "SO": _Element("south", ErrorKind.MULTI_SO, ErrorKind.BAD_SO, partial(parse_texture_path, prefix_len=2)),
    "WE": _Element("west", ErrorKind.MULTI_WE, ErrorKind.BAD_WE, partial(parse_texture_path, prefix_len=2)),
    "EA": _Element("east", ErrorKind.MULTI_EA, ErrorKind.BAD_EA, partial(parse_texture_path, prefix_len=2)),
    "S": _Element("sprite", ErrorKind.MULTI_SPRITE, ErrorKind.BAD_SPRITE, partial(parse_texture_path, prefix_len=1)),
    "F": _Element("floor", ErrorKind.MULTI_FLOOR, ErrorKind.BAD_FLOOR, parse_color),
    "C": _Element("ceiling", ErrorKind.MULTI_CEIL, ErrorKind.BAD_CEIL, parse_color),
}


def _element_key(line: str) -> str | None:
    if line[:2] in ("NO", "SO", "WE", "EA"):
        return line[:2]
    if line[:1] in ("S", "R", "F", "C"):
        return line[:1]
    return None


def parse_cub(lines: Iterable[str]) -> CubConfig:
    """Build a configuration from the lines of a scene file.

    The eight elements come first in any order, separated by any number of
    empty lines; the map follows. Raises CubError on the first problem found.
    """
    lines = list(lines)
    found: dict[str, object] = {}
    index = 0
    while index < len(lines) and len(found) < len(_ELEMENTS):
        line = lines[index]
        index += 1
        if not line:
            continue
        key = _element_key(line)
        if key is None:
            raise CubError(ErrorKind.INVALID_CHAR, repr(line))
        element = _ELEMENTS[key]
        if element.field in found:
            raise CubError(element.duplicate)
        try:
            found[element.field] = element.parse(line)
        except ValueError as exc:
            raise CubError(element.invalid, str(exc)) from exc
    if len(found) < len(_ELEMENTS) or index >= len(lines):
        raise CubError(ErrorKind.MISSING_PARAMS)
    map_lines = list(dropwhile(lambda text: not is_map_line(text), lines[index:]))
    if not map_lines:
        raise CubError(ErrorKind.INVALID_MAP, "no map found")
    return CubConfig(map=validate_map(map_lines), **found)


def load_cub(path: str | os.PathLike[str]) -> CubConfig:
    """Read and parse the scene file at ``path``."""
    try:
        with open(path, encoding="utf-8") as stream:
            lines = extract_lines(stream)
    except OSError as exc:
        raise CubError(ErrorKind.INVALID_FILE, str(path)) from exc
    return parse_cub(lines)