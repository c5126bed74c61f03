"""Validation of the map block of a scene file."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from itertools import takewhile

from .errors import CubError, ErrorKind
from .strutil import SPACE_CHARS
from .extract import is_map_line

MAP_INSIDE = "02NSEW"
PLAYER_CHARS = "NSEW"


@dataclass(frozen=True)
class MapInfo:
    """A validated map: its rows and the player's starting orientation."""

    rows: tuple[str, ...]
    player: str

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def width(self) -> int:
        return max((len(row) for row in self.rows), default=0)


def is_wall_row(row: str) -> bool:
    """Return True if ``row`` holds only walls and spaces."""
    return all(ch == "1" or ch in SPACE_CHARS for ch in row)


def _solid(row: str, j: int) -> bool:
    return 0 <= j < len(row) and row[j] not in SPACE_CHARS


def is_row_closed(above: str, row: str, below: str) -> bool:
    """Return True if every inside cell of ``row`` is surrounded on all eight sides."""
    for j, ch in enumerate(row):
        if ch not in MAP_INSIDE:
            continue
        neighbours = (
            (above, j - 1), (above, j), (above, j + 1),
            (row, j - 1), (row, j + 1),
            (below, j - 1), (below, j), (below, j + 1),
        )
        if not all(_solid(line, k) for line, k in neighbours):
            return False
    return True


def _find_player(rows: Iterable[str]) -> str:
    player = ""
    for row in rows:
        for ch in row:
            if ch in PLAYER_CHARS:
                if player:
                    raise CubError(ErrorKind.INVALID_MAP, "more than one player")
                player = ch
    return player


def validate_map(lines: Iterable[str]) -> MapInfo:
    """Check the map block at the start of ``lines`` and return it.

    The block ends at the first line that is not a map line. It needs at
    least three rows, a first row of walls only, every inside cell closed in
    by non-space cells and exactly one player among the rows in between.
    """
    rows = list(takewhile(is_map_line, lines))
    if len(rows) < 3:
        raise CubError(ErrorKind.INVALID_MAP, "the map needs at least three rows")
    if not is_wall_row(rows[0]):
        raise CubError(ErrorKind.INVALID_MAP, "the first row must hold only walls")
    for index, (above, row, below) in enumerate(zip(rows, rows[1:], rows[2:]), start=1):
        if not is_row_closed(above, row, below):
            raise CubError(ErrorKind.INVALID_MAP, f"row {index} is not closed")
    player = _find_player(rows[1:-1])
    if not player:
        raise CubError(ErrorKind.INVALID_MAP, "no player")
    return MapInfo(rows=tuple(rows), player=player)