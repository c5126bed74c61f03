"""Error kinds reported while reading and checking a scene file."""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """Every reason a scene file can be rejected."""

    NOT_CUB = 0
    INVALID_FILE = 1
    PARSING = 2
    ALLOCATION = 3
    MULTI_RES = 4
    BAD_SCREEN = 5
    MULTI_NO = 6
    BAD_NO = 7
    MULTI_SO = 8
    BAD_SO = 9
    MULTI_WE = 10
    BAD_WE = 11
    MULTI_EA = 12
    BAD_EA = 13
    MULTI_SPRITE = 14
    BAD_SPRITE = 15
    MULTI_FLOOR = 16
    BAD_FLOOR = 17
    MULTI_CEIL = 18
    BAD_CEIL = 19
    INVALID_MAP = 20
    INVALID_CHAR = 21
    MISSING_PARAMS = 22

    @property
    def description(self) -> str:
        """A short human-readable explanation of this kind of error."""
        return _DESCRIPTIONS[self]


_DESCRIPTIONS = {
    ErrorKind.NOT_CUB: "the file name does not end in .cub",
    ErrorKind.INVALID_FILE: "the scene file cannot be opened",
    ErrorKind.PARSING: "the scene file could not be read",
    ErrorKind.ALLOCATION: "out of memory",
    ErrorKind.MULTI_RES: "the resolution is given more than once",
    ErrorKind.BAD_SCREEN: "the resolution is invalid",
    ErrorKind.MULTI_NO: "the north texture is given more than once",
    ErrorKind.BAD_NO: "the north texture is invalid",
    ErrorKind.MULTI_SO: "the south texture is given more than once",
    ErrorKind.BAD_SO: "the south texture is invalid",
    ErrorKind.MULTI_WE: "the west texture is given more than once",
    ErrorKind.BAD_WE: "the west texture is invalid",
    ErrorKind.MULTI_EA: "the east texture is given more than once",
    ErrorKind.BAD_EA: "the east texture is invalid",
    ErrorKind.MULTI_SPRITE: "the sprite texture is given more than once",
    ErrorKind.BAD_SPRITE: "the sprite texture is invalid",
    ErrorKind.MULTI_FLOOR: "the floor colour is given more than once",
    ErrorKind.BAD_FLOOR: "the floor colour is invalid",
    ErrorKind.MULTI_CEIL: "the ceiling colour is given more than once",
    ErrorKind.BAD_CEIL: "the ceiling colour is invalid",
    ErrorKind.INVALID_MAP: "the map is invalid",
    ErrorKind.INVALID_CHAR: "an unknown element was found",
    ErrorKind.MISSING_PARAMS: "some scene parameters are missing",
}


class CubError(Exception):
    """Raised when a scene file is rejected."""

    def __init__(self, kind: ErrorKind, detail: str | None = None) -> None:
        self.kind = kind
        self.detail = detail
        message = kind.description if detail is None else f"{kind.description}: {detail}"
        super().__init__(message)