"""Reading the raw lines of a scene file."""

from __future__ import annotations

from typing import IO

from .linereader import iter_lines
from .strutil import SPACE_CHARS

MAP_CHARS = "012NSEW"
TAB_WIDTH = 4
_ELEMENT_PREFIXES = ("NO", "WE", "EA", "S", "F", "C")


def expand_tabs(line: str) -> str:
    """Replace every tab in ``line`` with four spaces."""
    return line.replace("\t", " " * TAB_WIDTH)


def extract_lines(stream: IO[str]) -> list[str]:
    """Read all lines of ``stream`` with tabs expanded.

    Text after the last newline is kept, so a stream that ends in a newline
    gives a final empty line.
    """
    return [expand_tabs(line) for line in iter_lines(stream)]


def is_map_line(line: str) -> bool:
    """Return True if ``line`` is non-empty and holds only map characters or spaces."""
    return bool(line) and all(ch in SPACE_CHARS or ch in MAP_CHARS for ch in line)


def is_element_line(line: str) -> bool:
    """Return True if ``line`` is empty or starts like a known scene element."""
    return line == "" or line.startswith(_ELEMENT_PREFIXES)