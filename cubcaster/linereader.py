"""Chunked line reading from a stream."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr

BUFFER_SIZE = 64


def iter_lines(stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> Iterator[AnyStr]:
    """Yield the lines of ``stream`` without their newline characters.

    The stream is read in chunks of ``buffer_size``. Text after the last
    newline is always yielded, so a stream ending in a newline gives a final
    empty line and an empty stream gives one empty line.
    """
    if buffer_size <= 0:
        raise ValueError("buffer_size must be positive")
    pending = None
    while True:
        chunk = stream.read(buffer_size)
        if not chunk:
            break
        if pending is None:
            pending = chunk[:0]
        pending += chunk
        newline = "\n" if isinstance(pending, str) else b"\n"
        *complete, pending = pending.split(newline)
        yield from complete
    yield pending if pending is not None else ""