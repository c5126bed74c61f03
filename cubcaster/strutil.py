"""Small string helpers used by the scene-file parser."""

from __future__ import annotations

from itertools import islice, zip_longest

SPACE_CHARS = " \t\n\v\f\r"
_DIGITS = "0123456789"


def is_space(ch: str) -> bool:
    """Return True if ``ch`` is a single whitespace character (space or 9-13)."""
    return len(ch) == 1 and ch in SPACE_CHARS


def count_char(text: str, ch: str) -> int:
    """Count the occurrences of ``ch`` in ``text``."""
    return text.count(ch)


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way C's atoi does.

    Leading whitespace is skipped, one optional sign is accepted and parsing
    stops at the first non-digit. Text without digits gives 0.
    """
    rest = text.lstrip(SPACE_CHARS)
    sign = 1
    if rest[:1] == "+":
        rest = rest[1:]
    elif rest[:1] == "-":
        sign = -1
        rest = rest[1:]
    number = 0
    for ch in rest:
        if ch not in _DIGITS:
            break
        number = number * 10 + _DIGITS.index(ch)
    return sign * number


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    return str(n)


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping empty pieces."""
    if not sep:
        return [text] if text else []
    return [piece for piece in text.split(sep) if piece]


def strtrim(text: str, charset: str) -> str:
    """Remove any characters of ``charset`` from both ends of ``text``."""
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` starting at ``start``.

    A start beyond the end of the text gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Find ``needle`` within the first ``length`` characters of ``haystack``.

    Returns the index of the match, or None. An empty needle matches at 0.
    """
    if not needle:
        return 0
    index = haystack[:max(length, 0)].find(needle)
    return None if index < 0 else index


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most ``n`` characters; return the difference at the first mismatch."""
    for ca, cb in islice(zip_longest(a, b, fillvalue="\0"), max(n, 0)):
        if ca != cb:
            return ord(ca) - ord(cb)
        if ca == "\0":
            break
    return 0