"""Bounded string helpers with C-library semantics on Python strings."""

from __future__ import annotations

from itertools import islice
from typing import Iterator

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_ATOI_SPACE = " \t\n\v\f\r"


def _require_size(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def atoi(text: str) -> int:
    """Read an optionally signed decimal integer from the start of text.

    Leading blanks are skipped; reading stops at the first non-digit.
    Text without digits yields 0.
    """
    rest = text.lstrip(_ATOI_SPACE)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = []
    for char in rest:
        if not "0" <= char <= "9":
            break
        digits.append(char)
    return sign * int("".join(digits)) if digits else 0


def itoa(number: int) -> str:
    """Decimal text of a 32-bit signed integer."""
    if not _INT_MIN <= number <= _INT_MAX:
        raise OverflowError(f"{number} does not fit in a 32-bit int")
    return str(number)


def split(text: str, separator: str) -> list[str]:
    """Split text on a single separator character, dropping empty words."""
    if len(separator) != 1:
        raise ValueError("separator must be a single character")
    return [word for word in text.split(separator) if word]


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in charset from both ends of text."""
    if not charset:
        return text
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """At most length characters of text beginning at start.

    A start at or beyond the end yields an empty string.
    """
    _require_size("start", start)
    _require_size("length", length)
    if start >= len(text):
        return ""
    return text[start : start + length]


def _codes(text: str) -> Iterator[int]:
    yield from (ord(char) for char in text)
    yield 0


def strncmp(first: str, second: str, count: int) -> int:
    """Compare at most count characters; the result's sign orders the strings.

    Comparison stops at the end of either string, as at a terminating NUL.
    """
    _require_size("count", count)
    for a, b in islice(zip(_codes(first), _codes(second)), count):
        if a != b or a == 0:
            return a - b
    return 0


def strnstr(haystack: str, needle: str, length: int) -> str | None:
    """Find needle wholly inside the first length characters of haystack.

    Returns haystack from the match onwards, or None. An empty needle
    matches at the start.
    """
    _require_size("length", length)
    if not needle:
        return haystack
    index = haystack.find(needle, 0, length)
    return None if index < 0 else haystack[index:]


def strlcpy(source: str, size: int) -> tuple[str, int]:
    """Copy source into a buffer of size characters including the terminator.

    Returns the text that fits and the full length of source, so truncation
    shows as a returned length of at least size.
    """
    _require_size("size", size)
    copied = source[: size - 1] if size > 0 else ""
    return copied, len(source)


def strlcat(destination: str, source: str, size: int) -> tuple[str, int]:
    """Append source to destination within a buffer of size characters.

    Returns the resulting text and the length it tried to create. When
    destination already fills the buffer it is left alone and the length
    reported is size plus the length of source.
    """
    _require_size("size", size)
    dest_len = min(len(destination), size)
    if dest_len == size:
        return destination, size + len(source)
    room = size - dest_len - 1
    return destination + source[:room], dest_len + len(source)