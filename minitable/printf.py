"""A small printf supporting %c %s %p %d %i %u %x %X and %%."""

from __future__ import annotations

import sys
from typing import Any, Callable, Iterator

_UINT32_MASK = 0xFFFFFFFF
_INT32_SPAN = 1 << 32
_INT32_LIMIT = 1 << 31
_POINTER_MASK = 0xFFFFFFFFFFFFFFFF
_CHAR_MASK = 0xFF
_NULL_TEXT = "(null)"
_MISSING = object()


def _require_int(spec: str, value: Any) -> int:
    if not isinstance(value, int):
        raise TypeError(f"%{spec} expects an int, got {type(value).__name__}")
    return value


def _as_int32(value: int) -> int:
    value &= _UINT32_MASK
    return value - _INT32_SPAN if value >= _INT32_LIMIT else value


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError("%c expects a single character")
        return value
    return chr(_require_int("c", value) & _CHAR_MASK)


def _string(value: Any) -> str:
    if value is None:
        return _NULL_TEXT
    if not isinstance(value, str):
        raise TypeError(f"%s expects a str, got {type(value).__name__}")
    return value


def _pointer(value: Any) -> str:
    if value is None:
        address = 0
    elif isinstance(value, int):
        address = value & _POINTER_MASK
    else:
        address = id(value) & _POINTER_MASK
    return f"0x{address:x}"


def _signed(value: Any) -> str:
    return str(_as_int32(_require_int("d", value)))


def _unsigned(value: Any) -> str:
    return str(_require_int("u", value) & _UINT32_MASK)


def _hex_lower(value: Any) -> str:
    return f"{_require_int('x', value) & _UINT32_MASK:x}"


def _hex_upper(value: Any) -> str:
    return f"{_require_int('X', value) & _UINT32_MASK:X}"


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _char,
    "s": _string,
    "p": _pointer,
    "d": _signed,
    "i": _signed,
    "u": _unsigned,
    "x": _hex_lower,
    "X": _hex_upper,
}


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    conversion = _CONVERSIONS.get(spec)
    if conversion is None:
        # Unknown conversions print nothing and consume no argument.
        return ""
    value = next(args, _MISSING)
    if value is _MISSING:
        raise TypeError(f"not enough arguments for %{spec}")
    return conversion(value)


def format_printf(template: str, *args: Any) -> str:
    """Return the text that printf would write for template and args."""
    pieces: list[str] = []
    remaining = iter(args)
    chars = iter(template)
    for char in chars:
        if char != "%":
            pieces.append(char)
            continue
        spec = next(chars, None)
        if spec is None:
            raise ValueError("template ends with a lone '%'")
        pieces.append(_convert(spec, remaining))
    return "".join(pieces)


def printf(template: str, *args: Any) -> int:
    """Write the formatted text to standard output; return its length."""
    text = format_printf(template, *args)
    sys.stdout.write(text)
    return len(text)