"""A small printf: %c %s %d %i %u %x %X %p and %%."""

from __future__ import annotations

import enum
import sys
from collections.abc import Iterator
from typing import TextIO

from ftprintf.convert import (
    format_hex,
    format_pointer,
    format_signed,
    format_text,
    format_unsigned,
)


class Conversion(enum.Enum):
    """The conversion specifiers that are understood."""

    CHAR = "c"
    STRING = "s"
    HEX_LOWER = "x"
    HEX_UPPER = "X"
    DECIMAL = "d"
    INTEGER = "i"
    PERCENT = "%"
    UNSIGNED = "u"
    POINTER = "p"

    @property
    def takes_argument(self) -> bool:
        return self is not Conversion.PERCENT


def _format_char(value: object) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError("%c expects a single character")
        return value
    try:
        return chr(int(value) & 0xFF)  # type: ignore[call-overload]
    except (TypeError, ValueError):
        raise TypeError(
            f"%c requires an int or a character, not {type(value).__name__}"
        ) from None


def _format_pointer_arg(value: object) -> str:
    return format_pointer(0 if value is None else value)  # type: ignore[arg-type]


_FORMATTERS = {
    Conversion.CHAR: _format_char,
    Conversion.STRING: format_text,
    Conversion.HEX_LOWER: lambda v: format_hex(v, "x"),
    Conversion.HEX_UPPER: lambda v: format_hex(v, "X"),
    Conversion.DECIMAL: format_signed,
    Conversion.INTEGER: format_signed,
    Conversion.UNSIGNED: format_unsigned,
    Conversion.POINTER: _format_pointer_arg,
}


def convert(spec: str, args: Iterator[object]) -> str:
    """Render one specifier, taking its argument from ``args``.

    An unknown specifier renders as nothing and consumes no argument.
    """
    try:
        conversion = Conversion(spec)
    except ValueError:
        return ""
    if not conversion.takes_argument:
        return "%"
    try:
        value = next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None
    return _FORMATTERS[conversion](value)


def render(fmt: str, *args: object) -> str:
    """Return the text that ``fmt`` and ``args`` produce."""
    arguments = iter(args)
    characters = iter(fmt)
    pieces = []
    for char in characters:
        if char != "%":
            pieces.append(char)
            continue
        spec = next(characters, None)
        if spec is None:
            break
        pieces.append(convert(spec, arguments))
    return "".join(pieces)


def ft_printf(fmt: str, *args: object, stream: TextIO | None = None) -> int:
    """Write the rendered text to ``stream`` (stdout by default); return its length."""
    text = render(fmt, *args)
    (sys.stdout if stream is None else stream).write(text)
    return len(text)