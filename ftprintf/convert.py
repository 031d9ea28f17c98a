"""Text conversions behind each format specifier."""

from __future__ import annotations

import operator

_UINT_BITS = 32
_UINT_MASK = (1 << _UINT_BITS) - 1
_ULONG_MASK = (1 << 64) - 1
_INT_MIN = -(1 << (_UINT_BITS - 1))

NULL_TEXT = "(null)"
NIL_POINTER = "(nil)"
HEX_PREFIX = "0x"


def _as_int(value: object) -> int:
    try:
        return operator.index(value)
    except TypeError:
        raise TypeError(
            f"an integer is required, not {type(value).__name__}"
        ) from None


def _wrap_signed(n: int) -> int:
    return ((n - _INT_MIN) & _UINT_MASK) + _INT_MIN


def num_len(n: int) -> int:
    """Count decimal digits of a non-negative number.

    Zero and every negative number count as a single position.
    """
    n = _as_int(n)
    if n == 0:
        return 1
    if n < 0:
        return 1
    return len(str(n))


def to_upper(c: str) -> str:
    """Upper-case an ASCII lower-case letter; leave anything else alone."""
    if len(c) != 1:
        raise ValueError("to_upper expects a single character")
    if "a" <= c <= "z":
        return chr(ord(c) - 32)
    return c


def hex_digit(value: int) -> str:
    """Return the lower-case hex digit for 0-15, or '0' when out of range."""
    value = _as_int(value)
    if 0 <= value < 10:
        return chr(value + ord("0"))
    if 10 <= value < 16:
        return chr(value - 10 + ord("a"))
    return "0"


def format_hex(num: int, spec: str) -> str:
    """Render a 32-bit unsigned value in hex, upper-case when spec is 'X'."""
    value = _as_int(num) & _UINT_MASK
    digits = []
    while True:
        value, remainder = divmod(value, 16)
        digits.append(hex_digit(remainder))
        if not value:
            break
    text = "".join(reversed(digits))
    if spec == "X":
        text = "".join(map(to_upper, text))
    return text


def format_pointer(address: int) -> str:
    """Render an address as '0x...', or '(nil)' for a null address.

    Only the low 32 bits of a non-null address are shown.
    """
    value = _as_int(address) & _ULONG_MASK
    if value == 0:
        return NIL_POINTER
    return HEX_PREFIX + format_hex(value, "x")


def format_signed(n: int) -> str:
    """Render a value as a signed 32-bit decimal integer."""
    return str(_wrap_signed(_as_int(n)))


def format_unsigned(n: int) -> str:
    """Render a value as an unsigned 32-bit decimal integer."""
    return str(_as_int(n) & _UINT_MASK)


def format_text(s: str | None) -> str:
    """Render a string up to its first NUL, or '(null)' for None."""
    if s is None:
        return NULL_TEXT
    if not isinstance(s, str):
        raise TypeError(f"a string is required, not {type(s).__name__}")
    return s.split("\0", 1)[0]