"""String and integer helpers checked by the bundled suites."""

from __future__ import annotations

import operator
from typing import Optional

from forkcheck.printf import format_int

_MASK32 = 0xFFFFFFFF
_WHITESPACE = frozenset(" \t\n\v\f\r")


def _wrap32(number: int) -> int:
    number &= _MASK32
    return number - (1 << 32) if number & 0x80000000 else number


def _c_string(s: Optional[str]) -> str:
    if s is None:
        raise TypeError("expected a string, got None")
    return s.split("\0", 1)[0]


def ft_strlen(s: Optional[str]) -> int:
    """Return the number of characters before the first NUL; None is an error."""
    return len(_c_string(s))


def ft_atoi(s: Optional[str]) -> int:
    """Parse a leading decimal integer the way atoi does, wrapping at 32 bits."""
    text = _c_string(s)
    stripped = text.lstrip("".join(_WHITESPACE))
    sign = 1
    if stripped[:1] in ("-", "+"):
        if stripped[0] == "-":
            sign = -1
        stripped = stripped[1:]
    result = 0
    for char in stripped:
        if not "0" <= char <= "9":
            break
        result = _wrap32(result * 10 + ord(char) - ord("0"))
    return _wrap32(result * sign)


def ft_itoa(n: int) -> str:
    """Render a 32-bit signed integer as decimal text."""
    return format_int(operator.index(n))


def ft_strcmp(s1: Optional[str], s2: Optional[str]) -> int:
    """Compare two strings up to the end of the shorter one.

    Returns the code-point difference at the first mismatch, or 0 when one
    string is a prefix of the other.
    """
    for a, b in zip(_c_string(s1), _c_string(s2)):
        if a != b:
            return ord(a) - ord(b)
    return 0