"""A small printf-style formatter supporting %c %s %p %d %i %u %x %X and %%."""

from __future__ import annotations

import operator
import sys
from typing import Any, Iterator, Optional, TextIO

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF

if sys.platform.startswith("linux"):
    NULL_POINTER = "(nil)"
else:
    NULL_POINTER = "0x0"

# An unknown conversion is echoed with its leading '%' everywhere but macOS.
UNKNOWN_KEEPS_PERCENT = sys.platform != "darwin"

NULL_STRING = "(null)"


def _to_int32(value: Any) -> int:
    number = operator.index(value) & _MASK32
    return number - (1 << 32) if number & 0x80000000 else number


def format_int(value: Any, space: bool = False) -> str:
    """Render a 32-bit signed integer, with a leading blank for non-negatives if asked."""
    number = _to_int32(value)
    text = str(number)
    if space and number >= 0:
        return " " + text
    return text


def format_uint(value: Any) -> str:
    """Render a value as a 32-bit unsigned decimal integer."""
    return str(operator.index(value) & _MASK32)


def format_hex(value: Any, upper: bool = False) -> str:
    """Render a value as 32-bit unsigned hexadecimal, without prefix."""
    number = operator.index(value) & _MASK32
    return f"{number:X}" if upper else f"{number:x}"


def format_pointer(value: Any) -> str:
    """Render an address as 0x-prefixed lowercase hex; a null address uses NULL_POINTER."""
    if value is None:
        return NULL_POINTER
    number = operator.index(value) & _MASK64
    if number == 0:
        return NULL_POINTER
    return f"0x{number:x}"


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError("%c requires a single character")
        return value
    return chr(operator.index(value) & 0xFF)


def _format_string(value: Any) -> str:
    if value is None:
        return NULL_STRING
    if not isinstance(value, str):
        raise TypeError("%s requires a string or None")
    return value


def _take(args: Iterator[Any], spec: str) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None


def _convert(spec: str, space: bool, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec in ("d", "i"):
        return format_int(_take(args, spec), space)
    if spec == "u":
        return format_uint(_take(args, spec))
    if spec == "x":
        return format_hex(_take(args, spec))
    if spec == "X":
        return format_hex(_take(args, spec), upper=True)
    if spec == "p":
        return format_pointer(_take(args, spec))
    if spec == "c":
        return _format_char(_take(args, spec))
    if spec == "s":
        return _format_string(_take(args, spec))
    return "%" + spec if UNKNOWN_KEEPS_PERCENT else spec


def format_printf(fmt: Optional[str], *args: Any) -> str:
    """Expand a format string with the given arguments and return the text."""
    if fmt is None:
        return ""
    pieces: list[str] = []
    chars = iter(fmt)
    arg_iter = iter(args)
    for char in chars:
        if char != "%":
            pieces.append(char)
            continue
        space = False
        spec = next(chars, None)
        while spec == " ":
            space = True
            spec = next(chars, None)
        if spec is None:
            pieces.append("%")
            break
        if spec == "\t":
            pieces.append(spec)
        else:
            pieces.append(_convert(spec, space, arg_iter))
    return "".join(pieces)


def ft_printf(fmt: Optional[str], *args: Any, stream: Optional[TextIO] = None) -> int:
    """Format and write to ``stream`` (stdout by default); return the bytes written."""
    text = format_printf(fmt, *args)
    out = sys.stdout if stream is None else stream
    if text:
        out.write(text)
    return len(text.encode("utf-8", "surrogateescape"))