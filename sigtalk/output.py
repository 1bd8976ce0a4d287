"""Formatted and raw output: a small printf and writers for file descriptors.

``format_printf`` understands the conversions ``%c %s %p %d %i %u %x %X`` and
``%%``. Any other conversion character is consumed and produces nothing.
Integer conversions take their argument as a 32-bit C ``int`` (``%d``, ``%i``)
or ``unsigned int`` (``%u``, ``%x``, ``%X``).
"""

from __future__ import annotations

import os
import sys
from typing import Any, Iterator, Union

CharLike = Union[int, str]

_LOWER_HEX = "0123456789abcdef"
_UPPER_HEX = "0123456789ABCDEF"
_NULL_STRING = "(null)"
_NULL_POINTER = "(nil)"


def _to_int32(value: int) -> int:
    value = int(value) & 0xFFFFFFFF
    return value - (1 << 32) if value >= (1 << 31) else value


def _to_uint32(value: int) -> int:
    return int(value) & 0xFFFFFFFF


def _in_base(value: int, digits: str) -> str:
    """Render a non-negative integer with the given digit alphabet."""
    base = len(digits)
    out = []
    while True:
        value, rem = divmod(value, base)
        out.append(digits[rem])
        if value == 0:
            break
    return "".join(reversed(out))


def _as_char(value: CharLike) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {len(value)} characters")
        return value
    return chr(int(value) & 0xFF)


def _pointer(value: Any) -> str:
    if value is None or value == 0:
        return _NULL_POINTER
    address = value if isinstance(value, int) else id(value)
    return "0x" + _in_base(address & 0xFFFFFFFFFFFFFFFF, _LOWER_HEX)


def _next_arg(values: Iterator[Any], spec: str) -> Any:
    try:
        return next(values)
    except StopIteration:
        raise TypeError(f"not enough arguments for conversion %{spec}") from None


def _convert(spec: str, values: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec == "c":
        return _as_char(_next_arg(values, spec))
    if spec == "s":
        arg = _next_arg(values, spec)
        return _NULL_STRING if arg is None else str(arg)
    if spec == "p":
        return _pointer(_next_arg(values, spec))
    if spec in ("d", "i"):
        return str(_to_int32(_next_arg(values, spec)))
    if spec == "u":
        return str(_to_uint32(_next_arg(values, spec)))
    if spec == "x":
        return _in_base(_to_uint32(_next_arg(values, spec)), _LOWER_HEX)
    if spec == "X":
        return _in_base(_to_uint32(_next_arg(values, spec)), _UPPER_HEX)
    return ""


def format_printf(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by the formatted ``args``."""
    values = iter(args)
    chars = iter(fmt)
    out = []
    for ch in chars:
        if ch == "%":
            out.append(_convert(next(chars, ""), values))
        else:
            out.append(ch)
    return "".join(out)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output; return the characters written."""
    text = format_printf(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def putchar_fd(c: CharLike, fd: int) -> None:
    """Write one character to the file descriptor ``fd``."""
    if isinstance(c, str):
        _write_all(fd, _as_char(c).encode("utf-8"))
    else:
        _write_all(fd, bytes([int(c) & 0xFF]))


def putstr_fd(s: str, fd: int) -> None:
    """Write the string ``s`` to the file descriptor ``fd``."""
    _write_all(fd, s.encode("utf-8"))


def putendl_fd(s: str, fd: int) -> None:
    """Write ``s`` followed by a newline to the file descriptor ``fd``."""
    putstr_fd(s + "\n", fd)


def putnbr_fd(n: int, fd: int) -> None:
    """Write the decimal representation of ``n`` to the file descriptor ``fd``."""
    putstr_fd(str(int(n)), fd)