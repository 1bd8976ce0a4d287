"""String helpers with C-string semantics: search, comparison, slicing and bounded copies.

Text functions work on ``str``. ``strlcpy`` and ``strlcat`` work on
NUL-terminated byte buffers held in ``bytearray`` objects.
Where a search finds nothing, the result is None.
"""

from __future__ import annotations

from itertools import takewhile
from typing import Callable, MutableSequence, Optional, Union

from .ascii import isdigit

CharLike = Union[int, str]
Buffer = Union[bytes, bytearray, memoryview]

_SPACE = "\t\n\v\f\r "


def _char(c: CharLike) -> str:
    """Normalise a character argument; integers are truncated to one byte."""
    if isinstance(c, bool):
        raise TypeError("expected an int or a one-character str, got bool")
    if isinstance(c, int):
        return chr(c & 0xFF)
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
        return c
    raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def _c_string(buf: Buffer) -> bytes:
    """The bytes of ``buf`` up to, not including, the first NUL."""
    return bytes(buf).split(b"\0", 1)[0]


def atoi(text: str) -> int:
    """Parse a decimal integer after optional whitespace and one optional sign.

    Parsing stops at the first character that is not a digit; when no digit
    is found the result is 0.
    """
    rest = text.lstrip(_SPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = "".join(takewhile(isdigit, rest))
    return sign * int(digits) if digits else 0


def itoa(n: int) -> str:
    """Decimal representation of ``n``, with a leading minus when negative."""
    return str(int(n))


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first ``c`` in ``s``.

    Searching for the NUL character finds the terminator at ``len(s)``.
    """
    ch = _char(c)
    index = s.find(ch)
    if index >= 0:
        return index
    if ch == "\0":
        return len(s)
    return None


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last ``c`` in ``s``; NUL finds the terminator at ``len(s)``."""
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns 0 when they match, otherwise the difference of the code points at
    the first mismatch; the end of a string counts as code point 0.
    """
    if n < 0:
        raise ValueError("strncmp: n must not be negative")
    for i in range(n):
        a = ord(s1[i]) if i < len(s1) else 0
        b = ord(s2[i]) if i < len(s2) else 0
        if a != b or a == 0:
            return a - b
    return 0


def strnstr(big: str, small: str, n: int) -> Optional[int]:
    """Index of the first ``small`` lying wholly within the first ``n`` characters of ``big``.

    An empty ``small`` is found at index 0.
    """
    if n < 0:
        raise ValueError("strnstr: n must not be negative")
    if not small:
        return 0
    index = big[:n].find(small)
    return None if index < 0 else index


def substr(s: str, start: int, length: int) -> str:
    """Up to ``length`` characters of ``s`` from ``start``; empty if ``start`` is past the end."""
    if start < 0 or length < 0:
        raise ValueError("substr: start and length must not be negative")
    if start > len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """The concatenation of two strings."""
    return s1 + s2


def strtrim(s: str, chars: str) -> str:
    """Remove every character found in ``chars`` from both ends of ``s``."""
    return s.strip(chars) if chars else s


def split(s: str, sep: CharLike) -> list[str]:
    """Words of ``s`` separated by runs of ``sep``; empty words are dropped."""
    ch = _char(sep)
    return [word for word in s.split(ch) if word]


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """A new string built from ``func(index, char)`` for each character of ``s``."""
    return "".join(func(i, ch) for i, ch in enumerate(s))


def striteri(s: MutableSequence, func: Callable[[int, object], object]) -> None:
    """Call ``func(index, item)`` on each item of ``s`` in order.

    When ``func`` returns something other than None, that value replaces the
    item in place.
    """
    for i, item in enumerate(list(s)):
        replacement = func(i, item)
        if replacement is not None:
            s[i] = replacement


def strlcpy(dest: bytearray, src: Buffer, size: int) -> int:
    """Copy the C string ``src`` into ``dest``, writing at most ``size`` bytes.

    The copy is truncated to ``size - 1`` bytes and NUL-terminated unless
    ``size`` is 0. Returns the length of ``src``.
    """
    if size < 0:
        raise ValueError("strlcpy: size must not be negative")
    data = _c_string(src)
    if size == 0:
        return len(data)
    if size > len(dest):
        raise IndexError(f"strlcpy: size {size} exceeds buffer of length {len(dest)}")
    chunk = data[:size - 1]
    dest[:len(chunk) + 1] = chunk + b"\0"
    return len(data)


def strlcat(dest: bytearray, src: Buffer, size: int) -> int:
    """Append the C string ``src`` to the C string in ``dest`` within ``size`` bytes.

    Returns the length of the string it tried to create: the length of
    ``dest`` (bounded by ``size``) plus the length of ``src``.
    """
    if size < 0:
        raise ValueError("strlcat: size must not be negative")
    if size > len(dest):
        raise IndexError(f"strlcat: size {size} exceeds buffer of length {len(dest)}")
    data = _c_string(src)
    nul = bytes(dest[:size]).find(b"\0")
    start = size if nul < 0 else nul
    if start < size:
        chunk = data[:max(size - start - 1, 0)]
        dest[start:start + len(chunk) + 1] = chunk + b"\0"
    return start + len(data)