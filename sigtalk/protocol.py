"""The one-bit-at-a-time message framing shared by sender and receiver.

A message is sent as its UTF-8 bytes followed by a newline and a terminating
NUL byte. Each byte travels as eight bits, most significant bit first.
"""

from __future__ import annotations

from typing import Optional, Tuple

BITS_PER_BYTE = 8


def byte_to_bits(value: int) -> Tuple[int, ...]:
    """The eight bits of ``value``, most significant first, as 0s and 1s."""
    if not 0 <= value <= 0xFF:
        raise ValueError(f"byte value out of range: {value}")
    return tuple((value >> shift) & 1 for shift in range(BITS_PER_BYTE - 1, -1, -1))


def frame_message(text: str) -> bytes:
    """The bytes sent for ``text``: its UTF-8 encoding, a newline and a NUL."""
    return (text + "\n").encode("utf-8") + b"\0"


class BitDecoder:
    """Reassembles bytes from single bits and messages from NUL-terminated bytes."""

    def __init__(self) -> None:
        self._byte = 0
        self._count = 0
        self._buffer = bytearray()

    def feed(self, bit: object) -> Optional[bytes]:
        """Take one bit (any truthy value is 1).

        Returns the message, without its terminating NUL, when this bit
        completes one; otherwise None.
        """
        if bit:
            self._byte |= 0x80 >> self._count
        self._count += 1
        if self._count < BITS_PER_BYTE:
            return None
        value = self._byte
        self._byte = 0
        self._count = 0
        if value == 0:
            message = bytes(self._buffer)
            self._buffer.clear()
            return message
        self._buffer.append(value)
        return None

    def reset(self) -> None:
        """Discard any partly received byte and message."""
        self._byte = 0
        self._count = 0
        self._buffer.clear()