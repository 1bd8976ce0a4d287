"""Sending side: delivers a text message to a receiving process bit by bit.

Each bit goes out as a signal, SIGUSR1 for 1 and SIGUSR2 for 0. After each
bit the sender waits for the receiver to answer with SIGUSR1. In bonus mode
a SIGUSR2 from the receiver means the whole message arrived, and "ACK" is
printed.
"""

from __future__ import annotations

import os
import signal
import sys
import time
from contextlib import contextmanager
from typing import Callable, Iterator, Optional, Sequence, Tuple

from .ascii import isdigit
from .output import printf
from .protocol import byte_to_bits, frame_message
from .strings import atoi

KillFunc = Callable[[int, int], None]

USAGE = "Usage: ./client PID MESSAGE_TO_SEND"
DEFAULT_POLL_INTERVAL = 50e-6


class UsageError(Exception):
    """The command line does not name a PID and a non-empty message."""


def check_args(argv: Sequence[str]) -> Tuple[int, str]:
    """Validate ``[PID, MESSAGE]`` and return the PID as an int and the message."""
    if len(argv) != 2:
        raise UsageError(USAGE)
    pid_text, message = argv
    if not pid_text or not all(isdigit(ch) for ch in pid_text):
        raise UsageError("PID must be a number.")
    if not message:
        raise UsageError("Message cannot be empty.")
    return atoi(pid_text), message


class Client:
    """Sends bytes to the process ``pid`` one signal per bit."""

    def __init__(
        self,
        pid: int,
        *,
        bonus: bool = False,
        kill: Optional[KillFunc] = None,
        poll_interval: float = DEFAULT_POLL_INTERVAL,
        ack_timeout: Optional[float] = None,
    ) -> None:
        self.pid = pid
        self.bonus = bonus
        self.poll_interval = poll_interval
        self.ack_timeout = ack_timeout
        self.receipts = 0
        self._kill: KillFunc = kill if kill is not None else os.kill
        self._acked = False
        self._installed = False

    def _on_signal(self, signum: int, frame: object) -> None:
        if signum == signal.SIGUSR1:
            self._acked = True
        elif self.bonus and signum == signal.SIGUSR2:
            self.receipts += 1
            printf("ACK\n")

    @contextmanager
    def _handlers(self) -> Iterator[None]:
        if self._installed:
            yield
            return
        signals = [signal.SIGUSR1]
        if self.bonus:
            signals.append(signal.SIGUSR2)
        previous = {sig: signal.signal(sig, self._on_signal) for sig in signals}
        self._installed = True
        try:
            yield
        finally:
            for sig, handler in previous.items():
                signal.signal(sig, handler)
            self._installed = False

    def _wait_for_ack(self) -> None:
        deadline = None
        if self.ack_timeout is not None:
            deadline = time.monotonic() + self.ack_timeout
        while not self._acked:
            if deadline is not None and time.monotonic() >= deadline:
                raise TimeoutError(f"no acknowledgement from process {self.pid}")
            time.sleep(self.poll_interval)

    def send_byte(self, value: int) -> None:
        """Send one byte, most significant bit first, waiting for each bit's ack."""
        bits = byte_to_bits(value)
        with self._handlers():
            for bit in bits:
                self._acked = False
                self._kill(self.pid, signal.SIGUSR1 if bit else signal.SIGUSR2)
                self._wait_for_ack()

    def send(self, message: str) -> None:
        """Send ``message`` followed by a newline and the terminating NUL."""
        with self._handlers():
            for value in frame_message(message):
                self.send_byte(value)


def _run(argv: Optional[Sequence[str]], bonus: bool) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        pid, message = check_args(args)
    except UsageError as exc:
        printf("%s\n", str(exc))
        return 1
    try:
        Client(pid, bonus=bonus).send(message)
    except OSError as exc:
        printf("Cannot signal process %d: %s\n", pid, exc.strerror or str(exc))
        return 1
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Send the message on the command line to the given PID."""
    return _run(argv, bonus=False)


def bonus_main(argv: Optional[Sequence[str]] = None) -> int:
    """Like ``main``, and print "ACK" when the receiver confirms the message."""
    return _run(argv, bonus=True)


if __name__ == "__main__":
    sys.exit(main())