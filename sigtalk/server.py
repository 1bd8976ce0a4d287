"""Receiving side: rebuilds messages from bits delivered as signals.

SIGUSR1 carries a 1 and SIGUSR2 a 0. Every bit is acknowledged with SIGUSR1
to the sender. When a terminating NUL completes a message it is written out,
and in bonus mode the sender also gets SIGUSR2 as a receipt.
"""

from __future__ import annotations

import os
import signal
import sys
from typing import Callable, Optional, Sequence, TextIO

from .output import printf
from .protocol import BitDecoder

KillFunc = Callable[[int, int], None]

_SIGNALS = frozenset({signal.SIGUSR1, signal.SIGUSR2})


class Server:
    """Decodes incoming bit signals and answers each sender."""

    def __init__(
        self,
        *,
        bonus: bool = False,
        kill: Optional[KillFunc] = None,
        out: Optional[TextIO] = None,
    ) -> None:
        self.bonus = bonus
        self.client_pid = 0
        self._kill: KillFunc = kill if kill is not None else os.kill
        self._out = out
        self._decoder = BitDecoder()

    def _write(self, text: str) -> None:
        stream = self._out if self._out is not None else sys.stdout
        stream.write(text)
        stream.flush()

    def _signal_client(self, sig: int) -> None:
        if self.client_pid:
            self._kill(self.client_pid, sig)

    def receive(self, signum: int, sender_pid: int) -> Optional[bytes]:
        """Handle one bit signal from ``sender_pid`` (0 when unknown).

        Returns the message bytes when this bit completes one, else None.
        """
        if signum not in _SIGNALS:
            raise ValueError(f"unexpected signal: {signum}")
        if sender_pid:
            self.client_pid = sender_pid
        message = self._decoder.feed(signum == signal.SIGUSR1)
        if message is not None:
            self._write(message.decode("utf-8", errors="replace"))
            if self.bonus:
                self._signal_client(signal.SIGUSR2)
        self._signal_client(signal.SIGUSR1)
        return message

    def serve_forever(self) -> None:
        """Wait for bit signals and handle them until interrupted."""
        previous = signal.pthread_sigmask(signal.SIG_BLOCK, _SIGNALS)
        try:
            while True:
                info = signal.sigwaitinfo(_SIGNALS)
                self.receive(info.si_signo, info.si_pid)
        finally:
            signal.pthread_sigmask(signal.SIG_SETMASK, previous)


def _run(bonus: bool) -> int:
    printf("Server started. PID: %d\n", os.getpid())
    printf("Messages received: \n")
    try:
        Server(bonus=bonus).serve_forever()
    except KeyboardInterrupt:
        pass
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print this process's PID and receive messages until interrupted."""
    return _run(bonus=False)


def bonus_main(argv: Optional[Sequence[str]] = None) -> int:
    """Like ``main``, also confirming each complete message to its sender."""
    return _run(bonus=True)


if __name__ == "__main__":
    sys.exit(main())