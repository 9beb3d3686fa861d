"""Background reader handing input lines over one at a time."""

from __future__ import annotations

import sys
import threading
from typing import Optional, TextIO


class InputListener:
    """Reads lines on a thread and hands each to a consumer in turn.

    The reader waits until the previous line has been taken before offering
    the next one. End of input is reported as None.
    """

    def __init__(self) -> None:
        self._cond = threading.Condition()
        self._has_input = False
        self._eof = False
        self._line = ""
        self._thread: Optional[threading.Thread] = None

    def start(self, stream: Optional[TextIO] = None) -> None:
        """Start reading from stream (standard input by default) on a daemon thread."""
        source = sys.stdin if stream is None else stream
        self._thread = threading.Thread(
            target=self.feed, args=(source,), name="input-listener", daemon=True
        )
        self._thread.start()

    def feed(self, stream: TextIO) -> None:
        """Offer every line of stream, then the end of input."""
        for line in stream:
            self._offer(line.removesuffix("\n"), eof=False)
        self._offer("", eof=True)

    def _offer(self, line: str, eof: bool) -> None:
        with self._cond:
            self._cond.wait_for(lambda: not self._has_input)
            if eof:
                self._eof = True
            else:
                self._line = line
            self._has_input = True
            self._cond.notify_all()

    def has_input(self) -> bool:
        return self._has_input

    def peek_line(self) -> Optional[str]:
        """Return the pending line without taking it; None at end of input."""
        with self._cond:
            if not self._has_input:
                raise RuntimeError("no input is pending")
            return None if self._eof else self._line

    def get_line(self) -> Optional[str]:
        """Wait for and take the next line; None at end of input."""
        with self._cond:
            self._cond.wait_for(lambda: self._has_input)
            line = None if self._eof else self._line
            self._has_input = False
            self._cond.notify_all()
            return line