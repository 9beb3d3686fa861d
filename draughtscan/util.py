"""Small helpers: number tokenising, natural-number checks, timing and file loading."""

from __future__ import annotations

import time
from typing import BinaryIO, Callable

_DIGITS = frozenset("0123456789")


class BadInput(ValueError):
    """Raised when text cannot be parsed as the expected notation."""


class BadOutput(Exception):
    """Raised when a value cannot be rendered to the expected notation."""


class NumberScanner:
    """Splits a string into runs of digits and single other characters."""

    def __init__(self, string: str) -> None:
        self.string = string
        self._pos = 0

    def eos(self) -> bool:
        """Return True once every character has been consumed."""
        return self._pos >= len(self.string)

    def get_token(self) -> str:
        """Return the next token, or an empty string at the end."""
        if self.eos():
            return ""
        start = self._pos
        first = self.string[self._pos]
        self._pos += 1
        if first in _DIGITS:
            while not self.eos() and self.string[self._pos] in _DIGITS:
                self._pos += 1
        return self.string[start:self._pos]

    def __iter__(self):
        while not self.eos():
            yield self.get_token()


class Timer:
    """An accumulating stopwatch."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._elapsed = 0.0
        self._running = False
        self._start = 0.0

    def reset(self) -> None:
        """Stop the timer and clear the accumulated time."""
        self._elapsed = 0.0
        self._running = False

    def start(self) -> None:
        """Start (or restart) measuring from now."""
        self._start = self._clock()
        self._running = True

    def stop(self) -> None:
        """Stop measuring and add the running interval to the total."""
        if not self._running:
            raise RuntimeError("timer is not running")
        self._elapsed += self._clock() - self._start
        self._running = False

    def elapsed(self) -> float:
        """Return the accumulated seconds, including a running interval."""
        total = self._elapsed
        if self._running:
            total += self._clock() - self._start
        return total


def string_is_nat(s: str) -> bool:
    """Return True if s is a non-empty string of ASCII digits."""
    return bool(s) and all(c in _DIGITS for c in s)


def load_file(file: BinaryIO) -> bytes:
    """Read the whole content of a binary stream."""
    return file.read()