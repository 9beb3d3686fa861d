"""Clustered transposition table with depth- and age-based replacement."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

DATE_SIZE = 16
CLUSTER_SIZE = 4

UPPER_FLAG = 1 << 0
LOWER_FLAG = 1 << 1

UNKNOWN = 0
UPPER = UPPER_FLAG
LOWER = LOWER_FLAG
EXACT = UPPER_FLAG | LOWER_FLAG
FLAGS = UPPER_FLAG | LOWER_FLAG

INDEX_NONE = 0


def is_upper(flags: int) -> bool:
    return (flags & UPPER_FLAG) != 0


def is_lower(flags: int) -> bool:
    return (flags & LOWER_FLAG) != 0


def is_exact(flags: int) -> bool:
    return flags == EXACT


@dataclass(frozen=True)
class ProbeResult:
    """What a table probe found for a key."""

    move: int
    depth: int
    flags: int
    score: int


@dataclass(slots=True)
class _Entry:
    lock: int = 0
    move: int = 0
    score: int = 0
    depth: int = 0
    date: int = 0
    flags: int = 0


class TranspositionTable:
    """Hash table of search results, grouped in clusters of four entries."""

    def __init__(self, size: int = 1 << 16) -> None:
        self._table: list[_Entry] = []
        self._date = 0
        self.set_size(size)

    @property
    def size(self) -> int:
        return self._size

    @property
    def date(self) -> int:
        return self._date

    def set_size(self, size: int) -> None:
        """Resize to a power-of-two number of entries and clear."""
        if size < CLUSTER_SIZE or size & (size - 1):
            raise ValueError(f"table size must be a power of two >= {CLUSTER_SIZE}: {size}")
        self._size = size
        self._mask = (size - 1) & -CLUSTER_SIZE
        self.clear()

    def clear(self) -> None:
        self._table = [_Entry() for _ in range(self._size)]
        self._date = 0

    def inc_date(self) -> None:
        self._date = (self._date + 1) % DATE_SIZE

    def _age(self, date: int) -> int:
        return (self._date - date) % DATE_SIZE

    def _cluster(self, key: int) -> tuple[list[_Entry], int]:
        index = key & self._mask
        lock = (key >> 32) & 0xFFFFFFFF
        return self._table[index:index + CLUSTER_SIZE], lock

    def store(self, key: int, move: int, depth: int, flags: int, score: int) -> None:
        """Record a search result, keeping deeper results for the same key."""
        if not 0 <= move < 1 << 16:
            raise ValueError(f"move index out of range: {move}")
        if not 0 <= depth < 1 << 8:
            raise ValueError(f"depth out of range: {depth}")
        if flags & ~FLAGS:
            raise ValueError(f"invalid flags: {flags}")
        if not -32767 <= score <= 32767:
            raise ValueError(f"score out of range: {score}")

        cluster, lock = self._cluster(key)

        best: Optional[_Entry] = None
        best_score = -1_000_000_000

        for entry in cluster:
            if entry.lock == lock:
                if entry.depth <= depth:
                    if move == INDEX_NONE:
                        move = entry.move
                    if entry.depth == depth and entry.score == score:
                        flags |= entry.flags
                    entry.move = move
                    entry.depth = depth
                    entry.date = self._date
                    entry.flags = flags
                    entry.score = score
                else:
                    entry.date = self._date
                return

            sc = self._age(entry.date) * 256 - entry.depth
            if sc > best_score:
                best = entry
                best_score = sc

        assert best is not None
        best.lock = lock
        best.move = move
        best.depth = depth
        best.date = self._date
        best.flags = flags
        best.score = score

    def probe(self, key: int) -> Optional[ProbeResult]:
        """Return the stored result for key, or None if there is none."""
        cluster, lock = self._cluster(key)
        for entry in cluster:
            if entry.lock == lock:
                return ProbeResult(entry.move, entry.depth, entry.flags, entry.score)
        return None