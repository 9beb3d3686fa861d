"""Combinatorial indexing of piece sets within a set of squares."""

from __future__ import annotations

TUPLE_N_MAX = 50
TUPLE_P_MAX = 6

_MASK_64 = (1 << 64) - 1


def _build_sizes() -> list[list[int]]:
    sizes = [[0] * 64 for _ in range(TUPLE_P_MAX + 1)]
    for n in range(TUPLE_N_MAX + 1):
        sizes[0][n] = 1
    for n in range(1, TUPLE_N_MAX + 1):
        for p in range(1, min(n, TUPLE_P_MAX) + 1):
            sizes[p][n] = sizes[p][n - 1] + sizes[p - 1][n - 1]
    return sizes


_SIZES = _build_sizes()


def tuple_size(p: int, n: int) -> int:
    """Number of ways to place p identical pieces on n squares."""
    return _SIZES[p][n]


def _bits(b: int):
    while b:
        low = b & -b
        yield low.bit_length() - 1
        b ^= low


def _check(pieces: int, squares: int, p: int, n: int) -> None:
    if not 0 <= p <= TUPLE_P_MAX:
        raise ValueError(f"piece count out of range: {p}")
    if not p <= n <= TUPLE_N_MAX:
        raise ValueError(f"square count out of range: {n}")
    if pieces.bit_count() != p:
        raise ValueError("piece set does not hold p pieces")
    if squares.bit_count() != n:
        raise ValueError("square set does not hold n squares")
    if pieces & ~squares:
        raise ValueError("pieces are not all within the squares")


def tuple_index(pieces: int, squares: int, p: int, n: int) -> int:
    """Index of the piece set, counting squares from the lowest bit."""
    _check(pieces, squares, p, n)
    index = 0
    for i, sq in enumerate(_bits(pieces)):
        pos = (squares & ((1 << sq) - 1)).bit_count()
        index += tuple_size(i + 1, pos)
    return index


def tuple_index_rev(pieces: int, squares: int, p: int, n: int) -> int:
    """Index of the piece set, counting squares from the highest bit."""
    _check(pieces, squares, p, n)
    index = 0
    for i, sq in enumerate(sorted(_bits(pieces), reverse=True)):
        if sq >= 63:
            raise ValueError(f"square out of range: {sq}")
        after = -(1 << (sq + 1)) & _MASK_64
        pos = (squares & after).bit_count()
        index += tuple_size(i + 1, pos)
    return index