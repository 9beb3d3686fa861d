"""Board geometry, pieces and positions as bitboards."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional

from .config import Variant
from .move import move_captured, move_from, move_to
from .util import BadInput, string_is_nat


class Side(enum.IntEnum):
    WHITE = 0
    BLACK = 1

    @property
    def opp(self) -> "Side":
        return Side(self ^ 1)


class Piece(enum.IntEnum):
    WM = 0
    WK = 1
    BM = 2
    BK = 3
    EMPTY = 4
    FRAME = 5


PIECE_SIZE = 4


class Direction(enum.IntEnum):
    NW = 0
    NE = 1
    SW = 2
    SE = 3


class Geometry:
    """Square layout of a variant's board, with a padded internal numbering."""

    def __init__(self, variant: Variant = Variant.INTERNATIONAL) -> None:
        n = 4 if variant is Variant.BRAZILIAN else 5
        width = 2 * n + 1

        self.variant = variant
        self.count = 2 * n * n
        self.size = width * (n + 1)
        self.last_rank = 2 * n - 1

        from_50: list[int] = []
        to_50 = [-1] * self.size
        files = [-1] * self.size
        ranks = [-1] * self.size

        for g in range(n):
            row_a = n + 1 + g * width
            row_b = row_a + n
            for row, file_offset, rank in ((row_a, 1, 2 * g), (row_b, 0, 2 * g + 1)):
                for i in range(n):
                    sq = row + i
                    to_50[sq] = len(from_50)
                    from_50.append(sq)
                    files[sq] = 2 * i + file_offset
                    ranks[sq] = rank

        self._from_50 = tuple(from_50)
        self._to_50 = tuple(to_50)
        self._file = tuple(files)
        self._rank = tuple(ranks)
        self._inc = {
            Direction.NW: -(n + 1),
            Direction.NE: -n,
            Direction.SW: +n,
            Direction.SE: +(n + 1),
        }
        self.bit_squares = sum(1 << sq for sq in from_50)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Geometry):
            return NotImplemented
        return self.variant is other.variant

    def __hash__(self) -> int:
        return hash(self.variant)

    def __repr__(self) -> str:
        return f"Geometry({self.variant})"

    def square_is_ok(self, sq: int) -> bool:
        return 0 <= sq < self.size and self._to_50[sq] >= 0

    def _require(self, sq: int) -> None:
        if not self.square_is_ok(sq):
            raise ValueError(f"not a board square: {sq}")

    def square_from_50(self, index: int) -> int:
        if not 0 <= index < self.count:
            raise ValueError(f"square index out of range: {index}")
        return self._from_50[index]

    def square_to_50(self, sq: int) -> int:
        self._require(sq)
        return self._to_50[sq]

    def square_file(self, sq: int) -> int:
        self._require(sq)
        return self._file[sq]

    def square_rank(self, sq: int) -> int:
        self._require(sq)
        return self._rank[sq]

    def square_rank_for(self, sq: int, side: Side) -> int:
        """Rank of sq counted from the given side's home row."""
        rank = self.square_rank(sq)
        return self.last_rank - rank if Side(side) is Side.WHITE else rank

    def square_opp(self, sq: int) -> int:
        return (self.size - 1) - sq

    def square_is_promotion(self, sq: int, side: Side) -> bool:
        target = 0 if Side(side) is Side.WHITE else self.last_rank
        return self.square_rank(sq) == target

    def square_to_string(self, sq: int) -> str:
        return str(self.square_to_50(sq) + 1)

    def string_is_square(self, s: str) -> bool:
        return string_is_nat(s) and 1 <= int(s) <= self.count

    def square_from_string(self, s: str) -> int:
        if not string_is_nat(s):
            raise BadInput(f"not a square number: {s!r}")
        return self.square_from_int(int(s))

    def square_from_int(self, n: int) -> int:
        if not 1 <= n <= self.count:
            raise BadInput(f"square number out of range: {n}")
        return self._from_50[n - 1]

    def increment(self, direction: Direction) -> int:
        return self._inc[Direction(direction)]


def _check_piece(pc: int) -> None:
    if not 0 <= pc < PIECE_SIZE:
        raise ValueError(f"not a piece: {pc}")


def piece_man(side: Side) -> Piece:
    return Piece(Side(side) << 1)


def piece_king(side: Side) -> Piece:
    return Piece((Side(side) << 1) | 1)


def piece_promotion(pc: Piece) -> Piece:
    _check_piece(pc)
    return Piece(pc ^ 1)


def piece_side(pc: Piece) -> Side:
    _check_piece(pc)
    return Side((pc >> 1) & 1)


def piece_is_man(pc: Piece) -> bool:
    _check_piece(pc)
    return not pc & 1


def piece_is_king(pc: Piece) -> bool:
    _check_piece(pc)
    return bool(pc & 1)


def piece_is_side(pc: Piece, side: Side) -> bool:
    return piece_side(pc) is Side(side)


@dataclass(frozen=True)
class Pos:
    """An immutable position: side to move, piece sets and king set."""

    geometry: Geometry
    turn: Side
    white: int
    black: int
    kings: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "turn", Side(self.turn))
        if self.white & self.black:
            raise ValueError("a square holds both a white and a black piece")
        if self.kings & ~(self.white | self.black):
            raise ValueError("a king is marked on a square without a piece")

    @classmethod
    def from_bits(cls, geometry: Geometry, turn: Side, wm: int, bm: int, wk: int, bk: int) -> "Pos":
        return cls(geometry, turn, wm | wk, bm | bk, wk | bk)

    def piece(self, side: Side) -> int:
        return self.white if Side(side) is Side.WHITE else self.black

    def man(self, side: Optional[Side] = None) -> int:
        pieces = self.all() if side is None else self.piece(side)
        return pieces & ~self.kings

    def king(self, side: Optional[Side] = None) -> int:
        pieces = self.all() if side is None else self.piece(side)
        return pieces & self.kings

    @property
    def wm(self) -> int:
        return self.man(Side.WHITE)

    @property
    def bm(self) -> int:
        return self.man(Side.BLACK)

    @property
    def wk(self) -> int:
        return self.king(Side.WHITE)

    @property
    def bk(self) -> int:
        return self.king(Side.BLACK)

    def all(self) -> int:
        return self.white | self.black

    def empty(self) -> int:
        return self.geometry.bit_squares & ~self.all()

    def do_move(self, mv: int) -> "Pos":
        """Return the position after playing mv."""
        frm, to, captured = move_from(mv), move_to(mv), move_captured(mv)
        atk = self.turn
        dfn = atk.opp

        pieces = [self.white, self.black]
        if not (pieces[atk] >> frm) & 1:
            raise ValueError(f"no piece of the side to move on square {frm}")
        if frm != to and not (self.empty() >> to) & 1:
            raise ValueError(f"destination square {to} is not empty")
        if captured & ~pieces[dfn]:
            raise ValueError("captured squares do not all hold opponent pieces")

        kings = self.kings
        pieces[atk] = (pieces[atk] & ~(1 << frm)) | (1 << to)

        if (self.man() >> frm) & 1:
            if self.geometry.square_is_promotion(to, atk):
                kings |= 1 << to
        else:
            kings = (kings & ~(1 << frm)) | (1 << to)

        pieces[dfn] &= ~captured
        kings &= ~captured

        return Pos(self.geometry, dfn, pieces[Side.WHITE], pieces[Side.BLACK], kings)

    def size(self) -> int:
        return self.all().bit_count()

    def has_king(self) -> bool:
        return self.kings != 0

    def square(self, sq: int) -> Piece:
        """Return what stands on sq."""
        if not self.geometry.square_is_ok(sq):
            raise ValueError(f"not a board square: {sq}")
        bit = 1 << sq
        if self.empty() & bit:
            return Piece.EMPTY
        if self.wm & bit:
            return Piece.WM
        if self.bm & bit:
            return Piece.BM
        if self.wk & bit:
            return Piece.WK
        return Piece.BK