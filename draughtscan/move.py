"""Move encoding: origin, destination and captured squares packed in one integer."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator

from .util import BadInput, NumberScanner

if TYPE_CHECKING:
    from .pos import Geometry, Pos

MOVE_NONE = 0
INDEX_NONE = 0
INDEX_SIZE = 1 << 12

_SQUARE_MASK = 0o77
_INDEX_MASK = 0o7777


def _iter_bits(b: int) -> Iterator[int]:
    while b:
        low = b & -b
        yield low.bit_length() - 1
        b ^= low


def move_make(frm: int, to: int, captured: int = 0) -> int:
    """Pack a move from frm to to that takes the pieces in captured."""
    if not 0 <= frm <= _SQUARE_MASK:
        raise ValueError(f"origin square out of range: {frm}")
    if not 0 <= to <= _SQUARE_MASK:
        raise ValueError(f"destination square out of range: {to}")
    if captured < 0 or captured & _INDEX_MASK:
        raise ValueError(f"captured set overlaps the square fields: {captured:#x}")
    return captured | (frm << 6) | to


def move_from(mv: int) -> int:
    return (mv >> 6) & _SQUARE_MASK


def move_to(mv: int) -> int:
    return mv & _SQUARE_MASK


def move_captured(mv: int) -> int:
    return mv & ~_INDEX_MASK


def move_index(mv: int) -> int:
    """The origin/destination part of a move, used for ordering statistics."""
    return mv & _INDEX_MASK


def move_is_capture(mv: int) -> bool:
    return move_captured(mv) != 0


def move_is_man(mv: int, pos: "Pos") -> bool:
    """Return True if the moving piece is a man."""
    return bool((pos.man() >> move_from(mv)) & 1)


def move_is_promotion(mv: int, pos: "Pos") -> bool:
    """Return True if a man moves onto its promotion row."""
    return move_is_man(mv, pos) and pos.geometry.square_is_promotion(move_to(mv), pos.turn)


def move_is_conversion(mv: int, pos: "Pos") -> bool:
    """Return True if the move cannot be undone: a man move or a capture."""
    return move_is_man(mv, pos) or move_is_capture(mv)


def move_to_hub(mv: int, geometry: "Geometry") -> str:
    """Render a move in full notation, listing every captured square."""
    caps = move_captured(mv)
    parts = [
        geometry.square_to_string(move_from(mv)),
        "x" if caps else "-",
        geometry.square_to_string(move_to(mv)),
    ]
    for sq in _iter_bits(caps):
        parts.append("x")
        parts.append(geometry.square_to_string(sq))
    return "".join(parts)


def move_from_hub(s: str, geometry: "Geometry") -> int:
    """Parse a move written in full notation."""
    scan = NumberScanner(s)

    frm = geometry.square_from_string(scan.get_token())

    if scan.get_token() not in ("-", "x"):
        raise BadInput(f"bad move separator in {s!r}")

    to = geometry.square_from_string(scan.get_token())

    caps = 0
    while not scan.eos():
        if scan.get_token() != "x":
            raise BadInput(f"bad capture separator in {s!r}")
        caps |= 1 << geometry.square_from_string(scan.get_token())

    if caps & _INDEX_MASK:
        raise BadInput(f"square cannot be captured in {s!r}")

    return move_make(frm, to, caps)