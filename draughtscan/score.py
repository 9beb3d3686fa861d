"""Score constants and conversions between search and table scores."""

from __future__ import annotations

INF = 2000
BB_INF = 1900
EVAL_INF = 1800

NONE = -INF - 1

PLY_MAX = 99


def _check_score(sc: int) -> None:
    if not -INF <= sc <= INF:
        raise ValueError(f"score out of range: {sc}")


def _check_ply(ply: int, limit: int = PLY_MAX) -> None:
    if not 0 <= ply <= limit:
        raise ValueError(f"ply out of range: {ply}")


def loss(ply: int) -> int:
    """Return the score of a loss found at the given ply."""
    _check_ply(ply, PLY_MAX + 2)
    return -INF + ply


def to_trans(sc: int, ply: int) -> int:
    """Convert a search score at ply into a ply-independent table score."""
    _check_score(sc)
    _check_ply(ply)
    if sc > EVAL_INF:
        return sc + ply
    if sc < -EVAL_INF:
        return sc - ply
    return sc


def from_trans(sc: int, ply: int) -> int:
    """Convert a table score back into a search score at ply."""
    _check_score(sc)
    _check_ply(ply)
    if sc > EVAL_INF:
        return sc - ply
    if sc < -EVAL_INF:
        return sc + ply
    return sc


def clamp(sc: int) -> int:
    """Limit a score to the evaluation range."""
    return max(-EVAL_INF, min(EVAL_INF, sc))


def add(sc: int, inc: int) -> int:
    """Add inc to an evaluation score; leave win/loss scores untouched."""
    if is_eval(sc):
        return clamp(sc + inc)
    return sc


def is_eval(sc: int) -> bool:
    """Return True if sc is an evaluation score, not a win or loss."""
    return -EVAL_INF <= sc <= EVAL_INF