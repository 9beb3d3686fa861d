import pytest

from draughtscan.trans import (
    EXACT,
    LOWER,
    UPPER,
    ProbeResult,
    TranspositionTable,
    is_exact,
    is_lower,
    is_upper,
)


def key(lock, index=8):
    return (lock << 32) | index


def test_flag_predicates():
    assert is_upper(UPPER) and not is_lower(UPPER)
    assert is_lower(LOWER) and not is_upper(LOWER)
    assert is_exact(EXACT) and is_upper(EXACT) and is_lower(EXACT)
    assert not is_exact(UPPER)


def test_store_then_probe():
    tt = TranspositionTable(64)
    tt.store(key(0x1234), 77, 5, LOWER, -42)
    assert tt.probe(key(0x1234)) == ProbeResult(move=77, depth=5, flags=LOWER, score=-42)


def test_probe_missing_returns_none():
    tt = TranspositionTable(64)
    tt.store(key(0x1234), 77, 5, LOWER, 10)
    assert tt.probe(key(0x9999)) is None


def test_deeper_entry_is_kept():
    tt = TranspositionTable(64)
    tt.store(key(7), 11, 8, EXACT, 30)
    tt.store(key(7), 22, 3, UPPER, -5)
    assert tt.probe(key(7)) == ProbeResult(11, 8, EXACT, 30)


def test_same_depth_and_score_merges_flags():
    tt = TranspositionTable(64)
    tt.store(key(7), 11, 4, UPPER, 30)
    tt.store(key(7), 11, 4, LOWER, 30)
    assert tt.probe(key(7)).flags == EXACT


def test_no_move_keeps_previous_move():
    tt = TranspositionTable(64)
    tt.store(key(7), 11, 4, UPPER, 30)
    tt.store(key(7), 0, 6, LOWER, 50)
    result = tt.probe(key(7))
    assert result.move == 11
    assert result.depth == 6


def test_shallowest_entry_replaced_in_full_cluster():
    tt = TranspositionTable(64)
    depths = {1: 5, 2: 1, 3: 7, 4: 3}
    for lock, depth in depths.items():
        tt.store(key(lock), lock, depth, EXACT, 0)
    tt.store(key(5), 5, 2, EXACT, 0)
    assert tt.probe(key(2)) is None
    for lock in (1, 3, 4, 5):
        assert tt.probe(key(lock)).move == lock


def test_old_entry_replaced_first():
    tt = TranspositionTable(4)
    tt.store(key(1), 1, 9, EXACT, 0)
    tt.inc_date()
    for lock in (2, 3, 4):
        tt.store(key(lock), lock, 1, EXACT, 0)
    tt.store(key(5), 5, 1, EXACT, 0)
    assert tt.probe(key(1)) is None
    assert [tt.probe(key(lock)).move for lock in (2, 3, 4, 5)] == [2, 3, 4, 5]


def test_date_wraps():
    tt = TranspositionTable(16)
    for _ in range(16):
        tt.inc_date()
    assert tt.date == 0


def test_clear_removes_entries():
    tt = TranspositionTable(64)
    tt.store(key(3), 9, 2, UPPER, 1)
    tt.inc_date()
    tt.clear()
    assert tt.probe(key(3)) is None
    assert tt.date == 0


def test_set_size_requires_power_of_two():
    with pytest.raises(ValueError):
        TranspositionTable(48)
    with pytest.raises(ValueError):
        TranspositionTable(2)


@pytest.mark.parametrize(
    "args",
    [(1 << 16, 1, 0, 0), (1, 256, 0, 0), (1, 1, 4, 0), (1, 1, 0, 40000)],
)
def test_store_rejects_out_of_range(args):
    tt = TranspositionTable(64)
    move, depth, flags, score = args
    with pytest.raises(ValueError):
        tt.store(key(1), move, depth, flags, score)