import pytest

from draughtscan import score


def test_loss_at_root_is_minus_inf():
    assert score.loss(0) == -score.INF


@pytest.mark.parametrize("ply", [0, 1, 7, 50, 101])
def test_loss_grows_with_ply(ply):
    assert score.loss(ply) - score.loss(0) == ply


def test_loss_rejects_bad_ply():
    with pytest.raises(ValueError):
        score.loss(-1)
    with pytest.raises(ValueError):
        score.loss(score.PLY_MAX + 3)


@pytest.mark.parametrize("sc", [-1999, -1850, -1801, -1800, 0, 123, 1800, 1801, 1990])
@pytest.mark.parametrize("ply", [0, 3, 9])
def test_trans_round_trip(sc, ply):
    stored = score.to_trans(sc, ply)
    if -score.INF <= stored <= score.INF:
        assert score.from_trans(stored, ply) == sc


def test_eval_scores_unchanged_by_trans():
    assert score.to_trans(500, 20) == 500
    assert score.from_trans(-500, 20) == -500


def test_win_score_moves_away_from_zero_when_stored():
    assert score.to_trans(score.EVAL_INF + 1, 4) > score.EVAL_INF + 1
    assert score.to_trans(-score.EVAL_INF - 1, 4) < -score.EVAL_INF - 1


def test_to_trans_rejects_out_of_range():
    with pytest.raises(ValueError):
        score.to_trans(score.INF + 1, 0)
    with pytest.raises(ValueError):
        score.from_trans(0, score.PLY_MAX + 1)


def test_clamp():
    assert score.clamp(5000) == score.EVAL_INF
    assert score.clamp(-5000) == -score.EVAL_INF
    assert score.clamp(17) == 17


def test_add():
    assert score.add(100, 50) == 150
    assert score.add(score.EVAL_INF - 10, 50) == score.EVAL_INF
    assert score.add(-score.EVAL_INF + 10, -50) == -score.EVAL_INF
    assert score.add(score.BB_INF, 50) == score.BB_INF


def test_is_eval_bounds():
    assert score.is_eval(score.EVAL_INF)
    assert score.is_eval(-score.EVAL_INF)
    assert not score.is_eval(score.EVAL_INF + 1)
    assert not score.is_eval(score.NONE)