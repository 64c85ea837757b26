"""Boundary function tests (scenarios for the module-level API)."""

import pytest

from src.glo import glo
from src.glo.glo_errors import (
    EmptyHoleSetError,
    InvalidScoreDomainError,
    InvalidSolverBoundsError,
    LengthMismatchError,
)


def test_score_round_trip():
    for score in (0.05, 0.3, 0.5, 0.77, 0.95):
        assert glo.to_score(glo.to_strokes(score)) == pytest.approx(score, abs=1e-6)


def test_expected_score_properties():
    assert glo.expected_score(1700, 1700) == 0.5
    assert glo.expected_score(1300, 1480) + glo.expected_score(1480, 1300) == pytest.approx(1.0)


def test_solver_convergence():
    assert glo.solve_performance_rating([1500, 1500], 1) == pytest.approx(1500, abs=0.25)


def test_solver_saturation():
    assert glo.solve_performance_rating([1500, 1500], 2, min_return=0, max_return=2000) == 2000


def test_k_factor():
    assert glo.k_factor(1500) == pytest.approx(17.54, rel=0.01)
    assert glo.k_factor(2000) == 12


def test_stream_scenario():
    new_player, new_hole = glo.stream_update(1480, 1300, 1300, 1)
    assert new_player == pytest.approx(1471.44, rel=5e-4)
    assert new_hole == pytest.approx(1316.62, rel=5e-4)


def test_batch_scenario():
    result = glo.batch_update(1500, [1680, 1500], [1500, 1500], [0, 0])
    assert result == pytest.approx(1504.55, rel=5e-4)


def test_round_to_update_pipeline():
    """strokes -> performance rating -> stream update per hole."""
    holes = [1500.0, 1500.0]
    strokes = [-1.0, -1.0]
    total = sum(glo.to_score(s) for s in strokes)
    performance = glo.solve_performance_rating(holes, total)
    assert performance == pytest.approx(1680, abs=0.25)

    player = 1680.0
    for hole, hole_strokes in zip(holes, strokes):
        new_player, new_hole = glo.stream_update(player, hole, performance, hole_strokes)
        assert new_player == pytest.approx(player, abs=0.01)
        assert new_hole == pytest.approx(hole, abs=0.05)


def test_errors():
    with pytest.raises(InvalidScoreDomainError):
        glo.to_strokes(0)
    with pytest.raises(EmptyHoleSetError):
        glo.solve_performance_rating([], 0)
    with pytest.raises(InvalidSolverBoundsError):
        glo.solve_performance_rating([1500], 0.5, min_return=3000, max_return=0)
    with pytest.raises(LengthMismatchError):
        glo.batch_update(1500, [1500], [], [0])


def test_extreme_inputs_stay_finite():
    """Huge strokes and rating gaps saturate through the call boundary."""
    assert glo.to_score(700) == pytest.approx(0.0, abs=1e-12)
    assert glo.expected_score(200000, 0) == pytest.approx(0.0, abs=1e-12)
    new_player, new_hole = glo.stream_update(1500, 1500, 1500, 700)
    assert new_player < 1500
    assert new_hole > 1500
