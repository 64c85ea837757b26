"""
Performance Rating Solver

Finds the rating R such that

    sum_i expected_score(hole_i, R) == total_score

for the holes a player faced in one round. The sum is strictly increasing
in R, so bisection over [min_return, max_return] converges in about
log2((max_return - min_return) / tolerance) steps.

Usage:
    calc_performance_rating([1300, 1400], total_score=1.0)        # ~1350
    calc_round_performance_rating([1500, 1500], strokes=[-1, 0])  # strokes in, rating out
"""

import logging
from typing import Optional, Sequence

import numpy as np

from src.glo.glo_errors import EmptyHoleSetError, InvalidSolverBoundsError, LengthMismatchError
from src.glo.glo_score import calc_expected_scores, to_scores
from src.glo.glo_settings import DEFAULT_CONFIG, GloConfig
from src.glo.glo_types import PerformanceRatingQuery

logger = logging.getLogger(__name__)


def _expected_total(hole_ratings: np.ndarray, rating: float, rd: float) -> float:
    return float(calc_expected_scores(hole_ratings, rating, rd).sum())


def calc_performance_rating(
    hole_ratings: Sequence[float],
    total_score: float,
    min_return: Optional[float] = None,
    max_return: Optional[float] = None,
    tolerance: Optional[float] = None,
    config: Optional[GloConfig] = None,
) -> float:
    """
    Rating implied by an observed total score against a set of holes.

    Args:
        hole_ratings: ratings of the holes played (non-empty)
        total_score: sum of the player's per-hole scores
        min_return: lower search bound (None -> config, 0)
        max_return: upper search bound (None -> config, 3000)
        tolerance: stop once the half-interval is <= tolerance (None -> config, 0.25)
        config: GloConfig (None -> defaults)

    Returns:
        Performance rating. Saturates at max_return / min_return when
        total_score is out of reach inside the bounds.

    Raises:
        EmptyHoleSetError: no holes
        InvalidSolverBoundsError: max_return <= min_return or tolerance <= 0
    """
    config = config or DEFAULT_CONFIG
    min_return = config.min_return if min_return is None else min_return
    max_return = config.max_return if max_return is None else max_return
    tolerance = config.tolerance if tolerance is None else tolerance

    holes = np.asarray(hole_ratings, dtype=np.float64)
    if holes.size == 0:
        raise EmptyHoleSetError()
    if max_return <= min_return or tolerance <= 0:
        raise InvalidSolverBoundsError(min_return, max_return, tolerance)

    rd = config.rd

    # Target outside what the bounds can produce
    if _expected_total(holes, max_return, rd) <= total_score:
        logger.debug("performance rating saturated at max_return=%s", max_return)
        return max_return
    if _expected_total(holes, min_return, rd) >= total_score:
        logger.debug("performance rating saturated at min_return=%s", min_return)
        return min_return

    offset = (max_return - min_return) / 2
    performance_rating = min_return + offset
    iterations = 0

    while offset > tolerance:
        offset /= 2
        iterations += 1
        total = _expected_total(holes, performance_rating, rd)
        if total < total_score:
            performance_rating += offset
        elif total > total_score:
            performance_rating -= offset
        else:
            break

    logger.debug(
        "performance rating %.3f after %d iterations (%d holes, total_score=%.4f)",
        performance_rating, iterations, holes.size, total_score,
    )
    return performance_rating


def solve(query: PerformanceRatingQuery, config: Optional[GloConfig] = None) -> float:
    """calc_performance_rating for a PerformanceRatingQuery record."""
    return calc_performance_rating(
        query.hole_ratings,
        query.total_score,
        min_return=query.min_return,
        max_return=query.max_return,
        tolerance=query.tolerance,
        config=config,
    )


def calc_round_performance_rating(
    hole_ratings: Sequence[float],
    strokes: Sequence[float],
    min_return: Optional[float] = None,
    max_return: Optional[float] = None,
    tolerance: Optional[float] = None,
    config: Optional[GloConfig] = None,
) -> float:
    """Performance rating for a round given per-hole strokes.

    Raises:
        LengthMismatchError: hole_ratings and strokes differ in length
    """
    if len(hole_ratings) != len(strokes):
        raise LengthMismatchError(hole_ratings=len(hole_ratings), strokes=len(strokes))
    total_score = float(to_scores(strokes).sum())
    return calc_performance_rating(
        hole_ratings, total_score,
        min_return=min_return,
        max_return=max_return,
        tolerance=tolerance,
        config=config,
    )
