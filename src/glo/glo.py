"""
Glo rating system: call boundary.

Module-level functions backed by a default GloCalculator. Build a
GloCalculator(GloConfig(...)) directly to use other tunables.
"""

from typing import Optional, Sequence

from src.glo.glo_calculator import GloCalculator
from src.glo.glo_score import to_score, to_strokes
from src.glo.glo_settings import DEFAULT_CONFIG
from src.glo.glo_types import HoleAdjustment, RatingResult
from src.glo.performance_rating import calc_performance_rating

__all__ = [
    'to_score',
    'to_strokes',
    'expected_score',
    'solve_performance_rating',
    'k_factor',
    'stream_update',
    'batch_update',
]

_calculator = GloCalculator(DEFAULT_CONFIG)


def expected_score(hole_rating: float, player_rating: float) -> float:
    return _calculator.expected_score(hole_rating, player_rating)


def solve_performance_rating(
    hole_ratings: Sequence[float],
    total_score: float,
    min_return: Optional[float] = None,
    max_return: Optional[float] = None,
    tolerance: Optional[float] = None,
) -> float:
    return calc_performance_rating(
        hole_ratings, total_score,
        min_return=min_return,
        max_return=max_return,
        tolerance=tolerance,
        config=_calculator.config,
    )


def k_factor(player_rating: float) -> float:
    return _calculator.k_factor(player_rating)


def stream_update(
    player_rating: float,
    hole_rating: float,
    performance_rating: float,
    strokes: float,
    adjustment: Optional[HoleAdjustment] = None,
) -> RatingResult:
    return _calculator.stream_rating_update(
        player_rating, hole_rating, performance_rating, strokes, adjustment=adjustment,
    )


def batch_update(
    player_rating: float,
    hole_ratings: Sequence[float],
    performance_ratings: Sequence[float],
    strokes: Sequence[float],
) -> float:
    return _calculator.batch_rating_update(player_rating, hole_ratings, performance_ratings, strokes)
