"""
Glo score model

Strokes <-> score conversion and the logistic expected score.

  score    = 1 / (1 + 10^(strokes / 2))
  strokes  = 2 * log10((1 - score) / score)
  expected = 1 / (1 + 10^((hole - player) / RD))

A score of 0.5 is an even result (0 strokes relative to the hole).
Lower strokes -> higher score.

Both logistics are evaluated as expit(-x * ln 10), so huge strokes or
rating gaps saturate toward 0 or 1 instead of overflowing.
"""

import math
from typing import Sequence

import numpy as np
from scipy.special import expit

from src.glo.glo_config import RD
from src.glo.glo_errors import InvalidScoreDomainError

LN10 = math.log(10.0)


def to_score(strokes: float) -> float:
    """Convert strokes (-inf, inf) to score (0, 1)."""
    return float(expit(-(strokes / 2.0) * LN10))


def to_strokes(score: float) -> float:
    """Convert score (0, 1) back to strokes.

    Raises:
        InvalidScoreDomainError: score is not strictly between 0 and 1.
    """
    if not 0.0 < score < 1.0:
        raise InvalidScoreDomainError(score)
    return 2.0 * math.log10((1.0 - score) / score)


def to_scores(strokes: Sequence[float]) -> np.ndarray:
    """Vectorised to_score."""
    strokes = np.asarray(strokes, dtype=np.float64)
    return expit(-(strokes / 2.0) * LN10)


def calc_expected_score(hole_rating: float, player_rating: float, rd: float = RD) -> float:
    """Expected score of a player against a hole: 1 / (1 + 10^((hole - player) / rd))."""
    return float(expit(((player_rating - hole_rating) / rd) * LN10))


def calc_expected_scores(
    hole_ratings: Sequence[float],
    player_rating: float | np.ndarray,
    rd: float = RD,
) -> np.ndarray:
    """Expected score against each hole (player_rating may be per-hole)."""
    hole_ratings = np.asarray(hole_ratings, dtype=np.float64)
    return expit(((player_rating - hole_ratings) / rd) * LN10)
