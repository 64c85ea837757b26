"""
Glo batch update from a rounds DataFrame

Usage:
    rounds = pd.DataFrame({
        'hole_rating': [1680.0, 1500.0],
        'performance_rating': [1500.0, 1500.0],
        'strokes': [0.0, 0.0],
    })
    new_rating = batch_rating_update_frame(1500.0, rounds)   # ~1504.55
"""

import logging
from typing import Optional

import pandas as pd

from src.glo.glo_calculator import GloCalculator

logger = logging.getLogger(__name__)

ROUND_COLUMNS = ('hole_rating', 'performance_rating', 'strokes')


def batch_rating_update_frame(
    player_rating: float,
    rounds: pd.DataFrame,
    calculator: Optional[GloCalculator] = None,
) -> float:
    """
    One batch update for all rows of ``rounds`` (row order = round order).

    rounds columns: hole_rating, performance_rating, strokes

    Raises:
        KeyError: a required column is missing
    """
    missing = [col for col in ROUND_COLUMNS if col not in rounds.columns]
    if missing:
        raise KeyError(f"rounds is missing column(s): {', '.join(missing)}")

    calculator = calculator or GloCalculator()
    if rounds.empty:
        return player_rating

    new_rating = calculator.batch_rating_update(
        player_rating,
        rounds['hole_rating'].astype(float).tolist(),
        rounds['performance_rating'].astype(float).tolist(),
        rounds['strokes'].astype(float).tolist(),
    )
    logger.info(f"  Batch update over {len(rounds):,} rounds: {player_rating:.2f} -> {new_rating:.2f}")
    return new_rating
