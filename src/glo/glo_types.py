"""Glo value objects.

All records are transient: built by the caller for one computation and
never retained by the engine.
"""
from dataclasses import dataclass, field
from typing import NamedTuple, Optional, Sequence

GloRating = float
GloScore = float


@dataclass(frozen=True)
class HoleAdjustment:
    """Auxiliary signals for a hole rating (currently unused by the engine)."""
    conditions: Optional[float] = None
    pin_difficulty: Optional[float] = None
    weather: Optional[float] = None


class RatingResult(NamedTuple):
    """Stream-mode update result."""
    player_rating: GloRating
    hole_rating: GloRating


@dataclass
class StreamRatingData:
    """Inputs for a single-round (stream) update."""
    player_rating: GloRating
    hole_rating: GloRating
    performance_rating: GloRating
    strokes: float
    adjustment: Optional[HoleAdjustment] = None


@dataclass
class BatchRatingData:
    """Inputs for a multi-round (batch) update. Index i describes round i."""
    player_rating: GloRating
    hole_ratings: Sequence[GloRating] = field(default_factory=list)
    performance_ratings: Sequence[GloRating] = field(default_factory=list)
    strokes: Sequence[float] = field(default_factory=list)


@dataclass
class PerformanceRatingQuery:
    """Solver inputs. ``None`` bounds resolve to the configured defaults."""
    hole_ratings: Sequence[GloRating]
    total_score: GloScore
    min_return: Optional[float] = None
    max_return: Optional[float] = None
    tolerance: Optional[float] = None
