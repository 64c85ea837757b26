"""
Glo Rating Calculator

Player-vs-hole rating updates driven by strokes.

Core formulas:
  blended_player = player + R_WEIGHT * (performance - player)
  expected       = 1 / (1 + 10^((hole - blended_player) / RD))
  actual         = 1 / (1 + 10^(strokes / 2))
  K_player       = K(player)              (unblended prior)
  new_player     = player + K_player * (actual - expected)
  new_hole       = hole + K_HOLE * (expected - actual)     (stream only)

Modes:
  - Stream: one round -> (new_player, new_hole)
  - Batch: many rounds summed into one player update; holes untouched
"""

import logging
from typing import Optional, Sequence

from src.glo.glo_errors import LengthMismatchError
from src.glo.glo_score import calc_expected_score, to_score
from src.glo.glo_settings import DEFAULT_CONFIG, GloConfig
from src.glo.glo_types import BatchRatingData, HoleAdjustment, RatingResult, StreamRatingData
from src.glo.k_factor import calc_player_k_factor

logger = logging.getLogger(__name__)


class GloCalculator:
    """Glo rating calculator."""

    def __init__(self, config: Optional[GloConfig] = None):
        self.config = config or DEFAULT_CONFIG

    def expected_score(self, hole_rating: float, player_rating: float) -> float:
        return calc_expected_score(hole_rating, player_rating, self.config.rd)

    def k_factor(self, player_rating: float) -> float:
        return calc_player_k_factor(player_rating, self.config)

    def modify_player_rating(self, player_rating: float, performance_rating: float) -> float:
        """Pull the prior toward the round's performance rating by R_WEIGHT."""
        return player_rating + self.config.r_weight * (performance_rating - player_rating)

    def modify_hole_rating(
        self,
        hole_rating: float,
        adjustment: Optional[HoleAdjustment] = None,
    ) -> float:
        """Hole rating used for the expected score.

        ``adjustment`` is accepted so callers can already pass course
        conditions; no signal is applied yet.
        """
        return hole_rating

    def stream_rating_update(
        self,
        player_rating: float,
        hole_rating: float,
        performance_rating: float,
        strokes: float,
        adjustment: Optional[HoleAdjustment] = None,
    ) -> RatingResult:
        """
        Single-round update of both the player and the hole.

        Args:
            player_rating: player's prior rating
            hole_rating: hole's prior rating
            performance_rating: player's performance rating for the round
            strokes: strokes relative to the hole
            adjustment: optional hole signals (see modify_hole_rating)

        Returns:
            RatingResult(player_rating, hole_rating)
        """
        modified_hole = self.modify_hole_rating(hole_rating, adjustment)
        modified_player = self.modify_player_rating(player_rating, performance_rating)

        expected_score = self.expected_score(modified_hole, modified_player)
        actual_score = to_score(strokes)
        k_player = self.k_factor(player_rating)

        new_player = player_rating + k_player * (actual_score - expected_score)
        new_hole = hole_rating + self.config.k_hole * (expected_score - actual_score)

        logger.debug(
            "stream update: expected=%.4f actual=%.4f K=%.2f player %.2f->%.2f hole %.2f->%.2f",
            expected_score, actual_score, k_player,
            player_rating, new_player, hole_rating, new_hole,
        )
        return RatingResult(player_rating=new_player, hole_rating=new_hole)

    def batch_rating_update(
        self,
        player_rating: float,
        hole_ratings: Sequence[float],
        performance_ratings: Sequence[float],
        strokes: Sequence[float],
    ) -> float:
        """
        Aggregate several rounds into one player update.

        Expected and actual scores are summed over the rounds and a single
        K (from the unmodified prior) is applied. Hole ratings are not
        updated in this mode.

        Raises:
            LengthMismatchError: the three sequences differ in length
        """
        if not len(hole_ratings) == len(performance_ratings) == len(strokes):
            raise LengthMismatchError(
                hole_ratings=len(hole_ratings),
                performance_ratings=len(performance_ratings),
                strokes=len(strokes),
            )

        total_expected = 0.0
        total_actual = 0.0
        for hole_rating, performance_rating, round_strokes in zip(
            hole_ratings, performance_ratings, strokes
        ):
            total_expected += self.expected_score(
                self.modify_hole_rating(hole_rating),
                self.modify_player_rating(player_rating, performance_rating),
            )
            total_actual += to_score(round_strokes)

        k_player = self.k_factor(player_rating)
        new_player = player_rating + k_player * (total_actual - total_expected)

        logger.debug(
            "batch update: %d rounds expected=%.4f actual=%.4f K=%.2f player %.2f->%.2f",
            len(strokes), total_expected, total_actual, k_player, player_rating, new_player,
        )
        return new_player

    def stream_update(self, data: StreamRatingData) -> RatingResult:
        return self.stream_rating_update(
            data.player_rating,
            data.hole_rating,
            data.performance_rating,
            data.strokes,
            adjustment=data.adjustment,
        )

    def batch_update(self, data: BatchRatingData) -> float:
        return self.batch_rating_update(
            data.player_rating,
            data.hole_ratings,
            data.performance_ratings,
            data.strokes,
        )
