"""Player K-factor policy."""

import math
from typing import Optional

from src.glo.glo_settings import DEFAULT_CONFIG, GloConfig


def calc_player_k_factor(player_rating: float, config: Optional[GloConfig] = None) -> float:
    """Volatility coefficient for a player rating.

    - rating < threshold: K = scale * sqrt(floor + (threshold - rating)^2 / spread)
      (1500 -> ~17.54, 1100 -> ~28.27)
    - rating >= threshold: K = player_default (12)

    The branch switch at the threshold is not smoothed. With the default
    tunables both sides meet at 12; with others they jump.
    """
    config = config or DEFAULT_CONFIG
    if player_rating < config.k_threshold:
        gap = config.k_threshold - player_rating
        return config.k_scale * math.sqrt(config.k_floor + gap ** 2 / config.k_spread)
    return config.k_player_default
