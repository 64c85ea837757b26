"""Glo rating constants (defaults for GloConfig)."""

# Logistic scale for expected score
RD = 360.0

# Hole K-factor (player-independent)
K_HOLE = 35.0

# Player K-factor at or above K_THRESHOLD
K_PLAYER_DEFAULT = 12.0

# Weight of the performance rating when blending into the prior
R_WEIGHT = 0.2

# ─── Player K-factor curve ───
# K = K_SCALE * sqrt(K_FLOOR + (K_THRESHOLD - rating)^2 / K_SPREAD)  (rating < K_THRESHOLD)

K_THRESHOLD = 1900.0
K_SCALE = 16.0
K_FLOOR = 0.5625
K_SPREAD = 250000.0

# ─── Performance rating solver ───

MIN_RETURN = 0.0
MAX_RETURN = 3000.0
TOLERANCE = 0.25            # stop once the half-interval is this narrow
