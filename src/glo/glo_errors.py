"""Glo caller-input errors."""


class GloError(ValueError):
    """Base class for invalid arguments passed to the Glo engine."""


class InvalidScoreDomainError(GloError):
    """Score outside the open interval (0, 1)."""

    def __init__(self, score: float):
        super().__init__(f"score must be in the open interval (0, 1), got {score}")
        self.score = score


class InvalidSolverBoundsError(GloError):
    """max_return <= min_return, or tolerance <= 0."""

    def __init__(self, min_return: float, max_return: float, tolerance: float):
        super().__init__(
            f"invalid solver bounds: min_return={min_return}, "
            f"max_return={max_return}, tolerance={tolerance}"
        )
        self.min_return = min_return
        self.max_return = max_return
        self.tolerance = tolerance


class EmptyHoleSetError(GloError):
    """Performance rating requested for zero holes."""

    def __init__(self):
        super().__init__("hole_ratings must not be empty")


class LengthMismatchError(GloError):
    """Parallel per-round sequences of differing lengths."""

    def __init__(self, **lengths: int):
        detail = ", ".join(f"{name}={n}" for name, n in lengths.items())
        super().__init__(f"sequences must have equal length, got {detail}")
        self.lengths = lengths
