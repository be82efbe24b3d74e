"""Rounding and clamping shared by the matcher and the document scorer."""

import math


def round_half_up(value: float) -> int:
    """Round .5 away from zero for non-negative scores (round() is banker's)."""
    return int(math.floor(value + 0.5))


def clamp_score(value: float) -> int:
    """Round and clamp a composite score into [0, 100]."""
    return min(100, max(0, round_half_up(value)))
