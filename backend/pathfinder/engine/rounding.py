"""Whole-dollar rounding shared by the engines."""
import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with halves going toward +inf (2.5 -> 3, -2.5 -> -2)."""
    return math.floor(value + 0.5)
