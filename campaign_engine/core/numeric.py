"""
Rounding helpers shared by the calculators.
"""

import math


def round_half_away(value: float) -> int:
    """
    Round to the nearest integer, ties away from zero.

    Python's built-in ``round`` uses banker's rounding (``round(2.5) == 2``);
    every forecast figure rounds half away from zero instead.

    Examples
    --------
    >>> round_half_away(2.5)
    3
    >>> round_half_away(-45.5)
    -46
    >>> round_half_away(0.49999999999999994)
    0
    """
    magnitude = abs(value)
    whole = math.floor(magnitude)
    # Compare the fraction directly; magnitude + 0.5 can round up in binary
    if magnitude - whole >= 0.5:
        whole += 1
    return -whole if value < 0 else whole


def floor_int(value: float) -> int:
    """Floor to a plain ``int``."""
    return int(math.floor(value))
