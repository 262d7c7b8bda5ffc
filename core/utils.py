import math
from typing import Union

Number = Union[int, float]


def clamp(value: Number, minimum: Number, maximum: Number) -> Number:
    """Bound value to [minimum, maximum]."""
    return min(max(value, minimum), maximum)


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up.

    Python's built-in round() uses banker's rounding (round(2.5) == 2);
    sub-scores and the total need 2.5 -> 3.
    """
    return int(math.floor(value + 0.5))
