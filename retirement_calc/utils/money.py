import math
from decimal import Decimal, ROUND_HALF_UP
from typing import Union


def round_half_up(value: float) -> Union[int, float]:
    """Round to the nearest whole currency unit; halves go up (2.5 -> 3), unlike ``round``.

    Infinity and NaN have no whole-unit value and come back unchanged.
    """
    if not math.isfinite(value):
        return value
    return int(Decimal(value).to_integral_value(rounding=ROUND_HALF_UP))
