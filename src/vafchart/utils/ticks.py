"""Tick generation and label formatting for the VAF axis.

Rounding works on the decimal representation of a float rather than its
binary value, so ``floor10(1.0015, -3)`` is 1.001 and not 1.0014999.
"""

import math
from decimal import ROUND_CEILING, ROUND_FLOOR, ROUND_HALF_UP, Decimal

from vafchart.constants import (
    DEFAULT_NUM_TICKS,
    MAX_TICK_LABEL_DECIMALS,
    TICK_ROUNDING_EXPONENT,
)

# Step candidates within one power of ten
NICE_STEP_FACTORS = (1, 2, 5)


def _adjust_decimal(value: float, exponent: int, rounding: str) -> float:
    d = Decimal(repr(value))
    if not d.is_finite() or d.as_tuple().exponent >= exponent:
        # Already a multiple of 10**exponent
        return value
    return float(d.quantize(Decimal(1).scaleb(exponent), rounding=rounding))


def round10(value: float, exponent: int) -> float:
    """Round to the nearest multiple of 10**exponent, halves away from zero.

    Args:
        value: Number to round
        exponent: Power of ten to round to (e.g. -3 for thousandths)

    e.g.
    round10(1.0018, -3) -> 1.002
    """
    return _adjust_decimal(value, exponent, ROUND_HALF_UP)


def floor10(value: float, exponent: int) -> float:
    """Round down to a multiple of 10**exponent."""
    return _adjust_decimal(value, exponent, ROUND_FLOOR)


def ceil10(value: float, exponent: int) -> float:
    """Round up to a multiple of 10**exponent."""
    return _adjust_decimal(value, exponent, ROUND_CEILING)


def num_leading_decimal_zeros(value: float) -> int:
    """Count zeros between the decimal point and the first nonzero fractional digit.

    Integers and values of magnitude 1 or more have none: 0.001 -> 2, 0.1 -> 0, 1.001 -> 0.
    """
    if value == 0 or abs(value) >= 1:
        return 0
    return -Decimal(repr(abs(value))).adjusted() - 1


def get_y_axis_tickmarks(min_y: float, max_y: float, num_ticks: int | None = DEFAULT_NUM_TICKS) -> list[float]:
    """Evenly spaced "nice" tickmarks starting at min_y.

    The step is taken from {1, 2, 5} x 10^k, the smallest one close to
    (max_y - min_y) / num_ticks whose num_ticks - 1 increments cover the range.

    Args:
        min_y: Lower end of the axis
        max_y: Upper end of the axis
        num_ticks: Number of ticks to generate (None means the default of 6)

    Returns:
        num_ticks copies of min_y when the range is empty,
        [min_y, max_y] when num_ticks is not positive,
        otherwise exactly num_ticks ticks.
    """
    if num_ticks is None:
        num_ticks = DEFAULT_NUM_TICKS

    if min_y == max_y:
        return [min_y] * num_ticks

    if num_ticks <= 0:
        return [min_y, max_y]

    if num_ticks == 1:
        return [min_y]

    span = abs(max_y - min_y)
    direction = 1 if max_y > min_y else -1
    exponent = math.floor(math.log10(span / num_ticks))

    step = None
    while step is None:
        for factor in NICE_STEP_FACTORS:
            candidate = factor * 10 ** exponent
            # Relative tolerance so 0.1 * 3 still covers 0.3
            if candidate * (num_ticks - 1) >= span * (1 - 1e-9):
                step = candidate
                break
        exponent += 1

    return [
        round10(min_y + direction * i * step, TICK_ROUNDING_EXPONENT)
        for i in range(num_ticks)
    ]


def _to_fixed(value: float, decimals: int) -> str:
    return f"{value:.{decimals}f}"


def to_exponential(value: float) -> str:
    """Shortest exponential form of a number: 0.000201 -> '2.01e-4', 1000 -> '1e+3'."""
    d = Decimal(repr(value)).normalize()
    sign, digits, _ = d.as_tuple()
    mantissa = str(digits[0])
    if len(digits) > 1:
        mantissa += "." + "".join(str(digit) for digit in digits[1:])
    exponent = d.adjusted()
    return f"{'-' if sign else ''}{mantissa}e{'+' if exponent >= 0 else '-'}{abs(exponent)}"


def minimal_distinct_tick_strings(values: list[float]) -> list[str]:
    """Labels for tick values, with just enough decimals to tell them apart.

    Duplicate values are dropped (first occurrence kept). Tries 0 to 3 fixed
    decimals; if none separates every value, each value is written in its own
    shortest exponential form.

    e.g.
    [1, 1.1] -> ['1.0', '1.1']
    [0.0001, 0.000201] -> ['1e-4', '2.01e-4']
    """
    distinct = list(dict.fromkeys(values))

    for decimals in range(MAX_TICK_LABEL_DECIMALS + 1):
        labels = [_to_fixed(value, decimals) for value in distinct]
        if len(set(labels)) == len(labels):
            return labels

    return [to_exponential(value) for value in distinct]
