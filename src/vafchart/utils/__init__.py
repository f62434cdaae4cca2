"""Utility functions."""

from vafchart.utils.scale import y_value_scale_function
from vafchart.utils.ticks import (
    ceil10,
    floor10,
    get_y_axis_tickmarks,
    minimal_distinct_tick_strings,
    num_leading_decimal_zeros,
    round10,
    to_exponential,
)

__all__ = [
    'round10',
    'floor10',
    'ceil10',
    'num_leading_decimal_zeros',
    'get_y_axis_tickmarks',
    'minimal_distinct_tick_strings',
    'to_exponential',
    'y_value_scale_function',
]
