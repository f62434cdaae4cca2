"""Mapping from VAF values to pixel coordinates."""

import math
from typing import Callable

from vafchart.constants import LOG_SCALE_MIN_VALUE, Y_PADDING_PX


def _log10_floored(value: float) -> float:
    return math.log10(max(value, LOG_SCALE_MIN_VALUE))


def y_value_scale_function(
    min_y: float,
    max_y: float,
    pixel_height: float,
    use_log_scale: bool,
) -> Callable[[float], float]:
    """Build a function mapping a domain value to a pixel y coordinate.

    Pixel y grows downwards: min_y lands at pixel_height - padding and max_y
    at padding. Under log scale values are compared as log10, with zero and
    negative values replaced by LOG_SCALE_MIN_VALUE.

    Args:
        min_y: Domain value at the bottom of the plot
        max_y: Domain value at the top of the plot
        pixel_height: Full height of the plot area, padding included
        use_log_scale: Whether to interpolate on a log10 scale

    Returns:
        Pure function value -> pixel y
    """
    transform: Callable[[float], float] = _log10_floored if use_log_scale else float
    bottom = pixel_height - Y_PADDING_PX
    plot_height = pixel_height - 2 * Y_PADDING_PX
    low = transform(min_y)
    span = transform(max_y) - low

    def scale(value: float) -> float:
        if span == 0:
            return bottom
        return bottom - (transform(value) - low) * plot_height / span

    return scale
