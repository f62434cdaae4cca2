"""Centralized constants for the VAF timeline chart.

This module consolidates the values shared by the synthesis and axis code:
- Grouping tokens
- Raw mutation status tags
- Plot geometry (padding, default height, tick count)
- Log scale floor

Centralizing these keeps the engine, the axis utilities and the CLI in agreement.
"""

# =============================================================================
# GROUPING
# =============================================================================
# Group-by option meaning "one series per mutation position".

GROUP_BY_NONE: str = "None"


# =============================================================================
# MUTATION STATUS TAGS
# =============================================================================
# Raw tag on a mutation record whose reads were seen but that was not called.

UNCALLED_MUTATION_STATUS: str = "uncalled"


# =============================================================================
# PLOT GEOMETRY
# =============================================================================

Y_PADDING_PX: int = 10
DEFAULT_PLOT_HEIGHT_PX: int = 200
DEFAULT_NUM_TICKS: int = 6

# Decimal places ticks are rounded to, which strips float noise like 0.30000000000000004
TICK_ROUNDING_EXPONENT: int = -10

# Highest precision tried before tick labels fall back to exponential notation
MAX_TICK_LABEL_DECIMALS: int = 3


# =============================================================================
# LOG SCALE
# =============================================================================
# Substituted for zero or negative values under a log10 scale (0.1% VAF).

LOG_SCALE_MIN_VALUE: float = 0.001
