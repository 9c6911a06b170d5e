"""
Core math modules для studystats

Численные примитивы и агрегаты с явной политикой округления.
"""

# Numerical Safeguards
from studystats.core.math.numerical_safeguards import (
    # Precision constants
    AGGREGATE_DECIMALS,
    AXIOM_TOLERANCE,
    REAL_DECIMALS,
    # Exceptions
    UndefinedForEmptyInput,
    # Rounding
    format_fixed,
    is_valid_float,
    round_aggregate,
    round_half_away,
    # Safe division and comparisons
    is_close,
    safe_divide,
)

# Real Number Stats
from studystats.core.math.real_stats import (
    DEFAULT_INTERVAL,
    DEFAULT_SMOOTHING_ALPHA,
    MINUTES_PER_HOUR,
    AssociativeCheck,
    CommutativeCheck,
    DistributiveCheck,
    Observer,
    add_real,
    associative_addition,
    calculate_mean,
    calculate_std_dev,
    calculate_variance,
    calculate_z_score,
    clamp_real,
    create_real,
    distributive_property,
    find_infimum,
    find_supremum,
    minutes_to_hours,
    moving_average,
    normalize,
    simple_integration,
    sort_reals,
)

__all__ = [
    # Numerical Safeguards - Precision constants
    "AGGREGATE_DECIMALS",
    "AXIOM_TOLERANCE",
    "REAL_DECIMALS",
    # Numerical Safeguards - Exceptions
    "UndefinedForEmptyInput",
    # Numerical Safeguards - Rounding
    "format_fixed",
    "is_valid_float",
    "round_aggregate",
    "round_half_away",
    # Numerical Safeguards - Safe division and comparisons
    "is_close",
    "safe_divide",
    # Real Number Stats - Constants
    "DEFAULT_INTERVAL",
    "DEFAULT_SMOOTHING_ALPHA",
    "MINUTES_PER_HOUR",
    # Real Number Stats - Types
    "AssociativeCheck",
    "CommutativeCheck",
    "DistributiveCheck",
    "Observer",
    # Real Number Stats - Functions
    "add_real",
    "associative_addition",
    "calculate_mean",
    "calculate_std_dev",
    "calculate_variance",
    "calculate_z_score",
    "clamp_real",
    "create_real",
    "distributive_property",
    "find_infimum",
    "find_supremum",
    "minutes_to_hours",
    "moving_average",
    "normalize",
    "simple_integration",
    "sort_reals",
]
