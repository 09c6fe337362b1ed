"""
Core math modules для OI Core

Арифметика open-interval чисел и численные примитивы с гарантией стабильности.
"""

# Numerical Safeguards
from oicore.math.numerical_safeguards import (
    # Epsilon constants
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    EPS_OI,
    INT32_MAX,
    INT32_MIN,
    # Utilities
    clamp,
    is_close,
    is_valid_float,
    sanitize_float,
    to_int32,
)

# Random Source
from oicore.math.random_source import (
    SINGLE_BELOW_ONE,
    RandomSource,
    get_default_source,
    seeded_source,
    set_default_source,
    to_single_precision,
)

# Open Interval Math
from oicore.math.open_interval import (
    OI_MAX,
    OI_MIN,
    accuracy_curve,
    constant_oi,
    decay,
    from_int32,
    grow,
    invert,
    inverted_scale,
    normalize,
    nth_root,
    quantum_oi,
    random_oi,
    safe_sigmoid,
    sample_accuracy,
    sample_quantum_oi,
    scale,
    sigmoid_push,
    sigmoid_push_corrected,
)

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    "EPS_OI",
    "INT32_MAX",
    "INT32_MIN",
    # Numerical Safeguards — Utilities
    "clamp",
    "is_close",
    "is_valid_float",
    "sanitize_float",
    "to_int32",
    # Random Source
    "SINGLE_BELOW_ONE",
    "RandomSource",
    "get_default_source",
    "seeded_source",
    "set_default_source",
    "to_single_precision",
    # Open Interval Math — Constants
    "OI_MAX",
    "OI_MIN",
    # Open Interval Math — Functions
    "accuracy_curve",
    "constant_oi",
    "decay",
    "from_int32",
    "grow",
    "invert",
    "inverted_scale",
    "normalize",
    "nth_root",
    "quantum_oi",
    "random_oi",
    "safe_sigmoid",
    "sample_accuracy",
    "sample_quantum_oi",
    "scale",
    "sigmoid_push",
    "sigmoid_push_corrected",
]
