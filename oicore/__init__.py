"""
OI Core — арифметика open-interval чисел.

Вероятностные величины (confidence, expectation, коэффициенты роста),
зажатые в открытый интервал (0, 1), и кривые формирования вероятности
поверх них.
"""

from oicore.domain import OINumber
from oicore.math import (
    EPS_OI,
    accuracy_curve,
    constant_oi,
    decay,
    from_int32,
    grow,
    invert,
    inverted_scale,
    normalize,
    quantum_oi,
    random_oi,
    safe_sigmoid,
    scale,
    sigmoid_push,
    sigmoid_push_corrected,
)

__all__ = [
    "EPS_OI",
    "OINumber",
    "accuracy_curve",
    "constant_oi",
    "decay",
    "from_int32",
    "grow",
    "invert",
    "inverted_scale",
    "normalize",
    "quantum_oi",
    "random_oi",
    "safe_sigmoid",
    "scale",
    "sigmoid_push",
    "sigmoid_push_corrected",
]
