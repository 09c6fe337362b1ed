"""
Random Source — внешний источник равномерных случайных чисел

Единственный внешний коллаборатор OI-арифметики. Источник — любой callable
без аргументов, возвращающий float в [0, 1). Модуль не управляет seed и
жизненным циклом источника и не выполняет блокировок: потокобезопасность
обеспечивает владелец источника.
"""

import logging
import random
import struct
from typing import Callable, Final, Optional

from oicore.math.numerical_safeguards import clamp

logger = logging.getLogger(__name__)

RandomSource = Callable[[], float]

# Наибольший IEEE-754 single строго меньше 1
SINGLE_BELOW_ONE: Final[float] = 1.0 - 2.0**-24

_INITIAL_SOURCE: RandomSource = random.random
_default_source: RandomSource = _INITIAL_SOURCE


def get_default_source() -> RandomSource:
    """Источник, используемый random_oi без явного source."""
    return _default_source


def set_default_source(source: Optional[RandomSource]) -> None:
    """
    Замена источника по умолчанию.

    Args:
        source: Callable без аргументов, возвращающий float в [0, 1).
            None восстанавливает исходный random.random

    Raises:
        TypeError: Если source не callable
    """
    global _default_source

    if source is None:
        source = _INITIAL_SOURCE
    elif not callable(source):
        raise TypeError(f"random source must be callable, got {type(source).__name__}")

    logger.debug("Default random source replaced: %r", source)
    _default_source = source


def seeded_source(seed: int) -> RandomSource:
    """
    Детерминированный источник на собственном random.Random(seed).

    Одинаковые seed дают одинаковые последовательности; глобальное состояние
    модуля random не затрагивается.

    Examples:
        >>> a, b = seeded_source(42), seeded_source(42)
        >>> a() == b()
        True
    """
    return random.Random(seed).random


def to_single_precision(u: float) -> float:
    """
    Округление double до ближайшего IEEE-754 single и обратно.

    Источник хоста выдаёт single precision в [0, 1); эта функция воспроизводит
    квантование для источников, выдающих double. Результат зажат в
    [0, SINGLE_BELOW_ONE]: значения выше 1 - 2**-25 при округлении к
    ближайшему дали бы 1.0, а выборка не должна достигать 1.

    Examples:
        >>> to_single_precision(0.5)
        0.5
        >>> to_single_precision(0.1) == 0.1
        False
        >>> to_single_precision(0.99999999) == SINGLE_BELOW_ONE
        True
    """
    rounded = struct.unpack("f", struct.pack("f", clamp(u, 0.0, SINGLE_BELOW_ONE)))[0]
    return clamp(rounded, 0.0, SINGLE_BELOW_ONE)
