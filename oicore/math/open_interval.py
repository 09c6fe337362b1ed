"""
Open Interval Math — арифметика OI-чисел

OI-число — float в открытом интервале (0, 1), на практике зажатый в
[EPS_OI, 1 - EPS_OI]. Используется для вероятностных величин (confidence,
expectation, коэффициенты роста), которые не должны достигать 0 или 1:
степени, корни и обратные величины на этих границах вырождаются.

Модуль предоставляет:
- Нормализацию (clamp) в интервал
- Комбинаторы, сохраняющие интервал: invert, scale, inverted_scale,
  grow, decay, sigmoid_push
- Случайное OI-число из внешнего источника
- Детерминированное отображение int32 → OI
- Кривые формирования вероятности: quantum_oi и accuracy_curve

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Любое значение после normalize лежит в [EPS_OI, 1 - EPS_OI]
2. Сырые значения не попадают в степень, корень или деление без normalize
3. Функции не бросают исключений на float аргументах (целые i и scale
   проходят через to_int32 и не могут быть NaN/Inf); non-finite результаты
   возвращаются как есть
   (NaN на входе проходит через normalize и распространяется)

ФОРМУЛЫ (as-observed, без исправлений):
    sigmoid_push:   x ^ (1.0/1 + safe_sigmoid(m))     (показатель 1 + s, не 1/(1+s))
    quantum_oi:     e ^ (1 / (1 + r^(1/lExp) - (1-r)^(1/uExp))), знак scale игнорируется
    accuracy_curve: c^(1/(2r)) / sqrt(c)              (при r = 0.5 даёт sqrt(c))
"""

import logging
import math
from typing import Final, Optional

from oicore.math.numerical_safeguards import (
    EPS_OI,
    clamp,
    is_valid_float,
    to_int32,
)
from oicore.math.random_source import (
    RandomSource,
    get_default_source,
    to_single_precision,
)

logger = logging.getLogger(__name__)

# Нижняя и верхняя границы OI-интервала
OI_MIN: Final[float] = EPS_OI
OI_MAX: Final[float] = 1.0 - EPS_OI


# =============================================================================
# НОРМАЛИЗАЦИЯ
# =============================================================================


def normalize(n: float, eps: float = EPS_OI) -> float:
    """
    Clamp значения в [eps, 1 - eps].

    Тотальная и идемпотентная функция: normalize(normalize(n)) == normalize(n).

    Args:
        n: Любое значение
        eps: Граница интервала (default: EPS_OI)

    Returns:
        OI-значение

    Examples:
        >>> normalize(0.25)
        0.25
        >>> normalize(-3.0)
        1e-06
        >>> normalize(2.0)
        0.999999
    """
    return clamp(n, eps, 1.0 - eps)


def constant_oi(n: float) -> float:
    """Объявление константы OI; то же, что normalize."""
    return normalize(n)


def safe_sigmoid(n: float, eps: float = EPS_OI) -> float:
    """
    Clamp значения в [-1 + eps, 1 - eps].

    Диапазон центрирован в нуле, в отличие от normalize. Вход ожидается
    заранее отмасштабированным примерно в [-1, 1].

    Examples:
        >>> safe_sigmoid(0.3)
        0.3
        >>> safe_sigmoid(-5.0)
        -0.999999
    """
    return clamp(n, -1.0 + eps, 1.0 - eps)


def invert(n: float) -> float:
    """
    Инверсия: 1 - normalize(n).

    Инволюция с точностью до clamp: invert(invert(n)) ≈ normalize(n).
    """
    return 1.0 - normalize(n)


# =============================================================================
# КОМБИНАТОРЫ
# =============================================================================


def scale(source: float, mod: float) -> float:
    """
    Ослабление source множителем mod (вероятностное AND).

    Коммутативна; результат не больше min(normalize(source), normalize(mod)).

    Args:
        source: Исходное OI-значение
        mod: Множитель

    Returns:
        normalize(source) * normalize(mod)
    """
    return normalize(source) * normalize(mod)


def inverted_scale(source: float, mod: float) -> float:
    """
    Двойственная к scale по де Моргану (вероятностное OR).

    Коммутативна; результат не меньше max(normalize(source), normalize(mod)).

    Returns:
        invert(invert(source) * invert(mod))
    """
    return invert(invert(source) * invert(mod))


def grow(source: float, mod: float) -> float:
    """
    Рост source к 1 с силой mod.

    Показатель invert(mod) лежит в (0, 1), поэтому результат не меньше source.
    mod → 0 даёт почти тождество, mod → 1 толкает результат к 1.

    Returns:
        normalize(source) ^ invert(mod)
    """
    return normalize(source) ** invert(mod)


def decay(source: float, mod: float) -> float:
    """
    Затухание source к 0 с силой mod; двойственная к grow.

    Returns:
        normalize(source) ^ (1 / invert(mod))
    """
    return normalize(source) ** (1.0 / invert(mod))


def sigmoid_push(source: float, mod: float) -> float:
    """
    Sigmoid push source модификатором mod.

    ВНИМАНИЕ: показатель вычисляется как (1.0 / 1) + safe_sigmoid(mod),
    то есть 1 + s, а не 1 / (1 + s). Поведение сохранено как есть: при
    mod > 0 результат уходит к 0, при mod < 0 — к 1. Вариант с показателем
    1 / (1 + s) — sigmoid_push_corrected.

    Args:
        source: Исходное OI-значение
        mod: Модификатор, примерно в [-1, 1] (не OI)

    Returns:
        normalize(source) ^ (1 + safe_sigmoid(mod))
    """
    return normalize(source) ** (1.0 / 1 + safe_sigmoid(mod))


def sigmoid_push_corrected(source: float, mod: float) -> float:
    """
    Sigmoid push с показателем 1 / (1 + safe_sigmoid(mod)).

    При mod > 0 результат растёт к 1, при mod < 0 — уходит к 0, при mod = 0
    равен normalize(source).
    """
    return normalize(source) ** (1.0 / (1.0 + safe_sigmoid(mod)))


# =============================================================================
# ИСТОЧНИКИ OI-ЗНАЧЕНИЙ
# =============================================================================


def random_oi(source: Optional[RandomSource] = None) -> float:
    """
    Случайное OI-число.

    Берёт одну выборку u из источника (single precision, затем double) и
    отображает её в u * (1 - 2 * EPS_OI) + EPS_OI.

    Args:
        source: Callable, возвращающий float в [0, 1).
            None — источник по умолчанию (см. set_default_source)

    Returns:
        Значение в [EPS_OI, 1 - EPS_OI]
    """
    draw = source if source is not None else get_default_source()
    u = to_single_precision(draw())
    return u * (1.0 - 2.0 * EPS_OI) + EPS_OI


def from_int32(i: int) -> float:
    """
    Монотонное отображение int32 в интервал через логистическую функцию.

    normalize(1 / (1 + exp(-EPS_OI * i))). from_int32(0) == 0.5; насыщение
    наступает при |i| порядка 1e6–1e7. Значение i приводится к int32.

    Examples:
        >>> from_int32(0)
        0.5
        >>> from_int32(-(2**31))
        1e-06
    """
    x = EPS_OI * to_int32(i)

    # exp(-x) переполняется при x < -709, поэтому для x < 0 берём exp(x) / (1 + exp(x))
    if x >= 0:
        d = 1.0 / (1.0 + math.exp(-x))
    else:
        z = math.exp(x)
        d = z / (1.0 + z)

    return normalize(d)


# =============================================================================
# КРИВЫЕ ВЕРОЯТНОСТИ
# =============================================================================


def nth_root(x: float, n: float) -> float:
    """Корень степени n: x ^ (1 / n)."""
    return x ** (1.0 / n)


def quantum_oi(
    random: float,
    expectation: float,
    upper_confidence: float,
    lower_confidence: float,
    scale: int,
) -> float:
    """
    Смешивание случайной выборки с ожидаемым значением по асимметричным
    границам доверия.

    s = |scale| (знак scale не влияет на результат)
    uExp = 2 * normalize(upper_confidence) * s + 1
    lExp = 2 * normalize(lower_confidence) * s + 1
    denom = -((1 - r) ^ (1 / uExp)) + r ^ (1 / lExp) + 1
    result = e ^ (1 / denom)

    где r = normalize(random), e = normalize(expectation). Поскольку обе
    корневые компоненты лежат в (0, 1), denom лежит в (0, 2): при r → 0
    результат стремится к 0 (underflow до 0.0), при r → 1 — к sqrt(e).

    Args:
        random: Выборка, обычно random_oi()
        expectation: Якорное ожидаемое значение
        upper_confidence: Верхняя граница доверия
        lower_confidence: Нижняя граница доверия
        scale: Целый масштаб (приводится к int32)

    Returns:
        Возмущённое ожидание; может быть NaN при NaN на входе

    Examples:
        >>> quantum_oi(0.5, 0.5, 0.5, 0.5, 0)
        0.5
    """
    s = abs(to_int32(scale))
    r = normalize(random)

    upper_exp = 2.0 * normalize(upper_confidence) * s + 1.0
    lower_exp = 2.0 * normalize(lower_confidence) * s + 1.0
    denominator = -nth_root(1.0 - r, upper_exp) + nth_root(r, lower_exp) + 1.0

    value = normalize(expectation) ** (1.0 / denominator)

    if not is_valid_float(value):
        logger.debug(
            "quantum_oi produced non-finite value %r (random=%r, expectation=%r, "
            "upper=%r, lower=%r, scale=%r)",
            value, random, expectation, upper_confidence, lower_confidence, scale,
        )

    return value


def accuracy_curve(random: float, confidence: float) -> float:
    """
    Кривая точности: c^(1/(2r)) * (1 / sqrt(c)).

    При фиксированном c показатель 1/(2r) пробегает от очень больших значений
    (r → 0) до 0.5 (r → 1), так что результат монотонно растёт по r от 0 до 1.
    ВНИМАНИЕ: при r = 0.5 результат равен sqrt(c), а не c.

    Args:
        random: Выборка, обычно random_oi()
        confidence: Уровень доверия

    Returns:
        Значение кривой; может быть NaN при NaN на входе

    Examples:
        >>> round(accuracy_curve(0.5, 0.81), 12)
        0.9
    """
    r = normalize(random)
    c = normalize(confidence)
    value = c ** (1.0 / (2.0 * r)) * (1.0 / math.sqrt(c))

    if not is_valid_float(value):
        logger.debug(
            "accuracy_curve produced non-finite value %r (random=%r, confidence=%r)",
            value, random, confidence,
        )

    return value


# =============================================================================
# СОСТАВНЫЕ ВЫБОРКИ
# =============================================================================


def sample_quantum_oi(
    expectation: float,
    upper_confidence: float,
    lower_confidence: float,
    scale: int,
    source: Optional[RandomSource] = None,
) -> float:
    """
    quantum_oi от свежей выборки random_oi(source).

    Потребляет ровно одну выборку из источника.
    """
    return quantum_oi(
        random_oi(source), expectation, upper_confidence, lower_confidence, scale
    )


def sample_accuracy(confidence: float, source: Optional[RandomSource] = None) -> float:
    """accuracy_curve от свежей выборки random_oi(source)."""
    return accuracy_curve(random_oi(source), confidence)
