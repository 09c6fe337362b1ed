"""
Numerical Safeguards — примитивы для open-interval арифметики

Модуль содержит общие epsilon-параметры и вспомогательные функции,
на которых построена арифметика OI-чисел:
- Epsilon-граница открытого интервала (0, 1)
- Clamp значения в диапазон
- NaN/Inf проверка и санитизация (для вызывающего кода)
- Epsilon-сравнения float
- Приведение целых к знаковому 32-битному диапазону

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Функции модуля не бросают исключений на float входах; исключение —
   to_int32, которая принимает целые и отклоняет NaN/Inf
2. NaN/Inf не скрываются: санитизация выполняется только явно, вызывающим кодом
3. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Граница открытого интервала: OI-значения живут в [EPS_OI, 1 - EPS_OI]
# Также используется как скорость логистического отображения в from_int32
EPS_OI: Final[float] = 1e-6

# Epsilon для сравнения float (относительная толерантность)
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Epsilon для сравнения float (абсолютная толерантность)
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12

# Диапазон знакового 32-битного целого
INT32_MIN: Final[int] = -(2**31)
INT32_MAX: Final[int] = 2**31 - 1


# =============================================================================
# CLAMP
# =============================================================================


def clamp(
    value: float,
    min_value: float | None = None,
    max_value: float | None = None,
) -> float:
    """
    Ограничение значения в заданном диапазоне.

    NaN проходит без изменений: сравнения с NaN всегда ложны.

    Args:
        value: Исходное значение
        min_value: Минимальное допустимое значение (optional)
        max_value: Максимальное допустимое значение (optional)

    Returns:
        Значение, ограниченное диапазоном [min_value, max_value]

    Examples:
        >>> clamp(5.0, 0.0, 10.0)
        5.0
        >>> clamp(-1.0, 0.0, 10.0)
        0.0
        >>> clamp(15.0, 0.0, 10.0)
        10.0
    """
    result = value

    if min_value is not None and result < min_value:
        result = min_value

    if max_value is not None and result > max_value:
        result = max_value

    return result


# =============================================================================
# NaN/Inf САНИТИЗАЦИЯ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


def sanitize_float(value: float, fallback: float = 0.5) -> float:
    """
    Санитизация float: замена NaN/Inf на fallback значение.

    OI-функции возвращают non-finite результаты как есть; вызывающий код,
    которому нужен конечный результат, пропускает его через эту функцию.
    Fallback по умолчанию — середина интервала.

    Args:
        value: Исходное значение
        fallback: Значение для замены NaN/Inf (default: 0.5)

    Returns:
        value если валидное, иначе fallback

    Examples:
        >>> sanitize_float(0.25)
        0.25
        >>> sanitize_float(float('nan'))
        0.5
        >>> sanitize_float(float('inf'), fallback=0.999999)
        0.999999
    """
    if is_valid_float(value):
        return value
    return fallback


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Args:
        a: Первое значение
        b: Второе значение
        rel_tol: Относительная толерантность (default: 1e-9)
        abs_tol: Абсолютная толерантность (default: 1e-12)

    Returns:
        True если значения близки с учётом толерантности

    Examples:
        >>> is_close(0.5, 0.5 + 1e-13)
        True
        >>> is_close(0.5, 0.6)
        False
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


# =============================================================================
# ЦЕЛЫЕ ЧИСЛА
# =============================================================================


def to_int32(i: int) -> int:
    """
    Приведение целого к знаковому 32-битному диапазону (two's complement wrap).

    Python int не ограничен по размеру, поэтому значения вне
    [INT32_MIN, INT32_MAX] заворачиваются так же, как при переполнении int32.
    Дробные значения усекаются к нулю.

    Args:
        i: Целое (или число, приводимое к int)

    Returns:
        Значение в [INT32_MIN, INT32_MAX]

    Raises:
        ValueError: Если i — NaN
        OverflowError: Если i — ±Inf

    Examples:
        >>> to_int32(7)
        7
        >>> to_int32(2**31)
        -2147483648
        >>> to_int32(-3.9)
        -3
    """
    wrapped = (int(i) - INT32_MIN) % 2**32
    return wrapped + INT32_MIN
