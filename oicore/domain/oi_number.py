"""
OINumber — Модель OI-числа

Immutable Pydantic модель, хранящая одно значение открытого интервала.
Значение нормализуется при создании (вне диапазона → clamp, а не ошибка).
Все операции создают новый экземпляр и делегируют в oicore.math.open_interval.
"""

import math
from typing import Optional, Union

from pydantic import BaseModel, Field, field_validator

from oicore.math import open_interval
from oicore.math.numerical_safeguards import EPS_OI
from oicore.math.random_source import RandomSource

OIOperand = Union["OINumber", float]


def _operand(mod: OIOperand) -> float:
    if isinstance(mod, OINumber):
        return mod.value
    return mod


# =============================================================================
# OI NUMBER MODEL
# =============================================================================


class OINumber(BaseModel):
    """
    OI-число: значение в [EPS_OI, 1 - EPS_OI].

    Immutable модель (frozen=True). Бинарные операции принимают как
    OINumber, так и float.
    """

    value: float = Field(0.5, description="OI-значение, зажатое в [EPS_OI, 1 - EPS_OI]")

    model_config = {"frozen": True}  # Immutable

    @field_validator("value")
    @classmethod
    def clamp_to_interval(cls, v: float) -> float:
        """
        Clamp в интервал; значения вне диапазона не отклоняются.

        NaN не имеет положения в интервале и отклоняется (ValidationError).
        """
        if math.isnan(v):
            raise ValueError("OI value must not be NaN")
        return open_interval.normalize(v)

    def __float__(self) -> float:
        return self.value

    def __lt__(self, other: "OINumber") -> bool:
        if not isinstance(other, OINumber):
            return NotImplemented
        return self.value < other.value

    def __le__(self, other: "OINumber") -> bool:
        if not isinstance(other, OINumber):
            return NotImplemented
        return self.value <= other.value

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def constant(cls, n: float) -> "OINumber":
        return cls(value=open_interval.constant_oi(n))

    @classmethod
    def random(cls, source: Optional[RandomSource] = None) -> "OINumber":
        """Случайное OI-число (одна выборка из source)."""
        return cls(value=open_interval.random_oi(source))

    @classmethod
    def from_int32(cls, i: int) -> "OINumber":
        return cls(value=open_interval.from_int32(i))

    @classmethod
    def quantum(
        cls,
        random: OIOperand,
        expectation: OIOperand,
        upper_confidence: OIOperand,
        lower_confidence: OIOperand,
        scale: int,
    ) -> "OINumber":
        """
        Результат quantum_oi, зажатый в интервал.

        Raises:
            ValidationError: Если кривая вернула NaN (NaN на входе)
        """
        return cls(
            value=open_interval.quantum_oi(
                _operand(random),
                _operand(expectation),
                _operand(upper_confidence),
                _operand(lower_confidence),
                scale,
            )
        )

    @classmethod
    def accuracy(cls, random: OIOperand, confidence: OIOperand) -> "OINumber":
        """Результат accuracy_curve, зажатый в интервал."""
        return cls(value=open_interval.accuracy_curve(_operand(random), _operand(confidence)))

    # -------------------------------------------------------------------------
    # Операции
    # -------------------------------------------------------------------------

    def invert(self) -> "OINumber":
        return OINumber(value=open_interval.invert(self.value))

    def scale(self, mod: OIOperand) -> "OINumber":
        return OINumber(value=open_interval.scale(self.value, _operand(mod)))

    def inverted_scale(self, mod: OIOperand) -> "OINumber":
        return OINumber(value=open_interval.inverted_scale(self.value, _operand(mod)))

    def grow(self, mod: OIOperand) -> "OINumber":
        return OINumber(value=open_interval.grow(self.value, _operand(mod)))

    def decay(self, mod: OIOperand) -> "OINumber":
        return OINumber(value=open_interval.decay(self.value, _operand(mod)))

    def sigmoid_push(self, mod: OIOperand, corrected: bool = False) -> "OINumber":
        """
        Sigmoid push модификатором mod (не OI, примерно в [-1, 1]).

        Args:
            mod: Модификатор (OINumber или float)
            corrected: True — показатель 1 / (1 + s) вместо 1 + s

        Returns:
            Новый OINumber
        """
        push = open_interval.sigmoid_push_corrected if corrected else open_interval.sigmoid_push
        return OINumber(value=push(self.value, _operand(mod)))

    def is_at_boundary(self) -> bool:
        """True если значение зажато в EPS_OI или 1 - EPS_OI."""
        return self.value <= EPS_OI or self.value >= 1.0 - EPS_OI
