"""
Domain models для OI Core

Immutable Pydantic модели поверх open-interval арифметики.
"""

from .oi_number import OINumber, OIOperand

__all__ = [
    "OINumber",
    "OIOperand",
]
