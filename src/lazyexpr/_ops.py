"""Binary arithmetic operators supported by expressions."""

import math
import operator
from collections.abc import Callable
from enum import StrEnum
from typing import Self


def ieee_truediv(left: float, right: float) -> float:
    """Divide following IEEE-754 rules instead of raising ZeroDivisionError.

    A non-zero numerator over a zero denominator gives an infinity whose sign is
    the product of the operand signs (so `1.0 / -0.0` is `-inf`). `0/0` and
    `nan/0` give `nan`.
    """
    if right != 0.0:
        return left / right
    if left == 0.0 or math.isnan(left):
        return math.nan
    return math.copysign(math.inf, left) * math.copysign(1.0, right)


class BinaryOperator(StrEnum):
    """An arithmetic operator combining two evaluated operands.

    Each member carries the operator symbol as its value, a docstring,
    and the function applied at evaluation time.
    """

    _func: Callable[[float, float], float]

    def __new__(cls, symbol: str, func: Callable[[float, float], float], doc: str = "") -> Self:
        """Create a new operator member with its implementation and docstring."""
        obj = str.__new__(cls, symbol)
        obj._value_ = symbol
        obj._func = func  # noqa: SLF001
        obj.__doc__ = doc
        return obj

    ADD = "+", operator.add, "Addition."
    SUB = "-", operator.sub, "Subtraction."
    MUL = "*", operator.mul, "Multiplication."
    DIV = "/", ieee_truediv, "Division; a zero denominator yields inf or nan."

    @property
    def symbol(self) -> str:
        """The infix symbol of the operator."""
        return self.value

    def apply(self, left: float, right: float) -> float:
        """Apply the operator to two already-evaluated operands."""
        return self._func(left, right)
