"""Expression nodes and the operators that compose them.

Building an expression never computes anything. Each operator or `map` call
returns a new immutable node owning its operands; the arithmetic is deferred
until `Expression.evaluate()` walks the tree.
"""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ._ops import BinaryOperator
from ._validate import is_number, to_float

if TYPE_CHECKING:
    from collections.abc import Callable
    from types import NotImplementedType


def _as_expression(value: object) -> Expression | None:
    """Promote a numeric literal to a `Constant`; return None for unsupported operands."""
    if isinstance(value, Expression):
        return value
    if not is_number(value):
        return None
    return Constant(value)


class Expression:
    """A deferred numeric computation.

    Expressions compose with `+`, `-`, `*`, `/` (against other expressions or
    plain numbers on either side), with unary `-`, and with `map`.
    """

    __slots__ = ()

    def evaluate(self) -> float:
        """Walk the expression tree and compute its value.

        Every call performs a fresh walk, so parameter values written since the
        previous call are picked up.

        Raises:
            UninitializedParameterError: If a parameter in the tree was never set.
            InvalidValueError: If a function leaf or a map function returns a non-number.

        """
        from ._eval import evaluate  # noqa: PLC0415

        return evaluate(self)

    def map(self, func: Callable[[float], float]) -> Map:
        """Create an expression that applies `func` to this expression's value."""
        return Map(self, func)

    def _binary(
        self,
        op: BinaryOperator,
        other: object,
        *,
        reflected: bool = False,
    ) -> BinaryOp | NotImplementedType:
        rhs = _as_expression(other)
        if rhs is None:
            return NotImplemented
        if reflected:
            return BinaryOp(op, rhs, self)
        return BinaryOp(op, self, rhs)

    def __add__(self, other: object) -> BinaryOp | NotImplementedType:
        return self._binary(BinaryOperator.ADD, other)

    def __radd__(self, other: object) -> BinaryOp | NotImplementedType:
        return self._binary(BinaryOperator.ADD, other, reflected=True)

    def __sub__(self, other: object) -> BinaryOp | NotImplementedType:
        return self._binary(BinaryOperator.SUB, other)

    def __rsub__(self, other: object) -> BinaryOp | NotImplementedType:
        return self._binary(BinaryOperator.SUB, other, reflected=True)

    def __mul__(self, other: object) -> BinaryOp | NotImplementedType:
        return self._binary(BinaryOperator.MUL, other)

    def __rmul__(self, other: object) -> BinaryOp | NotImplementedType:
        return self._binary(BinaryOperator.MUL, other, reflected=True)

    def __truediv__(self, other: object) -> BinaryOp | NotImplementedType:
        return self._binary(BinaryOperator.DIV, other)

    def __rtruediv__(self, other: object) -> BinaryOp | NotImplementedType:
        return self._binary(BinaryOperator.DIV, other, reflected=True)

    def __neg__(self) -> Map:
        return self.map(operator.neg)


@dataclass(frozen=True, slots=True)
class Constant(Expression):
    """A leaf holding a fixed value.

    Attributes:
        value: The value, validated and stored as a float.

    """

    value: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", to_float(self.value, source="Constant value"))


@dataclass(frozen=True, slots=True)
class Function(Expression):
    """A leaf whose value is produced by calling a zero-argument function.

    The function is called on every evaluation of the node.
    """

    func: Callable[[], float]

    def __post_init__(self) -> None:
        if not callable(self.func):
            msg = f"Function leaf requires a callable, got {type(self.func).__name__}"
            raise TypeError(msg)


@dataclass(frozen=True, slots=True)
class BinaryOp(Expression):
    """An arithmetic operator applied to two child expressions.

    Attributes:
        op: The operator applied once both children are evaluated.
        left: The left operand.
        right: The right operand.

    """

    op: BinaryOperator
    left: Expression
    right: Expression

    def __post_init__(self) -> None:
        for operand in (self.left, self.right):
            if not isinstance(operand, Expression):
                msg = f"BinaryOp operands must be expressions, got {type(operand).__name__}"
                raise TypeError(msg)


@dataclass(frozen=True, slots=True)
class Map(Expression):
    """A transformation applied to the value of a child expression.

    Attributes:
        inner: The child expression.
        func: Unary function called once per evaluation with the child's value.

    """

    inner: Expression
    func: Callable[[float], float]

    def __post_init__(self) -> None:
        if not callable(self.func):
            msg = f"map() requires a callable, got {type(self.func).__name__}"
            raise TypeError(msg)


def lazy(value: float) -> Constant:
    """Wrap a number in a constant expression."""
    return Constant(value)


def lazyf(func: Callable[[], float]) -> Function:
    """Wrap a zero-argument function in an expression evaluated on demand."""
    return Function(func)
