"""Recursive evaluation of expression trees."""

import logging

from ._expr import BinaryOp, Constant, Expression, Function, Map
from ._param import Parameter
from ._validate import to_float

logger = logging.getLogger(__name__)


def _walk(expr: Expression) -> float:
    match expr:
        case Constant(value):
            return value
        case Parameter():
            value = expr.read()
            logger.debug("  Read parameter value %r", value)
            return value
        case BinaryOp(op, left, right):
            return op.apply(_walk(left), _walk(right))
        case Map(inner, func):
            return to_float(func(_walk(inner)), source="Return value of map function")
        case Function(func):
            return to_float(func(), source="Return value of lazyf function")
        case _:
            msg = f"Cannot evaluate object of type {type(expr).__name__}"
            raise TypeError(msg)


def evaluate(expr: Expression) -> float:
    """Evaluate an expression tree bottom-up.

    Nothing is cached between calls: every call re-evaluates all children,
    re-reads every parameter and re-runs every mapped function.

    Args:
        expr: The root of the expression tree.

    Returns:
        The value of the expression. Division by zero yields `inf` or `nan`.

    Raises:
        UninitializedParameterError: If a parameter in the tree was never set.
        InvalidValueError: If a function leaf or a map function returns a non-number.
        TypeError: If `expr` is not an expression.

    """
    logger.debug("Evaluating %r", expr)
    result = _walk(expr)
    logger.debug("Result: %r", result)
    return result
