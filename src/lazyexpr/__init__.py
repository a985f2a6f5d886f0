"""A lazy-evaluation expression library.

Expressions are representations of a future computation. They are built
from constants (`lazy`), zero-argument functions (`lazyf`) and parameters
(`Parameter`), combined with arithmetic operators and `map`, and computed
only when `evaluate()` is called.
"""

__all__ = [
    "BinaryOp",
    "BinaryOperator",
    "Constant",
    "Expression",
    "Function",
    "InvalidValueError",
    "LazyExprError",
    "Map",
    "Parameter",
    "Setter",
    "UninitializedParameterError",
    "evaluate",
    "lazy",
    "lazyf",
]

from ._errors import InvalidValueError, LazyExprError, UninitializedParameterError
from ._eval import evaluate
from ._expr import BinaryOp, Constant, Expression, Function, Map, lazy, lazyf
from ._ops import BinaryOperator
from ._param import Parameter, Setter
