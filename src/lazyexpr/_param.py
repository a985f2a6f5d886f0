"""Parameters, values which can be filled in after the expression is built."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ._errors import UninitializedParameterError
from ._expr import Expression
from ._validate import to_float

logger = logging.getLogger(__name__)


@dataclass(slots=True, eq=False)
class _ParameterCell:
    """Storage shared by a `Parameter` and its `Setter`. `None` means unset."""

    value: float | None = None


@dataclass(frozen=True, slots=True, eq=False)
class Parameter(Expression):
    """A leaf whose value is read from a cell at evaluation time.

    Create one with `Parameter.empty()` or `Parameter.new()`; both return the
    parameter together with the `Setter` that writes its value. The parameter
    may be embedded anywhere in an expression and still sees every write made
    through the setter.

    Example:
        >>> x, x_setter = Parameter.empty()
        >>> doubled = x * 2
        >>> x_setter.set(21)
        >>> doubled.evaluate()
        42.0

    """

    _cell: _ParameterCell = field(repr=False)

    @classmethod
    def empty(cls) -> tuple[Parameter, Setter]:
        """Create a parameter with no value.

        Evaluating it before `Setter.set` is called raises `UninitializedParameterError`.
        """
        cell = _ParameterCell()
        return cls(cell), Setter(cell)

    @classmethod
    def new(cls, value: float) -> tuple[Parameter, Setter]:
        """Create a parameter with an initial value.

        The value can still be replaced through the returned setter.
        """
        cell = _ParameterCell(to_float(value, source="Parameter value"))
        return cls(cell), Setter(cell)

    @property
    def is_set(self) -> bool:
        """Whether the parameter currently holds a value."""
        return self._cell.value is not None

    def read(self) -> float:
        """Return the current value of the parameter.

        Raises:
            UninitializedParameterError: If no value has been written yet.

        """
        value = self._cell.value
        if value is None:
            msg = "Parameter value not provided; call Setter.set() before evaluating"
            raise UninitializedParameterError(msg)
        return value


@dataclass(frozen=True, slots=True, eq=False)
class Setter:
    """Write handle for the value of a `Parameter`."""

    _cell: _ParameterCell = field(repr=False)

    @property
    def is_set(self) -> bool:
        """Whether the paired parameter currently holds a value."""
        return self._cell.value is not None

    def set(self, value: float) -> None:
        """Replace the parameter's value.

        The new value is visible to the paired parameter on its next evaluation.

        Raises:
            InvalidValueError: If `value` is not a real number.

        """
        self._cell.value = to_float(value, source="Parameter value")
        logger.debug("Parameter value set to %r", self._cell.value)
