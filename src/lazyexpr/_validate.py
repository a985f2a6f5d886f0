"""Validation of the numbers flowing into and through expressions."""

from typing import Final

from pydantic import TypeAdapter, ValidationError

from ._errors import InvalidValueError

# Validated in strict mode: int and float are accepted, bool and str are not.
_FLOAT_ADAPTER: Final = TypeAdapter(float)


def to_float(value: object, *, source: str) -> float:
    """Validate that `value` is a real number and return it as a float.

    Args:
        value: The candidate value.
        source: Short description of where the value came from, used in the error message.

    Returns:
        The value as a float. `inf` and `nan` pass through unchanged.

    Raises:
        InvalidValueError: If the value is not a number or cannot be represented as a float.

    """
    try:
        return _FLOAT_ADAPTER.validate_python(value, strict=True)
    except ValidationError:
        if isinstance(value, int) and not isinstance(value, bool):
            msg = f"{source} is not representable as a float: {value!r}"
        else:
            msg = f"{source} must be a real number, got {type(value).__name__}: {value!r}"
        raise InvalidValueError(msg) from None


def is_number(value: object) -> bool:
    """Check whether `to_float` would accept `value`."""
    try:
        to_float(value, source="Value")
    except InvalidValueError:
        return False
    return True
