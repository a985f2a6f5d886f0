"""Exceptions raised by lazyexpr."""


class LazyExprError(Exception):
    """Base class for all lazyexpr errors."""


class UninitializedParameterError(LazyExprError, LookupError):
    """A parameter was evaluated before any value was written to it."""


class InvalidValueError(LazyExprError, TypeError):
    """A value entering an expression is not a real number."""
