"""Tests for parameters and their setters."""

import logging

import pytest

from lazyexpr import InvalidValueError, Parameter, Setter, UninitializedParameterError


class TestParameterEmpty:
    """Tests for Parameter.empty() and writing through the setter."""

    def test_returns_parameter_and_setter(self) -> None:
        param, setter = Parameter.empty()
        assert isinstance(param, Parameter)
        assert isinstance(setter, Setter)

    def test_starts_unset(self) -> None:
        param, setter = Parameter.empty()
        assert param.is_set is False
        assert setter.is_set is False

    def test_read_before_set_raises(self) -> None:
        param, _ = Parameter.empty()
        with pytest.raises(UninitializedParameterError, match="not provided"):
            param.read()

    def test_uninitialized_error_is_lookup_error(self) -> None:
        param, _ = Parameter.empty()
        with pytest.raises(LookupError):
            param.evaluate()

    def test_set_then_read(self) -> None:
        param, setter = Parameter.empty()
        setter.set(34.2)
        assert param.is_set is True
        assert setter.is_set is True
        assert param.read() == 34.2

    def test_set_overwrites(self) -> None:
        param, setter = Parameter.empty()
        setter.set(1.0)
        setter.set(2.0)
        assert param.read() == 2.0

    def test_set_coerces_int(self) -> None:
        param, setter = Parameter.empty()
        setter.set(10)
        assert param.read() == 10.0
        assert isinstance(param.read(), float)

    def test_set_rejects_non_numbers(self) -> None:
        param, setter = Parameter.empty()
        with pytest.raises(InvalidValueError, match="Parameter value"):
            setter.set("10")  # ty: ignore[invalid-argument-type]
        assert param.is_set is False

    def test_reading_does_not_clear_value(self) -> None:
        param, setter = Parameter.empty()
        setter.set(3.0)
        assert param.evaluate() == 3.0
        assert param.evaluate() == 3.0

    def test_parameters_are_independent(self) -> None:
        x, x_setter = Parameter.empty()
        y, _ = Parameter.empty()
        x_setter.set(1.0)
        assert x.is_set is True
        assert y.is_set is False

    def test_set_logs_value(self, caplog: pytest.LogCaptureFixture) -> None:
        _, setter = Parameter.empty()
        with caplog.at_level(logging.DEBUG, logger="lazyexpr"):
            setter.set(5.5)
        assert "set to 5.5" in caplog.text


class TestParameterNew:
    """Tests for Parameter.new() with an initial value."""

    def test_prefilled(self) -> None:
        param, _ = Parameter.new(10)
        assert param.is_set is True
        assert param.map(lambda n: n**3).evaluate() == 1000.0

    def test_override(self) -> None:
        param, setter = Parameter.new(10)
        expr = param.map(lambda n: n**3)
        setter.set(2)
        assert expr.evaluate() == 8.0

    def test_rejects_non_numbers(self) -> None:
        with pytest.raises(InvalidValueError):
            Parameter.new(None)  # ty: ignore[invalid-argument-type]


class TestHandles:
    """Tests for the identity semantics of parameter and setter handles."""

    def test_parameter_is_immutable_handle(self) -> None:
        param, _ = Parameter.empty()
        with pytest.raises(AttributeError):
            param.value = 1.0  # ty: ignore[unresolved-attribute]

    def test_identity_equality(self) -> None:
        a, a_setter = Parameter.empty()
        b, b_setter = Parameter.empty()
        assert a == a
        assert a != b
        assert a_setter != b_setter

    def test_hashable(self) -> None:
        param, setter = Parameter.empty()
        assert len({param, setter}) == 2
