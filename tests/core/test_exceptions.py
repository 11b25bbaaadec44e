"""Tests for nestegg.core.exceptions."""

import pytest

from nestegg.core.exceptions import ConfigurationError, InvalidInputError, NestEggError


def test_hierarchy():
    """All exceptions should inherit from NestEggError."""
    for exc_cls in [ConfigurationError, InvalidInputError]:
        assert issubclass(exc_cls, NestEggError)


def test_invalid_input_is_value_error():
    assert issubclass(InvalidInputError, ValueError)


def test_invalid_input_fields():
    err = InvalidInputError("home_price", -5, "must be >= 0")
    assert err.field == "home_price"
    assert err.value == -5
    assert str(err) == "Invalid home_price=-5: must be >= 0"


def test_catch_base():
    with pytest.raises(NestEggError):
        raise InvalidInputError("rate", -1, "must be >= 0")
