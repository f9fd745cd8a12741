# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

"""Tests for fieldrules error classes."""

import pytest

from fieldrules._errors import FieldRulesError, InvalidArgumentError


class TestFieldRulesError:
    """Tests for the base error class."""

    def test_default_initialization(self):
        """Test error with default values."""
        error = FieldRulesError()
        assert str(error) == "fieldrules error"
        assert error.message == "fieldrules error"
        assert error.details == {}

    def test_custom_message(self):
        error = FieldRulesError("Custom error message")
        assert str(error) == "Custom error message"
        assert error.message == "Custom error message"

    def test_with_cause(self):
        """Test error with underlying cause."""
        cause = KeyError("missing")
        error = FieldRulesError("Wrapped error", cause=cause)
        assert error.get_cause() is cause
        assert error.__cause__ is cause

    def test_to_dict_basic(self):
        error = FieldRulesError("Test error")
        assert error.to_dict() == {
            "error": "FieldRulesError",
            "message": "Test error",
        }

    def test_to_dict_with_details_and_cause(self):
        cause = ValueError("Root cause")
        error = FieldRulesError("Error", details={"a": 1}, cause=cause)
        result = error.to_dict(include_cause=True)
        assert result["details"] == {"a": 1}
        assert result["cause"] == repr(cause)


class TestInvalidArgumentError:
    """Tests for the argument guard error."""

    def test_is_value_error(self):
        """Callers catching ValueError also catch guard failures."""
        with pytest.raises(ValueError):
            raise InvalidArgumentError()

    def test_default_message(self):
        assert InvalidArgumentError().message == "Invalid argument"

    def test_from_value(self):
        error = InvalidArgumentError.from_value(
            0, expected=">= 1", message="Too small", field="min_length"
        )
        assert error.message == "Too small"
        assert error.details == {
            "value": 0,
            "type": "int",
            "expected": ">= 1",
            "field": "min_length",
        }

    def test_from_value_without_expectation(self):
        error = InvalidArgumentError.from_value(None)
        assert "expected" not in error.details
        assert error.details["type"] == "NoneType"
