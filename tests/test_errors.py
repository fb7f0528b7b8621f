# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

"""Tests for focus error classes."""

import pytest

from focus._errors import (
    FocusError,
    NotFoundError,
    UnsupportedShapeError,
    ValidationError,
)


class TestFocusError:
    """Tests for base FocusError class."""

    def test_default_initialization(self):
        """Test error with default values."""
        error = FocusError()
        assert str(error) == "Focus error"
        assert error.message == "Focus error"
        assert error.details == {}

    def test_custom_message(self):
        error = FocusError("Custom error message")
        assert str(error) == "Custom error message"
        assert error.message == "Custom error message"

    def test_with_cause(self):
        """Test error with underlying cause."""
        cause = KeyError("name")
        error = FocusError("Wrapped error", cause=cause)
        assert error.get_cause() is cause
        assert error.__cause__ is cause

    def test_to_dict_basic(self):
        error = FocusError("Test error")
        assert error.to_dict() == {
            "error": "FocusError",
            "reason": "error",
            "message": "Test error",
        }

    def test_to_dict_with_details_and_cause(self):
        cause = ValueError("Root cause")
        error = FocusError("Error", details={"key": "name"}, cause=cause)
        result = error.to_dict(include_cause=True)
        assert result["details"] == {"key": "name"}
        assert "ValueError" in result["cause"]

    def test_to_dict_without_cause_flag(self):
        error = FocusError("Error", cause=ValueError("hidden"))
        assert "cause" not in error.to_dict()


class TestSubclasses:
    """Subclasses carry a reason and a matching builtin base."""

    def test_not_found_error(self):
        error = NotFoundError()
        assert error.reason == "bad_path"
        assert str(error) == "Bad path"
        assert isinstance(error, LookupError)
        assert isinstance(error, FocusError)

    def test_unsupported_shape_error(self):
        error = UnsupportedShapeError()
        assert error.reason == "bad_data_structure"
        assert isinstance(error, TypeError)

    def test_validation_error_from_value(self):
        error = ValidationError.from_value(3.5, expected="int", field="n")
        assert error.details == {
            "value": 3.5,
            "type": "float",
            "expected": "int",
            "field": "n",
        }
        assert isinstance(error, ValueError)

    def test_catch_as_base(self):
        with pytest.raises(FocusError):
            raise NotFoundError("missing")
