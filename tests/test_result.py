"""Tests for Result pattern implementation."""

from __future__ import annotations

from decimal import Decimal

import pytest

from core.result import Failure, Success, failure, success


class TestSuccess:
    """Tests for Success class."""

    def test_is_success_returns_true(self) -> None:
        """Success.is_success() should return True."""
        result = Success(Decimal("18.00"))

        assert result.is_success() is True
        assert result.is_failure() is False

    def test_unwrap_returns_value(self) -> None:
        """Success.unwrap() should return the contained value."""
        result = Success("118.00")

        assert result.unwrap() == "118.00"

    def test_unwrap_or_returns_value(self) -> None:
        """Success.unwrap_or() should return value, ignoring default."""
        result = Success(100)

        assert result.unwrap_or(0) == 100

    def test_map_transforms_value(self) -> None:
        """Success.map() should transform the contained value."""
        result = Success(Decimal("100"))

        mapped = result.map(lambda x: x * Decimal("1.18"))

        assert mapped.unwrap() == Decimal("118.00")


class TestFailure:
    """Tests for Failure class."""

    def test_is_failure_returns_true(self) -> None:
        """Failure.is_failure() should return True."""
        result = Failure("error")

        assert result.is_failure() is True
        assert result.is_success() is False

    def test_unwrap_raises_value_error(self) -> None:
        """Failure.unwrap() should raise ValueError."""
        result = Failure("rate out of range")

        with pytest.raises(ValueError, match="Cannot unwrap Failure: rate out of range"):
            result.unwrap()

    def test_unwrap_or_returns_default(self) -> None:
        """Failure.unwrap_or() should return the default."""
        result = Failure("error")

        assert result.unwrap_or(Decimal("0")) == Decimal("0")

    def test_map_returns_self(self) -> None:
        """Failure.map() should not call the function."""
        result: Failure[str] = Failure("error")

        mapped = result.map(lambda x: 1 / 0)

        assert mapped is result


class TestFactories:
    """Tests for success/failure helpers."""

    def test_success_helper(self) -> None:
        """success() should wrap a value."""
        assert success(5) == Success(5)

    def test_failure_helper(self) -> None:
        """failure() should wrap an error."""
        assert failure("bad") == Failure("bad")
