"""Tests for GSTIN format validation."""

from __future__ import annotations

import pytest

from services.gst.gstin import is_valid_gstin


class TestIsValidGstin:
    """Tests for is_valid_gstin."""

    @pytest.mark.parametrize("value", ["27AAPFU0939F1ZV", "29ABCDE1234FAZ5", "07AAACB2230MAZA"])
    def test_valid_numbers(self, value: str) -> None:
        """Well-formed GSTINs should pass."""
        assert is_valid_gstin(value) is True

    @pytest.mark.parametrize("value", ["", None])
    def test_empty_is_allowed(self, value: str | None) -> None:
        """The field is optional."""
        assert is_valid_gstin(value) is True

    @pytest.mark.parametrize(
        "value",
        [
            "27aapfu0939f1zv",  # lower case
            "27AAPFU0939F0ZV",  # entity number 0
            "27AAPFU0939F1XV",  # missing Z
            "27AAPFU0939F1Z",  # too short
            "27AAPFU0939F1ZV ",  # trailing space
            "2AAAPFU0939F1ZV",  # state code not numeric
        ],
    )
    def test_invalid_numbers(self, value: str) -> None:
        """Malformed GSTINs should fail."""
        assert is_valid_gstin(value) is False
