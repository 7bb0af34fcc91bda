"""GSTIN (GST identification number) format check."""

from __future__ import annotations

import re

# state code, PAN (5 letters, 4 digits, 1 letter), entity number, "Z", check character
GSTIN_PATTERN = re.compile(r"^[0-9]{2}[A-Z]{5}[0-9]{4}[A-Z][1-9A-Z]Z[0-9A-Z]$")


def is_valid_gstin(value: str | None) -> bool:
    """
    Check the format of a GSTIN.

    The field is optional on vendor records, so an empty value is valid.
    Only the shape is checked, not the check character.
    """
    if not value:
        return True
    return GSTIN_PATTERN.fullmatch(value) is not None
