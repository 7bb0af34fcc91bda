"""Error types for validated GST calculations."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TaxErrorCode(str, Enum):
    """Error codes for rejected calculation requests."""

    INVALID_MODE = "invalid_mode"
    INVALID_AMOUNT = "invalid_amount"
    INVALID_RATE = "invalid_rate"
    RATE_OUT_OF_RANGE = "rate_out_of_range"
    SINGULAR_RATE = "singular_rate"


@dataclass(frozen=True, slots=True)
class TaxCalculationError:
    """
    Reason a calculation request was rejected.

    Attributes:
        code: Error code identifying the type of error.
        message: Human-readable error message.
        field: Name of the offending request field.
        value: The rejected input, as text.
    """

    code: TaxErrorCode
    message: str
    field: str
    value: str | None = None

    def __str__(self) -> str:
        """Return string representation of the error."""
        return f"{self.code.value} ({self.field}): {self.message}"


def InvalidModeError(value: object) -> TaxCalculationError:
    """Create an invalid mode error."""
    return TaxCalculationError(
        code=TaxErrorCode.INVALID_MODE,
        message="Mode must be 'inclusive' or 'exclusive'",
        field="mode",
        value=str(value),
    )


def InvalidAmountError(
    value: object,
    message: str = "Amount must be a finite number >= 0",
) -> TaxCalculationError:
    """Create an invalid amount error."""
    return TaxCalculationError(
        code=TaxErrorCode.INVALID_AMOUNT,
        message=message,
        field="amount",
        value=str(value),
    )


def InvalidRateError(
    value: object,
    message: str = "Rate must be a finite number",
) -> TaxCalculationError:
    """Create an invalid rate error."""
    return TaxCalculationError(
        code=TaxErrorCode.INVALID_RATE,
        message=message,
        field="rate",
        value=str(value),
    )


def RateOutOfRangeError(
    value: object,
    minimum: object,
    maximum: object,
) -> TaxCalculationError:
    """Create a rate out of range error."""
    return TaxCalculationError(
        code=TaxErrorCode.RATE_OUT_OF_RANGE,
        message=f"Rate must be between {minimum} and {maximum}",
        field="rate",
        value=str(value),
    )


def SingularRateError(value: object) -> TaxCalculationError:
    """Create an error for the rate at which the inclusive formula divides by zero."""
    return TaxCalculationError(
        code=TaxErrorCode.SINGULAR_RATE,
        message="Rate of -100 has no inclusive breakdown",
        field="rate",
        value=str(value),
    )
