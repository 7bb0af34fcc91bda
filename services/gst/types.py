"""Types for GST breakdown calculation."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

type Amount = Decimal | int | float | str


class TaxMode(str, Enum):
    """How the input amount relates to tax."""

    INCLUSIVE = "inclusive"
    EXCLUSIVE = "exclusive"


@dataclass(frozen=True, slots=True)
class TaxCalculationInput:
    """
    Request for a GST breakdown.

    Attributes:
        amount: The inclusive total or the exclusive base, depending on mode.
        rate: GST rate as a percentage (18 means 18%).
        mode: Whether ``amount`` already contains the tax.
    """

    amount: Amount
    rate: Amount
    mode: TaxMode


@dataclass(frozen=True, slots=True)
class TaxBreakdown:
    """
    Base, tax and total of a priced amount.

    Each field is rounded to 2 decimal places on its own, so
    ``total_amount`` matches ``base_amount + tax_amount`` within 0.01.

    Attributes:
        base_amount: Pre-tax amount.
        tax_amount: Tax portion.
        total_amount: Amount including tax.
    """

    base_amount: Decimal
    tax_amount: Decimal
    total_amount: Decimal

    @property
    def is_finite(self) -> bool:
        """Whether all three fields are finite numbers."""
        return all(
            value.is_finite() for value in (self.base_amount, self.tax_amount, self.total_amount)
        )

    @classmethod
    def untaxed(cls, amount: Decimal) -> TaxBreakdown:
        """Create a breakdown with no tax component."""
        return cls(base_amount=amount, tax_amount=Decimal("0.00"), total_amount=amount)


@dataclass(frozen=True, slots=True)
class GstRateOption:
    """A selectable GST slab for rate pickers."""

    value: Decimal
    label: str
