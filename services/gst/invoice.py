"""
Maintenance invoice costing.

Prices the labor and parts of a vehicle maintenance record:

- Parts carrying GST are priced GST-inclusive per unit; the unit
  breakdown is scaled by quantity for the line total.
- Labor is broken down in whichever mode the invoice states, and only
  when the invoice is a GST invoice.
- The record total is the labor amount as entered plus every part line.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal, localcontext

from services.gst.calculator import (
    ARITHMETIC,
    compute_breakdown,
    compute_from_inclusive_total,
    round_amount,
    to_decimal,
)
from services.gst.types import Amount, TaxCalculationInput, TaxMode

ZERO = Decimal("0.00")


def _positive_or_nan(value: Decimal) -> bool:
    # NaN takes the taxed branch so it propagates instead of signalling
    return value.is_nan() or value > 0


@dataclass(frozen=True, slots=True)
class PartLine:
    """
    A part used in a maintenance job.

    Attributes:
        quantity: Units used.
        unit_cost: Price per unit; GST-inclusive when GST applies.
        gst_applicable: Whether the part carries GST.
        gst_rate: GST rate as a percentage.
    """

    quantity: int
    unit_cost: Amount
    gst_applicable: bool = False
    gst_rate: Amount = 0


@dataclass(frozen=True, slots=True)
class PartCost:
    """Priced part line. ``base_cost`` and ``gst_amount`` are per unit."""

    line: PartLine
    base_cost: Decimal
    gst_amount: Decimal
    total_cost: Decimal


@dataclass(frozen=True, slots=True)
class LaborCharge:
    """
    Labor billed on a maintenance job.

    Attributes:
        amount: Labor cost as entered.
        gst_invoice: Whether the vendor issued a GST invoice.
        mode: Whether ``amount`` includes GST.
        gst_rate: GST rate as a percentage.
    """

    amount: Amount
    gst_invoice: bool = False
    mode: TaxMode = TaxMode.INCLUSIVE
    gst_rate: Amount = 18


@dataclass(frozen=True, slots=True)
class MaintenanceCostSummary:
    """Cost totals of a maintenance record."""

    labor_cost: Decimal
    labor_base_amount: Decimal
    labor_gst_amount: Decimal
    parts: tuple[PartCost, ...] = field(default_factory=tuple)

    @property
    def parts_cost(self) -> Decimal:
        """Sum of all part line totals."""
        return sum((part.total_cost for part in self.parts), ZERO)

    @property
    def total_cost(self) -> Decimal:
        """Labor plus parts."""
        return self.labor_cost + self.parts_cost

    @property
    def total_gst(self) -> Decimal:
        """GST on labor plus GST on every part unit used."""
        with localcontext(ARITHMETIC):
            parts_gst = sum(
                (part.gst_amount * max(part.line.quantity, 0) for part in self.parts), ZERO
            )
        return round_amount(self.labor_gst_amount + parts_gst)

    @property
    def billable_parts(self) -> tuple[PartCost, ...]:
        """Part lines with a positive quantity."""
        return tuple(part for part in self.parts if part.line.quantity > 0)


def price_part(line: PartLine) -> PartCost:
    """
    Price a single part line.

    Args:
        line: The part line to price.

    Returns:
        PartCost with per-unit base and GST and the line total.
    """
    unit_cost = to_decimal(line.unit_cost)
    rate = to_decimal(line.gst_rate)

    if line.gst_applicable and _positive_or_nan(rate) and _positive_or_nan(unit_cost):
        unit = compute_from_inclusive_total(unit_cost, rate)
        with localcontext(ARITHMETIC):
            total = unit.total_amount * line.quantity
        return PartCost(
            line=line,
            base_cost=unit.base_amount,
            gst_amount=unit.tax_amount,
            total_cost=round_amount(total),
        )

    with localcontext(ARITHMETIC):
        total = unit_cost * line.quantity
    return PartCost(
        line=line,
        base_cost=round_amount(unit_cost),
        gst_amount=ZERO,
        total_cost=round_amount(total),
    )


def price_labor(charge: LaborCharge) -> tuple[Decimal, Decimal]:
    """
    Split a labor charge into base and GST.

    Returns:
        (base_amount, gst_amount). Without a GST invoice the whole amount
        is base.
    """
    amount = to_decimal(charge.amount)
    rate = to_decimal(charge.gst_rate)

    if charge.gst_invoice and _positive_or_nan(rate):
        breakdown = compute_breakdown(
            TaxCalculationInput(amount=amount, rate=rate, mode=charge.mode)
        )
        return breakdown.base_amount, breakdown.tax_amount

    return round_amount(amount), ZERO


def summarize_maintenance(
    labor: LaborCharge,
    parts: list[PartLine] | tuple[PartLine, ...] = (),
) -> MaintenanceCostSummary:
    """
    Price a whole maintenance record.

    Args:
        labor: The labor charge.
        parts: Parts used on the job.

    Returns:
        MaintenanceCostSummary with labor split and priced part lines.
    """
    labor_base, labor_gst = price_labor(labor)
    return MaintenanceCostSummary(
        labor_cost=round_amount(to_decimal(labor.amount)),
        labor_base_amount=labor_base,
        labor_gst_amount=labor_gst,
        parts=tuple(price_part(line) for line in parts),
    )
