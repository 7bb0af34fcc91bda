"""
GST breakdown calculator.

Pure functions converting between tax-inclusive and tax-exclusive amounts.
Arithmetic runs in a private decimal context with no traps, so NaN and
infinite inputs (and the ``rate == -100`` singularity of the inclusive
formula) come back as non-finite Decimals instead of raising.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Context, Decimal, InvalidOperation, localcontext
from typing import TYPE_CHECKING

from services.gst.types import GstRateOption, TaxBreakdown, TaxMode

if TYPE_CHECKING:
    from services.gst.types import Amount, TaxCalculationInput

CENTS = Decimal("0.01")
HUNDRED = Decimal("100")

MIN_RATE = Decimal("0")
MAX_RATE = Decimal("28")

GST_RATES: tuple[GstRateOption, ...] = tuple(
    GstRateOption(value=Decimal(slab), label=f"{slab}%") for slab in (0, 5, 12, 18, 28)
)

ARITHMETIC = Context(prec=28, rounding=ROUND_HALF_UP, traps=[])


def to_decimal(value: Amount) -> Decimal:
    """
    Convert a numeric input to Decimal.

    Floats go through ``str`` so ``0.1`` becomes ``Decimal("0.1")``.

    Raises:
        decimal.InvalidOperation: If a string is not a number.
        TypeError: If the value is not numeric.
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise TypeError(f"Expected a number, got {value!r}")
    if isinstance(value, float):
        return Decimal(str(value))
    if isinstance(value, (int, str)):
        return Decimal(value.strip() if isinstance(value, str) else value)
    raise TypeError(f"Expected a number, got {type(value).__name__}")


def round_amount(value: Decimal) -> Decimal:
    """Round half-up to 2 places. Non-finite values pass through."""
    if not value.is_finite():
        return value
    # quantizing to CENTS needs every integer digit plus two
    context = ARITHMETIC.copy()
    context.prec = max(ARITHMETIC.prec, value.adjusted() + 3)
    return value.quantize(CENTS, rounding=ROUND_HALF_UP, context=context)


def _breakdown(base: Decimal, tax: Decimal, total: Decimal) -> TaxBreakdown:
    return TaxBreakdown(
        base_amount=round_amount(base),
        tax_amount=round_amount(tax),
        total_amount=round_amount(total),
    )


def compute_from_inclusive_total(total_amount: Amount, rate: Amount) -> TaxBreakdown:
    """
    Back the tax out of a GST-inclusive total.

    Formula: tax = total * rate / (100 + rate), base = total - tax.

    Args:
        total_amount: Amount that already contains the tax.
        rate: GST rate as a percentage. Not range checked.

    Returns:
        TaxBreakdown with each field rounded independently.
    """
    total = to_decimal(total_amount)
    pct = to_decimal(rate)
    with localcontext(ARITHMETIC):
        tax = total * pct / (HUNDRED + pct)
        base = total - tax
    return _breakdown(base, tax, total)


def compute_from_exclusive_base(base_amount: Amount, rate: Amount) -> TaxBreakdown:
    """
    Add GST on top of a pre-tax base.

    Formula: tax = base * rate / 100, total = base + tax.

    Args:
        base_amount: Amount before tax.
        rate: GST rate as a percentage. Not range checked.

    Returns:
        TaxBreakdown with each field rounded independently.
    """
    base = to_decimal(base_amount)
    pct = to_decimal(rate)
    with localcontext(ARITHMETIC):
        tax = base * pct / HUNDRED
        total = base + tax
    return _breakdown(base, tax, total)


def compute_breakdown(request: TaxCalculationInput) -> TaxBreakdown:
    """
    Dispatch on the request mode.

    Raises:
        ValueError: If the mode is not a TaxMode value.
    """
    if TaxMode(request.mode) is TaxMode.INCLUSIVE:
        return compute_from_inclusive_total(request.amount, request.rate)
    return compute_from_exclusive_base(request.amount, request.rate)


def is_valid_rate(
    rate: Amount,
    *,
    minimum: Decimal = MIN_RATE,
    maximum: Decimal = MAX_RATE,
) -> bool:
    """
    Check that a rate is a finite number within ``[minimum, maximum]``.

    Advisory only: the compute functions accept any rate.
    """
    try:
        value = to_decimal(rate)
    except (InvalidOperation, TypeError):
        return False
    if not value.is_finite():
        return False
    return minimum <= value <= maximum
