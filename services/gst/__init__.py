"""GST breakdown calculation package."""

from services.gst.calculator import (
    GST_RATES,
    MAX_RATE,
    MIN_RATE,
    compute_breakdown,
    compute_from_exclusive_base,
    compute_from_inclusive_total,
    is_valid_rate,
)
from services.gst.errors import TaxCalculationError, TaxErrorCode
from services.gst.formatting import format_currency
from services.gst.gstin import is_valid_gstin
from services.gst.service import TaxCalculatorService
from services.gst.types import GstRateOption, TaxBreakdown, TaxCalculationInput, TaxMode

__all__ = [
    "GST_RATES",
    "MAX_RATE",
    "MIN_RATE",
    "GstRateOption",
    "TaxBreakdown",
    "TaxCalculationError",
    "TaxCalculationInput",
    "TaxCalculatorService",
    "TaxErrorCode",
    "TaxMode",
    "compute_breakdown",
    "compute_from_exclusive_base",
    "compute_from_inclusive_total",
    "format_currency",
    "is_valid_gstin",
    "is_valid_rate",
]
