"""Validating GST calculation service."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import TYPE_CHECKING

from core.config import get_settings
from core.logging import bound_context, get_logger
from core.result import Result, failure, success
from services.gst.calculator import GST_RATES, compute_breakdown, to_decimal
from services.gst.errors import (
    InvalidAmountError,
    InvalidModeError,
    InvalidRateError,
    RateOutOfRangeError,
    SingularRateError,
    TaxCalculationError,
)
from services.gst.formatting import format_currency
from services.gst.types import TaxBreakdown, TaxCalculationInput, TaxMode

if TYPE_CHECKING:
    from core.config import TaxSettings
    from services.gst.types import GstRateOption

logger = get_logger(__name__)

SINGULAR_RATE = Decimal("-100")


class TaxCalculatorService:
    """
    Service for GST breakdowns with input validation.

    The pure calculator functions let NaN and infinity flow through; this
    service checks the request first and reports problems as a Failure.
    """

    def __init__(self, settings: TaxSettings | None = None) -> None:
        """
        Initialize the tax calculator service.

        Args:
            settings: Tax settings (defaults to the application settings).
        """
        self._settings = settings if settings is not None else get_settings().tax

    @property
    def settings(self) -> TaxSettings:
        """The tax settings in use."""
        return self._settings

    def calculate(
        self,
        request: TaxCalculationInput,
        *,
        allow_out_of_range: bool = False,
    ) -> Result[TaxBreakdown, TaxCalculationError]:
        """
        Validate a request and compute its breakdown.

        Args:
            request: Amount, rate and mode.
            allow_out_of_range: Skip the configured rate bounds, for
                what-if previews. Non-finite rates are still rejected.

        Returns:
            Result containing TaxBreakdown or TaxCalculationError.
        """
        logger.debug(
            "Calculating GST breakdown",
            amount=str(request.amount),
            rate=str(request.rate),
            mode=str(request.mode),
        )

        error = self._validate(request, allow_out_of_range=allow_out_of_range)
        if error is not None:
            logger.info(
                "Rejected GST calculation",
                code=error.code.value,
                field=error.field,
                value=error.value,
            )
            return failure(error)

        return success(compute_breakdown(request))

    def calculate_batch(
        self,
        requests: list[TaxCalculationInput],
        *,
        allow_out_of_range: bool = False,
    ) -> list[Result[TaxBreakdown, TaxCalculationError]]:
        """
        Calculate breakdowns for multiple requests.

        Each request is logged with its position in the batch.

        Returns:
            List of Results, one per request.
        """
        results: list[Result[TaxBreakdown, TaxCalculationError]] = []
        for index, req in enumerate(requests):
            with bound_context(batch_index=index, batch_size=len(requests)):
                results.append(self.calculate(req, allow_out_of_range=allow_out_of_range))
        return results

    def supported_rates(self) -> list[GstRateOption]:
        """GST slabs that fall inside the configured bounds."""
        return [
            option
            for option in GST_RATES
            if self._settings.min_rate <= option.value <= self._settings.max_rate
        ]

    def format_breakdown(self, breakdown: TaxBreakdown) -> dict[str, str]:
        """Render each breakdown field with the configured currency and locale."""
        return {
            name: format_currency(
                value,
                currency=self._settings.currency,
                locale=self._settings.locale,
            )
            for name, value in (
                ("base_amount", breakdown.base_amount),
                ("tax_amount", breakdown.tax_amount),
                ("total_amount", breakdown.total_amount),
            )
        }

    def _validate(
        self,
        request: TaxCalculationInput,
        *,
        allow_out_of_range: bool,
    ) -> TaxCalculationError | None:
        """Return the first problem with a request, or None."""
        try:
            mode = TaxMode(request.mode)
        except (ValueError, TypeError):
            return InvalidModeError(request.mode)

        try:
            amount = to_decimal(request.amount)
        except (InvalidOperation, TypeError):
            return InvalidAmountError(request.amount, "Amount is not a number")
        if not amount.is_finite() or amount < 0:
            return InvalidAmountError(request.amount)

        try:
            rate = to_decimal(request.rate)
        except (InvalidOperation, TypeError):
            return InvalidRateError(request.rate, "Rate is not a number")
        if not rate.is_finite():
            return InvalidRateError(request.rate)

        if mode is TaxMode.INCLUSIVE and rate == SINGULAR_RATE:
            return SingularRateError(request.rate)

        if not allow_out_of_range and not (
            self._settings.min_rate <= rate <= self._settings.max_rate
        ):
            return RateOutOfRangeError(
                request.rate, self._settings.min_rate, self._settings.max_rate
            )

        return None
