"""Currency display for GST amounts."""

from __future__ import annotations

from decimal import localcontext
from typing import TYPE_CHECKING

from babel.numbers import format_currency as babel_format_currency
from babel.numbers import get_currency_symbol

from services.gst.calculator import round_amount, to_decimal

if TYPE_CHECKING:
    from services.gst.types import Amount

DEFAULT_LOCALE = "en_IN"
DEFAULT_CURRENCY = "INR"


def format_currency(
    amount: Amount,
    *,
    currency: str = DEFAULT_CURRENCY,
    locale: str = DEFAULT_LOCALE,
) -> str:
    """
    Render an amount as a localized currency string with 2 fraction digits.

    With the defaults this gives Indian digit grouping, e.g.
    ``format_currency(100000)`` is ``"₹1,00,000.00"``. NaN and infinite
    amounts render as ``"₹NaN"``, ``"₹∞"`` and ``"-₹∞"``.

    Args:
        amount: Amount to render, normally already rounded to paise.
        currency: ISO 4217 currency code.
        locale: Babel locale identifier.
    """
    value = to_decimal(amount)
    if not value.is_finite():
        symbol = get_currency_symbol(currency, locale=locale)
        if value.is_nan():
            return f"{symbol}NaN"
        sign = "-" if value.is_signed() else ""
        return f"{sign}{symbol}∞"
    rounded = round_amount(value)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, rounded.adjusted() + 3)
        # currency_digits=False keeps the locale pattern's two fraction digits
        return babel_format_currency(
            rounded,
            currency,
            locale=locale,
            currency_digits=False,
        )
