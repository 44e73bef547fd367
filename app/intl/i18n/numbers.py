"""Locale-aware number formatting."""

from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Union

Number = Union[int, float, Decimal]


def format_number(
    value: Number,
    decimals: int = 0,
    decimal_point: str = ".",
    thousands_sep: str = ",",
) -> str:
    """Format a number with grouped thousands and a fixed decimal count.

    Rounds half away from zero on the shortest decimal representation of
    the value, so 1.005 rounds to 1.01 with two decimals.

    Args:
        value: Number to format.
        decimals: Fractional digits to render (negative counts as 0).
        decimal_point: Decimal separator.
        thousands_sep: Thousands separator.

    Returns:
        Formatted number, e.g. "1 234,50". Non-finite values are returned as
        str(value).

    Examples:
        >>> format_number(1234.5, 2, ",", " ")
        '1 234,50'

        >>> format_number(-1234567.891, 1)
        '-1,234,567.9'
    """
    number = Decimal(str(value))
    if not number.is_finite():
        return str(value)

    decimals = max(int(decimals), 0)
    # Enough precision for every integer digit plus the requested decimals
    context = Context(prec=max(28, number.adjusted() + decimals + 2))
    quantized = number.quantize(
        Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP, context=context
    )

    grouped = f"{abs(quantized):,.{decimals}f}"
    sign = "-" if quantized < 0 else ""
    return sign + grouped.translate({ord(","): thousands_sep, ord("."): decimal_point})
