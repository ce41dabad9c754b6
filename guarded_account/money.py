"""
Amount Handling Module

Converts user and caller input into Decimal amounts and formats them for
display. NEVER keeps float values: floats are routed through str() first.
"""

from decimal import Decimal, ROUND_HALF_UP, InvalidOperation as DecimalConversionError, getcontext, localcontext
from typing import Union
import re

Numeric = Union[Decimal, int, float, str]

DISPLAY_PRECISION = Decimal('0.01')

_CURRENCY_PREFIX = re.compile(r'^\s*([+-]?)\s*\$\s*')
_THOUSANDS_GROUPED = re.compile(r'^[+-]?\d{1,3}(,\d{3})+(\.\d*)?$')


def to_amount(value: Numeric) -> Decimal:
    """
    Convert a caller-supplied value to a finite Decimal

    Args:
        value: Decimal, int, float or numeric string ("200", " 1,250.50 ", "$75")

    Returns:
        Decimal value (not rounded)

    Raises:
        ValueError: If the value is not a finite number
    """
    if isinstance(value, bool):
        raise ValueError("Amount must be a number, not a boolean")

    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, (int, float)):
        amount = Decimal(str(value))
    elif isinstance(value, str):
        amount = _parse_string(value)
    else:
        raise ValueError(f"Unsupported amount type: {type(value).__name__}")

    if not amount.is_finite():
        raise ValueError(f"Amount must be finite, got {value!r}")
    return amount


def _parse_string(value: str) -> Decimal:
    clean_value = _CURRENCY_PREFIX.sub(r'\1', value).strip()
    if not clean_value:
        raise ValueError("Amount must be a non-empty string")

    # Commas are only valid as thousands separators: 1,250.50 but not 1,2,3
    if ',' in clean_value:
        if not _THOUSANDS_GROUPED.match(clean_value):
            raise ValueError(f"Misplaced thousands separator in '{value}'")
        clean_value = clean_value.replace(',', '')

    try:
        return Decimal(clean_value)
    except DecimalConversionError:
        raise ValueError(f"Cannot convert '{value}' to an amount") from None


def _exact_precision(*values: Decimal) -> int:
    """Digits needed to hold any sum or difference of values without rounding"""
    highest = max(value.adjusted() for value in values)
    lowest = min(min(value.as_tuple().exponent, 0) for value in values)
    # One extra digit for a carry, one more for the quantize step in format_amount
    return max(getcontext().prec, highest - lowest + 3)


def add_amounts(left: Decimal, right: Decimal) -> Decimal:
    """Exact sum, whatever the magnitude of either operand"""
    with localcontext() as ctx:
        ctx.prec = _exact_precision(left, right)
        return left + right


def subtract_amounts(left: Decimal, right: Decimal) -> Decimal:
    """Exact difference, whatever the magnitude of either operand"""
    with localcontext() as ctx:
        ctx.prec = _exact_precision(left, right)
        return left - right


def format_amount(amount: Numeric) -> str:
    """Format for display, e.g. $1200.00"""
    amount = to_amount(amount)
    with localcontext() as ctx:
        ctx.prec = _exact_precision(amount, DISPLAY_PRECISION)
        rounded = amount.quantize(DISPLAY_PRECISION, rounding=ROUND_HALF_UP)
        if rounded == 0:
            rounded = abs(rounded)
        if rounded < 0:
            return f"-${-rounded}"
        return f"${rounded}"
