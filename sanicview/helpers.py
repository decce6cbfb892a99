"""
View Helper Functions
Formatting helpers exposed to every template under the helpers mapping

Usage in a template:
    {{ helpers.truncate(it.description, 80) }}
    {{ helpers.money(it.total, 2, ',', '.') }}
"""
import math
import re
from decimal import Context, Decimal, ROUND_HALF_UP
from typing import Any, Callable, Dict

from sanicview.defaults import (
    DEFAULT_TRUNCATE_LENGTH,
    DEFAULT_TRUNCATE_REPLACE,
    DEFAULT_MONEY_DECIMALS,
    DEFAULT_DECIMAL_POINT,
    DEFAULT_THOUSANDS_SEPARATOR,
)

_THOUSANDS_GROUP = re.compile(r'(\d{3})(?=\d)')


# ==============================================================================
# String Helpers
# ==============================================================================

def truncate(text: str, length: int = None, replace: str = None) -> str:
    """
    Truncate a string to a number of characters

    Args:
        text: String to truncate
        length: Max characters kept (default: 50)
        replace: Appended when the string was cut (default: '...')

    Returns:
        The trimmed and cut string plus replace, or text unchanged when it fits

    Example:
        truncate('hello world', 5)  # 'hello...'
        truncate('hi')  # 'hi'
    """
    length = length or DEFAULT_TRUNCATE_LENGTH
    replace = replace or DEFAULT_TRUNCATE_REPLACE

    if len(text) > length:
        return text.strip()[:length].strip() + replace
    return text


# ==============================================================================
# Number Helpers
# ==============================================================================

def money(nr: Any, dec: Any = None, dec_point: str = None, thousand_sep: str = None) -> str:
    """
    Format a number as a signed, thousands-grouped decimal string

    Args:
        nr: Number to format (non-numeric input counts as 0)
        dec: Decimal places; negative values use their absolute value,
             non-numeric values fall back to 2
        dec_point: Decimal point character (default: '.')
        thousand_sep: Thousands separator (default: ',')

    Returns:
        Formatted number

    Example:
        money(1234.5)  # '1,234.50'
        money(3.5, 2, ',', '.')  # '3,50'
        money(-1234.5, 0, ',', '.')  # '-1.235'
    """
    dec_point = dec_point or DEFAULT_DECIMAL_POINT
    thousand_sep = thousand_sep or DEFAULT_THOUSANDS_SEPARATOR
    dec = _decimal_places(dec)
    number = _to_number(nr)

    sign = '-' if number < 0 else ''
    quantum = Decimal(1).scaleb(-dec)
    exact = Decimal(abs(number))
    # Enough digits for the whole integer part plus the requested places
    context = Context(prec=max(exact.adjusted(), 0) + dec + 2)
    fixed = exact.quantize(quantum, rounding=ROUND_HALF_UP, context=context)
    integer, _, fraction = format(fixed, 'f').partition('.')

    head = len(integer) % 3 if len(integer) > 3 else 0
    result = sign
    if head:
        result += integer[:head] + thousand_sep
    result += _THOUSANDS_GROUP.sub(lambda m: m.group(1) + thousand_sep, integer[head:])

    if dec:
        result += dec_point + fraction

    return result


def _decimal_places(dec: Any) -> int:
    if dec is None:
        return DEFAULT_MONEY_DECIMALS
    try:
        value = abs(float(dec))
    except (TypeError, ValueError):
        return DEFAULT_MONEY_DECIMALS
    if math.isnan(value) or math.isinf(value):
        return DEFAULT_MONEY_DECIMALS
    return int(value)


def _to_number(nr: Any) -> float:
    try:
        value = float(nr)
    except (TypeError, ValueError):
        return 0.0
    return value if math.isfinite(value) else 0.0


DEFAULT_HELPERS: Dict[str, Callable] = {
    'truncate': truncate,
    'money': money,
}
