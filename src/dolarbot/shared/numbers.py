# src/dolarbot/shared/numbers.py
"""
Locale-aware Decimal Parsing and Rendering

The upstream publishes prices as text in a fixed locale. These helpers read
and write that text without going through float, so tax adjustments keep
exact cents.

Files that USE this module:
- dolarbot.adapters.providers.dolar_argentina (tax adjustment of AHORRO sell prices)

Files that this module USES:
- None (pure utility functions)
"""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Optional


@dataclass(frozen=True)
class NumberFormat:
    """Separators used by a locale when writing numbers."""
    decimal_sep: str
    group_sep: str
    currency_symbol: str = "$"


SIGNS = ("+", "-")

CULTURES = {
    "en-US": NumberFormat(decimal_sep=".", group_sep=","),
    "es-AR": NumberFormat(decimal_sep=",", group_sep="."),
}


def get_number_format(culture: str) -> NumberFormat:
    """
    Look up the number format of a culture name.

    Raises:
        KeyError: If the culture is not known
    """
    return CULTURES[culture]


def parse_decimal(text: Optional[str], culture: str = "en-US") -> Optional[Decimal]:
    """
    Parse a number written under ``culture``.

    Accepts surrounding whitespace, one leading or trailing sign, accounting
    parentheses, a currency symbol and group separators. Inner whitespace
    and underscores are rejected.

    Args:
        text: Raw numeric text (e.g. '1,234.50', '$ 100.50', '(12.3)')
        culture: Culture name whose separators apply

    Returns:
        The parsed Decimal, or None if the text is not a finite number
    """
    if text is None:
        return None

    fmt = get_number_format(culture)
    s = str(text).strip()
    if not s or "_" in s:
        return None

    negative = False
    parenthesized = s.startswith("(") and s.endswith(")")
    if parenthesized:
        negative = True
        s = s[1:-1].strip()

    leading = s.startswith(SIGNS)
    trailing = s.endswith(SIGNS)
    if (leading and trailing) or (parenthesized and (leading or trailing)):
        return None
    if leading:
        negative = s[0] == "-"
        s = s[1:]
    elif trailing:
        negative = s[-1] == "-"
        s = s[:-1]

    if s.startswith(fmt.currency_symbol):
        s = s[len(fmt.currency_symbol):].lstrip()
    elif s.endswith(fmt.currency_symbol):
        s = s[:-len(fmt.currency_symbol)].rstrip()

    # Only surrounding whitespace is allowed, and a single sign
    if not s or s.startswith(SIGNS) or any(ch.isspace() for ch in s):
        return None

    s = s.replace(fmt.group_sep, "").replace(fmt.decimal_sep, ".")
    try:
        value = Decimal(s)
    except InvalidOperation:
        return None
    if not value.is_finite():
        return None
    return -value if negative else value


def format_decimal(value: Decimal, culture: str = "en-US", places: int = 2) -> str:
    """
    Render a number with a fixed count of decimals and no group separators.

    Midpoints round away from zero (100.125 -> '100.13').

    Args:
        value: Number to render
        culture: Culture name whose decimal separator applies
        places: Number of decimals to keep

    Returns:
        The rendered number
    """
    fmt = get_number_format(culture)
    quantum = Decimal(1).scaleb(-places)
    text = f"{value.quantize(quantum, rounding=ROUND_HALF_UP):f}"
    return text.replace(".", fmt.decimal_sep)
