"""Coercion helpers for loosely-typed spreadsheet cells."""

import math
import re
from decimal import ROUND_DOWN, Decimal, InvalidOperation
from typing import Any, Optional

_INTEGER = re.compile(r"^[+-]?\d+$")


class Unparsable(ValueError):
    """Cell is present but cannot be read as the requested type."""


def clean_text(value: Any) -> Optional[str]:
    """Trimmed string form of a cell; None when absent or blank."""
    if value is None:
        return None
    if isinstance(value, (Decimal, float)) and math.isfinite(value) and value == int(value):
        text = str(int(value))
    else:
        text = str(value)
    text = text.strip()
    return text or None


def parse_decimal(value: Any) -> Optional[Decimal]:
    """
    Exact decimal from a cell. Strings have thousands separators stripped ("10,000").
    Returns None for absent/blank cells; raises Unparsable for malformed ones.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        raise Unparsable(value)
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, float):
        result = Decimal(str(value))
    else:
        text = str(value).strip().replace(",", "")
        if not text:
            return None
        try:
            result = Decimal(text)
        except InvalidOperation as e:
            raise Unparsable(value) from e
    if not result.is_finite():
        raise Unparsable(value)
    return result


def parse_int(value: Any) -> Optional[int]:
    """
    Integer from a cell; fractional values are truncated toward zero ("5.9" -> 5, "-1.5" -> -1).
    Returns None for absent/blank cells; raises Unparsable for malformed ones.
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    number = parse_decimal(value)
    if number is None:
        return None
    return int(number.to_integral_value(rounding=ROUND_DOWN))


def parse_strict_int(value: Any) -> Optional[int]:
    """Whole-number cell only ("3,000" ok, "12.5" not). None when blank."""
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    text = clean_text(value)
    if text is None:
        return None
    text = text.replace(",", "")
    if not _INTEGER.match(text):
        raise Unparsable(value)
    return int(text)
