"""Charge string parsing and display utilities"""

import math
import re
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any

_LEADING_INT = re.compile(r"^[+-]?\d+")
_SUBCLASS = re.compile(r"\(Subclass\s*(\d+)\)", re.IGNORECASE)


def parse_charge(value: Any) -> int:
    """
    Parse a charge from the rate store into whole currency units.

    "1,420" -> 1420, "$ 345" -> 345, "450.50" -> 450, "" / "abc" / None -> 0.
    Negative amounts are clamped to 0. Parsing a clean integer string is a no-op.
    """
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, (int, float)):
        if isinstance(value, float) and not math.isfinite(value):
            return 0
        return max(int(value), 0)

    text = str(value).replace(",", "").replace("$", "").strip()
    match = _LEADING_INT.match(text)
    if not match:
        return 0
    return max(int(match.group()), 0)


def is_parsable_charge(value: Any) -> bool:
    """True when the raw value carries a number (an empty field counts as 0, not an error)"""
    if value is None or value == "":
        return True
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        return math.isfinite(value)
    text = str(value).replace(",", "").replace("$", "").strip()
    return not text or _LEADING_INT.match(text) is not None


def extract_subclass_code(visa_name: str) -> str:
    """Pull "500" out of "Student Visa (Subclass 500)"; fall back to the whole name"""
    match = _SUBCLASS.search(visa_name or "")
    if match:
        return match.group(1)
    return visa_name or ""


def format_currency(amount: Any) -> str:
    """Two-decimal display string; anything non-finite renders as 0.00"""
    try:
        value = Decimal(str(amount))
    except (InvalidOperation, ValueError):
        return "0.00"
    if not value.is_finite():
        return "0.00"
    return str(value.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))
