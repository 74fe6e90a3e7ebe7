"""Amount parsing utilities."""

import math
import re

from pledgebook.config import CURRENCY_LABEL

_CURRENCY_PATTERN = re.compile(rf"[$€£¥]|\b{re.escape(CURRENCY_LABEL)}\b", re.IGNORECASE)
_LEADING_NUMBER = re.compile(r"\s*[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")


def parse_amount(amount_str: str) -> float:
    """Parse an amount string into a float.

    Handles various formats:
    - "123.45"
    - "KES 123.45"
    - "-123.45"
    - "1,234.56"
    - "(123.45)" (negative in parentheses)

    Args:
        amount_str: Amount string

    Returns:
        Float amount

    Raises:
        ValueError: If amount string cannot be parsed
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    amount_str = amount_str.strip()

    # Handle parentheses notation (negative)
    is_negative = False
    if amount_str.startswith("(") and amount_str.endswith(")"):
        is_negative = True
        amount_str = amount_str[1:-1]

    amount_str = _CURRENCY_PATTERN.sub("", amount_str)
    amount_str = amount_str.replace(",", "").strip()

    try:
        amount = float(amount_str)
    except ValueError as e:
        raise ValueError(f"Could not parse amount '{amount_str}': {e}")
    if math.isnan(amount) or math.isinf(amount):
        raise ValueError(f"Could not parse amount '{amount_str}': not a finite number")
    return -amount if is_negative else amount


def parse_leading_amount(amount_str: str) -> float:
    """Read the number at the start of a string, ignoring anything after it.

    "100 KES pledged" reads as 100. Strings that do not start with a number,
    including "(100)" and "KES 100", read as 0.0, as do NaN and infinity.
    """
    match = _LEADING_NUMBER.match(amount_str or "")
    if match is None:
        return 0.0
    amount = float(match.group(0))
    if math.isnan(amount) or math.isinf(amount):
        return 0.0
    return amount
