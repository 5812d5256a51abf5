"""
Text helpers shared by the prompt builders.
"""

import re
from typing import Any

from price_parser import Price

DEFAULT_MAX_PROMPT_CHARS = 8000


def truncate_text(text: str, max_chars: int = DEFAULT_MAX_PROMPT_CHARS) -> str:
    """Cut text to at most ``max_chars`` characters to bound the prompt size."""
    return text[:max_chars]


def parse_currency(value: Any) -> float | None:
    """
    Parse a currency string to float using price-parser.

    Handles "$1,234.56", "1.234,56 €", "-45.10" and plain numbers.
    Returns None when no amount can be found.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if not isinstance(value, str):
        return None

    value = value.strip()
    if not value:
        return None

    price = Price.fromstring(value)
    if price.amount_float is None:
        return None

    # price-parser drops the sign
    if re.match(r"^\s*(-|\()", value) or re.search(r"\)\s*$", value):
        return -abs(price.amount_float)
    return price.amount_float


def format_number(value: Any) -> str:
    """
    Render a number the way it is shown in prompts.

    Whole floats lose their trailing ``.0``; formatted currency strings are
    normalized to a plain number; anything unparseable is passed through.
    """
    if value is None:
        return "N/A"
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, str):
        parsed = parse_currency(value)
        if parsed is None:
            return value
        value = parsed
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
