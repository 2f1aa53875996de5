"""KRW amount formatting and parsing."""

import re
from typing import Union

from config.defaults import CURRENCY_SUFFIX


def format_currency(value: Union[int, float, str]) -> str:
    """Format an amount with thousands separators, e.g. 1000000 -> "1,000,000".

    Strings may already contain separators; their leading integer is used.
    Anything without one formats as "0".
    """
    if isinstance(value, str):
        match = re.match(r"\s*(-?\d+)", value.replace(",", ""))
        if not match:
            return "0"
        value = int(match.group(1))
    if isinstance(value, float) and value != value:  # NaN
        return "0"
    return f"{round(value):,}"


def parse_currency(text: str) -> int:
    """Parse a formatted amount, keeping digits only; empty input gives 0."""
    digits = re.sub(r"[^0-9]", "", text or "")
    return int(digits) if digits else 0


def format_currency_with_suffix(value: Union[int, float, str]) -> str:
    return f"{format_currency(value)}{CURRENCY_SUFFIX}"
