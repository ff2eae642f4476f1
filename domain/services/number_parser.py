from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation

_LEADING_AMOUNT = re.compile(r"^(\d+(?:\.\d+)?)\s*(.*)$", re.DOTALL)
_LOOSE_NUMBER = re.compile(r"\d+(?:\.\d*)?|\.\d+")


def split_leading_number(text: str | None) -> tuple[Decimal, str] | None:
    """Split "1.5 kg" into (Decimal("1.5"), "kg"); None when no leading number."""
    if text is None:
        return None
    match = _LEADING_AMOUNT.match(str(text).strip())
    if match is None:
        return None
    number, rest = match.groups()
    try:
        return Decimal(number), rest.strip()
    except (InvalidOperation, ValueError):
        return None


def parse_loose_number(text: str | None) -> Decimal | None:
    """Read the first number out of text after dropping everything but digits and dots."""
    if not text:
        return None
    cleaned = re.sub(r"[^\d.]", "", str(text))
    match = _LOOSE_NUMBER.match(cleaned)
    if match is None:
        return None
    try:
        return Decimal(match.group(0))
    except (InvalidOperation, ValueError):
        return None


def format_number(value: Decimal) -> str:
    """Render a Decimal without trailing zeros or exponent ("2.50" -> "2.5", "1E+3" -> "1000")."""
    if value == value.to_integral_value():
        return str(int(value))
    return format(value.normalize(), "f")
