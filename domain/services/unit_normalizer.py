"""Unit normalization and conversion helpers."""

from __future__ import annotations

import logging
import re
from decimal import Decimal
from typing import Optional

from config.constants import (
    BASE_WEIGHT_GRAMS_SUFFIX,
    BASE_WEIGHT_GRAMS_THRESHOLD,
    BASE_WEIGHT_KILOGRAMS_SUFFIX,
    UNIT_ALIASES,
    UNIT_ROLLOVER,
    UNIT_TO_GRAMS,
)
from domain.exceptions import InvalidMultiplierError, NotNumericError
from domain.models import Amount
from domain.services.number_parser import format_number, parse_loose_number, split_leading_number


def canonical_unit(unit: Optional[str]) -> str:
    """Normalize a unit string to a canonical form; unknown units are kept verbatim."""
    if not unit:
        return ""
    cleaned = str(unit).strip()
    return UNIT_ALIASES.get(cleaned.lower(), cleaned)


def parse_amount(text: Optional[str]) -> Amount:
    """Parse "500g", "1 kg" or "2 lbs" into an Amount.

    Raises:
        NotNumericError: If the text does not start with a number
    """
    parts = split_leading_number(text)
    if parts is None:
        raise NotNumericError(text or "")
    number, unit = parts
    return Amount(value=number, unit=canonical_unit(unit))


def format_amount(value: Decimal, unit: str) -> str:
    """Render an amount, rolling g/ml/oz over to kg/l/lb past their thresholds."""
    unit = canonical_unit(unit)
    rollover = UNIT_ROLLOVER.get(unit)
    if rollover is not None:
        threshold, large_unit, divisor = rollover
        if value >= threshold:
            return f"{format_number(value / divisor)}{large_unit}"
    return f"{format_number(value)}{unit}"


def multiply_weight(weight: str, multiplier: int) -> str:
    """Scale a weight string by an integer multiplier.

    Non-numeric weights come back unchanged.
    """
    if isinstance(multiplier, bool) or not isinstance(multiplier, int) or multiplier < 1:
        raise InvalidMultiplierError(f"Multiplier must be a positive integer: {multiplier!r}")
    try:
        amount = parse_amount(weight)
    except NotNumericError:
        logging.debug("multiply_weight left non-numeric weight as-is: %r", weight)
        return weight
    scaled = amount.scale(multiplier)
    return format_amount(scaled.value, scaled.unit)


def to_grams(amount: Amount) -> Decimal:
    """Gram equivalent used for servings; unknown units pass through unchanged."""
    factor = UNIT_TO_GRAMS.get(amount.unit, Decimal("1"))
    return amount.value * factor


def normalize_base_weight(base_weight: Optional[str]) -> str:
    """Give a unit-less base weight a unit: 500 -> "500 gm", 1.5 -> "1.5 kg"."""
    if not base_weight or not base_weight.strip():
        return ""
    cleaned = base_weight.strip()
    number = parse_loose_number(cleaned)
    if number is None:
        return cleaned
    lower = cleaned.lower()
    if "kg" in lower or "g" in lower:
        return cleaned
    if any(word in UNIT_ALIASES for word in re.findall(r"[a-z]+", lower)):
        return cleaned
    if number >= BASE_WEIGHT_GRAMS_THRESHOLD:
        return f"{format_number(number)} {BASE_WEIGHT_GRAMS_SUFFIX}"
    return f"{format_number(number)} {BASE_WEIGHT_KILOGRAMS_SUFFIX}"
