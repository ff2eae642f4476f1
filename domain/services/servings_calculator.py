"""Servings estimate derived from a cake's weight."""

from __future__ import annotations

from decimal import ROUND_FLOOR, ROUND_HALF_UP, Decimal
from typing import Optional

from config.constants import (
    GRAMS_PER_SERVING_MAX,
    GRAMS_PER_SERVING_MIN,
    SERVINGS_RANGE_SEPARATOR,
)
from domain.exceptions import NotNumericError
from domain.services.unit_normalizer import parse_amount, to_grams


def calculate_servings(weight: Optional[str]) -> str:
    """Turn a weight into a servings range.

    One serving is between 83.33g and 100g of cake, so 500g gives
    "5–6 servings" and 1kg gives "10–12 servings". Unparseable weights
    give "0 servings".
    """
    try:
        amount = parse_amount(weight)
    except NotNumericError:
        return _pluralize(0)

    grams = to_grams(amount)
    min_servings = int((grams / GRAMS_PER_SERVING_MIN).to_integral_value(rounding=ROUND_FLOOR))
    max_servings = int((grams / GRAMS_PER_SERVING_MAX).to_integral_value(rounding=ROUND_HALF_UP))

    if min_servings == max_servings:
        return _pluralize(min_servings)
    return f"{min_servings}{SERVINGS_RANGE_SEPARATOR}{max_servings} servings"


def _pluralize(count: int) -> str:
    return f"{count} serving{'s' if count != 1 else ''}"
