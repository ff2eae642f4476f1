"""Size variant generation from a product's base weight and price."""

from __future__ import annotations

from decimal import Decimal
from typing import Optional, Sequence

from domain.models import SizeVariant
from domain.services.unit_normalizer import multiply_weight


def scale_weight(weight: str, multiplier: int) -> str:
    """Scale a weight string, e.g. ("500g", 2) -> "1kg"."""
    return multiply_weight(weight, multiplier)


def next_size_variant(
    base_weight: str,
    base_price: Decimal,
    variants: Sequence[SizeVariant] = (),
    discount_percent: Decimal = Decimal("0"),
) -> Optional[SizeVariant]:
    """Build the next size variant as a multiple of the base row.

    The first variant is 2x the base, the second 3x, and so on. Returns None
    when the base row (for the first variant) or the last variant (for the
    following ones) is still incomplete.
    """
    if not variants:
        if not base_weight or base_price <= 0:
            return None
    elif not variants[-1].is_complete():
        return None

    multiplier = len(variants) + 2
    return SizeVariant(
        weight=scale_weight(base_weight, multiplier),
        price=base_price * multiplier,
        discount_percent=discount_percent,
    )
