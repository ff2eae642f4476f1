"""Application use cases.

Use cases orchestrate domain services to fulfill the description
authoring workflows exposed to the product form.
"""

import logging
from decimal import Decimal
from typing import Optional, Sequence

from domain.models import ProductDetails, SizeVariant, StructuredDescription
from domain.services.description_generator import DescriptionGenerator
from domain.services.description_parser import DescriptionParser
from domain.services.servings_calculator import calculate_servings
from domain.services.weight_scaler import next_size_variant, scale_weight


class ParseDescriptionUseCase:
    """Rebuild the structured record from stored description text."""

    def __init__(self, parser: DescriptionParser) -> None:
        self._parser = parser

    def execute(
        self,
        text: Optional[str],
        current: Optional[StructuredDescription] = None,
    ) -> StructuredDescription:
        """Parse description text.

        Args:
            text: Canonical description text
            current: Record to merge into (blank record if None)

        Returns:
            Parsed StructuredDescription
        """
        return self._parser.parse(text, current)


class GenerateDescriptionUseCase:
    """Flatten the structured record into canonical description text."""

    def __init__(self, generator: DescriptionGenerator) -> None:
        self._generator = generator

    def execute(
        self,
        overview: Optional[str],
        details: Optional[ProductDetails],
        please_note: Optional[str],
    ) -> str:
        """Generate description text.

        Args:
            overview: Overview text
            details: Product details
            please_note: Please-note bullets

        Returns:
            Canonical description text
        """
        return self._generator.generate(overview, details, please_note)


class CalculateServingsUseCase:
    """Derive the servings range from a weight."""

    def execute(self, weight: Optional[str]) -> str:
        return calculate_servings(weight)


class ScaleWeightUseCase:
    """Scale a weight by an integer multiplier."""

    def execute(self, weight: str, multiplier: int) -> str:
        return scale_weight(weight, multiplier)


class AddSizeVariantUseCase:
    """Append the next auto-sized variant to a product's variant list."""

    def execute(
        self,
        base_weight: str,
        base_price: Decimal,
        variants: Sequence[SizeVariant],
        discount_percent: Decimal = Decimal("0"),
    ) -> list[SizeVariant]:
        """Add a variant sized as the next multiple of the base row.

        Args:
            base_weight: Weight of the base row
            base_price: Price of the base row
            variants: Existing variants
            discount_percent: Discount copied onto the new variant

        Returns:
            New variant list (unchanged when the new row cannot be built yet)
        """
        variant = next_size_variant(base_weight, base_price, variants, discount_percent)
        if variant is None:
            logging.debug("add size variant skipped: base row or last variant incomplete")
            return list(variants)
        logging.debug("add size variant weight=%s price=%s", variant.weight, variant.price)
        return [*variants, variant]
