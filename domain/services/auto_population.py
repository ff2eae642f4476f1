"""Guarded one-way fills of product details from related catalog state."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional, Sequence

from domain.models import ProductDetails, SizeVariant
from domain.services.servings_calculator import calculate_servings
from domain.services.unit_normalizer import normalize_base_weight


class AutoPopulationRules:
    """Fill flavour, weight and servings without clobbering manual edits.

    Flavour and weight are only filled when empty (weight also when it was
    not edited by hand since the base weight last changed). Servings always
    follow the weight, even over a hand-typed value.
    """

    def __init__(self) -> None:
        self._weight_manually_edited = False

    @property
    def weight_manually_edited(self) -> bool:
        return self._weight_manually_edited

    def mark_weight_edited(self) -> None:
        """Record that the operator typed into the weight field."""
        self._weight_manually_edited = True

    def apply_flavour(
        self,
        details: ProductDetails,
        subcategory_name: Optional[str],
    ) -> ProductDetails:
        """Use the primary subcategory name as flavour when none is set."""
        if details.cake_flavour or not subcategory_name:
            return details
        logging.debug("auto-populating cake flavour from subcategory %r", subcategory_name)
        return replace(details, cake_flavour=subcategory_name)

    def on_base_weight_changed(
        self,
        details: ProductDetails,
        base_weight: Optional[str],
        variants: Sequence[SizeVariant] = (),
    ) -> ProductDetails:
        """A new upstream base weight lifts the manual-edit lock, then fills weight."""
        if base_weight and base_weight.strip():
            self._weight_manually_edited = False
        return self.apply_weight(details, base_weight, variants)

    def apply_weight(
        self,
        details: ProductDetails,
        base_weight: Optional[str],
        variants: Sequence[SizeVariant] = (),
    ) -> ProductDetails:
        """Fill weight from the base weight, else from the first size variant."""
        has_base_weight = bool(base_weight and base_weight.strip())
        if details.weight and (self._weight_manually_edited or not has_base_weight):
            return details

        if has_base_weight:
            weight = normalize_base_weight(base_weight)
        elif variants:
            weight = variants[0].weight
        else:
            weight = ""

        if not weight or weight == details.weight:
            return details
        logging.debug("auto-populating weight=%r", weight)
        return self.apply_servings(replace(details, weight=weight))

    def apply_servings(self, details: ProductDetails) -> ProductDetails:
        """Recompute servings from weight, overwriting any typed value."""
        if not details.weight:
            return details
        return replace(details, servings=calculate_servings(details.weight))
