"""Details mapper - bridge between form state and domain models.

Maps between:
- Form representation (camelCase field dicts as the product form sends them)
- Domain models (ProductDetails, SizeVariant)
"""

from decimal import Decimal
from typing import Any, Dict, List, Mapping, Optional

from domain.models import ProductDetails, SizeVariant
from domain.services.number_parser import parse_loose_number

# form key -> ProductDetails field
FORM_FIELDS = {
    "cakeFlavour": "cake_flavour",
    "version": "version",
    "shape": "shape",
    "servings": "servings",
    "toppings": "toppings",
    "weight": "weight",
    "countryOfOrigin": "country_of_origin",
}


class DetailsMapper:
    """Maps between form dicts and domain ProductDetails."""

    @staticmethod
    def to_form(details: ProductDetails) -> Dict[str, str]:
        """Convert ProductDetails to the form's field dict."""
        return {key: details.get(name) for key, name in FORM_FIELDS.items()}

    @staticmethod
    def from_form(
        form: Optional[Mapping[str, Any]],
        base: Optional[ProductDetails] = None,
    ) -> ProductDetails:
        """Overlay a (possibly partial) form dict on a base record.

        Unknown keys are ignored; None values leave the base value alone.
        """
        details = base if base is not None else ProductDetails()
        if not form:
            return details
        for key, name in FORM_FIELDS.items():
            value = form.get(key)
            if value is None:
                continue
            details = details.with_field(name, str(value))
        return details


class VariantMapper:
    """Maps variation rows from the form to SizeVariant models."""

    @staticmethod
    def from_form(rows: Optional[List[Mapping[str, Any]]]) -> List[SizeVariant]:
        variants: List[SizeVariant] = []
        for row in rows or []:
            price = parse_loose_number(str(row.get("price", "") or ""))
            discount = parse_loose_number(str(row.get("discount_percent", "") or ""))
            variants.append(
                SizeVariant(
                    weight=str(row.get("weight", "") or ""),
                    price=price if price is not None else Decimal("0"),
                    discount_percent=discount if discount is not None else Decimal("0"),
                )
            )
        return variants

    @staticmethod
    def to_form(variants: List[SizeVariant]) -> List[Dict[str, Any]]:
        return [
            {
                "weight": variant.weight,
                "price": float(variant.price),
                "discount_percent": float(variant.discount_percent),
            }
            for variant in variants
        ]
