"""Canonical description generator.

Flattens the structured record back into the plain-text description that
is stored with the product.
"""

from typing import List, Optional

from config.constants import DETAIL_LABELS, DETAILS_HEADER, PLEASE_NOTE_HEADER
from domain.models import ProductDetails, StructuredDescription


class DescriptionGenerator:
    """Generate canonical description text from structured fields."""

    def generate(
        self,
        overview: Optional[str],
        details: Optional[ProductDetails],
        please_note: Optional[str],
    ) -> str:
        """Generate the canonical description.

        Args:
            overview: Free-form overview text
            details: Product details block
            please_note: Bulleted note text

        Returns:
            Description text with empty sections and fields omitted
        """
        sections: List[str] = []

        overview = (overview or "").strip()
        if overview:
            sections.append(overview)

        if details is not None and not details.is_empty():
            lines = [DETAILS_HEADER]
            for name, label in DETAIL_LABELS:
                value = details.get(name).strip()
                if value:
                    lines.append(f"{label} {value}")
            sections.append("\n".join(lines))

        please_note = (please_note or "").strip()
        if please_note:
            sections.append(f"{PLEASE_NOTE_HEADER}\n{please_note}")

        return "\n\n".join(sections).strip()

    def generate_from(self, description: StructuredDescription) -> str:
        """Generate text for a whole StructuredDescription."""
        return self.generate(description.overview, description.details, description.please_note)


def generate_description(
    overview: Optional[str],
    details: Optional[ProductDetails],
    please_note: Optional[str],
) -> str:
    """Module-level shortcut for DescriptionGenerator().generate."""
    return DescriptionGenerator().generate(overview, details, please_note)
