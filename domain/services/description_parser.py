"""Canonical description parser.

Splits a stored description into its overview, "Product Details:" and
"Please Note:" zones and rebuilds the structured record from them.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional

from config.constants import (
    DETAIL_LABELS,
    DETAILS_HEADER,
    PLEASE_NOTE_BULLET,
    PLEASE_NOTE_HEADER,
)
from domain.models import ProductDetails, StructuredDescription, Version
from domain.services.text_sanitizer import sanitize

_OVERVIEW = "overview"
_DETAILS = "details"
_PLEASE_NOTE = "please_note"


class DescriptionParser:
    """Parse canonical description text into a StructuredDescription."""

    def parse(
        self,
        text: Optional[str],
        current: Optional[StructuredDescription] = None,
    ) -> StructuredDescription:
        """Parse text on top of the caller's current record.

        Args:
            text: Canonical description text
            current: Record currently shown in the form (blank record if None)

        Returns:
            The updated record

        Note:
            Parsed zones only replace the current ones when they carry data:
            the overview when non-empty, the details when flavour, weight,
            servings or toppings were found, and the note when it differs.
            Legacy or partial text therefore never blanks populated fields.
        """
        if current is None:
            current = StructuredDescription()
        if not text or not text.strip():
            return current

        overview_lines: list[str] = []
        details = current.details
        please_note = current.please_note
        mode = _OVERVIEW

        lines = text.split("\n")
        logging.debug("parse_description lines=%d", len(lines))

        for line in lines:
            stripped = line.strip()
            if DETAILS_HEADER in stripped:
                mode = _DETAILS
                continue
            if PLEASE_NOTE_HEADER in stripped:
                mode = _PLEASE_NOTE
                please_note = ""
                continue
            if not stripped:
                continue

            if mode == _DETAILS:
                details = self._parse_detail_line(stripped, details)
            elif mode == _PLEASE_NOTE:
                if stripped.startswith(PLEASE_NOTE_BULLET):
                    note_line = sanitize(stripped)
                    please_note = f"{please_note}\n{note_line}" if please_note else note_line
            else:
                overview_lines.append(sanitize(stripped))

        overview = " ".join(part for part in overview_lines if part).strip()

        result = current
        if overview:
            result = replace(result, overview=overview)
        if details.has_primary_fields():
            result = replace(result, details=details)
        if please_note != current.please_note:
            result = replace(result, please_note=please_note)
        return result

    def _parse_detail_line(self, line: str, details: ProductDetails) -> ProductDetails:
        for name, label in DETAIL_LABELS:
            if line.startswith(label):
                value = sanitize(line[len(label):])
                if name == "version":
                    return replace(details, version=Version.from_text(value))
                return details.with_field(name, value)
        return details


def parse_description(
    text: Optional[str],
    current: Optional[StructuredDescription] = None,
) -> StructuredDescription:
    """Module-level shortcut for DescriptionParser().parse."""
    return DescriptionParser().parse(text, current)
