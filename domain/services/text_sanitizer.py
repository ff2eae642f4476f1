"""Text cleanup for description fragments.

Strips markup tags and template placeholder phrases left behind by older
description templates.
"""

from __future__ import annotations

import re
from dataclasses import replace
from typing import Optional

from config.constants import EMPTY_PARENS, OVERVIEW_MAX_WORDS, TEMPLATE_PLACEHOLDERS
from domain.models import ProductDetails, StructuredDescription

_TAG_PATTERN = re.compile(r"<[^>]*?>")
_PARENS_ONLY = re.compile(r"^[()\s]*$")
_PLACEHOLDER_PATTERNS = tuple(
    re.compile(re.escape(phrase), re.IGNORECASE) for phrase in TEMPLATE_PLACEHOLDERS
)


def sanitize(fragment: Optional[str]) -> str:
    """Strip tags and placeholders; parentheses-only leftovers become empty.

    Passes repeat until nothing changes, so a placeholder nested inside
    another one is removed too and sanitize(sanitize(x)) == sanitize(x).
    """
    if not fragment:
        return ""
    cleaned = fragment
    while True:
        stripped = _strip_once(cleaned)
        if stripped == cleaned:
            break
        cleaned = stripped
    if is_blank_placeholder(cleaned):
        return ""
    return cleaned


def _strip_once(text: str) -> str:
    cleaned = _TAG_PATTERN.sub("", text).strip()
    for pattern in _PLACEHOLDER_PATTERNS:
        cleaned = pattern.sub("", cleaned).strip()
    return cleaned


def is_blank_placeholder(text: Optional[str]) -> bool:
    """True for empty text or text made only of parentheses and whitespace."""
    return not text or _PARENS_ONLY.match(text) is not None


def clean_fields(description: StructuredDescription) -> StructuredDescription:
    """Blank out leftover "()" values in the structured record."""
    overview = "" if is_blank_placeholder(description.overview) else description.overview
    details = description.details
    for name in ProductDetails.field_names():
        if name != "version" and details.get(name) == EMPTY_PARENS:
            details = details.with_field(name, "")
    return replace(description, overview=overview, details=details)


def clean_canonical_text(text: Optional[str]) -> str:
    """Drop every "()" from a canonical description."""
    if not text:
        return ""
    return text.replace(EMPTY_PARENS, "").strip()


def count_words(text: Optional[str]) -> int:
    if not text or not text.strip():
        return 0
    return len(text.split())


def is_over_word_limit(text: Optional[str], limit: int = OVERVIEW_MAX_WORDS) -> bool:
    return count_words(text) > limit
