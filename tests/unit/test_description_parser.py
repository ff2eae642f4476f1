"""Tests for DescriptionParser."""

import pytest

from config.constants import DEFAULT_PLEASE_NOTE
from domain.models import ProductDetails, StructuredDescription, Version
from domain.services.description_parser import DescriptionParser, parse_description

SAMPLE = (
    "A lovely cake.\n"
    "\n"
    "Product Details:\n"
    "Cake Flavour: Chocolate\n"
    "Weight: 1kg\n"
    "\n"
    "Please Note:\n"
    "• Standard note."
)


@pytest.fixture
def parser() -> DescriptionParser:
    """Create DescriptionParser instance."""
    return DescriptionParser()


class TestParse:
    """Test parse method."""

    def test_parses_sample(self, parser: DescriptionParser) -> None:
        result = parser.parse(SAMPLE)

        assert result.overview == "A lovely cake."
        assert result.details.cake_flavour == "Chocolate"
        assert result.details.weight == "1kg"
        assert result.please_note == "• Standard note."

    def test_all_labels(self, parser: DescriptionParser) -> None:
        text = (
            "Product Details:\n"
            "Cake Flavour: Red Velvet\n"
            "Version: Eggless\n"
            "Shape: Heart\n"
            "Servings: 5–6 servings\n"
            "Toppings: Cream cheese\n"
            "Weight: 500g\n"
            "Country of Origin: India\n"
        )

        details = parser.parse(text).details

        assert details == ProductDetails(
            cake_flavour="Red Velvet",
            version=Version.EGGLESS,
            shape="Heart",
            servings="5–6 servings",
            toppings="Cream cheese",
            weight="500g",
            country_of_origin="India",
        )

    def test_label_order_does_not_matter(self, parser: DescriptionParser) -> None:
        ordered = "Product Details:\nCake Flavour: Lemon\nShape: Square\nWeight: 2kg"
        shuffled = "Product Details:\nWeight: 2kg\nCake Flavour: Lemon\nShape: Square"

        assert parser.parse(ordered).details == parser.parse(shuffled).details

    def test_sanitizes_values(self, parser: DescriptionParser) -> None:
        text = (
            "<p>Fresh <em>daily</em></p>\n"
            "Product Details:\n"
            "Cake Flavour: <strong>Chocolate</strong> (Editable per product)\n"
            "Toppings: ()\n"
        )

        result = parser.parse(text)

        assert result.overview == "Fresh daily"
        assert result.details.cake_flavour == "Chocolate"
        assert result.details.toppings == ""

    def test_rejects_unknown_version(self, parser: DescriptionParser) -> None:
        current = StructuredDescription(details=ProductDetails(version=Version.EGG))
        text = "Product Details:\nCake Flavour: Mango\nVersion: Vegan"

        assert parser.parse(text, current).details.version is Version.UNSET

    def test_labels_are_case_sensitive(self, parser: DescriptionParser) -> None:
        text = "Product Details:\nCake Flavour: Mango\ncake flavour: Lime"

        assert parser.parse(text).details.cake_flavour == "Mango"

    def test_multi_line_overview_joined_with_spaces(self, parser: DescriptionParser) -> None:
        result = parser.parse("First line.\nSecond line.\n\nProduct Details:\nWeight: 1kg")

        assert result.overview == "First line. Second line."

    def test_please_note_keeps_only_bullets(self, parser: DescriptionParser) -> None:
        text = "Please Note:\n• One\nnot a bullet\n• <b>Two</b>"

        assert parser.parse(text).please_note == "• One\n• Two"

    def test_details_header_ends_please_note(self, parser: DescriptionParser) -> None:
        text = "Please Note:\n• Note\nProduct Details:\nCake Flavour: Coffee"

        result = parser.parse(text)

        assert result.please_note == "• Note"
        assert result.details.cake_flavour == "Coffee"


class TestPartialOverwrite:
    """Parsed zones only replace populated current values when they carry data."""

    @pytest.fixture
    def current(self) -> StructuredDescription:
        return StructuredDescription(
            overview="Existing overview",
            details=ProductDetails(cake_flavour="Vanilla", weight="1kg", shape="Round"),
            please_note="• Existing note",
        )

    def test_empty_text_returns_current(
        self, parser: DescriptionParser, current: StructuredDescription
    ) -> None:
        assert parser.parse("", current) is current
        assert parser.parse("   \n ", current) is current

    def test_missing_overview_keeps_current(
        self, parser: DescriptionParser, current: StructuredDescription
    ) -> None:
        result = parser.parse("Product Details:\nToppings: Sprinkles", current)

        assert result.overview == "Existing overview"
        assert result.details.toppings == "Sprinkles"
        assert result.details.cake_flavour == "Vanilla"

    def test_details_without_primary_fields_ignored(
        self, parser: DescriptionParser, current: StructuredDescription
    ) -> None:
        blank = StructuredDescription(overview="x")

        result = parser.parse("Product Details:\nShape: Heart", blank)

        assert result.details == ProductDetails()

    def test_missing_please_note_keeps_current(
        self, parser: DescriptionParser, current: StructuredDescription
    ) -> None:
        assert parser.parse("Just an overview", current).please_note == "• Existing note"

    def test_please_note_section_replaces_not_appends(
        self, parser: DescriptionParser, current: StructuredDescription
    ) -> None:
        result = parser.parse("Please Note:\n• New note", current)

        assert result.please_note == "• New note"

    def test_default_note_without_current(self) -> None:
        assert parse_description("Plain legacy text").please_note == DEFAULT_PLEASE_NOTE
