"""Tests for unit normalization, weight scaling and number helpers."""

from decimal import Decimal

import pytest

from domain.exceptions import InvalidMultiplierError, NotNumericError
from domain.models import Amount
from domain.services.number_parser import format_number, parse_loose_number, split_leading_number
from domain.services.unit_normalizer import (
    canonical_unit,
    format_amount,
    multiply_weight,
    normalize_base_weight,
    parse_amount,
    to_grams,
)
from domain.services.weight_scaler import scale_weight


class TestCanonicalUnit:
    """Test canonical_unit function."""

    def test_normalizes_gram_aliases(self) -> None:
        assert canonical_unit("g") == "g"
        assert canonical_unit("gm") == "g"
        assert canonical_unit("Grams") == "g"

    def test_normalizes_plural_and_case(self) -> None:
        assert canonical_unit("KG") == "kg"
        assert canonical_unit("lbs") == "lb"
        assert canonical_unit("Ounces") == "oz"
        assert canonical_unit("liters") == "l"
        assert canonical_unit("Milliliter") == "ml"

    def test_keeps_unknown_units_verbatim(self) -> None:
        assert canonical_unit("Pieces") == "Pieces"

    def test_handles_empty_and_none(self) -> None:
        assert canonical_unit(None) == ""
        assert canonical_unit("") == ""


class TestParseAmount:
    """Test parse_amount function."""

    def test_parses_number_and_unit(self) -> None:
        assert parse_amount("500g") == Amount(Decimal("500"), "g")
        assert parse_amount("1 kg") == Amount(Decimal("1"), "kg")
        assert parse_amount("2 lbs") == Amount(Decimal("2"), "lb")
        assert parse_amount("1.5kg") == Amount(Decimal("1.5"), "kg")

    def test_number_without_unit(self) -> None:
        assert parse_amount("750") == Amount(Decimal("750"), "")

    def test_unknown_unit_is_literal(self) -> None:
        assert parse_amount("3 tiers") == Amount(Decimal("3"), "tiers")

    def test_raises_for_non_numeric(self) -> None:
        with pytest.raises(NotNumericError):
            parse_amount("about a kilo")
        with pytest.raises(NotNumericError):
            parse_amount("")
        with pytest.raises(NotNumericError):
            parse_amount(None)


class TestFormatAmount:
    """Test format_amount function."""

    def test_small_grams_stay_grams(self) -> None:
        assert format_amount(Decimal("500"), "g") == "500g"

    def test_grams_roll_over_to_kilograms(self) -> None:
        assert format_amount(Decimal("1000"), "g") == "1kg"
        assert format_amount(Decimal("1500"), "g") == "1.5kg"

    def test_millilitres_roll_over_to_litres(self) -> None:
        assert format_amount(Decimal("2000"), "ml") == "2l"

    def test_ounces_roll_over_to_pounds(self) -> None:
        assert format_amount(Decimal("32"), "oz") == "2lb"
        assert format_amount(Decimal("8"), "oz") == "8oz"

    def test_large_units_do_not_roll(self) -> None:
        assert format_amount(Decimal("3.0"), "kg") == "3kg"


class TestMultiplyWeight:
    """Test multiply_weight / scale_weight."""

    def test_grams_overflow_into_kilograms(self) -> None:
        assert scale_weight("500g", 2) == "1kg"

    def test_grams_stay_below_threshold(self) -> None:
        assert scale_weight("250g", 3) == "750g"

    def test_kilograms_multiply(self) -> None:
        assert multiply_weight("1.5 kg", 2) == "3kg"
        assert multiply_weight("0.5kg", 3) == "1.5kg"

    def test_gm_renders_as_g(self) -> None:
        assert multiply_weight("300 gm", 2) == "600g"

    def test_unknown_unit_kept(self) -> None:
        assert multiply_weight("2 tiers", 2) == "4tiers"

    def test_non_numeric_weight_returned_unchanged(self) -> None:
        assert multiply_weight("Large", 2) == "Large"
        assert multiply_weight("", 3) == ""

    def test_rejects_non_integer_multiplier(self) -> None:
        with pytest.raises(InvalidMultiplierError):
            multiply_weight("500g", 0)
        with pytest.raises(InvalidMultiplierError):
            multiply_weight("500g", 1.5)  # type: ignore[arg-type]


class TestToGrams:
    """Test to_grams factors."""

    def test_factors(self) -> None:
        assert to_grams(Amount(Decimal("1"), "kg")) == Decimal("1000")
        assert to_grams(Amount(Decimal("1"), "lb")) == Decimal("453.592")
        assert to_grams(Amount(Decimal("2"), "oz")) == Decimal("56.6990")

    def test_volume_treated_as_mass(self) -> None:
        assert to_grams(Amount(Decimal("500"), "ml")) == Decimal("500")
        assert to_grams(Amount(Decimal("2"), "l")) == Decimal("2")


class TestNormalizeBaseWeight:
    """Test normalize_base_weight function."""

    def test_large_unitless_number_is_grams(self) -> None:
        assert normalize_base_weight("500") == "500 gm"

    def test_small_unitless_number_is_kilograms(self) -> None:
        assert normalize_base_weight("1.5") == "1.5 kg"

    def test_weight_with_unit_kept(self) -> None:
        assert normalize_base_weight(" 1kg ") == "1kg"
        assert normalize_base_weight("500 gm") == "500 gm"

    def test_imperial_and_volume_units_kept(self) -> None:
        assert normalize_base_weight("2 lbs") == "2 lbs"
        assert normalize_base_weight("16 oz") == "16 oz"
        assert normalize_base_weight("1.5 L") == "1.5 L"

    def test_non_numeric_kept(self) -> None:
        assert normalize_base_weight("Half") == "Half"

    def test_empty(self) -> None:
        assert normalize_base_weight("") == ""
        assert normalize_base_weight(None) == ""


class TestNumberParser:
    """Test number_parser helpers."""

    def test_split_leading_number(self) -> None:
        assert split_leading_number("12.5 lbs") == (Decimal("12.5"), "lbs")
        assert split_leading_number("kg 1") is None

    def test_parse_loose_number(self) -> None:
        assert parse_loose_number("1.5kg") == Decimal("1.5")
        assert parse_loose_number("approx 2 kg") == Decimal("2")
        assert parse_loose_number("none") is None

    def test_format_number(self) -> None:
        assert format_number(Decimal("2.50")) == "2.5"
        assert format_number(Decimal("1E+3")) == "1000"
        assert format_number(Decimal("0.1") * 3) == "0.3"
