"""Tests for ingredient line parsing."""

import pytest

from mealbasket.normalize.parser import (
    ExtractionStrategy,
    ParsedIngredient,
    escape_trailing_unit,
    leading_decimal_plus_fraction,
    leading_fraction,
    normalize_ingredient,
    parse_fraction,
    parse_ingredient,
)


class TestParseIngredient:
    """Tests for parse_ingredient."""

    def test_mixed_number_cups(self):
        """Test a whole number plus ASCII fraction with a volume unit."""
        parsed = parse_ingredient("2 1/2 cups flour")
        assert parsed.quantity == 600.0
        assert parsed.unit == "ml"
        assert parsed.name == "flour"
        assert parsed.normalized_name == "flour"

    def test_glyph_fraction(self):
        """Test a bare fraction glyph."""
        parsed = parse_ingredient("½ tsp salt")
        assert parsed.quantity == 2.5
        assert parsed.unit == "ml"
        assert parsed.name == "salt"

    def test_whole_plus_glyph(self):
        """Test a whole number followed by a glyph, with and without a space."""
        assert parse_ingredient("1 ½ cups milk").quantity == 360.0
        assert parse_ingredient("1½ tbsp sugar").quantity == 22.5

    def test_ascii_fraction(self):
        """Test "3/4" read through the implied-denominator path."""
        parsed = parse_ingredient("3/4 cup sugar")
        assert parsed.quantity == 180.0
        assert parsed.unit == "ml"

    def test_bare_denominator(self):
        """Test that "/2" is read as one half."""
        parsed = parse_ingredient("/2 tsp cumin")
        assert parsed.quantity == 2.5
        assert parsed.name == "cumin"

    def test_trailing_quantity(self):
        """Test a name-first line with the weight at the end."""
        parsed = parse_ingredient("Chicken breast 200g")
        assert parsed.quantity == 200.0
        assert parsed.unit == "g"
        assert parsed.name == "Chicken breast"
        assert parsed.normalized_name == "chicken breast"

    def test_trailing_litre(self):
        """Test a trailing volume."""
        parsed = parse_ingredient("Milk 1 litre")
        assert parsed.quantity == 1000.0
        assert parsed.unit == "ml"
        assert parsed.name == "Milk"

    def test_attached_unit(self):
        """Test a unit glued to the number."""
        parsed = parse_ingredient("1.5kg potatoes")
        assert parsed.quantity == 1500.0
        assert parsed.unit == "g"
        assert parsed.normalized_name == "potato"

    def test_abbreviation_dot(self):
        """Test that a trailing dot on the unit is consumed."""
        parsed = parse_ingredient("8 oz. cheddar")
        assert parsed.quantity == pytest.approx(226.796)
        assert parsed.unit == "g"
        assert parsed.name == "cheddar"

    def test_fluid_ounce(self):
        """Test the two-word fluid ounce unit."""
        parsed = parse_ingredient("2 fl oz cream")
        assert parsed.quantity == pytest.approx(59.147)
        assert parsed.unit == "ml"
        assert parsed.name == "cream"

    def test_leading_of_removed(self):
        """Test that "of" after the unit is dropped."""
        assert parse_ingredient("100g of butter").name == "butter"

    def test_countable_word_dropped(self):
        """Test that a countable word followed by a name is dropped."""
        parsed = parse_ingredient("2 cloves garlic")
        assert parsed.quantity == 2
        assert parsed.unit == "unit"
        assert parsed.name == "garlic"

    def test_countable_word_becomes_name(self):
        """Test that a countable word on its own becomes the name."""
        parsed = parse_ingredient("3 eggs")
        assert parsed.quantity == 3
        assert parsed.unit == "unit"
        assert parsed.name == "egg"

    def test_no_quantity(self):
        """Test the fallback for a line without a number."""
        parsed = parse_ingredient("Salt")
        assert parsed == ParsedIngredient(
            original_text="Salt",
            name="Salt",
            normalized_name="salt",
            quantity=1.0,
            unit="unit",
            strategies=(ExtractionStrategy.FALLBACK,),
        )

    def test_zero_quantity_coerced(self):
        """Test that a zero quantity becomes one."""
        assert parse_ingredient("0 eggs").quantity == 1.0

    def test_or_alternative(self):
        """Test that only the first option of "X or N Y" is kept."""
        assert parse_ingredient("1 lemon or 2 limes").name == "lemon"

    def test_boilerplate_removed(self):
        """Test that cleaning runs before extraction."""
        parsed = parse_ingredient("Zest and juice of 1 lemon")
        assert parsed.quantity == 1
        assert parsed.name == "lemon"

    @pytest.mark.parametrize("text", ["", "   ", "???", "½", "1/0 cup", "(...)", "of"])
    def test_never_raises(self, text):
        """Test that malformed lines still produce a positive quantity."""
        parsed = parse_ingredient(text)
        assert parsed.quantity > 0
        assert parsed.unit

    def test_overflowing_quantity_coerced(self):
        """Test that a digit run too long for a float falls back to one."""
        parsed = parse_ingredient("9" * 400 + " eggs")
        assert parsed.quantity == 1.0
        assert parsed.unit == "unit"
        assert parsed.name == "egg"

    def test_overflowing_trailing_quantity_coerced(self):
        """Test that an overflowing trailing weight falls back to one."""
        parsed = parse_ingredient("Flour " + "9" * 400 + "g")
        assert parsed.quantity == 1.0
        assert parsed.unit == "g"
        assert parsed.name == "Flour"

    def test_deterministic(self):
        """Test that the same line always parses the same way."""
        assert parse_ingredient("2 1/2 cups flour") == parse_ingredient("2 1/2 cups flour")


class TestExtractionStrategies:
    """Tests for the recorded strategy chain."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            (
                "Chicken breast 200g",
                (ExtractionStrategy.ESCAPE_TRAILING_UNIT, ExtractionStrategy.FALLBACK),
            ),
            (
                "2 1/2 cups flour",
                (
                    ExtractionStrategy.LEADING_DECIMAL_PLUS_FRACTION,
                    ExtractionStrategy.MEASURED_UNIT,
                ),
            ),
            (
                "½ tsp salt",
                (ExtractionStrategy.LEADING_FRACTION, ExtractionStrategy.MEASURED_UNIT),
            ),
            (
                "3 eggs",
                (
                    ExtractionStrategy.LEADING_DECIMAL_PLUS_FRACTION,
                    ExtractionStrategy.COUNTABLE_WORD,
                ),
            ),
        ],
    )
    def test_strategies_recorded(self, text, expected):
        """Test that the strategies that fired are recorded in order."""
        assert parse_ingredient(text).strategies == expected

    def test_escape_skips_leading_digit(self):
        """Test that the escape pattern ignores quantity-first lines."""
        assert escape_trailing_unit("200g flour") is None

    def test_escape_ignores_unknown_unit(self):
        """Test that a trailing number without a unit is not escaped."""
        assert escape_trailing_unit("Eggs 6") is None

    def test_leading_decimal_plus_glyph(self):
        """Test the decimal strategy with a following glyph."""
        match = leading_decimal_plus_fraction("1 ½ cups")
        assert match.quantity == 1.5
        assert match.remaining == "cups"

    def test_leading_fraction_requires_fraction(self):
        """Test that the fraction strategy ignores plain text."""
        assert leading_fraction("cups of flour") is None
        assert leading_fraction("¾ cup").quantity == 0.75


class TestParseFraction:
    """Tests for parse_fraction."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [("½", 0.5), ("¼", 0.25), ("3/4", 0.75), ("1/2", 0.5)],
    )
    def test_valid(self, text, expected):
        """Test glyphs and ASCII fractions."""
        assert parse_fraction(text) == expected

    @pytest.mark.parametrize("text", ["1/0", "abc", "", "1/2/3"])
    def test_invalid(self, text):
        """Test that unparseable text returns None."""
        assert parse_fraction(text) is None


class TestNormalizeIngredient:
    """Tests for normalize_ingredient."""

    def test_grams_and_category(self):
        """Test gram equivalent and category."""
        result = normalize_ingredient("2 1/2 cups flour")
        assert result.quantity_in_grams == 600.0
        assert result.category == "grains"
        assert result.strategies == (
            ExtractionStrategy.LEADING_DECIMAL_PLUS_FRACTION,
            ExtractionStrategy.MEASURED_UNIT,
        )

    def test_count_has_no_grams(self):
        """Test that counts carry no gram equivalent."""
        result = normalize_ingredient("3 eggs")
        assert result.quantity_in_grams is None
        assert result.category == "eggs"
