"""Tests for canonical ingredient names."""

import pytest

from mealbasket.normalize.names import (
    normalize_name,
    remove_trailing_adjectives,
    singularize_last_word,
)


class TestNormalizeName:
    """Tests for normalize_name."""

    def test_descriptors_and_quantity_removed(self):
        """Test that size, sourcing words and counts are stripped."""
        assert normalize_name("3 large free-range eggs") == "egg"

    def test_parenthesised_descriptors(self):
        """Test that descriptors inside parentheses are stripped."""
        assert normalize_name("Chicken breasts (boneless, skinless)") == "chicken breast"

    def test_keep_plural_compound(self):
        """Test that plural compounds stay plural."""
        assert normalize_name("bay leaves") == "bay leaves"
        assert normalize_name("fresh bay leaves") == "bay leaves"
        assert normalize_name("baked beans") == "baked beans"

    def test_descriptors_anywhere(self):
        """Test that descriptors are removed from any position."""
        assert normalize_name("large ripe avocados") == "avocado"
        assert normalize_name("finely chopped fresh parsley") == "parsley"

    def test_trailing_cooking_state(self):
        """Test that a trailing cooking state is dropped."""
        assert normalize_name("potatoes, mashed") == "potato"

    def test_all_descriptor_name_kept(self):
        """Test that a name made only of descriptors is not erased."""
        assert normalize_name("fresh") == "fresh"

    def test_fractions_removed(self):
        """Test that fraction glyphs and remnants are removed."""
        assert normalize_name("½ red onion") == "red onion"
        assert normalize_name("1/2 lemon") == "lemon"

    def test_uppercase(self):
        """Test case folding."""
        assert normalize_name("CHERRY TOMATOES") == "cherry tomato"

    def test_empty(self):
        """Test that empty input gives an empty name."""
        assert normalize_name("") == ""

    def test_placeholder_collapses_to_empty(self):
        """Test that punctuation-only text has no name left."""
        assert normalize_name("(...)") == ""

    def test_measure_word_after_name(self):
        """Test that a stray measure word settles on the ingredient."""
        assert normalize_name("rice cups") == "rice"

    @pytest.mark.parametrize(
        "name",
        [
            "3 large free-range eggs",
            "Chicken breasts (boneless, skinless)",
            "rice cups",
            "2 cups",
            "fresh frozen",
            "lengthways",
            "molasses",
            "couscous",
            "bay leaves",
            "tomatoes, chopped",
            "onions finely sliced",
            "(...)",
            "CHERRY TOMATOES",
            "½ red onion",
            "salt to taste",
            "strawberries hulled",
            "cookies",
        ],
    )
    def test_idempotent(self, name):
        """Test that normalizing a normalized name changes nothing."""
        once = normalize_name(name)
        assert normalize_name(once) == once


class TestSingularizeLastWord:
    """Tests for singularize_last_word."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("tomatoes", "tomato"),
            ("berries", "berry"),
            ("radishes", "radish"),
            ("boxes", "box"),
            ("dates", "date"),
            ("pies", "pie"),
            ("loaves", "loaf"),
            ("peas", "pea"),
            ("green peppers", "green pepper"),
        ],
    )
    def test_plural_forms(self, name, expected):
        """Test irregular and suffix-rule singulars."""
        assert singularize_last_word(name) == expected

    @pytest.mark.parametrize("name", ["glass", "gas", "baked beans", "egg", ""])
    def test_left_alone(self, name):
        """Test words that must not be touched."""
        assert singularize_last_word(name) == name

    def test_only_last_word(self):
        """Test that earlier words keep their plural."""
        assert singularize_last_word("brussels sprouts") == "brussels sprout"


class TestRemoveTrailingAdjectives:
    """Tests for remove_trailing_adjectives."""

    def test_drops_trailing_states(self):
        """Test that trailing cooking states are dropped."""
        assert remove_trailing_adjectives("potato mashed") == "potato"
        assert remove_trailing_adjectives("egg beaten whisked") == "egg"

    def test_single_word_kept(self):
        """Test that a lone cooking state is kept."""
        assert remove_trailing_adjectives("mashed") == "mashed"
