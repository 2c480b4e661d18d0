"""Parse and normalize free-text ingredient lines."""

from mealbasket.normalize.categories import detect_ingredient_category
from mealbasket.normalize.cleaning import clean_ingredient_text
from mealbasket.normalize.garbage import is_alphanumeric_garbage, is_garbage_ingredient
from mealbasket.normalize.names import normalize_name
from mealbasket.normalize.parser import (
    ExtractionStrategy,
    NormalizedIngredient,
    ParsedIngredient,
    normalize_ingredient,
    parse_ingredient,
)
from mealbasket.normalize.units import (
    DisplayQuantity,
    convert_from_grams,
    convert_to_grams,
    format_display_quantity,
    format_item_display,
    format_quantity_imperial,
    format_quantity_metric,
)

__all__ = [
    "DisplayQuantity",
    "ExtractionStrategy",
    "NormalizedIngredient",
    "ParsedIngredient",
    "clean_ingredient_text",
    "convert_from_grams",
    "convert_to_grams",
    "detect_ingredient_category",
    "format_display_quantity",
    "format_item_display",
    "format_quantity_imperial",
    "format_quantity_metric",
    "is_alphanumeric_garbage",
    "is_garbage_ingredient",
    "normalize_ingredient",
    "normalize_name",
    "parse_ingredient",
]
