"""Shopping-list consolidation and generation."""

from mealbasket.plan.consolidate import ConsolidatedItem, consolidate_ingredients
from mealbasket.plan.shopping_list import (
    PlannedMeal,
    ShoppingItem,
    ShoppingList,
    ShoppingListGenerator,
    ingredient_matches_meal,
)

__all__ = [
    "ConsolidatedItem",
    "PlannedMeal",
    "ShoppingItem",
    "ShoppingList",
    "ShoppingListGenerator",
    "consolidate_ingredients",
    "ingredient_matches_meal",
]
