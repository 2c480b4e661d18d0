"""Shopping list generation from planned meals."""

from dataclasses import dataclass, field
from typing import Protocol

from rapidfuzz import fuzz

from mealbasket.config import get_settings
from mealbasket.logging_config import LoggingContext, get_logger
from mealbasket.normalize.parser import parse_ingredient
from mealbasket.normalize.units import UnitPreference, format_display_quantity
from mealbasket.plan.consolidate import ConsolidatedItem, consolidate_ingredients

logger = get_logger(__name__)

# Thresholds for attributing a shopping item back to a meal
MIN_SUBSTRING_LENGTH = 6
MIN_TOKEN_OVERLAP = 0.6
HIGH_FUZZY_THRESHOLD = 90


class PriceLookup(Protocol):
    """Price source for a shopping item (an external collaborator)."""

    def __call__(self, display_name: str, category: str, quantity: float, unit: str) -> float | None:
        ...


@dataclass
class PlannedMeal:
    """A meal in the plan with the ingredient lines of its recipe."""

    meal_id: str
    name: str
    ingredients: list[str]
    servings: int = 1


@dataclass
class ShoppingItem:
    """A single item in the shopping list."""

    normalized_name: str
    display_name: str
    quantity: float
    unit: str
    category: str
    display_quantity: str
    quantity_in_grams: float | None = None
    needs_review: bool = False
    validation_note: str | None = None
    meal_sources: list[str] = field(default_factory=list)
    price: float | None = None

    @classmethod
    def from_consolidated(
        cls,
        item: ConsolidatedItem,
        preference: UnitPreference,
    ) -> "ShoppingItem":
        quantity_in_grams = item.quantity_in_grams
        return cls(
            normalized_name=item.normalized_name,
            display_name=item.display_name,
            quantity=item.quantity,
            unit=item.unit,
            category=item.category,
            display_quantity=format_display_quantity(
                item.quantity, item.unit, quantity_in_grams, preference
            ),
            quantity_in_grams=quantity_in_grams,
            needs_review=item.needs_review,
            validation_note=item.validation_note,
        )


@dataclass
class ShoppingList:
    """Complete shopping list for a meal plan."""

    plan_id: str
    items: list[ShoppingItem] = field(default_factory=list)

    # Computed totals
    total_cost: float = 0.0
    priced_items_count: int = 0
    review_items_count: int = 0

    # Grouped views
    items_by_category: dict[str, list[ShoppingItem]] = field(default_factory=dict)

    def add_item(self, item: ShoppingItem) -> None:
        """Add an item and update computed fields."""
        self.items.append(item)

        if item.price is not None:
            self.total_cost += item.price
            self.priced_items_count += 1

        if item.needs_review:
            self.review_items_count += 1

        self.items_by_category.setdefault(item.category or "other", []).append(item)


def ingredient_matches_meal(normalized_name: str, meal_ingredients: list[str]) -> bool:
    """
    Check whether a consolidated ingredient came from a meal's recipe lines.

    Tries, per line: exact name match, substring match for longer names,
    word overlap, and finally a high-threshold fuzzy match for spelling
    variants ("yoghurt" / "yogurt").
    """
    target = normalized_name.lower().strip()
    if len(target) < 2:
        return False

    target_tokens = [token for token in target.split() if len(token) > 2]

    for line in meal_ingredients:
        parsed = parse_ingredient(line)
        candidate = (parsed.normalized_name or parsed.name).lower().strip()
        if len(candidate) < 2:
            continue

        if candidate == target:
            return True

        if len(target) >= MIN_SUBSTRING_LENGTH and len(candidate) >= MIN_SUBSTRING_LENGTH:
            if candidate in target or target in candidate:
                return True

        candidate_tokens = [token for token in candidate.split() if len(token) > 2]
        if target_tokens and candidate_tokens:
            common = sum(1 for token in target_tokens if token in candidate_tokens)
            ratio = common / min(len(target_tokens), len(candidate_tokens))
            if common >= 1 and ratio >= MIN_TOKEN_OVERLAP:
                return True

        if fuzz.token_sort_ratio(candidate, target) >= HIGH_FUZZY_THRESHOLD:
            return True

    return False


class ShoppingListGenerator:
    """
    Generates shopping lists from planned meals with:
    - Quantity consolidation across recipes
    - Unit normalization (e.g., 2 tbsp honey + 50g honey -> 92.6 g)
    - Attribution of each item back to the meals that need it
    - Optional pricing through an external lookup
    """

    def __init__(
        self,
        price_lookup: PriceLookup | None = None,
        unit_preference: UnitPreference | None = None,
    ):
        self.price_lookup = price_lookup
        self.unit_preference: UnitPreference = (
            unit_preference or get_settings().unit_preference
        )

    def generate(self, plan_id: str, meals: list[PlannedMeal]) -> ShoppingList:
        """
        Generate a shopping list for the planned meals.

        Args:
            plan_id: The meal plan ID.
            meals: Planned meals; each meal's lines count once per serving.

        Returns:
            ShoppingList with consolidated, attributed and priced items.
        """
        with LoggingContext(batch_id=plan_id):
            logger.info(f"Generating shopping list for plan {plan_id} ({len(meals)} meals)")

            all_lines: list[str] = []
            for meal in meals:
                for _ in range(max(meal.servings, 0)):
                    all_lines.extend(meal.ingredients)

            shopping_list = ShoppingList(plan_id=plan_id)
            for consolidated in consolidate_ingredients(all_lines):
                item = ShoppingItem.from_consolidated(consolidated, self.unit_preference)
                item.meal_sources = [
                    meal.meal_id
                    for meal in meals
                    if meal.servings > 0
                    and ingredient_matches_meal(item.normalized_name, meal.ingredients)
                ]
                item.price = self._lookup_price(item)
                shopping_list.add_item(item)

            logger.info(
                f"Generated shopping list: {len(shopping_list.items)} items, "
                f"{shopping_list.priced_items_count} priced, "
                f"{shopping_list.review_items_count} need review, "
                f"total cost: {shopping_list.total_cost:.2f}"
            )

        return shopping_list

    def _lookup_price(self, item: ShoppingItem) -> float | None:
        """Price one item; a failing lookup only affects that item."""
        if self.price_lookup is None:
            return None

        try:
            return self.price_lookup(item.display_name, item.category, item.quantity, item.unit)
        except Exception as e:
            logger.warning(f"Failed to price {item.display_name}: {e}")
            return None
