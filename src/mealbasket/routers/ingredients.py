"""API routes exposing the ingredient engine."""

from fastapi import APIRouter

from mealbasket.config import get_settings
from mealbasket.logging_config import get_logger
from mealbasket.normalize.categories import detect_ingredient_category
from mealbasket.normalize.garbage import is_garbage_ingredient
from mealbasket.normalize.names import normalize_name
from mealbasket.normalize.parser import normalize_ingredient
from mealbasket.normalize.units import format_display_quantity
from mealbasket.plan.consolidate import consolidate_ingredients
from mealbasket.plan.shopping_list import PlannedMeal, ShoppingListGenerator
from mealbasket.schemas import (
    ConsolidatedItemResponse,
    ConsolidateRequest,
    ConsolidateResponse,
    GarbageCheckResponse,
    IngredientTextRequest,
    NormalizedNameResponse,
    ParsedIngredientResponse,
    ShoppingItemResponse,
    ShoppingListRequest,
    ShoppingListResponse,
)

logger = get_logger(__name__)

router = APIRouter(prefix="/api/v1", tags=["ingredients"])


@router.post("/ingredients/parse", response_model=ParsedIngredientResponse)
def parse(request: IngredientTextRequest) -> ParsedIngredientResponse:
    """Parse one ingredient line into name, quantity and unit."""
    ingredient = normalize_ingredient(request.text)
    return ParsedIngredientResponse(
        original_text=ingredient.original_text,
        name=ingredient.name,
        normalized_name=ingredient.normalized_name,
        quantity=ingredient.quantity,
        unit=ingredient.unit,
        quantity_in_grams=ingredient.quantity_in_grams,
        category=ingredient.category,
        strategies=[strategy.value for strategy in ingredient.strategies],
    )


@router.post("/ingredients/normalize", response_model=NormalizedNameResponse)
def normalize(request: IngredientTextRequest) -> NormalizedNameResponse:
    """Return the canonical name used for deduplication."""
    normalized_name = normalize_name(request.text)
    return NormalizedNameResponse(
        normalized_name=normalized_name,
        category=detect_ingredient_category(normalized_name),
    )


@router.post("/ingredients/garbage-check", response_model=GarbageCheckResponse)
def garbage_check(request: IngredientTextRequest) -> GarbageCheckResponse:
    """Report whether a line would be dropped as a non-ingredient."""
    return GarbageCheckResponse(text=request.text, is_garbage=is_garbage_ingredient(request.text))


@router.post("/ingredients/consolidate", response_model=ConsolidateResponse)
def consolidate(request: ConsolidateRequest) -> ConsolidateResponse:
    """Merge a batch of ingredient lines into shopping-list quantities."""
    preference = request.unit_preference or get_settings().unit_preference
    logger.info(f"Consolidating {len(request.lines)} ingredient lines")

    items = []
    for item in consolidate_ingredients(request.lines):
        quantity_in_grams = item.quantity_in_grams
        items.append(
            ConsolidatedItemResponse(
                normalized_name=item.normalized_name,
                display_name=item.display_name,
                quantity=item.quantity,
                unit=item.unit,
                category=item.category,
                quantity_in_grams=quantity_in_grams,
                display_quantity=format_display_quantity(
                    item.quantity, item.unit, quantity_in_grams, preference
                ),
                needs_review=item.needs_review,
                validation_note=item.validation_note,
            )
        )

    return ConsolidateResponse(items=items, total=len(items))


@router.post("/shopping-lists", response_model=ShoppingListResponse)
def create_shopping_list(request: ShoppingListRequest) -> ShoppingListResponse:
    """Build a consolidated shopping list for a meal plan."""
    generator = ShoppingListGenerator(unit_preference=request.unit_preference)
    meals = [
        PlannedMeal(
            meal_id=meal.meal_id,
            name=meal.name,
            ingredients=meal.ingredients,
            servings=meal.servings,
        )
        for meal in request.meals
    ]
    shopping_list = generator.generate(request.plan_id, meals)

    return ShoppingListResponse(
        plan_id=shopping_list.plan_id,
        items=[
            ShoppingItemResponse(
                normalized_name=item.normalized_name,
                display_name=item.display_name,
                quantity=item.quantity,
                unit=item.unit,
                category=item.category,
                quantity_in_grams=item.quantity_in_grams,
                display_quantity=item.display_quantity,
                needs_review=item.needs_review,
                validation_note=item.validation_note,
                meal_sources=item.meal_sources,
                price=item.price,
            )
            for item in shopping_list.items
        ],
        total_cost=shopping_list.total_cost,
        review_items_count=shopping_list.review_items_count,
        items_by_category={
            category: [item.display_name for item in items]
            for category, items in shopping_list.items_by_category.items()
        },
    )
