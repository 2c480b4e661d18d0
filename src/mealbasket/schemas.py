"""Request and response schemas for the HTTP API."""

from typing import Literal

from pydantic import BaseModel, Field


class IngredientTextRequest(BaseModel):
    """A single raw ingredient line."""

    text: str = Field(max_length=500)


class ParsedIngredientResponse(BaseModel):
    """Parsed ingredient with category and gram-equivalent quantity."""

    original_text: str
    name: str
    normalized_name: str
    quantity: float
    unit: str
    quantity_in_grams: float | None = None
    category: str
    strategies: list[str] = Field(default_factory=list)


class NormalizedNameResponse(BaseModel):
    """Canonical name for an ingredient."""

    normalized_name: str
    category: str


class GarbageCheckResponse(BaseModel):
    """Whether a line would be dropped as a non-ingredient."""

    text: str
    is_garbage: bool


class ConsolidateRequest(BaseModel):
    """Ingredient lines to merge into shopping-list quantities."""

    lines: list[str] = Field(max_length=2000)
    unit_preference: Literal["metric", "imperial"] | None = None


class ConsolidatedItemResponse(BaseModel):
    """A consolidated shopping-list line."""

    normalized_name: str
    display_name: str
    quantity: float
    unit: str
    category: str
    quantity_in_grams: float | None = None
    display_quantity: str
    needs_review: bool = False
    validation_note: str | None = None


class ConsolidateResponse(BaseModel):
    """Result of consolidating a batch of lines."""

    items: list[ConsolidatedItemResponse]
    total: int


class PlannedMealRequest(BaseModel):
    """A meal in the plan with its recipe lines."""

    meal_id: str
    name: str
    ingredients: list[str]
    servings: int = Field(default=1, ge=0, le=50)


class ShoppingListRequest(BaseModel):
    """Request to build a shopping list for a meal plan."""

    plan_id: str
    meals: list[PlannedMealRequest]
    unit_preference: Literal["metric", "imperial"] | None = None


class ShoppingItemResponse(ConsolidatedItemResponse):
    """A shopping-list item with the meals it came from."""

    meal_sources: list[str] = Field(default_factory=list)
    price: float | None = None


class ShoppingListResponse(BaseModel):
    """Shopping list for a meal plan."""

    plan_id: str
    items: list[ShoppingItemResponse]
    total_cost: float
    review_items_count: int
    items_by_category: dict[str, list[str]] = Field(default_factory=dict)
