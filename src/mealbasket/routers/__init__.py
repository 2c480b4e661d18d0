"""API routers for the mealbasket application."""

from mealbasket.routers.ingredients import router as ingredients_router

__all__ = [
    "ingredients_router",
]
