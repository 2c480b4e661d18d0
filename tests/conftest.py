"""Pytest configuration and shared fixtures."""

import pytest
from fastapi.testclient import TestClient

from mealbasket.config import Settings, get_settings
from mealbasket.plan.shopping_list import PlannedMeal

# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "api: marks tests that exercise the HTTP surface")


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Make every test read settings fresh from the environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    """Default settings without reading a .env file."""
    return Settings(_env_file=None)


# =============================================================================
# Ingredient Line Fixtures
# =============================================================================


@pytest.fixture
def scraped_recipe_lines():
    """Ingredient block as scraped from a recipe page, layout noise included."""
    return [
        "2 1/2 cups flour",
        "½ tsp salt",
        "Chicken breast 200g",
        "3 large free-range eggs",
        "Sugars12g",
        "Protein 12g",
        "Step 2",
        "Chopping board",
        "A12",
        "1/2",
        "2 tomatoes",
        "Salt to taste",
    ]


@pytest.fixture
def weekly_meals():
    """Three planned meals sharing some ingredients."""
    return [
        PlannedMeal(
            meal_id="meal-1",
            name="Chicken Traybake",
            ingredients=["200g chicken breast", "1 onion", "2 tbsp olive oil"],
        ),
        PlannedMeal(
            meal_id="meal-2",
            name="Tomato Soup",
            ingredients=["4 tomatoes", "1 onion", "500ml vegetable stock"],
        ),
        PlannedMeal(
            meal_id="meal-3",
            name="Omelette",
            ingredients=["3 eggs", "50g cheddar", "1 onion"],
        ),
    ]


# =============================================================================
# API Fixtures
# =============================================================================


@pytest.fixture
def client() -> TestClient:
    """Test client for the FastAPI app."""
    from mealbasket.main import app

    return TestClient(app)
