"""
Curated conversion data for shopping-list consolidation.

These tables are product decisions, not logic: edit them here and the
consolidator picks the change up. Keys are normalized ingredient names.
"""

from types import MappingProxyType

# Grams per millilitre, used to fold volume measures into a weight total.
ML_TO_G_DENSITY: MappingProxyType[str, float] = MappingProxyType(
    {
        "olive oil": 0.92,
        "vegetable oil": 0.92,
        "sunflower oil": 0.92,
        "coconut oil": 0.92,
        "sesame oil": 0.92,
        "rapeseed oil": 0.92,
        "oil": 0.92,
        "butter": 0.91,
        "ghee": 0.91,
        "honey": 1.42,
        "maple syrup": 1.32,
        "golden syrup": 1.4,
        "cream": 1.01,
        "milk": 1.03,
        "yogurt": 1.03,
        "yoghurt": 1.03,
        "soy sauce": 1.1,
        "vinegar": 1.01,
        "balsamic": 1.05,
        "water": 1.0,
        "stock": 1.0,
        "broth": 1.0,
        "wine": 1.0,
        "lemon juice": 1.03,
        "lime juice": 1.03,
        "orange juice": 1.04,
        "tomato paste": 1.1,
        "passata": 1.04,
        "coconut milk": 0.97,
        "peanut butter": 1.09,
        "tahini": 1.07,
    }
)

# Average weight in grams of one countable item.
AVERAGE_ITEM_WEIGHT_G: MappingProxyType[str, float] = MappingProxyType(
    {
        "egg": 60,
        "onion": 150,
        "red onion": 150,
        "white onion": 150,
        "spring onion": 15,
        "carrot": 80,
        "potato": 180,
        "sweet potato": 200,
        "tomato": 125,
        "cherry tomato": 15,
        "plum tomato": 60,
        "garlic": 5,
        "garlic clove": 5,
        "lemon": 60,
        "lime": 45,
        "orange": 180,
        "apple": 180,
        "banana": 120,
        "avocado": 170,
        "pepper": 160,
        "red pepper": 160,
        "green pepper": 160,
        "yellow pepper": 160,
        "bell pepper": 160,
        "chilli": 10,
        "red chilli": 10,
        "green chilli": 10,
        "courgette": 200,
        "zucchini": 200,
        "aubergine": 300,
        "cucumber": 300,
        "celery": 40,
        "mushroom": 15,
        "black olive": 4,
        "olive": 4,
        "chicken breast": 200,
        "chicken thigh": 150,
        "sausage": 70,
        "beetroot": 100,
        "leek": 200,
        "parsnip": 120,
        "shallot": 30,
        "pear": 170,
        "peach": 150,
        "plum": 70,
        "apricot": 35,
        "fig": 40,
        "mango": 200,
        "kiwi": 75,
        "nectarine": 140,
        "clementine": 75,
        "bay leaf": 0.5,
        "bay leaves": 0.5,
        "tortilla": 50,
        "pitta": 60,
        "bread roll": 60,
        "bread": 35,
        "english mustard powder": 3,
        "coriander": 2,
        "mint": 0.5,
        "ginger": 15,
        "salt": 6,
        "vanilla extract": 5,
        "porridge oat": 40,
    }
)

# Bought by the piece even though a weight is known.
KEEP_AS_COUNT: frozenset[str] = frozenset(
    {
        "egg",
        "onion", "red onion", "white onion", "spring onion",
        "carrot", "potato", "sweet potato",
        "tomato", "cherry tomato", "plum tomato",
        "lemon", "lime", "orange", "apple", "banana",
        "avocado", "pear", "peach", "plum", "apricot", "fig", "mango", "kiwi",
        "nectarine", "clementine",
        "pepper", "red pepper", "green pepper", "yellow pepper", "bell pepper",
        "chilli", "red chilli", "green chilli",
        "courgette", "zucchini", "aubergine", "cucumber",
        "leek", "parsnip", "beetroot", "shallot",
        "chicken breast", "chicken thigh", "sausage",
        "tortilla", "pitta", "bread roll",
        "bay leaf", "bay leaves",
    }
)
