"""Keyword-based shopping categories for ingredients."""

from types import MappingProxyType

# Checked in order; the first category with a matching keyword wins.
INGREDIENT_CATEGORIES: MappingProxyType[str, tuple[str, ...]] = MappingProxyType(
    {
        "meat": (
            "chicken", "beef", "pork", "lamb", "bacon", "steak", "ham", "turkey", "duck",
            "sausage", "mince", "veal", "venison", "chorizo", "salami", "prosciutto",
            "pancetta",
        ),
        "fish": (
            "salmon", "tuna", "cod", "haddock", "mackerel", "trout", "bass", "halibut",
            "sardine", "anchovy", "fish", "prawn", "shrimp", "crab", "lobster", "mussel",
            "squid", "calamari", "scallop", "clam", "oyster",
        ),
        "dairy": (
            "milk", "cheese", "cream", "butter", "yogurt", "yoghurt", "cheddar",
            "mozzarella", "parmesan", "ricotta", "mascarpone", "brie", "camembert", "feta",
            "gouda", "gruyere", "ghee", "curd", "whey",
        ),
        "eggs": ("egg",),
        "produce": (
            "onion", "garlic", "tomato", "potato", "carrot", "pepper", "lettuce", "spinach",
            "broccoli", "cauliflower", "cabbage", "celery", "cucumber", "courgette",
            "zucchini", "aubergine", "eggplant", "mushroom", "leek", "beetroot", "turnip",
            "parsnip", "radish", "sweetcorn", "corn", "pea", "bean", "asparagus",
            "artichoke", "kale", "chard", "rocket", "watercress",
        ),
        "fruit": (
            "apple", "banana", "orange", "lemon", "lime", "grape", "strawberry",
            "blueberry", "raspberry", "blackberry", "mango", "pineapple", "melon",
            "watermelon", "peach", "pear", "plum", "cherry", "fig", "date", "avocado",
            "coconut", "kiwi", "pomegranate", "passion fruit", "cranberry",
        ),
        "grains": (
            "rice", "pasta", "noodle", "bread", "flour", "oat", "quinoa", "couscous",
            "barley", "bulgur", "polenta", "cornmeal", "semolina", "tortilla", "wrap",
            "pitta", "pita", "naan", "focaccia", "ciabatta", "sourdough", "bagel",
            "croissant", "cracker", "breadcrumb",
        ),
        "herbs": (
            "basil", "oregano", "thyme", "rosemary", "parsley", "coriander", "cilantro",
            "mint", "dill", "sage", "chive", "tarragon", "bay leaf", "bay leaves",
            "marjoram", "cumin", "paprika", "turmeric", "cinnamon", "nutmeg", "clove",
            "cardamom", "ginger", "saffron", "chilli", "cayenne",
        ),
        "oils": (
            "olive oil", "vegetable oil", "sunflower oil", "coconut oil", "sesame oil",
            "rapeseed oil", "oil", "vinegar", "balsamic",
        ),
        "condiments": (
            "soy sauce", "worcestershire", "tabasco", "ketchup", "mustard", "mayonnaise",
            "honey", "maple syrup", "sugar", "salt", "pepper", "stock", "broth", "bouillon",
            "paste", "sauce",
        ),
        "nuts": (
            "almond", "walnut", "cashew", "pecan", "pistachio", "peanut", "hazelnut",
            "macadamia", "pine nut", "brazil nut", "chestnut", "sesame seed",
            "sunflower seed", "pumpkin seed", "flaxseed", "chia seed",
        ),
        "legumes": (
            "lentil", "chickpea", "kidney bean", "black bean", "cannellini", "butter bean",
            "haricot", "edamame", "tofu", "tempeh",
        ),
        "bakery": (
            "cake", "pastry", "pie", "tart", "biscuit", "cookie", "muffin", "scone",
            "doughnut", "brownie", "flapjack",
        ),
        "tinned": ("tinned", "canned", "tin of", "can of"),
    }
)

DEFAULT_CATEGORY = "other"


def detect_ingredient_category(name: str) -> str:
    """Tag an ingredient with a shopping category. Advisory only."""
    lower = name.lower()
    for category, keywords in INGREDIENT_CATEGORIES.items():
        if any(keyword in lower for keyword in keywords):
            return category
    return DEFAULT_CATEGORY
