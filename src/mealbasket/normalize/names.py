"""Canonical ingredient names used as deduplication keys."""

import re
from types import MappingProxyType

from mealbasket.logging_config import get_logger

logger = get_logger(__name__)

# Cooking states that trail an ingredient ("potatoes, mashed").
TRAILING_ADJECTIVES: frozenset[str] = frozenset(
    {
        "mashed", "separated", "beaten", "whisked", "scrambled", "poached",
        "boiled", "fried", "baked", "grilled", "steamed", "sauteed", "sautéed",
        "blanched", "braised", "caramelised", "caramelized", "charred",
        "crumbled", "cubed", "deglazed", "dissolved", "flaked", "julienned",
        "marinated", "pureed", "puréed", "reduced", "simmered", "soaked",
        "strained", "thawed", "whipped", "wilted", "zested",
    }
)

# Removed from any position in the name.
DESCRIPTOR_WORDS: frozenset[str] = frozenset(
    {
        "large", "medium", "small", "big", "fresh", "frozen", "dried", "chopped",
        "diced", "minced", "sliced", "grated", "shredded", "peeled", "crushed",
        "ground", "whole", "halved", "quartered", "thin", "thick", "fine", "coarse",
        "ripe", "raw", "cooked", "boneless", "skinless", "organic", "free-range",
        "closed", "cup", "extra", "virgin", "unsalted", "salted", "plain", "natural",
        "tinned", "canned", "packed", "loosely", "firmly", "roughly", "finely", "of",
        "to", "taste", "optional", "garnish", "serving", "about", "approximately",
        "handful", "generous", "heaped", "level", "rounded", "total", "each",
        "warm", "cold", "room", "temperature", "softened", "melted",
        "sifted", "toasted", "roasted", "smoked", "trimmed", "deseeded",
        "seeded", "pitted", "cored", "washed", "drained", "rinsed",
        "lengthway", "lengthways", "lengthwise", "crosswise", "crossways",
        "widthwise", "widthways", "diagonally",
    }
    | TRAILING_ADJECTIVES
)

# Compound nouns that are bought and listed in the plural.
KEEP_PLURAL_COMPOUNDS: frozenset[str] = frozenset(
    {
        "bay leaves", "curry leaves", "kaffir lime leaves", "vine leaves",
        "grape leaves", "filo leaves", "lime leaves", "pandan leaves",
        "banana leaves", "spring onions", "salad leaves", "mixed leaves",
        "baked beans", "kidney beans", "black beans", "butter beans",
        "cannellini beans", "borlotti beans", "haricot beans", "green beans",
        "runner beans", "broad beans", "french beans", "mixed beans",
        "refried beans", "porridge oats", "rolled oats", "jumbo oats",
        "pine nuts", "brazil nuts", "mixed nuts", "flaked almonds",
        "ground almonds", "sesame seeds", "sunflower seeds", "pumpkin seeds",
        "chia seeds", "poppy seeds", "mixed seeds", "capers", "cornflakes",
    }
)

IRREGULAR_PLURALS: MappingProxyType[str, str] = MappingProxyType(
    {
        "eggs": "egg",
        "tomatoes": "tomato",
        "potatoes": "potato",
        "onions": "onion",
        "carrots": "carrot",
        "peppers": "pepper",
        "cloves": "clove",
        "breasts": "breast",
        "thighs": "thigh",
        "slices": "slice",
        "pieces": "piece",
        "leaves": "leaf",
        "berries": "berry",
        "cherries": "cherry",
        "mushrooms": "mushroom",
        "bananas": "banana",
        "apples": "apple",
        "oranges": "orange",
        "lemons": "lemon",
        "limes": "lime",
        "avocados": "avocado",
        "cucumbers": "cucumber",
        "zucchinis": "zucchini",
        "stalks": "stalk",
        "strips": "strip",
        "fillets": "fillet",
        "chillies": "chilli",
        "anchovies": "anchovy",
        "olives": "olive",
        "clementines": "clementine",
        "peaches": "peach",
        "nectarines": "nectarine",
        "plums": "plum",
        "grapes": "grape",
        "strawberries": "strawberry",
        "blueberries": "blueberry",
        "raspberries": "raspberry",
        "cranberries": "cranberry",
        "almonds": "almond",
        "walnuts": "walnut",
        "cashews": "cashew",
        "peanuts": "peanut",
    }
)

SIBILANT_ENDINGS = ("sh", "ch", "ss", "x")

PUNCTUATION = re.compile(r"[,()]")
FRACTION_REMNANT = re.compile(r"\d*/\d+")
NUMERIC_TOKEN = re.compile(r"^[\d.½⅓⅔¼¾⅕⅖⅗⅘⅙⅚⅛⅜⅝⅞]+$")


def remove_trailing_adjectives(name: str) -> str:
    """Drop cooking-state and descriptor words from the end of a name."""
    words = name.split(" ")
    while len(words) > 1:
        last = words[-1].lower()
        if last in TRAILING_ADJECTIVES or last in DESCRIPTOR_WORDS:
            words.pop()
        else:
            break
    return " ".join(words)


def _singularize(word: str) -> str:
    if word in IRREGULAR_PLURALS:
        return IRREGULAR_PLURALS[word]
    if word.endswith("ies") and len(word) > 4:
        return word[:-3] + "y"
    if word.endswith("ves") and len(word) > 4:
        return word[:-3] + "f"
    if word.endswith("es") and len(word) > 3:
        without_es = word[:-2]
        if without_es.endswith(SIBILANT_ENDINGS):
            return without_es
        return word[:-1]
    if word.endswith("s") and not word.endswith("ss") and len(word) > 3:
        return word[:-1]
    return word


def singularize_last_word(name: str) -> str:
    """
    Singularize only the final word of a name.

    Compounds on the keep-plural list ("bay leaves", "baked beans") are
    returned untouched. Otherwise the irregular plural map is consulted
    before the suffix rules.
    """
    if not name or name in KEEP_PLURAL_COMPOUNDS:
        return name
    head, _, last = name.rpartition(" ")
    singular = _singularize(last)
    return f"{head} {singular}" if head else singular


def _normalize_once(name: str) -> str:
    cleaned = name.lower().strip()
    cleaned = PUNCTUATION.sub(" ", cleaned)
    cleaned = FRACTION_REMNANT.sub(" ", cleaned)

    tokens = [token for token in cleaned.split() if not NUMERIC_TOKEN.match(token)]
    cleaned = " ".join(tokens)

    # Keep the text if every word is a descriptor, so "fresh" stays "fresh".
    kept = [token for token in tokens if token not in DESCRIPTOR_WORDS]
    cleaned = " ".join(kept) or cleaned

    cleaned = remove_trailing_adjectives(cleaned)
    return singularize_last_word(cleaned).strip()


def normalize_name(name: str) -> str:
    """
    Reduce an ingredient name to its canonical deduplication key.

    Lowercases, strips punctuation, numbers and fraction remnants, removes
    descriptor words anywhere in the name, trims trailing cooking states and
    singularizes the last word. The pipeline is repeated until the output
    stops changing, so normalizing a normalized name is a no-op.

    Examples:
        "3 large free-range eggs" -> "egg"
        "Chicken breasts (boneless, skinless)" -> "chicken breast"
        "fresh bay leaves" -> "bay leaves"
    """
    if not name:
        return ""

    current = name
    # Every pass after the first shortens the text, so this always settles.
    for _ in range(len(name) + 2):
        normalized = _normalize_once(current)
        if normalized == current:
            return normalized
        current = normalized

    logger.warning(f"Name normalization did not settle for '{name}', using '{current}'")
    return current
