"""Detection of scraped lines that are not ingredients at all."""

import re

NUTRITION_LABEL = re.compile(
    r"^(?:sugars?|fibre|fiber|protein|fat|carbs?|carbohydrates?|calories|energy|"
    r"cholesterol|sodium|salt|saturates?|total fat|saturated fat|trans fat|"
    r"dietary fib(?:re|er)|added sugars?|vitamin\s*[a-z]|calcium|iron|potassium)\s*\d",
    re.IGNORECASE,
)
NUTRITION_VALUE = re.compile(
    r"\d+(?:\.\d+)?\s*(?:g|mg|mcg|µg|kcal|kj|iu)\s*(?:low|medium|high|free|trace)?$",
    re.IGNORECASE,
)
STEP_MARKER = re.compile(r"^step\s*\d", re.IGNORECASE)
BARE_NUMBER = re.compile(r"^(?:\d+|/\d+|\d+/\d+)$")

KITCHEN_TOOLS: tuple[re.Pattern[str], ...] = tuple(
    re.compile(pattern, re.IGNORECASE)
    for pattern in (
        r"^measuring\s",
        r"^chopping\s*board",
        r"^sharp\s*knife",
        r"^wooden\s*spoon",
        r"^saucepan",
        r"^vegetable\s*peeler",
    )
)

_ALNUM = re.compile(r"^[A-Za-z0-9]+$")
_ALPHA = re.compile(r"^[A-Za-z]+$")
_ALNUM_DOTTED = re.compile(r"^[A-Za-z0-9.]+$")
_ALPHA_DOTTED = re.compile(r"^[A-Za-z.]+$")
_DIGIT_LETTER_DIGIT = re.compile(r"^\d+[A-Za-z]\d+")
_LETTER_DIGIT_LETTER = re.compile(r"^[A-Za-z]\d+[A-Za-z]")


def is_alphanumeric_garbage(text: str) -> bool:
    """
    Check for single tokens that mix letters and digits.

    These are layout artifacts from scraped pages ("A12", "400G1", "2.5x")
    rather than anything a person would write as an ingredient.
    """
    t = text.strip()
    if len(t) > 1 and _ALNUM.match(t) and not _ALPHA.match(t):
        return True
    if len(t) > 1 and _ALNUM_DOTTED.match(t) and not _ALPHA_DOTTED.match(t) and re.search(r"\d", t):
        return True
    return bool(_DIGIT_LETTER_DIGIT.match(t) or _LETTER_DIGIT_LETTER.match(t))


def is_garbage_ingredient(text: str) -> bool:
    """
    Decide whether a line should be dropped instead of parsed.

    Rejects very short text, nutrition-label fragments ("Protein 12g",
    "Sugars12g"), bare numbers and fractions, "step N" directives, kitchen
    tools and alphanumeric layout artifacts.
    """
    t = text.strip().lower()
    if len(t) < 2:
        return True
    if NUTRITION_LABEL.match(t):
        return True
    if NUTRITION_VALUE.search(t) and not re.search(r"\s", t):
        return True
    if STEP_MARKER.match(t):
        return True
    if is_alphanumeric_garbage(text):
        return True
    if BARE_NUMBER.match(t):
        return True
    return any(pattern.match(t) for pattern in KITCHEN_TOOLS)
