"""Quantity and unit extraction from free-text ingredient lines."""

import math
import re
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

from mealbasket.logging_config import get_logger
from mealbasket.normalize.categories import detect_ingredient_category
from mealbasket.normalize.cleaning import clean_ingredient_text
from mealbasket.normalize.names import normalize_name
from mealbasket.normalize.units import COUNT, convert_to_grams, lookup_unit

logger = get_logger(__name__)


# =============================================================================
# Lookup Tables
# =============================================================================

FRACTION_GLYPHS: MappingProxyType[str, float] = MappingProxyType(
    {
        "½": 0.5,
        "⅓": 0.333,
        "⅔": 0.667,
        "¼": 0.25,
        "¾": 0.75,
        "⅕": 0.2,
        "⅖": 0.4,
        "⅗": 0.6,
        "⅘": 0.8,
        "⅙": 0.167,
        "⅚": 0.833,
        "⅛": 0.125,
        "⅜": 0.375,
        "⅝": 0.625,
        "⅞": 0.875,
    }
)

# Countable words and the singular used when the word is all that is left.
COUNTABLE_WORDS: MappingProxyType[str, str] = MappingProxyType(
    {
        "egg": "egg",
        "eggs": "egg",
        "clove": "clove",
        "cloves": "clove",
        "piece": "piece",
        "pieces": "piece",
        "slice": "slice",
        "slices": "slice",
        "stalk": "stalk",
        "stalks": "stalk",
        "fillet": "fillet",
        "fillets": "fillet",
        "breast": "breast",
        "breasts": "breast",
        "thigh": "thigh",
        "thighs": "thigh",
        "strip": "strip",
        "strips": "strip",
        "head": "head",
        "heads": "head",
        "bunch": "bunch",
        "bunches": "bunch",
        "sprig": "sprig",
        "sprigs": "sprig",
        "can": "can",
        "cans": "can",
        "tin": "tin",
        "tins": "tin",
        "pinch": "pinch",
        "dash": "dash",
    }
)

_MASS_VOLUME = (
    r"(?:grams?|kilograms?|kg|mg|ml|milliliters?|millilitres?|liters?|litres?"
    r"|oz|ounces?|lbs?|pounds?|g|l)"
)

TRAILING_UNIT = re.compile(rf"^(.+?)\s+(\d+\.?\d*)\s*({_MASS_VOLUME})\b\s*(.*)$", re.IGNORECASE)
LEADING_DECIMAL = re.compile(r"(\d+\.?\d*)\s*")
LEADING_SLASH_FRACTION = re.compile(r"(\d+/\d+)\s*")
LEADING_DENOMINATOR = re.compile(r"/(\d+)\s*")
ATTACHED_UNIT = re.compile(rf"({_MASS_VOLUME})\b\.?\s*", re.IGNORECASE)
UNIT_WORD = re.compile(r"(fl\.?\s*oz|[a-zA-Z]+)\.?\s*", re.IGNORECASE)
LEADING_OF = re.compile(r"^of\s+", re.IGNORECASE)
OR_ALTERNATIVE = re.compile(r"^(.+?)\s+or\s+\d+\s+\w+", re.IGNORECASE)

MAX_IMPLIED_DENOMINATOR = 16


# =============================================================================
# Data Types
# =============================================================================


class ExtractionStrategy(str, Enum):
    """Named steps of the extraction chain, in evaluation order."""

    ESCAPE_TRAILING_UNIT = "escape_trailing_unit"
    LEADING_DECIMAL_PLUS_FRACTION = "leading_decimal_plus_fraction"
    LEADING_FRACTION = "leading_fraction"
    MEASURED_UNIT = "measured_unit"
    COUNTABLE_WORD = "countable_word"
    FALLBACK = "fallback"


@dataclass(frozen=True)
class QuantityMatch:
    """A quantity read from the front of the text."""

    quantity: float
    remaining: str


@dataclass(frozen=True)
class UnitMatch:
    """A unit read from the text, with the quantity converted to its base unit."""

    quantity: float
    unit: str
    remaining: str


@dataclass(frozen=True)
class ParsedIngredient:
    """One ingredient line broken into name, quantity and unit."""

    original_text: str
    name: str
    normalized_name: str
    quantity: float
    unit: str  # "g", "ml", "unit" or an unconverted raw token
    strategies: tuple[ExtractionStrategy, ...] = ()


@dataclass(frozen=True)
class NormalizedIngredient:
    """A parsed ingredient with its category and gram-equivalent quantity."""

    original_text: str
    name: str
    normalized_name: str
    quantity: float
    unit: str
    quantity_in_grams: float | None
    category: str
    strategies: tuple[ExtractionStrategy, ...] = ()


# =============================================================================
# Extraction Strategies
# =============================================================================


def parse_fraction(text: str) -> float | None:
    """Parse a fraction glyph ("½") or an ASCII fraction ("3/4")."""
    if text in FRACTION_GLYPHS:
        return FRACTION_GLYPHS[text]

    match = re.fullmatch(r"(\d+)/(\d+)", text)
    if match:
        numerator = int(match.group(1))
        denominator = int(match.group(2))
        if denominator != 0:
            return numerator / denominator
    return None


def _take_glyph(text: str) -> tuple[float, str] | None:
    for glyph, value in FRACTION_GLYPHS.items():
        if text.startswith(glyph):
            return value, text[len(glyph):].strip()
    return None


def escape_trailing_unit(text: str) -> UnitMatch | None:
    """
    Pull a trailing "<number><unit>" off an item name.

    Handles lines written name-first, like "Chicken breast 200g". Lines that
    start with a digit are left to the leading-quantity strategies.
    """
    if not text or text[0].isdigit():
        return None

    match = TRAILING_UNIT.match(text)
    if not match:
        return None

    conversion = lookup_unit(match.group(3))
    if conversion is None:
        return None

    remaining = match.group(1).strip()
    if match.group(4):
        remaining = f"{remaining} {match.group(4).strip()}"

    return UnitMatch(
        quantity=float(match.group(2)) * conversion.factor,
        unit=conversion.base_unit,
        remaining=remaining,
    )


def leading_decimal_plus_fraction(text: str) -> QuantityMatch | None:
    """Read "2", "1.5", "1 ½" or "2 1/2" from the front of the text."""
    match = LEADING_DECIMAL.match(text)
    if not match:
        return None

    quantity = float(match.group(1))
    remaining = text[match.end():]

    glyph = _take_glyph(remaining)
    if glyph is not None:
        quantity += glyph[0]
        remaining = glyph[1]

    fraction_match = LEADING_SLASH_FRACTION.match(remaining)
    if fraction_match:
        fraction = parse_fraction(fraction_match.group(1))
        if fraction is not None:
            quantity += fraction
            remaining = remaining[fraction_match.end():]
    else:
        # "3/4" arrives here as the decimal 3 followed by "/4".
        denominator_match = LEADING_DENOMINATOR.match(remaining)
        if denominator_match:
            denominator = int(denominator_match.group(1))
            if 0 < denominator <= MAX_IMPLIED_DENOMINATOR:
                whole = math.floor(quantity)
                quantity = (whole if whole > 0 else 1) / denominator
                remaining = remaining[denominator_match.end():]

    return QuantityMatch(quantity, remaining)


def leading_fraction(text: str) -> QuantityMatch | None:
    """Read a fraction with no whole number in front of it ("½ tsp")."""
    glyph = _take_glyph(text)
    if glyph is not None:
        return QuantityMatch(glyph[0], glyph[1])

    match = LEADING_SLASH_FRACTION.match(text)
    if match:
        fraction = parse_fraction(match.group(1))
        if fraction is not None:
            return QuantityMatch(fraction, text[match.end():])
    return None


def measured_unit(text: str, quantity: float) -> UnitMatch | None:
    """Match a mass or volume unit and convert the quantity to its base unit."""
    match = ATTACHED_UNIT.match(text) or UNIT_WORD.match(text)
    if not match:
        return None

    token = re.sub(r"[\s.]+", " ", match.group(1).lower()).strip()
    conversion = lookup_unit(token)
    if conversion is None:
        return None

    return UnitMatch(
        quantity=quantity * conversion.factor,
        unit=conversion.base_unit,
        remaining=text[match.end():],
    )


def countable_word(text: str, quantity: float) -> UnitMatch | None:
    """
    Consume a countable word ("cloves", "eggs").

    The word is dropped when a name follows it ("2 cloves garlic" -> "garlic");
    on its own it becomes the name ("3 eggs" -> "egg").
    """
    match = UNIT_WORD.match(text)
    if not match:
        return None

    singular = COUNTABLE_WORDS.get(match.group(1).lower())
    if singular is None:
        return None

    after = text[match.end():].strip()
    return UnitMatch(quantity=quantity, unit=COUNT, remaining=after or singular)


QuantityStrategy = Callable[[str], QuantityMatch | None]
UnitStrategy = Callable[[str, float], UnitMatch | None]

QUANTITY_STRATEGIES: tuple[tuple[ExtractionStrategy, QuantityStrategy], ...] = (
    (ExtractionStrategy.LEADING_DECIMAL_PLUS_FRACTION, leading_decimal_plus_fraction),
    (ExtractionStrategy.LEADING_FRACTION, leading_fraction),
)

UNIT_STRATEGIES: tuple[tuple[ExtractionStrategy, UnitStrategy], ...] = (
    (ExtractionStrategy.MEASURED_UNIT, measured_unit),
    (ExtractionStrategy.COUNTABLE_WORD, countable_word),
)


# =============================================================================
# Parsing
# =============================================================================


def parse_ingredient(text: str) -> ParsedIngredient:
    """
    Parse an ingredient line into a ParsedIngredient.

    The strategies run in a fixed order and the first success wins within
    each step:

    1. Escape pattern for name-first lines ("Chicken breast 200g"). Its
       result is held back and only used if no unit is found later.
    2. Boilerplate cleaning.
    3. Leading decimal plus optional fraction, else a bare leading fraction,
       else a quantity of 1.
    4. Measured unit (converted to g or ml), else a countable word.

    Never raises for malformed input; the worst case is the whole line as the
    name with quantity 1 and unit "unit".

    Examples:
        "2 1/2 cups flour" -> 600.0 ml "flour"
        "½ tsp salt" -> 2.5 ml "salt"
        "Chicken breast 200g" -> 200.0 g "Chicken breast"
    """
    original = text.strip()
    strategies: list[ExtractionStrategy] = []

    escaped = escape_trailing_unit(original)
    remaining = original
    if escaped is not None:
        strategies.append(ExtractionStrategy.ESCAPE_TRAILING_UNIT)
        remaining = escaped.remaining

    remaining = clean_ingredient_text(remaining)

    quantity = 0.0
    for strategy, extract_quantity in QUANTITY_STRATEGIES:
        quantity_match = extract_quantity(remaining)
        if quantity_match is not None:
            strategies.append(strategy)
            quantity = quantity_match.quantity
            remaining = quantity_match.remaining
            break
    else:
        strategies.append(ExtractionStrategy.FALLBACK)

    # A zero or overflowing quantity means the parse failed, not that none is needed.
    if not math.isfinite(quantity) or quantity <= 0:
        quantity = 1.0

    unit = COUNT
    for strategy, extract_unit in UNIT_STRATEGIES:
        unit_match = extract_unit(remaining, quantity)
        if unit_match is not None:
            strategies.append(strategy)
            quantity = unit_match.quantity
            unit = unit_match.unit
            remaining = unit_match.remaining
            break

    remaining = LEADING_OF.sub("", remaining)

    if unit == COUNT:
        alternative = OR_ALTERNATIVE.match(remaining)
        if alternative and len(alternative.group(1).strip()) > 1:
            remaining = alternative.group(1).strip()

        if escaped is not None:
            logger.debug(f"Using trailing quantity for '{original}'")
            quantity = escaped.quantity
            unit = escaped.unit

    if not math.isfinite(quantity) or quantity <= 0:
        quantity = 1.0

    name = remaining.strip() or original
    return ParsedIngredient(
        original_text=original,
        name=name,
        normalized_name=normalize_name(name),
        quantity=quantity,
        unit=unit,
        strategies=tuple(strategies),
    )


def normalize_ingredient(text: str) -> NormalizedIngredient:
    """Parse a line and attach its category and gram-equivalent quantity."""
    parsed = parse_ingredient(text)
    return NormalizedIngredient(
        original_text=parsed.original_text,
        name=parsed.name,
        normalized_name=parsed.normalized_name,
        quantity=parsed.quantity,
        unit=parsed.unit,
        quantity_in_grams=convert_to_grams(parsed.quantity, parsed.unit),
        category=detect_ingredient_category(parsed.normalized_name),
        strategies=parsed.strategies,
    )
