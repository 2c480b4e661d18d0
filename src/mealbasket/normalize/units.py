"""Unit normalization, conversion and display utilities."""

import math
from types import MappingProxyType
from typing import Literal, NamedTuple

from mealbasket.logging_config import get_logger

logger = get_logger(__name__)

UnitPreference = Literal["metric", "imperial"]

GRAMS = "g"
MILLILITRES = "ml"
COUNT = "unit"

GRAMS_PER_POUND = 453.592
GRAMS_PER_OUNCE = 28.3495
ML_PER_CUP = 240.0
ML_PER_TBSP = 15.0
ML_PER_TSP = 5.0


class UnitConversion(NamedTuple):
    """Canonical base unit and the factor that converts one unit into it."""

    base_unit: str
    factor: float


# =============================================================================
# Unit Conversion Tables
# =============================================================================

# Weight conversions (base unit: g)
_WEIGHT_UNITS: dict[str, float] = {
    # Metric
    "g": 1.0,
    "gram": 1.0,
    "grams": 1.0,
    "gramme": 1.0,
    "grammes": 1.0,
    "kg": 1000.0,
    "kgs": 1000.0,
    "kilo": 1000.0,
    "kilos": 1000.0,
    "kilogram": 1000.0,
    "kilograms": 1000.0,
    "mg": 0.001,
    "milligram": 0.001,
    "milligrams": 0.001,
    # Imperial
    "oz": GRAMS_PER_OUNCE,
    "ounce": GRAMS_PER_OUNCE,
    "ounces": GRAMS_PER_OUNCE,
    "lb": GRAMS_PER_POUND,
    "lbs": GRAMS_PER_POUND,
    "pound": GRAMS_PER_POUND,
    "pounds": GRAMS_PER_POUND,
}

# Volume conversions (base unit: ml)
_VOLUME_UNITS: dict[str, float] = {
    # Metric
    "ml": 1.0,
    "mls": 1.0,
    "milliliter": 1.0,
    "milliliters": 1.0,
    "millilitre": 1.0,
    "millilitres": 1.0,
    "l": 1000.0,
    "liter": 1000.0,
    "liters": 1000.0,
    "litre": 1000.0,
    "litres": 1000.0,
    "dl": 100.0,
    "deciliter": 100.0,
    "deciliters": 100.0,
    "decilitre": 100.0,
    "decilitres": 100.0,
    "cl": 10.0,
    "centiliter": 10.0,
    "centiliters": 10.0,
    "centilitre": 10.0,
    "centilitres": 10.0,
    # Kitchen measures
    "cup": ML_PER_CUP,
    "cups": ML_PER_CUP,
    "tbsp": ML_PER_TBSP,
    "tbsps": ML_PER_TBSP,
    "tbs": ML_PER_TBSP,
    "tbls": ML_PER_TBSP,
    "tblsp": ML_PER_TBSP,
    "tblsps": ML_PER_TBSP,
    "tablespoon": ML_PER_TBSP,
    "tablespoons": ML_PER_TBSP,
    "tsp": ML_PER_TSP,
    "tsps": ML_PER_TSP,
    "teaspoon": ML_PER_TSP,
    "teaspoons": ML_PER_TSP,
    # US customary
    "fl oz": 29.5735,
    "floz": 29.5735,
    "fluid ounce": 29.5735,
    "fluid ounces": 29.5735,
    "pint": 473.176,
    "pints": 473.176,
    "pt": 473.176,
    "quart": 946.353,
    "quarts": 946.353,
    "qt": 946.353,
    "gallon": 3785.41,
    "gallons": 3785.41,
    "gal": 3785.41,
}

UNIT_CONVERSIONS: MappingProxyType[str, UnitConversion] = MappingProxyType(
    {
        **{unit: UnitConversion(GRAMS, factor) for unit, factor in _WEIGHT_UNITS.items()},
        **{unit: UnitConversion(MILLILITRES, factor) for unit, factor in _VOLUME_UNITS.items()},
    }
)


class DisplayQuantity(NamedTuple):
    """A quantity rescaled for display, with its rendered string."""

    value: float
    unit: str
    display: str


# =============================================================================
# Conversion Functions
# =============================================================================


def lookup_unit(unit: str | None) -> UnitConversion | None:
    """Look up a unit token (case and surrounding whitespace insensitive)."""
    if not unit:
        return None
    return UNIT_CONVERSIONS.get(" ".join(unit.lower().split()))


def convert_to_base(quantity: float, unit: str | None) -> tuple[float, str] | None:
    """
    Convert a quantity into its canonical base unit.

    Returns:
        Tuple of (value, base_unit), or None when the unit is not a
        recognized mass or volume unit.
    """
    conversion = lookup_unit(unit)
    if conversion is None:
        return None
    return quantity * conversion.factor, conversion.base_unit


def convert_to_grams(quantity: float, unit: str | None) -> float | None:
    """
    Convert a quantity to grams (or gram-equivalent millilitres).

    Base units pass through unchanged. Recognized units are multiplied by
    their fixed factor. Anything else, including the countable ``unit``,
    returns None so the caller keeps the original value.
    """
    if not unit:
        return None

    unit_lower = unit.lower().strip()
    if unit_lower in (GRAMS, MILLILITRES):
        return quantity

    converted = convert_to_base(quantity, unit_lower)
    if converted is None:
        logger.debug(f"No gram conversion for unit '{unit}', keeping original value")
        return None
    return converted[0]


def _trim(value: float, places: int) -> str:
    """Format with fixed decimals and drop trailing zeros."""
    return f"{value:.{places}f}".rstrip("0").rstrip(".")


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _format_count(quantity: float) -> str:
    if not math.isfinite(quantity):
        return str(quantity)
    if quantity == int(quantity):
        return str(int(quantity))
    return f"{quantity:.1f}"


def _from_grams_metric(grams: float, base_unit: str) -> DisplayQuantity:
    if base_unit == MILLILITRES:
        if grams >= 1000:
            litres = grams / 1000
            return DisplayQuantity(litres, "L", f"{_trim(litres, 2)} L")
        millilitres = _round_half_up(grams)
        return DisplayQuantity(millilitres, MILLILITRES, f"{millilitres} ml")

    if base_unit == GRAMS:
        if grams >= 1000:
            kilos = grams / 1000
            return DisplayQuantity(kilos, "kg", f"{_trim(kilos, 2)} kg")
        whole_grams = _round_half_up(grams)
        return DisplayQuantity(whole_grams, GRAMS, f"{whole_grams} g")

    return DisplayQuantity(grams, base_unit, f"{grams:g}")


def _from_grams_imperial(grams: float, base_unit: str) -> DisplayQuantity:
    if base_unit == MILLILITRES:
        if grams >= ML_PER_CUP:
            cups = grams / ML_PER_CUP
            return DisplayQuantity(cups, "cups", f"{_trim(cups, 1)} cups")
        if grams >= ML_PER_TBSP:
            tbsp = grams / ML_PER_TBSP
            return DisplayQuantity(tbsp, "tbsp", f"{_trim(tbsp, 1)} tbsp")
        tsp = grams / ML_PER_TSP
        return DisplayQuantity(tsp, "tsp", f"{_trim(tsp, 1)} tsp")

    if base_unit == GRAMS:
        if grams >= GRAMS_PER_POUND:
            pounds = grams / GRAMS_PER_POUND
            return DisplayQuantity(pounds, "lb", f"{_trim(pounds, 2)} lb")
        ounces = grams / GRAMS_PER_OUNCE
        return DisplayQuantity(ounces, "oz", f"{_trim(ounces, 1)} oz")

    return DisplayQuantity(grams, base_unit, f"{grams:g}")


def convert_from_grams(
    grams: float,
    base_unit: str,
    preference: UnitPreference = "metric",
) -> DisplayQuantity:
    """
    Rescale a base-unit value into a display unit.

    Purely cosmetic: the stored value is never changed.

    Args:
        grams: Value in the base unit (grams, or millilitres for volumes).
        base_unit: Either ``g`` or ``ml``; anything else is rendered as-is.
        preference: ``metric`` (g/kg, ml/L) or ``imperial`` (oz/lb, tsp/tbsp/cups).
    """
    if preference == "imperial":
        return _from_grams_imperial(grams, base_unit)
    return _from_grams_metric(grams, base_unit)


# =============================================================================
# Display Formatting
# =============================================================================


def format_quantity_metric(quantity: float, unit: str) -> str:
    """Render a stored quantity in metric units."""
    if unit in (GRAMS, MILLILITRES):
        return convert_from_grams(quantity, unit, "metric").display
    if unit == COUNT:
        return _format_count(quantity)
    return f"{_format_count(quantity)} {unit}"


def format_quantity_imperial(quantity: float, unit: str) -> str:
    """Render a stored quantity in imperial units."""
    if unit in (GRAMS, MILLILITRES):
        return convert_from_grams(quantity, unit, "imperial").display
    if unit == COUNT:
        return _format_count(quantity)
    return f"{_format_count(quantity)} {unit}"


def format_display_quantity(
    quantity: float | None,
    unit: str | None,
    quantity_in_grams: float | None,
    preference: UnitPreference = "metric",
) -> str:
    """Pick the best available representation of a shopping-list quantity."""
    if quantity_in_grams is not None and unit in (GRAMS, MILLILITRES):
        return convert_from_grams(quantity_in_grams, unit, preference).display

    if quantity is not None and unit:
        if preference == "metric":
            return format_quantity_metric(quantity, unit)
        return format_quantity_imperial(quantity, unit)

    if quantity is not None:
        return _format_count(quantity)

    return ""


def format_item_display(
    product_name: str,
    quantity: float | None,
    unit: str | None,
    preference: UnitPreference = "metric",
) -> str:
    """Render "Name - quantity" for a shopping-list row."""
    name = " ".join(word[:1].upper() + word[1:] for word in product_name.split(" "))
    if quantity is None or not unit:
        return name
    if unit == COUNT and quantity == 1:
        return name

    if preference == "metric":
        formatted = format_quantity_metric(quantity, unit)
    else:
        formatted = format_quantity_imperial(quantity, unit)

    if not formatted:
        return name
    return f"{name} - {formatted}"
