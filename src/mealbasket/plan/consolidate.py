"""Consolidation of ingredient lines into shopping-list quantities."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, replace

from mealbasket.config import Settings, get_settings
from mealbasket.logging_config import get_logger
from mealbasket.normalize.categories import detect_ingredient_category
from mealbasket.normalize.garbage import is_alphanumeric_garbage, is_garbage_ingredient
from mealbasket.normalize.parser import parse_ingredient
from mealbasket.normalize.units import (
    COUNT,
    GRAMS,
    MILLILITRES,
    convert_to_grams,
    lookup_unit,
)
from mealbasket.plan.conversion_data import (
    AVERAGE_ITEM_WEIGHT_G,
    KEEP_AS_COUNT,
    ML_TO_G_DENSITY,
)

logger = get_logger(__name__)


@dataclass
class ConsolidatedItem:
    """One shopping-list line aggregated from one or more ingredient lines."""

    normalized_name: str
    display_name: str
    quantity: float
    unit: str
    category: str
    needs_review: bool = False
    validation_note: str | None = None

    @property
    def key(self) -> str:
        """Grouping key: items only sum when name and unit both match."""
        return f"{self.normalized_name}|{self.unit}"

    @property
    def quantity_in_grams(self) -> float | None:
        """Gram-equivalent quantity, or None for counts and unknown units."""
        return convert_to_grams(self.quantity, self.unit)


# =============================================================================
# Table Lookups
# =============================================================================


def _lookup_key(name: str, keys: Iterable[str]) -> str | None:
    """Exact match first, then the longest key the name ends with as a word."""
    lower = name.lower()
    best: str | None = None
    for key in keys:
        if lower == key:
            return key
        if lower.endswith(" " + key) and (best is None or len(key) > len(best)):
            best = key
    return best


def _lookup_value(name: str, table: Mapping[str, float]) -> float | None:
    key = _lookup_key(name, table)
    return table[key] if key is not None else None


def density_for(name: str) -> float | None:
    """Grams per millilitre for an ingredient, if known."""
    return _lookup_value(name, ML_TO_G_DENSITY)


def average_weight_for(name: str) -> float | None:
    """Average weight in grams of one item, if known."""
    return _lookup_value(name, AVERAGE_ITEM_WEIGHT_G)


def should_keep_as_count(name: str) -> bool:
    """Check whether shoppers buy this ingredient by the piece."""
    return _lookup_key(name, KEEP_AS_COUNT) is not None


# =============================================================================
# Consolidation
# =============================================================================


def _item_from_line(line: str, settings: Settings) -> ConsolidatedItem | None:
    """Parse a single line, or return None when it is not an ingredient."""
    if is_garbage_ingredient(line):
        logger.debug(f"Dropping non-ingredient line '{line}'")
        return None

    parsed = parse_ingredient(line)
    if is_garbage_ingredient(parsed.name):
        logger.debug(f"Dropping line '{line}': garbage name '{parsed.name}'")
        return None

    normalized = parsed.normalized_name
    needs_review = False
    validation_note = None

    # A bare unit ("2 tbsp") leaves the unit word as the only name.
    name_missing = (
        len(normalized.strip()) < settings.min_name_length
        or lookup_unit(normalized) is not None
    )
    if name_missing:
        # Keep a visible placeholder rather than losing the line.
        needs_review = True
        validation_note = f'Could not extract ingredient from: "{line.strip()}"'
        normalized = line.strip()[: settings.review_placeholder_length]
        logger.info(f"Flagging line for review: '{line.strip()}'")
    elif is_garbage_ingredient(normalized):
        logger.debug(f"Dropping line '{line}': garbage normalized name '{normalized}'")
        return None

    if is_alphanumeric_garbage(normalized):
        return None

    return ConsolidatedItem(
        normalized_name=normalized,
        display_name=normalized,
        quantity=parsed.quantity,
        unit=parsed.unit,
        category=detect_ingredient_category(normalized),
        needs_review=needs_review,
        validation_note=validation_note,
    )


def _merge_units(name: str, by_unit: dict[str, ConsolidatedItem]) -> list[ConsolidatedItem]:
    """
    Fold the unit groups of one ingredient into a gram total where possible.

    Grams seed the total, millilitres fold in through the density table and
    counts fold in through the average-weight table unless the ingredient is
    kept as a count. Anything that cannot be converted is returned alongside
    the weight item.
    """
    gram_item = by_unit.get(GRAMS)
    ml_item = by_unit.get(MILLILITRES)
    count_item = by_unit.get(COUNT)

    total_g = gram_item.quantity if gram_item is not None else None
    unmerged: list[ConsolidatedItem] = []

    if ml_item is not None:
        density = density_for(name)
        if density is None:
            unmerged.append(replace(ml_item))
        else:
            total_g = (total_g or 0.0) + ml_item.quantity * density

    if count_item is not None:
        weight = average_weight_for(name)
        convertible = weight is not None and not should_keep_as_count(name)
        nothing_else = gram_item is None and ml_item is None
        if convertible and (total_g is not None or nothing_else):
            total_g = (total_g or 0.0) + count_item.quantity * weight
        else:
            unmerged.append(replace(count_item))

    merged: list[ConsolidatedItem] = []
    if total_g is not None:
        base = gram_item or ml_item or count_item
        merged.append(replace(base, quantity=total_g, unit=GRAMS))

    merged.extend(unmerged)
    merged.extend(
        replace(item)
        for unit, item in by_unit.items()
        if unit not in (GRAMS, MILLILITRES, COUNT)
    )
    return merged


def consolidate_ingredients(
    lines: Iterable[str],
    settings: Settings | None = None,
) -> list[ConsolidatedItem]:
    """
    Merge ingredient lines from many recipes into shopping-list items.

    Lines are parsed and grouped by normalized name and unit, with
    quantities summed inside a group. Each ingredient's groups are then
    merged into a single gram total where density or average-weight data
    allows; groups without a conversion path stay as separate items, so one
    ingredient may appear more than once with different units.

    Non-ingredient lines are dropped. Lines whose name cannot be recovered
    are kept with ``needs_review`` set.

    Args:
        lines: Raw ingredient lines, e.g. every line of every recipe in a plan.
        settings: Optional settings override (defaults to the cached settings).

    Returns:
        Consolidated items, grouped by ingredient in first-seen order.
    """
    settings = settings or get_settings()

    accumulator: dict[str, ConsolidatedItem] = {}
    line_count = 0
    dropped = 0

    for line in lines:
        line_count += 1
        item = _item_from_line(line, settings)
        if item is None:
            dropped += 1
            continue

        existing = accumulator.get(item.key)
        if existing is None:
            accumulator[item.key] = item
        else:
            existing.quantity += item.quantity

    groups: dict[str, dict[str, ConsolidatedItem]] = {}
    for item in accumulator.values():
        groups.setdefault(item.normalized_name, {})[item.unit] = item

    consolidated: list[ConsolidatedItem] = []
    for name, by_unit in groups.items():
        consolidated.extend(_merge_units(name, by_unit))

    review_count = sum(1 for item in consolidated if item.needs_review)
    logger.info(
        f"Consolidated {line_count} lines into {len(consolidated)} items "
        f"({dropped} dropped, {review_count} flagged for review)"
    )
    return consolidated
