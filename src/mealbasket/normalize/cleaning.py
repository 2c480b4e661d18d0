"""Boilerplate stripping and fraction normalization for raw ingredient lines."""

import re

FRACTION_SLASHES = re.compile(r"[⁄∕]")
BARE_DENOMINATOR = re.compile(r"(?<!\d)/(\d+)")
WHITESPACE = re.compile(r"\s+")

# Applied in order; each match is replaced by a single space.
STRIP_PHRASES: tuple[re.Pattern[str], ...] = tuple(
    re.compile(pattern, re.IGNORECASE)
    for pattern in (
        r"\bcut\s+into\s+\w+",
        r"\bthumb[- ]?size\b",
        r"\bfinger[- ]?size\b",
        r"\bto\s+serve\b",
        r"\bfor\s+serving\b",
        r"\bfor\s+garnish\b",
        r"\bsaturates?\d*g?\w*",
        r"\bzest(?:ed)?\s+(?:and\s+)?(?:juice(?:d)?\s+)?(?:of\s+)?",
        r"\bjuice(?:d)?\s+(?:and\s+)?(?:zest(?:ed)?\s+)?(?:of\s+)?",
        r"\bin\s+total\b",
        r"\babout\b",
        r"\bapproximately?\b",
        r"\bhandful\s+of\b",
        r"\ba\s+handful\b",
        r"\b(?:plus|and)\s+extra\b",
        r"\bor\s+to\s+taste\b",
        r"\bto\s+taste\b",
        r"\bweighing\s+about\s+\S+",
        r"\bstep\s+\d+\w*",
        r"\bmade\s+up\s+with\s+\w+",
        r"\bas\s+many\s+as\s+you\s+\w+",
        r"[–—]\s*\d+\s*$",
        r"\bfind\s+with\s+.*$",
        r"\bwe\s+used\s+\w+\b",
        r"\bfrom\s+a\s+cube\b.*$",
        r"\bmake\s+it\s+.*$",
        r"\bsee\s+['‘’]?try['‘’]?\s+below\b",
        r"\bwhatever\s+you\s+have\b.*$",
        r"\bno\s+need\s+(?:to\s+)?peel\b",
        r"\band\s+coarsely\b",
        r"\bor\s+\d+\s+(?:more|less|extra|fewer|drops?)\b.*$",
        r"\bfor\s+sprinkling\b",
        r"\bplus\s+\d+\s+drop\b",
        r"\bwarmed\b",
        r"\bleaves?\s+picked\b.*$",
        r"\bsprigs?\b",
        r"\blengthway\b",
        r"\bthickly\b",
        r"\bhandfuls?\b",
        r"\bpinch(?:es)?\b",
        r"\bx\s+\d+g\b",
        r"\(\s*\d+(?:\.\d+)?\s*(?:g|kg|ml|l|oz)\s*\)",
        r"(?<=\s)\d+g\b",
        r"\b\d+-\d+\b",
        r"\band\s+½\s+",
        r"(?<!\S)½\s+and\s+½(?!\S)",
        r"\bfew\s+drops?\b",
        r"\bhot\s+(?=vegetable|chicken|beef|lamb|fish)",
        r"\bpack\b",
        r"\s+and\s*$",
        r"\s+or\s*$",
        r"\bjuiced\b",
    )
)


def clean_ingredient_text(text: str) -> str:
    """
    Strip boilerplate from an ingredient line.

    Fraction slashes are normalized first (so "⁄" reads as "/" and a bare
    "/2" becomes "1/2"), then serving/garnish notes, "cut into", "zest of",
    "step N", "to taste" and similar phrases are removed. Boilerplate can sit
    between a quantity and its unit, so this must run before quantity
    extraction.

    Examples:
        "Zest and juice of 1 lemon" -> "1 lemon"
        "Salt to taste" -> "Salt"
        "/2 tsp cumin" -> "1/2 tsp cumin"
    """
    cleaned = text.strip()
    cleaned = FRACTION_SLASHES.sub("/", cleaned)
    cleaned = BARE_DENOMINATOR.sub(r"1/\1", cleaned)

    for pattern in STRIP_PHRASES:
        cleaned = pattern.sub(" ", cleaned)

    return WHITESPACE.sub(" ", cleaned).strip()
