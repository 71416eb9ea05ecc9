"""Ingredient line normalization.

Edamam returns ingredient lines the way recipe authors wrote them, e.g.
``"1 1/2 cups chopped fresh basil, or to taste (about 20 leaves)"``. The
catalog only needs the food name, so each line goes through an ordered list
of text passes that strip qualifiers, asides, quantities and units.
"""

import re
from collections.abc import Callable

_VULGAR_FRACTIONS = "½⅓⅔¼¾⅕⅖⅗⅘⅙⅚⅐⅛⅜⅝⅞⅑⅒"
_UNITS = r"x|lb|tsp|tbsp|cup|oz|g|teaspoon|teaspoons|pound|\s+"

_TRAILING_CLAUSE = re.compile(r",.*")
_PARENTHETICAL = re.compile(r"\(.*\)")
_QUANTITY_AND_UNIT = re.compile(
    r"(([1-9][0-9]*(\.[0-9]+)?\s?)"
    rf"|(([1-9][0-9]*/[1-9][0-9]*|[{_VULGAR_FRACTIONS}])\s?))+"
    rf"({_UNITS})[.s]*\s"
)
_NON_FOOD_CHARACTERS = re.compile(r"[^a-z\s'%#\-]")


def truncate_at_comma(text: str) -> str:
    """Drop everything from the first comma onward."""
    return _TRAILING_CLAUSE.sub("", text)


def strip_parentheticals(text: str) -> str:
    """Drop parenthesized asides such as unit conversions."""
    return _PARENTHETICAL.sub("", text)


def strip_quantity_and_unit(text: str) -> str:
    """Drop quantity runs like ``1 1/2 cups `` or ``200g ``."""
    return _QUANTITY_AND_UNIT.sub("", text)


def keep_food_characters(text: str) -> str:
    """Keep only lower-case letters, whitespace and ``'%#-``."""
    return _NON_FOOD_CHARACTERS.sub("", text)


INGREDIENT_PASSES: tuple[Callable[[str], str], ...] = (
    str.lower,
    truncate_at_comma,
    strip_parentheticals,
    strip_quantity_and_unit,
    keep_food_characters,
    str.strip,
)


def clean_ingredient_name(raw: str) -> str:
    """Return the food name of a free-text ingredient line.

    Never raises; the result may be empty when the line held only a quantity.
    """
    text = raw
    for text_pass in INGREDIENT_PASSES:
        text = text_pass(text)
    return text
