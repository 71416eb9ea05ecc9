"""Edamam diet and health label taxonomy."""

from dataclasses import dataclass


@dataclass(frozen=True)
class EdamamLabel:
    """A diet or health label understood by the Edamam search API."""

    key: str
    web_label: str
    api_parameter: str
    is_premium: bool = False


DIET_LABELS: tuple[EdamamLabel, ...] = (
    EdamamLabel("BALANCED", "Balanced", "balanced"),
    EdamamLabel("HIGH_FIBER", "High-Fiber", "high-fiber", is_premium=True),
    EdamamLabel("HIGH_PROTEIN", "High-Protein", "high-protein"),
    EdamamLabel("LOW_CARB", "Low-Carb", "low-carb"),
    EdamamLabel("LOW_FAT", "Low-Fat", "low-fat"),
    EdamamLabel("LOW_SODIUM", "Low-Sodium", "low-sodium", is_premium=True),
)

HEALTH_LABELS: tuple[EdamamLabel, ...] = (
    EdamamLabel("ALCOHOL_FREE", "Alcohol-Free", "alcohol-free"),
    EdamamLabel("CELERY_FREE", "Celery-Free", "celery-free", is_premium=True),
    EdamamLabel(
        "CRUSTACEAN_FREE", "Crustacean-Free", "crustacean-free", is_premium=True
    ),
    EdamamLabel("DAIRY_FREE", "Dairy-Free", "dairy-free", is_premium=True),
    EdamamLabel("EGG_FREE", "Egg-Free", "egg-free", is_premium=True),
    EdamamLabel("FISH_FREE", "Fish-Free", "fish-free", is_premium=True),
    EdamamLabel("GLUTEN_FREE", "Gluten-Free", "gluten-free", is_premium=True),
    EdamamLabel(
        "KIDNEY_FRIENDLY", "Kidney-Friendly", "kidney-friendly", is_premium=True
    ),
    EdamamLabel("KOSHER", "Kosher", "kosher", is_premium=True),
    EdamamLabel("LOW_POTASSIUM", "Low-Potassium", "low-potassium", is_premium=True),
    EdamamLabel("LOW_SUGAR", "Low-Sugar", "low-sugar", is_premium=True),
    EdamamLabel("LUPINE_FREE", "Lupine-Free", "lupine-free", is_premium=True),
    EdamamLabel("MUSTARD_FREE", "Mustard-Free", "mustard-free", is_premium=True),
    EdamamLabel("NO_OIL_ADDED", "No-Oil-Added", "no-oil-added", is_premium=True),
    EdamamLabel("PALEO", "Paleo", "paleo", is_premium=True),
    EdamamLabel("PEANUT_FREE", "Peanut-Free", "peanut-free"),
    EdamamLabel("PESCATARIAN", "Pescatarian", "pescatarian", is_premium=True),
    EdamamLabel("PORK_FREE", "Pork-Free", "pork-free", is_premium=True),
    EdamamLabel("RED_MEAT_FREE", "Red-Meat-Free", "red-meat-free", is_premium=True),
    EdamamLabel("SESAME_FREE", "Sesame-Free", "sesame-free", is_premium=True),
    EdamamLabel(
        "SHELLFISH_FREE", "Shellfish-Free", "shellfish-free", is_premium=True
    ),
    EdamamLabel("SOY_FREE", "Soy-Free", "soy-free", is_premium=True),
    EdamamLabel("SUGAR_CONSCIOUS", "Sugar-Conscious", "sugar-conscious"),
    EdamamLabel("TREE_NUT_FREE", "Tree-Nut-Free", "tree-nut-free"),
    EdamamLabel("VEGAN", "Vegan", "vegan"),
    EdamamLabel("VEGETARIAN", "Vegetarian", "vegetarian"),
    EdamamLabel("WHEAT_FREE", "Wheat-Free", "wheat-free", is_premium=True),
)


def _index_by_parameter(labels: tuple[EdamamLabel, ...]) -> dict[str, EdamamLabel]:
    index = {label.api_parameter: label for label in labels}
    if len(index) != len(labels):
        raise ValueError("Edamam label api parameters must be unique")
    return index


_DIET_BY_PARAMETER = _index_by_parameter(DIET_LABELS)
_HEALTH_BY_PARAMETER = _index_by_parameter(HEALTH_LABELS)
_HEALTH_BY_WEB_LABEL = {label.web_label.lower(): label for label in HEALTH_LABELS}


def diet_label_for(api_parameter: str) -> EdamamLabel | None:
    """Return the diet label with the given api parameter, if any."""
    return _DIET_BY_PARAMETER.get(api_parameter)


def health_label_for(api_parameter: str) -> EdamamLabel | None:
    """Return the health label with the given api parameter, if any."""
    return _HEALTH_BY_PARAMETER.get(api_parameter)


def health_label_from_web(text: str) -> EdamamLabel | None:
    """Match a health label as Edamam spells it in recipe payloads."""
    normalized = text.strip().lower()
    return _HEALTH_BY_WEB_LABEL.get(normalized) or _HEALTH_BY_PARAMETER.get(
        normalized
    )
