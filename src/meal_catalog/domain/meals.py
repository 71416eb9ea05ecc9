"""Domain models exposed to the meal catalog."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Meal:
    """A meal summary produced by a provider."""

    id: str
    name: str
    description: str
    thumbnail_url: str | None


@dataclass(frozen=True)
class Recipe:
    """Full recipe content for a meal."""

    content: str
    title: str | None = None


@dataclass(frozen=True)
class Ingredient:
    """An ingredient of a meal."""

    quantity: float
    unit: str
    name: str


@dataclass(frozen=True)
class Filter:
    """A search filter addressable by the catalog."""

    name: str
    id: str


@dataclass(frozen=True)
class FilterGroup:
    """Filters that are offered together with an activation limit."""

    group_id: str
    group_name: str
    filters: list[Filter]
    maximum_active: int
