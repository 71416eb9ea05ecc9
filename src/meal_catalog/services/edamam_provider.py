"""Edamam-backed meal provider for the catalog."""

import logging
from dataclasses import dataclass, field
from typing import Protocol

from meal_catalog.adapters.edamam_client import EdamamClient
from meal_catalog.adapters.mercury_client import (
    ArticleExtractionError,
    ArticleExtractor,
)
from meal_catalog.domain.edamam import EdamamRecipe
from meal_catalog.domain.meals import FilterGroup, Ingredient, Meal, Recipe
from meal_catalog.services.filters import FilterResolver
from meal_catalog.services.gate import FeatureGate
from meal_catalog.services.ingredients import clean_ingredient_name

ID_PREFIX = "edamam/"
INGREDIENT_UNIT = "grams"

_logger = logging.getLogger(__name__)


class MealProvider(Protocol):
    """Interface the catalog uses to query a meal source."""

    def get_random_meals(self, count: int) -> list[Meal]:
        """Return up to ``count`` meals to explore."""

    def find_meal_by_id(self, meal_id: str) -> Meal | None:
        """Return the meal with the given id, if this provider owns it."""

    def get_recipe_for_meal(self, meal_id: str) -> Recipe | None:
        """Return the full recipe of a meal, if available."""

    def search(self, query: str, filters: list[str]) -> list[Meal]:
        """Search meals matching a query and filter ids."""

    def get_available_filters(self) -> list[FilterGroup]:
        """Return the filter groups this provider understands."""

    def get_ingredients(self, meal_id: str) -> list[Ingredient] | None:
        """Return the ingredients of a meal, if available."""


@dataclass
class EdamamMealProvider(MealProvider):
    """Meal provider backed by the Edamam recipe search API."""

    client: EdamamClient
    article_extractor: ArticleExtractor
    gate: FeatureGate
    random_query: str = "Tacos"
    resolver: FilterResolver = field(
        default_factory=lambda: FilterResolver(ID_PREFIX)
    )

    def get_random_meals(self, count: int) -> list[Meal]:
        """Return the first ``count`` results of the exploratory query."""
        if count <= 0:
            return []

        def fetch() -> list[Meal]:
            response = self.client.search(self.random_query, end=count)
            return [self._to_meal(hit.recipe) for hit in response.hits[:count]]

        return self.gate.run(fetch, default=[])

    def find_meal_by_id(self, meal_id: str) -> Meal | None:
        """Look up a meal by its namespaced id."""
        if not self.resolver.owns(meal_id):
            return None

        def fetch() -> Meal | None:
            recipe = self._lookup(meal_id)
            return self._to_meal(recipe) if recipe else None

        return self.gate.run(fetch, default=None)

    def get_recipe_for_meal(self, meal_id: str) -> Recipe | None:
        """Fetch the source article of a meal's recipe."""
        if not self.resolver.owns(meal_id):
            return None

        def fetch() -> Recipe | None:
            recipe = self._lookup(meal_id)
            if recipe is None or not recipe.url:
                return None
            try:
                article = self.article_extractor.parse(recipe.url)
            except ArticleExtractionError as exc:
                _logger.warning("Recipe extraction failed for %s: %s", meal_id, exc)
                return None
            return Recipe(content=article.content or "", title=article.title)

        return self.gate.run(fetch, default=None)

    def search(self, query: str, filters: list[str]) -> list[Meal]:
        """Search Edamam; foreign filter ids make the whole request empty."""
        if not all(self.resolver.owns(filter_id) for filter_id in filters):
            return []

        def fetch() -> list[Meal]:
            shape = self.resolver.resolve(query, filters)
            response = self.client.search(shape.query, **shape.search_params())
            return [self._to_meal(hit.recipe) for hit in response.hits]

        return self.gate.run(fetch, default=[])

    def get_available_filters(self) -> list[FilterGroup]:
        """Return the non-premium diet and health filter groups."""
        return self.gate.run(self.resolver.available_filters, default=[])

    def get_ingredients(self, meal_id: str) -> list[Ingredient] | None:
        """Return a meal's ingredients with cleaned names and gram weights."""
        if not self.resolver.owns(meal_id):
            return None

        def fetch() -> list[Ingredient] | None:
            recipe = self._lookup(meal_id)
            if recipe is None:
                return None
            return [
                Ingredient(
                    quantity=ingredient.weight,
                    unit=INGREDIENT_UNIT,
                    name=clean_ingredient_name(ingredient.text),
                )
                for ingredient in recipe.ingredients
            ]

        return self.gate.run(fetch, default=None)

    def _lookup(self, meal_id: str) -> EdamamRecipe | None:
        recipe_id = meal_id.removeprefix(self.resolver.namespace)
        recipes = self.client.find_by_id(recipe_id)
        return recipes[0] if recipes else None

    def _to_meal(self, recipe: EdamamRecipe) -> Meal:
        return Meal(
            id=f"{self.resolver.namespace}{recipe.uri}",
            name=recipe.label,
            description=", ".join(recipe.health_tags()),
            thumbnail_url=recipe.image,
        )
