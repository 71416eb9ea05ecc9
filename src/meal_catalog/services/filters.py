"""Resolution of catalog filter ids into Edamam search requests."""

import logging
from dataclasses import dataclass

from meal_catalog.domain.errors import AmbiguousFilter, InvalidFilterScope
from meal_catalog.domain.labels import (
    DIET_LABELS,
    HEALTH_LABELS,
    EdamamLabel,
    diet_label_for,
    health_label_for,
)
from meal_catalog.domain.meals import Filter, FilterGroup

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlainQuery:
    """Search without label filters."""

    query: str

    def search_params(self) -> dict[str, str]:
        """Return the label parameters of the request."""
        return {}


@dataclass(frozen=True)
class DietQuery:
    """Search narrowed by a diet label."""

    query: str
    diet: EdamamLabel

    def search_params(self) -> dict[str, str]:
        """Return the label parameters of the request."""
        return {"diet": self.diet.api_parameter}


@dataclass(frozen=True)
class HealthQuery:
    """Search narrowed by a health label."""

    query: str
    health: EdamamLabel

    def search_params(self) -> dict[str, str]:
        """Return the label parameters of the request."""
        return {"health": self.health.api_parameter}


@dataclass(frozen=True)
class DietAndHealthQuery:
    """Search narrowed by both a diet and a health label."""

    query: str
    diet: EdamamLabel
    health: EdamamLabel

    def search_params(self) -> dict[str, str]:
        """Return the label parameters of the request."""
        return {
            "diet": self.diet.api_parameter,
            "health": self.health.api_parameter,
        }


QueryShape = PlainQuery | DietQuery | HealthQuery | DietAndHealthQuery


@dataclass(frozen=True)
class FilterResolver:
    """Maps namespaced filter ids onto the Edamam label taxonomy."""

    namespace: str

    def owns(self, identifier: str) -> bool:
        """Return whether an id carries this provider's namespace."""
        return identifier.startswith(self.namespace)

    def resolve(self, query: str, filter_ids: list[str]) -> QueryShape:
        """Pick the request shape for a query and its filters.

        Raises InvalidFilterScope for ids from another namespace and
        AmbiguousFilter when a group has more than one match. Ids that match
        no label are ignored.
        """
        for filter_id in filter_ids:
            if not self.owns(filter_id):
                _logger.warning("Rejected foreign filter id: %s", filter_id)
                raise InvalidFilterScope(filter_id)

        diets: list[EdamamLabel] = []
        healths: list[EdamamLabel] = []
        for parameter in {item.removeprefix(self.namespace) for item in filter_ids}:
            diet_label = diet_label_for(parameter)
            health_label = health_label_for(parameter)
            if diet_label:
                diets.append(diet_label)
            if health_label:
                healths.append(health_label)

        if len(diets) > 1:
            raise AmbiguousFilter("diet")
        if len(healths) > 1:
            raise AmbiguousFilter("health")

        diet = diets[0] if diets else None
        health = healths[0] if healths else None
        if diet and health:
            return DietAndHealthQuery(query=query, diet=diet, health=health)
        if diet:
            return DietQuery(query=query, diet=diet)
        if health:
            return HealthQuery(query=query, health=health)
        return PlainQuery(query=query)

    def available_filters(self) -> list[FilterGroup]:
        """Return the non-premium diet and health filters."""
        return [
            self._group("diet-filters", "Diet", DIET_LABELS),
            self._group("health-filters", "Health", HEALTH_LABELS),
        ]

    def _group(
        self, group_key: str, group_name: str, labels: tuple[EdamamLabel, ...]
    ) -> FilterGroup:
        filters = [
            Filter(name=label.web_label, id=self.namespace + label.api_parameter)
            for label in labels
            if not label.is_premium
        ]
        return FilterGroup(
            group_id=self.namespace + group_key,
            group_name=group_name,
            filters=sorted(filters, key=lambda item: item.name.lower()),
            maximum_active=1,
        )

