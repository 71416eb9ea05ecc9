"""Edamam recipe search API client."""

import logging
from dataclasses import dataclass
from typing import Protocol

import httpx

from meal_catalog.domain.edamam import EdamamRecipe, EdamamSearchResponse
from meal_catalog.services.cache import Cache

_logger = logging.getLogger(__name__)


class EdamamClient(Protocol):
    """Interface for Edamam recipe API interactions."""

    def search(
        self,
        query: str,
        *,
        diet: str | None = None,
        health: str | None = None,
        start: int = 0,
        end: int | None = None,
    ) -> EdamamSearchResponse:
        """Search recipes, optionally narrowed by one diet and one health label."""

    def find_by_id(self, recipe_id: str) -> list[EdamamRecipe]:
        """Look up recipes by their Edamam uri."""


@dataclass
class HttpxEdamamClient(EdamamClient):
    """HTTPX-backed Edamam client."""

    app_id: str
    app_key: str
    base_url: str
    http_client: httpx.Client
    timeout: float = 15

    @classmethod
    def create(
        cls, app_id: str, app_key: str, base_url: str, timeout: float = 15
    ) -> "HttpxEdamamClient":
        """Create an Edamam client with a managed httpx session."""
        return cls(
            app_id=app_id,
            app_key=app_key,
            base_url=base_url,
            http_client=httpx.Client(),
            timeout=timeout,
        )

    def search(
        self,
        query: str,
        *,
        diet: str | None = None,
        health: str | None = None,
        start: int = 0,
        end: int | None = None,
    ) -> EdamamSearchResponse:
        """Search recipes."""
        params: dict[str, str | int] = {"q": query, "from": start}
        if end is not None:
            params["to"] = end
        if diet:
            params["diet"] = diet
        if health:
            params["health"] = health
        return EdamamSearchResponse.model_validate(self._get(params))

    def find_by_id(self, recipe_id: str) -> list[EdamamRecipe]:
        """Look up recipes by uri."""
        payload = self._get({"r": recipe_id})
        return [EdamamRecipe.model_validate(item) for item in payload or []]

    def _get(self, params: dict[str, str | int]) -> object:
        response = self.http_client.get(
            f"{self.base_url}/search",
            params={**params, "app_id": self.app_id, "app_key": self.app_key},
            timeout=self.timeout,
        )
        response.raise_for_status()
        return response.json()

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self.http_client.close()


@dataclass
class CachedEdamamClient(EdamamClient):
    """Edamam client that memoizes identical requests."""

    client: EdamamClient
    cache: Cache
    ttl_seconds: int = 3600

    def search(
        self,
        query: str,
        *,
        diet: str | None = None,
        health: str | None = None,
        start: int = 0,
        end: int | None = None,
    ) -> EdamamSearchResponse:
        """Search recipes, reusing a cached response when present."""
        cache_key = f"edamam:search:{query.lower()}:{diet}:{health}:{start}:{end}"
        cached = self.cache.get(cache_key)
        if isinstance(cached, EdamamSearchResponse):
            _logger.debug("Edamam search cache hit: %s", cache_key)
            return cached

        response = self.client.search(
            query, diet=diet, health=health, start=start, end=end
        )
        self.cache.set(cache_key, response, ttl_seconds=self.ttl_seconds)
        return response

    def find_by_id(self, recipe_id: str) -> list[EdamamRecipe]:
        """Look up recipes, reusing a cached response when present."""
        cache_key = f"edamam:recipe:{recipe_id}"
        cached = self.cache.get(cache_key)
        if isinstance(cached, list):
            _logger.debug("Edamam lookup cache hit: %s", cache_key)
            return cached

        recipes = self.client.find_by_id(recipe_id)
        self.cache.set(cache_key, recipes, ttl_seconds=self.ttl_seconds)
        return recipes
