"""Dependency container wiring for the meal catalog."""

from collections.abc import Callable
from dataclasses import dataclass

from supabase import create_client

from meal_catalog.adapters.edamam_client import CachedEdamamClient, HttpxEdamamClient
from meal_catalog.adapters.mercury_client import HttpxMercuryClient
from meal_catalog.adapters.supabase_flag_store import SupabaseFlagStore
from meal_catalog.app_logging import configure_logging
from meal_catalog.config import Settings
from meal_catalog.services.cache import InMemoryCache
from meal_catalog.services.edamam_provider import EdamamMealProvider, MealProvider
from meal_catalog.services.gate import FeatureGate


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    meal_provider: MealProvider
    close_resources: Callable[[], None]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    configure_logging(resolved_settings.log_level)
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    cache = InMemoryCache()
    http_edamam_client = HttpxEdamamClient.create(
        app_id=resolved_settings.edamam_app_id,
        app_key=resolved_settings.edamam_app_key,
        base_url=resolved_settings.edamam_base_url,
        timeout=resolved_settings.http_timeout_seconds,
    )
    mercury_client = HttpxMercuryClient.create(
        api_key=resolved_settings.mercury_api_key,
        base_url=resolved_settings.mercury_base_url,
        timeout=resolved_settings.http_timeout_seconds,
    )
    gate = FeatureGate(
        store=SupabaseFlagStore(supabase_client),
        key=resolved_settings.edamam_flag_key,
    )
    meal_provider = EdamamMealProvider(
        client=CachedEdamamClient(
            client=http_edamam_client,
            cache=cache,
            ttl_seconds=resolved_settings.search_ttl_seconds,
        ),
        article_extractor=mercury_client,
        gate=gate,
        random_query=resolved_settings.random_meals_query,
    )

    def close_resources() -> None:
        http_edamam_client.close()
        mercury_client.close()

    return AppContainer(
        settings=resolved_settings,
        meal_provider=meal_provider,
        close_resources=close_resources,
    )
