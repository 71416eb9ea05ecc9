"""Tests for container wiring."""

import logging

from meal_catalog.containers import build_container
from meal_catalog.services.edamam_provider import EdamamMealProvider


def test_build_container_creates_provider(settings) -> None:
    container = build_container(settings)

    assert isinstance(container.meal_provider, EdamamMealProvider)
    assert container.meal_provider.random_query == "Tacos"
    container.close_resources()


def test_build_container_configures_logging(settings) -> None:
    logger = logging.getLogger("meal_catalog")
    logger.handlers.clear()
    settings.log_level = "WARNING"

    container = build_container(settings)

    assert len(logger.handlers) == 1
    assert logger.level == logging.WARNING
    container.close_resources()
