"""Tests for container wiring."""

import logging

from nutrition_engine.config import EngineSettings
from nutrition_engine.containers import build_container
from nutrition_engine.domain.foods import FoodCategory, FoodRecord
from tests.conftest import InMemoryDiaryRepository


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)

    assert container.portion_converter.unit_rounding_step == 0.5
    assert container.meal_categories == (
        "breakfast",
        "snack",
        "lunch",
        "dinner",
        "pre-workout",
        "post-workout",
    )
    service = container.diary_service_factory(InMemoryDiaryRepository())
    assert service.converter is container.portion_converter
    assert service.meal_categories == container.meal_categories


def test_container_applies_display_precision() -> None:
    food = FoodRecord(
        id="granola",
        name="Granola",
        category=FoodCategory.CARB,
        kcal_per_unit=120,
        carb_units=1,
        grams_per_cup=0.126,
    )

    container = build_container(EngineSettings(display_precision=2))

    assert container.serving_text(food) == "0.13 cups = one portion"
    assert container.measurement_options(food)[0].label == "0.13 cups"


def test_debug_container_configures_logging() -> None:
    logger = logging.getLogger("nutrition_engine")
    saved_handlers = list(logger.handlers)
    saved_propagate = logger.propagate
    saved_level = logger.level
    logger.handlers.clear()

    try:
        build_container(EngineSettings(debug=True))
        handler_count = len(logger.handlers)
        level = logger.level
    finally:
        logger.handlers[:] = saved_handlers
        logger.propagate = saved_propagate
        logger.setLevel(saved_level)

    assert handler_count == 1
    assert level == logging.DEBUG
