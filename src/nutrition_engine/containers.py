"""Dependency container wiring for the engine."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from functools import partial

from nutrition_engine.app_logging import configure_logging
from nutrition_engine.config import EngineSettings, parse_meal_categories
from nutrition_engine.domain.foods import FoodRecord, MeasurementOption
from nutrition_engine.services.aggregation import (
    STANDARD_MEAL_CATEGORIES,
    DiaryRepository,
    DiaryService,
)
from nutrition_engine.services.portions import PortionConverter
from nutrition_engine.services.units import available_methods, serving_text


@dataclass
class EngineContainer:
    """Holds engine-wide dependencies."""

    settings: EngineSettings
    portion_converter: PortionConverter
    meal_categories: tuple[str, ...]
    measurement_options: Callable[[FoodRecord], list[MeasurementOption]]
    serving_text: Callable[[FoodRecord], str | None]
    diary_service_factory: Callable[[DiaryRepository], DiaryService]


def build_container(settings: EngineSettings | None = None) -> EngineContainer:
    """Create the default dependency container."""
    resolved_settings = settings or EngineSettings()
    if resolved_settings.debug:
        configure_logging(logging.DEBUG)
    portion_converter = PortionConverter(
        kcal_per_unit=dict(resolved_settings.kcal_per_unit),
        unit_rounding_step=resolved_settings.unit_rounding_step,
        debug=resolved_settings.debug,
    )
    extra = parse_meal_categories(resolved_settings.meal_plan_categories)
    meal_categories = STANDARD_MEAL_CATEGORIES + tuple(
        name for name in extra if name not in STANDARD_MEAL_CATEGORIES
    )
    precision = resolved_settings.display_precision

    def diary_service_factory(repository: DiaryRepository) -> DiaryService:
        return DiaryService(
            repository=repository,
            converter=portion_converter,
            meal_categories=meal_categories,
        )

    return EngineContainer(
        settings=resolved_settings,
        portion_converter=portion_converter,
        meal_categories=meal_categories,
        measurement_options=partial(available_methods, precision=precision),
        serving_text=partial(serving_text, precision=precision),
        diary_service_factory=diary_service_factory,
    )
