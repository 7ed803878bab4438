"""Aggregation of contributions into meal-category and daily totals."""

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from datetime import date
from typing import Protocol
from uuid import UUID

from nutrition_engine.domain.errors import EngineError, ErrorKind
from nutrition_engine.domain.foods import FoodRecord
from nutrition_engine.domain.macros import (
    MACRO_FIELDS,
    CategorizedContribution,
    Contribution,
    DailyTotal,
    LoggedItem,
    MacroTotals,
    MealCategory,
    MealCategoryTotal,
)
from nutrition_engine.services.portions import PortionConverter

_logger = logging.getLogger(__name__)

STANDARD_MEAL_CATEGORIES: tuple[str, ...] = tuple(
    category.value for category in MealCategory
)


def aggregate(items: Iterable[Contribution | MacroTotals]) -> MacroTotals:
    """Sum macro fields in insertion order; empty input gives zeros."""
    sums = dict.fromkeys(MACRO_FIELDS, 0.0)
    for item in tuple(items):
        for name in MACRO_FIELDS:
            sums[name] += getattr(item, name)
    return MacroTotals(**sums)


def aggregate_by_category(
    entries: Iterable[CategorizedContribution],
    categories: Sequence[str] = STANDARD_MEAL_CATEGORIES,
) -> list[MealCategoryTotal]:
    """Group contributions by meal category.

    The given categories are always present, in order, even when empty.
    Categories not listed follow in the order they are first seen.
    """
    grouped: dict[str, list[Contribution]] = {name: [] for name in categories}
    for entry in tuple(entries):
        grouped.setdefault(entry.meal_category, []).append(entry.contribution)
    return [
        MealCategoryTotal(
            meal_category=name, totals=aggregate(items), item_count=len(items)
        )
        for name, items in grouped.items()
    ]


def aggregate_day(
    user_id: UUID,
    day: date,
    entries: Iterable[CategorizedContribution],
    categories: Sequence[str] = STANDARD_MEAL_CATEGORIES,
) -> DailyTotal:
    """Return the day total as the sum of its meal-category totals."""
    meals = aggregate_by_category(entries, categories)
    return DailyTotal(
        user_id=user_id,
        day=day,
        totals=aggregate(meal.totals for meal in meals),
        meals=tuple(meals),
    )


class DiaryRepository(Protocol):
    """Read interface for logged items and food reference data."""

    def list_logged_items(self, user_id: UUID, day: date) -> list[LoggedItem]:
        """Return the items logged by a user on a day, in log order."""

    def get_food(self, food_id: str) -> FoodRecord | None:
        """Return a food record by id, if present."""


@dataclass(frozen=True)
class DaySummary:
    """Daily totals plus the per-item results they were built from."""

    daily: DailyTotal
    contributions: dict[UUID, CategorizedContribution] = field(default_factory=dict)
    rejected: dict[UUID, EngineError] = field(default_factory=dict)

    @property
    def meals(self) -> tuple[MealCategoryTotal, ...]:
        return self.daily.meals


@dataclass
class DiaryService:
    """Service that rebuilds a diary day from stored items."""

    repository: DiaryRepository
    converter: PortionConverter
    meal_categories: Sequence[str] = STANDARD_MEAL_CATEGORIES

    def get_day(self, user_id: UUID, day: date) -> DaySummary:
        """Convert every logged item and aggregate the valid ones."""
        items = tuple(self.repository.list_logged_items(user_id, day))
        contributions: dict[UUID, CategorizedContribution] = {}
        rejected: dict[UUID, EngineError] = {}
        for item in items:
            result = self._convert_item(item)
            if isinstance(result, EngineError):
                _logger.warning(
                    "Skipping logged item %s for user %s on %s: %s",
                    item.id,
                    user_id,
                    day.isoformat(),
                    result.reason,
                )
                rejected[item.id] = result
                continue
            contributions[item.id] = CategorizedContribution(
                meal_category=item.meal_category, contribution=result
            )
        daily = aggregate_day(
            user_id, day, contributions.values(), self.meal_categories
        )
        return DaySummary(daily=daily, contributions=contributions, rejected=rejected)

    def _convert_item(self, item: LoggedItem) -> Contribution | EngineError:
        food = self.repository.get_food(item.food_id)
        if food is None:
            return EngineError(
                ErrorKind.NO_MEASUREMENT_AVAILABLE,
                f"Food {item.food_id!r} is not in the food bank",
            )
        return self.converter.convert(food, item.measurement_method, item.quantity)
