"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import date
from uuid import UUID

import pytest

from nutrition_engine.config import EngineSettings
from nutrition_engine.domain.foods import FoodCategory, FoodRecord
from nutrition_engine.domain.macros import LoggedItem
from nutrition_engine.services.aggregation import DiaryRepository
from nutrition_engine.services.portions import PortionConverter


@dataclass
class InMemoryDiaryRepository(DiaryRepository):
    """In-memory diary repository for tests."""

    foods: dict[str, FoodRecord] = field(default_factory=dict)
    items: dict[tuple[UUID, date], list[LoggedItem]] = field(default_factory=dict)

    def add_food(self, food: FoodRecord) -> FoodRecord:
        self.foods[food.id] = food
        return food

    def log(self, user_id: UUID, day: date, item: LoggedItem) -> LoggedItem:
        self.items.setdefault((user_id, day), []).append(item)
        return item

    def list_logged_items(self, user_id: UUID, day: date) -> list[LoggedItem]:
        return list(self.items.get((user_id, day), []))

    def get_food(self, food_id: str) -> FoodRecord | None:
        return self.foods.get(food_id)


@pytest.fixture
def settings() -> EngineSettings:
    return EngineSettings(meal_plan_categories="pre-workout, post-workout")


@pytest.fixture
def converter() -> PortionConverter:
    return PortionConverter()


@pytest.fixture
def chicken() -> FoodRecord:
    return FoodRecord(
        id="chicken",
        name="Chicken breast",
        category=FoodCategory.PROTEIN,
        kcal_per_unit=200,
        protein_units=1,
        grams_per_single_item=50,
    )


@pytest.fixture
def rice() -> FoodRecord:
    return FoodRecord(
        id="rice",
        name="Cooked rice",
        category=FoodCategory.CARB,
        kcal_per_unit=120,
        carb_units=1,
        grams_per_single_item=100,
        grams_per_cup=0.5,
        grams_per_tbsp=4,
    )


@pytest.fixture
def apple() -> FoodRecord:
    return FoodRecord(
        id="apple",
        name="Apple",
        category=FoodCategory.FRUIT,
        kcal_per_unit=85,
        fruit_units=1,
    )


@pytest.fixture
def diary_repository(
    chicken: FoodRecord, rice: FoodRecord, apple: FoodRecord
) -> InMemoryDiaryRepository:
    repository = InMemoryDiaryRepository()
    for food in (chicken, rice, apple):
        repository.add_food(food)
    return repository
