"""Engine configuration."""

import os

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from nutrition_engine.domain.foods import FoodCategory

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

DEFAULT_KCAL_PER_UNIT: dict[FoodCategory, float] = {
    FoodCategory.PROTEIN: 200,
    FoodCategory.CARB: 120,
    FoodCategory.FAT: 120,
    FoodCategory.VEGETABLE: 35,
    FoodCategory.FRUIT: 85,
    FoodCategory.SPREAD: 120,
    FoodCategory.GROCERY: 120,
    FoodCategory.RESTAURANT: 120,
    FoodCategory.ALCOHOL: 120,
}


class EngineSettings(BaseSettings):
    """Engine settings loaded from environment variables."""

    kcal_per_unit: dict[FoodCategory, float] = Field(
        default_factory=lambda: dict(DEFAULT_KCAL_PER_UNIT)
    )
    unit_rounding_step: float = Field(default=0.5, gt=0)
    display_precision: int = Field(default=1, ge=0)
    meal_plan_categories: str | None = None
    debug: bool = False
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_prefix="NUTRITION_ENGINE_",
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @field_validator("kcal_per_unit")
    @classmethod
    def _fill_missing_categories(
        cls, value: dict[FoodCategory, float]
    ) -> dict[FoodCategory, float]:
        for category, kcal in value.items():
            if kcal <= 0:
                raise ValueError(f"kcal per unit for {category} must be positive")
        return {**DEFAULT_KCAL_PER_UNIT, **value}


def parse_meal_categories(raw: str | None) -> tuple[str, ...]:
    """Parse extra meal-plan categories from env, keeping their order."""
    if raw is None:
        return ()
    categories: list[str] = []
    for chunk in raw.split(","):
        value = chunk.strip()
        if not value or value in categories:
            continue
        categories.append(value)
    return tuple(categories)
