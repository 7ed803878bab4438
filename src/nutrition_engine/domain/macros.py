"""Domain models for logged contributions and aggregated totals."""

from dataclasses import dataclass
from datetime import date
from enum import StrEnum
from uuid import UUID

from nutrition_engine.domain.foods import MeasurementMethod

MACRO_FIELDS = (
    "kcal",
    "protein_units",
    "carb_units",
    "fat_units",
    "veg_units",
    "fruit_units",
)


class MealCategory(StrEnum):
    """Standard meal categories of a diary day."""

    BREAKFAST = "breakfast"
    SNACK = "snack"
    LUNCH = "lunch"
    DINNER = "dinner"


@dataclass(frozen=True)
class MacroTotals:
    """Kilocalories and macro-category portions."""

    kcal: float = 0.0
    protein_units: float = 0.0
    carb_units: float = 0.0
    fat_units: float = 0.0
    veg_units: float = 0.0
    fruit_units: float = 0.0

    def as_record(self) -> dict[str, float]:
        return {name: getattr(self, name) for name in MACRO_FIELDS}


@dataclass(frozen=True)
class Contribution:
    """Macro contribution of a single logged item."""

    quantity: float
    measurement_method: MeasurementMethod
    servings: float
    kcal: float
    protein_units: float
    carb_units: float
    fat_units: float
    veg_units: float
    fruit_units: float

    def as_record(self) -> dict[str, object]:
        """Return the persisted logged-item shape."""
        return {
            "quantity": self.quantity,
            "measurement_method": self.measurement_method.value,
            "kcal": self.kcal,
            "protein_units": self.protein_units,
            "carb_units": self.carb_units,
            "fat_units": self.fat_units,
            "veg_units": self.veg_units,
            "fruit_units": self.fruit_units,
        }


@dataclass(frozen=True)
class LoggedItem:
    """Raw diary entry as supplied by storage."""

    id: UUID
    meal_category: str
    food_id: str
    quantity: float
    measurement_method: MeasurementMethod


@dataclass(frozen=True)
class CategorizedContribution:
    """Contribution tagged with the meal category it was logged under."""

    meal_category: str
    contribution: Contribution


@dataclass(frozen=True)
class MealCategoryTotal:
    """Aggregated totals for one meal category."""

    meal_category: str
    totals: MacroTotals
    item_count: int = 0


@dataclass(frozen=True)
class DailyTotal:
    """Aggregated totals for a user's calendar day."""

    user_id: UUID
    day: date
    totals: MacroTotals
    meals: tuple[MealCategoryTotal, ...] = ()
