"""Domain models for food reference data."""

from dataclasses import dataclass
from enum import StrEnum


class FoodCategory(StrEnum):
    """Food bank categories."""

    PROTEIN = "protein"
    CARB = "carb"
    FAT = "fat"
    VEGETABLE = "vegetable"
    FRUIT = "fruit"
    SPREAD = "spread"
    GROCERY = "grocery"
    RESTAURANT = "restaurant"
    ALCOHOL = "alcohol"


# Rates on these categories already describe one user-facing unit.
DIRECT_CATEGORIES = frozenset(
    {
        FoodCategory.VEGETABLE,
        FoodCategory.FRUIT,
        FoodCategory.GROCERY,
        FoodCategory.RESTAURANT,
        FoodCategory.ALCOHOL,
    }
)


class MeasurementMethod(StrEnum):
    """Physical measurement bases that convert a quantity into portions."""

    GRAMS_PER_SINGLE_ITEM = "grams_per_single_item"
    GRAMS_PER_CUP = "grams_per_cup"
    GRAMS_PER_TBSP = "grams_per_tbsp"
    ITEMS_PER_UNIT = "items_per_unit"
    DIRECT = "direct"


ENCODED_METHODS = (
    MeasurementMethod.GRAMS_PER_SINGLE_ITEM,
    MeasurementMethod.GRAMS_PER_CUP,
    MeasurementMethod.GRAMS_PER_TBSP,
    MeasurementMethod.ITEMS_PER_UNIT,
)


@dataclass(frozen=True)
class FoodRecord:
    """Food bank entry with per-portion rates and measurement encodings."""

    id: str
    name: str
    category: FoodCategory
    kcal_per_unit: float
    protein_units: float = 0.0
    carb_units: float = 0.0
    fat_units: float = 0.0
    veg_units: float = 0.0
    fruit_units: float = 0.0
    grams_per_single_item: float | None = None
    grams_per_cup: float | None = None
    grams_per_tbsp: float | None = None
    items_per_unit: float | None = None

    def encoding(self, method: MeasurementMethod) -> float | None:
        """Return the encoding value for a measurement method, if any."""
        if method is MeasurementMethod.DIRECT:
            return None
        return getattr(self, method.value)

    @property
    def is_direct(self) -> bool:
        return self.category in DIRECT_CATEGORIES


@dataclass(frozen=True)
class MeasurementOption:
    """A measurement method offered for a food, with its serving label."""

    method: MeasurementMethod
    value: float
    label: str
