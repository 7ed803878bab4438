"""Pydantic models for raw records handed to the engine by storage and forms."""

import math
import re
from uuid import UUID

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from nutrition_engine.domain.body import Gender, ProfileMetrics, SkinfoldSet
from nutrition_engine.domain.errors import EngineError, ErrorKind
from nutrition_engine.domain.foods import FoodCategory, FoodRecord, MeasurementMethod
from nutrition_engine.domain.goals import GoalSet
from nutrition_engine.domain.macros import LoggedItem

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def _blank_to_none(value: object) -> object:
    if isinstance(value, str) and not value.strip():
        return None
    return value


def parse_quantity(raw: object) -> float | EngineError:
    """Parse a user-entered quantity into a positive float."""
    if isinstance(raw, bool) or raw is None:
        return EngineError(ErrorKind.INVALID_QUANTITY, "Quantity is required")
    if isinstance(raw, str):
        try:
            value = float(raw.strip())
        except ValueError:
            return EngineError(
                ErrorKind.INVALID_QUANTITY, f"Quantity {raw!r} is not a number"
            )
    elif isinstance(raw, int | float):
        value = float(raw)
    else:
        return EngineError(ErrorKind.INVALID_QUANTITY, f"Unsupported quantity {raw!r}")
    if not math.isfinite(value) or value <= 0:
        return EngineError(
            ErrorKind.INVALID_QUANTITY, f"Quantity must be positive, got {raw!r}"
        )
    return value


def parse_age(raw: object) -> int | None:
    """Parse an age field stored as text; leading digits are enough."""
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        return int(raw) if math.isfinite(raw) else None
    match = _LEADING_INT.match(str(raw))
    if match is None:
        return None
    return int(match.group(1))


class FoodRecordPayload(BaseModel):
    """Food bank row, accepting the stored column spellings."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str
    name: str = ""
    category: FoodCategory
    kcal_per_unit: float = Field(
        default=0.0,
        validation_alias=AliasChoices(
            "kcal_per_unit", "caloreis_per_unit", "calories_per_unit"
        ),
    )
    protein_units: float = Field(
        default=0.0, validation_alias=AliasChoices("protein_units", "protien_units")
    )
    carb_units: float = 0.0
    fat_units: float = Field(
        default=0.0, validation_alias=AliasChoices("fat_units", "fats_units")
    )
    veg_units: float = 0.0
    fruit_units: float = 0.0
    grams_per_single_item: float | None = None
    grams_per_cup: float | None = None
    grams_per_tbsp: float | None = None
    items_per_unit: float | None = None

    @field_validator("id", mode="before")
    @classmethod
    def _id_to_str(cls, value: object) -> object:
        if isinstance(value, int | UUID):
            return str(value)
        return value

    @field_validator(
        "kcal_per_unit",
        "protein_units",
        "carb_units",
        "fat_units",
        "veg_units",
        "fruit_units",
        mode="before",
    )
    @classmethod
    def _rate_default(cls, value: object) -> object:
        value = _blank_to_none(value)
        return 0.0 if value is None else value

    @field_validator(
        "grams_per_single_item",
        "grams_per_cup",
        "grams_per_tbsp",
        "items_per_unit",
        mode="before",
    )
    @classmethod
    def _encoding(cls, value: object) -> object:
        return _blank_to_none(value)

    def to_domain(self) -> FoodRecord:
        return FoodRecord(**self.model_dump())


class LoggedItemPayload(BaseModel):
    """Diary row referencing a food and the quantity the user entered."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: UUID
    meal_category: str
    food_id: str
    quantity: float
    measurement_method: MeasurementMethod

    @field_validator("food_id", mode="before")
    @classmethod
    def _food_id_to_str(cls, value: object) -> object:
        if isinstance(value, int | UUID):
            return str(value)
        return value

    @field_validator("quantity", mode="before")
    @classmethod
    def _quantity(cls, value: object) -> object:
        parsed = parse_quantity(value)
        if isinstance(parsed, EngineError):
            raise ValueError(parsed.reason)
        return parsed

    def to_domain(self) -> LoggedItem:
        return LoggedItem(
            id=self.id,
            meal_category=self.meal_category,
            food_id=self.food_id,
            quantity=self.quantity,
            measurement_method=self.measurement_method,
        )


class GoalPayload(BaseModel):
    """Targets from a profile or a template; missing values count as zero."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    calories: float = Field(
        default=0.0,
        ge=0,
        validation_alias=AliasChoices("calories", "kcal_goal", "kcal_plan"),
    )
    protein: float = Field(
        default=0.0, ge=0, validation_alias=AliasChoices("protein", "protein_units")
    )
    carb: float = Field(
        default=0.0, ge=0, validation_alias=AliasChoices("carb", "carb_units")
    )
    fat: float = Field(
        default=0.0, ge=0, validation_alias=AliasChoices("fat", "fat_units")
    )
    veg: float = Field(
        default=0.0, ge=0, validation_alias=AliasChoices("veg", "veg_units")
    )
    fruit: float = Field(
        default=0.0, ge=0, validation_alias=AliasChoices("fruit", "fruit_units")
    )

    @field_validator("*", mode="before")
    @classmethod
    def _missing_is_zero(cls, value: object) -> object:
        value = _blank_to_none(value)
        return 0.0 if value is None else value

    def to_domain(self) -> GoalSet:
        return GoalSet(**self.model_dump())


class ProfilePayload(BaseModel):
    """Profile fields used by the estimates."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    gender: Gender | None = None
    age: int | None = None
    height: float | None = None
    body_weight: float | None = None

    @field_validator("gender", mode="before")
    @classmethod
    def _gender(cls, value: object) -> object:
        value = _blank_to_none(value)
        if isinstance(value, str):
            value = value.strip().lower()
            if value not in {gender.value for gender in Gender}:
                return None
        return value

    @field_validator("age", mode="before")
    @classmethod
    def _age(cls, value: object) -> object:
        return parse_age(_blank_to_none(value))

    @field_validator("height", "body_weight", mode="before")
    @classmethod
    def _measure(cls, value: object) -> object:
        return _blank_to_none(value)

    def to_domain(self) -> ProfileMetrics:
        return ProfileMetrics(
            gender=self.gender,
            age=self.age,
            height_cm=self.height,
            body_weight_kg=self.body_weight,
        )


class MeasurementPayload(BaseModel):
    """Body measurement form; the four skinfolds go together."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    body_weight: float | None = None
    height: float | None = None
    biceps_skinfold: float | None = Field(
        default=None,
        validation_alias=AliasChoices("biceps_skinfold", "front_arm_skinfold"),
    )
    triceps_skinfold: float | None = Field(
        default=None,
        validation_alias=AliasChoices("triceps_skinfold", "back_arm_skinfold"),
    )
    subscapular_skinfold: float | None = None
    suprailiac_skinfold: float | None = Field(
        default=None,
        validation_alias=AliasChoices("suprailiac_skinfold", "abdominal_skinfold"),
    )
    body_density: float | None = None
    body_fat_percentage: float | None = None

    @field_validator("*", mode="before")
    @classmethod
    def _blank(cls, value: object) -> object:
        return _blank_to_none(value)

    def skinfolds(self) -> SkinfoldSet | None:
        """Return the skinfold set, or None unless all four are present."""
        readings = (
            self.biceps_skinfold,
            self.triceps_skinfold,
            self.subscapular_skinfold,
            self.suprailiac_skinfold,
        )
        if any(value is None for value in readings):
            return None
        return SkinfoldSet(*readings)

    def merge_profile(self, profile: ProfileMetrics) -> ProfileMetrics:
        """Overlay measured weight and height on the stored profile."""
        return ProfileMetrics(
            gender=profile.gender,
            age=profile.age,
            height_cm=self.height or profile.height_cm,
            body_weight_kg=self.body_weight or profile.body_weight_kg,
        )
