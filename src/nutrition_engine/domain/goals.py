"""Domain models for daily targets and progress."""

from dataclasses import dataclass
from enum import StrEnum


class GoalDimension(StrEnum):
    """Target dimensions and the macro field each one tracks."""

    CALORIES = "calories"
    PROTEIN = "protein"
    CARB = "carb"
    FAT = "fat"
    VEG = "veg"
    FRUIT = "fruit"

    @property
    def macro_field(self) -> str:
        if self is GoalDimension.CALORIES:
            return "kcal"
        return f"{self.value}_units"


@dataclass(frozen=True)
class GoalSet:
    """Per-user daily targets; zero veg/fruit means no cap."""

    calories: float = 0.0
    protein: float = 0.0
    carb: float = 0.0
    fat: float = 0.0
    veg: float = 0.0
    fruit: float = 0.0

    def target(self, dimension: GoalDimension) -> float:
        return getattr(self, dimension.value)


@dataclass(frozen=True)
class MacroProgress:
    """Progress of one dimension toward its goal."""

    dimension: GoalDimension
    value: float
    goal: float
    progress: float
    is_over_goal: bool
    remaining: float


@dataclass(frozen=True)
class GoalEvaluation:
    """Progress for every goal dimension."""

    dimensions: dict[GoalDimension, MacroProgress]

    def __getitem__(self, dimension: GoalDimension) -> MacroProgress:
        return self.dimensions[dimension]

    @property
    def over_goal(self) -> list[GoalDimension]:
        return [dim for dim, item in self.dimensions.items() if item.is_over_goal]
