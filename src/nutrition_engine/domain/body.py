"""Domain models for body measurements and estimates."""

from dataclasses import dataclass
from enum import StrEnum

from nutrition_engine.domain.errors import EngineError


class Gender(StrEnum):
    MALE = "male"
    FEMALE = "female"


class BmiClass(StrEnum):
    """BMI classification bands."""

    UNDERWEIGHT = "underweight"
    NORMAL = "normal"
    OVERWEIGHT = "overweight"
    OBESE_CLASS_1 = "obese_class_1"
    OBESE_CLASS_2 = "obese_class_2"
    OBESE_CLASS_3 = "obese_class_3"


class BodyFatSource(StrEnum):
    MANUAL = "manual"
    CALCULATED = "calculated"


@dataclass(frozen=True)
class ProfileMetrics:
    """Profile inputs for estimates; any field may be missing."""

    gender: Gender | None = None
    age: int | None = None
    height_cm: float | None = None
    body_weight_kg: float | None = None


@dataclass(frozen=True)
class SkinfoldSet:
    """Caliper readings in millimetres."""

    biceps: float
    triceps: float
    subscapular: float
    suprailiac: float

    @property
    def total(self) -> float:
        return self.biceps + self.triceps + self.subscapular + self.suprailiac


@dataclass(frozen=True)
class BmiResult:
    bmi: float
    classification: BmiClass


@dataclass(frozen=True)
class RmrResult:
    """Resting metabolic rate with the height actually used."""

    rmr: float
    height_cm: float


@dataclass(frozen=True)
class BodyDensityResult:
    density: float
    skinfold_sum: float
    log_sum: float


@dataclass(frozen=True)
class BodyFatResult:
    """Final body-fat percentage and where it came from."""

    percentage: float
    source: BodyFatSource
    density: float | None = None


@dataclass(frozen=True)
class BodyComposition:
    fat_mass: float
    lean_mass: float


@dataclass(frozen=True)
class MeasurementReport:
    """All estimates for one measurement entry."""

    bmi: BmiResult | EngineError
    rmr: RmrResult | EngineError
    body_density: BodyDensityResult | EngineError
    body_fat: BodyFatResult | EngineError
    composition: BodyComposition | EngineError

    def as_record(self) -> dict[str, object]:
        """Return the persisted shape; missing estimates are None."""
        record: dict[str, object] = {
            "bmi": None,
            "rmr": None,
            "body_fat": None,
            "errors": {},
        }
        errors: dict[str, str] = {}
        if isinstance(self.bmi, BmiResult):
            record["bmi"] = {
                "bmi": self.bmi.bmi,
                "classification": self.bmi.classification.value,
            }
        else:
            errors["bmi"] = self.bmi.reason
        if isinstance(self.rmr, RmrResult):
            record["rmr"] = {"rmr": self.rmr.rmr}
        else:
            errors["rmr"] = self.rmr.reason
        if isinstance(self.body_density, EngineError):
            errors["body_density"] = self.body_density.reason
        if isinstance(self.body_fat, BodyFatResult):
            fat_mass = lean_mass = None
            if isinstance(self.composition, BodyComposition):
                fat_mass = self.composition.fat_mass
                lean_mass = self.composition.lean_mass
            else:
                errors["composition"] = self.composition.reason
            record["body_fat"] = {
                "body_density": self.body_fat.density,
                "body_fat_percentage": self.body_fat.percentage,
                "source": self.body_fat.source.value,
                "fat_mass": fat_mass,
                "lean_mass": lean_mass,
            }
        else:
            errors["body_fat"] = self.body_fat.reason
        record["errors"] = errors
        return record
