"""Body measurement estimates: BMI, RMR, body density and body fat.

Every function returns either its result or an ``EngineError``. Missing inputs
yield ``INCOMPLETE_PROFILE``; readings or results outside the validated ranges
of the regression yield ``OUT_OF_RANGE``.
"""

import logging
import math

from nutrition_engine.domain.body import (
    BmiClass,
    BmiResult,
    BodyComposition,
    BodyDensityResult,
    BodyFatResult,
    BodyFatSource,
    Gender,
    MeasurementReport,
    ProfileMetrics,
    RmrResult,
    SkinfoldSet,
)
from nutrition_engine.domain.errors import EngineError, ErrorKind

_logger = logging.getLogger(__name__)

# Exclusive upper bounds.
_BMI_BANDS = (
    (18.5, BmiClass.UNDERWEIGHT),
    (25.0, BmiClass.NORMAL),
    (30.0, BmiClass.OVERWEIGHT),
    (35.0, BmiClass.OBESE_CLASS_1),
    (40.0, BmiClass.OBESE_CLASS_2),
)

# Heights below this are taken to be metres.
_METRE_HEIGHT_LIMIT = 50

MIN_AGE, MAX_AGE = 17, 100
MIN_SKINFOLD_MM, MAX_SKINFOLD_MM = 1.0, 50.0
MIN_DENSITY, MAX_DENSITY = 1.0, 1.1
MIN_BODY_FAT, MAX_BODY_FAT = 3.0, 50.0

# Durnin-Womersley (1974), four-site sum: (lowest age, intercept, slope).
_DURNIN_WOMERSLEY = {
    Gender.MALE: (
        (50, 1.1715, 0.0779),
        (40, 1.1620, 0.0700),
        (30, 1.1422, 0.0544),
        (20, 1.1631, 0.0632),
        (17, 1.1620, 0.0630),
    ),
    Gender.FEMALE: (
        (50, 1.1339, 0.0645),
        (40, 1.1333, 0.0612),
        (30, 1.1423, 0.0632),
        (20, 1.1599, 0.0717),
        (17, 1.1549, 0.0678),
    ),
}


def classify_bmi(bmi: float) -> BmiClass:
    for upper, classification in _BMI_BANDS:
        if bmi < upper:
            return classification
    return BmiClass.OBESE_CLASS_3


def body_mass_index(
    weight_kg: float | None, height_cm: float | None
) -> BmiResult | EngineError:
    """Compute BMI from weight in kilograms and height in centimetres."""
    if not weight_kg or not height_cm or weight_kg < 0 or height_cm < 0:
        return _incomplete("BMI needs a positive body weight and height")
    height_m = height_cm / 100
    bmi = weight_kg / (height_m * height_m)
    return BmiResult(bmi=bmi, classification=classify_bmi(bmi))


def resting_metabolic_rate(profile: ProfileMetrics) -> RmrResult | EngineError:
    """Mifflin-St Jeor resting metabolic rate in kcal/day."""
    if (
        profile.gender is None
        or profile.age is None
        or not profile.height_cm
        or not profile.body_weight_kg
    ):
        return _incomplete("RMR needs gender, age, height and body weight")
    height_cm = profile.height_cm
    if height_cm < _METRE_HEIGHT_LIMIT:
        _logger.debug("Treating height %s as metres", height_cm)
        height_cm = height_cm * 100
    base = 10 * profile.body_weight_kg + 6.25 * height_cm - 5 * profile.age
    if profile.gender == Gender.MALE:
        rmr = base + 5
    else:
        rmr = base - 161
    return RmrResult(rmr=rmr, height_cm=height_cm)


def body_density(
    gender: Gender | None, age: int | None, skinfolds: SkinfoldSet | None
) -> BodyDensityResult | EngineError:
    """Durnin-Womersley body density from four skinfold readings."""
    if gender is None or age is None or skinfolds is None:
        return _incomplete("Body density needs gender, age and four skinfolds")
    if not MIN_AGE <= age <= MAX_AGE:
        return _out_of_range(f"Age must be between {MIN_AGE}-{MAX_AGE}, got {age}")
    readings = (
        skinfolds.biceps,
        skinfolds.triceps,
        skinfolds.subscapular,
        skinfolds.suprailiac,
    )
    if any(not MIN_SKINFOLD_MM <= value <= MAX_SKINFOLD_MM for value in readings):
        return _out_of_range(
            f"Skinfold readings must be between {MIN_SKINFOLD_MM:g}-"
            f"{MAX_SKINFOLD_MM:g} mm"
        )
    total = skinfolds.total
    log_sum = math.log10(total)
    intercept, slope = _coefficients(gender, age)
    density = intercept - slope * log_sum
    if not MIN_DENSITY <= density <= MAX_DENSITY:
        return _out_of_range(
            f"Body density {density:.4f} is implausible, check the measurements"
        )
    return BodyDensityResult(density=density, skinfold_sum=total, log_sum=log_sum)


def siri_body_fat(density: float) -> float | EngineError:
    """Siri body-fat percentage from body density."""
    if not MIN_DENSITY <= density <= MAX_DENSITY:
        return _out_of_range(
            f"Body density must be between {MIN_DENSITY}-{MAX_DENSITY}, "
            f"got {density}"
        )
    percentage = (4.95 / density - 4.50) * 100
    if not MIN_BODY_FAT <= percentage <= MAX_BODY_FAT:
        return _out_of_range(
            f"Body fat {percentage:.1f}% is implausible, check the measurements"
        )
    return percentage


def resolve_body_fat(
    manual_percentage: float | None = None,
    manual_density: float | None = None,
    calculated: BodyDensityResult | EngineError | None = None,
) -> BodyFatResult | EngineError:
    """Pick the final body-fat percentage.

    A manually entered percentage within range wins, then a manually entered
    density, then the skinfold-derived density.
    """
    if manual_percentage is not None:
        if MIN_BODY_FAT <= manual_percentage <= MAX_BODY_FAT:
            return BodyFatResult(
                percentage=manual_percentage, source=BodyFatSource.MANUAL
            )
        _logger.info(
            "Ignoring manual body fat %s outside %s-%s",
            manual_percentage,
            MIN_BODY_FAT,
            MAX_BODY_FAT,
        )
    if manual_density:
        density = manual_density
        source = BodyFatSource.MANUAL
    elif isinstance(calculated, BodyDensityResult):
        density = calculated.density
        source = BodyFatSource.CALCULATED
    elif isinstance(calculated, EngineError):
        return calculated
    else:
        return _incomplete("Body fat needs a percentage, a density or skinfolds")
    percentage = siri_body_fat(density)
    if isinstance(percentage, EngineError):
        return percentage
    return BodyFatResult(percentage=percentage, source=source, density=density)


def body_composition(
    weight_kg: float | None, body_fat_percentage: float | None
) -> BodyComposition | EngineError:
    """Split body weight into fat mass and lean mass."""
    if not weight_kg or weight_kg < 0 or body_fat_percentage is None:
        return _incomplete("Body composition needs body weight and body fat")
    fat_mass = weight_kg * body_fat_percentage / 100
    return BodyComposition(fat_mass=fat_mass, lean_mass=weight_kg - fat_mass)


def estimate_measurements(
    profile: ProfileMetrics,
    skinfolds: SkinfoldSet | None = None,
    *,
    manual_body_fat: float | None = None,
    manual_density: float | None = None,
) -> MeasurementReport:
    """Run every estimate that the inputs allow."""
    density = body_density(profile.gender, profile.age, skinfolds)
    body_fat = resolve_body_fat(manual_body_fat, manual_density, density)
    if isinstance(body_fat, BodyFatResult):
        composition = body_composition(profile.body_weight_kg, body_fat.percentage)
    else:
        composition = body_fat
    return MeasurementReport(
        bmi=body_mass_index(profile.body_weight_kg, profile.height_cm),
        rmr=resting_metabolic_rate(profile),
        body_density=density,
        body_fat=body_fat,
        composition=composition,
    )


def _coefficients(gender: Gender, age: int) -> tuple[float, float]:
    for lowest_age, intercept, slope in _DURNIN_WOMERSLEY[gender]:
        if age >= lowest_age:
            return intercept, slope
    raise ValueError(f"No Durnin-Womersley bracket for age {age}")


def _incomplete(reason: str) -> EngineError:
    return EngineError(ErrorKind.INCOMPLETE_PROFILE, reason)


def _out_of_range(reason: str) -> EngineError:
    return EngineError(ErrorKind.OUT_OF_RANGE, reason)
