"""Conversion of logged quantities into macro contributions."""

import logging
import math
from dataclasses import dataclass, field

from nutrition_engine.config import DEFAULT_KCAL_PER_UNIT
from nutrition_engine.domain.errors import EngineError, ErrorKind
from nutrition_engine.domain.foods import FoodCategory, FoodRecord, MeasurementMethod
from nutrition_engine.domain.macros import Contribution
from nutrition_engine.services.units import is_method_available

_logger = logging.getLogger(__name__)


@dataclass
class PortionConverter:
    """Turns a (food, method, quantity) triple into a Contribution."""

    kcal_per_unit: dict[FoodCategory, float] = field(
        default_factory=lambda: dict(DEFAULT_KCAL_PER_UNIT)
    )
    unit_rounding_step: float = 0.5
    debug: bool = False

    def __post_init__(self) -> None:
        self.kcal_per_unit = {**DEFAULT_KCAL_PER_UNIT, **self.kcal_per_unit}

    def servings(
        self, food: FoodRecord, method: MeasurementMethod, quantity: float
    ) -> float | EngineError:
        """Return how many portions the quantity represents."""
        if not _is_positive_number(quantity):
            return EngineError(
                ErrorKind.INVALID_QUANTITY,
                f"Quantity must be a positive number, got {quantity!r}",
            )
        if not is_method_available(food, method):
            return EngineError(
                ErrorKind.NO_MEASUREMENT_AVAILABLE,
                f"Food {food.name!r} has no {method.value} measurement",
            )
        if method is MeasurementMethod.DIRECT:
            return float(quantity)
        encoding = food.encoding(method)
        # is_method_available guarantees a positive encoding here.
        return quantity / encoding

    def convert(
        self, food: FoodRecord, method: MeasurementMethod, quantity: float
    ) -> Contribution | EngineError:
        """Compute the contribution of a logged quantity of a food."""
        servings = self.servings(food, method, quantity)
        if isinstance(servings, EngineError):
            if self.debug:
                _logger.info(
                    "Portion rejected: food=%s method=%s reason=%s",
                    food.id,
                    method.value,
                    servings.reason,
                )
            return servings
        contribution = Contribution(
            quantity=float(quantity),
            measurement_method=method,
            servings=servings,
            kcal=food.kcal_per_unit * servings,
            protein_units=food.protein_units * servings,
            carb_units=food.carb_units * servings,
            fat_units=food.fat_units * servings,
            veg_units=food.veg_units * servings,
            fruit_units=food.fruit_units * servings,
        )
        if self.debug:
            _logger.info(
                "Portion computed: food=%s method=%s servings=%s kcal=%s",
                food.id,
                method.value,
                servings,
                contribution.kcal,
            )
        return contribution

    def recompute(
        self, contribution: Contribution, food: FoodRecord, quantity: float
    ) -> Contribution | EngineError:
        """Return a fresh contribution for an edited quantity."""
        return self.convert(food, contribution.measurement_method, quantity)

    def estimate_units(self, kcal: float, category: FoodCategory) -> float | EngineError:
        """Estimate category portions from kilocalories, rounded to the step."""
        if not _is_number(kcal) or kcal < 0:
            return EngineError(
                ErrorKind.INVALID_QUANTITY,
                f"Calories must be a non-negative number, got {kcal!r}",
            )
        units = kcal / self.kcal_per_unit[category]
        step = self.unit_rounding_step
        return math.floor(units / step + 0.5) * step


def _is_number(value: object) -> bool:
    if isinstance(value, bool) or not isinstance(value, int | float):
        return False
    return math.isfinite(value)


def _is_positive_number(value: object) -> bool:
    return _is_number(value) and value > 0
