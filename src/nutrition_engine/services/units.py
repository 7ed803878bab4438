"""Measurement methods and serving descriptions for food records."""

from nutrition_engine.domain.foods import (
    ENCODED_METHODS,
    FoodRecord,
    MeasurementMethod,
    MeasurementOption,
)

_SINGULAR = {
    MeasurementMethod.GRAMS_PER_SINGLE_ITEM: "one gram",
    MeasurementMethod.GRAMS_PER_CUP: "one cup",
    MeasurementMethod.GRAMS_PER_TBSP: "one tablespoon",
    MeasurementMethod.ITEMS_PER_UNIT: "one item",
}

_PLURAL = {
    MeasurementMethod.GRAMS_PER_SINGLE_ITEM: "grams",
    MeasurementMethod.GRAMS_PER_CUP: "cups",
    MeasurementMethod.GRAMS_PER_TBSP: "tablespoons",
    MeasurementMethod.ITEMS_PER_UNIT: "items",
}

PORTION_SUFFIX = "one portion"


DISPLAY_PRECISION = 1


def format_unit(value: float, precision: int = DISPLAY_PRECISION) -> str:
    """Format a number for display: whole numbers plain, others rounded."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.{precision}f}"


def measurement_label(
    method: MeasurementMethod, value: float, precision: int = DISPLAY_PRECISION
) -> str:
    """Describe an encoding value, e.g. "one cup" or "30 grams"."""
    if value == 1:
        return _SINGULAR[method]
    return f"{format_unit(value, precision)} {_PLURAL[method]}"


def available_methods(
    food: FoodRecord, precision: int = DISPLAY_PRECISION
) -> list[MeasurementOption]:
    """Return measurement methods whose encoding is present and positive."""
    options: list[MeasurementOption] = []
    for method in ENCODED_METHODS:
        value = food.encoding(method)
        if value is None or value <= 0:
            continue
        options.append(
            MeasurementOption(
                method=method,
                value=value,
                label=measurement_label(method, value, precision),
            )
        )
    return options


def is_method_available(food: FoodRecord, method: MeasurementMethod) -> bool:
    """Return True when the converter accepts the method for this food."""
    if method is MeasurementMethod.DIRECT:
        return food.is_direct or not available_methods(food)
    return any(option.method is method for option in available_methods(food))


def option_text(option: MeasurementOption) -> str:
    """Describe a single selected method relative to one portion."""
    return f"{option.label} = {PORTION_SUFFIX}"


def serving_text(food: FoodRecord, precision: int = DISPLAY_PRECISION) -> str | None:
    """Describe every available method as equal to one portion."""
    options = available_methods(food, precision)
    if not options:
        return None
    parts = [option.label for option in options]
    return " = ".join([*parts, PORTION_SUFFIX])
