"""Tests for boundary records."""

from uuid import uuid4

import pytest
from pydantic import ValidationError

from nutrition_engine.domain.body import Gender
from nutrition_engine.domain.errors import EngineError, ErrorKind
from nutrition_engine.domain.foods import FoodCategory, MeasurementMethod
from nutrition_engine.domain.goals import GoalSet
from nutrition_engine.schemas import (
    FoodRecordPayload,
    GoalPayload,
    LoggedItemPayload,
    MeasurementPayload,
    ProfilePayload,
    parse_age,
    parse_quantity,
)
from nutrition_engine.services.anthropometrics import body_density


def test_food_record_accepts_stored_column_names() -> None:
    payload = FoodRecordPayload.model_validate(
        {
            "id": 42,
            "name": "Tuna",
            "category": "protein",
            "caloreis_per_unit": "200",
            "protien_units": 1,
            "carb_units": None,
            "fats_units": "",
            "veg_units": 0,
            "fruit_units": 0,
            "grams_per_single_item": "80",
            "items_per_unit": None,
            "grams_per_cup": "",
            "grams_per_tbsp": 0,
            "img_url": "https://example.com/tuna.png",
        }
    )

    food = payload.to_domain()

    assert food.id == "42"
    assert food.category is FoodCategory.PROTEIN
    assert food.kcal_per_unit == 200
    assert food.protein_units == 1
    assert food.carb_units == 0
    assert food.fat_units == 0
    assert food.grams_per_single_item == 80
    assert food.grams_per_cup is None
    assert food.grams_per_tbsp == 0


def test_food_record_rejects_unknown_category() -> None:
    with pytest.raises(ValidationError):
        FoodRecordPayload.model_validate(
            {"id": "x", "category": "dessert", "kcal_per_unit": 100}
        )


@pytest.mark.parametrize(
    ("raw", "expected"), [("2.5", 2.5), (" 3 ", 3.0), (4, 4.0), (0.25, 0.25)]
)
def test_parse_quantity(raw: object, expected: float) -> None:
    assert parse_quantity(raw) == expected


@pytest.mark.parametrize("raw", [None, "", "abc", "0", -2, "nan", True, [1]])
def test_parse_quantity_rejects(raw: object) -> None:
    result = parse_quantity(raw)

    assert isinstance(result, EngineError)
    assert result.kind is ErrorKind.INVALID_QUANTITY


def test_logged_item_payload() -> None:
    item_id = uuid4()

    item = LoggedItemPayload.model_validate(
        {
            "id": str(item_id),
            "meal_category": "lunch",
            "food_id": 7,
            "quantity": "150",
            "measurement_method": "grams_per_single_item",
        }
    ).to_domain()

    assert item.id == item_id
    assert item.food_id == "7"
    assert item.quantity == 150
    assert item.measurement_method is MeasurementMethod.GRAMS_PER_SINGLE_ITEM


def test_logged_item_payload_rejects_bad_quantity() -> None:
    with pytest.raises(ValidationError):
        LoggedItemPayload.model_validate(
            {
                "id": str(uuid4()),
                "meal_category": "lunch",
                "food_id": "7",
                "quantity": "0",
                "measurement_method": "direct",
            }
        )


def test_goal_payload_from_profile_columns() -> None:
    goals = GoalPayload.model_validate(
        {
            "kcal_goal": 1800,
            "protein_units": "6",
            "carb_units": 5,
            "fat_units": None,
            "veg_units": 4,
        }
    ).to_domain()

    assert goals == GoalSet(calories=1800, protein=6, carb=5, fat=0, veg=4, fruit=0)


def test_goal_payload_rejects_negative_goal() -> None:
    with pytest.raises(ValidationError):
        GoalPayload.model_validate({"calories": -1})


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("30", 30), (" 41 years", 41), (29.9, 29), (35, 35), ("abc", None), (None, None)],
)
def test_parse_age(raw: object, expected: int | None) -> None:
    assert parse_age(raw) == expected


def test_profile_payload() -> None:
    profile = ProfilePayload.model_validate(
        {"gender": "Male", "age": "30", "height": "180", "body_weight": 80}
    ).to_domain()

    assert profile.gender is Gender.MALE
    assert profile.age == 30
    assert profile.height_cm == 180
    assert profile.body_weight_kg == 80


def test_profile_payload_unknown_gender_is_missing() -> None:
    profile = ProfilePayload.model_validate({"gender": "other", "age": ""}).to_domain()

    assert profile.gender is None
    assert profile.age is None


def test_measurement_payload_skinfolds() -> None:
    payload = MeasurementPayload.model_validate(
        {
            "body_weight": "78.5",
            "front_arm_skinfold": "5",
            "back_arm_skinfold": 10,
            "subscapular_skinfold": 12,
            "abdominal_skinfold": "13",
            "body_fat_percentage": "",
        }
    )

    skinfolds = payload.skinfolds()

    assert skinfolds is not None
    assert skinfolds.total == 40
    assert payload.body_fat_percentage is None


def test_measurement_payload_partial_skinfolds() -> None:
    payload = MeasurementPayload.model_validate({"biceps_skinfold": 5})

    assert payload.skinfolds() is None


def test_measurement_payload_merges_profile() -> None:
    profile = ProfilePayload.model_validate(
        {"gender": "female", "age": 40, "height": 165, "body_weight": 70}
    ).to_domain()
    payload = MeasurementPayload.model_validate({"body_weight": 68})

    merged = payload.merge_profile(profile)

    assert merged.body_weight_kg == 68
    assert merged.height_cm == 165
    assert merged.gender is Gender.FEMALE


def test_zero_skinfold_reaches_range_check() -> None:
    payload = MeasurementPayload.model_validate(
        {
            "biceps_skinfold": "0",
            "triceps_skinfold": 10,
            "subscapular_skinfold": 12,
            "suprailiac_skinfold": 13,
        }
    )

    skinfolds = payload.skinfolds()
    result = body_density(Gender.MALE, 25, skinfolds)

    assert skinfolds is not None
    assert skinfolds.biceps == 0
    assert isinstance(result, EngineError)
    assert result.kind is ErrorKind.OUT_OF_RANGE
