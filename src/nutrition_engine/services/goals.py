"""Evaluation of aggregated totals against daily goals."""

from nutrition_engine.domain.goals import (
    GoalDimension,
    GoalEvaluation,
    GoalSet,
    MacroProgress,
)
from nutrition_engine.domain.macros import MacroTotals


def progress(value: float, goal: float) -> float:
    """Return the goal ratio clamped to [0, 1]; zero goals give 0."""
    if goal <= 0:
        return 0.0
    return max(0.0, min(value / goal, 1.0))


def evaluate_dimension(
    dimension: GoalDimension, value: float, goal: float
) -> MacroProgress:
    return MacroProgress(
        dimension=dimension,
        value=value,
        goal=goal,
        progress=progress(value, goal),
        is_over_goal=goal > 0 and value > goal,
        remaining=goal - value,
    )


def evaluate(totals: MacroTotals, goals: GoalSet) -> GoalEvaluation:
    """Compare day or meal totals to a goal set."""
    return GoalEvaluation(
        dimensions={
            dimension: evaluate_dimension(
                dimension,
                getattr(totals, dimension.macro_field),
                goals.target(dimension),
            )
            for dimension in GoalDimension
        }
    )


def resolve_goal_set(
    profile: GoalSet | None,
    template: GoalSet | None,
    *,
    targets_override: bool,
) -> GoalSet:
    """Pick the active goals for a user.

    Users with overridden targets keep their own goals. Everyone else follows
    the assigned template, falling back to their own goals when none is set.
    """
    if targets_override:
        return profile or GoalSet()
    return template or profile or GoalSet()
