"""Formatter: renders set groups and exercises as log lines.

Line format: ``{actual_weight}kg {count}x{reps} @ {rpe}``, e.g.
``80kg 3x8 @ 7-8``.
"""

from __future__ import annotations

from lift_log.formatting.coalescer import coalesce_sets
from lift_log.models.constants import (
    ABSENT_NUMBER_MARKER,
    INVALID_NUMBER_MARKER,
    LOW_RPE_MARKER,
)
from lift_log.models.exercise import Exercise, SetGroup, WorkoutSet


def format_number(value: float | None, missing: str = ABSENT_NUMBER_MARKER) -> str:
    """Render a number without a trailing ``.0``; ``missing`` for None."""
    if value is None:
        return missing
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _format_lower_rpe(lower: float) -> str:
    # An RPE of zero means the set was too easy to rate.
    if lower == 0:
        return LOW_RPE_MARKER
    return format_number(lower)


def format_rpe(workout_set: WorkoutSet) -> str:
    """Render the actual RPE as a single value or a ``lower-upper`` range."""
    lower = _format_lower_rpe(workout_set.lower_actual_rpe)
    if not workout_set.is_rpe_range:
        return lower
    return f"{lower}-{format_number(workout_set.upper_actual_rpe)}"


def format_set(workout_set: WorkoutSet, num_sets: int) -> str:
    """Render ``num_sets`` repetitions of a set as one line."""
    weight = format_number(workout_set.actual_weight)
    reps = format_number(workout_set.num_reps, missing=INVALID_NUMBER_MARKER)
    return f"{weight}kg {num_sets}x{reps} @ {format_rpe(workout_set)}"


def format_group(group: SetGroup) -> str:
    return format_set(group.representative, group.count)


def format_exercise(exercise: Exercise) -> str:
    """Render an exercise as its name followed by one line per set group."""
    set_lines = [format_group(group) for group in coalesce_sets(exercise.sets)]
    return "\n".join([exercise.name, "\n".join(set_lines)])
