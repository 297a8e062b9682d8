"""Tabular export of expanded sets as a pandas DataFrame."""

from __future__ import annotations

from collections.abc import Sequence

import pandas as pd

from lift_log.models.exercise import Exercise

COLUMNS = [
    "exercise",
    "set_number",
    "reps",
    "rpe",
    "weight",
    "actual_weight",
    "lower_actual_rpe",
    "upper_actual_rpe",
]

_DTYPES = {
    "set_number": "int64",
    "reps": "Int64",
    "rpe": "float64",
    "weight": "float64",
    "actual_weight": "float64",
    "lower_actual_rpe": "float64",
    "upper_actual_rpe": "float64",
}


def to_dataframe(exercises: Sequence[Exercise]) -> pd.DataFrame:
    """One row per expanded set; ``set_number`` counts from 1 per exercise.

    Missing floats are stored as NaN and missing reps as <NA>.
    """
    records = [
        {
            "exercise": exercise.name,
            "set_number": number,
            "reps": workout_set.num_reps,
            "rpe": workout_set.rpe,
            "weight": workout_set.weight,
            "actual_weight": workout_set.actual_weight,
            "lower_actual_rpe": workout_set.lower_actual_rpe,
            "upper_actual_rpe": workout_set.upper_actual_rpe,
        }
        for exercise in exercises
        for number, workout_set in enumerate(exercise.sets, start=1)
    ]
    df = pd.DataFrame.from_records(records, columns=COLUMNS)
    return df.astype(_DTYPES)
