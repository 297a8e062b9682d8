"""Data models for lift_log."""

from lift_log.models.constants import (
    COLS_PER_ROW,
    DETAIL_ROWS_PER_EXERCISE,
    ROWS_PER_EXERCISE,
)
from lift_log.models.exercise import Exercise, SetGroup, WorkoutSet
from lift_log.models.row import ExerciseBlock, Row

__all__ = [
    "COLS_PER_ROW",
    "DETAIL_ROWS_PER_EXERCISE",
    "Exercise",
    "ExerciseBlock",
    "ROWS_PER_EXERCISE",
    "Row",
    "SetGroup",
    "WorkoutSet",
]
