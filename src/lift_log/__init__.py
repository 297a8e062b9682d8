"""lift_log: format copied spreadsheet workout plans as a dated log."""

from lift_log.exceptions import (
    BlockShapeError,
    LiftLogError,
    PayloadDecodeError,
    RowShapeError,
)
from lift_log.pipeline import build_workout_log, decode_payload, parse_workout

__all__ = [
    "BlockShapeError",
    "LiftLogError",
    "PayloadDecodeError",
    "RowShapeError",
    "build_workout_log",
    "decode_payload",
    "parse_workout",
]
