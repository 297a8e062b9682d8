"""Formatting stages: coalesce sets, render lines, assemble the log."""

from lift_log.formatting.assembler import format_workout, postprocess, yyyymmdd
from lift_log.formatting.coalescer import coalesce, coalesce_sets
from lift_log.formatting.formatter import (
    format_exercise,
    format_group,
    format_number,
    format_rpe,
    format_set,
)

__all__ = [
    "coalesce",
    "coalesce_sets",
    "format_exercise",
    "format_group",
    "format_number",
    "format_rpe",
    "format_set",
    "format_workout",
    "postprocess",
    "yyyymmdd",
]
