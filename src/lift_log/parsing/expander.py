"""Set expander: turns detail rows into individual WorkoutSet records.

Cells are parsed leniently, the way a spreadsheet user types them: the
leading number is read and anything after it is ignored, so ``"80kg"``
is 80 and ``"3 sets"`` is 3. A cell with no leading number parses to None.
"""

from __future__ import annotations

import logging
import re

from lift_log.models.exercise import Exercise, WorkoutSet
from lift_log.models.row import ExerciseBlock, Row

logger = logging.getLogger(__name__)

_INT_PREFIX_RE = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX_RE = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")

RPE_RANGE_SEPARATOR = "-"


def parse_int(cell: str) -> int | None:
    """Parse the leading integer of a cell, or None if there is none."""
    match = _INT_PREFIX_RE.match(cell)
    if match is None:
        return None
    return int(match.group(1))


def parse_float(cell: str) -> float | None:
    """Parse the leading decimal number of a cell, or None if there is none."""
    match = _FLOAT_PREFIX_RE.match(cell)
    if match is None:
        return None
    return float(match.group(1))


def parse_rpe_range(cell: str) -> tuple[float, float]:
    """Parse an actual-RPE cell such as ``"7-8"`` into (lower, upper).

    An unparsable lower bound becomes 0. A missing, unparsable or zero
    upper bound collapses the range onto the lower bound.
    """
    parts = cell.split(RPE_RANGE_SEPARATOR)
    lower = parse_float(parts[0])
    if lower is None:
        lower = 0.0
    upper = parse_float(parts[1]) if len(parts) > 1 else None
    if upper is None or upper == 0:
        upper = lower
    return lower, upper


def expand_detail_row(row: Row) -> list[WorkoutSet]:
    """Expand one detail row into ``sets`` identical WorkoutSet records.

    A row whose sets cell is not a positive number contributes nothing.
    """
    num_sets = parse_int(row.sets)
    if num_sets is None or num_sets <= 0:
        return []

    lower_rpe, upper_rpe = parse_rpe_range(row.actual_rpe)
    num_reps = parse_int(row.reps)
    if num_reps is None:
        logger.debug("Reps cell %r is not a number", row.reps)

    return [
        WorkoutSet(
            num_reps=num_reps,
            rpe=parse_float(row.rpe),
            weight=parse_float(row.weight),
            actual_weight=parse_float(row.actual_weight),
            lower_actual_rpe=lower_rpe,
            upper_actual_rpe=upper_rpe,
        )
        for _ in range(num_sets)
    ]


def expand_block(block: ExerciseBlock) -> Exercise:
    """Build an Exercise from a block, keeping detail-row order."""
    sets: list[WorkoutSet] = []
    for row in block.details:
        sets.extend(expand_detail_row(row))
    return Exercise(name=block.name, sets=tuple(sets))
