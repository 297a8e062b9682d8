"""Row grouper: cuts the row stream into one block per exercise."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from lift_log.models.constants import ROWS_PER_EXERCISE
from lift_log.models.row import ExerciseBlock, Row
from lift_log.parsing.tokenizer import partition

logger = logging.getLogger(__name__)


def group_rows(rows: Sequence[Row]) -> list[ExerciseBlock]:
    """Group rows into ExerciseBlocks of one title row plus six detail rows.

    An incomplete trailing block is ignored rather than treated as an error.
    """
    chunks = partition(rows, ROWS_PER_EXERCISE)
    if chunks and len(chunks[-1]) < ROWS_PER_EXERCISE:
        dropped = chunks.pop()
        logger.debug("Dropped %d trailing row(s) short of an exercise block", len(dropped))
    return [ExerciseBlock.from_rows(chunk) for chunk in chunks]
