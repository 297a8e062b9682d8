"""Spreadsheet row models: raw cells before any numeric parsing."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from lift_log.exceptions import BlockShapeError, RowShapeError
from lift_log.models.constants import COLS_PER_ROW, ROWS_PER_EXERCISE


@dataclass(frozen=True)
class Row:
    """One copied spreadsheet row of exactly six raw cells.

    For a title row only the first cell is populated and holds the
    exercise name (see ``title``).
    """

    sets: str
    reps: str
    rpe: str
    weight: str
    actual_weight: str
    actual_rpe: str

    @classmethod
    def from_cells(cls, cells: Sequence[str]) -> Row:
        """Build a Row from a six-element cell sequence.

        Raises:
            RowShapeError: If ``cells`` does not hold exactly six cells.
        """
        if len(cells) != COLS_PER_ROW:
            raise RowShapeError(len(cells), COLS_PER_ROW)
        return cls(*cells)

    @property
    def title(self) -> str:
        return self.sets


@dataclass(frozen=True)
class ExerciseBlock:
    """A title row followed by the six detail rows of one exercise."""

    title: Row
    details: tuple[Row, ...]

    @classmethod
    def from_rows(cls, rows: Sequence[Row]) -> ExerciseBlock:
        """Build a block from exactly seven rows (title first).

        Raises:
            BlockShapeError: If ``rows`` does not hold exactly seven rows.
        """
        if len(rows) != ROWS_PER_EXERCISE:
            raise BlockShapeError(len(rows), ROWS_PER_EXERCISE)
        title, *details = rows
        return cls(title=title, details=tuple(details))

    @property
    def name(self) -> str:
        return self.title.title
