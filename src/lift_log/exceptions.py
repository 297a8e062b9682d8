"""Custom exception hierarchy for lift_log."""

from __future__ import annotations


class LiftLogError(Exception):
    """Base exception for all lift_log errors."""


class RowShapeError(LiftLogError):
    """A Row was built from the wrong number of cells."""

    def __init__(self, num_cells: int, expected: int) -> None:
        super().__init__(f"Row needs exactly {expected} cells, got {num_cells}")
        self.num_cells = num_cells
        self.expected = expected


class BlockShapeError(LiftLogError):
    """An ExerciseBlock was built from the wrong number of rows."""

    def __init__(self, num_rows: int, expected: int) -> None:
        super().__init__(f"Exercise block needs exactly {expected} rows, got {num_rows}")
        self.num_rows = num_rows
        self.expected = expected


class PayloadDecodeError(LiftLogError):
    """The base64 payload could not be decoded into text."""
