"""Parsed workout models: sets, exercises and coalesced set groups."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class WorkoutSet:
    """A single performed set.

    ``num_reps`` is None when the reps cell was not a number. The optional
    floats are None when their cell was empty or unparsable; a parsed zero
    stays zero. ``upper_actual_rpe`` defaults to ``lower_actual_rpe``, so a
    single RPE value is a range of width zero.
    """

    num_reps: int | None
    rpe: float | None = None
    weight: float | None = None
    actual_weight: float | None = None
    lower_actual_rpe: float = 0.0
    upper_actual_rpe: float | None = None

    def __post_init__(self) -> None:
        if self.upper_actual_rpe is None:
            object.__setattr__(self, "upper_actual_rpe", self.lower_actual_rpe)

    @property
    def run_key(self) -> tuple[int | None, float | None]:
        """Fields that decide whether two adjacent sets share a line."""
        return (self.num_reps, self.actual_weight)

    @property
    def is_rpe_range(self) -> bool:
        return self.lower_actual_rpe != self.upper_actual_rpe


@dataclass(frozen=True)
class Exercise:
    """An exercise name with every set expanded from its detail rows."""

    name: str
    sets: tuple[WorkoutSet, ...] = field(default_factory=tuple)

    @property
    def total_sets(self) -> int:
        return len(self.sets)


@dataclass(frozen=True)
class SetGroup:
    """A run of consecutive sets rendered as one line.

    ``representative`` carries the run's reps and weight plus the RPE range
    widened over every set in the run.
    """

    count: int
    representative: WorkoutSet
