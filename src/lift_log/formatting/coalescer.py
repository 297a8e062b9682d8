"""Set coalescer: merges adjacent sets that share reps and actual weight.

Runs are merged strictly left to right: two identical sets separated by a
different set stay on separate lines. Only reps and actual weight decide a
run boundary; the RPE range of a run widens to cover every set in it.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import replace
from functools import reduce

from lift_log.models.exercise import SetGroup, WorkoutSet


def coalesce(set_a: WorkoutSet, set_b: WorkoutSet) -> WorkoutSet:
    """Return ``set_a`` with its RPE range widened to cover ``set_b``."""
    return replace(
        set_a,
        lower_actual_rpe=min(set_a.lower_actual_rpe, set_b.lower_actual_rpe),
        upper_actual_rpe=max(set_a.upper_actual_rpe, set_b.upper_actual_rpe),
    )


def _fold_set(groups: tuple[SetGroup, ...], workout_set: WorkoutSet) -> tuple[SetGroup, ...]:
    if groups and groups[-1].representative.run_key == workout_set.run_key:
        last = groups[-1]
        merged = SetGroup(
            count=last.count + 1,
            representative=coalesce(last.representative, workout_set),
        )
        return groups[:-1] + (merged,)
    return groups + (SetGroup(count=1, representative=workout_set),)


def coalesce_sets(sets: Iterable[WorkoutSet]) -> tuple[SetGroup, ...]:
    """Fold a set sequence into one SetGroup per maximal adjacent run."""
    return reduce(_fold_set, sets, ())
