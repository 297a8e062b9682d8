"""Workout assembler: stitches formatted exercises into the final log."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date, datetime, timezone

from lift_log.formatting.formatter import format_exercise
from lift_log.models.constants import ABBREVIATIONS
from lift_log.models.exercise import Exercise


def yyyymmdd(today: date | None = None) -> str:
    """Return ``today`` as ``YYYY-MM-DD``, defaulting to the current UTC date."""
    if today is None:
        today = datetime.now(timezone.utc).date()
    return today.isoformat()


def postprocess(text: str) -> str:
    """Lowercase the log and shorten words listed in ABBREVIATIONS."""
    text = text.lower()
    for long_form, short_form in ABBREVIATIONS:
        text = text.replace(long_form, short_form)
    return text


def format_workout(exercises: Sequence[Exercise], today: date | None = None) -> str:
    """Render the dated workout log.

    The date heads the log, followed by a blank line and each exercise
    terminated by a blank line.
    """
    formatted = [f"{format_exercise(exercise)}\n" for exercise in exercises]
    return postprocess("\n".join([yyyymmdd(today), "", *formatted]))
