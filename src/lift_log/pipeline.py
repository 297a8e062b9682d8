"""Pipeline: payload decoding and end-to-end workout log generation.

Usage:
    from lift_log.pipeline import build_workout_log

    text = build_workout_log(payload, today=date(2024, 3, 1))

Each stage is a pure function of its input, so the same payload and date
always produce the same log.
"""

from __future__ import annotations

import base64
import binascii
import logging
from datetime import date

from lift_log.exceptions import PayloadDecodeError
from lift_log.formatting.assembler import format_workout
from lift_log.models.exercise import Exercise
from lift_log.parsing.expander import expand_block
from lift_log.parsing.grouper import group_rows
from lift_log.parsing.tokenizer import tokenize

logger = logging.getLogger(__name__)


def decode_payload(data: str) -> str:
    """Decode a base64 payload into the pasted spreadsheet text.

    Query strings decode ``+`` as a space, so spaces are mapped back to
    ``+``, line wrapping is removed and any stripped ``=`` padding is
    restored before decoding.

    Raises:
        PayloadDecodeError: If the payload is not valid base64 or the
            decoded bytes are not UTF-8.
    """
    cleaned = "".join(data.strip().replace(" ", "+").split())
    cleaned += "=" * (-len(cleaned) % 4)
    try:
        raw = base64.b64decode(cleaned, validate=True)
        return raw.decode("utf-8")
    except (binascii.Error, UnicodeDecodeError) as exc:
        raise PayloadDecodeError(f"Could not decode workout payload: {exc}") from exc


def parse_workout(text: str) -> list[Exercise]:
    """Parse pasted spreadsheet text into Exercises."""
    rows = tokenize(text)
    blocks = group_rows(rows)
    return [expand_block(block) for block in blocks]


def build_workout_log(
    data: str,
    today: date | None = None,
    *,
    encoded: bool = True,
) -> str:
    """Build the formatted workout log from a payload.

    Args:
        data: Base64 payload, or the raw pasted text when ``encoded`` is False.
        today: Date for the log header. Defaults to the current UTC date.
        encoded: Whether ``data`` is base64 encoded.

    Returns:
        The lowercased, date-stamped workout log.
    """
    text = decode_payload(data) if encoded else data
    exercises = parse_workout(text)
    logger.info(
        "Parsed %d exercise(s) with %d set(s)",
        len(exercises),
        sum(exercise.total_sets for exercise in exercises),
    )
    return format_workout(exercises, today)
