"""Shared test fixtures: copied spreadsheet blocks and payloads."""

from __future__ import annotations

import base64
from datetime import date
from typing import Callable

import pytest

from lift_log.models.exercise import WorkoutSet

EMPTY_DETAIL_ROW = "0\t\t\t\t\t"


def make_block(name: str, detail_rows: list[str]) -> str:
    """Build one pasted exercise block, padding to six detail rows."""
    rows = list(detail_rows) + [EMPTY_DETAIL_ROW] * (6 - len(detail_rows))
    title = "\t".join([name, "", "", "", "", ""])
    return "\n".join([title, *rows])


@pytest.fixture
def log_date() -> date:
    return date(2024, 3, 1)


@pytest.fixture
def block_factory() -> Callable[[str, list[str]], str]:
    return make_block


@pytest.fixture
def bench_press_text() -> str:
    """Bench Press with six identical 3x8 @ 80kg detail rows."""
    return make_block("Bench Press", ["3\t8\t7\t80\t80\t7-8"] * 6)


@pytest.fixture
def squat_text() -> str:
    """Competition Squat: two top sets, then back-off sets."""
    return make_block(
        "Competition Squat",
        [
            "1\t3\t8\t140\t140\t8",
            "1\t3\t8\t140\t142.5\t8.5",
            "3\t5\t7\t120\t120\t6-7",
        ],
    )


@pytest.fixture
def encode() -> Callable[[str], str]:
    def _encode(text: str) -> str:
        return base64.b64encode(text.encode("utf-8")).decode("ascii")

    return _encode


@pytest.fixture
def set_factory() -> Callable[..., WorkoutSet]:
    def _make(**overrides) -> WorkoutSet:
        defaults = dict(num_reps=5, actual_weight=100.0)
        defaults.update(overrides)
        return WorkoutSet(**defaults)

    return _make
