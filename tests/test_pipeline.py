"""Tests for the end-to-end pipeline: decoding, parsing and formatting."""

from __future__ import annotations

import base64
from datetime import date
from typing import Callable

import pytest

from lift_log.exceptions import LiftLogError, PayloadDecodeError
from lift_log.pipeline import build_workout_log, decode_payload, parse_workout


class TestDecodePayload:
    def test_round_trips_text(self, encode: Callable[[str], str]) -> None:
        assert decode_payload(encode("Bench Press\t3")) == "Bench Press\t3"

    def test_restores_missing_padding(self, encode: Callable[[str], str]) -> None:
        payload = encode("ab").rstrip("=")
        assert decode_payload(payload) == "ab"

    def test_spaces_read_as_plus(self, encode: Callable[[str], str]) -> None:
        payload = encode("~~~abc")
        assert payload == "fn5+YWJj"
        assert decode_payload(payload.replace("+", " ")) == "~~~abc"

    def test_line_wrapped_payload(self, bench_press_text: str) -> None:
        wrapped = base64.encodebytes(bench_press_text.encode("utf-8")).decode("ascii")
        assert wrapped.count("\n") > 1
        assert decode_payload(wrapped) == bench_press_text

    def test_surrounding_spaces_ignored(self, encode: Callable[[str], str]) -> None:
        assert decode_payload(f"  {encode('~~~abc')} \n") == "~~~abc"

    def test_non_utf8_bytes_raise(self) -> None:
        with pytest.raises(PayloadDecodeError):
            decode_payload(base64.b64encode(b"\xff\xfe").decode("ascii"))

    def test_malformed_base64_raises(self) -> None:
        with pytest.raises(PayloadDecodeError) as exc_info:
            decode_payload("not base64!")
        assert exc_info.value.__cause__ is not None

    def test_decode_error_is_lift_log_error(self) -> None:
        with pytest.raises(LiftLogError):
            decode_payload("@@@@")


class TestParseWorkout:
    def test_two_exercises(self, bench_press_text: str, squat_text: str) -> None:
        exercises = parse_workout(f"{bench_press_text}\n{squat_text}")
        assert [e.name for e in exercises] == ["Bench Press", "Competition Squat"]
        assert [e.total_sets for e in exercises] == [18, 5]

    def test_incomplete_trailing_block_ignored(self, bench_press_text: str) -> None:
        exercises = parse_workout(f"{bench_press_text}\nDeadlift\t\t\t\t\t\n1\t3\t8\t180\t180\t8")
        assert [e.name for e in exercises] == ["Bench Press"]

    def test_empty_text(self) -> None:
        assert parse_workout("") == []


class TestBuildWorkoutLog:
    def test_bench_press_coalesces_to_one_line(
        self,
        bench_press_text: str,
        encode: Callable[[str], str],
        log_date: date,
    ) -> None:
        log = build_workout_log(encode(bench_press_text), log_date)
        assert log == "2024-03-01\n\nbench press\n80kg 18x8 @ 7-8\n"

    def test_newline_only_paste_matches_tabbed(
        self,
        bench_press_text: str,
        encode: Callable[[str], str],
        log_date: date,
    ) -> None:
        ios_text = bench_press_text.replace("\t", "\n")
        assert build_workout_log(encode(ios_text), log_date) == build_workout_log(
            encode(bench_press_text), log_date
        )

    def test_full_workout(
        self,
        bench_press_text: str,
        squat_text: str,
        log_date: date,
    ) -> None:
        log = build_workout_log(f"{squat_text}\n{bench_press_text}", log_date, encoded=False)
        assert log == (
            "2024-03-01\n"
            "\n"
            "comp squat\n"
            "140kg 1x3 @ 8\n"
            "142.5kg 1x3 @ 8.5\n"
            "120kg 3x5 @ 6-7\n"
            "\n"
            "bench press\n"
            "80kg 18x8 @ 7-8\n"
        )

    def test_invalid_reps_render_lowercased_marker(
        self,
        block_factory: Callable[[str, list[str]], str],
        log_date: date,
    ) -> None:
        text = block_factory("Push Ups", ["2\tAMRAP\t\t\t\t"])
        log = build_workout_log(text, log_date, encoded=False)
        assert log.splitlines()[3] == "nullkg 2xnan @ <5"

    def test_bad_payload_propagates(self, log_date: date) -> None:
        with pytest.raises(PayloadDecodeError):
            build_workout_log("%%%", log_date)
