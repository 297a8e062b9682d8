"""Parsing stages: raw text -> rows -> exercise blocks -> exercises."""

from lift_log.parsing.expander import (
    expand_block,
    expand_detail_row,
    parse_float,
    parse_int,
    parse_rpe_range,
)
from lift_log.parsing.grouper import group_rows
from lift_log.parsing.tokenizer import partition, split_cells, tokenize

__all__ = [
    "expand_block",
    "expand_detail_row",
    "group_rows",
    "parse_float",
    "parse_int",
    "parse_rpe_range",
    "partition",
    "split_cells",
    "tokenize",
]
