"""Tokenizer: splits pasted spreadsheet text into fixed-width rows.

Copying cells to the clipboard as text on iOS turns tab column delimiters
into newlines, so column and row delimiters cannot be told apart. Every
tab is therefore folded into a newline and the flat cell stream is cut
into rows of ``COLS_PER_ROW`` cells, which behaves the same on every
platform.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TypeVar

from lift_log.models.constants import COLS_PER_ROW
from lift_log.models.row import Row

logger = logging.getLogger(__name__)

T = TypeVar("T")


def partition(items: Sequence[T], size: int) -> list[list[T]]:
    """Split ``items`` into consecutive chunks of ``size``.

    The final chunk holds the remainder and may be shorter than ``size``.

    Raises:
        ValueError: If ``size`` is not positive.
    """
    if size <= 0:
        raise ValueError(f"Partition size must be positive, got {size}")
    return [list(items[i:i + size]) for i in range(0, len(items), size)]


def split_cells(text: str) -> list[str]:
    """Normalize delimiters and return the flat list of cells."""
    normalized = text.replace("\r\n", "\n").replace("\t", "\n")
    return normalized.split("\n")


def tokenize(text: str) -> list[Row]:
    """Parse pasted spreadsheet text into Rows.

    A trailing group of fewer than ``COLS_PER_ROW`` cells is discarded.
    """
    cells = split_cells(text)
    chunks = partition(cells, COLS_PER_ROW)
    if chunks and len(chunks[-1]) < COLS_PER_ROW:
        dropped = chunks.pop()
        logger.debug("Dropped %d trailing cell(s) short of a full row", len(dropped))
    return [Row.from_cells(chunk) for chunk in chunks]
