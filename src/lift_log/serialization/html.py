"""HTML rendering of the workout log for browser display."""

from __future__ import annotations

import html

from lift_log.models.constants import LINE_BREAK_HTML


def to_html(text: str) -> str:
    """Escape the log and replace each newline with a line-break tag."""
    return html.escape(text).replace("\n", LINE_BREAK_HTML)
