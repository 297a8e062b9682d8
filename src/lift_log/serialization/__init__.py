"""Serialization module: export workout logs to display formats."""

from lift_log.serialization.dataframe import to_dataframe
from lift_log.serialization.html import to_html

__all__ = ["to_dataframe", "to_html"]
