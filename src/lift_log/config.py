"""Environment-variable-based configuration."""

from __future__ import annotations

import os

LOG_LEVEL: str = os.environ.get("LIFT_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
QUERY_PARAM: str = os.environ.get("LIFT_LOG_QUERY_PARAM", "data")
