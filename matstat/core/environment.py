"""Environment-driven defaults for the engine and its boundaries."""

from __future__ import annotations

import logging
import os

from matstat.contracts.types import WIDTH_POLICIES, WidthPolicy


def get_log_level() -> int:
    """Log level from ``MATSTAT_LOG_LEVEL`` (name or number), default WARNING."""
    raw = os.getenv("MATSTAT_LOG_LEVEL", "WARNING").strip()
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw.upper())
    return level if isinstance(level, int) else logging.WARNING


def get_width_policy() -> WidthPolicy:
    """Default ragged-row policy from ``MATSTAT_WIDTH_POLICY``."""
    raw = os.getenv("MATSTAT_WIDTH_POLICY", "last").strip().lower()
    if raw not in WIDTH_POLICIES:
        raise ValueError(
            f"MATSTAT_WIDTH_POLICY must be one of {', '.join(WIDTH_POLICIES)}; got {raw!r}"
        )
    return raw  # type: ignore[return-value]
