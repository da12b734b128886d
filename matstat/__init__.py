"""matstat: per-row / per-column integer averages and medians of a text matrix."""

__version__ = "1.0.0"
