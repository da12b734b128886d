from .averages import compute_averages, rounded_mean
from .medians import compute_medians, upper_median
from .engine import StatsEngine, compute_stats

__all__ = [
    "StatsEngine",
    "compute_stats",
    "compute_averages",
    "compute_medians",
    "rounded_mean",
    "upper_median",
]
