from .matrix_stats import load_matrix, run_matrix_stats

__all__ = ["load_matrix", "run_matrix_stats"]
