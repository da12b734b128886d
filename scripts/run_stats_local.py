# scripts/run_stats_local.py
from __future__ import annotations

from matstat.api import export_stats_to_csv, render_report, run_matrix_stats
from matstat.contracts import SourceModel, StatsRunConfig

# ==== EDIT THESE AS YOU LIKE ==================================================
# Example A: file on disk
# SOURCE = SourceModel(path=r"./data/matrix.txt", width_policy="strict")

# Example B: inline matrix
SOURCE = SourceModel(
    text="1 2 3\n4 5 6\n",
    width_policy="last",   # "strict" rejects ragged rows instead of warning
)

AXIS = "cols"              # "rows" or "cols"

CSV_DEST = None            # e.g. "./out/" to also write a CSV export
# ============================================================================


def main():
    cfg = StatsRunConfig(source=SOURCE, axis=AXIS)
    result = run_matrix_stats(cfg)

    print(f"\n=== {AXIS.upper()} STATS ({result.num_rows}x{result.num_cols}) ===")
    print(render_report(result), end="")

    if CSV_DEST:
        exported = export_stats_to_csv(result, dest=CSV_DEST)
        print(f"\nWrote {exported['path']} ({exported['size']} bytes)")


if __name__ == "__main__":
    main()
