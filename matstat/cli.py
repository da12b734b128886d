"""Command-line interface: ``matstat {-rows|-cols} [file]``.

Reads the matrix from ``file`` or, when omitted, from standard input, and
prints per-row or per-column averages and medians.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Optional

from matstat.api import MatrixError, export_stats_to_csv, render_report, run_matrix_stats
from matstat.contracts import WIDTH_POLICIES, SourceModel, StatsRunConfig
from matstat.core.environment import get_log_level, get_width_policy

PROG = "matstat"

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Compute rounded averages and medians of a whitespace-delimited integer matrix.",
    )
    axis = parser.add_mutually_exclusive_group(required=True)
    axis.add_argument("-r", "-rows", "--rows", action="store_true", help="Statistics per row")
    axis.add_argument("-c", "-cols", "--cols", action="store_true", help="Statistics per column")

    parser.add_argument("file", nargs="?", default=None, help="Matrix file (default: standard input)")
    parser.add_argument(
        "--width-policy",
        choices=WIDTH_POLICIES,
        default=None,
        help="Ragged rows: 'last' trusts the last row's width, 'strict' rejects them "
        "(default: $MATSTAT_WIDTH_POLICY or 'last')",
    )
    parser.add_argument("--csv", default=None, metavar="PATH", help="Also write results as CSV to PATH")
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase log verbosity (-v info, -vv debug)",
    )
    return parser


def _configure_logging(verbosity: int) -> None:
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = get_log_level()
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s", stream=sys.stderr)
    logging.captureWarnings(True)


def _check_readable(path: str) -> Optional[str]:
    if not os.path.isfile(path) or not os.access(path, os.R_OK):
        return f"cannot read {path}"
    if os.path.getsize(path) == 0:
        return f"{path} is empty"
    return None


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    try:
        width_policy = args.width_policy or get_width_policy()
    except ValueError as exc:
        print(f"{PROG}: {exc}", file=sys.stderr)
        return 1

    if args.file is not None:
        problem = _check_readable(args.file)
        if problem is not None:
            print(f"{PROG}: {problem}", file=sys.stderr)
            return 1

    cfg = StatsRunConfig(
        source=SourceModel(path=args.file, width_policy=width_policy),
        axis="rows" if args.rows else "cols",
    )

    try:
        result = run_matrix_stats(cfg, stream=sys.stdin)
    except MatrixError as exc:
        print(f"{PROG}: {exc}", file=sys.stderr)
        return 1
    except (OSError, ValueError) as exc:
        # UnicodeDecodeError and np.load failures land here (both ValueError)
        print(f"{PROG}: cannot read {args.file or 'standard input'}: {exc}", file=sys.stderr)
        return 1

    sys.stdout.write(render_report(result))

    if args.csv:
        try:
            exported = export_stats_to_csv(result, dest=args.csv)
        except OSError as exc:
            print(f"{PROG}: cannot write {args.csv}: {exc}", file=sys.stderr)
            return 1
        logger.info("wrote %s (%d bytes)", exported["path"], exported["size"])

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
