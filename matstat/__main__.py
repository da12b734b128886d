"""CLI entry point: ``python -m matstat``."""

from matstat.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
