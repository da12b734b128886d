"""Filesystem roots for the backend I/O boundary."""

from __future__ import annotations

import os


def get_upload_dir() -> str:
    """Directory that request paths resolve against (``MATSTAT_UPLOAD_DIR``, default ./uploads)."""
    return os.path.abspath(os.getenv("MATSTAT_UPLOAD_DIR", os.path.abspath("./uploads")))
