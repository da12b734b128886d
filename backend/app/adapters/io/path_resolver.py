"""Path normalization and allowlisting for user-provided inputs."""

from __future__ import annotations

import os
from typing import Optional

from .environment import get_upload_dir
from .errors import LoadError


def resolve_user_path(path: Optional[str]) -> Optional[str]:
    """Normalize and validate a user-provided path.

    - Relative paths resolve against the upload directory.
    - Absolute paths must live under the upload directory.
    - The file must exist and be non-empty.
    """
    if not path:
        return None

    p = path.strip()
    if not p:
        return None

    root = get_upload_dir()
    if os.path.isabs(p):
        ap = os.path.abspath(p)
    else:
        ap = os.path.abspath(os.path.join(root, p))

    if not (ap == root or ap.startswith(root + os.sep)):
        raise LoadError(f"Path must be under {root} (got: {path!r})")

    if not os.path.isfile(ap):
        raise LoadError(f"File not found: {path} (resolved to: {ap})")
    if os.path.getsize(ap) == 0:
        raise LoadError(f"File is empty: {path}")

    return ap
