from __future__ import annotations

"""Shared reader helpers: source types and integer token parsing."""

import re
from pathlib import Path
from typing import IO, Optional, Union

import numpy as np

from matstat.core.errors import ParseError

# A path on disk or an already-open text stream (e.g. sys.stdin).
MatrixSource = Union[str, Path, IO[str]]

_INT_TOKEN = re.compile(r"[+-]?[0-9]+")
_INT64 = np.iinfo(np.int64)


def is_path_like(source: object) -> bool:
    return isinstance(source, (str, Path))


def parse_int_token(
    token: str,
    *,
    line_no: Optional[int] = None,
    column: Optional[int] = None,
    context: str = "<input>",
) -> int:
    """Parse one base-10, optionally signed, 64-bit integer token."""

    where = context
    if line_no is not None:
        where += f", line {line_no}"
    if column is not None:
        where += f", value {column}"

    if not _INT_TOKEN.fullmatch(token):
        raise ParseError(
            f"{where}: {token!r} is not an integer",
            line_no=line_no,
            column=column,
            token=token,
        )

    value = int(token)
    if value < _INT64.min or value > _INT64.max:
        raise ParseError(
            f"{where}: {token!r} is outside the signed 64-bit range",
            line_no=line_no,
            column=column,
            token=token,
        )
    return value
