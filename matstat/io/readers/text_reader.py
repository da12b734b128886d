from __future__ import annotations

"""Whitespace-delimited integer matrix reader (one row per line)."""

import logging
import warnings
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional

from matstat.contracts.types import WIDTH_POLICIES
from matstat.core.errors import InvalidMatrixError, RaggedRowsWarning
from matstat.core.matrix import Matrix

from .base import MatrixSource, is_path_like, parse_int_token

logger = logging.getLogger(__name__)


def parse_matrix_lines(
    lines: Iterable[str],
    *,
    width_policy: str = "last",
    context: str = "<input>",
) -> Matrix:
    """Parse text lines into a :class:`Matrix`.

    Every token of every non-blank line is appended to one row-major buffer.
    ``num_cols`` is the width of the last line read. With ``width_policy="last"``
    differing widths only warn and the first ``num_rows * num_cols`` values of the
    buffer are reinterpreted with that width (extra trailing values are dropped;
    too few raise). With ``"strict"`` the first mismatch raises.
    """

    if width_policy not in WIDTH_POLICIES:
        raise ValueError(
            f"width_policy must be one of {', '.join(WIDTH_POLICIES)}; got {width_policy!r}"
        )

    buffer: list[int] = []
    num_rows = 0
    num_cols = 0
    first_width: Optional[int] = None
    first_ragged_line: Optional[int] = None

    for line_no, line in enumerate(lines, start=1):
        tokens = line.split()
        if not tokens:
            continue

        if first_width is None:
            first_width = len(tokens)
        elif len(tokens) != first_width:
            if width_policy == "strict":
                raise InvalidMatrixError(
                    f"{context}, line {line_no}: found {len(tokens)} values; "
                    f"expected {first_width} (width of the first row)"
                )
            if first_ragged_line is None:
                first_ragged_line = line_no

        for column, token in enumerate(tokens, start=1):
            buffer.append(parse_int_token(token, line_no=line_no, column=column, context=context))

        num_rows += 1
        num_cols = len(tokens)

    if first_ragged_line is not None:
        warnings.warn(
            f"{context}: rows have differing widths (first mismatch on line "
            f"{first_ragged_line}); using the last row's width of {num_cols}",
            RaggedRowsWarning,
            stacklevel=2,
        )
        if len(buffer) < num_rows * num_cols:
            raise InvalidMatrixError(
                f"{context}: {len(buffer)} values cannot be laid out as "
                f"{num_rows} rows of {num_cols} (the last row's width)"
            )
        del buffer[num_rows * num_cols :]

    logger.debug("%s: parsed %d rows x %d cols", context, num_rows, num_cols)
    return Matrix(buffer, num_rows, num_cols)


def load_text_matrix(
    source: MatrixSource,
    *,
    width_policy: str = "last",
    encoding: Optional[str] = None,
) -> Matrix:
    """Load a matrix from a text file path or an open text stream."""

    if is_path_like(source):
        path = Path(source)  # type: ignore[arg-type]
        if not path.exists():
            raise FileNotFoundError(f"Matrix file not found: {path}")
        with path.open("r", encoding=encoding or "utf-8") as f:
            return parse_matrix_lines(f, width_policy=width_policy, context=path.name)

    context = str(getattr(source, "name", "<stream>"))
    return parse_matrix_lines(source, width_policy=width_policy, context=context)  # type: ignore[arg-type]


@dataclass
class TextMatrixReader:
    width_policy: str = "last"
    encoding: Optional[str] = None

    def read(self, source: MatrixSource, **kwargs) -> Matrix:
        return load_text_matrix(
            source,
            width_policy=kwargs.get("width_policy", self.width_policy),
            encoding=kwargs.get("encoding", self.encoding),
        )
