"""Engine input errors.

These are intentionally lightweight so they can be raised from parsing and
compute paths without importing reporting or boundary modules. Boundaries
(CLI, backend) map them to exit codes / HTTP responses.
"""

from __future__ import annotations

from typing import Optional


class MatrixError(ValueError):
    """Base class for failures caused by the input matrix."""


class InvalidMatrixError(MatrixError):
    """Raised when a matrix has no rows, no columns, or an unusable shape."""


class ParseError(MatrixError):
    """Raised when a value cannot be parsed as a base-10 integer."""

    def __init__(
        self,
        message: str,
        *,
        line_no: Optional[int] = None,
        column: Optional[int] = None,
        token: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.line_no = line_no
        self.column = column
        self.token = token


class RaggedRowsWarning(UserWarning):
    """Rows had differing widths and were reinterpreted with the last width."""
