from __future__ import annotations

"""Auto-dispatching reader."""

from pathlib import Path
from typing import Optional

from matstat.core.matrix import Matrix

from .base import MatrixSource, is_path_like
from .npy_reader import NpyMatrixReader
from .text_reader import TextMatrixReader


def read_matrix_auto(
    source: MatrixSource,
    *,
    width_policy: str = "last",
    encoding: Optional[str] = None,
) -> Matrix:
    """Read a matrix from ``source`` based on its type and file extension.

    Streams are always parsed as text. Paths ending in ``.npy`` are loaded with
    NumPy; every other path (``.txt``, ``.tsv``, no extension, ...) is text.
    """

    if is_path_like(source) and Path(source).suffix.lower() == ".npy":  # type: ignore[arg-type]
        return NpyMatrixReader().read(source)  # type: ignore[arg-type]
    return TextMatrixReader(width_policy=width_policy, encoding=encoding).read(source)
