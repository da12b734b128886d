"""Parsing adapters (readers).

Readers are responsible for *format parsing* only (text, NPY). Statistics and
dimension checks live in :mod:`matstat.components.stats`.
"""

from .base import MatrixSource, parse_int_token
from .text_reader import TextMatrixReader, load_text_matrix, parse_matrix_lines
from .npy_reader import NpyMatrixReader, load_npy_matrix
from .auto_reader import read_matrix_auto

__all__ = [
    "MatrixSource",
    "parse_int_token",
    "TextMatrixReader",
    "load_text_matrix",
    "parse_matrix_lines",
    "NpyMatrixReader",
    "load_npy_matrix",
    "read_matrix_auto",
]
