from __future__ import annotations

"""NumPy .npy reader for integer matrices."""

from dataclasses import dataclass
from pathlib import Path
from typing import Union

import numpy as np

from matstat.core.matrix import Matrix
from matstat.core.shapes import coerce_integer_matrix


def load_npy_matrix(file_path: Union[str, Path]) -> Matrix:
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"NPY file not found: {path}")
    arr = np.load(path.as_posix(), allow_pickle=False)
    arr = coerce_integer_matrix(arr, context=f"NPY '{path.name}'")
    return Matrix.from_array(arr)


@dataclass
class NpyMatrixReader:
    def read(self, path: Union[str, Path], **kwargs) -> Matrix:
        return load_npy_matrix(path)
