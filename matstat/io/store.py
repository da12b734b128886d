"""MatrixStore: turns a textual (or NPY) source into a :class:`Matrix`."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from matstat.contracts.types import WidthPolicy
from matstat.core.matrix import Matrix

from .readers import MatrixSource, read_matrix_auto


@dataclass(frozen=True)
class MatrixStore:
    """Loader configured once, usable for any number of sources.

    The store itself holds no matrix state; each :meth:`load` returns a new,
    immutable :class:`Matrix`.
    """

    width_policy: WidthPolicy = "last"
    encoding: Optional[str] = None

    def load(self, source: MatrixSource) -> Matrix:
        return read_matrix_auto(source, width_policy=self.width_policy, encoding=self.encoding)
