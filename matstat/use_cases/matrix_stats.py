from __future__ import annotations

"""Matrix statistics use-case.

Loads a matrix from the source described by a :class:`StatsRunConfig` and
computes per-row or per-column averages and medians. Boundaries (CLI, backend)
decide where the input comes from; this module only sees paths, inline text or
an already-open stream.
"""

import io
import logging
from typing import IO, Optional

from matstat.components.stats import compute_stats
from matstat.contracts.results import StatsResult
from matstat.contracts.run_config import SourceModel, StatsRunConfig
from matstat.core.errors import InvalidMatrixError
from matstat.core.matrix import Matrix
from matstat.io.store import MatrixStore

logger = logging.getLogger(__name__)


def load_matrix(source: SourceModel, *, stream: Optional[IO[str]] = None) -> Matrix:
    """Load the matrix described by ``source``.

    Precedence: ``source.text``, then ``source.path``, then ``stream``.
    """

    if source.text is not None and source.path:
        raise ValueError("SourceModel accepts either path or text, not both")

    store = MatrixStore(width_policy=source.width_policy, encoding=source.encoding)

    if source.text is not None:
        return store.load(io.StringIO(source.text))
    if source.path:
        return store.load(source.path)
    if stream is None:
        raise ValueError("SourceModel requires path or text when no stream is given")
    return store.load(stream)


def run_matrix_stats(cfg: StatsRunConfig, *, stream: Optional[IO[str]] = None) -> StatsResult:
    """Load, validate and compute; raises on the first invalid condition."""

    matrix = load_matrix(cfg.source, stream=stream)
    if matrix.num_rows == 0:
        raise InvalidMatrixError("Input contains no matrix rows")

    logger.debug("loaded %r for %s stats", matrix, cfg.axis)
    return compute_stats(matrix, cfg.axis)
