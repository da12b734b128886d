from .errors import InvalidMatrixError, MatrixError, ParseError, RaggedRowsWarning
from .matrix import Matrix

__all__ = [
    "Matrix",
    "MatrixError",
    "InvalidMatrixError",
    "ParseError",
    "RaggedRowsWarning",
]
