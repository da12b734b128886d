from .store import MatrixStore

__all__ = ["MatrixStore"]
