"""Backend-local I/O adapter errors.

These errors represent boundary failures (bad/unsafe paths, missing or empty
files, ambiguous requests). Routers map them to HTTP 400 responses.
"""


class LoadError(Exception):
    """Raised when the backend cannot resolve/load a requested matrix."""
