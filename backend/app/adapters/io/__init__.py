"""I/O adapter package.

Backend boundary code for resolving user-provided file paths safely. Keep this
package free of business logic; parsing and statistics belong to the engine.
"""

from .errors import LoadError
from .path_resolver import resolve_user_path

__all__ = ["LoadError", "resolve_user_path"]
