"""Core infrastructure shared across the runtime and loading layers.

Python 3.13+.
"""

from .babel_compat import BabelImportError, is_babel_available, require_babel

__all__ = [
    "BabelImportError",
    "is_babel_available",
    "require_babel",
]
