"""Babel compatibility layer for optional dependency handling.

Provides centralized, lazy import infrastructure for Babel so that loading
gettext catalogs gets consistent error messaging and import behavior.

Design Rationale:
    i18nkeys supports two installation modes:
    - Core only: `pip install i18nkeys` (no external dependencies)
    - With catalogs: `pip install i18nkeys[babel]` (adds Babel to read .po files)

    This module ensures that:
    1. Core-only installations never trigger Babel imports
    2. Catalog loading gets a helpful error message when Babel is missing

Usage Pattern:
    from i18nkeys.core.babel_compat import get_read_po

    def load_catalog(path: Path) -> dict[str, str]:
        read_po = get_read_po()  # Raises BabelImportError if Babel missing
        ...

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Callable
from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from babel.messages.catalog import Catalog

__all__ = [
    "BabelImportError",
    "get_read_po",
    "is_babel_available",
    "require_babel",
]


@lru_cache(maxsize=1)
def _check_babel_available() -> bool:
    """Check if Babel is installed (computed once, cached via lru_cache)."""
    try:
        import babel  # noqa: F401, PLC0415  # pylint: disable=unused-import

        return True
    except ImportError:
        return False


class BabelImportError(ImportError):
    """Raised when Babel is required but not installed."""

    def __init__(self, feature: str) -> None:
        """Create error with feature-specific message.

        Args:
            feature: Name of the feature/function requiring Babel
        """
        message = (
            f"{feature} requires Babel to read gettext catalogs. "
            "Install with: pip install i18nkeys[babel]"
        )
        super().__init__(message)
        self.feature = feature


def is_babel_available() -> bool:
    """Check if Babel is installed.

    Returns:
        True if Babel is installed and importable, False otherwise.
    """
    return _check_babel_available()


def require_babel(feature: str) -> None:
    """Assert that Babel is available, raising BabelImportError if not.

    Args:
        feature: Name of the feature requiring Babel (for error message)

    Raises:
        BabelImportError: If Babel is not installed
    """
    if not _check_babel_available():
        raise BabelImportError(feature)


def get_read_po() -> Callable[..., Catalog]:
    """Get Babel's gettext catalog reader.

    Returns:
        babel.messages.pofile.read_po

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel("get_read_po")
    from babel.messages.pofile import read_po  # noqa: PLC0415

    return read_po
