"""Tests for the i18nkeys package __init__.py module.

Covers:
- __all__ integrity: every exported name is accessible
- Fallback version when package metadata is unavailable
"""

from __future__ import annotations

import importlib
import sys
from importlib.metadata import PackageNotFoundError
from unittest.mock import patch

import i18nkeys


class TestAllExports:
    """Every name in __all__ resolves on the package."""

    def test_all_names_accessible(self) -> None:
        for name in i18nkeys.__all__:
            assert getattr(i18nkeys, name) is not None

    def test_all_is_unique(self) -> None:
        assert len(i18nkeys.__all__) == len(set(i18nkeys.__all__))

    def test_reconcile_is_validation_reconcile(self) -> None:
        from i18nkeys.validation.reconciler import reconcile

        assert i18nkeys.reconcile is reconcile


class TestVersion:
    """__version__ comes from package metadata."""

    def test_version_is_string(self) -> None:
        assert isinstance(i18nkeys.__version__, str)
        assert i18nkeys.__version__

    def test_fallback_version_when_not_installed(self) -> None:
        saved = sys.modules.pop("i18nkeys")
        try:
            with patch(
                "importlib.metadata.version", side_effect=PackageNotFoundError("i18nkeys")
            ):
                module = importlib.import_module("i18nkeys")
            assert module.__version__ == "0.0.0+dev"
        finally:
            sys.modules["i18nkeys"] = saved
