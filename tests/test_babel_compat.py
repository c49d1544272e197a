"""Tests for babel_compat module - centralized Babel dependency handling.

Tests the lazy import infrastructure, error handling, and availability checking
for the optional Babel dependency.
"""

from unittest.mock import patch

import pytest

from i18nkeys.core.babel_compat import (
    BabelImportError,
    get_read_po,
    is_babel_available,
    require_babel,
)


class TestBabelAvailability:
    """Test Babel availability checking."""

    def test_is_babel_available_returns_bool(self) -> None:
        """is_babel_available returns a boolean."""
        assert isinstance(is_babel_available(), bool)

    def test_is_babel_available_is_cached(self) -> None:
        """Repeated calls return consistent result (cached)."""
        assert is_babel_available() == is_babel_available()

    def test_babel_is_available_in_test_environment(self) -> None:
        """Babel is installed by the test extra."""
        assert is_babel_available() is True


class TestRequireBabel:
    """Test require_babel guard function."""

    def test_require_babel_does_not_raise_when_available(self) -> None:
        require_babel("load_table")

    def test_require_babel_raises_when_unavailable(self) -> None:
        with (
            patch("i18nkeys.core.babel_compat._check_babel_available", return_value=False),
            pytest.raises(BabelImportError, match="load_table"),
        ):
            require_babel("load_table")


class TestBabelImportError:
    """Test BabelImportError exception class."""

    def test_message_includes_feature(self) -> None:
        assert "load_table" in str(BabelImportError("load_table"))

    def test_message_includes_install_instructions(self) -> None:
        assert "pip install i18nkeys[babel]" in str(BabelImportError("x"))

    def test_stores_feature_attribute(self) -> None:
        assert BabelImportError("my_feature").feature == "my_feature"

    def test_is_import_error(self) -> None:
        assert isinstance(BabelImportError("x"), ImportError)


class TestGetReadPo:
    """get_read_po returns Babel's catalog reader or fails with guidance."""

    def test_returns_babel_read_po(self) -> None:
        from babel.messages.pofile import read_po

        assert get_read_po() is read_po

    def test_raises_when_unavailable(self) -> None:
        with (
            patch("i18nkeys.core.babel_compat._check_babel_available", return_value=False),
            pytest.raises(BabelImportError, match="get_read_po"),
        ):
            get_read_po()
