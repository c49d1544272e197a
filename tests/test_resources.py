"""Tests for resources: source_keys and as_table over mappings and pair sequences."""

from __future__ import annotations

from types import MappingProxyType

import pytest
from hypothesis import given

from i18nkeys.resources import as_table, source_keys
from tests.strategies import pair_sequences, resource_tables


class TestSourceKeys:
    """source_keys keeps storage order and repeats."""

    def test_mapping(self) -> None:
        assert source_keys({"a": "1", "b": "2"}) == ("a", "b")

    def test_pairs_with_repeat(self) -> None:
        assert source_keys([("a", "1"), ("b", "2"), ("a", "3")]) == ("a", "b", "a")

    def test_empty(self) -> None:
        assert source_keys({}) == ()
        assert source_keys(()) == ()

    @given(resource_tables)
    def test_mapping_keys_unique_property(self, table: dict[str, str]) -> None:
        """PROPERTY: A mapping never reports a repeated key."""
        keys = source_keys(table)
        assert len(keys) == len(set(keys))


class TestAsTable:
    """as_table gives a read-only mapping view."""

    def test_mapping_wrapped_not_copied(self) -> None:
        source = {"a": "1"}
        table = as_table(source)
        source["b"] = "2"
        assert table["b"] == "2"

    def test_result_is_read_only(self) -> None:
        table = as_table({"a": "1"})
        with pytest.raises(TypeError):
            table["a"] = "2"  # type: ignore[index]

    def test_proxy_returned_unchanged(self) -> None:
        proxy = MappingProxyType({"a": "1"})
        assert as_table(proxy) is proxy

    def test_pairs_later_entry_wins(self) -> None:
        table = as_table([("a", "first"), ("a", "second")])
        assert dict(table) == {"a": "second"}

    @given(pair_sequences)
    def test_pairs_match_dict_property(self, pairs: list[tuple[str, str]]) -> None:
        """PROPERTY: Pair sequences read like dict(pairs)."""
        assert dict(as_table(pairs)) == dict(pairs)
