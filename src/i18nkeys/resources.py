"""Resource table contracts.

A resource table maps raw keys to template strings for one locale. The core
never loads or parses one; it accepts either an already built mapping or,
when the underlying store is list-like, a sequence of ``(key, template)``
pairs in which the same key may occur more than once.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from types import MappingProxyType
from typing import TypeAlias

__all__ = [
    "RawKey",
    "ResourceEntries",
    "ResourceSource",
    "ResourceTable",
    "Template",
    "as_table",
    "source_keys",
]

RawKey: TypeAlias = str
"""Key string linking a key set member to its resource entry."""

Template: TypeAlias = str
"""Translated template, possibly containing printf-style placeholders."""

ResourceTable: TypeAlias = Mapping[RawKey, Template]
"""Read-only key -> template mapping for one locale."""

ResourceEntries: TypeAlias = Sequence[tuple[RawKey, Template]]
"""List-like resource store; keys are not guaranteed unique."""

ResourceSource: TypeAlias = ResourceTable | ResourceEntries
"""Either form of resource store accepted by the core."""


def source_keys(source: ResourceSource) -> tuple[RawKey, ...]:
    """Return the keys of a resource source in storage order, repeats included.

    A mapping yields each key once by construction; a pair sequence yields
    every key it lists.

    Args:
        source: Mapping or sequence of (key, template) pairs

    Returns:
        Tuple of raw keys
    """
    if isinstance(source, Mapping):
        return tuple(source)
    return tuple(key for key, _ in source)


def as_table(source: ResourceSource) -> ResourceTable:
    """View a resource source as a read-only mapping.

    Mappings are wrapped, not copied. For pair sequences, a later entry
    overwrites an earlier one with the same key.

    Args:
        source: Mapping or sequence of (key, template) pairs

    Returns:
        Read-only mapping of raw key to template
    """
    if isinstance(source, MappingProxyType):
        return source
    if isinstance(source, Mapping):
        return MappingProxyType(source)
    return MappingProxyType(dict(source))
