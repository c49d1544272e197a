"""Key set declaration surface.

A key set is the closed enumeration of translation keys one localization
domain may ask for. Application code declares it by subclassing I18nKeys:

    >>> class Checkout(I18nKeys):
    ...     TITLE = "checkout.title"
    ...     PAY_BUTTON = "checkout.pay"
    >>> Checkout.TITLE.raw_key
    'checkout.title'

Enum declarations do not reject repeated values; a second member with an
already used value silently becomes an alias of the first and disappears
from iteration. declared_raw_keys() reads ``__members__`` instead, so the
reconciler still sees the repetition.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum, StrEnum
from typing import Protocol, TypeAlias, runtime_checkable

__all__ = [
    "I18nKeys",
    "KeyLike",
    "KeyMember",
    "KeySet",
    "declared_raw_keys",
    "raw_key_of",
]


@runtime_checkable
class KeyMember(Protocol):
    """Anything that names a translation key by its raw string."""

    @property
    def raw_key(self) -> str:
        """The string used to look the key up in a resource table."""
        ...


class I18nKeys(StrEnum):
    """Base class for key set declarations.

    Each member's value is its raw key. Because members are strings, they can
    be passed anywhere a raw key is accepted.
    """

    @property
    def raw_key(self) -> str:
        """The string used to look the key up in a resource table."""
        return self.value


KeyLike: TypeAlias = KeyMember | str
"""A key set member or a bare raw key string."""

KeySet: TypeAlias = type[Enum] | Iterable[KeyLike]
"""An enum class of keys, or any iterable of members or raw key strings."""


def raw_key_of(key: KeyLike | Enum) -> str:
    """Return the raw key for a member, enum value or plain string.

    Args:
        key: KeyMember, Enum member with a string value, or raw key string

    Returns:
        Raw key string

    Raises:
        TypeError: If the key does not carry a string raw key
    """
    if isinstance(key, KeyMember):
        return key.raw_key
    if isinstance(key, Enum):
        value = key.value
        if isinstance(value, str):
            return value
        msg = f"Enum key {key!r} has non-string value {value!r}"
        raise TypeError(msg)
    if isinstance(key, str):
        return key
    msg = f"Expected a key member or raw key string, got {type(key).__name__}"
    raise TypeError(msg)


def declared_raw_keys(key_set: KeySet) -> tuple[str, ...]:
    """Return every declared raw key, before any de-duplication.

    For an Enum class, aliases created by repeated values are included, in
    declaration order. For an iterable, items are taken as they come.

    Args:
        key_set: Enum class or iterable of keys

    Returns:
        Tuple of raw keys, possibly containing repeats

    Raises:
        TypeError: If key_set is a bare string rather than a collection of keys
    """
    if isinstance(key_set, type) and issubclass(key_set, Enum):
        return tuple(raw_key_of(member) for member in key_set.__members__.values())
    if isinstance(key_set, str):
        msg = f"Expected a key set, got the single raw key {key_set!r}"
        raise TypeError(msg)
    return tuple(raw_key_of(key) for key in key_set)
