"""Value types for the translation runtime.

Defines:
    - FormatArgument: Values accepted for placeholder substitution
    - TranslatedValue: Structured translation result

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from decimal import Decimal
from typing import TypeAlias

from i18nkeys.enums import RenderMode

__all__ = [
    "FormatArgument",
    "TranslatedValue",
]

FormatArgument: TypeAlias = str | int | float | Decimal
"""Value substituted into a template placeholder."""


@dataclass(frozen=True, slots=True)
class TranslatedValue:
    """Translation result that remembers how it was produced.

    ``str(value)`` is the same text translate_text() returns for the same
    inputs. The key, template and arguments are kept so the value can be
    re-rendered later (as rich text, for instance) or compared in snapshot
    tests.

    Attributes:
        key: Raw key that was looked up
        template: Template found in the table (the raw key on fallback)
        args: Arguments substituted into the template
        text: Rendered text
        mode: Rendering hint for the consumer
        is_fallback: True if the key was missing and the raw key was returned

    Example:
        >>> value = translate_value(Cart.ITEMS, [3], {"cart.items": "%d items"})
        >>> str(value)
        '3 items'
        >>> value.args
        (3,)
    """

    key: str
    template: str
    args: tuple[FormatArgument, ...]
    text: str
    mode: RenderMode = RenderMode.PLAIN
    is_fallback: bool = False

    def __str__(self) -> str:
        """Return rendered text."""
        return self.text

    def with_mode(self, mode: RenderMode) -> TranslatedValue:
        """Return a copy carrying a different rendering hint."""
        return replace(self, mode=mode)
