"""Typed translation lookup.

Resolves a key set member against a resource table and substitutes
positional arguments. Two entry points share one resolution routine:

    translate_text(key, args, table)  -> str
    translate_value(key, args, table) -> TranslatedValue

so ``str(translate_value(...)) == translate_text(...)`` for the same inputs.
Translator binds a table and a TranslatorConfig for repeated lookups.

Lookups are pure reads; a table shared between threads is safe as long as
nobody mutates it during a call.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from enum import Enum

from i18nkeys.diagnostics import ErrorTemplate, MissingTranslationError
from i18nkeys.enums import MissingKeyPolicy, RenderMode
from i18nkeys.keys import KeyLike, raw_key_of
from i18nkeys.resources import ResourceSource, ResourceTable, as_table
from i18nkeys.runtime.formatting import substitute
from i18nkeys.runtime.translator_config import TranslatorConfig
from i18nkeys.runtime.value_types import FormatArgument, TranslatedValue

__all__ = [
    "Translator",
    "translate_text",
    "translate_value",
]

logger = logging.getLogger(__name__)


def _resolve(
    key: KeyLike | Enum,
    args: Sequence[FormatArgument],
    table: ResourceTable,
    config: TranslatorConfig,
) -> TranslatedValue:
    """Shared lookup and substitution for both output modes."""
    raw_key = raw_key_of(key)
    arguments = tuple(args)

    template = table.get(raw_key)
    if template is None:
        if config.missing_key_policy is MissingKeyPolicy.RAISE:
            logger.debug("Translation for key '%s' not found", raw_key)
            raise MissingTranslationError(ErrorTemplate.translation_not_found(raw_key), key=raw_key)
        logger.warning("Translation for key '%s' not found, falling back to raw key", raw_key)
        return TranslatedValue(
            key=raw_key,
            template=raw_key,
            args=arguments,
            text=raw_key,
            mode=config.render_mode,
            is_fallback=True,
        )

    # No try/except: argument mismatches are reported by the % operator as-is.
    text = substitute(template, arguments)
    logger.debug("Translated '%s' with %d argument(s)", raw_key, len(arguments))
    return TranslatedValue(
        key=raw_key,
        template=template,
        args=arguments,
        text=text,
        mode=config.render_mode,
    )


class Translator:
    """Key lookup bound to one locale's resource table.

    Example:
        >>> class Cart(I18nKeys):
        ...     ITEMS = "cart.items"
        >>> translator = Translator({"cart.items": "%d items in %@"})
        >>> translator.translate_text(Cart.ITEMS, [3, "your cart"])
        '3 items in your cart'
        >>> translator.translate_value(Cart.ITEMS, [3, "your cart"]).key
        'cart.items'
    """

    __slots__ = ("_config", "_table")

    def __init__(
        self,
        table: ResourceSource,
        *,
        config: TranslatorConfig | None = None,
    ) -> None:
        """Initialize Translator.

        Args:
            table: Resource table (mapping or sequence of pairs) for one locale
            config: Behavior switches (default: TranslatorConfig())
        """
        self._table = as_table(table)
        self._config = config if config is not None else TranslatorConfig()

    @property
    def table(self) -> ResourceTable:
        """Read-only view of the bound resource table."""
        return self._table

    @property
    def config(self) -> TranslatorConfig:
        """Configuration in effect."""
        return self._config

    def has_key(self, key: KeyLike | Enum) -> bool:
        """Return True if the table holds a template for key."""
        return raw_key_of(key) in self._table

    def translate_text(
        self, key: KeyLike | Enum, args: Sequence[FormatArgument] = ()
    ) -> str:
        """Translate key to plain text.

        Args:
            key: Key set member or raw key string
            args: Ordered format arguments

        Returns:
            Formatted text (the raw key under MissingKeyPolicy.RAW_KEY fallback)

        Raises:
            MissingTranslationError: Key absent and policy is RAISE
        """
        return _resolve(key, args, self._table, self._config).text

    def translate_value(
        self, key: KeyLike | Enum, args: Sequence[FormatArgument] = ()
    ) -> TranslatedValue:
        """Translate key to a structured value.

        Args:
            key: Key set member or raw key string
            args: Ordered format arguments

        Returns:
            TranslatedValue recording key, template, arguments and text

        Raises:
            MissingTranslationError: Key absent and policy is RAISE
        """
        return _resolve(key, args, self._table, self._config)

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return (
            f"Translator(keys={len(self._table)}, "
            f"missing_key_policy={self._config.missing_key_policy!s}, "
            f"render_mode={self._config.render_mode!s})"
        )


def translate_text(
    key: KeyLike | Enum,
    args: Sequence[FormatArgument],
    table: ResourceSource,
    *,
    missing_key_policy: MissingKeyPolicy = MissingKeyPolicy.RAISE,
) -> str:
    """Translate key against table and return plain text.

    Args:
        key: Key set member or raw key string
        args: Ordered format arguments
        table: Resource table for one locale
        missing_key_policy: What to do when key is absent (default: RAISE)

    Returns:
        Formatted text

    Raises:
        MissingTranslationError: Key absent and policy is RAISE
    """
    config = TranslatorConfig(missing_key_policy=missing_key_policy)
    return _resolve(key, args, as_table(table), config).text


def translate_value(
    key: KeyLike | Enum,
    args: Sequence[FormatArgument],
    table: ResourceSource,
    *,
    missing_key_policy: MissingKeyPolicy = MissingKeyPolicy.RAISE,
    render_mode: RenderMode = RenderMode.PLAIN,
) -> TranslatedValue:
    """Translate key against table and return a structured value.

    Args:
        key: Key set member or raw key string
        args: Ordered format arguments
        table: Resource table for one locale
        missing_key_policy: What to do when key is absent (default: RAISE)
        render_mode: Rendering hint stamped on the result (default: PLAIN)

    Returns:
        TranslatedValue recording key, template, arguments and text

    Raises:
        MissingTranslationError: Key absent and policy is RAISE
    """
    config = TranslatorConfig(missing_key_policy=missing_key_policy, render_mode=render_mode)
    return _resolve(key, args, as_table(table), config)
