"""Translator configuration.

Provides a single frozen dataclass that encapsulates translator behavior
switches, so call sites pass one typed object instead of loose keywords.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from i18nkeys.enums import MissingKeyPolicy, RenderMode

__all__ = ["TranslatorConfig"]


@dataclass(frozen=True, slots=True)
class TranslatorConfig:
    """Immutable configuration for Translator.

    ``TranslatorConfig()`` is the development profile: missing keys raise.
    Production builds usually opt into the raw-key fallback:

        >>> config = TranslatorConfig(missing_key_policy=MissingKeyPolicy.RAW_KEY)
        >>> translator = Translator(table, config=config)

    Attributes:
        missing_key_policy: What to do when a key is absent (default: RAISE).
        render_mode: Rendering hint stamped on TranslatedValue results
            (default: PLAIN).
    """

    missing_key_policy: MissingKeyPolicy = MissingKeyPolicy.RAISE
    render_mode: RenderMode = RenderMode.PLAIN

    def __post_init__(self) -> None:
        """Coerce string values to their enums at construction time.

        Raises:
            ValueError: If a value does not name a policy or render mode
        """
        object.__setattr__(self, "missing_key_policy", MissingKeyPolicy(self.missing_key_policy))
        object.__setattr__(self, "render_mode", RenderMode(self.render_mode))
