"""Enumerations for i18nkeys type-safe constants.

Uses StrEnum for values that end up in logs, reports and test ids, and Flag
for the independently togglable consistency checks.

Python 3.13+.
"""

from enum import Flag, StrEnum, auto


class CheckOption(Flag):
    """Consistency checks requested from the reconciler.

    Members combine with ``|`` and remove with ``&~`` just like the option
    set they replace:

        >>> CheckOption.CORRECT & ~CheckOption.UNUSED_FILE_KEYS
        <CheckOption.UNUSED_APP_KEYS: 2>

    Duplicate checks are not listed here: they always run unless
    ``EMPTY_FILE`` is requested.
    """

    NONE = 0

    EMPTY_FILE = auto()
    """The resource table is expected to be empty; all other checks are skipped."""

    UNUSED_APP_KEYS = auto()
    """Declared keys with no entry in the resource table are failures."""

    UNUSED_FILE_KEYS = auto()
    """Resource table entries with no declared key are failures."""

    CORRECT = UNUSED_APP_KEYS | UNUSED_FILE_KEYS
    """Default profile: both unused-key checks."""


class ViolationKind(StrEnum):
    """Kind of consistency violation found by a reconcile pass.

    StrEnum provides automatic string conversion:
    str(ViolationKind.UNUSED_APP_KEYS) == "unused-app-keys"
    """

    EMPTY_FILE_EXPECTED = "empty-file-expected"
    """EMPTY_FILE was requested but the table has entries."""

    FILE_EMPTY = "file-empty"
    """The table is empty although EMPTY_FILE was not requested."""

    DUPLICATE_APP_KEYS = "duplicate-app-keys"
    """Two declared keys share the same raw key."""

    DUPLICATE_FILE_KEYS = "duplicate-file-keys"
    """The resource source lists the same key more than once."""

    UNUSED_FILE_KEYS = "unused-file-keys"
    """Table keys that no declared key refers to."""

    UNUSED_APP_KEYS = "unused-app-keys"
    """Declared keys missing from the table."""


class MissingKeyPolicy(StrEnum):
    """What the translator does when a key is absent from the table."""

    RAISE = "raise"
    """Raise MissingTranslationError (development and test builds)."""

    RAW_KEY = "raw-key"
    """Log a warning and return the raw key as text (production builds)."""


class RenderMode(StrEnum):
    """Rendering hint recorded on a TranslatedValue."""

    PLAIN = "plain"
    """Plain text for direct display."""

    RICH = "rich"
    """Text meant to be re-rendered as attributed or rich text."""


__all__ = [
    "CheckOption",
    "MissingKeyPolicy",
    "RenderMode",
    "ViolationKind",
]
