"""i18nkeys - typed translation keys checked against their resource tables.

Application code declares each localization domain as a closed key set;
i18nkeys looks those keys up in a resource table with positional argument
substitution, and reconciles the declared keys with the table's keys so
drift is caught in tests instead of on screen.

Public API:
    I18nKeys - Base class for key set declarations
    Translator - Lookup bound to one locale's resource table
    translate_text / translate_value - One-shot lookups (str / TranslatedValue)
    TranslatedValue - Structured lookup result
    TranslatorConfig - Missing-key policy and render mode
    reconcile - Compute a ConsistencyReport
    assert_consistent - Fail with every offending key listed
    CheckOption - Which consistency checks to judge

Exceptions:
    I18nError - Base exception class
    MissingTranslationError - Key absent from the table
    ConsistencyError - Requested consistency checks failed
    ResourceFormatError - Resource file is not a flat string table

Submodules:
    i18nkeys.loading - JSON and gettext resource loaders
    i18nkeys.testing - FakeTranslator spy and test assertions
    i18nkeys.diagnostics - Diagnostic codes, formatter, report types
"""

from .diagnostics import (
    ConsistencyError,
    ConsistencyReport,
    ConsistencyViolation,
    I18nError,
    MissingTranslationError,
    ResourceFormatError,
)
from .enums import CheckOption, MissingKeyPolicy, RenderMode, ViolationKind
from .keys import I18nKeys, KeyMember
from .runtime import TranslatedValue, Translator, TranslatorConfig, translate_text, translate_value
from .validation import assert_consistent, reconcile

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("i18nkeys")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "CheckOption",
    "ConsistencyError",
    "ConsistencyReport",
    "ConsistencyViolation",
    "I18nError",
    "I18nKeys",
    "KeyMember",
    "MissingKeyPolicy",
    "MissingTranslationError",
    "RenderMode",
    "ResourceFormatError",
    "TranslatedValue",
    "Translator",
    "TranslatorConfig",
    "ViolationKind",
    "__version__",
    "assert_consistent",
    "reconcile",
    "translate_text",
    "translate_value",
]
