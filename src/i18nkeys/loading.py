"""Resource loading adapters.

Thin collaborators that turn a resource file into a ResourceSource. They do
no parsing of their own: JSON goes through the standard library and gettext
catalogs through Babel.

Components:
    ResourceLoader - Protocol for loading resources per locale (structural typing)
    PathResourceLoader - Disk-based loader with path-traversal prevention
    load_table - Load a single resource file by path

Supported formats:
    .json - flat object of string keys to string values. Read in storage
            order with repeats preserved, so duplicate keys reach the
            reconciler.
    .po   - gettext catalog (requires the babel extra). The header entry,
            plural entries and untranslated entries are skipped.

Python 3.13+.
"""

from __future__ import annotations

import io
import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol, TypeAlias

from i18nkeys.core.babel_compat import get_read_po
from i18nkeys.diagnostics import ErrorTemplate, ResourceFormatError
from i18nkeys.resources import RawKey, ResourceEntries, ResourceSource, Template

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Type aliases
    "LocaleCode",
    "ResourceId",
    # Protocol
    "ResourceLoader",
    # Concrete loader
    "PathResourceLoader",
    # Single-file loading
    "load_table",
]

logger = logging.getLogger(__name__)

LocaleCode: TypeAlias = str
"""Locale code as used in resource paths (e.g., 'en', 'pt-BR')."""

ResourceId: TypeAlias = str
"""Resource file name (e.g., 'checkout.json', 'messages.po')."""


class _Pairs(list[tuple[str, object]]):
    """JSON object decoded as key/value pairs, kept apart from JSON arrays."""


def _read_json(path: Path) -> ResourceEntries:
    described = str(path)
    try:
        decoded = json.loads(path.read_text(encoding="utf-8"), object_pairs_hook=_Pairs)
    except json.JSONDecodeError as e:
        diagnostic = ErrorTemplate.resource_format_invalid(described, f"invalid JSON ({e})")
        raise ResourceFormatError(diagnostic, path=described) from e

    if not isinstance(decoded, _Pairs):
        diagnostic = ErrorTemplate.resource_format_invalid(described, "top level must be an object")
        raise ResourceFormatError(diagnostic, path=described)

    entries: list[tuple[RawKey, Template]] = []
    for key, value in decoded:
        if not isinstance(value, str):
            got = "object" if isinstance(value, _Pairs) else type(value).__name__
            reason = f"value for key '{key}' must be a string, got {got}"
            diagnostic = ErrorTemplate.resource_format_invalid(described, reason)
            raise ResourceFormatError(diagnostic, path=described)
        entries.append((key, value))
    return tuple(entries)


def _read_po(path: Path) -> dict[RawKey, Template]:
    read_po = get_read_po()
    catalog = read_po(io.BytesIO(path.read_bytes()))

    table: dict[RawKey, Template] = {}
    for message in catalog:
        # Header, plural and untranslated entries carry no usable template.
        if not message.id or message.pluralizable or not message.string:
            continue
        table[message.id] = message.string
    return table


def load_table(path: str | Path) -> ResourceSource:
    """Load a resource file into a ResourceSource.

    Args:
        path: Path to a .json or .po file

    Returns:
        Sequence of (key, template) pairs for JSON, mapping for gettext

    Raises:
        FileNotFoundError: If the file doesn't exist
        ResourceFormatError: Unsupported extension or malformed content
        BabelImportError: A .po file was given and Babel is not installed
    """
    resource_path = Path(path)
    match resource_path.suffix.lower():
        case ".json":
            source: ResourceSource = _read_json(resource_path)
        case ".po":
            source = _read_po(resource_path)
        case suffix:
            described = str(resource_path)
            reason = f"unsupported resource format '{suffix or '(none)'}'"
            diagnostic = ErrorTemplate.resource_format_invalid(described, reason)
            raise ResourceFormatError(diagnostic, path=described)

    logger.debug("Loaded %d entries from %s", len(source), resource_path)
    return source


class ResourceLoader(Protocol):
    """Protocol for loading resources for specific locales.

    Implementations must provide a load() method that retrieves the resource
    for a given locale and resource identifier.

    Example:
        >>> class MemoryLoader:
        ...     def __init__(self, tables: dict[str, dict[str, str]]) -> None:
        ...         self.tables = tables
        ...     def load(self, locale: str, resource_id: str) -> dict[str, str]:
        ...         return self.tables[locale]
        ...     def describe_path(self, locale: str, resource_id: str) -> str:
        ...         return f"memory:{locale}/{resource_id}"
    """

    def load(self, locale: LocaleCode, resource_id: ResourceId) -> ResourceSource:
        """Load resource for given locale.

        Args:
            locale: Locale code (e.g., 'en', 'fr', 'lv')
            resource_id: Resource identifier (e.g., 'checkout.json')

        Returns:
            Resource table or sequence of pairs

        Raises:
            FileNotFoundError: If resource doesn't exist for this locale
            OSError: If the resource cannot be read
        """

    def describe_path(self, locale: LocaleCode, resource_id: ResourceId) -> str:
        """Return human-readable path for diagnostics.

        Args:
            locale: Locale code
            resource_id: Resource identifier

        Returns:
            Human-readable path string for error messages
        """
        return f"{locale}/{resource_id}"


@dataclass(frozen=True, slots=True)
class PathResourceLoader:
    """File system resource loader using path templates.

    Implements ResourceLoader protocol for loading resource files from disk.
    Uses {locale} placeholder in path template for locale substitution.

    Security:
        Validates both locale and resource_id to prevent directory traversal attacks.
        Locale codes containing path separators or ".." are rejected.
        Resource IDs containing ".." or absolute paths are rejected.
        All resolved paths are validated against a fixed root directory.

    Example:
        >>> loader = PathResourceLoader("locales/{locale}")
        >>> table = loader.load("en", "checkout.json")
        # Loads from: locales/en/checkout.json

    Attributes:
        base_path: Path template with {locale} placeholder
        root_dir: Fixed root directory for path traversal validation.
                  Defaults to the static prefix of base_path.
    """

    base_path: str
    root_dir: str | None = None
    _resolved_root: Path = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Cache resolved root directory and validate template at initialization.

        Raises:
            ValueError: If base_path does not contain {locale} placeholder
        """
        if "{locale}" not in self.base_path:
            msg = (
                f"base_path must contain '{{locale}}' placeholder for locale substitution, "
                f"got: '{self.base_path}'"
            )
            raise ValueError(msg)

        if self.root_dir is not None:
            resolved = Path(self.root_dir).resolve()
        else:
            # e.g., "locales/{locale}" -> "locales"
            static_prefix = self.base_path.split("{locale}")[0].rstrip("/\\")
            resolved = Path(static_prefix).resolve() if static_prefix else Path.cwd().resolve()
        object.__setattr__(self, "_resolved_root", resolved)

    @staticmethod
    def _validate_locale(locale: LocaleCode) -> None:
        """Validate locale code for path traversal attacks.

        Raises:
            ValueError: If locale is empty or contains unsafe path components
        """
        if not locale:
            msg = "Locale code cannot be empty"
            raise ValueError(msg)
        if ".." in locale:
            msg = f"Path traversal sequences not allowed in locale: '{locale}'"
            raise ValueError(msg)
        if "/" in locale or "\\" in locale:
            msg = f"Path separators not allowed in locale: '{locale}'"
            raise ValueError(msg)

    @staticmethod
    def _validate_resource_id(resource_id: ResourceId) -> None:
        """Validate resource_id for path traversal attacks and whitespace.

        Raises:
            ValueError: If resource_id contains unsafe path components or
                       leading/trailing whitespace
        """
        stripped = resource_id.strip()
        if stripped != resource_id:
            msg = f"Resource ID contains leading/trailing whitespace: {resource_id!r}"
            raise ValueError(msg)
        if Path(resource_id).is_absolute() or resource_id.startswith(("/", "\\")):
            msg = f"Absolute paths not allowed in resource_id: '{resource_id}'"
            raise ValueError(msg)
        if ".." in resource_id:
            msg = f"Path traversal sequences not allowed in resource_id: '{resource_id}'"
            raise ValueError(msg)

    @staticmethod
    def _is_safe_path(base_dir: Path, full_path: Path) -> bool:
        """Check if full_path resolves to a location inside base_dir."""
        return full_path.resolve().is_relative_to(base_dir.resolve())

    def describe_path(self, locale: LocaleCode, resource_id: ResourceId) -> str:
        """Return the locale-substituted path for diagnostics."""
        locale_path = self.base_path.replace("{locale}", locale)
        return f"{locale_path}/{resource_id}"

    def load(self, locale: LocaleCode, resource_id: ResourceId) -> ResourceSource:
        """Load a resource file from disk.

        Args:
            locale: Locale code to substitute in path template
            resource_id: File name (e.g., 'checkout.json')

        Returns:
            ResourceSource read by load_table()

        Raises:
            ValueError: If locale or resource_id contains path traversal sequences
            FileNotFoundError: If file doesn't exist
            ResourceFormatError: Unsupported or malformed resource
        """
        self._validate_locale(locale)
        self._validate_resource_id(resource_id)

        # replace() rather than format(): other braces in the template stay literal
        locale_path = self.base_path.replace("{locale}", locale)
        full_path = (Path(locale_path) / resource_id).resolve()

        if not self._is_safe_path(self._resolved_root, full_path):
            msg = (
                f"Path traversal detected: resolved path escapes root directory. "
                f"locale='{locale}', resource_id='{resource_id}'"
            )
            raise ValueError(msg)

        return load_table(full_path)
