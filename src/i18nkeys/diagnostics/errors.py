"""i18nkeys exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .codes import Diagnostic

if TYPE_CHECKING:
    from .validation import ConsistencyReport, ConsistencyViolation

__all__ = [
    "ConsistencyError",
    "I18nError",
    "MissingTranslationError",
    "ResourceFormatError",
]


class I18nError(Exception):
    """Base exception for all i18nkeys errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize I18nError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class MissingTranslationError(I18nError, LookupError):
    """Requested key is absent from the resource table.

    Raised by the translator under MissingKeyPolicy.RAISE.

    Attributes:
        key: Raw key that was looked up
    """

    def __init__(self, message: str | Diagnostic, *, key: str) -> None:
        super().__init__(message)
        self.key = key


class ConsistencyError(I18nError, AssertionError):
    """One or more requested consistency checks failed.

    Raised by the validation harness only; reconcile() itself always returns
    a report. Subclasses AssertionError so test runners report it as a
    failure rather than an error.

    Attributes:
        report: The report the failures were read from
        violations: Failed checks, one per violation kind
    """

    def __init__(self, message: str, *, report: ConsistencyReport) -> None:
        super().__init__(message)
        self.report = report
        self.violations: tuple[ConsistencyViolation, ...] = report.violations


class ResourceFormatError(I18nError, ValueError):
    """A resource source is not a flat table of string keys to string values.

    Attributes:
        path: Path or description of the offending resource
    """

    def __init__(self, message: str | Diagnostic, *, path: str) -> None:
        super().__init__(message)
        self.path = path
