"""Diagnostic system for i18nkeys errors and consistency reports.

Provides structured error diagnostics with codes, offending keys and hints,
plus the report type produced by a reconcile pass.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    ConsistencyError,
    I18nError,
    MissingTranslationError,
    ResourceFormatError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate
from .validation import ConsistencyReport, ConsistencyViolation

__all__ = [
    "ConsistencyError",
    "ConsistencyReport",
    "ConsistencyViolation",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "I18nError",
    "MissingTranslationError",
    "OutputFormat",
    "ResourceFormatError",
]
