"""Diagnostic codes and data structures.

Defines error codes and the structured diagnostic carried by exceptions.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Lookup errors (missing translations)
        5100-5199: Consistency violations (key set vs. resource table)
        6000-6999: Resource errors (malformed resource sources)
    """

    # Lookup errors (1000-1999)
    TRANSLATION_NOT_FOUND = 1001

    # Consistency violations (5100-5199)
    CONSISTENCY_EMPTY_FILE_EXPECTED = 5101
    CONSISTENCY_FILE_EMPTY = 5102
    CONSISTENCY_DUPLICATE_APP_KEYS = 5103
    CONSISTENCY_DUPLICATE_FILE_KEYS = 5104
    CONSISTENCY_UNUSED_FILE_KEYS = 5105
    CONSISTENCY_UNUSED_APP_KEYS = 5106

    # Resource errors (6000-6999)
    RESOURCE_FORMAT_INVALID = 6001


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        keys: Offending raw keys, in the order they should be reported
        location: Resource path or key set name the diagnostic refers to
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    keys: tuple[str, ...] = ()
    location: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like a compiler error.

        Example output:
            error[CONSISTENCY_UNUSED_APP_KEYS]: 2 declared key(s) missing from the resource table
              --> Checkout
              = keys: checkout.pay, checkout.title
              = help: Add the keys to the resource file or remove them from the key set

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
