"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterable

from i18nkeys.enums import ViolationKind

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    Each factory returns a Diagnostic that exceptions and reports carry.
    """

    @staticmethod
    def translation_not_found(key: str) -> Diagnostic:
        """Key absent from the resource table.

        Args:
            key: The raw key that was looked up

        Returns:
            Diagnostic for TRANSLATION_NOT_FOUND
        """
        msg = f"Translation for key '{key}' not found"
        return Diagnostic(
            code=DiagnosticCode.TRANSLATION_NOT_FOUND,
            message=msg,
            hint="Add the key to the resource table for this locale",
            keys=(key,),
        )

    @staticmethod
    def resource_format_invalid(path: str, reason: str) -> Diagnostic:
        """Resource source could not be turned into a key -> string table.

        Args:
            path: Path or description of the resource
            reason: What was wrong with it

        Returns:
            Diagnostic for RESOURCE_FORMAT_INVALID
        """
        msg = f"Invalid resource '{path}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.RESOURCE_FORMAT_INVALID,
            message=msg,
            hint="Resource files must hold a flat table of string keys to string values",
            location=path,
        )

    @staticmethod
    def consistency_violation(
        kind: ViolationKind,
        keys: Iterable[str],
        location: str | None = None,
    ) -> Diagnostic:
        """One failed consistency check.

        Args:
            kind: Which check failed
            keys: Offending raw keys (sorted for stable output)
            location: Key set or resource the check ran against

        Returns:
            Diagnostic with the CONSISTENCY_* code matching kind
        """
        ordered = tuple(sorted(keys))
        count = len(ordered)
        match kind:
            case ViolationKind.EMPTY_FILE_EXPECTED:
                code = DiagnosticCode.CONSISTENCY_EMPTY_FILE_EXPECTED
                msg = f"Resource table should be empty but has {count} key(s)"
                hint = "Remove the entries or stop requesting an empty file"
            case ViolationKind.FILE_EMPTY:
                code = DiagnosticCode.CONSISTENCY_FILE_EMPTY
                msg = "Resource table is empty"
                hint = "Check that the resource file was found and loaded"
            case ViolationKind.DUPLICATE_APP_KEYS:
                code = DiagnosticCode.CONSISTENCY_DUPLICATE_APP_KEYS
                msg = f"{count} raw key(s) declared more than once in the key set"
                hint = "Give every key set member a distinct raw key"
            case ViolationKind.DUPLICATE_FILE_KEYS:
                code = DiagnosticCode.CONSISTENCY_DUPLICATE_FILE_KEYS
                msg = f"{count} key(s) listed more than once in the resource table"
                hint = "Later entries overwrite earlier ones; keep a single entry per key"
            case ViolationKind.UNUSED_FILE_KEYS:
                code = DiagnosticCode.CONSISTENCY_UNUSED_FILE_KEYS
                msg = f"{count} resource key(s) not declared in the key set"
                hint = "Remove the entries from the resource file or declare the keys"
            case ViolationKind.UNUSED_APP_KEYS:
                code = DiagnosticCode.CONSISTENCY_UNUSED_APP_KEYS
                msg = f"{count} declared key(s) missing from the resource table"
                hint = "Add the keys to the resource file or remove them from the key set"
        return Diagnostic(code=code, message=msg, hint=hint, keys=ordered, location=location)
