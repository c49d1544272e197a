"""Consistency report produced by a reconcile pass.

The report always carries every computed fact; which of them count as
failures depends on the CheckOption set it was computed with. This keeps one
computation usable for both "must be empty" and "must be fully covered"
policies.

Python 3.13+.
"""

from dataclasses import dataclass, field

from i18nkeys.enums import CheckOption, ViolationKind

from .codes import Diagnostic
from .templates import ErrorTemplate

__all__ = [
    "ConsistencyReport",
    "ConsistencyViolation",
]


@dataclass(frozen=True, slots=True)
class ConsistencyViolation:
    """One failed check with the exact keys that caused it.

    Attributes:
        kind: Which check failed
        keys: Offending raw keys, sorted
        location: Key set or resource name, for diagnostics (optional)
    """

    kind: ViolationKind
    keys: tuple[str, ...]
    location: str | None = None

    def to_diagnostic(self) -> Diagnostic:
        """Build the structured diagnostic for this violation."""
        return ErrorTemplate.consistency_violation(self.kind, self.keys, self.location)

    def format(self) -> str:
        """Format as a single line listing the offending keys.

        Example:
            >>> ConsistencyViolation(ViolationKind.UNUSED_APP_KEYS, ("a", "b")).format()
            '[unused-app-keys]: 2 declared key(s) missing from the resource table: a, b'
        """
        message = self.to_diagnostic().message
        if not self.keys:
            return f"[{self.kind}]: {message}"
        return f"[{self.kind}]: {message}: {', '.join(self.keys)}"


@dataclass(frozen=True, slots=True)
class ConsistencyReport:
    """Drift between a declared key set and a resource table.

    Immutable result object; all sets are reported in full.

    Attributes:
        empty_file: True if the table has no keys
        duplicate_app_keys: Raw keys declared more than once
        duplicate_file_keys: Keys listed more than once by the resource source
        unused_file_keys: Table keys with no declared member
        unused_app_keys: Declared keys with no table entry
        file_keys: Every distinct table key (lists the offenders when an
            empty file was expected)
        options: Checks requested for this pass
        location: Key set or resource name, for diagnostics (optional)

    Example:
        >>> report = reconcile(Checkout, {"checkout.title": "Checkout"})
        >>> report.is_valid
        False
        >>> [v.kind for v in report.violations]
        [<ViolationKind.UNUSED_APP_KEYS: 'unused-app-keys'>]
    """

    empty_file: bool
    duplicate_app_keys: frozenset[str] = frozenset()
    duplicate_file_keys: frozenset[str] = frozenset()
    unused_file_keys: frozenset[str] = frozenset()
    unused_app_keys: frozenset[str] = frozenset()
    file_keys: frozenset[str] = frozenset()
    options: CheckOption = CheckOption.CORRECT
    location: str | None = field(default=None, compare=False)

    @property
    def violations(self) -> tuple[ConsistencyViolation, ...]:
        """Failed checks among those requested by options.

        With EMPTY_FILE requested, only a non-empty table fails. Otherwise the
        table must not be empty, both duplicate checks run, and each unused
        check runs if requested. Unrequested facts stay informational.

        Returns:
            Tuple of violations, at most one per kind
        """
        found: list[ConsistencyViolation] = []

        def add(kind: ViolationKind, keys: frozenset[str]) -> None:
            found.append(ConsistencyViolation(kind, tuple(sorted(keys)), self.location))

        if CheckOption.EMPTY_FILE in self.options:
            if not self.empty_file:
                add(ViolationKind.EMPTY_FILE_EXPECTED, self.file_keys)
            return tuple(found)

        if self.empty_file:
            add(ViolationKind.FILE_EMPTY, frozenset())
        if self.duplicate_app_keys:
            add(ViolationKind.DUPLICATE_APP_KEYS, self.duplicate_app_keys)
        if self.duplicate_file_keys:
            add(ViolationKind.DUPLICATE_FILE_KEYS, self.duplicate_file_keys)
        if CheckOption.UNUSED_FILE_KEYS in self.options and self.unused_file_keys:
            add(ViolationKind.UNUSED_FILE_KEYS, self.unused_file_keys)
        if CheckOption.UNUSED_APP_KEYS in self.options and self.unused_app_keys:
            add(ViolationKind.UNUSED_APP_KEYS, self.unused_app_keys)
        return tuple(found)

    @property
    def is_valid(self) -> bool:
        """True if no requested check failed."""
        return not self.violations

    def violation(self, kind: ViolationKind) -> ConsistencyViolation | None:
        """Return the violation of the given kind, or None if that check passed."""
        for found in self.violations:
            if found.kind is kind:
                return found
        return None

    def format(self) -> str:
        """Format the report as human-readable text.

        Returns:
            "Consistency check passed", or one line per violation
        """
        violations = self.violations
        if not violations:
            return "Consistency check passed"
        lines = [f"Consistency violations ({len(violations)}):"]
        lines.extend(f"  {found.format()}" for found in violations)
        return "\n".join(lines)
