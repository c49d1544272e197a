"""Validation harness turning a ConsistencyReport into pass/fail.

Test suites call assert_consistent() once per (key set, resource) pair; it
fails with every offending key listed so the fix is obvious from the test
output.

Python 3.13+.
"""

from __future__ import annotations

import logging

from i18nkeys.diagnostics import ConsistencyError, ConsistencyReport
from i18nkeys.enums import CheckOption, ViolationKind
from i18nkeys.keys import KeySet
from i18nkeys.resources import ResourceSource
from i18nkeys.validation.reconciler import reconcile

__all__ = [
    "assert_consistent",
    "consistency_checks",
]

logger = logging.getLogger(__name__)


def consistency_checks(options: CheckOption) -> tuple[ViolationKind, ...]:
    """Return the checks a reconcile pass judges for the given options.

    Handy as ids for parametrized tests, one case per check.

    Args:
        options: Requested CheckOption set

    Returns:
        Tuple of ViolationKind, in evaluation order
    """
    if CheckOption.EMPTY_FILE in options:
        return (ViolationKind.EMPTY_FILE_EXPECTED,)
    checks = [
        ViolationKind.FILE_EMPTY,
        ViolationKind.DUPLICATE_APP_KEYS,
        ViolationKind.DUPLICATE_FILE_KEYS,
    ]
    if CheckOption.UNUSED_FILE_KEYS in options:
        checks.append(ViolationKind.UNUSED_FILE_KEYS)
    if CheckOption.UNUSED_APP_KEYS in options:
        checks.append(ViolationKind.UNUSED_APP_KEYS)
    return tuple(checks)


def assert_consistent(
    key_set: KeySet,
    table: ResourceSource,
    options: CheckOption = CheckOption.CORRECT,
    *,
    location: str | None = None,
) -> ConsistencyReport:
    """Reconcile and fail if any requested check fails.

    Args:
        key_set: Enum class of keys, or iterable of members / raw key strings
        table: Mapping, or sequence of (key, template) pairs
        options: Checks to judge (default: CheckOption.CORRECT)
        location: Name used in diagnostics (default: the key set class name)

    Returns:
        The passing ConsistencyReport

    Raises:
        ConsistencyError: One or more requested checks failed; the message
            lists each violation with its keys
    """
    report = reconcile(key_set, table, options, location=location)
    if report.is_valid:
        return report

    for violation in report.violations:
        logger.warning("Consistency violation %s: %s", violation.kind, ", ".join(violation.keys))
    prefix = f"{report.location}: " if report.location else ""
    raise ConsistencyError(prefix + report.format(), report=report)
