"""Key set vs. resource table reconciliation.

Computes the consistency facts between the keys an application declares and
the keys a resource table provides. Useful for test suites and CI jobs that
must catch drift before it ships.

Architecture:
    - reconcile(): Main entry point, builds the ConsistencyReport
    - _duplicates(): Keys repeated in a pre-dedup sequence

Every fact is computed on every pass; the CheckOption set only decides which
facts the report treats as violations. reconcile() never raises for a
consistency problem.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable
from enum import Enum

from i18nkeys.diagnostics import ConsistencyReport
from i18nkeys.enums import CheckOption
from i18nkeys.keys import KeySet, declared_raw_keys
from i18nkeys.resources import ResourceSource, source_keys

__all__ = ["reconcile"]

logger = logging.getLogger(__name__)


def _duplicates(sequence: Iterable[str]) -> frozenset[str]:
    """Return the items that occur more than once.

    A set built from the sequence cannot tell duplicates apart, so this must
    run on the sequence as it was declared or stored.
    """
    return frozenset(item for item, count in Counter(sequence).items() if count > 1)


def _describe(key_set: KeySet) -> str | None:
    if isinstance(key_set, type) and issubclass(key_set, Enum):
        return key_set.__name__
    return None


def reconcile(
    key_set: KeySet,
    table: ResourceSource,
    options: CheckOption = CheckOption.CORRECT,
    *,
    location: str | None = None,
) -> ConsistencyReport:
    """Compare declared keys with the keys of a resource table.

    Args:
        key_set: Enum class of keys, or iterable of members / raw key strings
        table: Mapping, or sequence of (key, template) pairs
        options: Checks to judge (default: CheckOption.CORRECT)
        location: Name used in diagnostics (default: the key set class name)

    Returns:
        ConsistencyReport with every fact populated

    Example:
        >>> class Checkout(I18nKeys):
        ...     TITLE = "checkout.title"
        ...     PAY = "checkout.pay"
        >>> report = reconcile(Checkout, {"checkout.title": "Checkout", "old": "x"})
        >>> sorted(report.unused_file_keys), sorted(report.unused_app_keys)
        (['old'], ['checkout.pay'])
    """
    app_sequence = declared_raw_keys(key_set)
    file_sequence = source_keys(table)
    all_keys = frozenset(app_sequence)
    file_keys = frozenset(file_sequence)

    report = ConsistencyReport(
        empty_file=not file_keys,
        duplicate_app_keys=_duplicates(app_sequence),
        # Vacuously empty for mappings; pair sequences can repeat keys.
        duplicate_file_keys=_duplicates(file_sequence),
        unused_file_keys=file_keys - all_keys,
        unused_app_keys=all_keys - file_keys,
        file_keys=file_keys,
        options=options,
        location=location if location is not None else _describe(key_set),
    )

    logger.debug(
        "Reconciled %d declared key(s) against %d table key(s): %d violation(s)",
        len(app_sequence),
        len(file_sequence),
        len(report.violations),
    )
    return report
