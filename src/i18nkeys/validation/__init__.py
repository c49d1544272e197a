"""Consistency validation between declared key sets and resource tables.

This package provides the reconcile pass and the harness test suites use to
turn its report into failures, separated from the translation runtime.

Python 3.13+.
"""

from i18nkeys.validation.harness import assert_consistent, consistency_checks
from i18nkeys.validation.reconciler import reconcile

__all__ = [
    "assert_consistent",
    "consistency_checks",
    "reconcile",
]
