"""Hypothesis strategies for i18nkeys property-based testing.

- keys: raw key strings, key sets with controlled overlap, resource tables
- templates: format templates and matching argument lists

Usage:
    from tests.strategies import raw_keys, key_table_pairs
    from tests.strategies.templates import templates_with_args

Event-Emitting Strategies (HypoFuzz-Optimized):
    - key_table_pairs: overlap=full|partial|disjoint|empty
    - templates_with_args: template_specifiers=N
"""

from .keys import key_table_pairs, pair_sequences, raw_keys, resource_tables
from .templates import placeholder_free_templates, templates_with_args

__all__ = [
    "key_table_pairs",
    "pair_sequences",
    "placeholder_free_templates",
    "raw_keys",
    "resource_tables",
    "templates_with_args",
]
