"""Hypothesis strategies for key sets and resource tables.

Python 3.13+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from hypothesis import event
from hypothesis import strategies as st

if TYPE_CHECKING:
    from hypothesis.strategies import DrawFn

__all__ = [
    "key_table_pairs",
    "pair_sequences",
    "raw_keys",
    "resource_tables",
]

# Dotted identifiers the way resource files usually spell keys
raw_keys = st.from_regex(r"[a-z][a-z0-9_]{0,8}(\.[a-z][a-z0-9_]{0,8}){0,2}", fullmatch=True)

_templates = st.text(
    alphabet=st.characters(exclude_categories=("Cs",), exclude_characters="%"),
    max_size=30,
)

resource_tables = st.dictionaries(raw_keys, _templates, max_size=15)

pair_sequences = st.lists(st.tuples(raw_keys, _templates), max_size=15)


@st.composite
def key_table_pairs(draw: DrawFn) -> tuple[list[str], dict[str, str]]:
    """Generate (declared keys, table) with a chosen overlap shape.

    Events emitted:
    - overlap=full|partial|disjoint|empty
    """
    shape = draw(st.sampled_from(["full", "partial", "disjoint", "empty"]))
    event(f"overlap={shape}")

    pool = draw(st.lists(raw_keys, unique=True, min_size=2, max_size=20))
    template = draw(_templates)
    match shape:
        case "full":
            declared, file_keys = pool, pool
        case "partial":
            split = draw(st.integers(min_value=1, max_value=len(pool) - 1))
            declared = pool[: split + 1]
            file_keys = pool[split:]
        case "disjoint":
            split = len(pool) // 2
            declared, file_keys = pool[:split], pool[split:]
        case _:
            declared, file_keys = pool, []
    return list(declared), dict.fromkeys(file_keys, template)
