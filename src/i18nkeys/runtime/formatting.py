"""Positional argument substitution for translation templates.

Templates use printf-style placeholders and are substituted with Python's
``%`` operator. Resource files written for Apple platforms also use
Foundation specifiers, which are normalized first:

    %@        -> %s
    %ld, %lld -> %d            (C length modifiers are dropped)
    %2$@      -> second argument, wherever it appears

In a template that uses explicit positions, an unnumbered specifier takes the
position after the previous specifier (the first one takes position 1).

Argument-count mismatches are not checked here. They surface exactly as the
``%`` operator reports them: TypeError for sequential specifiers, KeyError for
an explicit position without an argument.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from functools import lru_cache

from i18nkeys.runtime.value_types import FormatArgument

__all__ = [
    "normalize_template",
    "substitute",
]

# Specifier grammar: %[position$][flags][width][.precision][length]conversion
_SPECIFIER_PATTERN = re.compile(
    r"%(?:(?P<position>[1-9][0-9]*)\$)?"
    r"(?P<flags>[-+ #0]*)"
    r"(?P<width>[0-9]+)?"
    r"(?P<precision>\.[0-9]+)?"
    r"(?P<length>hh|h|ll|l|q|L|z|t|j)?"
    r"(?P<conversion>[@diouxXeEfFgGcsr%])"
)

# Upper bound on distinct normalized templates kept in memory
_NORMALIZE_CACHE_SIZE: int = 1024


@lru_cache(maxsize=_NORMALIZE_CACHE_SIZE)
def normalize_template(template: str) -> tuple[str, bool]:
    """Rewrite a template into a Python %-format string.

    Args:
        template: Template as stored in the resource table

    Returns:
        Tuple of (python_template, positional). When positional is True the
        template uses ``%(n)`` mapping keys and must be formatted with a
        mapping of 1-based position strings to arguments.
    """
    matches = list(_SPECIFIER_PATTERN.finditer(template))
    positional = any(m.group("position") for m in matches)

    parts: list[str] = []
    last_end = 0
    next_position = 1
    for match in matches:
        parts.append(template[last_end : match.start()])
        last_end = match.end()

        conversion = match.group("conversion")
        if conversion == "%":
            parts.append("%%")
            continue
        if conversion == "@":
            conversion = "s"

        modifiers = (match.group("flags") or "") + (match.group("width") or "")
        modifiers += match.group("precision") or ""

        if positional:
            position = int(match.group("position") or next_position)
            next_position = position + 1
            parts.append(f"%({position}){modifiers}{conversion}")
        else:
            parts.append(f"%{modifiers}{conversion}")

    parts.append(template[last_end:])
    return "".join(parts), positional


def substitute(template: str, args: Sequence[FormatArgument]) -> str:
    """Substitute positional arguments into a template.

    With no arguments no specifier is substituted: the only rewrite is the
    ``%%`` escape collapsing to ``%``, the same as when arguments are given.
    A lone ``%`` is left as it is.

    Args:
        template: Template as stored in the resource table
        args: Ordered format arguments

    Returns:
        Formatted string

    Raises:
        TypeError: Wrong number of sequential arguments, or an argument the
            conversion cannot accept
        KeyError: Explicit position beyond the supplied arguments
        ValueError: Malformed specifier in the template
    """
    if not args:
        return template.replace("%%", "%")
    python_template, positional = normalize_template(template)
    if positional:
        return python_template % {str(index): arg for index, arg in enumerate(args, start=1)}
    return python_template % tuple(args)
