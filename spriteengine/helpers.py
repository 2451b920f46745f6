"""Small string and sequence helpers shared across the engine."""

from __future__ import annotations


def quote_str(text: str) -> str:
    """Wrap ``text`` in single quotes for log messages."""
    return f"'{text}'"


def replace_string(subject: str, search: str, replace: str) -> str:
    """Replace every occurrence of ``search`` in ``subject``, left to right.

    Replacements are not rescanned, so a replacement that contains the
    search text does not cause repeated substitution.
    """
    if not search:
        raise ValueError("search text must not be empty")
    return subject.replace(search, replace)


def inc_fill(count: int) -> list[int]:
    """Return ``[0, 1, ..., count - 1]``."""
    if count < 0:
        raise ValueError("count must not be negative")
    return list(range(count))