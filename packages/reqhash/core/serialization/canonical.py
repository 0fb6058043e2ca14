"""Canonical form of nested values.

Every keyed collection is flattened into lines of comma-joined keys ending in
a leaf's string form. Keys are sorted at every level, so the output depends
only on the value's structure, never on insertion order. Only the first line
produced by a child carries the parent key; the child's remaining lines are
emitted as they are:

    >>> print(serialize({"b": {"y": 2, "x": 1}, "a": "z"}))
    a,z
    b,x,1
    y,2
"""

from __future__ import annotations

from typing import Any

from reqhash.core.serialization.entries import Entries, own_entries
from reqhash.core.serialization.values import UNDEFINED, to_string


def _sort_key(key: str) -> bytes:
    # UTF-16 code unit order, plain lexicographic ("10" < "9")
    return key.encode("utf-16-be", "surrogatepass")


def _lines(entries: Entries) -> list[str]:
    lines: list[str] = []
    for key, child in sorted(entries, key=lambda entry: _sort_key(entry[0])):
        nested = own_entries(child)
        sub = _lines(nested) if nested is not None else [to_string(child)]
        head = sub[0] if sub else ""
        lines.append(f"{key},{head}")
        lines.extend(sub[1:])
    return lines


def build_lines(value: Any) -> list[str]:
    """Build the canonical lines of a keyed collection.

    Args:
        value: Keyed collection (mapping, list, tuple, model, ...)

    Returns:
        Canonical lines in emission order; empty for a collection without
        own entries

    Raises:
        TypeError: If value is not a keyed collection
    """
    entries = own_entries(value)
    if entries is None:
        raise TypeError(f"Expected a keyed collection, got {type(value).__name__}")
    return _lines(entries)


def serialize(value: Any = UNDEFINED) -> str:
    """Serialize any value into its canonical form.

    Primitives return their default string form. Keyed collections return
    their canonical lines joined by newlines (empty string when there are
    none).

    Args:
        value: Value to serialize (defaults to UNDEFINED)

    Returns:
        Canonical text

    Example:
        >>> serialize({"foo": "bar"})
        'foo,bar'
        >>> serialize(float("nan"))
        'NaN'
    """
    entries = own_entries(value)
    if entries is None:
        return to_string(value)
    return "\n".join(_lines(entries))
