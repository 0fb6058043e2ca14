"""Canonical serialization of arbitrary nested values.

Turns any value into a deterministic, key-sorted, line-oriented string that
does not depend on insertion order.
"""

from reqhash.core.serialization.canonical import build_lines, serialize
from reqhash.core.serialization.entries import HasOwnEntries, is_keyed, own_entries
from reqhash.core.serialization.values import UNDEFINED, is_falsy, to_string

__all__ = [
    # Canonical form
    "serialize",
    "build_lines",
    # Entry enumeration
    "HasOwnEntries",
    "is_keyed",
    "own_entries",
    # Leaves
    "UNDEFINED",
    "is_falsy",
    "to_string",
]
