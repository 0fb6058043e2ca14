"""Own-entry enumeration for keyed collections.

A value is a keyed collection when :func:`own_entries` returns a list for it
(possibly empty). Primitives return ``None``. Support for new value types is
added by registering an implementation or by implementing
:class:`HasOwnEntries`.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
import dataclasses
from functools import singledispatch
import re
from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel

from reqhash.core.serialization.values import to_string

Entries = list[tuple[str, Any]]


@runtime_checkable
class HasOwnEntries(Protocol):
    """Protocol for objects that expose their own key/value pairs."""

    def own_entries(self) -> Iterable[tuple[Any, Any]]:
        """Return the (key, value) pairs that make up this object."""
        ...


@singledispatch
def own_entries(value: Any) -> Entries | None:
    """Enumerate a value's own (key, value) pairs.

    Args:
        value: Any value

    Returns:
        List of entries with stringified keys, or None for primitives
    """
    if isinstance(value, HasOwnEntries):
        return [(to_string(key), child) for key, child in value.own_entries()]
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return [(field.name, getattr(value, field.name)) for field in dataclasses.fields(value)]
    return None


@own_entries.register(str)
@own_entries.register(bytes)
@own_entries.register(bytearray)
def _(value: str | bytes | bytearray) -> None:
    return None


@own_entries.register(Mapping)
def _(value: Mapping) -> Entries:
    return [(to_string(key), child) for key, child in value.items()]


@own_entries.register(list)
@own_entries.register(tuple)
def _(value: list | tuple) -> Entries:
    return [(str(index), child) for index, child in enumerate(value)]


@own_entries.register(BaseModel)
def _(value: BaseModel) -> Entries:
    return list(value.model_dump().items())


# Pattern and set values carry no own enumerable data
@own_entries.register(re.Pattern)
@own_entries.register(set)
@own_entries.register(frozenset)
def _(value: Any) -> Entries:
    return []


def is_keyed(value: Any) -> bool:
    """Check whether a value is a keyed collection."""
    return own_entries(value) is not None
