"""URL splitting and query-string decoding."""

from __future__ import annotations

import re
from urllib.parse import parse_qsl, urlsplit

_ABSOLUTE_URL_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*://")


def split_url(url: str) -> tuple[str, str]:
    """Split a URL into its path and raw query string.

    Only absolute ``scheme://`` URLs are parsed for a host; anything else is
    a request target, so a leading ``//`` stays part of the path. The
    fragment is dropped.

    Example:
        >>> split_url("/foo?q=1")
        ('/foo', 'q=1')
        >>> split_url("?q=foo+bar")
        ('', 'q=foo+bar')
        >>> split_url("//tenant-a/orders")
        ('//tenant-a/orders', '')
    """
    if _ABSOLUTE_URL_RE.match(url):
        try:
            parts = urlsplit(url)
        except ValueError:
            # Malformed netloc (e.g. unbalanced IPv6 brackets)
            pass
        else:
            return parts.path, parts.query
    path, _, query = url.partition("#")[0].partition("?")
    return path, query


def parse_query(query: str) -> dict[str, str | list[str]]:
    """Decode a query string into a mapping.

    ``+`` decodes to a space and percent escapes are decoded. Keys without a
    value map to an empty string; repeated keys collect their values into a
    list in order of appearance.

    Args:
        query: Raw query string without the leading ``?``

    Returns:
        Mapping of key to value or list of values
    """
    result: dict[str, str | list[str]] = {}
    for key, value in parse_qsl(query.lstrip("?"), keep_blank_values=True):
        existing = result.get(key)
        if existing is None:
            result[key] = value
        elif isinstance(existing, list):
            existing.append(value)
        else:
            result[key] = [existing, value]
    return result
