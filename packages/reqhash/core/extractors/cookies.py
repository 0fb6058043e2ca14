"""Cookie header parsing and allow-list filtering."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any
from urllib.parse import unquote

from reqhash.core.models import coerce_request

COOKIE_HEADER = "cookie"


def parse_cookie_header(header: str) -> dict[str, str]:
    """Parse a ``Cookie`` header into a name to value mapping.

    Pairs are separated by ``;`` and trimmed. Entries without ``=`` are
    skipped, double quotes around a value are removed and values are
    percent-decoded. The first occurrence of a name wins.

    Args:
        header: Raw header value, e.g. ``"foo=bar; lorem=ipsum"``

    Returns:
        Mapping of cookie name to value

    Example:
        >>> parse_cookie_header("foo=bar; lorem=ipsum")
        {'foo': 'bar', 'lorem': 'ipsum'}
    """
    cookies: dict[str, str] = {}
    for pair in header.split(";"):
        name, sep, value = pair.partition("=")
        if not sep:
            continue
        name = name.strip()
        if not name or name in cookies:
            continue
        value = value.strip()
        if len(value) >= 2 and value[0] == value[-1] == '"':
            value = value[1:-1]
        cookies[name] = unquote(value)
    return cookies


def extract_cookies(request: Any, allow_list: Sequence[str] | None = None) -> dict[str, str]:
    """Extract cookies from a request, optionally filtered.

    Args:
        request: Request-like value (see ``coerce_request``)
        allow_list: Cookie names to keep. None keeps every cookie, an empty
            list keeps none. Names missing from the request are ignored.

    Returns:
        Mapping of cookie name to value (empty when there is no cookie header)
    """
    header = coerce_request(request).header(COOKIE_HEADER)
    if isinstance(header, (list, tuple)):
        header = "; ".join(str(part) for part in header)
    if not header or not isinstance(header, str):
        return {}

    cookies = parse_cookie_header(header)
    if allow_list is None:
        return cookies

    allowed = set(allow_list)
    return {name: value for name, value in cookies.items() if name in allowed}
