"""Feed assembly.

A feed is the text that gets hashed for a request. It is made of labeled
sections in a fixed order; each present section contributes
``"<label>\\n<text>"`` and sections are joined with newlines:

    method:
    post
    pathname:
    /foo
    query:
    q,1
    data:
    foo=bar
    headers:
    content-type,application/json
    cookie,foo,bar

Absent sections leave no trace, so an empty request yields an empty feed.
"""

from __future__ import annotations

from collections.abc import Callable
import logging
from typing import Any

from reqhash.core.config.models import HashConfig
from reqhash.core.extractors import extract_headers
from reqhash.core.feed.query import parse_query, split_url
from reqhash.core.models import HttpRequest, coerce_request
from reqhash.core.serialization import UNDEFINED, is_falsy, serialize

logger = logging.getLogger(__name__)

Serializer = Callable[[Any], str]

METHOD_LABEL = "method:"
PATHNAME_LABEL = "pathname:"
QUERY_LABEL = "query:"
DATA_LABEL = "data:"
HEADERS_LABEL = "headers:"


def get_feed(label: str, value: Any = UNDEFINED, serializer: Serializer | None = None) -> str:
    """Format a single feed section.

    Args:
        label: Section label
        value: Raw section value
        serializer: Serializer for the section text (canonical form by default)

    Returns:
        ``"<label>\\n<text>"``, or an empty string when the value is falsy or
        serializes to empty text

    Example:
        >>> get_feed("foo", "bar")
        'foo\\nbar'
        >>> get_feed("foo", 0)
        ''
    """
    if is_falsy(value):
        return ""
    text = (serializer or serialize)(value)
    if not text:
        return ""
    return f"{label}\n{text}"


def _is_present(value: Any) -> bool:
    # Presence is always judged with the canonical serializer, never the override
    return not is_falsy(value) and serialize(value) != ""


def feed_headers(request: HttpRequest | Any, config: HashConfig | None = None) -> dict[str, Any]:
    """Collect the header mapping of the ``headers`` section.

    Headers are filtered and cookie-folded per config, then keyed by their
    lowercased names (later duplicates win).
    """
    config = config or HashConfig()
    extracted = extract_headers(
        request, config.headers, config.cookies, fold_cookies=config.fold_cookies
    )
    return {name.lower(): value for name, value in extracted.items()}


def _query_text(req: HttpRequest) -> str:
    # Query sections need a URL; an explicit query only fills in a missing one
    if not req.url:
        return ""
    _, query = split_url(req.url)
    return query or req.query or ""


def build_feed(request: HttpRequest | Any, config: HashConfig | None = None) -> str:
    """Assemble the feed text of a request.

    Sections, in order: ``method:`` (lowercased), ``pathname:`` (URL path),
    ``query:`` (decoded query mapping), ``data:`` (body), ``headers:``
    (filtered headers with folded cookies).

    Args:
        request: Request-like value (see ``coerce_request``)
        config: Hashing configuration

    Returns:
        Feed text, empty when no section is present
    """
    config = config or HashConfig()
    serializer = config.serializer or serialize
    req = coerce_request(request)

    pathname = split_url(req.url)[0] if req.url else ""
    query = _query_text(req)

    values: list[tuple[str, Any]] = [
        (METHOD_LABEL, req.method.lower() if req.method else None),
        (PATHNAME_LABEL, pathname),
        (QUERY_LABEL, parse_query(query) if query else None),
        (DATA_LABEL, req.body),
        (HEADERS_LABEL, feed_headers(req, config)),
    ]

    sections = [
        get_feed(label, value, serializer) for label, value in values if _is_present(value)
    ]
    feed = "\n".join(section for section in sections if section)
    logger.debug(f"Built feed with {len(sections)} section(s)")
    return feed
