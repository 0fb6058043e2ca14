"""Feed assembly: labeled, newline-joined request sections."""

from reqhash.core.feed.assembler import (
    DATA_LABEL,
    HEADERS_LABEL,
    METHOD_LABEL,
    PATHNAME_LABEL,
    QUERY_LABEL,
    build_feed,
    feed_headers,
    get_feed,
)
from reqhash.core.feed.query import parse_query, split_url

__all__ = [
    "DATA_LABEL",
    "HEADERS_LABEL",
    "METHOD_LABEL",
    "PATHNAME_LABEL",
    "QUERY_LABEL",
    "build_feed",
    "feed_headers",
    "get_feed",
    "parse_query",
    "split_url",
]
