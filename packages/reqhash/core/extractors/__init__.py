"""Header and cookie extraction from request-like values."""

from reqhash.core.extractors.cookies import extract_cookies, parse_cookie_header
from reqhash.core.extractors.headers import extract_headers

__all__ = [
    "extract_cookies",
    "extract_headers",
    "parse_cookie_header",
]
