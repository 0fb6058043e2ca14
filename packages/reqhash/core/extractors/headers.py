"""Header allow-list filtering with cookie folding."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from reqhash.core.extractors.cookies import COOKIE_HEADER, extract_cookies
from reqhash.core.models import coerce_request


def _find_key(headers: dict[str, Any], name: str) -> str | None:
    wanted = name.lower()
    return next((key for key in headers if key.lower() == wanted), None)


def extract_headers(
    request: Any,
    headers: Sequence[str] | None = None,
    cookies: Sequence[str] | None = None,
    *,
    fold_cookies: bool = True,
) -> dict[str, Any]:
    """Extract headers from a request, optionally filtered.

    Without a header allow-list the request headers pass through unchanged.
    With one, each allowed name is matched case-insensitively and stored
    under its lowercased name.

    When ``fold_cookies`` is set and the request carries a cookie header,
    the ``cookie`` entry is replaced by the parsed cookie mapping:

    - with a cookie allow-list, the filtered mapping is always added, even
      if ``cookie`` is not in the header allow-list;
    - without one, the full mapping replaces the raw header only if the
      header survived header filtering.

    An empty folded mapping removes the ``cookie`` entry.

    Args:
        request: Request-like value (see ``coerce_request``)
        headers: Header names to keep. None keeps all, empty list keeps none.
        cookies: Cookie names to keep (see ``extract_cookies``)
        fold_cookies: Replace the raw cookie header with a parsed mapping

    Returns:
        Mapping of header name to value or cookie mapping
    """
    req = coerce_request(request)

    result: dict[str, Any]
    if headers is None:
        result = dict(req.headers)
    else:
        result = {}
        for name in headers:
            value = req.header(name)
            if value is not None:
                result[name.lower()] = value

    if not fold_cookies or req.header(COOKIE_HEADER) is None:
        return result

    cookie_key = _find_key(result, COOKIE_HEADER)
    if cookie_key is None and cookies is None:
        return result

    folded = extract_cookies(req, cookies)
    target = cookie_key or COOKIE_HEADER
    if folded:
        result[target] = folded
    else:
        result.pop(target, None)
    return result
