"""Request fingerprinting facade.

Example:
    >>> get_request_hash()({"method": "POST"})
    'a090e27e1f447db93d79008d457f133fd2fde34192f91e526c21e7ec49ccbcd9'
    >>> get_request_hash(expand=True)({"method": "GET", "url": "/foo"})
    'method:\\nget\\npathname:\\n/foo'
"""

from __future__ import annotations

import logging
from typing import Any

from reqhash.core.config.models import HashConfig
from reqhash.core.digest import fingerprint
from reqhash.core.extractors import extract_cookies, extract_headers
from reqhash.core.feed import build_feed, get_feed
from reqhash.core.serialization import UNDEFINED, serialize
from reqhash.core.utils.logging import log_performance

logger = logging.getLogger(__name__)


class RequestHasher:
    """Fingerprints requests with one fixed configuration.

    Instances hold no per-request state and can be shared between threads.
    """

    default_serializer = staticmethod(serialize)

    def __init__(self, config: HashConfig | None = None) -> None:
        self._config = config or HashConfig()

    @property
    def config(self) -> HashConfig:
        return self._config

    def serialize(self, value: Any = UNDEFINED) -> str:
        """Serialize with the configured serializer (canonical form by default)."""
        return (self._config.serializer or serialize)(value)

    def get_feed(self, label: str, value: Any = UNDEFINED) -> str:
        return get_feed(label, value, self._config.serializer)

    def get_cookies(self, request: Any) -> dict[str, str]:
        return extract_cookies(request, self._config.cookies)

    def get_headers(self, request: Any) -> dict[str, Any]:
        return extract_headers(
            request,
            self._config.headers,
            self._config.cookies,
            fold_cookies=self._config.fold_cookies,
        )

    def build_feed(self, request: Any) -> str:
        return build_feed(request, self._config)

    @log_performance
    def __call__(self, request: Any) -> str:
        """Fingerprint a request.

        Args:
            request: Request-like value (mapping, object or HttpRequest)

        Returns:
            Encoded digest of the request feed, or the feed itself in expand mode

        Raises:
            UnsupportedAlgorithmError: If the configured algorithm is not available
            UnsupportedEncodingError: If the configured encoding is not known
        """
        return fingerprint(self.build_feed(request), self._config)

    def __repr__(self) -> str:
        c = self._config
        return f"RequestHasher(algorithm={c.algorithm!r}, encoding={c.encoding!r}, expand={c.expand})"


def get_request_hash(config: HashConfig | None = None, **options: Any) -> RequestHasher:
    """Create a request hasher.

    Args:
        config: Complete configuration; mutually exclusive with options
        **options: HashConfig fields (algorithm, encoding, expand, headers,
            cookies, serializer, fold_cookies)

    Returns:
        RequestHasher bound to the configuration

    Raises:
        TypeError: If both config and options are given
        pydantic.ValidationError: If options are invalid
    """
    if config is not None and options:
        raise TypeError("Pass either a HashConfig or keyword options, not both")
    if config is None:
        config = HashConfig(**options)
    logger.debug(f"Created request hasher with {config.algorithm}/{config.encoding}")
    return RequestHasher(config)
