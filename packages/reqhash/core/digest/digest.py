"""Feed hashing and digest encoding.

Algorithms are resolved through :mod:`hashlib`; any algorithm with a fixed
digest size is accepted. Output encodings mirror the usual digest encodings
of web runtimes (hex, base64, base64url, latin1).
"""

from __future__ import annotations

import base64
from collections.abc import Callable
import hashlib
import logging

from reqhash.core.config.models import HashConfig
from reqhash.core.exceptions import UnsupportedAlgorithmError, UnsupportedEncodingError

logger = logging.getLogger(__name__)


def _base64url(digest: bytes) -> str:
    return base64.urlsafe_b64encode(digest).decode("ascii").rstrip("=")


_ENCODERS: dict[str, Callable[[bytes], str]] = {
    "hex": bytes.hex,
    "base64": lambda digest: base64.b64encode(digest).decode("ascii"),
    "base64url": _base64url,
    "latin1": lambda digest: digest.decode("latin-1"),
    "binary": lambda digest: digest.decode("latin-1"),
}

SUPPORTED_ENCODINGS = frozenset(_ENCODERS)


def resolve_algorithm(algorithm: str) -> str:
    """Map an algorithm name onto its hashlib name.

    Names are case-insensitive and accept ``-`` in place of ``_``
    (``"SHA3-256"`` resolves to ``"sha3_256"``).

    Raises:
        UnsupportedAlgorithmError: If hashlib has no such fixed-size algorithm
    """
    name = algorithm.strip().lower()
    if name not in hashlib.algorithms_available:
        name = name.replace("-", "_")
    if name not in hashlib.algorithms_available or name.startswith("shake_"):
        raise UnsupportedAlgorithmError(algorithm)
    return name


def feed_bytes(feed: str) -> bytes:
    """Encode a feed as UTF-8, replacing lone surrogates with U+FFFD.

    Surrogate pairs left in the string are combined into their code point
    first, so text decoded from JSON escapes hashes like the same text
    written directly.
    """
    try:
        return feed.encode("utf-8")
    except UnicodeEncodeError:
        repaired = feed.encode("utf-16-le", "surrogatepass").decode("utf-16-le", "replace")
        return repaired.encode("utf-8")


def compute_digest(data: bytes, algorithm: str) -> bytes:
    """Hash bytes with the named algorithm.

    Args:
        data: Input bytes
        algorithm: Algorithm name (e.g. "sha256", "md5")

    Returns:
        Raw digest bytes

    Raises:
        UnsupportedAlgorithmError: If the algorithm is not available
    """
    name = resolve_algorithm(algorithm)
    try:
        hasher = hashlib.new(name)
    except ValueError as e:
        raise UnsupportedAlgorithmError(algorithm) from e
    hasher.update(data)
    return hasher.digest()


def encode_digest(digest: bytes, encoding: str) -> str:
    """Encode digest bytes as text.

    Raises:
        UnsupportedEncodingError: If the encoding is not one of SUPPORTED_ENCODINGS
    """
    encoder = _ENCODERS.get(encoding.strip().lower())
    if encoder is None:
        raise UnsupportedEncodingError(encoding)
    return encoder(digest)


def fingerprint(feed: str, config: HashConfig | None = None) -> str:
    """Reduce a feed to its fingerprint.

    In expand mode the feed is returned unchanged. Otherwise the UTF-8 bytes
    of the feed are hashed with ``config.algorithm`` and encoded with
    ``config.encoding``; an empty feed yields the digest of empty input.

    Args:
        feed: Assembled feed text
        config: Hashing configuration (defaults to sha256/hex)

    Returns:
        Encoded digest, or the feed itself in expand mode

    Raises:
        UnsupportedAlgorithmError: If the algorithm is not available
        UnsupportedEncodingError: If the encoding is not known
    """
    config = config or HashConfig()
    if config.expand:
        return feed

    if config.encoding.strip().lower() not in _ENCODERS:
        raise UnsupportedEncodingError(config.encoding)

    digest = compute_digest(feed_bytes(feed), config.algorithm)
    logger.debug(f"Hashed {len(feed)} feed chars with {config.algorithm}/{config.encoding}")
    return encode_digest(digest, config.encoding)
