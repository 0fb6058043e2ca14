"""Digest stage: hashing and encoding of assembled feeds."""

from reqhash.core.digest.digest import (
    SUPPORTED_ENCODINGS,
    compute_digest,
    encode_digest,
    feed_bytes,
    fingerprint,
    resolve_algorithm,
)

__all__ = [
    "SUPPORTED_ENCODINGS",
    "compute_digest",
    "encode_digest",
    "feed_bytes",
    "fingerprint",
    "resolve_algorithm",
]
