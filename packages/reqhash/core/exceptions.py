"""Exceptions raised by reqhash."""

from __future__ import annotations


class ReqHashError(Exception):
    """Base exception for this project."""


class ConfigurationError(ReqHashError, ValueError):
    """Raised when a hashing configuration cannot be resolved."""


class UnsupportedAlgorithmError(ReqHashError, ValueError):
    """Raised when the digest algorithm is not available."""

    def __init__(self, algorithm: str):
        super().__init__(f"Unsupported digest algorithm: {algorithm!r}")
        self.algorithm = algorithm


class UnsupportedEncodingError(ReqHashError, ValueError):
    """Raised when the digest output encoding is not known."""

    def __init__(self, encoding: str):
        super().__init__(f"Unsupported digest encoding: {encoding!r}")
        self.encoding = encoding
