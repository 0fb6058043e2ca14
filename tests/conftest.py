"""Shared pytest fixtures for reqhash tests."""

from __future__ import annotations

import pytest

from reqhash.core.config import HashConfig
from reqhash.core.hasher import RequestHasher, get_request_hash

# ============================================================================
# Request Fixtures
# ============================================================================


@pytest.fixture
def cookie_request() -> dict:
    """Request carrying only a cookie header with three cookies."""
    return {"headers": {"cookie": "foo=foo; bar=bar; lorem=lorem"}}


@pytest.fixture
def mixed_headers_request() -> dict:
    """Request with mixed-case headers and cookies."""
    return {
        "headers": {
            "x-bar": "bar",
            "x-foo": "foo",
            "content-type": "application/json",
            "cookie": "foo=foo; bar=bar; lorem=lorem",
        }
    }


@pytest.fixture
def complete_request() -> dict:
    """Request with every feed section present."""
    return {
        "body": "foo=bar",
        "method": "POST",
        "url": "/foo?q=1",
        "headers": {
            "Content-Type": "application/json",
            "cookie": "foo=bar; lorem=ipsum",
        },
    }


# ============================================================================
# Hasher Fixtures
# ============================================================================


@pytest.fixture
def default_hasher() -> RequestHasher:
    """Hasher with default configuration (sha256/hex)."""
    return get_request_hash()


@pytest.fixture
def expand_hasher() -> RequestHasher:
    """Hasher returning raw feeds."""
    return RequestHasher(HashConfig(expand=True))
