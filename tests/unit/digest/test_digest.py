"""Tests for the digest stage."""

from __future__ import annotations

import pytest

from reqhash.core.config import HashConfig
from reqhash.core.digest import (
    compute_digest,
    encode_digest,
    feed_bytes,
    fingerprint,
    resolve_algorithm,
)
from reqhash.core.exceptions import (
    ReqHashError,
    UnsupportedAlgorithmError,
    UnsupportedEncodingError,
)
from reqhash.core.hasher import get_request_hash

SHA256_EMPTY = "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
MD5_EMPTY = "d41d8cd98f00b204e9800998ecf8427e"


class TestFingerprint:
    """Tests for fingerprint()."""

    def test_empty_feed_is_digest_of_empty_input(self):
        """Test the empty feed hashes to the algorithm's constant."""
        assert fingerprint("") == SHA256_EMPTY
        assert fingerprint("", HashConfig(algorithm="md5")) == MD5_EMPTY

    def test_known_feed(self):
        """Test a known sha256 digest."""
        assert fingerprint("method:\npost") == (
            "a090e27e1f447db93d79008d457f133fd2fde34192f91e526c21e7ec49ccbcd9"
        )

    def test_base64_encoding(self):
        """Test base64 output."""
        config = HashConfig(encoding="base64")

        assert fingerprint("", config) == "47DEQpj8HBSa+/TImW+5JCeuQeRkm5NMpJWZG3hSuFU="

    def test_base64url_encoding_is_unpadded(self):
        """Test base64url output."""
        config = HashConfig(encoding="base64url")

        assert fingerprint("", config) == "47DEQpj8HBSa-_TImW-5JCeuQeRkm5NMpJWZG3hSuFU"

    @pytest.mark.parametrize("feed", ["", "method:\npost", "data:\nfoo,bar"])
    def test_expand_returns_feed(self, feed: str):
        """Test expand mode round-trips the feed text."""
        assert fingerprint(feed, HashConfig(expand=True)) == feed

    def test_expand_skips_validation(self):
        """Test expand mode never touches the digest primitives."""
        config = HashConfig(expand=True, algorithm="nope", encoding="nope")

        assert fingerprint("x", config) == "x"

    def test_unsupported_algorithm(self):
        """Test unknown algorithms raise at call time."""
        config = HashConfig(algorithm="sha-9000")

        with pytest.raises(UnsupportedAlgorithmError) as exc_info:
            fingerprint("", config)

        assert exc_info.value.algorithm == "sha-9000"
        assert isinstance(exc_info.value, ReqHashError)
        assert isinstance(exc_info.value, ValueError)

    def test_unsupported_encoding(self):
        """Test unknown encodings raise at call time."""
        with pytest.raises(UnsupportedEncodingError, match="rot13"):
            fingerprint("", HashConfig(encoding="rot13"))

    def test_equal_feeds_stay_equal_across_configs(self):
        """Test switching algorithm/encoding keeps equality between equal feeds."""
        for config in (
            HashConfig(),
            HashConfig(algorithm="md5"),
            HashConfig(algorithm="sha512", encoding="base64"),
        ):
            assert fingerprint("a\nb", config) == fingerprint("a\nb", config)
            assert fingerprint("a\nb", config) != fingerprint("a\nc", config)


class TestPrimitives:
    """Tests for algorithm resolution and encoding."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [("sha256", "sha256"), ("SHA256", "sha256"), ("sha3-256", "sha3_256"), ("md5", "md5")],
    )
    def test_resolve_algorithm(self, name: str, expected: str):
        """Test algorithm name normalization."""
        assert resolve_algorithm(name) == expected

    def test_variable_length_algorithms_rejected(self):
        """Test shake algorithms need a length and are rejected."""
        with pytest.raises(UnsupportedAlgorithmError):
            resolve_algorithm("shake_128")

    def test_compute_digest_size(self):
        """Test raw digest bytes."""
        assert len(compute_digest(b"", "sha256")) == 32
        assert len(compute_digest(b"", "sha512")) == 64

    def test_encode_digest(self):
        """Test each encoding of the same bytes."""
        raw = bytes([0, 255, 16])

        assert encode_digest(raw, "hex") == "00ff10"
        assert encode_digest(raw, "HEX") == "00ff10"
        assert encode_digest(raw, "base64") == "AP8Q"
        assert encode_digest(raw, "latin1") == "\x00\xff\x10"
        assert encode_digest(raw, "binary") == "\x00\xff\x10"


class TestFeedBytes:
    """Tests for feed encoding before hashing."""

    def test_plain_text_is_utf8(self):
        """Test regular text encodes as UTF-8."""
        assert feed_bytes("data:\né") == "data:\né".encode()

    def test_lone_surrogate_is_replaced(self):
        """Test a lone surrogate becomes U+FFFD instead of raising."""
        assert feed_bytes("data:\n\ud800") == "data:\n\ufffd".encode()
        assert feed_bytes("\udc00x\ud800") == "\ufffdx\ufffd".encode()

    def test_surrogate_pair_is_combined(self):
        """Test a surrogate pair hashes like the astral character."""
        assert feed_bytes("\ud83d\ude00") == "\U0001f600".encode()

    def test_fingerprint_with_lone_surrogate_body(self):
        """Test a body holding a lone surrogate still fingerprints."""
        request_hash = get_request_hash()

        assert request_hash({"body": "\ud800"}) == request_hash({"body": "\ufffd"})
        assert fingerprint("data:\n\ud800") == fingerprint("data:\n\ufffd")
