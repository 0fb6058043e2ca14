"""Tests for URL splitting and query decoding."""

from __future__ import annotations

from reqhash.core.feed import parse_query, split_url
from reqhash.core.hasher import get_request_hash


def test_split_url():
    """Test path and query extraction."""
    assert split_url("/foo?q=1") == ("/foo", "q=1")
    assert split_url("?q=1") == ("", "q=1")
    assert split_url("/foo") == ("/foo", "")
    assert split_url("http://host/a/b?c=d#e") == ("/a/b", "c=d")


def test_split_url_malformed_netloc():
    """Test malformed URLs fall back to plain splitting."""
    assert split_url("http://[::1/foo?x=1") == ("http://[::1/foo", "x=1")


def test_parse_query_decoding():
    """Test '+' and percent decoding."""
    assert parse_query("q=foo+bar&p=a%26b") == {"q": "foo bar", "p": "a&b"}


def test_parse_query_blank_and_repeated():
    """Test blank values and repeated keys."""
    assert parse_query("a&b=&c=1&c=2&c=3") == {"a": "", "b": "", "c": ["1", "2", "3"]}


def test_parse_query_empty():
    """Test an empty query."""
    assert parse_query("") == {}


def test_split_url_keeps_leading_double_slash_path():
    """Test a '//' request path is not read as a host."""
    assert split_url("//tenant-a/orders?x=1") == ("//tenant-a/orders", "x=1")
    assert split_url("//tenant-b/orders#top") == ("//tenant-b/orders", "")


def test_double_slash_paths_get_distinct_feeds():
    """Test different '//' paths keep distinct pathname sections."""
    request_hash = get_request_hash(expand=True)

    first = request_hash({"url": "//tenant-a/orders"})
    second = request_hash({"url": "//tenant-b/orders"})

    assert first == "pathname:\n//tenant-a/orders"
    assert first != second


def test_parse_query_keeps_invalid_escapes():
    """Test malformed percent escapes stay as raw text."""
    assert parse_query("a=%zz&b=100%") == {"a": "%zz", "b": "100%"}


def test_parse_query_invalid_utf8_bytes_are_replaced():
    """Test well-formed escapes of invalid UTF-8 decode to U+FFFD."""
    assert parse_query("a=%ff") == {"a": "\ufffd"}
