"""Test suite for reqhash.

Test Structure:
- unit/: Unit tests per component (serialization, extractors, feed, digest,
  config, utils) plus end-to-end digest vectors in test_hasher.py
- conftest.py: Shared request and hasher fixtures
"""
