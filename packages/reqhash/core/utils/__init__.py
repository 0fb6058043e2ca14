"""Shared utilities for reqhash."""

from reqhash.core.utils.json import read_json
from reqhash.core.utils.logging import configure_logging, get_logger, log_performance

__all__ = [
    "configure_logging",
    "get_logger",
    "log_performance",
    "read_json",
]
