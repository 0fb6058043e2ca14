"""Configuration management for reqhash."""

from reqhash.core.config.loader import (
    configure_logging,
    load_app_config,
    load_config,
    load_hash_config,
)
from reqhash.core.config.models import AppConfig, HashConfig, LoggingConfig, import_object

__all__ = [
    # Loaders
    "load_config",
    "load_app_config",
    "load_hash_config",
    "configure_logging",
    # Models
    "AppConfig",
    "HashConfig",
    "LoggingConfig",
    "import_object",
]
