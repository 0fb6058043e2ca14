"""Configuration models for reqhash."""

from __future__ import annotations

from collections.abc import Callable
import importlib
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from reqhash.core.exceptions import ConfigurationError


def import_object(path: str) -> Any:
    """Import an object from a dotted path.

    Accepts ``"package.module:attr"`` or ``"package.module.attr"``.

    Raises:
        ConfigurationError: If the module or attribute cannot be found

    Example:
        >>> import_object("json:dumps")
        <function dumps at ...>
    """
    module_name, sep, attr = path.partition(":")
    if not sep:
        module_name, _, attr = path.rpartition(".")
    if not module_name or not attr:
        raise ConfigurationError(f"Invalid import path: {path!r}")

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise ConfigurationError(f"Cannot import module {module_name!r}: {e}") from e

    obj = module
    for part in attr.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as e:
            raise ConfigurationError(f"{module_name!r} has no attribute {attr!r}") from e
    return obj


class HashConfig(BaseModel):
    """Request fingerprinting configuration.

    Built once per hasher and never mutated afterwards.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    algorithm: str = Field(
        default="sha256", min_length=1, description="hashlib digest algorithm name"
    )

    encoding: str = Field(
        default="hex",
        min_length=1,
        description="Digest output encoding: hex, base64, base64url, latin1",
    )

    expand: bool = Field(
        default=False, description="Return the raw feed instead of a digest (debugging)"
    )

    headers: tuple[str, ...] | None = Field(
        default=None,
        description="Header allow-list (None keeps all headers, empty keeps none)",
    )

    cookies: tuple[str, ...] | None = Field(
        default=None,
        description="Cookie allow-list (None keeps all cookies, empty keeps none)",
    )

    serializer: Callable[[Any], str] | None = Field(
        default=None,
        exclude=True,
        description="Serializer override for section text (callable or import path)",
    )

    fold_cookies: bool = Field(
        default=True,
        description="Replace the cookie header with its parsed name/value mapping",
    )

    @field_validator("serializer", mode="before")
    @classmethod
    def _resolve_serializer(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = import_object(value)
        if value is not None and not callable(value):
            raise ConfigurationError(f"Serializer must be callable, got {type(value).__name__}")
        return value


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    filename: str | None = Field(default=None, description="Log file path (stdout when unset)")
    structured: bool = Field(default=False, description="Emit structured JSON log lines")

    @field_validator("level", mode="before")
    @classmethod
    def _upper_level(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value


class AppConfig(BaseModel):
    """Application configuration: hashing plus logging."""

    hashing: HashConfig = Field(default_factory=HashConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
