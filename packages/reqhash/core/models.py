"""Request model consumed by the fingerprinting pipeline."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from reqhash.core.serialization import UNDEFINED

_REQUEST_FIELDS = ("method", "url", "query", "body", "headers")


class HttpRequest(BaseModel):
    """
    HTTP-like request snapshot.

    Every part is optional; missing parts simply leave their feed section
    out.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    method: str | None = Field(default=None, description="HTTP method, any case")
    url: str | None = Field(default=None, description="Request URL or path, may include ?query")
    query: str | None = Field(default=None, description="Raw query string without leading '?'")
    body: Any = Field(default=UNDEFINED, description="Request body, any value")
    headers: dict[str, Any] = Field(default_factory=dict, description="Header name to value")

    @field_validator("url", mode="before")
    @classmethod
    def _url_text(cls, value: Any) -> Any:
        return value if value is None or isinstance(value, str) else str(value)

    @field_validator("headers", mode="before")
    @classmethod
    def _none_headers(cls, value: Any) -> Any:
        return {} if value is None else value

    def header(self, name: str) -> Any:
        """Look up a header case-insensitively.

        Args:
            name: Header name

        Returns:
            Header value, or None when absent
        """
        wanted = name.lower()
        for key, value in self.headers.items():
            if key.lower() == wanted:
                return value
        return None


def coerce_request(request: HttpRequest | Mapping[str, Any] | Any) -> HttpRequest:
    """Build an HttpRequest from a mapping, an object or an HttpRequest.

    Args:
        request: Request-like value. Mappings are read by key, other objects
            by attribute; unknown keys are ignored

    Returns:
        HttpRequest instance
    """
    if isinstance(request, HttpRequest):
        return request
    if request is None:
        return HttpRequest()
    if isinstance(request, Mapping):
        data = {name: request[name] for name in _REQUEST_FIELDS if name in request}
    else:
        data = {
            name: getattr(request, name)
            for name in _REQUEST_FIELDS
            if getattr(request, name, UNDEFINED) is not UNDEFINED
        }
    return HttpRequest.model_validate(data)
