"""Endpoint collection models.

These mirror the JSON the mock tool stores for its collections. The code
generator only reads an endpoint's path, method and bodies.
"""

import json
import uuid
from dataclasses import dataclass, field
from typing import Any

from .codegen.core.schema import ObjectRole

HTTP_METHODS = ("GET", "POST", "PUT", "DELETE", "PATCH", "HEAD", "OPTIONS")


@dataclass
class Header:
    key: str
    value: str


@dataclass
class EndpointResponse:
    status: int = 200
    body: str = ""
    content_type: str = "application/json"


@dataclass
class EndpointRequest:
    body: str | None = None
    content_type: str = "application/json"


@dataclass
class Endpoint:
    """A mocked endpoint with its canned response."""

    path: str
    method: str = "GET"
    id: str = field(default_factory=lambda: uuid.uuid4().hex)
    description: str = ""
    headers: list[Header] = field(default_factory=list)
    response: EndpointResponse = field(default_factory=EndpointResponse)
    request: EndpointRequest | None = None

    def __post_init__(self):
        self.method = self.method.upper()

    def body_for(self, role: ObjectRole) -> str | None:
        """Return the body text for a request/response role, if any."""
        if role is ObjectRole.RESPONSE:
            return self.response.body
        return self.request.body if self.request else None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Endpoint":
        """Build an endpoint from the stored JSON form (camelCase keys)."""
        if "path" not in data:
            raise ValueError("Endpoint is missing 'path'")

        response_data = data.get("response") or {}
        response = EndpointResponse(
            status=int(response_data.get("status", 200)),
            body=_as_text(response_data.get("body", "")),
            content_type=response_data.get("contentType", "application/json"),
        )

        request = None
        request_data = data.get("request")
        if request_data:
            request = EndpointRequest(
                body=_as_text(request_data.get("body")),
                content_type=request_data.get("contentType", "application/json"),
            )

        kwargs: dict[str, Any] = {}
        if data.get("id") is not None:
            kwargs["id"] = str(data["id"])

        return cls(
            path=data["path"],
            method=data.get("method", "GET"),
            description=data.get("description", ""),
            headers=[
                Header(key=h.get("key", ""), value=h.get("value", ""))
                for h in data.get("headers") or []
            ],
            response=response,
            request=request,
            **kwargs,
        )

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "id": self.id,
            "path": self.path,
            "method": self.method,
            "description": self.description,
            "headers": [{"key": h.key, "value": h.value} for h in self.headers],
            "response": {
                "status": self.response.status,
                "body": self.response.body,
                "contentType": self.response.content_type,
            },
        }
        if self.request is not None:
            result["request"] = {
                "body": self.request.body,
                "contentType": self.request.content_type,
            }
        return result


@dataclass
class EndpointCollection:
    """A named collection of endpoints."""

    name: str
    description: str = ""
    endpoints: list[Endpoint] = field(default_factory=list)
    id: str = field(default_factory=lambda: uuid.uuid4().hex)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "EndpointCollection":
        kwargs: dict[str, Any] = {}
        if data.get("id") is not None:
            kwargs["id"] = str(data["id"])
        return cls(
            name=data.get("name", "Untitled"),
            description=data.get("description", ""),
            endpoints=[Endpoint.from_dict(e) for e in data.get("endpoints") or []],
            **kwargs,
        )


def _as_text(body: Any) -> str | None:
    """Bodies are stored as JSON text, but accept already-parsed values too."""
    if body is None or isinstance(body, str):
        return body
    return json.dumps(body)
