"""Postman collection import.

Converts Postman v2 collections (and their environments) into endpoints
so their example responses and raw request bodies can feed extraction.
"""

import re
from typing import Any
from urllib.parse import urlparse

from .logging_config import get_logger
from .models import (
    Endpoint,
    EndpointCollection,
    EndpointRequest,
    EndpointResponse,
    Header,
)

logger = get_logger(__name__)

POSTMAN_SCHEMA_HOST = "schema.getpostman.com"
DEFAULT_RESPONSE_BODY = '{"message": "OK"}'
VARIABLE_PATTERN = re.compile(r"{{([^}]+)}}")

# Substring of a variable name -> substitute used when no environment value exists
DEFAULT_VARIABLE_VALUES = {
    "apiKey": "demo-api-key",
    "accessToken": "demo-access-token",
    "authToken": "demo-auth-token",
    "bearerToken": "demo-bearer-token",
    "env": "demo",
    "environment": "demo",
    "stage": "demo",
    "version": "v1",
    "apiVersion": "v1",
    "baseUrl": "",
    "apiUrl": "",
    "host": "",
    "appCtx": "",
    "appPort": "8080",
}
FALLBACK_VARIABLE_VALUE = "demo-value"


class PostmanError(Exception):
    """Raised when data is not a usable Postman collection or environment."""

    pass


def is_postman_collection(data: Any) -> bool:
    """Check for a Postman v2 collection export."""
    if not isinstance(data, dict):
        return False
    info = data.get("info")
    return (
        isinstance(info, dict)
        and isinstance(info.get("name"), str)
        and isinstance(info.get("schema"), str)
        and POSTMAN_SCHEMA_HOST in info["schema"]
        and isinstance(data.get("item"), list)
    )


def is_postman_environment(data: Any) -> bool:
    """Check for a Postman environment export."""
    if not isinstance(data, dict):
        return False
    values = data.get("values")
    return (
        isinstance(values, list)
        and data.get("_postman_variable_scope") == "environment"
        and all(
            isinstance(v, dict)
            and isinstance(v.get("key"), str)
            and isinstance(v.get("value"), str)
            and isinstance(v.get("enabled"), bool)
            for v in values
        )
    )


def environment_variables(data: dict[str, Any]) -> dict[str, str]:
    """Enabled variables of a Postman environment export.

    Raises:
        PostmanError: If ``data`` is not an environment export.
    """
    if not is_postman_environment(data):
        raise PostmanError("Not a Postman environment export")
    return {v["key"]: v["value"] for v in data["values"] if v["enabled"]}


def replace_variables(value: str, environment: dict[str, str] | None = None) -> str:
    """Replace ``{{variable}}`` placeholders.

    Variables whose name contains ``id`` become path parameters
    (``:userid``); others take the environment value, then a default chosen
    by name.
    """
    env = environment or {}

    def substitute(match: re.Match) -> str:
        variable = match.group(1)
        if "id" in variable or "Id" in variable:
            return f":{variable.lower()}"

        if env.get(variable):
            return env[variable]

        normalized = variable.lower()
        for key, default in DEFAULT_VARIABLE_VALUES.items():
            if key.lower() in normalized:
                return default
        return FALLBACK_VARIABLE_VALUE

    return VARIABLE_PATTERN.sub(substitute, value)


def parse_collection(
    data: dict[str, Any], environment: dict[str, str] | None = None
) -> EndpointCollection:
    """Convert a Postman collection into an endpoint collection.

    Folders are flattened. Each request uses its first 2xx example
    response, or a default ``200`` JSON body when it has none.

    Raises:
        PostmanError: If ``data`` is not a Postman collection.
    """
    if not is_postman_collection(data):
        raise PostmanError("Not a Postman collection (missing info.schema or item)")

    endpoints: list[Endpoint] = []

    def process_item(item: dict[str, Any]):
        if "item" in item:
            for child in item.get("item") or []:
                process_item(child)
            return

        request = item.get("request")
        if not isinstance(request, dict):
            logger.debug(f"Skipping item without request: {item.get('name')}")
            return

        endpoints.append(_convert_request(item, request, environment))

    for item in data["item"]:
        process_item(item)

    info = data["info"]
    description = info.get("description") or ""
    if isinstance(description, dict):
        description = description.get("content", "")

    logger.info(
        f"Imported {len(endpoints)} endpoints from Postman collection {info['name']}"
    )
    return EndpointCollection(
        name=info["name"], description=description, endpoints=endpoints
    )


def _convert_request(
    item: dict[str, Any], request: dict[str, Any], environment: dict[str, str] | None
) -> Endpoint:
    success = next(
        (
            r
            for r in item.get("response") or []
            if isinstance(r.get("code"), int) and 200 <= r["code"] < 300
        ),
        None,
    )

    if success is not None:
        response = EndpointResponse(
            status=success["code"],
            body=success.get("body") or DEFAULT_RESPONSE_BODY,
            content_type=_content_type(success.get("header")),
        )
    else:
        response = EndpointResponse(body=DEFAULT_RESPONSE_BODY)

    headers = [
        Header(
            key=h.get("key", ""),
            value=replace_variables(h.get("value", ""), environment),
        )
        for h in request.get("header") or []
        if not h.get("disabled")
    ]

    endpoint_request = None
    body = request.get("body") or {}
    if body.get("mode") == "raw" and body.get("raw"):
        endpoint_request = EndpointRequest(body=body["raw"])

    path = replace_variables(_request_path(request.get("url")), environment)
    return Endpoint(
        path=_normalize_path(path),
        method=request.get("method", "GET"),
        description=item.get("name", ""),
        headers=headers,
        response=response,
        request=endpoint_request,
    )


def _request_path(url: Any) -> str:
    """Path of a Postman url, which may be a string or a structured object."""
    if isinstance(url, dict):
        if url.get("path"):
            return "/" + "/".join(str(segment) for segment in url["path"])
        url = url.get("raw", "")

    if not isinstance(url, str) or not url:
        return "/"

    path = urlparse(url).path if "://" in url else url
    if not path.startswith("/"):
        path = "/" + path
    return path


def _normalize_path(path: str) -> str:
    return re.sub(r"/{2,}", "/", path) or "/"


def _content_type(headers: Any) -> str:
    for header in headers or []:
        if str(header.get("key", "")).lower() == "content-type":
            return header.get("value") or "application/json"
    return "application/json"
