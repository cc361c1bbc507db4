"""Loading endpoint collections.

A collection can come from a local file or a URL, in the tool's own export
format, as a bare list of endpoints, or as a Postman collection.
"""

import json
from pathlib import Path
from typing import Any
from urllib.parse import urlparse

import requests

from .logging_config import get_logger
from .models import Endpoint, EndpointCollection
from .postman import (
    environment_variables,
    is_postman_collection,
    is_postman_environment,
    parse_collection,
)

logger = get_logger(__name__)


class JSONLoaderError(Exception):
    """Raised when an input cannot be read as an endpoint collection."""

    pass


def read_json_file(file_path: str | Path) -> Any:
    """Parse a JSON document from disk.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        JSONLoaderError: If the file cannot be read or is not JSON.
    """
    file_path = Path(file_path)
    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {file_path}")

    try:
        with file_path.open("r", encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise JSONLoaderError(f"Invalid JSON in file {file_path}: {e}") from e
    except OSError as e:
        raise JSONLoaderError(f"Error reading file {file_path}: {e}") from e


def fetch_json(url: str, timeout: int = 30) -> Any:
    """Download a JSON document, typically a mock server's collection export.

    Raises:
        JSONLoaderError: If the URL is invalid, the request fails, or the
            body is not JSON.
    """
    parsed_url = urlparse(url)
    if not all([parsed_url.scheme, parsed_url.netloc]):
        raise JSONLoaderError(f"Invalid URL: {url}")

    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
        return response.json()
    except requests.exceptions.Timeout as e:
        raise JSONLoaderError(f"Request timeout for URL: {url}") from e
    except requests.exceptions.HTTPError as e:
        raise JSONLoaderError(
            f"HTTP error {e.response.status_code} for URL: {url}"
        ) from e
    except requests.exceptions.RequestException as e:
        raise JSONLoaderError(f"Request failed for URL {url}: {e}") from e
    except json.JSONDecodeError as e:
        raise JSONLoaderError(f"Response from {url} is not JSON: {e}") from e


def to_collection(
    data: Any, environment: dict[str, str] | None = None
) -> EndpointCollection:
    """Interpret parsed JSON as an endpoint collection.

    Accepts a stored collection (``{"name", "endpoints"}``), a bare list of
    endpoints, a single endpoint, or a Postman collection export.

    Raises:
        JSONLoaderError: If the data matches none of these shapes.
    """
    try:
        if is_postman_collection(data):
            logger.debug("Detected Postman collection")
            return parse_collection(data, environment)

        if isinstance(data, list):
            return EndpointCollection(
                name="Imported", endpoints=[Endpoint.from_dict(e) for e in data]
            )

        if isinstance(data, dict) and isinstance(data.get("endpoints"), list):
            return EndpointCollection.from_dict(data)

        if isinstance(data, dict) and "path" in data:
            return EndpointCollection(
                name="Imported", endpoints=[Endpoint.from_dict(data)]
            )

    except (ValueError, TypeError, AttributeError) as e:
        raise JSONLoaderError(f"Malformed endpoint data: {e}") from e

    raise JSONLoaderError(
        "Unrecognized input: expected an endpoint collection, a list of endpoints "
        "or a Postman collection"
    )


def load_environment(file_path: str | Path) -> dict[str, str]:
    """Load variables from a Postman environment export.

    Raises:
        JSONLoaderError: If the file is not an environment export.
    """
    data = read_json_file(file_path)
    if not is_postman_environment(data):
        raise JSONLoaderError(f"Not a Postman environment: {file_path}")
    return environment_variables(data)


def load_collection(
    file_path: str | Path | None = None,
    url: str | None = None,
    environment_file: str | Path | None = None,
    timeout: int = 30,
) -> tuple[str, EndpointCollection]:
    """Load an endpoint collection from exactly one of a file or a URL.

    Args:
        file_path: Local collection file.
        url: Address serving a collection as JSON.
        environment_file: Postman environment used to fill ``{{variables}}``.
        timeout: Request timeout in seconds (URLs only).

    Returns:
        Tuple of (source description, collection).

    Raises:
        FileNotFoundError: If ``file_path`` doesn't exist.
        JSONLoaderError: If the source is missing, ambiguous or unreadable.
    """
    if bool(file_path) == bool(url):
        raise JSONLoaderError("Provide exactly one of a file path or a URL")

    if file_path:
        source, data = f"📄 {file_path}", read_json_file(file_path)
    else:
        source, data = f"🌐 {url}", fetch_json(url, timeout)

    environment = load_environment(environment_file) if environment_file else None
    collection = to_collection(data, environment)
    logger.info(f"Loaded {len(collection.endpoints)} endpoints from {source}")
    return source, collection
