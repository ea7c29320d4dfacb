"""Utility functions for loading type-model JSON.

The type model is produced by an external parser and handed over as JSON,
either as a local file or served over HTTP.
"""

import json
from pathlib import Path
from typing import Any
from urllib.parse import urlparse

import requests

from .logging_config import get_logger

logger = get_logger(__name__)


class ModelLoaderError(Exception):
    """Raised when the type-model JSON cannot be loaded."""

    pass


def load_json_from_file(file_path: str | Path) -> tuple[str, Any]:
    """Load JSON data from a local file.

    Args:
        file_path: Path to the JSON file.

    Returns:
        Tuple of (source description, parsed JSON data).

    Raises:
        ModelLoaderError: If the file is missing, unreadable or not JSON.
    """
    file_path = Path(file_path)
    logger.debug("Loading model from file: %s", file_path)

    if not file_path.exists():
        logger.error("File not found: %s", file_path)
        raise ModelLoaderError(f"File not found: {file_path}")

    try:
        with file_path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        logger.error("Invalid JSON in file %s: %s", file_path, e)
        raise ModelLoaderError(f"Invalid JSON in file {file_path}: {e}") from e
    except OSError as e:
        logger.error("Error reading file %s: %s", file_path, e)
        raise ModelLoaderError(f"Error reading file {file_path}: {e}") from e

    logger.info("Loaded model from %s", file_path)
    return str(file_path), data


def load_json_from_url(url: str, timeout: int = 30) -> tuple[str, Any]:
    """Load JSON data from a URL.

    Args:
        url: URL to fetch JSON from.
        timeout: Request timeout in seconds.

    Returns:
        Tuple of (source description, parsed JSON data).

    Raises:
        ModelLoaderError: If the URL is invalid, the request fails, or the
            response isn't valid JSON.
    """
    logger.debug("Loading model from URL: %s", url)

    parsed_url = urlparse(url)
    if not all([parsed_url.scheme, parsed_url.netloc]):
        logger.error("Invalid URL format: %s", url)
        raise ModelLoaderError(f"Invalid URL: {url}")

    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
        data = response.json()
    except requests.exceptions.Timeout as e:
        logger.error("Request timeout for URL: %s", url)
        raise ModelLoaderError(f"Request timeout for URL: {url}") from e
    except requests.exceptions.HTTPError as e:
        logger.error("HTTP error %s for URL: %s", e.response.status_code, url)
        raise ModelLoaderError(
            f"HTTP error {e.response.status_code} for URL: {url}"
        ) from e
    except requests.exceptions.RequestException as e:
        logger.error("Request error for URL %s: %s", url, e)
        raise ModelLoaderError(f"Request error for URL {url}: {e}") from e
    except ValueError as e:
        logger.error("Invalid JSON response from URL %s: %s", url, e)
        raise ModelLoaderError(f"Invalid JSON response from URL {url}: {e}") from e

    logger.info("Loaded model from %s", url)
    return url, data


def load_json(
    file_path: str | Path | None = None,
    url: str | None = None,
    timeout: int = 30,
) -> tuple[str, Any]:
    """Load JSON data from either a file or URL.

    Exactly one of ``file_path`` and ``url`` must be given.
    """
    if not file_path and not url:
        raise ModelLoaderError("Either file_path or url must be provided")

    if file_path and url:
        raise ModelLoaderError("Cannot specify both file_path and url")

    if file_path:
        return load_json_from_file(file_path)
    return load_json_from_url(url, timeout)
