"""Utility functions for loading schema text and writing generated output.

This module provides functions for loading GraphQL SDL from files and URLs
with proper error handling.
"""

from pathlib import Path
from urllib.parse import urlparse

import requests

from .logging_config import get_logger

logger = get_logger(__name__)

SCHEMA_SUFFIXES = {".graphql", ".graphqls", ".gql"}


class SchemaLoaderError(Exception):
    """Custom exception for schema loading and output errors."""

    pass


def is_url(source: str) -> bool:
    """Check whether an input argument is an http(s) URL."""
    parsed = urlparse(source)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def load_schema_from_file(file_path: str | Path) -> str:
    """Load schema text from a local file.

    Args:
        file_path: Path to the schema file, relative paths resolve against cwd.

    Returns:
        Schema text.

    Raises:
        SchemaLoaderError: If the file is missing or cannot be read.
    """
    resolved = Path(file_path).resolve()
    logger.debug("Attempting to load schema from file: %s", resolved)

    if not resolved.exists():
        logger.error("Input file not found: %s", resolved)
        raise SchemaLoaderError(f"Input file not found: {resolved}")

    if resolved.suffix.lower() not in SCHEMA_SUFFIXES:
        # Don't raise, just warn - might still be valid SDL
        logger.warning("File does not have a GraphQL extension: %s", resolved)

    try:
        text = resolved.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Error reading file %s: %s", resolved, e, exc_info=True)
        raise SchemaLoaderError(f"Error reading file {resolved}: {e}") from e

    logger.info("Loaded schema from %s", resolved)
    return text


def load_schema_from_url(url: str, timeout: int = 30) -> str:
    """Load schema text from a URL.

    Args:
        url: URL serving GraphQL SDL.
        timeout: Request timeout in seconds.

    Returns:
        Schema text.

    Raises:
        SchemaLoaderError: If the URL is invalid or the request fails.
    """
    logger.debug("Attempting to load schema from URL: %s", url)

    if not is_url(url):
        logger.error("Invalid URL format: %s", url)
        raise SchemaLoaderError(f"Invalid URL: {url}")

    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.exceptions.Timeout as e:
        logger.error("Request timeout for URL: %s", url)
        raise SchemaLoaderError(f"Request timeout for URL: {url}") from e
    except requests.exceptions.ConnectionError as e:
        logger.error("Connection error for URL %s: %s", url, e)
        raise SchemaLoaderError(f"Connection error for URL: {url}") from e
    except requests.exceptions.HTTPError as e:
        logger.error("HTTP error %s for URL: %s", e.response.status_code, url)
        raise SchemaLoaderError(
            f"HTTP error {e.response.status_code} for URL: {url}"
        ) from e
    except requests.exceptions.RequestException as e:
        logger.error("Request error for URL %s: %s", url, e, exc_info=True)
        raise SchemaLoaderError(f"Request error for URL {url}: {e}") from e

    logger.info("Loaded schema from %s", url)
    return response.text


def load_schema(source: str | Path, timeout: int = 30) -> str:
    """Load schema text from either a file path or a URL.

    Args:
        source: File path or http(s) URL.
        timeout: Request timeout in seconds (only used for URLs).

    Returns:
        Schema text.
    """
    if isinstance(source, str) and is_url(source):
        return load_schema_from_url(source, timeout)
    return load_schema_from_file(source)


def write_output(output_path: str | Path, code: str) -> Path:
    """Write generated code, creating parent directories as needed.

    Args:
        output_path: Destination file, relative paths resolve against cwd.
        code: Generated source.

    Returns:
        Resolved output path.

    Raises:
        SchemaLoaderError: If the file cannot be written.
    """
    resolved = Path(output_path).resolve()
    try:
        resolved.parent.mkdir(parents=True, exist_ok=True)
        resolved.write_text(code, encoding="utf-8")
    except OSError as e:
        logger.error("Failed to write %s: %s", resolved, e)
        raise SchemaLoaderError(f"Failed to write output {resolved}: {e}") from e

    logger.info("Wrote %d characters to %s", len(code), resolved)
    return resolved
