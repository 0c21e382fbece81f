"""Locate version tokens in version-index responses and build files."""

import logging
import re
from pathlib import Path
from typing import Optional, Pattern, Union

from ..errors import ParseError, VersionNotFoundError
from ..utils.async_http import AsyncHTTPClient

logger = logging.getLogger(__name__)

# go1.22.5, 1.22.5, golang:1.22 -> the dotted numeric part with an optional go prefix
GO_VERSION_PATTERN = re.compile(r"(?:go)?\d+(?:\.\d+)+(?:(?:rc|beta)\d+)?")


def extract_version(text: str, key: Optional[str] = None,
                    pattern: Optional[Union[str, Pattern]] = None) -> str:
    """Return the first version token in ``text``.

    Without ``pattern`` the first whitespace-delimited token of the first
    candidate line is returned as-is. With ``pattern`` the first token that
    contains a match yields the matched substring. ``key`` restricts the
    candidate lines to those containing it.
    """
    lines = [line.strip() for line in (text or "").strip().splitlines()]
    lines = [line for line in lines if line]
    if not lines:
        raise VersionNotFoundError("no version found: empty input")

    if key:
        lines = [line for line in lines if key in line]
        if not lines:
            raise VersionNotFoundError(f"no version found: no line contains {key!r}")

    if pattern is None:
        return lines[0].split()[0]

    regex = re.compile(pattern) if isinstance(pattern, str) else pattern
    for line in lines:
        for token in line.split():
            match = regex.search(token)
            if match:
                return match.group(0)

    raise VersionNotFoundError("no version found matching the expected format")


async def fetch_latest_version(http: AsyncHTTPClient, version_url: str) -> str:
    """Get the latest released version from the version index."""
    body = await http.get_text(version_url, "latest Go version")
    version = extract_version(body)
    logger.debug(f"Latest version from {version_url}: {version}")
    return version


def read_pinned_version(path: Path, key: Optional[str] = None) -> str:
    """Get the version currently pinned in a build file."""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            text = f.read()
    except OSError as e:
        raise ParseError(f"failed to read {path}: {e}") from e
    # comments such as "# syntax=docker/dockerfile:1.4" never hold the pin
    text = "\n".join(line for line in text.splitlines() if not line.lstrip().startswith("#"))
    return extract_version(text, key=key, pattern=GO_VERSION_PATTERN)
