"""Semantic comparison of Go version strings."""

import re
from typing import Tuple

_LEADING_DIGITS = re.compile(r"\d+")


def version_key(version: str) -> Tuple[int, ...]:
    """Split a version into integer components.

    ``go1.18beta1`` -> ``(1, 18)``: each component contributes its leading
    digits, and a component without any counts as 0.
    """
    version = version.strip()
    for prefix in ("go", "v"):
        if version.startswith(prefix):
            version = version[len(prefix):]
            break

    parts = []
    for part in version.split("."):
        match = _LEADING_DIGITS.match(part)
        parts.append(int(match.group(0)) if match else 0)
    return tuple(parts)


def is_newer(candidate: str, current: str) -> bool:
    """Return True if ``candidate`` is strictly newer than ``current``."""
    a, b = version_key(candidate), version_key(current)
    for x, y in zip(a, b):
        if x != y:
            return x > y
    return len(a) > len(b)
