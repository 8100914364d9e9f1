"""Annotation key naming rule.

A key is an optional DNS-subdomain prefix terminated by ``/``, followed by
a mandatory name segment:

- Prefix labels: lowercase alphanumerics, inner hyphens allowed, dot-separated.
- Name: alphanumeric at both ends; ``_``, ``.`` and ``-`` allowed inside.

Only the shape is checked. The conventional 253-char prefix and 63-char
name limits are left to whoever owns the resource schema.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

_DNS_LABEL = r"[a-z0-9]([-a-z0-9]*[a-z0-9])?"
_NAME = r"[A-Za-z0-9]([A-Za-z0-9_.-]*[A-Za-z0-9])?"

ANNOTATION_NAME_PATTERN: re.Pattern[str] = re.compile(
    rf"^({_DNS_LABEL}(\.{_DNS_LABEL})*/)?{_NAME}$"
)


def is_valid_annotation_name(name: str) -> bool:
    """Check whether *name* is a well-formed annotation key.

    Examples:
        >>> is_valid_annotation_name("example.com/my-annotation")
        True
        >>> is_valid_annotation_name("example.com/")
        False
    """
    return ANNOTATION_NAME_PATTERN.fullmatch(name) is not None


def invalid_annotation_names(names: Iterable[str]) -> list[str]:
    """Return every malformed name in *names*, sorted, each listed once."""
    return sorted({name for name in names if not is_valid_annotation_name(name)})
