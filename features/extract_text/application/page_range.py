"""
Parsing and validation of the min/max page query parameters.
"""

from __future__ import annotations

import re
from typing import Optional

from features.extract_text.domain.entities import (
    DEFAULT_MAX_PAGE,
    DEFAULT_MIN_PAGE,
    PageRange,
)
from features.extract_text.domain.errors import InvalidPageRangeError


INVALID_MAX_PAGE = "Invalid max page value"
INVALID_MIN_PAGE = "Invalid min page value"

_INTEGER_RE = re.compile(r"[+-]?\d+")


def _parse_int(raw: Optional[str], default: int) -> Optional[int]:
    """Return the integer value of ``raw``, ``default`` if absent, None if not an integer."""
    if raw is None:
        return default
    value = raw.strip()
    if not value:
        return default
    if not _INTEGER_RE.fullmatch(value):
        return None
    return int(value)


def parse_page_range(raw_min: Optional[str], raw_max: Optional[str]) -> PageRange:
    """
    Build a PageRange from raw query values.

    max is checked first, so a request with both values broken reports the
    max error.

    Raises:
        InvalidPageRangeError: "Invalid max page value" / "Invalid min page value"
    """
    max_page = _parse_int(raw_max, DEFAULT_MAX_PAGE)
    if max_page is None or max_page < 1:
        raise InvalidPageRangeError(INVALID_MAX_PAGE)

    min_page = _parse_int(raw_min, DEFAULT_MIN_PAGE)
    if min_page is None or min_page < 1 or min_page > max_page:
        raise InvalidPageRangeError(INVALID_MIN_PAGE)

    return PageRange(min_page=min_page, max_page=max_page)
