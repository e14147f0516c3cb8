"""
=============================================================================
ACCEPT-LANGUAGE PARSING
=============================================================================

Turns an Accept-Language header into an ordered list of language tags.

    Accept-Language: fr-CH, fr;q=0.9, en;q=0.8, de;q=0.7, *;q=0.5
                     ─┬───  ──┬─────  ───┬────  ───┬────  ───┬───
                      │       │          │         │         └── wildcard (dropped)
                      │       └──────────┴─────────┴──────────── q = preference weight
                      └── no q parameter means q=1

    Result: ["fr-CH", "fr", "en", "de"]

Rules applied:

    - entries are sorted by q, highest first
    - entries with equal q keep their header order (stable sort)
    - q=0 means "not acceptable" and the entry is dropped
    - an unreadable q value drops the entry
    - the "*" wildcard is dropped; it names no file suffix
    - anything that is not a language tag ("en", "zh-Hant-TW") is
      dropped, so a tag can never carry "/" or "." into a file path

=============================================================================
"""

import re
from typing import List, Optional, Tuple


# RFC 5646 shape: alphanumeric subtags of 1-8 characters joined by "-".
_LANGUAGE_TAG = re.compile(r"[A-Za-z]{1,8}(-[A-Za-z0-9]{1,8})*")


def parse_accept_language(value: Optional[str]) -> List[str]:
    """
    Parse an Accept-Language header value.

    Args:
        value: Raw header value, or None when the header is absent.

    Returns:
        Language tags in preference order (may be empty).

    Example:
        >>> parse_accept_language("fr;q=0.5, de, en;q=0")
        ['de', 'fr']
    """
    if not value:
        return []

    weighted: List[Tuple[float, str]] = []
    for item in value.split(","):
        tag, *params = [part.strip() for part in item.split(";")]
        if not _LANGUAGE_TAG.fullmatch(tag):
            continue

        quality = _quality(params)
        if quality is None or quality <= 0.0:
            continue
        weighted.append((quality, tag))

    weighted.sort(key=lambda entry: entry[0], reverse=True)
    return [tag for _, tag in weighted]


def _quality(params: List[str]) -> Optional[float]:
    """Read the q parameter (default 1.0); None if it is malformed."""
    for param in params:
        name, _, raw = param.partition("=")
        if name.strip().lower() != "q":
            continue
        try:
            quality = float(raw.strip())
        except ValueError:
            return None
        if not 0.0 <= quality <= 1.0:
            return None
        return quality
    return 1.0
