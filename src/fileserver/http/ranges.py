"""
=============================================================================
BYTE RANGES (RFC 7233)
=============================================================================

Parses a Range header against a known resource size.

=============================================================================
RANGE FORMS
=============================================================================

Only single byte ranges are served. For a 100 byte file:

    ┌────────────────────┬──────────────────────┬─────────────────────────┐
    │ Range header       │ Meaning              │ (skip, length)          │
    ├────────────────────┼──────────────────────┼─────────────────────────┤
    │ bytes=0-9          │ first ten bytes      │ (0, 10)                 │
    │ bytes=90-          │ byte 90 to the end   │ (90, 10)                │
    │ bytes=-10          │ last ten bytes       │ (90, 10)                │
    │ bytes=-500         │ last 500 (clamped)   │ (0, 100)                │
    ├────────────────────┼──────────────────────┼─────────────────────────┤
    │ bytes=100-         │ starts past the end  │ None → 416              │
    │ bytes=5-2          │ start after end      │ None → 416              │
    │ bytes=0-1,5-6      │ multiple ranges      │ None → 416              │
    │ items=0-1          │ unknown unit         │ None → 416              │
    │ bytes=-0           │ empty suffix         │ None → 416              │
    └────────────────────┴──────────────────────┴─────────────────────────┘

A zero-length file cannot satisfy any range.

=============================================================================
"""

import re
from dataclasses import dataclass
from typing import Optional, Tuple, Union


# One range: optional first-byte-pos, dash, optional last-byte-pos.
# ASCII digits only; signs, spaces and exponents are rejected.
_BYTE_RANGE = re.compile(r"^([0-9]*)-([0-9]*)$")


@dataclass(frozen=True)
class Entire:
    """The whole resource."""

    size: int

    @property
    def skip(self) -> int:
        return 0

    @property
    def length(self) -> int:
        return self.size


@dataclass(frozen=True)
class Part:
    """A slice of the resource: `length` bytes starting at offset `skip`."""

    skip: int
    length: int

    def __post_init__(self):
        if self.skip < 0 or self.length < 0:
            raise ValueError(f"Invalid part: skip={self.skip}, length={self.length}")


RangeSpec = Union[Entire, Part]


def parse_range(raw: Optional[str], size: int) -> Optional[Tuple[int, int]]:
    """
    Parse a Range header value against a resource size.

    Never raises: anything that cannot be served is reported as None.

    Args:
        raw: Raw Range header value (e.g. "bytes=0-499").
        size: Resource size in bytes.

    Returns:
        (skip, length) with skip + length <= size, or None.
    """
    if raw is None or size <= 0:
        return None

    unit, sep, spec = raw.strip().partition("=")
    if not sep or unit.strip().lower() != "bytes":
        return None

    spec = spec.strip()
    if "," in spec:
        return None

    match = _BYTE_RANGE.match(spec)
    if match is None:
        return None
    first, last = match.groups()

    if first and last:
        start, end = int(first), int(last)
        if start <= end < size:
            return start, end - start + 1
        return None

    if first:
        start = int(first)
        if start < size:
            return start, size - start
        return None

    if last:
        suffix = int(last)
        if suffix == 0:
            return None
        skip = max(0, size - suffix)
        return skip, size - skip

    # "bytes=-"
    return None


def content_range(spec: RangeSpec, size: int) -> str:
    """
    Content-Range value for a satisfied range.

    Example:
        >>> content_range(Part(0, 10), 100)
        'bytes 0-9/100'
    """
    return f"bytes {spec.skip}-{spec.skip + spec.length - 1}/{size}"


def unsatisfied_range(size: int) -> str:
    """Content-Range value sent with 416: 'bytes */<size>'."""
    return f"bytes */{size}"
