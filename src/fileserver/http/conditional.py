"""
=============================================================================
CONDITIONAL REQUESTS (RFC 7232 + RFC 7233 If-Range)
=============================================================================

Decides between 200, 206, 304, 412 and 416 for a resolved file.

=============================================================================
PRECEDENCE
=============================================================================

Rules are tried top to bottom. A rule either decides or steps aside;
the last rule always decides.

    ┌─────────────────────────────────────────────────────────────────────┐
    │                    CONDITIONAL RULE TABLE (GET)                     │
    ├─────────────────────────────────────────────────────────────────────┤
    │                                                                      │
    │  1. If-Modified-Since                                               │
    │       == mtime  → 304 Not Modified                                  │
    │       != mtime  → jump to 4                                         │
    │                                                                      │
    │  2. If-Unmodified-Since                                             │
    │       == mtime  → jump to 4                                         │
    │       != mtime  → 412 Precondition Failed                           │
    │                                                                      │
    │  3. If-Range (only together with Range)                             │
    │       == mtime  → parse Range: 206 or 416                           │
    │       != mtime  → 200 OK, range ignored                             │
    │                                                                      │
    │  4. Unconditional                                                   │
    │       Range     → parse Range: 206 or 416                           │
    │       no Range  → 200 OK                                            │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

A header that is missing or whose date cannot be parsed makes its rule
step aside. Dates are compared for exact equality at one-second
resolution.

HEAD only looks at If-Modified-Since: 304 on a match, 200 otherwise.

=============================================================================
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional, Tuple, Union

from .dates import to_http_precision
from .ranges import parse_range
from .request import FileRequest
from .status_codes import HTTPStatus


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Full:
    """No partial content; the response carries `status`."""

    status: HTTPStatus


@dataclass(frozen=True)
class Partial:
    """206 Partial Content for `length` bytes starting at `skip`."""

    skip: int
    length: int

    @property
    def status(self) -> HTTPStatus:
        return HTTPStatus.PARTIAL_CONTENT


ConditionalOutcome = Union[Full, Partial]

Rule = Callable[[FileRequest, int, datetime], Optional[ConditionalOutcome]]


# ─────────────────────────────────────────────────────────────────────────
# RULES
# ─────────────────────────────────────────────────────────────────────────

def _range_outcome(raw: str, size: int) -> ConditionalOutcome:
    parsed = parse_range(raw, size)
    if parsed is None:
        return Full(HTTPStatus.RANGE_NOT_SATISFIABLE)
    skip, length = parsed
    return Partial(skip, length)


def unconditional(request: FileRequest, size: int, modified_at: datetime) -> ConditionalOutcome:
    """Rule 4: serve the Range if there is one, the whole file otherwise."""
    raw = request.range
    if raw is None:
        return Full(HTTPStatus.OK)
    return _range_outcome(raw, size)


def if_modified_since(request: FileRequest, size: int, modified_at: datetime) -> Optional[ConditionalOutcome]:
    """Rule 1."""
    date = request.if_modified_since
    if date is None:
        return None
    if date != modified_at:
        return unconditional(request, size, modified_at)
    return Full(HTTPStatus.NOT_MODIFIED)


def if_unmodified_since(request: FileRequest, size: int, modified_at: datetime) -> Optional[ConditionalOutcome]:
    """Rule 2."""
    date = request.if_unmodified_since
    if date is None:
        return None
    if date == modified_at:
        return unconditional(request, size, modified_at)
    return Full(HTTPStatus.PRECONDITION_FAILED)


def if_range(request: FileRequest, size: int, modified_at: datetime) -> Optional[ConditionalOutcome]:
    """Rule 3. Steps aside unless both If-Range and Range are present."""
    date = request.if_range
    raw = request.range
    if date is None or raw is None:
        return None
    if date == modified_at:
        return _range_outcome(raw, size)
    return Full(HTTPStatus.OK)


CONDITIONAL_RULES: Tuple[Rule, ...] = (
    if_modified_since,
    if_unmodified_since,
    if_range,
)


# ─────────────────────────────────────────────────────────────────────────
# ENTRY POINTS
# ─────────────────────────────────────────────────────────────────────────

def evaluate(request: FileRequest, size: int, modified_at: datetime) -> ConditionalOutcome:
    """
    Evaluate conditional and range headers for a GET request.

    Args:
        request: The request carrying the headers.
        size: Resource size in bytes.
        modified_at: Resource modification time.

    Returns:
        Full(status) or Partial(skip, length). Never None.
    """
    modified_at = to_http_precision(modified_at)
    for rule in CONDITIONAL_RULES:
        outcome = rule(request, size, modified_at)
        if outcome is not None:
            logger.debug(f"{rule.__name__} decided {outcome}")
            return outcome
    return unconditional(request, size, modified_at)


def evaluate_head(request: FileRequest, size: int, modified_at: datetime) -> Full:
    """
    Evaluate a HEAD request: only If-Modified-Since is honoured.

    Returns:
        Full(304) when If-Modified-Since matches, Full(200) otherwise.
    """
    if request.if_modified_since == to_http_precision(modified_at):
        return Full(HTTPStatus.NOT_MODIFIED)
    return Full(HTTPStatus.OK)
